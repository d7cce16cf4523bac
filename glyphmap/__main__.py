#!/usr/bin/env python3

""" Master console script and primary entry point for the glyphmap program. """

import sys

from glyphmap.util.entrypoints import EntryPoint, EntryPointSelector

ENTRY_POINTS = {
    "write":    EntryPoint("glyphmap.main_write",    "main", "Write a layout document in the chosen --format (default)."),
    "query":    EntryPoint("glyphmap.main_query",    "main", "Show what typed key sequences produce."),
    "sections": EntryPoint("glyphmap.main_sections", "main", "List layout sections with their state id ranges."),
}


def main() -> int:
    loader = EntryPointSelector(ENTRY_POINTS, default_mode="write")
    return loader.main()


if __name__ == '__main__':
    sys.exit(main())
