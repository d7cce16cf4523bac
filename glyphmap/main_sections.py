""" Main module for listing the sections of a layout and the states each one added. """

import sys

from glyphmap import Glyphmap, GlyphmapOptions
from glyphmap.glyphmap import USER_ERRORS
from glyphmap.util.cmdline import CmdlineError
from glyphmap.util.exception import ExceptionLogger


def main(argv=None) -> int:
    opts = GlyphmapOptions("List the sections of a keyboard layout with their rule counts and state id ranges.")
    try:
        glyphmap = Glyphmap(opts, argv=argv)
    except CmdlineError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2
    sys.excepthook = ExceptionLogger(glyphmap.logger.log)
    try:
        automaton = glyphmap.automaton
        layout = glyphmap.selected_layout
    except USER_ERRORS as e:
        glyphmap.logger.log(f"Error: {e}")
        return 1
    lines = []
    for i, (name, keymap) in enumerate(layout.sections):
        bounds = automaton.section_bounds(i)
        if bounds:
            span = f"states {bounds.start}-{bounds.stop - 1}"
        else:
            span = "no new states"
        lines.append(f"{name}: {len(keymap)} rules, {span}")
    glyphmap.save("\n".join(lines) + "\n")
    return 0


if __name__ == '__main__':
    sys.exit(main())
