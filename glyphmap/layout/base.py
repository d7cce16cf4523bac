""" Module for the data that keyboard layout producers hand to the automaton and the writers. """

import sys
from typing import Any, Callable, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from glyphmap.automaton import SectionNotFoundError
from glyphmap.compose import CombiningMark
from glyphmap.util.log import StreamLogger

LogCallable = Callable[[str], Any]


class Modifier(NamedTuple):
    """ A key that changes the letter typed next to it, optionally by adding a combining mark. """

    name: str                            # Human-readable name of the modifier.
    key: str                             # Key symbol typed for it.
    mark: Optional[CombiningMark] = None  # Combining mark it stands for, if any.


class LayoutMetadata(NamedTuple):
    """ Descriptive information about a layout for document headers. """

    language: str = "ERROR: Unknown"
    language_code: str = "???"
    description: str = "ERROR: Unknown"


class KeyMap(Mapping[str, str]):
    """ Rules of one section: key sequence -> output string. Iterates in sorted key order.
        The first output added for a sequence is kept; duplicates are logged and dropped. """

    def __init__(self, log:LogCallable=None) -> None:
        self._log = log or StreamLogger(sys.stderr).log  # Diagnostic channel for duplicate sequences.
        self._rules = {}                                 # Outputs by key sequence.

    def add(self, seq:str, output:str) -> bool:
        """ Add a rule for a non-empty key sequence. Return False if the sequence was already taken. """
        if not seq:
            raise ValueError(f'Key sequence for output "{output}" is empty.')
        if seq in self._rules:
            self._log(f'Duplicated key sequence: "{seq}" for value "{output}" '
                      f'(already mapped to "{self._rules[seq]}").')
            return False
        self._rules[seq] = output
        return True

    def __getitem__(self, seq:str) -> str:
        return self._rules[seq]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f'KeyMap({dict(self.items())!r})'


Section = Tuple[str, KeyMap]


class LayoutWriter:
    """ Collects the metadata and named sections of one layout in the order the producer writes them. """

    def __init__(self, log:LogCallable=None) -> None:
        self._log = log or StreamLogger(sys.stderr).log  # Passed on to every key map made here.
        self.metadata = LayoutMetadata()                 # Replaced by the producer if it has something better.
        self.sections = []                               # List of (name, key map) in production order.

    def set_metadata(self, metadata:LayoutMetadata) -> None:
        self.metadata = metadata

    def new_keymap(self) -> KeyMap:
        """ Make an empty key map that reports duplicates through our log. """
        return KeyMap(self._log)

    def write_section(self, name:str, keymap:KeyMap) -> None:
        self.sections.append((name, keymap))

    def write_sections(self, sections:List[Section]) -> None:
        for name, keymap in sections:
            self.write_section(name, keymap)

    def section_names(self) -> List[str]:
        return [name for name, _ in self.sections]

    def section(self, name:str) -> KeyMap:
        """ Return the key map of the section called <name>. """
        for s_name, keymap in self.sections:
            if s_name == name:
                return keymap
        raise SectionNotFoundError(name, self.section_names())

    def only(self, name:str) -> "LayoutWriter":
        """ Return a copy of this layout restricted to the section called <name>. """
        keymap = self.section(name)
        other = LayoutWriter(self._log)
        other.set_metadata(self.metadata)
        other.write_section(name, keymap)
        return other
