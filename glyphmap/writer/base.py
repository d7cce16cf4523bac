""" Base classes and text helpers shared by the document writers. """

import re
from typing import Any, Callable

from glyphmap.automaton import Automaton, build
from glyphmap.layout import LayoutWriter

LogCallable = Callable[[str], Any]


def split_words(s:str) -> list:
    """ Split a name into lowercase words at anything that isn't a letter or digit. """
    return [w.lower() for w in re.findall(r"[^\W_]+", s)]


def snake_case(s:str) -> str:
    return "_".join(split_words(s))


def kebab_case(s:str) -> str:
    return "-".join(split_words(s))


def escape_quotes(s:str) -> str:
    """ Escape backslashes and double quotes for a double-quoted string in C-like syntax. """
    return s.replace('\\', '\\\\').replace('"', '\\"')


class LayoutDocumentWriter:
    """ Abstract writer that renders a whole layout as one text document. Output depends only on the input. """

    def write(self, layout:LayoutWriter) -> str:
        raise NotImplementedError


class AutomatonDocumentWriter(LayoutDocumentWriter):
    """ Abstract writer for formats that render the automaton built from a layout rather than its rules. """

    def __init__(self, log:LogCallable=None) -> None:
        self._log = log  # Receives conflict diagnostics from the automaton build.

    def write(self, layout:LayoutWriter) -> str:
        automaton, _ = build(layout.sections, self._log)
        return self.write_automaton(automaton)

    def write_automaton(self, automaton:Automaton) -> str:
        raise NotImplementedError
