""" Package for the document writers. Each one turns a layout (or the automaton built from it) into a complete,
    self-contained text document for some downstream consumer. None of them keep state between documents. """

from enum import Enum
from typing import List

from .base import AutomatonDocumentWriter, LayoutDocumentWriter, LogCallable
from .emacs import EmacsWriter
from .graphviz import CONFIG_SECTION, GraphStyle, GraphvizWriter
from .listing import ListWriter
from .table import TableWriter
from .vimfn import VimWriter


class FormatNotFoundError(LookupError):
    """ Raised when a document format is requested by a name no writer has. """

    def __init__(self, name:str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'No output format named "{self.name}". Available formats: {", ".join(Format.names())}'


class Format(Enum):
    """ Output formats by command-line name. """

    LIST = "list"
    EMACS = "emacs"
    VIM = "vim"
    GRAPHVIZ = "graphviz"
    TABLE = "table"

    @classmethod
    def names(cls) -> List[str]:
        return [fmt.value for fmt in cls]

    @classmethod
    def from_name(cls, name:str) -> "Format":
        """ Look up a format by name, ignoring case. """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise FormatNotFoundError(name) from None

    def writer(self, log:LogCallable=None, style:GraphStyle=None) -> LayoutDocumentWriter:
        """ Make the writer for this format. Only formats drawn from the automaton use <log> and <style>. """
        if self is Format.LIST:
            return ListWriter()
        if self is Format.EMACS:
            return EmacsWriter()
        if self is Format.VIM:
            return VimWriter()
        if self is Format.GRAPHVIZ:
            return GraphvizWriter(style, log)
        return TableWriter(log)
