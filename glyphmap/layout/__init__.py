""" Package for keyboard layout producers. Each producer writes metadata and named sections of
    "key sequence -> output" rules into a LayoutWriter; the rest of the program only ever sees that data. """

from enum import Enum
from typing import List

from .base import KeyMap, LayoutMetadata, LayoutWriter, LogCallable, Modifier
from . import greek, latin, russian


class LayoutNotFoundError(LookupError):
    """ Raised when a layout is requested by a name no producer has. """

    def __init__(self, name:str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'No layout named "{self.name}". Available layouts: {", ".join(Layout.names())}'


class Layout(Enum):
    """ Built-in layouts by command-line name. """

    GREEK = "greek"
    LATIN = "latin"
    RUSSIAN = "russian"

    @classmethod
    def names(cls) -> List[str]:
        return [layout.value for layout in cls]

    @classmethod
    def from_name(cls, name:str) -> "Layout":
        """ Look up a layout by name, ignoring case. """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise LayoutNotFoundError(name) from None

    def generate(self, log:LogCallable=None, *, postfix=False) -> LayoutWriter:
        """ Run this layout's producer and return everything it wrote.
            <postfix> only affects layouts where modifier keys may follow the letter. """
        keyboard = LayoutWriter(log)
        if self is Layout.GREEK:
            greek.gen(keyboard)
        elif self is Layout.LATIN:
            latin.gen(keyboard, postfix)
        else:
            russian.gen(keyboard)
        return keyboard
