""" Module for reporting exceptions that escape an entry point. """

from traceback import format_exception
from types import TracebackType
from typing import Any, Callable, Type


class ExceptionLogger:
    """ Sends the formatted traceback of an exception to a string callable.
        Can be installed as sys.excepthook since the call signature is the same. """

    def __init__(self, log:Callable[[str], Any], *, max_frames=20) -> None:
        self._log = log
        self._max_frames = max_frames  # Deepest traceback to format.

    def __call__(self, exc_type:Type[BaseException], exc:BaseException, tb:TracebackType) -> bool:
        """ Log the traceback. Returns False: logging is not handling, the exception still ends the program. """
        text = "".join(format_exception(exc_type, exc, tb, limit=self._max_frames))
        self._log(text.rstrip("\n"))
        return False

    def log_current(self, exc:BaseException) -> None:
        """ Log an exception that was caught in an except block. """
        self(type(exc), exc, exc.__traceback__)
