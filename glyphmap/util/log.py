""" Module for writing diagnostic lines to a set of already-open text streams. """

import sys
from threading import Lock
from time import strftime
from typing import TextIO


class StreamLogger:
    """ Writes each message as one line to every stream it holds. Safe to call from several threads. """

    def __init__(self, *streams:TextIO, time_fmt:str=None, repeat_mark:str=None) -> None:
        self._streams = [*streams]
        self._time_fmt = time_fmt        # strftime prefix for each line, or None for no timestamp.
        self._repeat_mark = repeat_mark  # Written instead of a message equal to the one before it. None disables.
        self._previous = None
        self._lock = Lock()

    def add_stream(self, stream:TextIO) -> None:
        with self._lock:
            self._streams.append(stream)

    def _format(self, message:str) -> str:
        if self._repeat_mark is not None:
            if message == self._previous:
                message = self._repeat_mark
            else:
                self._previous = message
        if self._time_fmt is not None:
            message = strftime(self._time_fmt) + message
        return message + "\n"

    def log(self, message:str) -> None:
        """ Write <message> to all streams and flush each one, so nothing is lost if the program dies. """
        with self._lock:
            line = self._format(message)
            for stream in self._streams:
                try:
                    stream.write(line)
                    stream.flush()
                except OSError:
                    # One closed stream should not silence the rest.
                    continue


def open_logger(*filenames:str, encoding='utf-8', to_stderr=True, **kwargs) -> StreamLogger:
    """ Return a logger appending to each non-empty file name, plus standard error if <to_stderr> is set.
        Standard output is left for generated documents. The files stay open for the life of the program. """
    streams = [open(filename, 'a', encoding=encoding) for filename in filenames if filename]
    if to_stderr:
        streams.append(sys.stderr)
    return StreamLogger(*streams, **kwargs)
