""" Module for choosing a main function by the mode name given as the first command-line argument. """

import sys
from importlib import import_module
from typing import Callable, List, Mapping

MainCallable = Callable[..., int]


def shift_argv() -> str:
    """ Remove the mode argument from sys.argv by joining it onto the script name, and return it.
        Help text then still shows the full command. Returns an empty string if there is no mode to take
        (no arguments, or the first one is an option). """
    if len(sys.argv) < 2 or sys.argv[1].startswith("-"):
        return ""
    script, mode, *rest = sys.argv
    sys.argv = [f"{script} {mode}", *rest]
    return mode


class EntryPoint:
    """ A main function named by module path, imported only when run. """

    def __init__(self, module_name:str, func_name:str, description="Unknown function.") -> None:
        self.module_name = module_name
        self.func_name = func_name
        self.description = description

    def __call__(self, *args, **kwargs) -> int:
        func = getattr(import_module(self.module_name), self.func_name)
        return func(*args, **kwargs)


class EntryPointSelector:
    """ Finds the entry point for a mode string. Any unambiguous prefix of a mode name selects it. """

    def __init__(self, entry_points:Mapping[str, EntryPoint], *, default_mode:str=None) -> None:
        self._entry_points = entry_points
        self._default_mode = default_mode  # Used when the command line has no mode.

    def candidates(self, mode:str) -> List[EntryPoint]:
        """ Return the entry point named <mode> if there is one, otherwise all entry points it is a prefix of. """
        mode = mode or self._default_mode
        if not mode:
            return []
        if mode in self._entry_points:
            return [self._entry_points[mode]]
        return [ep for name, ep in self._entry_points.items() if name.startswith(mode)]

    def _usage_error(self, message:str) -> MainCallable:
        lines = [message, "", "Currently available operations:"]
        lines += [f"{name} - {ep.description}" for name, ep in self._entry_points.items()]
        text = "\n".join(lines) + "\n"
        def report(*args, **kwargs) -> int:
            sys.stderr.write(text)
            return 2
        return report

    def load(self, mode="") -> MainCallable:
        """ Return the entry point for <mode>. If it matches none or several, return a callable that lists
            the available modes on standard error and returns an error code instead. """
        found = self.candidates(mode)
        if len(found) == 1:
            return found[0]
        if found:
            return self._usage_error(f'Operation "{mode}" has multiple matches. Use more characters.')
        if not mode:
            return self._usage_error("An operation mode is required as the first command-line argument.")
        return self._usage_error(f'No matches for operation "{mode}".')

    def main(self) -> int:
        return self.load(shift_argv())()
