""" Module for --key=value style command-line options with generated help text. """

import os
import sys
from typing import Any, Dict, Iterable, Iterator, List, Tuple

_BOOL_WORDS = {"1": True, "true": True, "yes": True, "on": True,
               "0": False, "false": False, "no": False, "off": False}


def group_args(argv:Iterable[str]) -> Tuple[List[str], List[List[str]]]:
    """ Split <argv> into positional arguments and one group per option-looking argument.
        Each group starts with the option string and holds every plain argument up to the next option.
        A bare -- ends option parsing; everything after it is positional.

        positional   group         group           group      positional
        |********| [--layout=x] [--format vim] [--postfix] -- |********| """
    positional = []
    groups = []
    current = positional
    args = iter(argv)
    for s in args:
        if s == "--":
            positional += args
            break
        if s.startswith("-"):
            current = []
            groups.append(current)
        current.append(s)
    return positional, groups


class CmdlineError(ValueError):
    """ Raised when the arguments given for an option cannot be converted. """


class CmdlineOption:
    """ One option that sets an attribute. The type of its default decides how argument strings are converted. """

    def __init__(self, key:str, opt_type:type=str, desc="No description.") -> None:
        self.key = key             # Option string as typed, e.g. --layout.
        self.opt_type = opt_type   # Type of the value produced by convert().
        self.desc = desc           # Text shown in help.

    def keys(self) -> Iterator[str]:
        yield self.key

    def _is_collection(self) -> bool:
        return issubclass(self.opt_type, (list, tuple, set))

    def take(self, inline:List[str], following:List[str]) -> Tuple[List[str], List[str]]:
        """ Choose this option's argument strings from the inline (=value) part and the plain arguments after it.
            Return them with the arguments left for the positional list. Flags only take an inline value,
            single values take the inline value or the next argument, and collections take everything. """
        if self._is_collection():
            return inline + following, []
        if inline or self.opt_type is bool:
            return inline, following
        return following[:1], following[1:]

    def convert(self, *args:str) -> Any:
        """ Turn the strings given after this option into one value. """
        if self.opt_type is bool:
            if not args:
                return True
            if len(args) == 1 and args[0].lower() in _BOOL_WORDS:
                return _BOOL_WORDS[args[0].lower()]
            raise CmdlineError(f'Option {self.key} expects a boolean value, got "{" ".join(args)}".')
        if self._is_collection():
            return self.opt_type(args)
        if len(args) != 1:
            raise CmdlineError(f'Option {self.key} takes exactly one argument, got {len(args)}.')
        return self.opt_type(args[0])

    def usage(self) -> str:
        if self.opt_type is bool:
            return self.key
        if self._is_collection():
            return self.key + '=<str> [<str> ...]'
        return f'{self.key}=<{self.opt_type.__name__}>'


class HelpOption(CmdlineOption):
    """ The -h/--help flag. Using it prints the help text and exits. """

    def __init__(self, text:str, file=None) -> None:
        super().__init__('--help', bool, "Show this help message and exit.")
        self._text = text
        self._file = file

    def keys(self) -> Iterator[str]:
        yield '-h'
        yield self.key

    def usage(self) -> str:
        return '-h|--help'

    def convert(self, *args:str) -> Any:
        (self._file or sys.stdout).write(self._text)
        sys.exit(0)


def format_help(options:Iterable[CmdlineOption], script_name:str, description:str, max_col_width=32) -> str:
    """ Return the program description, a usage line, and one aligned entry for every option. """
    options = [*options]
    usage = 'usage: ' + script_name + ''.join([f' [{opt.usage()}]' for opt in options])
    key_cols = [", ".join(opt.keys()) for opt in options]
    width = max([len(s) for s in key_cols if len(s) < max_col_width], default=0) + 2
    lines = [description, usage, ""]
    for opt, keys in zip(options, key_cols):
        if len(keys) <= width:
            lines.append(keys.ljust(width) + opt.desc)
        else:
            lines += [keys, '    ' + opt.desc]
    lines.append("")
    return "\n".join(lines)


class CmdlineOptions:
    """ Option values live in instance attributes. Until parse() runs (or for options left out), they hold defaults.
        Arguments that match no option are kept and may be read back with extras(). """

    def __init__(self, app_description="Command line application.") -> None:
        self._app_description = app_description  # First line of the help text.
        self._options = {}                       # Option objects by attribute name.
        self._extras = []                        # Unmatched arguments from the last parse.

    def __getattr__(self, name:str) -> Any:
        raise AttributeError(f'"{name}" is not the name of a valid command-line option.')

    def add(self, name:str, default:Any=None, desc="No description.") -> None:
        """ Register --<name> and set its attribute (hyphens become underscores) to <default>. """
        opt_type = str if default is None else type(default)
        attr = name.replace("-", "_")
        self._options[attr] = CmdlineOption("--" + name, opt_type, desc)
        setattr(self, attr, default)

    def format_help(self, script_name="") -> str:
        """ Return the full help text without printing it. """
        return format_help([*self._options.values(), HelpOption("")], script_name, self._app_description)

    def _option_table(self, script_name:str) -> Dict[str, Tuple[str, CmdlineOption]]:
        table = {}
        for attr, opt in self._options.items():
            table[opt.key] = (attr, opt)
        help_opt = HelpOption(self.format_help(script_name))
        for k in help_opt.keys():
            table[k] = ("", help_opt)
        return table

    def parse(self, argv:Iterable[str]=None) -> None:
        """ Read options from <argv>, or from sys.argv if it is None. Its first element is the script name. """
        script, *args = (sys.argv if argv is None else argv)
        table = self._option_table(os.path.basename(script) if script else "")
        extras, groups = group_args(args)
        values = {}
        for head, *tail in groups:
            key, *inline = head.split('=', 1)
            if key not in table:
                extras += [head, *tail]
                continue
            attr, opt = table[key]
            args, leftover = opt.take(inline, tail)
            values[attr] = opt.convert(*args)
            extras += leftover
        self.__dict__.update(values)
        self._extras = extras

    def extras(self) -> List[str]:
        """ Return all arguments left over from the last parse. """
        return self._extras[:]
