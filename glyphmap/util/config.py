""" Module for reading settings from CFG/INI files. """

import ast
from configparser import ConfigParser
from typing import Any, Callable, Dict

SectionDict = Dict[str, Any]
ConfigDict = Dict[str, SectionDict]


def eval_str(s:str) -> Any:
    """ Read <s> as a Python literal so that "False" and "3" come back as a bool and an int.
        Anything that is not a literal (such as a bare color name) stays a string. """
    try:
        return ast.literal_eval(s)
    except (SyntaxError, ValueError):
        return s


class ConfigIO:
    """ Loads CFG text into a dict of sections, each a dict of converted values. """

    def __init__(self, *, convert:Callable[[str], Any]=eval_str, encoding='utf-8') -> None:
        self._convert = convert
        self._encoding = encoding

    def _collect(self, parser:ConfigParser) -> ConfigDict:
        return {name: {k: self._convert(v) for k, v in parser[name].items()}
                for name in parser.sections()}

    def loads(self, text:str) -> ConfigDict:
        parser = ConfigParser()
        parser.read_string(text)
        return self._collect(parser)

    def read(self, filename:str) -> ConfigDict:
        """ Read the file at <filename>. A missing file raises OSError like any other open(). """
        parser = ConfigParser()
        with open(filename, 'r', encoding=self._encoding) as fp:
            parser.read_file(fp)
        return self._collect(parser)
