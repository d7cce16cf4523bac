""" Command-line options for every entry point. """

import os

from glyphmap.util.cmdline import CmdlineOptions


class GlyphmapOptions(CmdlineOptions):
    """ Contains all command-line options necessary to build essential components. """

    def __init__(self, app_description="Running glyphmap as a library (should never be seen).") -> None:
        super().__init__(app_description)
        self.add("layout", "greek",
                 "Keyboard layout to load (greek, latin, russian).")
        self.add("section", "",
                 "Restrict everything to the one layout section with this name.")
        self.add("postfix", False,
                 "Type modifier keys after the letter instead of before it (latin only).")
        self.add("format", "list",
                 "Output document format (list, emacs, vim, graphviz, table).")
        self.add("output", "",
                 "File to write the document to instead of standard output.")
        self.add("log", "",
                 "Text file to append diagnostics to in addition to standard error.")
        self.add("config", "",
                 "Config CFG/INI file with graph style overrides in its [graphviz] section.")

    @staticmethod
    def _expand(path:str) -> str:
        return os.path.expanduser(path) if path else ""

    def log_path(self) -> str:
        """ Return the path for the log file, creating empty directories to its location if necessary. """
        path = self._expand(self.log)
        if path:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        return path

    def config_path(self) -> str:
        return self._expand(self.config)

    def output_path(self) -> str:
        return self._expand(self.output)
