""" Container/factory for the components every entry point needs. """

import sys
from typing import List, Optional, TextIO

from glyphmap.automaton import Automaton, build, build_section, SectionNotFoundError
from glyphmap.layout import Layout, LayoutNotFoundError, LayoutWriter
from glyphmap.options import GlyphmapOptions
from glyphmap.util.config import ConfigIO
from glyphmap.util.log import open_logger, StreamLogger
from glyphmap.writer import CONFIG_SECTION, Format, FormatNotFoundError, GraphStyle, LayoutDocumentWriter

# Errors caused by names the user typed. These are reported without a traceback.
USER_ERRORS = (LayoutNotFoundError, SectionNotFoundError, FormatNotFoundError)


class Glyphmap:
    """ Builds components from options on first access. Nothing is persisted between runs. """

    def __init__(self, opts:GlyphmapOptions=None, *, parse_args=True, argv:List[str]=None) -> None:
        if opts is None:
            opts = GlyphmapOptions()
        if parse_args:
            opts.parse(argv)
        self._opts = opts

    class Component:
        """ Property-like descriptor to create a component if it does not exist, then save it over the attribute. """

        def __init__(self, func) -> None:
            self._func = func

        def __get__(self, instance, owner=None) -> object:
            value = self._func(instance)
            setattr(instance, self._func.__name__, value)
            return value

    @Component
    def logger(self) -> StreamLogger:
        """ Open a thread-safe logger that writes to standard error and the log file, if any. """
        return open_logger(self._opts.log_path(), to_stderr=True)

    @Component
    def layout(self) -> LayoutWriter:
        """ Run the producer for the selected layout. Duplicate key sequences are logged here. """
        opts = self._opts
        return Layout.from_name(opts.layout).generate(self.logger.log, postfix=opts.postfix)

    @Component
    def selected_layout(self) -> LayoutWriter:
        """ The layout itself, or a copy with only the --section that was asked for. """
        section = self._opts.section
        return self.layout.only(section) if section else self.layout

    @Component
    def automaton(self) -> Automaton:
        """ Fold the layout sections into one automaton, or build it from the chosen section alone. """
        sections = self.layout.sections
        section = self._opts.section
        if section:
            automaton, _ = build_section(sections, section, self.logger.log)
        else:
            automaton, _ = build(sections, self.logger.log)
        return automaton

    @Component
    def graph_style(self) -> GraphStyle:
        """ Start from the default style and apply overrides from the config file, if one was given. """
        style = GraphStyle()
        cfg_path = self._opts.config_path()
        if cfg_path:
            options = ConfigIO().read(cfg_path)
            style = style.with_options(options.get(CONFIG_SECTION, {}))
        return style

    @Component
    def writer(self) -> LayoutDocumentWriter:
        fmt = Format.from_name(self._opts.format)
        return fmt.writer(self.logger.log, self.graph_style)

    def document(self) -> str:
        """ Render the selected layout in the selected format. """
        return self.writer.write(self.selected_layout)

    def save(self, text:str, stream:TextIO=None) -> None:
        """ Write <text> to the --output file, or to <stream> (standard output by default). """
        path = self._opts.output_path()
        if path:
            with open(path, 'w', encoding='utf-8') as fp:
                fp.write(text)
        else:
            (stream or sys.stdout).write(text)

    def query(self, seq:str) -> Optional[str]:
        """ Return the output typed by the key sequence <seq>, or None if it types nothing. """
        return self.automaton.run(seq)

    def extra_args(self) -> List[str]:
        return self._opts.extras()
