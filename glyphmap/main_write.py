""" Main module for writing a layout document. """

import sys

from glyphmap import Glyphmap, GlyphmapOptions
from glyphmap.glyphmap import USER_ERRORS
from glyphmap.util.cmdline import CmdlineError
from glyphmap.util.exception import ExceptionLogger


def main(argv=None) -> int:
    """ Render the chosen layout in the chosen format. Unknown names are reported with a non-zero exit code. """
    opts = GlyphmapOptions("Write a keyboard layout as a list, Emacs/Vim input method, Graphviz graph, "
                           "or JavaScript table.")
    try:
        glyphmap = Glyphmap(opts, argv=argv)
    except CmdlineError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2
    sys.excepthook = ExceptionLogger(glyphmap.logger.log)
    try:
        text = glyphmap.document()
    except USER_ERRORS as e:
        glyphmap.logger.log(f"Error: {e}")
        return 1
    glyphmap.save(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
