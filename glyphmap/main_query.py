""" Main module for looking up typed key sequences in the automaton. """

import sys
from typing import Iterable, TextIO

from glyphmap import Glyphmap, GlyphmapOptions
from glyphmap.glyphmap import USER_ERRORS
from glyphmap.util.cmdline import CmdlineError
from glyphmap.util.exception import ExceptionLogger

NO_MATCH = "(no match)"


def format_result(seq:str, output) -> str:
    if output is None:
        return f"〈{seq}〉 → {NO_MATCH}"
    return f"〈{seq}〉 → 〈{output}〉"


def query_lines(glyphmap:Glyphmap, lines:Iterable[str], out:TextIO) -> None:
    """ Answer one key sequence per line. Only the line ending is stripped; spaces may be keys. """
    for line in lines:
        seq = line.rstrip("\r\n")
        out.write(format_result(seq, glyphmap.query(seq)) + "\n")
        out.flush()


def main(argv=None, stdin:TextIO=None, stdout:TextIO=None) -> int:
    """ Look up the key sequences given after the options, or read them from standard input one per line. """
    opts = GlyphmapOptions("Show what each typed key sequence produces in a keyboard layout.")
    try:
        glyphmap = Glyphmap(opts, argv=argv)
    except CmdlineError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2
    sys.excepthook = ExceptionLogger(glyphmap.logger.log)
    try:
        automaton = glyphmap.automaton
    except USER_ERRORS as e:
        glyphmap.logger.log(f"Error: {e}")
        return 1
    glyphmap.logger.log(f"Loaded {len(automaton)} states from {len(automaton.section_names)} section(s).")
    seqs = glyphmap.extra_args()
    query_lines(glyphmap, seqs or (stdin or sys.stdin), stdout or sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
