""" Emacs Quail input method package. """

from glyphmap.layout import LayoutWriter
from .base import escape_quotes, kebab_case, LayoutDocumentWriter

# Characters that must be backslashed in an Emacs Lisp character literal.
_CHAR_ESCAPES = set('\\"()[];\'`,#.?')


def char_literal(c:str) -> str:
    """ Return the Lisp character literal for a single character. """
    if c == " ":
        return "?\\s"
    if c in _CHAR_ESCAPES:
        return "?\\" + c
    return "?" + c


def translation(output:str) -> str:
    """ Quail accepts a character literal for one character and a vector holding a string otherwise. """
    if len(output) == 1:
        return char_literal(output)
    return f'["{escape_quotes(output)}"]'


class EmacsWriter(LayoutDocumentWriter):

    def write(self, layout:LayoutWriter) -> str:
        metadata = layout.metadata
        lines = ["(quail-define-package",
                 f'  "{escape_quotes(kebab_case(metadata.language))}"',
                 f'  "{escape_quotes(metadata.language_code.lower())}"',
                 f'  "{escape_quotes(metadata.language)}"',
                 "  t",
                 f'  "{escape_quotes(metadata.description)}"',
                 "  nil t nil nil nil nil nil nil nil nil t",
                 ")",
                 "(quail-define-rules"]
        for name, keymap in layout.sections:
            lines.append(f"  ;; {name}")
            for seq, output in keymap.items():
                lines.append(f'  ("{escape_quotes(seq)}" {translation(output)})')
        lines.append(")")
        return "\n".join(lines) + "\n"
