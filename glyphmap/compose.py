""" Module for folding combining marks into precomposed characters. """

from enum import Enum
from typing import List, Sequence
from unicodedata import decomposition, normalize

HANGUL_SYLLABLES = range(0xAC00, 0xD7A4)  # Composed algorithmically, so they have no decomposition entry.


class CombiningMark(str, Enum):
    """ Combining diacritics placed above a base letter, by name. """

    GRAVE = "\u0300"
    ACUTE = "\u0301"
    CIRCUMFLEX = "\u0302"
    TILDE = "\u0303"
    MACRON = "\u0304"
    OVERLINE = "\u0305"
    BREVE = "\u0306"
    DOT_ABOVE = "\u0307"
    DIAERESIS = "\u0308"
    TURNED_COMMA = "\u0312"
    COMMA = "\u0313"           # Greek smooth breathing (psili).
    REVERSED_COMMA = "\u0314"  # Greek rough breathing (dasia).
    PERISPOMENI = "\u0342"
    IOTA = "\u0345"            # Greek iota subscript (ypogegrammeni).


def compose_pair(first:str, second:str) -> str:
    """ Return the canonical composition of two characters, or an empty string if there is none.
        NFC alone is not enough: it also replaces singletons (U+0341 becomes U+0301, U+1F71 becomes U+03AC)
        before composing, so the result must decompose back to exactly this pair. """
    composed = normalize("NFC", first + second)
    if len(composed) != 1:
        return ""
    if ord(composed) in HANGUL_SYLLABLES:
        return composed
    if decomposition(composed) != f"{ord(first):04X} {ord(second):04X}":
        return ""
    return composed


def compose_chars(chars:Sequence[str]) -> List[str]:
    """ Fold each character into the last output character if the two have a canonical composition.
        Only adjacent pairs are tried; nothing is reordered and there is no lookahead. """
    if not chars:
        return []
    first, *rest = chars
    out = [first]
    for c in rest:
        composed = compose_pair(out[-1], c)
        if composed:
            out[-1] = composed
        else:
            out.append(c)
    return out


def compose(*parts:str) -> str:
    """ Join <parts> and compose the characters of the result. """
    return "".join(compose_chars("".join(parts)))
