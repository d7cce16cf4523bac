""" Ancient Greek layout. Letters are typed phonetically; diacritics are typed as modifier keys before the vowel. """

from typing import List, Tuple

from glyphmap.compose import CombiningMark, compose
from .base import KeyMap, LayoutMetadata, LayoutWriter, Modifier

SPECIAL = Modifier("special", "q")
MACRON = Modifier("macron", "w", CombiningMark.MACRON)
ACUTE = Modifier("acute", ";", CombiningMark.ACUTE)
GRAVE = Modifier("grave", "'", CombiningMark.GRAVE)
CIRCUMFLEX = Modifier("circumflex", "-", CombiningMark.PERISPOMENI)
SMOOTH = Modifier("smooth breathing", ":", CombiningMark.COMMA)
ROUGH = Modifier("rough breathing", '"', CombiningMark.REVERSED_COMMA)
IOTA = Modifier("iota subscript", "[", CombiningMark.IOTA)
DIAERESIS = Modifier("diaeresis", "]", CombiningMark.DIAERESIS)
MODIFIERS = [SPECIAL, MACRON, ACUTE, GRAVE, CIRCUMFLEX, SMOOTH, ROUGH, IOTA, DIAERESIS]
MODIFIER_KEYS = {m.key for m in MODIFIERS}

ALPHABET = [("a", "α"), ("b", "β"), ("g", "γ"), ("d", "δ"), ("e", "ε"), ("z", "ζ"),
            ("h", "η"),  # non-phonetic
            ("th", "θ"), ("i", "ι"), ("k", "κ"), ("l", "λ"), ("m", "μ"), ("n", "ν"), ("ks", "ξ"), ("o", "ο"),
            ("p", "π"), ("r", "ρ"), ("s", "σ"), ("t", "τ"), ("u", "υ"), ("ph", "φ"), ("kh", "χ"), ("ps", "ψ"),
            ("v", "ω")]  # non-phonetic
ALPHABET_DOUBLES = [("c", "κ"), (MACRON.key + "e", "η"), ("f", "φ"), ("ch", "χ"), ("x", "χ"),
                    (MACRON.key + "o", "ω")]
VOWELS = [("a", "α"), ("e", "ε"), ("h", "η"), ("i", "ι"), ("o", "ο"), ("u", "υ"), ("v", "ω")]
PUNCTUATION = [(".", "·"), ("<", "«"), (">", "»"), ("?", ";")]

SINGLE_MARKS = [MACRON, ACUTE, GRAVE, CIRCUMFLEX, SMOOTH, ROUGH, IOTA, DIAERESIS]
BASE_MARKS = [SMOOTH, ROUGH, DIAERESIS]  # Marks that may be followed by an accent.
ACCENTS = [ACUTE, GRAVE, CIRCUMFLEX]


def _add_with_capitals(keymap:KeyMap, seq:str, letter:str) -> None:
    """ Add a letter, its all-caps form, and (for multi-key sequences whose second key is not a modifier)
        the form with only the first key capitalized. """
    keymap.add(seq, letter)
    cap_seq = seq.upper()
    cap_letter = letter.upper()
    keymap.add(cap_seq, cap_letter)
    if len(seq) > 1 and seq[1] not in MODIFIER_KEYS:
        keymap.add(cap_seq[0] + seq[1:], cap_letter)


def _add_diacritic(keymap:KeyMap, marks:List[Modifier], vowels:List[Tuple[str, str]]) -> None:
    """ Add every vowel under a stack of modifier keys, but only where Unicode has a precomposed character. """
    prefix = "".join([m.key for m in marks])
    for key, vowel in vowels:
        for k, v in ((key, vowel), (key.upper(), vowel.upper())):
            glyph = compose(v, *[m.mark for m in marks])
            if len(glyph) == 1:
                keymap.add(prefix + k, glyph)


def gen(keyboard:LayoutWriter) -> None:
    keyboard.set_metadata(LayoutMetadata("Ancient Greek", "grc",
                                         "Ancient Greek with extensions for macron and accents simultaneously"))
    alphabet_map = keyboard.new_keymap()
    for seq, letter in ALPHABET:
        _add_with_capitals(alphabet_map, seq, letter)
    keyboard.write_section("alphabet", alphabet_map)

    doubles_map = keyboard.new_keymap()
    for seq, letter in ALPHABET_DOUBLES:
        _add_with_capitals(doubles_map, seq, letter)
    keyboard.write_section("alphabet doubles", doubles_map)

    punctuation_map = keyboard.new_keymap()
    for key, symbol in PUNCTUATION:
        punctuation_map.add(SPECIAL.key + key, symbol)
    keyboard.write_section("punctuation", punctuation_map)

    diacritic_map = keyboard.new_keymap()
    for mark in SINGLE_MARKS:
        _add_diacritic(diacritic_map, [mark], VOWELS)
    keyboard.write_section("diacritics", diacritic_map)

    stacked_map = keyboard.new_keymap()
    for base in BASE_MARKS:
        for accent in ACCENTS:
            _add_diacritic(stacked_map, [base, accent], VOWELS)
    keyboard.write_section("stacked diacritics", stacked_map)
