""" Russian phonetic layout. Soft vowels and signs are typed with a modifier key in front. """

from glyphmap.compose import CombiningMark, compose
from .base import LayoutMetadata, LayoutWriter, Modifier

SIGN = Modifier("sign", "q")
SOFT = Modifier("soft", "j")
ACUTE = Modifier("acute", ";", CombiningMark.ACUTE)

CONSONANTS = [("b", "б"), ("v", "в"), ("g", "г"), ("d", "д"), ("zh", "ж"), ("z", "з"), ("j", "й"), ("k", "к"),
              ("l", "л"), ("m", "м"), ("n", "н"), ("p", "п"), ("r", "р"), ("s", "с"), ("t", "т"), ("f", "ф"),
              ("h", "х"), ("ts", "ц"), ("ch", "ч"), ("sh", "ш"), ("sch", "щ")]
HARD_VOWELS = [("a", "а"), ("e", "э"), ("o", "о"), ("u", "у")]
I_VOWELS = [("i", "и"), ("y", "ы")]
SOFT_VOWELS = [("a", "я"), ("e", "е"), ("o", "ё"), ("u", "ю")]
SIGNS = [("s", "ь"), ("h", "ъ")]


def gen(keyboard:LayoutWriter) -> None:
    keyboard.set_metadata(LayoutMetadata("Russian Cyrillic", "rus", "Russian phonetic layout"))

    consonant_map = keyboard.new_keymap()
    for seq, letter in CONSONANTS:
        consonant_map.add(seq, letter)
        consonant_map.add(seq.upper(), letter.upper())
    keyboard.write_section("consonants", consonant_map)

    vowel_map = keyboard.new_keymap()
    for key, letter in HARD_VOWELS + I_VOWELS:
        vowel_map.add(key, letter)
        vowel_map.add(key.upper(), letter.upper())
    keyboard.write_section("vowels", vowel_map)

    # Capitals accept the vowel key in either case after a capital modifier.
    soft_vowel_map = keyboard.new_keymap()
    for key, letter in SOFT_VOWELS:
        soft_vowel_map.add(SOFT.key + key, letter)
        soft_vowel_map.add(SOFT.key.upper() + key.upper(), letter.upper())
        soft_vowel_map.add(SOFT.key.upper() + key, letter.upper())
    keyboard.write_section("soft vowels", soft_vowel_map)

    acute_hard_map = keyboard.new_keymap()
    for key, letter in HARD_VOWELS + I_VOWELS:
        acute_hard_map.add(key + ACUTE.key, compose(letter, ACUTE.mark))
        acute_hard_map.add(key.upper() + ACUTE.key, compose(letter.upper(), ACUTE.mark))
    keyboard.write_section("acute hard vowels", acute_hard_map)

    acute_soft_map = keyboard.new_keymap()
    for key, letter in SOFT_VOWELS:
        acute_soft_map.add(SOFT.key + key + ACUTE.key, compose(letter, ACUTE.mark))
        acute_soft_map.add(SOFT.key.upper() + key.upper() + ACUTE.key, compose(letter.upper(), ACUTE.mark))
        acute_soft_map.add(SOFT.key.upper() + key + ACUTE.key, compose(letter.upper(), ACUTE.mark))
    keyboard.write_section("acute soft vowels", acute_soft_map)

    sign_map = keyboard.new_keymap()
    for key, sign in SIGNS:
        sign_map.add(SIGN.key + key, sign)
        sign_map.add(SIGN.key + key.upper(), sign)
    keyboard.write_section("signs", sign_map)
