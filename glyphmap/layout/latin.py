""" Latin layout with macrons and breves on the vowels. """

from glyphmap.compose import CombiningMark, compose
from .base import KeyMap, LayoutMetadata, LayoutWriter, Modifier

VOWELS = "aeiouy"
MACRON = Modifier("macron", ";", CombiningMark.MACRON)
BREVE = Modifier("breve", "-", CombiningMark.BREVE)


def _marked_vowels(keyboard:LayoutWriter, modifier:Modifier, postfix:bool) -> KeyMap:
    keymap = keyboard.new_keymap()
    for lower in VOWELS:
        for letter in (lower, lower.upper()):
            seq = letter + modifier.key if postfix else modifier.key + letter
            keymap.add(seq, compose(letter, modifier.mark))
    return keymap


def gen(keyboard:LayoutWriter, postfix=False) -> None:
    """ With <postfix> set, the modifier key is typed after the vowel instead of before it. """
    keyboard.set_metadata(LayoutMetadata("Lingua Latina", "la", "Latin with macrons and breve"))
    keyboard.write_section("macrons", _marked_vowels(keyboard, MACRON, postfix))
    keyboard.write_section("breve", _marked_vowels(keyboard, BREVE, postfix))
