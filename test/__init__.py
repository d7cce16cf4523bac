""" Test package for glyphmap. __init__.py holds small hand-written layouts shared by the test modules. """

from glyphmap.layout import KeyMap, LayoutMetadata, LayoutWriter


def make_keymap(rules:dict, log=None) -> KeyMap:
    keymap = KeyMap(log or (lambda msg: None))
    for seq, output in rules.items():
        keymap.add(seq, output)
    return keymap


def make_layout(*sections, log=None, metadata=LayoutMetadata("Test Language", "tst", "Layout for tests")) -> LayoutWriter:
    """ Build a layout from (name, rules dict) pairs. """
    layout = LayoutWriter(log or (lambda msg: None))
    layout.set_metadata(metadata)
    for name, rules in sections:
        layout.write_section(name, make_keymap(rules, log))
    return layout
