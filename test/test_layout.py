""" Unit tests for the key map container and the built-in layout producers. """

import pytest

from glyphmap.automaton import SectionNotFoundError
from glyphmap.layout import KeyMap, Layout, LayoutMetadata, LayoutNotFoundError, LayoutWriter
from glyphmap.layout import greek

from . import make_keymap, make_layout


def test_keymap_duplicates() -> None:
    messages = []
    keymap = KeyMap(messages.append)
    assert keymap.add("b", "1")
    assert keymap.add("a", "")
    assert not keymap.add("b", "2")
    assert keymap["b"] == "1"
    assert len(keymap) == 2
    assert list(keymap) == ["a", "b"]
    assert len(messages) == 1
    assert '"b"' in messages[0] and '"2"' in messages[0]
    with pytest.raises(ValueError):
        keymap.add("", "nothing")


def test_layout_writer_sections() -> None:
    layout = make_layout(("one", {"a": "1"}), ("two", {"b": "2"}))
    assert layout.section_names() == ["one", "two"]
    assert layout.section("two")["b"] == "2"
    only = layout.only("one")
    assert only.section_names() == ["one"]
    assert only.metadata == layout.metadata
    with pytest.raises(SectionNotFoundError):
        layout.section("three")
    with pytest.raises(SectionNotFoundError):
        layout.only("three")
    more = LayoutWriter(lambda msg: None)
    more.write_sections(layout.sections)
    more.write_sections([("three", make_keymap({"c": "3"}))])
    assert more.section_names() == ["one", "two", "three"]
    assert more.section("one") is layout.section("one")


def test_default_metadata() -> None:
    assert LayoutWriter(lambda msg: None).metadata == LayoutMetadata()


@pytest.mark.parametrize("name", ["greek", "Latin", " RUSSIAN "])
def test_layout_lookup(name) -> None:
    assert Layout.from_name(name).value == name.strip().lower()


def test_layout_not_found() -> None:
    with pytest.raises(LayoutNotFoundError) as exc_info:
        Layout.from_name("klingon")
    assert "klingon" in str(exc_info.value)
    assert "greek" in str(exc_info.value)


@pytest.mark.parametrize("layout", Layout)
def test_producers_have_no_duplicates(layout) -> None:
    """ The built-in layouts should never need to drop a rule. """
    messages = []
    keyboard = layout.generate(messages.append)
    assert not messages
    assert keyboard.metadata != LayoutMetadata()
    assert keyboard.sections
    for name, keymap in keyboard.sections:
        assert name
        assert len(keymap)


GREEK = Layout.GREEK.generate(lambda msg: None)


@pytest.mark.parametrize("section, seq, output", [
    ("alphabet", "th", "θ"),
    ("alphabet", "TH", "Θ"),
    ("alphabet", "Th", "Θ"),
    ("alphabet", "S", "Σ"),
    ("alphabet doubles", "we", "η"),
    ("alphabet doubles", "We", "Η"),
    ("punctuation", "q?", ";"),
    ("diacritics", "wa", "ᾱ"),
    ("diacritics", "[v", "ῳ"),
    ("diacritics", '"A', "Ἁ"),
    ("stacked diacritics", ":;a", "ἄ"),
    ("stacked diacritics", '"-v', "ὧ"),
])
def test_greek_rules(section, seq, output) -> None:
    assert GREEK.section(section)[seq] == output


def test_greek_diacritics_are_precomposed() -> None:
    """ Combinations with no precomposed character (such as epsilon with a macron) are left out. """
    diacritics = GREEK.section("diacritics")
    assert greek.MACRON.key + "e" not in diacritics
    assert all(len(output) == 1 for output in diacritics.values())


def test_latin_prefix_and_postfix() -> None:
    prefix = Layout.LATIN.generate(lambda msg: None)
    postfix = Layout.LATIN.generate(lambda msg: None, postfix=True)
    assert prefix.section_names() == postfix.section_names() == ["macrons", "breve"]
    assert prefix.section("macrons")[";a"] == "ā"
    assert prefix.section("breve")["-U"] == "Ŭ"
    assert postfix.section("macrons")["Y;"] == "Ȳ"
    assert postfix.section("breve")["e-"] == "ĕ"
    assert len(prefix.section("macrons")) == 12


def test_russian_rules() -> None:
    russian = Layout.RUSSIAN.generate(lambda msg: None)
    assert russian.section("consonants")["sch"] == "щ"
    assert russian.section("consonants")["ZH"] == "Ж"
    assert russian.section("soft vowels")["Ja"] == "Я"
    assert russian.section("soft vowels")["JA"] == "Я"
    assert russian.section("acute hard vowels")["o;"] == "о\u0301"
    assert russian.section("acute soft vowels")["Ju;"] == "Ю\u0301"
    assert russian.section("signs")["qH"] == "ъ"
