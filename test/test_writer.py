""" Unit tests for the document writers. """

import pytest

from glyphmap.automaton import build
from glyphmap.layout import Layout
from glyphmap.util.config import ConfigIO
from glyphmap.writer import (CONFIG_SECTION, EmacsWriter, Format, FormatNotFoundError, GraphStyle, GraphvizWriter,
                             ListWriter, TableWriter, VimWriter)
from glyphmap.writer.base import kebab_case, snake_case

from . import make_layout


def _quiet(msg:str) -> None:
    pass


def test_case_conversion() -> None:
    assert snake_case("Ancient Greek") == "ancient_greek"
    assert kebab_case("Lingua Latina") == "lingua-latina"
    assert snake_case("  Russian  Cyrillic (phonetic) ") == "russian_cyrillic_phonetic"


def test_list_writer() -> None:
    layout = make_layout(("one", {"b": "2", "a": "1"}), ("two", {"c": ""}))
    assert ListWriter().write(layout) == ("Test Language (tst)\n"
                                          "Layout for tests\n"
                                          "----------------\n"
                                          "  one\n"
                                          "    〈a〉 → 〈1〉\n"
                                          "    〈b〉 → 〈2〉\n"
                                          "  two\n"
                                          "    〈c〉 → 〈〉\n")


def test_emacs_writer() -> None:
    layout = make_layout(("quotes", {'"': "x", "q": '"', "ab": 'a"b', "s": " "}))
    lines = EmacsWriter().write(layout).splitlines()
    assert lines[:3] == ["(quail-define-package", '  "test-language"', '  "tst"']
    assert "(quail-define-rules" in lines
    assert "  ;; quotes" in lines
    assert '  ("\\"" ?x)' in lines
    assert '  ("ab" ["a\\"b"])' in lines
    assert '  ("q" ?\\")' in lines
    assert '  ("s" ?\\s)' in lines
    assert lines[-1] == ")"


def test_vim_writer() -> None:
    layout = make_layout(("keys", {" ": "space", "<": "lt", "a|b": "\\", "e": ""}))
    lines = VimWriter().write(layout).splitlines()
    assert lines[0] == '" Test Language (tst)'
    assert lines[2] == "function! Kbdmap_test_language()"
    assert '   " keys' in lines
    assert "   inoremap <buffer> <Space> space" in lines
    assert "   inoremap <buffer> <lt> lt" in lines
    assert "   inoremap <buffer> a<Bar>b <Bslash>" in lines
    assert "   inoremap <buffer> e <Nop>" in lines
    assert lines[-1] == "endfunction"


def test_graphviz_writer() -> None:
    layout = make_layout(("one", {"ab": "Y"}), ("two", {"ac": 'Z"', "a ": "W"}))
    lines = GraphvizWriter(log=_quiet).write(layout).splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert "\tsubgraph cluster_0 {" in lines
    assert "\tsubgraph cluster_1 {" in lines
    assert '\t\tlabel="two";' in lines
    assert "\t\tbgcolor=aliceblue;" in lines
    # States: 0 start, 1 "a", 2 "ab" (first section), 3 "a ", 4 "ac" (second section).
    assert '\t\t  2 [label="Y"];' in lines
    assert '\t\t  4 [label="Z\\""];' in lines
    assert '\t  0 [style=filled,fillcolor=white,fontcolor=black,shape=ellipse,label="start"]' in lines
    assert '\t  1     \t[label="a"];' in lines
    assert '\t  0 ->   1\t[label="a"];' in lines
    assert '\t  1 ->   3\t[label="space"];' in lines
    assert '\t  1 ->   4\t[label="c"];' in lines
    # Accepting states are only drawn inside their cluster.
    assert not any(line.startswith("\t  2 ") and "label=" in line and "->" not in line for line in lines)


def test_graphviz_style_from_config() -> None:
    options = ConfigIO().loads(f"[{CONFIG_SECTION}]\ncluster_bgcolor = pink\nstart_shape = box\n")
    style = GraphStyle().with_options(options[CONFIG_SECTION])
    assert style.cluster_bgcolor == "pink"
    assert style.start_shape == "box"
    assert style.intermediate_shape == "circle"
    text = GraphvizWriter(style, _quiet).write(make_layout(("s", {"a": "b"})))
    assert "bgcolor=pink;" in text
    assert "shape=box" in text
    with pytest.raises(ValueError):
        GraphStyle().with_options({"no_such_option": "x"})


def test_table_writer() -> None:
    layout = make_layout(("s", {"a": 'q"', "a b": "x"}))
    assert TableWriter(_quiet).write(layout) == ('let automaton = [\n'
                                                 '    {l: "start", a: null, t: new Map([["a", 1]])},\n'
                                                 '    {l: "a", a: "q\\"", t: new Map([[" ", 2]])},\n'
                                                 '    {l: "a ", a: null, t: new Map([["b", 3]])},\n'
                                                 '    {l: "a b", a: "x", t: null}\n'
                                                 '];\n')


def test_table_writer_escapes_line_separators() -> None:
    text = TableWriter(_quiet).write(make_layout(("s", {"a": "x\u2028y\u2029z", "b": "\u00e9"})))
    assert "\u2028" not in text and "\u2029" not in text
    assert 'a: "x\\u2028y\\u2029z"' in text
    assert 'a: "\u00e9"' in text


def test_table_writer_is_indexed_by_state() -> None:
    layout = Layout.GREEK.generate(_quiet)
    automaton, _ = build(layout.sections, _quiet)
    text = TableWriter(_quiet).write_automaton(automaton)
    assert text.count("{l: ") == len(automaton)


@pytest.mark.parametrize("fmt", Format)
def test_writers_are_pure(fmt) -> None:
    """ Writing the same layout twice gives identical documents. """
    layout = Layout.RUSSIAN.generate(_quiet)
    first = fmt.writer(_quiet).write(layout)
    second = fmt.writer(_quiet).write(layout)
    assert first
    assert first == second


def test_format_lookup() -> None:
    assert Format.from_name("GraphViz") is Format.GRAPHVIZ
    assert isinstance(Format.VIM.writer(), VimWriter)
    with pytest.raises(FormatNotFoundError) as exc_info:
        Format.from_name("docx")
    assert "table" in str(exc_info.value)
