""" Unit tests for the command-line, config, logging and entry point utilities. """

import io
import sys

import pytest

from glyphmap.options import GlyphmapOptions
from glyphmap.util.cmdline import CmdlineError, CmdlineOptions
from glyphmap.util.config import ConfigIO, eval_str
from glyphmap.util.entrypoints import EntryPoint, EntryPointSelector, shift_argv
from glyphmap.util.exception import ExceptionLogger
from glyphmap.util.log import StreamLogger


def test_cmdline_options() -> None:
    opts = CmdlineOptions("Test app.")
    opts.add("name", "default", "A string.")
    opts.add("count", 1, "A number.")
    opts.add("flag", False, "A switch.")
    opts.add("files", [], "Several strings.")
    assert opts.name == "default"
    opts.parse(["script", "extra", "--name=x=y", "--count", "5", "--flag", "--files", "a", "b", "--unknown", "z"])
    assert opts.name == "x=y"
    assert opts.count == 5
    assert opts.flag is True
    assert opts.files == ["a", "b"]
    assert opts.extras() == ["extra", "--unknown", "z"]
    with pytest.raises(AttributeError):
        opts.nonexistent


@pytest.mark.parametrize("arg, value", [("--flag=true", True), ("--flag=No", False), ("--flag", True)])
def test_cmdline_bool(arg, value) -> None:
    opts = CmdlineOptions()
    opts.add("flag", False)
    opts.parse(["script", arg])
    assert opts.flag is value


def test_cmdline_errors() -> None:
    opts = CmdlineOptions()
    opts.add("flag", False)
    opts.add("name", "")
    with pytest.raises(ValueError):
        opts.parse(["script", "--flag=maybe"])
    with pytest.raises(CmdlineError):
        opts.parse(["script", "--name"])


def test_cmdline_positional_after_options() -> None:
    """ A flag takes no argument after it, and a single-value option takes only one. """
    opts = CmdlineOptions()
    opts.add("flag", False)
    opts.add("name", "")
    opts.parse(["script", "--flag", "a;", "--name", "x", "b", "c"])
    assert opts.flag is True
    assert opts.name == "x"
    assert opts.extras() == ["a;", "b", "c"]
    opts.parse(["script", "--name=y", "--", "--flag", "-a"])
    assert opts.name == "y"
    assert opts.extras() == ["--flag", "-a"]


def test_help_text() -> None:
    opts = GlyphmapOptions("Help test.")
    text = opts.format_help("glyphmap")
    assert text.startswith("Help test.\nusage: glyphmap")
    assert "--layout" in text
    assert "--postfix" in text
    assert "-h, --help" in text


def test_glyphmap_option_defaults() -> None:
    opts = GlyphmapOptions()
    opts.parse(["glyphmap"])
    assert opts.layout == "greek"
    assert opts.format == "list"
    assert opts.section == ""
    assert opts.postfix is False
    assert opts.log_path() == ""


def test_config_io(tmp_path) -> None:
    path = tmp_path / "test.cfg"
    path.write_text("[graphviz]\ncluster_bgcolor = red\nsize = 3\nflag = False\n", encoding="utf-8")
    options = ConfigIO().read(str(path))
    assert options == {"graphviz": {"cluster_bgcolor": "red", "size": 3, "flag": False}}
    assert eval_str("[1, 2]") == [1, 2]
    assert eval_str("plain words") == "plain words"


def test_stream_logger() -> None:
    first = io.StringIO()
    second = io.StringIO()
    logger = StreamLogger(first, repeat_mark="*")
    logger.add_stream(second)
    logger.log("hello")
    logger.log("hello")
    logger.log("bye")
    assert first.getvalue() == second.getvalue() == "hello\n*\nbye\n"
    stamped = io.StringIO()
    StreamLogger(stamped, time_fmt="[stamp] ").log("message")
    assert stamped.getvalue() == "[stamp] message\n"


def test_exception_logger() -> None:
    messages = []
    exc_logger = ExceptionLogger(messages.append)
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        exc_logger.log_current(e)
    assert len(messages) == 1
    assert "RuntimeError: boom" in messages[0]


def test_shift_argv(monkeypatch) -> None:
    monkeypatch.setattr(sys, "argv", ["prog", "query", "--layout=latin"])
    assert shift_argv() == "query"
    assert sys.argv == ["prog query", "--layout=latin"]
    monkeypatch.setattr(sys, "argv", ["prog", "--layout=latin"])
    assert shift_argv() == ""
    assert sys.argv == ["prog", "--layout=latin"]


def test_entry_point_selector(capsys) -> None:
    entry_points = {"write":    EntryPoint("glyphmap.writer.base", "snake_case", "Write."),
                    "query":    EntryPoint("glyphmap.writer.base", "kebab_case", "Query."),
                    "question": EntryPoint("glyphmap.writer.base", "kebab_case", "Ask.")}
    selector = EntryPointSelector(entry_points, default_mode="write")
    assert selector.load("w")("Some Name") == "some_name"
    assert selector.load("")("Some Name") == "some_name"
    assert selector.load("query")("Some Name") == "some-name"
    assert selector.load("qu")() == 2
    assert "multiple matches" in capsys.readouterr().err
    assert selector.load("zzz")() == 2
    err = capsys.readouterr().err
    assert 'No matches for operation "zzz"' in err
    assert "question - Ask." in err
