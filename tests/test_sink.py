import logging

import pytest
from rich.console import Console

from arborette import BufferSink, ConsoleSink, InvalidArgumentError, LogSink, make_sink


def test_buffer_sink_text():
    out = BufferSink()
    out.write_line("a")
    out.write_line("b")
    assert out.text == "a\nb\n"
    out.clear()
    assert out.lines == []


def test_console_sink_writes_verbatim(capsys):
    sink = ConsoleSink(Console(width=10))
    sink.write_line("[bold]a rather long line[/]")
    assert capsys.readouterr().out == "[bold]a rather long line[/]\n"


def test_log_sink(caplog):
    sink = LogSink(logging.getLogger("arborette.test"), level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="arborette.test"):
        sink.write_line("L1")
    assert [r.getMessage() for r in caplog.records] == ["L1"]


def test_make_sink():
    assert isinstance(make_sink("console"), ConsoleSink)
    assert isinstance(make_sink("log"), LogSink)
    with pytest.raises(InvalidArgumentError):
        make_sink("printer")


def test_log_sink_keeps_its_own_level(caplog):
    logging.getLogger("arborette").setLevel(logging.ERROR)
    sink = LogSink()
    with caplog.at_level(logging.DEBUG):
        sink.write_line("L1")
    logging.getLogger("arborette").setLevel(logging.INFO)
    assert [r.getMessage() for r in caplog.records if r.name == "arborette.output"] == ["L1"]
