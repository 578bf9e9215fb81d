from __future__ import annotations

"""Output sinks leaves write their labels to.

A sink only needs to accept a string and terminate it with a newline; the
core never knows which device sits behind it.
"""

import logging
from typing import List, Optional

from rich.console import Console

from arborette.errors import InvalidArgumentError

__all__ = [
    "OutputSink",
    "ConsoleSink",
    "BufferSink",
    "LogSink",
    "make_sink",
    "SINK_KINDS",
]


class OutputSink:  # noqa: D101 – minimalist base class
    def write_line(self, text: str) -> None:
        """Append *text* followed by a newline."""
        raise NotImplementedError


class ConsoleSink(OutputSink):
    """Write lines verbatim to stdout through a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write_line(self, text: str) -> None:
        # markup/highlight off: a label such as "[L1]" must print unchanged
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class BufferSink(OutputSink):
    """Keep every line in memory; handy for tests and previews."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


class LogSink(OutputSink):
    """Forward each line to a :mod:`logging` logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("arborette.output")
        self.level = level
        # own level: the arborette log level must never filter emitted labels
        self.logger.setLevel(level)

    def write_line(self, text: str) -> None:
        self.logger.log(self.level, "%s", text)


SINK_KINDS = ("console", "log")


def make_sink(kind: str = "console") -> OutputSink:
    """Return a fresh sink for *kind* (``console`` or ``log``)."""
    if kind == "console":
        return ConsoleSink()
    if kind == "log":
        return LogSink()
    raise InvalidArgumentError(f"Unknown sink kind '{kind}'. Expected one of: {', '.join(SINK_KINDS)}")
