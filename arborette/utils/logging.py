from __future__ import annotations
"""Rich-backed logging for arborette.

The root logger is configured once with a :class:`rich.logging.RichHandler`
bound to stderr, so log records never mix with the labels leaves write to
stdout.
"""
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

__all__ = [
    "console",
    "log",
    "get",
    "show_tree",
]

console = Console()

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

basicConfig(
    level=INFO,
    format="%(message)s",
    datefmt="%H:%M:%S",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)],
)

log: Logger = getLogger("arborette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the arborette logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("arborette")
    lg.setLevel(lvl)
    return lg


def show_tree(root: Any, **kw) -> None:
    """Print the rich tree view of *root* to the console."""
    from arborette.utils.tree import build_rich_tree  # local import avoids a cycle with core

    console.print(build_rich_tree(root, **kw))
