from __future__ import annotations

"""Demo driver: one composite root with three leaves, acted on once."""

from typing import Callable

from rich.console import Console

from arborette.core.component import Component
from arborette.core.composite import CompositeNode
from arborette.core.leaf import Leaf
from arborette.io.sink import OutputSink
from arborette.utils.logging import log

__all__ = ["DEMO_LABELS", "build_demo_tree", "run_demo", "wait_for_key"]

DEMO_LABELS = ("L1", "L2", "L3")

# prompt goes to stderr so stdout only carries emitted labels
_prompt_console = Console(stderr=True)


def wait_for_key() -> None:
    """Block until the user presses Enter; end of input counts as a key."""
    try:
        _prompt_console.input("Press Enter to continue...", markup=False)
    except EOFError:
        _prompt_console.print()


def build_demo_tree(sink: OutputSink | None = None) -> CompositeNode:
    """Return a root composite holding ``Leaf("L1")``, ``Leaf("L2")``, ``Leaf("L3")``."""
    root = CompositeNode(name="root")
    for label in DEMO_LABELS:
        root.add(Leaf(label, sink=sink))
    return root


def run_demo(
    sink: OutputSink | None = None,
    *,
    pause: bool = False,
    wait: Callable[[], None] | None = None,
) -> Component:
    """Build the demo tree, act on it once and optionally wait for a key.

    *wait* replaces :func:`wait_for_key` when given.
    """
    component: Component = build_demo_tree(sink)
    log.debug("running demo tree")
    component.perform_action()
    if pause:
        (wait or wait_for_key)()
    return component
