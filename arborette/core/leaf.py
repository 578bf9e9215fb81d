from __future__ import annotations

"""Leaf – terminal node that writes its label when asked to act."""

from arborette.core.component import Component
from arborette.errors import InvalidArgumentError
from arborette.io.sink import ConsoleSink, OutputSink
from arborette.utils.events import LabelEmitted, publish

__all__ = ["Leaf"]


class Leaf(Component):
    """A terminal node identified by *label*.

    The label is fixed at construction. ``perform_action`` writes it to *sink*
    exactly once per call and touches nothing else.
    """

    def __init__(self, label: str, *, sink: OutputSink | None = None):
        if label is None:
            raise InvalidArgumentError("Leaf label must not be None")
        if not isinstance(label, str):
            raise InvalidArgumentError(f"Leaf label must be a str, got {type(label).__name__}")
        self._label = label
        self.sink = sink if sink is not None else ConsoleSink()

    @property
    def label(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"Leaf({self._label!r})"

    # -------------------------------------------------- #

    def perform_action(self) -> None:
        self.sink.write_line(self._label)
        publish(LabelEmitted(label=self._label))
