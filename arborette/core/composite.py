from __future__ import annotations
"""CompositeNode – container node that delegates its action to children.

Children are kept in insertion order; the same reference may appear more than
once. ``remove`` matches by identity, never by equality.
"""
from typing import Iterable, Iterator, List, Tuple

from arborette.core.component import Component
from arborette.errors import CycleError, InvalidArgumentError
from arborette.utils.events import ChildAdded, ChildRemoved, publish
from arborette.utils.logging import log

__all__ = ["CompositeNode"]


def _describe(node: Component) -> str:
    label = getattr(node, "label", None)
    if label is not None:
        return label
    return getattr(node, "name", type(node).__name__)


class CompositeNode(Component):  # noqa: D101
    def __init__(self, *, name: str = "composite", children: Iterable[Component] | None = None):
        self.name = name
        self._children: List[Component] = []
        for child in children or ():
            self.add(child)

    # -------------------------------------------------- #

    @property
    def children(self) -> Tuple[Component, ...]:
        """Snapshot of the current children, in order."""
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._children))

    def __contains__(self, node: object) -> bool:
        return any(c is node for c in self._children)

    def __lshift__(self, child: Component) -> "CompositeNode":
        """``root << Leaf("a") << Leaf("b")`` adds both and returns *root*."""
        self.add(child)
        return self

    def __repr__(self) -> str:
        return f"CompositeNode({self.name!r}, children={len(self._children)})"

    def walk_with_depth(self, depth: int = 0) -> Iterator[Tuple[int, Component]]:
        yield depth, self
        for child in self._children:
            yield from child.walk_with_depth(depth + 1)

    # -------------------------------------------------- #

    def add(self, child: Component) -> None:
        """Append *child* to the end of the sequence."""
        if child is None:
            raise InvalidArgumentError("Cannot add None as a child")
        if not isinstance(child, Component):
            raise InvalidArgumentError(
                f"Child must be a Component, got {type(child).__name__}"
            )
        # self must not already sit somewhere below child
        if any(node is self for node in child.walk()):
            raise CycleError(
                f"Adding {_describe(child)!r} to {self.name!r} would create a cycle"
            )
        self._children.append(child)
        log.debug("%s: added %s (%d children)", self.name, _describe(child), len(self._children))
        publish(ChildAdded(parent=self.name, child=_describe(child)))

    def remove(self, child: Component) -> None:
        """Remove the first entry that *is* child; absent children are ignored."""
        for idx, existing in enumerate(self._children):
            if existing is child:
                del self._children[idx]
                log.debug("%s: removed %s (%d children)", self.name, _describe(child), len(self._children))
                publish(ChildRemoved(parent=self.name, child=_describe(child)))
                return

    def perform_action(self) -> None:
        log.debug("%s: delegating to %d children", self.name, len(self._children))
        for child in list(self._children):
            child.perform_action()
