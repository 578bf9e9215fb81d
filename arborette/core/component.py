from __future__ import annotations

"""Base Component class for arborette trees."""

from typing import Iterator, Tuple

__all__ = ["Component"]


class Component:  # noqa: D101 – minimalist base class
    def perform_action(self) -> None:
        """Run the node's action (leaves emit, composites delegate)."""
        raise NotImplementedError

    def walk_with_depth(self, depth: int = 0) -> Iterator[Tuple[int, "Component"]]:
        """Yield *(depth, node)* for this node and its descendants, pre-order.

        Variants that hold children override this one method.
        """
        yield depth, self

    def walk(self) -> Iterator["Component"]:  # depth-first iteration
        for _, node in self.walk_with_depth():
            yield node
