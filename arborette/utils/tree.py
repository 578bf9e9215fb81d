from __future__ import annotations

"""Tree helpers (no side-effects).

iter_nodes(root) yields (depth, node) depth-first, pre-order.
build_rich_tree(root) returns a Rich *Tree* ready for printing.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from rich.markup import escape

from arborette.core.component import Component
from arborette.core.composite import CompositeNode
from arborette.core.leaf import Leaf
from arborette.utils.constants import STYLE, SYMBOLS

__all__ = [
    "RenderOptions",
    "iter_nodes",
    "leaf_labels",
    "build_rich_tree",
]


@dataclass
class RenderOptions:  # noqa: D101
    icons_on: bool = True
    max_children: Optional[int] = None  # None shows every child


# --------------------------------------------------------------------------- #
# Core traverser
# --------------------------------------------------------------------------- #

def iter_nodes(root: Component) -> Iterator[Tuple[int, Component]]:  # noqa: D401
    """Yield *(depth, node)* for every node under *root* (DFS, pre-order)."""
    yield from root.walk_with_depth()


def leaf_labels(root: Component) -> List[str]:
    """Return the labels *root* would emit, in emission order."""
    return [n.label for _, n in iter_nodes(root) if isinstance(n, Leaf)]


# --------------------------------------------------------------------------- #
# Rich tree builder
# --------------------------------------------------------------------------- #

def _label_for(node: Component, opts: RenderOptions) -> str:
    if isinstance(node, CompositeNode):
        icon = SYMBOLS["composite"] if opts.icons_on else ""
        return f"{icon}[{STYLE['composite']}]{escape(node.name)}[/] [dim]({len(node)})[/]"
    if isinstance(node, Leaf):
        icon = SYMBOLS["leaf"] if opts.icons_on else ""
        return f"{icon}[{STYLE['leaf']}]{escape(node.label)}[/]"
    return f"[dim]{escape(type(node).__name__)}[/]"


def build_rich_tree(root: Component, opts: RenderOptions | None = None, title: str = "Component tree"):  # noqa: D401
    """Return a *rich.tree.Tree* visualisation of *root* (side-effect-free)."""
    from rich.tree import Tree  # local import keeps this module lightweight

    opts = opts or RenderOptions()
    tree = Tree(f"[{STYLE['header']}]{escape(title)}[/]")

    def _add(parent: "Tree", node: Component):
        branch = parent.add(_label_for(node, opts))
        if not isinstance(node, CompositeNode):
            return
        children = node.children
        shown = children if opts.max_children is None else children[: opts.max_children]
        for child in shown:
            _add(branch, child)
        hidden = len(children) - len(shown)
        if hidden > 0:
            branch.add(f"[dim]+{hidden} more…[/]")

    _add(tree, root)
    return tree
