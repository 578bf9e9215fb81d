import pytest
from rich.console import Console

from arborette import BufferSink, Component, CompositeNode, CycleError, Leaf
from arborette.utils.tree import RenderOptions, build_rich_tree, iter_nodes, leaf_labels

out = BufferSink()
a, b, c = (Leaf(x, sink=out) for x in ("A", "B", "C"))
branch = CompositeNode(name="branch", children=[a, b])
root = CompositeNode(name="root", children=[branch, c])


def _render(tree) -> str:
    console = Console(width=60, record=True, force_terminal=False)
    console.print(tree)
    return console.export_text()


def test_iter_nodes_depths():
    assert [(d, n) for d, n in iter_nodes(root)] == [(0, root), (1, branch), (2, a), (2, b), (1, c)]


def test_leaf_labels_match_emission_order():
    out.clear()
    root.perform_action()
    assert leaf_labels(root) == out.lines == ["A", "B", "C"]


def test_ascii_tree():
    text = _render(build_rich_tree(root, opts=RenderOptions(icons_on=False)))
    assert "Component tree" in text
    for name in ("root", "branch", "A", "B", "C"):
        assert name in text
    assert "🍃" not in text


def test_unicode_tree():
    text = _render(build_rich_tree(root, opts=RenderOptions(icons_on=True)))
    assert "🍃" in text and "🌿" in text


def test_max_children_collapses():
    wide = CompositeNode(name="wide", children=[Leaf(str(i), sink=out) for i in range(5)])
    text = _render(build_rich_tree(wide, opts=RenderOptions(icons_on=False, max_children=2)))
    assert "+3 more" in text


def test_labels_are_escaped():
    text = _render(build_rich_tree(Leaf("[red]x[/red]", sink=out)))
    assert "[red]x[/red]" in text


class _Pair(Component):
    """A component variant with two fixed children."""

    def __init__(self, first, second):
        self.first, self.second = first, second

    def perform_action(self) -> None:
        self.first.perform_action()
        self.second.perform_action()

    def walk_with_depth(self, depth: int = 0):
        yield depth, self
        yield from self.first.walk_with_depth(depth + 1)
        yield from self.second.walk_with_depth(depth + 1)


def test_iter_nodes_follows_custom_variant():
    x, y = Leaf("x", sink=out), Leaf("y", sink=out)
    pair = _Pair(x, y)
    holder = CompositeNode(name="holder", children=[pair])
    assert list(iter_nodes(holder)) == [(0, holder), (1, pair), (2, x), (2, y)]
    assert leaf_labels(holder) == ["x", "y"]
    with pytest.raises(CycleError):
        holder.add(_Pair(holder, y))
