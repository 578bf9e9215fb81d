"""Load tree.yml, show it, then act on it with an in-memory sink."""

from pathlib import Path

from arborette import BufferSink, load_tree
from arborette.utils.logging import show_tree

out = BufferSink()
root = load_tree(Path(__file__).with_name("tree.yml"), sink=out)
show_tree(root)
root.perform_action()
print(out.lines)  # ['L1', 'A', 'B', 'L3']
