"""Composite demo: three leaves under one root, acted on once."""

from arborette import Component, CompositeNode, Leaf

root = CompositeNode(name="root")
root.add(Leaf("L1"))
root.add(Leaf("L2"))
root.add(Leaf("L3"))

component: Component = root
component.perform_action()
