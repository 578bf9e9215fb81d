"""Arborette utilities.

Submodules are imported directly (``arborette.utils.tree``,
``arborette.utils.events``...) so that core modules can depend on the event
bus and logger without pulling in the tree renderer.
"""
