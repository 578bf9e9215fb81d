"""Arborette: the Composite pattern, small and typed.

Main components:
* `Component`: the shared `perform_action` capability
* `Leaf`: terminal node that writes its label to an output sink
* `CompositeNode`: ordered children, action delegated to each in turn
* `load_tree`: build a tree from YAML
"""

# Version info
__version__ = "0.1.0"

# Core components
from arborette.core.component import Component
from arborette.core.leaf import Leaf
from arborette.core.composite import CompositeNode

# Output sinks
from arborette.io.sink import OutputSink, ConsoleSink, BufferSink, LogSink, make_sink

# Errors
from arborette.errors import ArboretteError, InvalidArgumentError, CycleError, ConfigError

# Construction helpers
from arborette.yaml_loader import build_tree, load_tree
from arborette.driver import build_demo_tree, run_demo

__all__ = [
    # Core classes
    "Component",
    "Leaf",
    "CompositeNode",

    # Sinks
    "OutputSink",
    "ConsoleSink",
    "BufferSink",
    "LogSink",
    "make_sink",

    # Errors
    "ArboretteError",
    "InvalidArgumentError",
    "CycleError",
    "ConfigError",

    # Functions
    "build_tree",
    "load_tree",
    "build_demo_tree",
    "run_demo",
]
