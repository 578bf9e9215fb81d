from __future__ import annotations
"""Minimal YAML → component tree loader.

A declarative alternative to calling ``add`` by hand. Example YAML:

```yaml
name: root
children:
  - L1                  # string → Leaf
  - L2
  - name: branch        # mapping → CompositeNode
    children: [A, B]
```

Usage:
    from arborette.yaml_loader import load_tree
    root = load_tree("tree.yml")
    root.perform_action()
"""
from pathlib import Path
from typing import Any, Dict

import yaml
from jsonschema import validate as _js_validate

from arborette.core.component import Component
from arborette.core.composite import CompositeNode
from arborette.core.leaf import Leaf
from arborette.io.sink import OutputSink

__all__ = ["build_tree", "load_tree"]


# --------------------------------------------------------------------------- #

def _build(data: Any, sink: OutputSink | None) -> Component:  # noqa: D401
    if isinstance(data, str):
        return Leaf(data, sink=sink)
    node = CompositeNode(name=data.get("name", "composite"))
    for item in data.get("children", []):
        node.add(_build(item, sink))
    return node


def build_tree(data: Any, *, sink: OutputSink | None = None) -> Component:  # noqa: D401
    """Validate *data* and turn it into a component tree.

    Every leaf of the resulting tree shares *sink* (console when omitted).
    """
    _js_validate(instance=data, schema=_SCHEMA)
    return _build(data, sink)


def load_tree(path: str | Path, *, sink: OutputSink | None = None) -> Component:  # noqa: D401
    """Load YAML file at *path* into a component tree."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return build_tree(data, sink=sink)


# --------------------------------------------------------------------------- #
# JSON Schema for tree documents
# --------------------------------------------------------------------------- #

_SCHEMA: Dict[str, Any] = {
    "$ref": "#/$defs/node",
    "$defs": {
        "node": {
            "anyOf": [
                {"type": "string"},
                {
                    "type": "object",
                    "required": ["children"],
                    "additionalProperties": False,
                    "properties": {
                        "name": {"type": "string"},
                        "children": {
                            "type": "array",
                            "items": {"$ref": "#/$defs/node"},
                        },
                    },
                },
            ]
        }
    },
}
