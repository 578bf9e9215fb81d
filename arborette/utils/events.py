from __future__ import annotations
"""Ultra-lightweight pub/sub bus for tree notifications.

Example
-------
```python
from arborette.utils.events import subscribe, publish, LabelEmitted

@subscribe(LabelEmitted)
def _on_label(evt: LabelEmitted):
    print(f"leaf wrote {evt.label!r}")

publish(LabelEmitted(label="L1"))
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type, TypeVar

__all__ = [
    "Event",
    "ChildAdded",
    "ChildRemoved",
    "LabelEmitted",
    "subscribe",
    "unsubscribe",
    "publish",
    "clear",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_utcnow)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class ChildAdded(Event):
    parent: str
    child: str


@dataclass(slots=True)
class ChildRemoved(Event):
    parent: str
    child: str


@dataclass(slots=True)
class LabelEmitted(Event):
    label: str


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:
    """Drop *func* from the subscribers of *event_type* (no-op if absent)."""
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def clear() -> None:
    """Forget every subscriber."""
    _REGISTRY.clear()


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A failing subscriber must never break the traversal.
            from arborette.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)
