"""Application events raised while dispatching notifications.

Listeners are plain callables registered per event type and invoked
synchronously, in registration order, by `dispatch`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Listener = Callable[[Any], None]

_listeners: dict[type, list[Listener]] = {}


@dataclass(frozen=True)
class SMSSendErrorEvent:
    """The SMS gateway reported an error for `recipient`."""

    recipient: Any
    error: str


def subscribe(event_type: type, listener: Listener) -> None:
    _listeners.setdefault(event_type, []).append(listener)


def unsubscribe(event_type: type, listener: Listener) -> None:
    listeners = _listeners.get(event_type, [])
    if listener in listeners:
        listeners.remove(listener)


def clear_listeners() -> None:
    _listeners.clear()


def dispatch(event: Any) -> int:
    """Deliver `event` to its listeners and return how many were called."""
    listeners = list(_listeners.get(type(event), []))
    for listener in listeners:
        listener(event)
    return len(listeners)
