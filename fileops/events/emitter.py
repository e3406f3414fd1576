"""Minimal synchronous event emitter.

Listeners run in registration order on the emitting thread. A listener that
raises stops the emit and the exception reaches the caller.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

Listener = Callable[..., Any]


class EventEmitter:
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event: str, listener: Listener) -> "EventEmitter":
        if not event:
            raise ValueError("event name must be a non-empty string")
        self._listeners.setdefault(event, []).append(listener)
        return self

    def off(self, event: str, listener: Listener) -> "EventEmitter":
        listeners = self._listeners.get(event)
        if not listeners:
            return self
        try:
            listeners.remove(listener)
        except ValueError:
            return self
        if not listeners:
            del self._listeners[event]
        return self

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener for ``event``; return True if any ran."""
        listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))
