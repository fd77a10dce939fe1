"""A minimal synchronous event emitter keyed by :class:`EventKind`."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from benangmerah_driver.events.models import EventKind

Listener = Callable[..., Any]


@runtime_checkable
class Listenable(Protocol):
    """Anything a host can subscribe to for driver events."""

    def subscribe(self, kind: EventKind | str, listener: Listener) -> None: ...

    def unsubscribe(self, kind: EventKind | str, listener: Listener) -> None: ...


class Observable:
    """Dispatches events to listeners in subscription order.

    Emitting an event nobody listens to is a no-op. Exceptions raised by a
    listener propagate to whoever called :meth:`emit`.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventKind, list[Listener]] = defaultdict(list)

    def subscribe(self, kind: EventKind | str, listener: Listener) -> None:
        self._listeners[EventKind(kind)].append(listener)

    def unsubscribe(self, kind: EventKind | str, listener: Listener) -> None:
        listeners = self._listeners[EventKind(kind)]
        for i, registered in enumerate(listeners):
            # once() registers a wrapper that remembers the original listener
            if registered == listener or getattr(registered, "listener", None) == listener:
                del listeners[i]
                return

    def once(self, kind: EventKind | str, listener: Listener) -> None:
        """Subscribe *listener* for the next emission of *kind* only."""
        kind = EventKind(kind)

        def wrapper(*payload: Any) -> Any:
            self.unsubscribe(kind, wrapper)
            return listener(*payload)

        wrapper.listener = listener  # type: ignore[attr-defined]
        self.subscribe(kind, wrapper)

    def emit(self, kind: EventKind | str, *payload: Any) -> None:
        kind = EventKind(kind)
        # Snapshot so once-listeners can remove themselves mid-dispatch
        for listener in list(self._listeners[kind]):
            listener(*payload)

    def listener_count(self, kind: EventKind | str) -> int:
        return len(self._listeners[EventKind(kind)])
