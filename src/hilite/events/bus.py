"""Synchronous notification bus for highlighter events."""

from __future__ import annotations

import logging
from typing import Callable

from hilite.events.types import HighlighterEvent

logger = logging.getLogger(__name__)

Listener = Callable[[HighlighterEvent], None]


class EventBus:
    """Dispatches events to listeners registered per event class.

    A listener registered for a class also receives events of its
    subclasses, so subscribing to :class:`HighlighterEvent` sees everything.
    Dispatch is synchronous: broader listeners first, then registration
    order. Listener exceptions propagate to the emitter.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; return a function that removes it."""
        self._listeners.setdefault(event_type, []).append(callback)
        return lambda: self.unsubscribe(event_type, callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> None:
        """Remove *callback* from *event_type*, if registered."""
        callbacks = self._listeners.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: HighlighterEvent) -> None:
        logger.debug("Emitting %s", type(event).__name__)
        for event_type in reversed(type(event).__mro__):
            for callback in list(self._listeners.get(event_type, ())):
                callback(event)
