"""Best-effort notification of created proofs.

Sinks are observers only. A failing sink is logged and skipped; it never
changes the outcome of the call that produced the event, and events are
not replayed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from nearme_proof.models.events import LocationVerifiedEvent

_logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def publish(self, event: LocationVerifiedEvent) -> None: ...


class CallbackSink:
    """Adapts a plain callable to :class:`EventSink`."""

    def __init__(self, callback: Callable[[LocationVerifiedEvent], None]) -> None:
        self._callback = callback

    def publish(self, event: LocationVerifiedEvent) -> None:
        self._callback(event)


class EventEmitter:
    """Fan out :class:`LocationVerifiedEvent` to every registered sink."""

    def __init__(self, sinks: Iterable[EventSink] = ()) -> None:
        self._sinks: list[EventSink] = list(sinks)

    def add_sink(self, sink: EventSink) -> None:
        self._sinks.append(sink)

    @property
    def sinks(self) -> tuple[EventSink, ...]:
        return tuple(self._sinks)

    def emit(self, event: LocationVerifiedEvent) -> None:
        for sink in self._sinks:
            try:
                sink.publish(event)
            except Exception:
                _logger.warning("Event sink %r failed for %s", sink, event, exc_info=True)
