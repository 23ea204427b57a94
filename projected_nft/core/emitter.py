"""Best-effort event delivery to registered sinks, plus an in-memory event log."""
import logging
import threading
from collections import deque
from typing import Callable, List

from projected_nft.models.events import Event

logger = logging.getLogger(__name__)

Sink = Callable[[Event], None]


class ObservationEmitter:
    """Fans events out to sinks. A failing sink never fails the caller."""

    def __init__(self, sinks: List[Sink] | None = None) -> None:
        self._sinks: List[Sink] = list(sinks or [])
        self._lock = threading.Lock()

    def subscribe(self, sink: Sink) -> None:
        with self._lock:
            self._sinks.append(sink)

    def unsubscribe(self, sink: Sink) -> None:
        with self._lock:
            if sink in self._sinks:
                self._sinks.remove(sink)

    def emit(self, event: Event) -> None:
        with self._lock:
            sinks = list(self._sinks)
        for sink in sinks:
            try:
                sink(event)
            except Exception as e:
                logger.warning("Event %s delivery failed: %s", event.name, e)


class EventLog:
    """Sink keeping the most recent events (oldest dropped first)."""

    def __init__(self, maxlen: int = 256) -> None:
        self._events: deque = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def __call__(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def recent(self, limit: int | None = None) -> List[Event]:
        """Return up to `limit` most recent events, oldest first."""
        with self._lock:
            events = list(self._events)
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return events

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
