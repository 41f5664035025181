from __future__ import annotations
import time
from threading import RLock
from typing import Any, Callable, List, Optional, Tuple

from pylrun.domain import Event
from pylrun.ports import EventBus

Handler = Callable[[Event], Any]


class LocalEventBus(EventBus):
    """
    Synchronous in-process bus for supervisor events (lrun.start / lrun.end / lrun.failed).

    Handlers subscribe by type prefix ("" matches everything) and are called in
    subscription order on the publishing thread. Handler errors propagate to the
    publisher.
    """

    def __init__(self) -> None:
        self._subs: List[Tuple[str, Handler]] = []
        self._lock = RLock()

    def subscribe(self, type_prefix: str, handler: Handler) -> None:
        with self._lock:
            self._subs.append((type_prefix, handler))

    def publish(self, event: Event) -> None:
        with self._lock:
            subs = list(self._subs)
        for prefix, handler in subs:
            if event.type.startswith(prefix):
                handler(event)


def emit(bus: Optional[EventBus], type_: str, payload: dict, source: str) -> None:
    if bus is None:
        return
    bus.publish(Event(type=type_, payload=payload, source=source, ts=time.time()))
