"""Synchronous publish/subscribe bus for skin change notifications.

``SkinService`` publishes ``SkinEvent`` values with small summary payloads;
widgets and previews subscribe by event name.

 - A failing handler never breaks the publish cycle; the failure is recorded
   in ``errors`` and logged at debug level.
 - ``once=True`` subscriptions are dropped after their first successful call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol, Tuple, Union

_logger = logging.getLogger(__name__)

__all__ = [
    "SkinEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class SkinEvent(str, Enum):
    SKIN_CHANGED = "skin_changed"
    BEHAVIOR_CHANGED = "behavior_changed"
    SKIN_REMOVED = "skin_removed"
    SKIN_APPLY_SLOW = "skin_apply_slow"


EventName = Union[str, SkinEvent]


def _key(name: EventName) -> str:
    return name.value if isinstance(name, SkinEvent) else name


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Dispatches events to subscribers in subscription order.

    Handlers run against a snapshot of the subscriber list taken under the
    lock and are called with the lock released, so a handler may subscribe
    or unsubscribe while an event is being delivered.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[Tuple[Event, BaseException]] = []

    def subscribe(self, name: EventName, handler: EventHandler, *, once: bool = False) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        sub.cancel()
        with self._lock:
            remaining = [s for s in self._subs.get(sub.event, ()) if s is not sub]
            if remaining:
                self._subs[sub.event] = remaining
            else:
                self._subs.pop(sub.event, None)

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    def publish(self, name: EventName, payload: Any = None) -> Event:
        evt = Event(name=_key(name), payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = [s for s in self._subs.get(evt.name, ()) if s.active]
        for sub in subs:
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - one handler must not starve the rest
                _logger.debug("Handler for %s failed: %r", evt.name, exc)
                with self._lock:
                    self._errors.append((evt, exc))
                continue
            if sub.once:
                self.unsubscribe(sub)
        return evt

    def subscriber_count(self, name: EventName) -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    def list_events(self) -> List[str]:
        with self._lock:
            return list(self._subs.keys())

    @property
    def errors(self) -> List[Tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
