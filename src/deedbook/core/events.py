from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import ClassVar, TypeVar, Union


@dataclass(frozen=True, kw_only=True)
class EventBase:
    """A notification emitted after a committed state transition.

    `seq` is the 1-based position in the registry's event log. It is assigned
    by `EventLog.append`, so freshly built events carry `seq == 0`.
    """

    kind: ClassVar[str] = "Event"
    seq: int = 0
    emitted_at: float = 0.0

    def args(self) -> tuple[object, ...]:
        raise NotImplementedError


@dataclass(frozen=True, kw_only=True)
class PropertyAdded(EventBase):
    kind: ClassVar[str] = "PropertyAdded"
    id: int
    location: str
    price: int
    owner: str

    def args(self) -> tuple[object, ...]:
        return (self.id, self.location, self.price, self.owner)


@dataclass(frozen=True, kw_only=True)
class OwnershipTransferred(EventBase):
    kind: ClassVar[str] = "OwnershipTransferred"
    id: int
    new_owner: str

    def args(self) -> tuple[object, ...]:
        return (self.id, self.new_owner)


@dataclass(frozen=True, kw_only=True)
class PropertyPriceUpdated(EventBase):
    kind: ClassVar[str] = "PropertyPriceUpdated"
    id: int
    new_price: int

    def args(self) -> tuple[object, ...]:
        return (self.id, self.new_price)


@dataclass(frozen=True, kw_only=True)
class PropertyDeleted(EventBase):
    kind: ClassVar[str] = "PropertyDeleted"
    id: int

    def args(self) -> tuple[object, ...]:
        return (self.id,)


Event = Union[PropertyAdded, OwnershipTransferred, PropertyPriceUpdated, PropertyDeleted]

EventT = TypeVar("EventT", PropertyAdded, OwnershipTransferred, PropertyPriceUpdated, PropertyDeleted)


class EventLog:
    """Append-only, ordered record of emitted notifications.

    The log is never truncated: it lives as long as the registry, and
    `since(0)` copies every event. Pollers should pass the last `seq` they saw.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._events: list[Event] = []

    def append(self, event: EventT) -> EventT:
        with self._lock:
            stored = replace(event, seq=len(self._events) + 1)
            self._events.append(stored)
            return stored

    def since(self, after: int = 0) -> list[Event]:
        with self._lock:
            start = max(0, int(after))
            return list(self._events[start:])
