from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace

from ..addresses import ZERO_ADDRESS, is_zero_address, normalize_address
from ..errors import (
    DeletedProperty,
    EmptyLocation,
    InvalidId,
    NonPositivePrice,
    NotOwner,
    RegistryError,
    ZeroAddressOwner,
)
from ..events import (
    Event,
    EventLog,
    EventT,
    OwnershipTransferred,
    PropertyAdded,
    PropertyDeleted,
    PropertyPriceUpdated,
)
from ..listings import Listing, empty_listing

logger = logging.getLogger(__name__)


class PropertyRegistry:
    """Property listings keyed by an incrementing id, guarded by per-listing ownership.

    Every public method runs entirely under one lock and validates before it
    writes, so an operation either commits its change and appends its event,
    or raises a `RegistryError` and leaves everything untouched.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._listings: dict[int, Listing] = {}
        self._count = 0
        self._global_revision = 0
        self._events = EventLog()

    @staticmethod
    def _validate_price(price: int, *, reason: str) -> int:
        if isinstance(price, bool) or not isinstance(price, int):
            raise TypeError(f"price must be an integer, got {type(price).__name__}")
        if price <= 0:
            raise NonPositivePrice(reason)
        return price

    @staticmethod
    def _validate_location(location: str) -> str:
        if not isinstance(location, str):
            raise TypeError(f"location must be a string, got {type(location).__name__}")
        if location == "":
            raise EmptyLocation()
        return location

    @staticmethod
    def _validate_property_id(property_id: int) -> int:
        if isinstance(property_id, bool) or not isinstance(property_id, int):
            raise TypeError(f"property_id must be an integer, got {type(property_id).__name__}")
        return property_id

    def _require_owned_locked(self, caller: str, property_id: int, *, not_owner_reason: str) -> Listing:
        pid = self._validate_property_id(property_id)
        if pid <= 0 or pid > self._count:
            raise InvalidId()
        listing = self._listings[pid]
        if listing.deleted:
            raise DeletedProperty()
        if normalize_address(caller) != listing.owner:
            raise NotOwner(not_owner_reason)
        return listing

    def _commit_locked(self, listing: Listing, event: EventT) -> EventT:
        self._listings[listing.id] = listing
        self._global_revision += 1
        return self._events.append(event)

    @staticmethod
    def _bumped(listing: Listing, now: float, **changes: object) -> Listing:
        return replace(listing, revision=listing.revision + 1, updated_at=now, **changes)

    def _rejected(self, op: str, err: RegistryError) -> None:
        logger.debug("%s rejected: %s (%s)", op, err.name, err.reason)

    def add_property(self, caller: str, location: str, price: int) -> int:
        """Create a listing owned by `caller` and return its id (ids start at 1)."""

        return self.add_property_event(caller, location, price).id

    def add_property_event(self, caller: str, location: str, price: int) -> PropertyAdded:
        with self._lock:
            try:
                owner = normalize_address(caller)
                loc = self._validate_location(location)
                p = self._validate_price(price, reason="Price must be greater than zero")
            except RegistryError as err:
                self._rejected("add_property", err)
                raise

            pid = self._count + 1
            now = time.time()
            listing = Listing(
                id=pid,
                location=loc,
                price=p,
                owner=owner,
                revision=1,
                created_at=now,
                updated_at=now,
            )
            self._count = pid
            event = self._commit_locked(
                listing,
                PropertyAdded(id=pid, location=loc, price=p, owner=owner, emitted_at=now),
            )
            logger.info("Property %d added by %s at price %d", pid, owner, p)
            return event

    def transfer_ownership(self, caller: str, property_id: int, new_owner: str) -> OwnershipTransferred:
        with self._lock:
            try:
                listing = self._require_owned_locked(
                    caller,
                    property_id,
                    not_owner_reason="Only the owner can transfer ownership",
                )
                target = normalize_address(new_owner)
                if is_zero_address(target):
                    raise ZeroAddressOwner()
            except RegistryError as err:
                self._rejected("transfer_ownership", err)
                raise

            now = time.time()
            event = self._commit_locked(
                self._bumped(listing, now, owner=target),
                OwnershipTransferred(id=listing.id, new_owner=target, emitted_at=now),
            )
            logger.info("Property %d transferred from %s to %s", listing.id, listing.owner, target)
            return event

    def update_property_price(self, caller: str, property_id: int, new_price: int) -> PropertyPriceUpdated:
        with self._lock:
            try:
                listing = self._require_owned_locked(
                    caller,
                    property_id,
                    not_owner_reason="Only the owner can update the price",
                )
                p = self._validate_price(new_price, reason="New price must be greater than zero")
            except RegistryError as err:
                self._rejected("update_property_price", err)
                raise

            now = time.time()
            event = self._commit_locked(
                self._bumped(listing, now, price=p),
                PropertyPriceUpdated(id=listing.id, new_price=p, emitted_at=now),
            )
            logger.info("Property %d repriced from %d to %d", listing.id, listing.price, p)
            return event

    def delete_property(self, caller: str, property_id: int) -> PropertyDeleted:
        """Soft-delete: zero the fields in place. The id stays allocated and the count is unchanged."""

        with self._lock:
            try:
                listing = self._require_owned_locked(
                    caller,
                    property_id,
                    not_owner_reason="Only the owner can delete the property",
                )
            except RegistryError as err:
                self._rejected("delete_property", err)
                raise

            now = time.time()
            event = self._commit_locked(
                self._bumped(listing, now, location="", price=0, owner=ZERO_ADDRESS, deleted=True),
                PropertyDeleted(id=listing.id, emitted_at=now),
            )
            logger.info("Property %d deleted by %s", listing.id, listing.owner)
            return event

    def properties(self, property_id: int) -> Listing:
        """Read a listing. Ids never allocated (including 0) return the empty record."""

        with self._lock:
            pid = self._validate_property_id(property_id)
            listing = self._listings.get(pid)
            if listing is None:
                return empty_listing()
            return listing

    def owner_of(self, property_id: int) -> str:
        return self.properties(property_id).owner

    def property_count(self) -> int:
        with self._lock:
            return self._count

    def global_revision(self) -> int:
        with self._lock:
            return self._global_revision

    def events(self, *, after: int = 0) -> list[Event]:
        return self._events.since(after)
