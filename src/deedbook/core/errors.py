"""Rejections raised by the property registry.

Every error aborts the whole operation; no state is written and no event is
emitted. `reason` is the human-readable message surfaced to callers.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for precondition violations."""

    default_reason = "Registry operation rejected"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason or self.default_reason
        super().__init__(self.reason)

    @property
    def name(self) -> str:
        return type(self).__name__


class InvalidId(RegistryError):
    """Id is zero or beyond the number of listings ever created."""

    default_reason = "Invalid property ID"


class DeletedProperty(InvalidId):
    """Id was allocated but the listing has been deleted."""

    default_reason = "Property has been deleted"


class NotOwner(RegistryError):
    default_reason = "Only the owner can modify the property"


class EmptyLocation(RegistryError):
    default_reason = "Location cannot be empty"


class NonPositivePrice(RegistryError):
    default_reason = "Price must be greater than zero"


class ZeroAddressOwner(RegistryError):
    default_reason = "New owner address cannot be zero"


class InvalidAddress(RegistryError):
    default_reason = "Invalid address"


_BY_NAME: dict[str, type[RegistryError]] = {
    cls.__name__: cls
    for cls in (
        InvalidId,
        DeletedProperty,
        NotOwner,
        EmptyLocation,
        NonPositivePrice,
        ZeroAddressOwner,
        InvalidAddress,
    )
}


def error_from_name(name: str, reason: str | None = None) -> RegistryError:
    """Rebuild a rejection from its wire name (as sent by the HTTP API)."""

    cls = _BY_NAME.get(str(name), RegistryError)
    return cls(reason)
