from __future__ import annotations

from .addresses import ZERO_ADDRESS, is_zero_address, normalize_address
from .errors import (
    DeletedProperty,
    EmptyLocation,
    InvalidAddress,
    InvalidId,
    NonPositivePrice,
    NotOwner,
    RegistryError,
    ZeroAddressOwner,
    error_from_name,
)
from .events import (
    Event,
    EventBase,
    EventLog,
    OwnershipTransferred,
    PropertyAdded,
    PropertyDeleted,
    PropertyPriceUpdated,
)
from .listings import Listing, empty_listing
from .projection import event_to_dict, listing_to_dict
from .registry import PropertyRegistry

__all__ = [
    "ZERO_ADDRESS",
    "is_zero_address",
    "normalize_address",
    "RegistryError",
    "InvalidId",
    "DeletedProperty",
    "NotOwner",
    "EmptyLocation",
    "NonPositivePrice",
    "ZeroAddressOwner",
    "InvalidAddress",
    "error_from_name",
    "Event",
    "EventBase",
    "EventLog",
    "PropertyAdded",
    "OwnershipTransferred",
    "PropertyPriceUpdated",
    "PropertyDeleted",
    "Listing",
    "empty_listing",
    "listing_to_dict",
    "event_to_dict",
    "PropertyRegistry",
]
