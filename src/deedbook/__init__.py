from __future__ import annotations

from .core.addresses import ZERO_ADDRESS, normalize_address
from .core.errors import (
    DeletedProperty,
    EmptyLocation,
    InvalidAddress,
    InvalidId,
    NonPositivePrice,
    NotOwner,
    RegistryError,
    ZeroAddressOwner,
)
from .core.listings import Listing
from .core.registry import PropertyRegistry
from .runtime.server import DeedbookServer, run
from .sdk.client import DeedbookClient
from .sdk.handles import PropertyHandle

__all__ = [
    "run",
    "DeedbookServer",
    "DeedbookClient",
    "PropertyHandle",
    "PropertyRegistry",
    "Listing",
    "ZERO_ADDRESS",
    "normalize_address",
    "RegistryError",
    "InvalidId",
    "DeletedProperty",
    "NotOwner",
    "EmptyLocation",
    "NonPositivePrice",
    "ZeroAddressOwner",
    "InvalidAddress",
]
