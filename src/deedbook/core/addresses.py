from __future__ import annotations

import re
from typing import Any

from .errors import InvalidAddress

ZERO_ADDRESS = "0x" + "0" * 40

_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")


def normalize_address(value: Any) -> str:
    """Return the canonical (lower-case, `0x`-prefixed) form of an address.

    Accepts mixed-case (checksummed) input and a missing `0x` prefix. Anything
    that is not 20 bytes of hex raises `InvalidAddress`.
    """

    if not isinstance(value, str):
        raise InvalidAddress(f"Invalid address: {value!r}")
    v = value.strip().lower()
    if not v.startswith("0x"):
        v = "0x" + v
    if not _ADDRESS_RE.match(v):
        raise InvalidAddress(f"Invalid address: {value!r}")
    return v


def is_zero_address(value: Any) -> bool:
    return normalize_address(value) == ZERO_ADDRESS
