from __future__ import annotations

from .client import DeedbookClient, EventRecord
from .handles import PropertyHandle, PropertyOps

__all__ = ["DeedbookClient", "EventRecord", "PropertyHandle", "PropertyOps"]
