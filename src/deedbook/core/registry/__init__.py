from __future__ import annotations

from .service import PropertyRegistry

__all__ = ["PropertyRegistry"]
