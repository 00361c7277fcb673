from __future__ import annotations

from .properties import mount_properties_api

__all__ = ["mount_properties_api"]
