from __future__ import annotations

from .app import create_app
from .config import Settings
from .logs import configure_logging
from .server import DeedbookServer, run

__all__ = ["create_app", "Settings", "configure_logging", "DeedbookServer", "run"]
