from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import PropertyRegistry
from .config import Settings, load_settings


def create_app(registry: PropertyRegistry | None = None, settings: Settings | None = None) -> FastAPI:
    """Create the full app for serving: API bound to `registry`, CORS from settings.

    For uvicorn: `uvicorn --factory deedbook.runtime.app:create_app`.
    """

    s = settings if settings is not None else load_settings()
    return create_api_app(registry, cors_origins=s.cors_origins)
