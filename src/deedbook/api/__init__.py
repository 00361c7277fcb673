from __future__ import annotations

from typing import Any, Sequence

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from ..core.projection import event_to_dict
from ..core.registry import PropertyRegistry
from .parsing import parse_after
from .routes import mount_properties_api

DEFAULT_CORS_ORIGINS: tuple[str, ...] = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def create_api_app(
    registry: PropertyRegistry | None = None,
    *,
    cors_origins: Sequence[str] | None = None,
) -> FastAPI:
    """Build the HTTP API around an explicit registry instance.

    A fresh `PropertyRegistry` is created when none is given. The instance is
    also reachable as `app.state.registry`.
    """

    reg = registry if registry is not None else PropertyRegistry()

    app = FastAPI(title="deedbook", version="0.1.0")
    app.state.registry = reg

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_properties_api(app, reg)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events(request: Request) -> dict[str, Any]:
        # Polling endpoint: revision counter plus the event log tail.
        try:
            after = parse_after(request.query_params.get("after"))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "globalRevision": reg.global_revision(),
            "propertyCount": reg.property_count(),
            "events": [event_to_dict(e) for e in reg.events(after=after)],
        }

    return app


__all__ = ["create_api_app", "DEFAULT_CORS_ORIGINS"]
