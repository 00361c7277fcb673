from __future__ import annotations

from typing import Any, NoReturn

from fastapi import FastAPI, HTTPException, Request

from ...core.errors import InvalidId, NotOwner, RegistryError
from ...core.projection import event_to_dict, listing_to_dict
from ...core.registry import PropertyRegistry
from ..parsing import parse_add_body, parse_caller, parse_int


def _raise_rejection(err: RegistryError) -> NoReturn:
    if isinstance(err, InvalidId):
        status = 404
    elif isinstance(err, NotOwner):
        status = 403
    else:
        status = 400
    raise HTTPException(status_code=status, detail={"error": err.name, "reason": err.reason})


def mount_properties_api(app: FastAPI, registry: PropertyRegistry) -> None:
    """Mount the property endpoints, bound to `registry`.

    The caller identity for mutating routes comes from the `X-Caller` header.
    Rejections are returned as `{"detail": {"error": <name>, "reason": <text>}}`.
    """

    @app.post("/api/properties")
    def add_property(body: dict, request: Request) -> dict[str, Any]:
        try:
            caller = parse_caller(request.headers)
            location, price = parse_add_body(body)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            event = registry.add_property_event(caller, location, price)
        except RegistryError as err:
            _raise_rejection(err)
        return {"ok": True, "id": int(event.id), "event": event_to_dict(event)}

    @app.get("/api/properties/count")
    def property_count() -> dict[str, int]:
        return {"propertyCount": registry.property_count()}

    @app.get("/api/properties/{property_id}")
    def get_property(property_id: int) -> dict[str, Any]:
        return listing_to_dict(registry.properties(property_id))

    @app.get("/api/properties/{property_id}/owner")
    def get_owner(property_id: int) -> dict[str, Any]:
        return {"id": property_id, "owner": registry.owner_of(property_id)}

    @app.patch("/api/properties/{property_id}/owner")
    def transfer_ownership(property_id: int, body: dict, request: Request) -> dict[str, Any]:
        try:
            caller = parse_caller(request.headers)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        new_owner = body.get("newOwner")
        if new_owner is None:
            raise HTTPException(status_code=400, detail="Missing newOwner")

        try:
            event = registry.transfer_ownership(caller, property_id, str(new_owner))
        except RegistryError as err:
            _raise_rejection(err)
        return {"ok": True, "event": event_to_dict(event)}

    @app.patch("/api/properties/{property_id}/price")
    def update_price(property_id: int, body: dict, request: Request) -> dict[str, Any]:
        try:
            caller = parse_caller(request.headers)
            price = parse_int(body.get("price"), field="price")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            event = registry.update_property_price(caller, property_id, price)
        except RegistryError as err:
            _raise_rejection(err)
        return {"ok": True, "event": event_to_dict(event)}

    @app.delete("/api/properties/{property_id}")
    def delete_property(property_id: int, request: Request) -> dict[str, Any]:
        try:
            caller = parse_caller(request.headers)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            event = registry.delete_property(caller, property_id)
        except RegistryError as err:
            _raise_rejection(err)
        return {"ok": True, "event": event_to_dict(event)}
