from __future__ import annotations

from typing import Any

from .events import EventBase, OwnershipTransferred, PropertyAdded, PropertyDeleted, PropertyPriceUpdated
from .listings import Listing


def listing_to_dict(listing: Listing) -> dict[str, Any]:
    return {
        "id": int(listing.id),
        "location": str(listing.location),
        "price": int(listing.price),
        "owner": str(listing.owner),
        "revision": int(listing.revision),
        "createdAt": float(listing.created_at),
        "updatedAt": float(listing.updated_at),
        "deleted": bool(listing.deleted),
    }


def event_to_dict(event: EventBase) -> dict[str, Any]:
    base: dict[str, Any] = {
        "seq": int(event.seq),
        "event": event.kind,
        "emittedAt": float(event.emitted_at),
    }

    if isinstance(event, PropertyAdded):
        return {
            **base,
            "id": int(event.id),
            "location": str(event.location),
            "price": int(event.price),
            "owner": str(event.owner),
        }

    if isinstance(event, OwnershipTransferred):
        return {**base, "id": int(event.id), "newOwner": str(event.new_owner)}

    if isinstance(event, PropertyPriceUpdated):
        return {**base, "id": int(event.id), "newPrice": int(event.new_price)}

    if isinstance(event, PropertyDeleted):
        return {**base, "id": int(event.id)}

    raise ValueError(f"Unsupported event type: {event.kind}")
