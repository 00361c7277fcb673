from __future__ import annotations

from typing import Any, Protocol, Self


class PropertyOps(Protocol):
    @property
    def caller(self) -> str | None: ...
    def get_property(self, property_id: int) -> dict[str, Any]: ...
    def transfer_ownership(self, property_id: int, new_owner: str) -> dict[str, Any]: ...
    def update_property_price(self, property_id: int, new_price: int) -> dict[str, Any]: ...
    def delete_property(self, property_id: int) -> dict[str, Any]: ...


class PropertyHandle(int):
    """The id of a listing, bound to the ops (client or local server) that created it.

    Reads always go back to the registry, so a handle never caches stale state.
    Mutations act as the ops' current caller.
    """

    def __new__(cls, property_id: int, *, ops: PropertyOps) -> Self:
        obj = int.__new__(cls, int(property_id))
        obj._ops = ops
        return obj

    @property
    def id(self) -> int:
        return int(self)

    @property
    def listing(self) -> dict[str, Any]:
        return self._ops.get_property(self.id)

    @property
    def location(self) -> str:
        return str(self.listing.get("location", ""))

    @property
    def price(self) -> int:
        return int(self.listing.get("price", 0))

    @property
    def owner(self) -> str:
        value = self.listing.get("owner")
        if not isinstance(value, str):
            raise ValueError(f"Property {self.id} does not expose a valid owner")
        return value

    @property
    def revision(self) -> int:
        return int(self.listing.get("revision", 0))

    @property
    def deleted(self) -> bool:
        return bool(self.listing.get("deleted", False))

    def transfer_to(self, new_owner: str) -> Self:
        self._ops.transfer_ownership(self.id, new_owner)
        return self

    def set_price(self, new_price: int) -> Self:
        self._ops.update_property_price(self.id, new_price)
        return self

    def delete(self) -> None:
        self._ops.delete_property(self.id)

    def __repr__(self) -> str:
        return f"PropertyHandle({self.id})"
