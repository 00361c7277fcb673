from __future__ import annotations

from dataclasses import dataclass

from .addresses import ZERO_ADDRESS


@dataclass(frozen=True, kw_only=True)
class Listing:
    """One property record in the registry.

    Notes:
    - Ids start at 1; `id == 0` is the record returned for ids that were never allocated.
    - Deletion keeps the slot (and its id) but zeroes location/price/owner and sets `deleted`.
    - `revision` is bumped on every committed change to this listing.
    """

    id: int
    location: str
    price: int
    owner: str
    revision: int = 0
    created_at: float = 0.0
    updated_at: float = 0.0
    deleted: bool = False

    @property
    def live(self) -> bool:
        return self.id > 0 and not self.deleted

    def as_tuple(self) -> tuple[str, int, str]:
        return (self.location, self.price, self.owner)


def empty_listing(property_id: int = 0) -> Listing:
    return Listing(id=int(property_id), location="", price=0, owner=ZERO_ADDRESS)
