from __future__ import annotations

from deedbook.core.events import (
    OwnershipTransferred,
    PropertyAdded,
    PropertyDeleted,
    PropertyPriceUpdated,
)
from deedbook.core.projection import event_to_dict
from deedbook.core.registry import PropertyRegistry

OWNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
ADDR1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


def test_add_emits_property_added() -> None:
    reg = PropertyRegistry()

    event = reg.add_property_event(OWNER, "123 Main St", 100)

    assert isinstance(event, PropertyAdded)
    assert event.args() == (1, "123 Main St", 100, OWNER.lower())
    assert event.seq == 1
    assert reg.events() == [event]


def test_transfer_emits_ownership_transferred() -> None:
    reg = PropertyRegistry()
    reg.add_property(OWNER, "123 Main St", 100)

    event = reg.transfer_ownership(OWNER, 1, ADDR1)

    assert isinstance(event, OwnershipTransferred)
    assert event.args() == (1, ADDR1.lower())
    assert reg.events()[-1] == event


def test_price_update_emits_property_price_updated() -> None:
    reg = PropertyRegistry()
    reg.add_property(OWNER, "123 Main St", 100)

    event = reg.update_property_price(OWNER, 1, 200)

    assert isinstance(event, PropertyPriceUpdated)
    assert event.args() == (1, 200)


def test_delete_emits_property_deleted() -> None:
    reg = PropertyRegistry()
    reg.add_property(OWNER, "123 Main St", 100)

    event = reg.delete_property(OWNER, 1)

    assert isinstance(event, PropertyDeleted)
    assert event.args() == (1,)


def test_events_are_logged_in_commit_order() -> None:
    reg = PropertyRegistry()
    reg.add_property(OWNER, "123 Main St", 100)
    reg.add_property(OWNER, "456 Elm St", 150)
    reg.update_property_price(OWNER, 2, 175)
    reg.transfer_ownership(OWNER, 1, ADDR1)
    reg.delete_property(OWNER, 2)

    events = reg.events()
    assert [e.kind for e in events] == [
        "PropertyAdded",
        "PropertyAdded",
        "PropertyPriceUpdated",
        "OwnershipTransferred",
        "PropertyDeleted",
    ]
    assert [e.seq for e in events] == [1, 2, 3, 4, 5]

    tail = reg.events(after=3)
    assert [e.seq for e in tail] == [4, 5]
    assert reg.events(after=5) == []


def test_event_projection_uses_wire_names() -> None:
    reg = PropertyRegistry()
    added = reg.add_property_event(OWNER, "123 Main St", 100)
    moved = reg.transfer_ownership(OWNER, 1, ADDR1)

    d = event_to_dict(added)
    assert d["event"] == "PropertyAdded"
    assert (d["id"], d["location"], d["price"], d["owner"]) == (1, "123 Main St", 100, OWNER.lower())

    d2 = event_to_dict(moved)
    assert d2["event"] == "OwnershipTransferred"
    assert d2["newOwner"] == ADDR1.lower()
    assert d2["seq"] == 2
