from __future__ import annotations

import pytest

from deedbook.core.addresses import ZERO_ADDRESS, is_zero_address, normalize_address
from deedbook.core.errors import InvalidAddress, error_from_name, NotOwner, RegistryError


def test_normalize_address_lowercases_checksummed_input() -> None:
    addr = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
    assert normalize_address(addr) == addr.lower()
    assert normalize_address("  " + addr + " ") == addr.lower()


def test_normalize_address_adds_missing_prefix() -> None:
    assert normalize_address("ab" * 20) == "0x" + "ab" * 20


@pytest.mark.parametrize("value", ["", "0x", "0x1234", "0x" + "g" * 40, "0x" + "a" * 41, None, 42])
def test_normalize_address_rejects_malformed(value: object) -> None:
    with pytest.raises(InvalidAddress):
        normalize_address(value)


def test_zero_address() -> None:
    assert ZERO_ADDRESS == "0x0000000000000000000000000000000000000000"
    assert is_zero_address("0x" + "0" * 40)
    assert is_zero_address("0" * 40)
    assert not is_zero_address("0x" + "0" * 39 + "1")
    with pytest.raises(InvalidAddress):
        is_zero_address("0x0")


def test_error_from_name_rebuilds_known_errors() -> None:
    err = error_from_name("NotOwner", "Only the owner can update the price")
    assert isinstance(err, NotOwner)
    assert err.reason == "Only the owner can update the price"
    assert str(err) == err.reason

    unknown = error_from_name("Whatever", None)
    assert type(unknown) is RegistryError
    assert unknown.reason == "Registry operation rejected"
