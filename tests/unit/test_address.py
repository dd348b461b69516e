from __future__ import annotations

import pytest

from nodestarter.core.errors import InvalidAddressError
from nodestarter.domain.address import ZERO_ADDRESS, address_bytes, is_hex_address, normalize_address


@pytest.mark.parametrize(
    "raw",
    [
        "0x00000000000000000000000000000000000000aB",
        "0X00000000000000000000000000000000000000Ab",
        "00000000000000000000000000000000000000ab",
    ],
)
def test_normalize_address_forms(raw):
    assert normalize_address(raw) == "0x00000000000000000000000000000000000000ab"


@pytest.mark.parametrize("raw", ["", "0x", "0x1234", "0x" + "g" * 40, "0x" + "0" * 41, None, 42, "0x" + "0" * 40 + "\n"])
def test_invalid_addresses(raw):
    assert is_hex_address(raw) is False
    if isinstance(raw, str):
        with pytest.raises(InvalidAddressError):
            normalize_address(raw)


def test_address_bytes():
    assert address_bytes(ZERO_ADDRESS) == bytes(20)
    assert address_bytes("0x" + "ff" * 20) == b"\xff" * 20
