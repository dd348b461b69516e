"""
Account address helpers.

Addresses are 20-byte identifiers written as 40 hex characters. Input is
accepted with or without a ``0x`` prefix and in any case; the canonical form
used everywhere in the package is lowercase with the ``0x`` prefix.
"""

from __future__ import annotations

import re
from typing import Any

from nodestarter.core.errors import InvalidAddressError

ADDRESS_LENGTH = 20
ZERO_ADDRESS = "0x" + "00" * ADDRESS_LENGTH

_HEX_ADDRESS_RE = re.compile(r"(?:0[xX])?[0-9a-fA-F]{40}")


def is_hex_address(value: Any) -> bool:
    """True if ``value`` is a 40-hex-char string, optionally ``0x``-prefixed."""
    return isinstance(value, str) and _HEX_ADDRESS_RE.fullmatch(value) is not None


def normalize_address(value: str) -> str:
    """Return the canonical ``0x``-prefixed lowercase form of ``value``."""
    if not is_hex_address(value):
        raise InvalidAddressError(message=f"invalid account address: {value!r}")
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    return "0x" + value.lower()


def address_bytes(value: str) -> bytes:
    return bytes.fromhex(normalize_address(value)[2:])
