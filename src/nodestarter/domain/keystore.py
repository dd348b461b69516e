"""
Keystore discovery.

The operator points the node at either a keystore directory (handed to the
external keystore manager, with ``~`` expanded) or a single key file. For a
key file the account address is taken from the
``UTC--<timestamp>--<address>`` filename when possible, otherwise from the
``address`` field of the JSON document.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from nodestarter.core.errors import KeystoreNotFoundError, KeystoreParseError
from nodestarter.domain.address import is_hex_address, normalize_address

logger = logging.getLogger(__name__)

KEYFILE_PREFIX = "UTC"
KEYFILE_SEPARATOR = "--"


@dataclass(frozen=True)
class KeystoreDirectory:
    """Keystore directory; the address is unknown until the keystore is unlocked."""

    path: str

    @property
    def address(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class KeystoreAddress:
    """Single key file whose account address was identified."""

    address: str
    source: str = "filename"  # filename / content

    @property
    def path(self) -> Optional[str]:
        return None


KeystoreInfo = Union[KeystoreDirectory, KeystoreAddress]


def resolve_keystore_path(keystore_path: str) -> KeystoreInfo:
    """
    Locate the keystore and identify its account where possible.

    Raises:
        KeystoreNotFoundError: the path does not exist (or is empty).
        KeystoreParseError: the path is a file but no address could be found.
    """
    if not keystore_path:
        raise KeystoreNotFoundError()

    path = Path(keystore_path).expanduser()
    if not path.exists():
        raise KeystoreNotFoundError(context={"path": str(path)})

    if path.is_dir():
        return KeystoreDirectory(path=str(path))

    address = address_from_keyfile_name(path.name)
    if address is not None:
        logger.debug("Keystore address %s taken from filename %s", address, path.name)
        return KeystoreAddress(address=address, source="filename")

    address = address_from_keyfile_content(path)
    if address is not None:
        logger.debug("Keystore address %s taken from contents of %s", address, path)
        return KeystoreAddress(address=address, source="content")

    raise KeystoreParseError(context={"path": str(path)})


def address_from_keyfile_name(filename: str) -> Optional[str]:
    parts = filename.split(KEYFILE_SEPARATOR)
    if len(parts) != 3 or parts[0] != KEYFILE_PREFIX:
        return None
    candidate = parts[2]
    if not is_hex_address(candidate):
        return None
    return normalize_address(candidate)


def address_from_keyfile_content(path: Path) -> Optional[str]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.debug("Keyfile %s is not readable as JSON: %s", path, exc)
        return None
    if not isinstance(document, dict):
        return None
    candidate = document.get("address")
    if not is_hex_address(candidate):
        return None
    return normalize_address(candidate)
