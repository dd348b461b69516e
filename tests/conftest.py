# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src/ to sys.path so `import nodestarter` works without installing.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture(autouse=True)
def _reset_container():
    from nodestarter.core.di import Container

    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'nodestarter_test.db'}"


KEYFILE_PREFIX = "UTC--2023-01-05T00-46-15.503776013Z--"


def _keyfile_json(address: str) -> str:
    return (
        '{"address":"' + address + '","crypto":{"cipher":"1","ciphertext":"1","cipherparams":{"iv":"1"},'
        '"kdf":"scrypt","kdfparams":{"dklen":32,"n":1,"p":1,"r":8,"salt":"1"},"mac":"1"},"id":"1","version":3}'
    )


@pytest.fixture
def write_keyfile(tmp_path):
    """Write a v3 keystore file; ``name`` defaults to the UTC--<ts>--<address> convention."""

    def _write(address: str, *, name: str | None = None, content: str | None = None):
        path = tmp_path / (name if name is not None else KEYFILE_PREFIX + address)
        path.write_text(_keyfile_json(address) if content is None else content, encoding="utf-8")
        return path

    return _write
