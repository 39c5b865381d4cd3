"""Shared test fixtures for refcheck."""

import hashlib
from pathlib import Path

import pytest

from refcheck.config.models import RefcheckConfig

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def write_blob(directory: Path, data: bytes) -> Path:
    """Write *data* under its own digest, like a content-addressed store."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / sha256_hex(data)
    path.write_bytes(data)
    return path


@pytest.fixture
def sample_config():
    return RefcheckConfig()


@pytest.fixture
def mixed_store(tmp_path):
    """The three-file scenario: one intact, one corrupted, one badly named."""
    root = tmp_path / "store"
    (root / "a").mkdir(parents=True)
    (root / "b").mkdir()
    (root / "a" / EMPTY_SHA256).write_bytes(b"")
    (root / "b" / EMPTY_SHA256).write_bytes(b"x")
    (root / "not-a-hash").write_bytes(b"whatever")
    return root


@pytest.fixture
def restic_like_repo(tmp_path):
    """A small restic-style layout with nested packs and housekeeping files."""
    root = tmp_path / "repo"
    (root / "data" / "00").mkdir(parents=True)
    (root / "data" / "ff").mkdir(parents=True)
    (root / "snapshots").mkdir()
    (root / "keys").mkdir()
    (root / "locks").mkdir()

    for i in range(20):
        write_blob(root / "data" / ("00" if i % 2 else "ff"), f"pack-{i}".encode())
    write_blob(root / "snapshots", b'{"time": "2026-10-17T00:00:00Z"}')
    write_blob(root / "keys", b'{"kdf": "scrypt"}')
    (root / "config").write_bytes(b"repository config")
    return root
