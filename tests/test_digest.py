"""Tests for the digest verifier."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from refcheck.errors import FileIOError
from refcheck.validator.digest import compute_file_digest, is_valid_digest_name, verify_file
from refcheck.validator.models import FileStatus

from conftest import EMPTY_SHA256, sha256_hex, write_blob


# ── Name validation ──────────────────────────────────────────────────


@pytest.mark.parametrize(
    "name, expected",
    [
        ("abc123abc123abc123abc123abc123abc123abc123abc123abc123abc123abc1", True),
        (EMPTY_SHA256, True),
        ("abc123", False),
        ("xyz123abc123abc123abc123abc123abc123abc123abc123abc123abc123abc1", False),
        (EMPTY_SHA256.upper(), False),
        (EMPTY_SHA256 + "0", False),
        (EMPTY_SHA256[:-1], False),
        (EMPTY_SHA256[:-1] + "\n", False),
        ("", False),
    ],
)
def test_is_valid_digest_name(name, expected):
    assert is_valid_digest_name(name) is expected


# ── Hashing ──────────────────────────────────────────────────────────


def test_compute_digest_of_empty_file(tmp_path: Path):
    f = tmp_path / "empty"
    f.write_bytes(b"")
    assert compute_file_digest(f) == EMPTY_SHA256


def test_compute_digest_streams_in_chunks(tmp_path: Path):
    """Small chunk sizes produce the same digest as hashing in one go."""
    data = bytes(range(256)) * 50
    f = tmp_path / "blob"
    f.write_bytes(data)
    assert compute_file_digest(f, chunk_size=7) == sha256_hex(data)


# ── verify_file ──────────────────────────────────────────────────────


def test_verify_intact(tmp_path: Path):
    path = write_blob(tmp_path, b"test content")
    outcome = verify_file(str(path))
    assert outcome.status is FileStatus.intact
    assert outcome.expected_hash == outcome.actual_hash == path.name


def test_verify_corrupted_reports_real_digest(tmp_path: Path):
    path = write_blob(tmp_path, b"test content")
    path.write_bytes(b"test contentmodifications")

    outcome = verify_file(str(path))
    assert outcome.status is FileStatus.corrupted
    assert outcome.expected_hash == path.name
    assert outcome.actual_hash == sha256_hex(b"test contentmodifications")


def test_verify_invalid_name_does_not_open_file(tmp_path: Path):
    """Badly named files are classified without reading them."""
    path = tmp_path / "invalidfilename"
    path.write_bytes(b"data")
    with patch("refcheck.validator.digest.compute_file_digest") as digest:
        outcome = verify_file(str(path))
    assert outcome.status is FileStatus.invalid_name
    assert outcome.actual_hash is None
    digest.assert_not_called()


def test_verify_uppercase_name_is_invalid(tmp_path: Path):
    path = tmp_path / EMPTY_SHA256.upper()
    path.write_bytes(b"")
    assert verify_file(str(path)).status is FileStatus.invalid_name


def test_verify_missing_file_raises_file_io_error(tmp_path: Path):
    path = tmp_path / EMPTY_SHA256
    with pytest.raises(FileIOError) as exc_info:
        verify_file(str(path))
    assert exc_info.value.file_path == str(path)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_verify_read_failure_mid_stream(tmp_path: Path):
    """An OSError while reading is wrapped, not swallowed or retried."""
    path = write_blob(tmp_path, b"abc")
    with patch(
        "refcheck.validator.digest.compute_file_digest",
        side_effect=OSError(5, "Input/output error"),
    ) as digest:
        with pytest.raises(FileIOError):
            verify_file(str(path))
    assert digest.call_count == 1
