"""SHA-256 verification of content-addressed files."""

from __future__ import annotations

import hashlib
import os
import re

from refcheck.errors import FileIOError
from refcheck.validator.models import FileOutcome, FileStatus

DIGEST_LENGTH = 64
CHUNK_SIZE = 1024 * 1024

_DIGEST_NAME_RE = re.compile(r"[0-9a-f]{64}")


def is_valid_digest_name(name: str) -> bool:
    """Check that *name* is exactly 64 lowercase hex characters."""
    return _DIGEST_NAME_RE.fullmatch(name) is not None


def compute_file_digest(path: str | os.PathLike[str], chunk_size: int = CHUNK_SIZE) -> str:
    """Stream a file through SHA-256 and return the lowercase hex digest."""
    hasher = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def verify_file(path: str) -> FileOutcome:
    """Classify a file by comparing its base name with its content digest.

    Files whose name is not a well-formed digest are never opened. Raises
    FileIOError if the file cannot be opened or read to the end.
    """
    expected = os.path.basename(path)
    if not is_valid_digest_name(expected):
        return FileOutcome(path=path, status=FileStatus.invalid_name)

    try:
        actual = compute_file_digest(path)
    except OSError as e:
        raise FileIOError(path, e) from e

    if actual == expected:
        return FileOutcome(
            path=path, status=FileStatus.intact,
            expected_hash=expected, actual_hash=actual,
        )
    return FileOutcome(
        path=path, status=FileStatus.corrupted,
        expected_hash=expected, actual_hash=actual,
    )
