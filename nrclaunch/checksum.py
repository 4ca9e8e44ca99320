"""File checksums."""

from __future__ import annotations

import hashlib
import os

_CHUNK_SIZE = 64 * 1024


def _digest(path: str | os.PathLike, algorithm: str) -> str:
    hasher = hashlib.new(algorithm)
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def sha1sum(path: str | os.PathLike) -> str:
    """Lower-case hex SHA-1 of a file."""
    return _digest(path, "sha1")


def md5sum(path: str | os.PathLike) -> str:
    """Lower-case hex MD5 of a file."""
    return _digest(path, "md5")