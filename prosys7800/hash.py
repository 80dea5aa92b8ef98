"""Cartridge digests: the 32-character lowercase hex MD5 of the ROM image."""

from __future__ import annotations

import hashlib

DIGEST_LENGTH = 32


def compute_digest(data: bytes | bytearray | memoryview) -> str:
    """Return the MD5 digest of ``data`` as 32 lowercase hexadecimal characters.

    This is the key the game database uses to identify a cartridge.
    """
    if isinstance(data, str):
        raise TypeError("digest input must be bytes-like, not str")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()