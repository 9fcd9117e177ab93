"""Name digest: the entropy source for an identicon.

Any 128-bit hash works; MD5 keeps output compatible with existing identicons.
Only determinism and length matter, not collision resistance.
"""

from __future__ import annotations

import hashlib

DIGEST_SIZE = 16


def compute_digest(name: str) -> bytes:
    """Return the 16-byte MD5 digest of *name* encoded as UTF-8."""
    return hashlib.md5(name.encode("utf-8"), usedforsecurity=False).digest()


def validate_digest(digest: bytes) -> bytes:
    """Return *digest* unchanged, or raise ``ValueError`` if it is not 16 bytes."""
    if len(digest) != DIGEST_SIZE:
        msg = f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}"
        raise ValueError(msg)
    return digest
