"""Random version-8 UUIDs used as session identifiers."""

from __future__ import annotations

import secrets


def generate() -> bytes:
    """Return 16 random bytes marked as a version 8, RFC 4122 variant UUID."""
    uuid = bytearray(secrets.token_bytes(16))
    uuid[6] = (uuid[6] & 0x0F) | 0x80
    uuid[8] = (uuid[8] & 0x3F) | 0x80
    return bytes(uuid)