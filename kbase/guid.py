"""Generating and validating version 4 GUIDs."""

from __future__ import annotations

import secrets

_GUID_LENGTH = 36
_DASH_POSITIONS = frozenset({8, 13, 18, 23})
_LOWER_HEX = frozenset("0123456789abcdef")
_HEX = _LOWER_HEX | frozenset("ABCDEF")


def generate_guid() -> str:
    """Return a random version 4 GUID in lowercase hexadecimal."""
    high = secrets.randbits(64)
    low = secrets.randbits(64)

    high = (high & 0xFFFFFFFFFFFF0FFF) | 0x0000000000004000
    low = (low & 0x3FFFFFFFFFFFFFFF) | 0x8000000000000000

    return (f"{high >> 32:08x}-{(high >> 16) & 0xFFFF:04x}-{high & 0xFFFF:04x}-"
            f"{low >> 48:04x}-{low & 0x0000FFFFFFFFFFFF:012x}")


def is_guid_valid(guid: str, strict_mode: bool = False) -> bool:
    """Return True if `guid` is 36 characters of hex digits with dashes only in place.

    In strict mode the hex digits must be lowercase.
    """
    if len(guid) != _GUID_LENGTH:
        return False

    allowed = _LOWER_HEX if strict_mode else _HEX
    for index, ch in enumerate(guid):
        if ch == "-":
            if index in _DASH_POSITIONS:
                continue
            return False
        if ch not in allowed:
            return False

    return True