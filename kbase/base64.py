"""Base64 encoding with mandatory padding."""

from __future__ import annotations

import binascii

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_CODES = {char: code for code, char in enumerate(_ALPHABET)}
_PADDING = b"="


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def base64_encode(data: str | bytes | bytearray | memoryview) -> str:
    """Encode a string (as UTF-8) or bytes into padded base64."""
    return binascii.b2a_base64(_as_bytes(data), newline=False).decode("ascii")


def base64_decode(data: str | bytes | bytearray | memoryview) -> bytes:
    """Decode padded base64; returns empty bytes if the input is not valid."""
    raw = _as_bytes(data)
    if not raw or len(raw) % 4:
        return b""

    body = raw
    if body.endswith(_PADDING):
        body = body[:-1]
        if body.endswith(_PADDING):
            body = body[:-1]

    if len(body) % 4 == 1:
        return b""

    try:
        codes = [_CODES[char] for char in body]
    except KeyError:
        return b""

    decoded = bytearray()
    for start in range(0, len(codes), 4):
        chunk = codes[start:start + 4]
        bits = 0
        for code in chunk:
            bits = (bits << 6) | code
        nbytes = len(chunk) * 6 // 8
        bits >>= len(chunk) * 6 - nbytes * 8
        decoded += bits.to_bytes(nbytes, "big")

    return bytes(decoded)