"""MD5 message digest (RFC 1321)."""

from __future__ import annotations

import math
import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_BLOCK_SIZE = 64
_DIGEST_SIZE = 16
_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_CONSTANTS = tuple(int(abs(math.sin(i + 1)) * 2 ** 32) & _MASK for i in range(64))

_WORD_ORDER = tuple(
    i if i < 16
    else (5 * i + 1) % 16 if i < 32
    else (3 * i + 5) % 16 if i < 48
    else (7 * i) % 16
    for i in range(64)
)


def _rotate_left(value: int, shift: int) -> int:
    value &= _MASK
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _round_function(step: int, b: int, c: int, d: int) -> int:
    if step < 16:
        return d ^ (b & (c ^ d))
    if step < 32:
        return c ^ (d & (b ^ c))
    if step < 48:
        return b ^ c ^ d
    return c ^ (b | (~d & _MASK))


def _transform(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step, (shift, constant, index) in enumerate(zip(_SHIFTS, _CONSTANTS, _WORD_ORDER)):
        rotated = _rotate_left(a + _round_function(step, b, c, d) + words[index] + constant, shift)
        a, b, c, d = d, (b + rotated) & _MASK, b, c
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d)))  # type: ignore[return-value]


def _as_bytes(data: str | BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class MD5:
    """Incremental MD5 checksum calculation."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: str | BytesLike = b"") -> None:
        self._state = _INITIAL_STATE
        self._pending = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: str | BytesLike) -> MD5:
        """Feed more data; strings are hashed as UTF-8."""
        chunk = self._pending + _as_bytes(data)
        self._length += len(chunk) - len(self._pending)
        whole = len(chunk) - len(chunk) % _BLOCK_SIZE
        for start in range(0, whole, _BLOCK_SIZE):
            self._state = _transform(self._state, chunk[start:start + _BLOCK_SIZE])
        self._pending = chunk[whole:]
        return self

    def digest(self) -> bytes:
        """Return the 16-byte digest of the data fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding_size = (55 - len(self._pending)) % _BLOCK_SIZE
        tail = self._pending + b"\x80" + b"\x00" * padding_size + struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _transform(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return md5_digest_to_string(self.digest())


def md5_sum(data: str | BytesLike) -> bytes:
    """Return the MD5 digest of `data`."""
    return MD5(data).digest()


def md5_digest_to_string(digest: BytesLike) -> str:
    """Convert a 16-byte digest into lowercase hexadecimal."""
    digest = bytes(digest)
    if len(digest) != _DIGEST_SIZE:
        raise ValueError(f"an MD5 digest is {_DIGEST_SIZE} bytes, got {len(digest)}")
    return digest.hex()


def md5_string(text: str | BytesLike) -> str:
    """Return the MD5 checksum of `text`, in hexadecimal."""
    return md5_digest_to_string(md5_sum(text))