"""URL-safe base64 without padding, with a lenient decoder.

Encoding uses the ``-`` and ``_`` alphabet and never emits ``=``.
Decoding never fails. Characters outside the alphabet count as zero
bits, and a single trailing character that cannot form a byte is
ignored.
"""

from __future__ import annotations

import base64
from typing import Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_REVERSE = {ord(char): value for value, char in enumerate(_ALPHABET)}

BytesLike = Union[bytes, bytearray, memoryview]


def get_encoded_size(size: int) -> int:
    """Return the length of the encoding of ``size`` bytes."""
    return (size * 4 + 2) // 3


def get_decoded_size(size: int) -> int:
    """Return the number of bytes decoded from ``size`` characters."""
    return size * 3 // 4


def encode(data: BytesLike) -> str:
    """Encode bytes as unpadded URL-safe base64 text."""
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b"=").decode("ascii")


def _sextets(data: Union[str, BytesLike]) -> list[int]:
    if isinstance(data, str):
        codes = (ord(char) & 0xFF for char in data)
    else:
        codes = iter(bytes(data))
    return [_REVERSE.get(code, 0) for code in codes]


def decode(data: Union[str, BytesLike]) -> bytes:
    """Decode unpadded URL-safe base64 text into bytes."""
    sextets = _sextets(data)
    out = bytearray()
    for start in range(0, len(sextets), 4):
        chunk = sextets[start:start + 4]
        if len(chunk) < 2:
            break
        acc = 0
        for value in chunk:
            acc = (acc << 6) | value
        acc <<= 6 * (4 - len(chunk))
        out += acc.to_bytes(3, "big")[: len(chunk) * 3 // 4]
    return bytes(out)