"""Packing of small unsigned integers into a little-endian bit stream.

Values are stored least significant bit first, each taking a fixed
number of bits; only the low bits of every value are kept.
"""

from __future__ import annotations

from collections.abc import Iterable


def _packed_size(size: int, width: int) -> int:
    return (size * width + 7) // 8


def _unpacked_size(size: int, width: int) -> int:
    return size * 8 // width


def _pack(values: Iterable[int], width: int) -> bytes:
    mask = (1 << width) - 1
    acc = 0
    count = 0
    for count, value in enumerate(values, start=1):
        acc |= (value & mask) << ((count - 1) * width)
    return acc.to_bytes(_packed_size(count, width), "little")


def _unpack(data: bytes, width: int) -> list[int]:
    raw = bytes(data)
    mask = (1 << width) - 1
    acc = int.from_bytes(raw, "little")
    return [(acc >> (i * width)) & mask for i in range(_unpacked_size(len(raw), width))]


def packed_int3_size(size: int) -> int:
    """Return the byte length of ``size`` packed 3-bit values."""
    return _packed_size(size, 3)


def pack_int3_array(values: Iterable[int]) -> bytes:
    """Pack values into 3 bits each."""
    return _pack(values, 3)


def unpacked_int3_size(size: int) -> int:
    """Return how many 3-bit values ``size`` bytes hold."""
    return _unpacked_size(size, 3)


def unpack_int3_array(data: bytes) -> list[int]:
    """Unpack every whole 3-bit value from ``data``."""
    return _unpack(data, 3)


def packed_int5_size(size: int) -> int:
    """Return the byte length of ``size`` packed 5-bit values."""
    return _packed_size(size, 5)


def pack_int5_array(values: Iterable[int]) -> bytes:
    """Pack values into 5 bits each."""
    return _pack(values, 5)


def unpacked_int5_size(size: int) -> int:
    """Return how many 5-bit values ``size`` bytes hold."""
    return _unpacked_size(size, 5)


def unpack_int5_array(data: bytes) -> list[int]:
    """Unpack every whole 5-bit value from ``data``."""
    return _unpack(data, 5)