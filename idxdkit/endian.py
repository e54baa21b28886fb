"""Byte swapping and conversion between host order and fixed byte orders."""

from __future__ import annotations

import sys

__all__ = [
    "bswap16",
    "bswap32",
    "bswap64",
    "cpu_to_le",
    "le_to_cpu",
    "cpu_to_be",
    "be_to_cpu",
]


def _swap(val: int, nbytes: int) -> int:
    mask = (1 << (nbytes * 8)) - 1
    return int.from_bytes((int(val) & mask).to_bytes(nbytes, "little"), "big")


def bswap16(val: int) -> int:
    """Reverse the bytes of a 16-bit value; wider input is truncated first."""
    return _swap(val, 2)


def bswap32(val: int) -> int:
    """Reverse the bytes of a 32-bit value; wider input is truncated first."""
    return _swap(val, 4)


def bswap64(val: int) -> int:
    """Reverse the bytes of a 64-bit value; wider input is truncated first."""
    return _swap(val, 8)


def _nbytes(bits: int) -> int:
    if bits not in (16, 32, 64):
        raise ValueError(f"unsupported width {bits}; expected 16, 32 or 64")
    return bits // 8


def _to_order(value: int, bits: int, order: str) -> int:
    nbytes = _nbytes(bits)
    value = int(value) & ((1 << bits) - 1)
    if sys.byteorder == order:
        return value
    return _swap(value, nbytes)


def cpu_to_le(native: int, bits: int) -> int:
    """Return the value whose in-memory bytes are ``native`` in little-endian order."""
    return _to_order(native, bits, "little")


def le_to_cpu(value: int, bits: int) -> int:
    """Convert a little-endian value to host order."""
    return _to_order(value, bits, "little")


def cpu_to_be(native: int, bits: int) -> int:
    """Return the value whose in-memory bytes are ``native`` in big-endian order."""
    return _to_order(native, bits, "big")


def be_to_cpu(value: int, bits: int) -> int:
    """Convert a big-endian value to host order."""
    return _to_order(value, bits, "big")