import sys

import pytest

from idxdkit.endian import (
    be_to_cpu,
    bswap16,
    bswap32,
    bswap64,
    cpu_to_be,
    cpu_to_le,
    le_to_cpu,
)

VALUES = [0, 1, 0x12, 0xFEDCBA9876543210, 0x0102030405060708]


def test_documented_examples():
    assert bswap16(1024) == 4
    assert bswap32(1024) == 262144
    assert bswap64(1024) == 1125899906842624


@pytest.mark.parametrize("value", VALUES)
def test_double_swap_is_identity(value):
    assert bswap16(bswap16(value)) == value & 0xFFFF
    assert bswap32(bswap32(value)) == value & 0xFFFFFFFF
    assert bswap64(bswap64(value)) == value & 0xFFFFFFFFFFFFFFFF


def test_swap_reverses_bytes():
    assert bswap16(0x0102) == 0x0201
    assert bswap32(0x01020304) == 0x04030201
    assert bswap64(0x0102030405060708) == 0x0807060504030201


def test_swap_truncates_wider_input():
    assert bswap16(0x10400) == bswap16(0x0400)
    assert bswap32((1 << 40) | 0x1234) == bswap32(0x1234)
    assert bswap64((1 << 70) | 0xAB) == bswap64(0xAB)


@pytest.mark.parametrize("bits", [16, 32, 64])
@pytest.mark.parametrize("value", [0, 1, 0x0102030405060708, 0xFFFFFFFFFFFFFFFF])
def test_cpu_to_le_memory_layout(bits, value):
    n = bits // 8
    masked = value & ((1 << bits) - 1)
    assert cpu_to_le(value, bits).to_bytes(n, sys.byteorder) == masked.to_bytes(n, "little")


@pytest.mark.parametrize("bits", [16, 32, 64])
@pytest.mark.parametrize("value", [0, 1, 0x0102030405060708, 0xFFFFFFFFFFFFFFFF])
def test_cpu_to_be_memory_layout(bits, value):
    n = bits // 8
    masked = value & ((1 << bits) - 1)
    assert cpu_to_be(value, bits).to_bytes(n, sys.byteorder) == masked.to_bytes(n, "big")


@pytest.mark.parametrize("bits", [16, 32, 64])
@pytest.mark.parametrize("value", [0, 7, 0xA1B2, 0xA1B2C3D4, 0xA1B2C3D4E5F60718])
def test_round_trips(bits, value):
    masked = value & ((1 << bits) - 1)
    assert le_to_cpu(cpu_to_le(value, bits), bits) == masked
    assert be_to_cpu(cpu_to_be(value, bits), bits) == masked


def test_le_and_be_differ_by_a_swap():
    value = 0x0123456789ABCDEF
    assert cpu_to_be(value, 16) == bswap16(cpu_to_le(value, 16))
    assert cpu_to_be(value, 32) == bswap32(cpu_to_le(value, 32))
    assert cpu_to_be(value, 64) == bswap64(cpu_to_le(value, 64))


@pytest.mark.parametrize("bits", [0, 8, 24, 128])
def test_unsupported_width(bits):
    with pytest.raises(ValueError):
        cpu_to_le(1, bits)
    with pytest.raises(ValueError):
        be_to_cpu(1, bits)