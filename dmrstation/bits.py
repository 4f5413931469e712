"""Conversions between bytes and bit lists, and bit-error counting."""

from collections.abc import Sequence


def _check_byte(byte: int) -> None:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")


def _check_bits(bits: Sequence[bool]) -> None:
    if len(bits) != 8:
        raise ValueError(f"expected 8 bits, got {len(bits)}")


def byte_to_bits_be(byte: int) -> list[bool]:
    """Split a byte into eight bits, most significant first."""
    _check_byte(byte)
    return [bool(byte & (0x80 >> shift)) for shift in range(8)]


def byte_to_bits_le(byte: int) -> list[bool]:
    """Split a byte into eight bits, least significant first."""
    _check_byte(byte)
    return [bool(byte & (1 << shift)) for shift in range(8)]


def bits_to_byte_be(bits: Sequence[bool]) -> int:
    """Join eight bits, most significant first, into a byte."""
    _check_bits(bits)
    value = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
    return value


def bits_to_byte_le(bits: Sequence[bool]) -> int:
    """Join eight bits, least significant first, into a byte."""
    _check_bits(bits)
    return sum(1 << shift for shift, bit in enumerate(bits) if bit)


def bit_differences(first: bytes, second: bytes) -> int:
    """Count the bits that differ between two byte strings of equal length."""
    if len(first) != len(second):
        raise ValueError("byte strings differ in length")
    return sum(bin(a ^ b).count("1") for a, b in zip(first, second))