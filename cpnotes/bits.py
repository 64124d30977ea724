"""Bit manipulation helpers. Bit positions are counted from zero."""

from __future__ import annotations


def set_bit(value: int, n: int) -> int:
    return value | (1 << n)


def clear_bit(value: int, n: int) -> int:
    return value & ~(1 << n)


def test_bit(value: int, n: int) -> bool:
    return bool(value & (1 << n))


def toggle_bit(value: int, n: int) -> int:
    return value ^ (1 << n)


def low_mask(n: int) -> int:
    """An integer with the lowest ``n`` bits set."""
    return (1 << n) - 1


def mod_pow2(value: int, power: int) -> int:
    """``value % power`` where ``power`` is a power of two."""
    if power <= 0 or power & (power - 1):
        raise ValueError("power must be a positive power of two")
    return value & (power - 1)


def lowest_set_bit(value: int) -> int:
    return value & -value


def clear_lowest_set_bit(value: int) -> int:
    return value & (value - 1)


def set_lowest_zero(value: int) -> int:
    return value | (value + 1)


def popcount(value: int) -> int:
    if value < 0:
        raise ValueError("value must be non-negative")
    return bin(value).count("1")


def parity(value: int) -> int:
    """1 if an odd number of bits is set, else 0."""
    return popcount(value) & 1


def leading_zeros(value: int, width: int = 32) -> int:
    if value < 0 or value.bit_length() > width:
        raise ValueError("value does not fit in the given width")
    return width - value.bit_length()


def trailing_zeros(value: int) -> int:
    if value == 0:
        raise ValueError("zero has no lowest set bit")
    return (value & -value).bit_length() - 1