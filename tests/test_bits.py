import pytest

from cpnotes import bits


def test_basic_bit_operations():
    assert bits.set_bit(1, 2) == 5
    assert bits.clear_bit(5, 2) == 1
    assert bits.test_bit(5, 2) is True
    assert bits.test_bit(1, 2) is False
    assert bits.toggle_bit(5, 2) == 1
    assert bits.low_mask(4) == 15


def test_lowest_bits():
    assert bits.lowest_set_bit(12).bit_length() == 3
    assert bits.clear_lowest_set_bit(14) == 12
    assert bits.set_lowest_zero(9) == 11


def test_mod_pow2():
    for v in range(100):
        assert bits.mod_pow2(v, 8) == v % 8
    with pytest.raises(ValueError):
        bits.mod_pow2(15, 6)


def test_counts():
    assert bits.popcount(11) == 3
    assert bits.parity(11) == 1
    assert bits.leading_zeros(11) == 28
    assert bits.trailing_zeros(11) == 0


def test_counts_invariants():
    for v in range(1, 300):
        assert bits.popcount(v) == bits.popcount(v >> 1) + (v & 1)
        assert v >> bits.trailing_zeros(v) & 1 == 1
        assert bits.leading_zeros(v, 16) + v.bit_length() == 16


def test_count_errors():
    with pytest.raises(ValueError):
        bits.trailing_zeros(0)
    with pytest.raises(ValueError):
        bits.popcount(-1)
    with pytest.raises(ValueError):
        bits.leading_zeros(1 << 40)