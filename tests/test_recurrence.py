import random

from cpnotes.numbers import fibonacci
from cpnotes.recurrence import berlekamp_massey, berlekamp_massey_mod

MOD = 1_000_000_007


def _holds(seq, c):
    return all(seq[i] == sum(c[j - 1] * seq[i - j] for j in range(1, len(c) + 1)) for i in range(len(c), len(seq)))


def test_rational_fibonacci():
    seq = [fibonacci(n) for n in range(1, 15)]
    c = berlekamp_massey(seq, random.Random(3))
    assert c == [1, 1]


def test_rational_geometric_invariant():
    seq = [3 * 2**n + (-1) ** n for n in range(12)]
    c = berlekamp_massey(seq, random.Random(5))
    assert len(c) <= 2
    assert _holds(seq, c)


def test_rational_all_zero():
    assert berlekamp_massey([0, 0, 0]) == []