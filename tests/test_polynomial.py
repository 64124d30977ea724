import io
import random

import pytest

from cpnotes.polynomial import main, multiply, multiply_decimal


def _naive(p, q):
    out = [0] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            out[i + j] += a * b
    return out


@pytest.mark.parametrize("seed", range(5))
def test_multiply_matches_schoolbook(seed):
    rng = random.Random(seed)
    p = [rng.randint(0, 100) for _ in range(rng.randint(1, 40))]
    q = [rng.randint(0, 100) for _ in range(rng.randint(1, 40))]
    assert multiply(p, q) == _naive(p, q)


def test_multiply_empty():
    assert multiply([], [1, 2]) == []


@pytest.mark.parametrize("a,b", [("0", "12345"), ("999", "999"), ("123456789123456789", "987654321987654321")])
def test_multiply_decimal(a, b):
    assert multiply_decimal(a, b) == str(int(a) * int(b))


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n12 34\n0 5\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == [str(12 * 34), "0"]