"""Polynomial multiplication by fast Fourier transform."""

from __future__ import annotations

import cmath
import sys
from typing import Sequence


def _fft(values: list[complex], invert: bool) -> None:
    n = len(values)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            values[i], values[j] = values[j], values[i]
    length = 2
    while length <= n:
        angle = 2 * cmath.pi / length * (-1 if invert else 1)
        wlen = cmath.exp(1j * angle)
        half = length // 2
        for start in range(0, n, length):
            w = 1 + 0j
            for k in range(start, start + half):
                u = values[k]
                v = values[k + half] * w
                values[k] = u + v
                values[k + half] = u - v
                w *= wlen
        length *= 2
    if invert:
        for i in range(n):
            values[i] /= n


def multiply(p1: Sequence[int], p2: Sequence[int]) -> list[int]:
    """Product of two integer coefficient lists (lowest degree first)."""
    if not p1 or not p2:
        return []
    needed = len(p1) + len(p2) - 1
    size = 1
    while size < needed:
        size *= 2
    a = [complex(v) for v in p1] + [0j] * (size - len(p1))
    b = [complex(v) for v in p2] + [0j] * (size - len(p2))
    _fft(a, False)
    _fft(b, False)
    product = [x * y for x, y in zip(a, b)]
    _fft(product, True)
    return [round(v.real) for v in product[:needed]]


def multiply_decimal(a: str, b: str) -> str:
    """Multiply two non-negative decimal strings."""
    coefficients = multiply([int(ch) for ch in reversed(a)], [int(ch) for ch in reversed(b)])
    digits: list[int] = []
    carry = 0
    for coefficient in coefficients:
        carry += coefficient
        digits.append(carry % 10)
        carry //= 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    while digits and digits[-1] == 0:
        digits.pop()
    return "".join(map(str, reversed(digits))) or "0"


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many pairs of numbers from stdin, print their products."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    count = int(tokens[0])
    for index in range(count):
        a, b = tokens[1 + 2 * index], tokens[2 + 2 * index]
        print(multiply_decimal(a, b))
    return 0