"""Berlekamp-Massey: shortest linear recurrence of a sequence."""

from __future__ import annotations

import random
from fractions import Fraction
from typing import Sequence

MOD = 1_000_000_007


def berlekamp_massey(sequence: Sequence[int], rng: random.Random | None = None) -> list:
    """Coefficients ``c`` with ``s[i] == sum(c[j-1] * s[i-j])`` over the rationals."""
    rng = rng or random.Random()
    s = [Fraction(v) for v in sequence]
    c: list[Fraction] = []
    old: list[Fraction] = []
    f = -1
    for i, value in enumerate(s):
        delta = value - sum(cj * s[i - j] for j, cj in enumerate(c, start=1))
        if delta == 0:
            continue
        if f == -1:
            c = [Fraction(rng.getrandbits(32)) for _ in range(i + 1)]
            f = i
            continue
        d = [Fraction(1)] + [-x for x in old]
        df1 = sum(dj * s[f + 1 - j] for j, dj in enumerate(d, start=1))
        if df1 == 0:
            raise ArithmeticError("degenerate sequence")
        coef = delta / df1
        d = [Fraction(0)] * (i - f - 1) + [x * coef for x in d]
        previous = c
        c = c + [Fraction(0)] * max(0, len(d) - len(c))
        c = [cj + (d[j] if j < len(d) else 0) for j, cj in enumerate(c)]
        if i - len(previous) > f - len(old):
            old, f = previous, i
    return [int(x) if x.denominator == 1 else x for x in c]


def berlekamp_massey_mod(sequence: Sequence[int], mod: int = MOD) -> list[int]:
    """Shortest recurrence modulo a prime: ``x[i] == sum(c[j] * x[i-j-1])``."""
    x = [v % mod for v in sequence]
    last: list[int] = []
    cur: list[int] = []
    lf = ld = 0
    for i, xi in enumerate(x):
        t = sum(x[i - j - 1] * cj for j, cj in enumerate(cur)) % mod
        if (t - xi) % mod == 0:
            continue
        if not cur:
            cur = [0] * (i + 1)
            lf, ld = i, (t - xi) % mod
            continue
        k = (xi - t) * pow(ld, mod - 2, mod) % mod
        c = [0] * (i - lf - 1) + [k] + [-v * k % mod for v in last]
        c += [0] * max(0, len(cur) - len(c))
        for j, cj in enumerate(cur):
            c[j] = (c[j] + cj) % mod
        if i - lf + len(last) >= len(cur):
            last, lf, ld = cur, i, (t - xi) % mod
        cur = c
    return [v % mod for v in cur]