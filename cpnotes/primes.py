"""Primality testing and integer factorisation."""

from __future__ import annotations

import math
import random
from collections import Counter

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23)


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin for 64-bit integers."""
    if n < 2:
        return False
    for p in _BASES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int, rng: random.Random | None = None) -> int:
    """Return a non-trivial divisor of the composite ``n``."""
    if n < 4:
        raise ValueError("n must be composite")
    if n % 2 == 0:
        return 2
    rng = rng or random.Random()
    while True:
        c = rng.randrange(1, n + 1)
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = math.gcd(abs(x - y), n)
        if d != n:
            return d


def factorize(n: int, rng: random.Random | None = None) -> dict[int, int]:
    """Prime factorisation of ``n`` as ``{prime: exponent}``."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: Counter[int] = Counter()
    pending = [n]
    while pending:
        m = pending.pop()
        if m == 1:
            continue
        if is_prime(m):
            factors[m] += 1
            continue
        q = pollard_rho(m, rng)
        pending.extend((q, m // q))
    return dict(factors)


def brent(n: int, x0: int = 2, c: int = 1) -> int:
    """Brent's cycle variant of Pollard rho; returns a divisor of ``n`` (possibly ``n``)."""

    def step(x: int) -> int:
        return (x * x + c) % n

    x, g, q = x0, 1, 1
    xs = y = x
    m, length = 128, 1
    while g == 1:
        y = x
        for _ in range(1, length):
            x = step(x)
        k = 0
        while k < length and g == 1:
            xs = x
            for _ in range(min(m, length - k)):
                x = step(x)
                q = q * abs(y - x) % n
            g = math.gcd(q, n)
            k += m
        length *= 2
    if g == n:
        while True:
            xs = step(xs)
            g = math.gcd(abs(xs - y), n)
            if g != 1:
                break
    return g