"""Number theory helpers: binomials, modular arithmetic, Fibonacci, matrices, sieves."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Callable, Hashable, Sequence

MOD = 1_000_000_007

Matrix = list[list[int]]


def binomial(n: int, k: int) -> int:
    """Exact binomial coefficient; 0 when k > n."""
    if n < k:
        return 0
    return math.comb(n, k)


def mod_binomial(n: int, k: int, mod: int = MOD) -> int:
    """Binomial coefficient modulo a prime in O(k) steps."""
    if k < 0 or n < k:
        return 0
    if 2 * k > n:
        k = n - k
    result = 1
    for i in range(1, k + 1):
        result = result * ((n - k + i) % mod) % mod
        result = result * mod_inverse(i, mod) % mod
    return result


def pow_mod(base: int, exponent: int, mod: int = MOD) -> int:
    """Binary exponentiation of ``base`` to ``exponent`` modulo ``mod``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1 % mod
    base %= mod
    while exponent > 0:
        if exponent & 1:
            result = result * base % mod
        base = base * base % mod
        exponent >>= 1
    return result


def ceil_div(num: int, den: int) -> int:
    """Ceiling of ``num / den`` for integers."""
    if den == 0:
        raise ZeroDivisionError("division by zero")
    return -(-num // den)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    x, x1, y, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a, b = b, a - q * b
    return a, x, y


def solve_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Find any integers ``(x, y)`` with ``a*x + b*y == c``.

    Raises ValueError when no solution exists.
    """
    g, x, y = extended_gcd(abs(a), abs(b))
    if g == 0:
        if c == 0:
            return 0, 0
        raise ValueError("no solution")
    if c % g != 0:
        raise ValueError("no solution")
    factor = c // g
    x *= factor
    y *= factor
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y


def mod_inverse(value: int, mod: int = MOD) -> int:
    """Modular inverse of ``value``; ValueError if it does not exist."""
    g, x, _ = extended_gcd(value % mod, mod)
    if g != 1:
        raise ValueError(f"{value} has no inverse modulo {mod}")
    return x % mod


def totients(n: int) -> list[int]:
    """Euler's phi for every integer in ``0..n``."""
    phi = list(range(n + 1))
    for i in range(2, n + 1):
        if phi[i] == i:
            for j in range(i, n + 1, i):
                phi[j] -= phi[j] // i
    return phi


def fibonacci(n: int) -> int:
    """Fibonacci number with ``fibonacci(1) == fibonacci(2) == 1`` (and 1 for n <= 2)."""
    a = b = 1
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def fibonacci_mod(n: int, mod: int = MOD) -> int:
    """Fibonacci in O(log n) with ``f(0) == f(1) == 1``, modulo ``mod``."""

    @lru_cache(maxsize=None)
    def fib(m: int) -> int:
        if m < 2:
            return 1 % mod
        return (fib((m + 1) // 2) * fib(m // 2) + fib((m - 1) // 2) * fib((m - 2) // 2)) % mod

    return fib(n)


def identity_matrix(n: int) -> Matrix:
    """The ``n`` by ``n`` identity matrix."""
    return [[int(i == j) for j in range(n)] for i in range(n)]


def mat_mul(a: Matrix, b: Matrix, mod: int = MOD) -> Matrix:
    """Matrix product modulo ``mod``."""
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def mat_pow(matrix: Matrix, exponent: int, mod: int = MOD) -> Matrix:
    """Raise a square matrix to ``exponent`` modulo ``mod``."""
    result = [[v % mod for v in row] for row in identity_matrix(len(matrix))]
    base = matrix
    while exponent:
        if exponent & 1:
            result = mat_mul(result, base, mod)
        base = mat_mul(base, base, mod)
        exponent >>= 1
    return result


def find_cycle(f: Callable[[Hashable], Hashable], seed: Hashable) -> tuple[Hashable, int]:
    """Floyd's tortoise and hare: return ``(first value on the cycle, cycle length)``."""
    tort = f(seed)
    hare = f(f(seed))
    while hare != tort:
        tort = f(tort)
        hare = f(f(hare))
    tort = seed
    while hare != tort:
        tort = f(tort)
        hare = f(hare)
    start = tort
    length = 1
    walker = f(start)
    while walker != start:
        walker = f(walker)
        length += 1
    return start, length


def prime_sieve(limit: int) -> list[bool]:
    """Primality flags for ``0..limit-1``."""
    flags = [i % 2 == 1 for i in range(limit)]
    if limit > 1:
        flags[1] = False
    if limit > 2:
        flags[2] = True
    i = 3
    while i * i < limit:
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit, i))
        i += 2
    return flags


def smallest_factor_sieve(limit: int) -> list[int]:
    """Smallest prime factor for ``0..limit-1`` (0 for 0 and 1)."""
    smallest = [0, 0] + [2 if i % 2 == 0 else i for i in range(2, limit)]
    smallest = smallest[:limit]
    i = 3
    while i * i < limit:
        if smallest[i] == i:
            for j in range(i * i, limit, i):
                smallest[j] = min(smallest[j], i)
        i += 2
    return smallest


class BinomialTable:
    """Binomial coefficients modulo a prime from precomputed factorials."""

    def __init__(self, limit: int, mod: int = MOD) -> None:
        self.mod = mod
        self._fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            self._fact[i] = self._fact[i - 1] * i % mod

    def query(self, n: int, k: int) -> int:
        if n < k:
            return 0
        denominator = self._fact[n - k] * self._fact[k] % self.mod
        return self._fact[n] * mod_inverse(denominator, self.mod) % self.mod


class CatalanTable:
    """Catalan numbers modulo a prime for ``0..limit``."""

    def __init__(self, limit: int, mod: int = MOD) -> None:
        self.mod = mod
        self._cat = [1] * (limit + 1)
        for i in range(limit):
            self._cat[i + 1] = self._cat[i] * (4 * i + 2) % mod * mod_inverse(i + 2, mod) % mod

    def query(self, n: int) -> int:
        return self._cat[n]