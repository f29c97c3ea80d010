"""Puzzles that need exact or high-precision arithmetic."""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Iterator, Sequence
from decimal import Decimal, localcontext
from fractions import Fraction

from mpmath import mp, mpf

_SERIES_DIGITS = 100


def _powers(base: int, limit: int) -> Iterator[tuple[int, int, int]]:
    value = 1
    for exponent in range(1, limit + 1):
        value *= base
        yield value, base, exponent


def nth_smallest_power(
    n: int = 2024, bounds: Sequence[tuple[int, int]] = ((3, 10000), (7, 2000))
) -> tuple[int, int, int]:
    """Return ``(base, exponent, value)`` for the ``n``-th smallest of the given powers.

    ``bounds`` pairs each base with its largest exponent; exponents start at 1.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    merged = heapq.merge(*(_powers(base, limit) for base, limit in bounds))
    item = next(itertools.islice(merged, n - 1, None), None)
    if item is None:
        raise ValueError("n exceeds the number of powers")
    value, base, exponent = item
    return base, exponent, value


def continued_sqrt5(steps: int = 100, digits: int = 10000) -> mpf:
    """Start from sqrt(5) and replace the value by 1 / (fractional part), ``steps - 1`` times."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    with mp.workdps(digits):
        value = mp.sqrt(5)
        for _ in range(2, steps + 1):
            value = 1 / (value - mp.floor(value))
    return value


def _decimal_text(value: Fraction, digits: int) -> str:
    with localcontext() as ctx:
        ctx.prec = digits
        quotient = Decimal(value.numerator) / Decimal(value.denominator)
        return format(quotient.normalize(), "f")


def harmonic_numbers_with_short_expansion(
    limit: int = 10000, max_length: int = 400, digits: int = 3000
) -> list[Fraction]:
    """Return the harmonic numbers H_1..H_limit whose decimal form fits in ``max_length`` characters.

    The decimal form carries ``digits`` significant digits, trailing zeros dropped.
    """
    result = []
    total = Fraction(0)
    for j in range(1, limit + 1):
        total += Fraction(1, j)
        if len(_decimal_text(total, digits)) <= max_length:
            result.append(total)
    return result


def series_partial_reciprocals(terms: int = 6) -> list[Fraction]:
    """Return 1 / S_k for k = 1..terms, S_k summing ((2i)!/i!)**3 (42i + 5) / 2**(12i + 4)."""
    if terms < 1:
        raise ValueError("terms must be at least 1")
    total = Fraction(0)
    result = []
    for i in range(terms):
        a = Fraction(math.factorial(2 * i), math.factorial(i))
        b = Fraction(42 * i + 5, 2 ** (12 * i + 4))
        total += a * a * a * b
        result.append(1 / total)
    return result


def primes_up_to(limit: int = 100_000_000) -> list[int]:
    """Return the primes not exceeding ``limit``, ascending."""
    if limit < 2:
        return []
    size = (limit + 1) // 2
    sieve = bytearray([1]) * size  # index i stands for 2 * i + 1
    sieve[0] = 0
    for i in range(1, math.isqrt(limit) // 2 + 1):
        if sieve[i]:
            p = 2 * i + 1
            start = p * p // 2
            sieve[start::p] = bytes(len(range(start, size, p)))
    return [2, *itertools.compress(range(1, limit + 1, 2), sieve)]


def harmonic_sum(n: int) -> mpf:
    """Return 1 + 1/2 + ... + 1/n to 100 significant digits."""
    with mp.workdps(_SERIES_DIGITS):
        total = mpf(0)
        for i in range(1, n + 1):
            total += mpf(1) / i
    return total


def euler_product(n: int, primes: Sequence[int]) -> mpf:
    """Return the product over the first ``n`` primes of 1 + 1/p + ... + 1/p**n."""
    if n < 0:
        raise ValueError("n must not be negative")
    if len(primes) < n:
        raise ValueError("not enough primes")
    with mp.workdps(_SERIES_DIGITS):
        product = mpf(1)
        for prime in primes[:n]:
            ratio = mpf(1) / prime
            product *= (1 - ratio ** (n + 1)) / (1 - ratio)
    return product