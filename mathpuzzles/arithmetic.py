"""Small integer puzzles: divisors, sequences and counting."""

from __future__ import annotations

import math
from collections.abc import Iterator


def nth_multiple_of_3_or_7(n: int = 60, limit: int = 1000) -> int | None:
    """Return the number in [1, limit] at which the ``n``-th multiple of 3 or 7 is reached."""
    count = 0
    for i in range(1, limit + 1):
        if i % 3 == 0 or i % 7 == 0:
            count += 1
        if count == n:
            return i
    return None


def _powers_of_two(bound: int) -> Iterator[int]:
    power = 1
    while power <= bound:
        yield power
        power *= 2


def count_power_of_two_triples(n: int = 64) -> int:
    """Count ordered triples of powers of two whose product is ``n``."""
    return sum(
        1
        for a in _powers_of_two(n)
        for b in _powers_of_two(n // a)
        for c in _powers_of_two(n // (a * b))
        if a * b * c == n
    )


def alternating_sequence_sum(n: int = 100) -> int:
    """Sum the first ``n`` terms of the sequence that steps -1, +1, +1 starting from 2."""
    value = 2
    total = 0
    for i in range(1, n + 1):
        value += -1 if i % 3 == 1 else 1
        total += value
    return total


def fibonacci_mod(n: int = 2024, modulus: int = 13) -> int:
    """Return the ``n``-th Fibonacci number reduced modulo ``modulus`` (F0 and F1 unreduced)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, (previous + current) % modulus
    return current


def divisor_pairs(n: int) -> list[tuple[int, int]]:
    """Return the pairs (d, n // d) of divisors with d * d <= n."""
    if n < 1:
        return []
    return [(i, n // i) for i in range(1, math.isqrt(n) + 1) if n % i == 0]


def even_divisor_pairs(n: int = math.factorial(10)) -> list[tuple[int, int]]:
    """Return the divisor pairs of ``n`` in which both members are even."""
    return [(a, b) for a, b in divisor_pairs(n) if a % 2 == 0 and b % 2 == 0]


def is_square(x: int) -> bool:
    """Tell whether ``x`` is a perfect square."""
    if x < 0:
        raise ValueError("x must not be negative")
    root = math.isqrt(x)
    return root * root == x


def square_shifted_multiples(limit: int = 100000) -> list[int]:
    """Return the multiples of 12 up to ``limit`` for which n + 36 is a perfect square."""
    return [n for n in range(12, limit + 1, 12) if is_square(n + 36)]


def last_of_consecutive_with_difference(
    length: int = 11, difference: int = 19, limit: int = 1000
) -> int | None:
    """Find consecutive integers whose even-place sum exceeds the odd-place sum by ``difference``.

    The run starts somewhere in [1, limit); its last member is returned.
    """
    for start in range(1, limit):
        terms = range(start, start + length)
        if sum(terms[0::2]) - sum(terms[1::2]) == difference:
            return start + length - 1
    return None


def divisors(n: int = 120) -> list[int]:
    """Return the divisors of ``n``, each small one followed by its cofactor."""
    result = []
    for small, large in divisor_pairs(n):
        result.append(small)
        if large != small:
            result.append(large)
    return result


def divisor_product_exponent(n: int = 120) -> int:
    """Return the largest e with n ** e not exceeding the product of the divisors of ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    product = math.prod(divisors(n))
    exponent = 0
    power = n
    while power <= product:
        exponent += 1
        power *= n
    return exponent