"""Puzzles about the decimal digits of integers."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Iterator

_REPEATED_DIGIT = re.compile(r"(.)\1{1,3}")


def numbers_without_digits(excluded: Iterable[int] = (4, 9), limit: int = 10000) -> Iterator[int]:
    """Yield the integers in [1, limit) whose decimal form contains none of ``excluded``."""
    patterns = [str(d) for d in excluded]
    for number in range(1, limit):
        text = str(number)
        if not any(p in text for p in patterns):
            yield number


def nth_without_digits(
    position: int = 999, excluded: Iterable[int] = (4, 9), limit: int = 10000
) -> int | None:
    """Return the ``position``-th (1-based) number below ``limit`` avoiding ``excluded``.

    Returns None when there are fewer than ``position`` such numbers.
    """
    if position < 1:
        return None
    candidates = numbers_without_digits(tuple(excluded), limit)
    return next(itertools.islice(candidates, position - 1, None), None)


def digit_combinations(k: int = 3) -> list[tuple[int, ...]]:
    """Return every choice of ``k`` distinct digits, ascending, in colexicographic order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return sorted(itertools.combinations(range(10), k), key=lambda combo: combo[::-1])


def find_excluded_digits(
    k: int = 3, position: int = 125, value: int = 269, limit: int = 10000
) -> tuple[int, ...] | None:
    """Find the first ``k`` digits whose avoidance makes ``value`` the ``position``-th number."""
    for combo in digit_combinations(k):
        if nth_without_digits(position, combo, limit) == value:
            return combo
    return None


def count_1x1x_multiples_of_eleven() -> int:
    """Count the multiples of 11 between 1000 and 1919 whose first and third digits are 1."""
    return sum(
        1
        for number in range(1000, 1920)
        if (text := str(number))[0] == "1" and text[2] == "1" and number % 11 == 0
    )


def count_digit_product_ending_in_five() -> int:
    """Count the three-digit numbers whose digit product ends in 5."""
    count = 0
    for number in range(100, 1000):
        product = 1
        for digit in str(number):
            product *= int(digit)
        if product % 10 == 5:
            count += 1
    return count


def tens_digit_of_power(base: int = 1999, exponent: int = 1999) -> int:
    """Return the tens digit of ``|base| ** exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return pow(abs(base), exponent, 100) // 10


def multiples_of_eleven_with_tens_one() -> list[int]:
    """Return the multiples of 11 between 1010 and 1919 whose tens digit is 1."""
    return [n for n in range(1010, 1920) if (n // 10) % 10 == 1 and n % 11 == 0]


def numbers_with_repeated_digits() -> list[int]:
    """Return the four-digit numbers that have two equal adjacent digits."""
    return [n for n in range(1000, 10000) if _REPEATED_DIGIT.search(str(n))]