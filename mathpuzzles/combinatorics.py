"""Counting and enumeration puzzles: permutations, combinations and partitions."""

from __future__ import annotations

import itertools
import math
from collections.abc import Hashable, Iterator, Sequence
from fractions import Fraction
from typing import TypeVar

T = TypeVar("T")

_DEFAULT_TOKENS = (
    "\U0001F535",
    "\U0001F535",
    "\U0001F535",
    "\U0001F535",
    "\U0001F534",
    "\U0001F534",
    "\U0001F534",
    "\U0001F7E2",
    "\U0001F7E2",
    "\U0001F7E0",
)
_FAMILY = ("父", "母", "兄", "姉", "妹")


def _lexicographic_permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield the distinct permutations of ``items`` in lexicographic order.

    Enumeration starts from ``items`` as given and stops at the last
    permutation in lexicographic order.
    """
    current = list(items)
    while True:
        yield tuple(current)
        pivot = len(current) - 2
        while pivot >= 0 and current[pivot] >= current[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        successor = len(current) - 1
        while current[successor] <= current[pivot]:
            successor -= 1
        current[pivot], current[successor] = current[successor], current[pivot]
        current[pivot + 1 :] = reversed(current[pivot + 1 :])


def odd_factor_triples(n: int = 1155) -> list[tuple[int, int, int]]:
    """Return the unordered triples of odd factors, each at least 5, whose product is ``n``."""
    found: set[tuple[int, int, int]] = set()
    for i in range(5, n + 1, 2):
        for j in range(5, n // i + 1, 2):
            for k in range(5, n // (i * j) + 1, 2):
                if i * j * k == n:
                    a, b, c = sorted((i, j, k))
                    found.add((a, b, c))
    return sorted(found)


def count_derangements(items: Sequence[Hashable] = ("A", "B", "C", "D")) -> tuple[int, int]:
    """Count the permutations that leave no item in place.

    Returns ``(derangements, permutations)``, enumerating permutations
    lexicographically from ``items`` onward.
    """
    reference = tuple(items)
    derangements = 0
    total = 0
    for arrangement in _lexicographic_permutations(reference):
        total += 1
        if all(a != b for a, b in zip(reference, arrangement)):
            derangements += 1
    return derangements, total


def partitions_into_groups(
    items: Sequence[str] = ("A", "B", "C", "D", "E"), groups: int = 3
) -> list[tuple[str, ...]]:
    """Return every assignment of ``items`` to ``groups`` labelled, possibly empty, groups.

    Each assignment is a tuple holding the concatenated members of each group.
    """
    if groups < 1:
        raise ValueError("groups must be at least 1")
    result = []
    for labels in itertools.product(range(groups), repeat=len(items)):
        members: list[list[str]] = [[] for _ in range(groups)]
        for item, label in zip(items, labels):
            members[label].append(item)
        result.append(tuple("".join(group) for group in members))
    return result


def colex_combinations(n: int, k: int) -> list[tuple[int, ...]]:
    """Return the ``k``-subsets of ``range(n)``, ascending, in colexicographic order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return sorted(itertools.combinations(range(n), k), key=lambda combo: combo[::-1])


def triangles(lengths: Sequence[float] = (2, 3, 4, 5, 6)) -> list[tuple[float, float, float]]:
    """Return the triples of ``lengths`` (taken in order) that form a triangle."""
    result = []
    for first, second, third in colex_combinations(len(lengths), 3):
        a, b, c = lengths[first], lengths[second], lengths[third]
        if a + b > c:
            result.append((a, b, c))
    return result


def distinct_arrangements(tokens: Sequence[str] = _DEFAULT_TOKENS, length: int = 4) -> list[str]:
    """Return the distinct strings made by lining up ``length`` of ``tokens``, sorted."""
    if not 0 <= length <= len(tokens):
        raise ValueError("length must lie between 0 and the number of tokens")
    return sorted({"".join(chosen) for chosen in itertools.permutations(tokens, length)})


def arrangements_with_adjacent(
    tokens: Sequence[str] = _FAMILY, pair: tuple[str, str] = ("父", "母")
) -> list[str]:
    """Return the line-ups of all ``tokens`` in which the two of ``pair`` stand side by side."""
    first, second = pair
    together = (first + second, second + first)
    result = []
    for order in itertools.permutations(tokens):
        line = "".join(order)
        if any(joined in line for joined in together):
            result.append(line)
    return result


def multiples_of_five_from_cards(
    cards: Sequence[str] = ("0", "1", "2", "3", "4", "5"), length: int = 3
) -> list[int]:
    """Return the distinct multiples of five formed by laying ``length`` cards in a row."""
    if length < 1:
        raise ValueError("length must be at least 1")
    found = set()
    for chosen in itertools.permutations(cards, length):
        text = "".join(chosen)
        number = int(text)
        if text[0] != "0" and number % 5 == 0:
            found.add(number)
    return sorted(found)


def fractions_between(
    numerator: int = 8, low: Fraction = Fraction(3, 11), high: Fraction = Fraction(3, 8)
) -> list[Fraction]:
    """Return the irreducible fractions ``numerator / d`` strictly between ``low`` and ``high``.

    They are listed by increasing denominator.
    """
    if numerator <= 0:
        raise ValueError("numerator must be positive")
    if low <= 0:
        raise ValueError("low must be positive")
    result = []
    for denominator in itertools.count(1):
        if math.gcd(numerator, denominator) != 1:
            continue
        value = Fraction(numerator, denominator)
        if value <= low:
            break
        if low < value < high:
            result.append(value)
    return result


def distinct_selections(values: Sequence[int] = (1, 1, 2, 3), size: int = 2) -> list[tuple[int, ...]]:
    """Return the distinct ordered selections of ``size`` items from ``values``, sorted.

    Permutations are enumerated lexicographically from ``values`` onward.
    """
    if not 0 <= size <= len(values):
        raise ValueError("size must lie between 0 and the number of values")
    return sorted({perm[:size] for perm in _lexicographic_permutations(values)})