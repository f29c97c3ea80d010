"""Monte Carlo estimates for dice, shuffles and draws."""

from __future__ import annotations

import random
from collections.abc import Sequence

_DIE_FACES = 6
_BAG = (1, 2, 2, 3, 3, 3)
_DRAWS = 3
_BOX_A = (False, False, False, True)
_BOX_B = (False, False, False, False, True)
_BASE = 10


def _require_trials(trials: int) -> None:
    if trials < 1:
        raise ValueError("trials must be at least 1")


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _roll(rng: random.Random) -> int:
    return rng.randint(1, _DIE_FACES)


def strictly_increasing_percent(
    trials: int = 10_000_000, rolls: int = 3, rng: random.Random | None = None
) -> float:
    """Estimate the percentage of ``rolls`` die rolls that come out strictly increasing."""
    _require_trials(trials)
    if rolls < 0:
        raise ValueError("rolls must not be negative")
    rng = _generator(rng)
    count = 0
    for _ in range(trials):
        highest = 0
        for _ in range(rolls):
            value = _roll(rng)
            if value <= highest:
                break
            highest = value
        else:
            count += 1
    return count / trials * 100.0


def any_pair_equal_percent(trials: int = 30_000_000, rng: random.Random | None = None) -> float:
    """Estimate the percentage of three die rolls in which some two rolls agree."""
    _require_trials(trials)
    rng = _generator(rng)
    count = 0
    for _ in range(trials):
        a, b, c = _roll(rng), _roll(rng), _roll(rng)
        if (a - b) * (b - c) * (c - a) == 0:
            count += 1
    return count / trials * 100.0


def derangement_percent(
    items: Sequence[object] = ("A", "B", "C", "D"),
    trials: int = 10_000_000,
    rng: random.Random | None = None,
) -> float:
    """Estimate the percentage of shuffles of ``items`` that leave no item in place."""
    _require_trials(trials)
    rng = _generator(rng)
    reference = list(items)
    count = 0
    for _ in range(trials):
        shuffled = reference.copy()
        rng.shuffle(shuffled)
        if all(a != b for a, b in zip(reference, shuffled)):
            count += 1
    return count / trials * 100.0


def product_at_least_percent(
    threshold: int = 100, trials: int = 10_000_000, rng: random.Random | None = None
) -> float:
    """Estimate the percentage of three die rolls whose product reaches ``threshold``."""
    _require_trials(trials)
    rng = _generator(rng)
    count = sum(
        1 for _ in range(trials) if _roll(rng) * _roll(rng) * _roll(rng) >= threshold
    )
    return count / trials * 100.0


def three_digit_draws(trials: int = 10000, rng: random.Random | None = None) -> list[int]:
    """Collect the distinct numbers formed by drawing three tiles from 1, 2, 2, 3, 3, 3.

    The first tile drawn is the units digit, the second the tens, the third the hundreds.
    """
    _require_trials(trials)
    rng = _generator(rng)
    seen: set[int] = set()
    for _ in range(trials):
        bag = list(_BAG)
        number = 0
        place = 1
        for _ in range(_DRAWS):
            number += place * bag.pop(rng.randrange(len(bag)))
            place *= _BASE
        seen.add(number)
    return sorted(seen)


def box_posterior(trials: int = 10_000_000, rng: random.Random | None = None) -> float:
    """Estimate the chance that a winning ticket came from box B.

    A fair coin picks box A (one winner in four) or box B (one winner in five).
    """
    _require_trials(trials)
    rng = _generator(rng)
    box_a = list(_BOX_A)
    box_b = list(_BOX_B)
    wins_b = 0
    wins = 0
    for _ in range(trials):
        if rng.randint(0, 1):
            rng.shuffle(box_a)
            if box_a[0]:
                wins += 1
        else:
            rng.shuffle(box_b)
            if box_b[0]:
                wins_b += 1
                wins += 1
    if wins == 0:
        raise ValueError("no winning draw occurred")
    return wins_b / wins


def even_number_probability(
    values: Sequence[int] = (1, 1, 2, 3),
    trials: int = 10_000_000,
    rng: random.Random | None = None,
) -> float:
    """Estimate the chance that a two-digit number built from two picks of ``values`` is even."""
    _require_trials(trials)
    if not values:
        raise ValueError("values must not be empty")
    rng = _generator(rng)
    count = 0
    for _ in range(trials):
        number = _BASE * rng.choice(values) + rng.choice(values)
        if number % 2 == 0:
            count += 1
    return count / trials