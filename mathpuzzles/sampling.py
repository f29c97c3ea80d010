"""Random searches and Markov-chain sampling."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

_TOTAL_COINS = 17
_TARGET_AMOUNT = 750
_COIN_VALUES = (500, 100, 50, 10, 5, 1)
_FIVE_YEN_INDEX = 4
_MIN_PER_TYPE = 1
_MAX_PER_TYPE = _TOTAL_COINS - _MIN_PER_TYPE * (len(_COIN_VALUES) - 1)

_A = math.sqrt(360.0)
_B = math.sqrt(60.0)
_DELTA = 1.0e-5

_X0 = (1.0 / math.sqrt(2.0), 1.0 / math.sqrt(2.0))

Point = tuple[float, float]


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def find_five_yen_count(rng: random.Random | None = None) -> int:
    """Guess coin counts at random until 17 coins of six kinds make 750 yen.

    Every kind is used at least once. Returns the number of 5-yen coins.
    """
    rng = _generator(rng)
    while True:
        counts = [rng.randint(_MIN_PER_TYPE, _MAX_PER_TYPE) for _ in _COIN_VALUES]
        if sum(counts) != _TOTAL_COINS:
            continue
        if sum(c * v for c, v in zip(counts, _COIN_VALUES)) == _TARGET_AMOUNT:
            return counts[_FIVE_YEN_INDEX]


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def is_near_integer(x: float, delta: float = _DELTA) -> bool:
    """Tell whether ``x`` lies within ``delta`` of the nearest integer."""
    return abs(_round_half_away(x) - x) < delta


def round_to_int(x: float) -> int:
    """Round ``x`` to the nearest integer, halves away from zero."""
    return int(_round_half_away(x))


def find_integer_point(
    trials: int = 1_000_000, rng: random.Random | None = None
) -> tuple[int, int] | None:
    """Search the first-quadrant arc of x**2/360 + y**2/60 = 1 for an integer point.

    Angles are drawn uniformly from [0, pi/2]; None is returned if no draw hits.
    """
    rng = _generator(rng)
    for _ in range(trials):
        theta = rng.uniform(0.0, math.pi * 0.5)
        a = _A * math.cos(theta)
        b = _B * math.sin(theta)
        if is_near_integer(a) and is_near_integer(b):
            return round_to_int(a), round_to_int(b)
    return None


def target_density(point: Point) -> float:
    """Return 1 inside the unit disc but outside the diamond |x| + |y| < 1, else 0."""
    x, y = point
    return 1.0 if abs(x) + abs(y) >= 1.0 and x * x + y * y <= 1.0 else 0.0


def propose(point: Point, rng: random.Random) -> Point:
    """Draw a proposal from a unit normal centred on ``point``."""
    x, y = point
    return rng.gauss(x, 1.0), rng.gauss(y, 1.0)


def metropolis_hastings(
    x0: Point = _X0, n_steps: int = 1_000_000, rng: random.Random | None = None
) -> list[Point]:
    """Sample ``n_steps`` points from the target density with Metropolis-Hastings."""
    if n_steps < 1:
        raise ValueError("n_steps must be at least 1")
    if target_density(x0) == 0.0:
        raise ValueError("x0 must lie where the density is positive")
    rng = _generator(rng)
    samples = [x0]
    current = x0
    for _ in range(1, n_steps):
        candidate = propose(current, rng)
        alpha = min(1.0, target_density(candidate) / target_density(current))
        if rng.random() < alpha:
            current = candidate
        samples.append(current)
    return samples


def sum_product_pairs(samples: Iterable[Point]) -> list[Point]:
    """Map each point (x, y) to (x + y, x * y)."""
    return [(x + y, x * y) for x, y in samples]