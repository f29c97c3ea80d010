"""Board-game and match-series simulations."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

_DIE_FACES = 6
_SERIES_LENGTH = 7
_WINS_NEEDED = 4


@dataclass(frozen=True)
class Summary:
    """Mean, median and most frequent value of a list of turn counts."""

    mean: float
    median: float
    mode: int


def _require_trials(trials: int) -> None:
    if trials < 1:
        raise ValueError("trials must be at least 1")


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def turns_to_goal(
    num_dice: int,
    trials: int = 100,
    rng: random.Random | None = None,
    rest: int = 8,
    exact: bool = False,
) -> list[int]:
    """Simulate how many turns a piece needs to cover ``rest`` squares.

    Each turn moves by the total of ``num_dice`` dice. With ``exact`` the piece
    must land on the goal exactly, bouncing back by the overshoot otherwise.
    """
    _require_trials(trials)
    if num_dice < 1:
        raise ValueError("num_dice must be at least 1")
    rng = _generator(rng)
    results = []
    for _ in range(trials):
        position = rest
        turn = 0
        while True:
            turn += 1
            position -= sum(rng.randint(1, _DIE_FACES) for _ in range(num_dice))
            if exact:
                if position == 0:
                    break
                if position < 0:
                    position = -position
            elif position <= 0:
                break
        results.append(turn)
    return results


def summarize(turns: Sequence[int], out: TextIO | None = None) -> Summary:
    """Summarise turn counts; write an ``"<turns> <count>"`` histogram to ``out`` if given."""
    if not turns:
        raise ValueError("turns must not be empty")
    ordered = sorted(turns)
    size = len(ordered)
    mean = sum(ordered) / size
    middle = size // 2
    if size % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) * 0.5
    else:
        median = float(ordered[middle])

    counts = Counter(ordered)
    largest = ordered[-1]
    if out is not None:
        for value in range(1, largest + 1):
            out.write(f"{value} {counts[value]}\n")

    top = max(counts.values())
    mode = min(value for value, count in counts.items() if count == top)
    return Summary(mean, median, mode)


def format_summary(summary: Summary) -> str:
    """Render a summary as the one-line report."""
    return (
        f"平均値: {summary.mean:.3f}ターン, 中央値: {summary.median:.3f}ターン, "
        f"最頻値:{summary.mode}ターン"
    )


def seventh_game_percent(
    stop_early: bool, trials: int = 1_000_000, rng: random.Random | None = None
) -> float:
    """Estimate the percentage of best-of-seven series between equal sides that reach 4-3.

    With ``stop_early`` the series ends once a side has four wins.
    """
    _require_trials(trials)
    rng = _generator(rng)
    count = 0
    for _ in range(trials):
        wins_a = wins_b = 0
        for game in range(1, _SERIES_LENGTH + 1):
            if rng.randint(0, 1) == 0:
                wins_a += 1
            else:
                wins_b += 1
            if (
                stop_early
                and game != _SERIES_LENGTH
                and (wins_a >= _WINS_NEEDED or wins_b >= _WINS_NEEDED)
            ):
                break
            if {wins_a, wins_b} == {_WINS_NEEDED, _WINS_NEEDED - 1}:
                count += 1
                break
    return count / trials * 100.0


def draw_series_percent(
    stop_early: bool, trials: int = 1_000_000, rng: random.Random | None = None
) -> float:
    """Estimate the percentage of seven-game series that end level.

    Each game is won by either side with 45% chance and drawn with 10%.
    """
    _require_trials(trials)
    rng = _generator(rng)
    count = 0
    for _ in range(trials):
        wins_a = wins_b = 0
        for game in range(1, _SERIES_LENGTH + 1):
            roll = rng.randint(1, 100)
            if roll <= 45:
                wins_a += 1
            elif roll <= 90:
                wins_b += 1
            if (
                stop_early
                and game != _SERIES_LENGTH
                and (wins_a >= _WINS_NEEDED or wins_b >= _WINS_NEEDED)
            ):
                break
            if game == _SERIES_LENGTH and wins_a == wins_b:
                count += 1
                break
    return count / trials * 100.0