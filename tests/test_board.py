import io
import math
import random
import statistics

import pytest

from mathpuzzles.board import (
    Summary,
    draw_series_percent,
    format_summary,
    seventh_game_percent,
    summarize,
    turns_to_goal,
)


def test_summarize_small_list():
    assert summarize([3, 2, 1, 2]) == Summary(2.0, 2.0, 2)


def test_summarize_agrees_with_statistics():
    rng = random.Random(21)
    turns = [rng.randint(1, 9) for _ in range(101)]
    summary = summarize(turns)
    assert summary.mean == pytest.approx(statistics.mean(turns))
    assert summary.median == statistics.median(turns)
    assert summary.mode == min(statistics.multimode(turns))


def test_summarize_even_length_median_and_tie():
    turns = [5, 3, 5, 3]
    summary = summarize(turns)
    assert summary.median == statistics.median(turns)
    assert summary.mode == min(turns)


def test_summarize_writes_histogram():
    out = io.StringIO()
    summarize([1, 3, 3], out)
    assert out.getvalue() == "1 1\n2 0\n3 2\n"


def test_summarize_rejects_empty():
    with pytest.raises(ValueError):
        summarize([])


def test_format_summary():
    text = format_summary(Summary(2.0, 2.0, 2))
    assert text == "平均値: 2.000ターン, 中央値: 2.000ターン, 最頻値:2ターン"


@pytest.mark.parametrize("num_dice", [1, 2, 3])
def test_turns_to_goal_bounds(num_dice):
    rest = 8
    trials = 300
    turns = turns_to_goal(num_dice, trials, random.Random(num_dice), rest)
    assert len(turns) == trials
    assert max(turns) <= math.ceil(rest / num_dice)
    assert min(turns) >= math.ceil(rest / (6 * num_dice))


@pytest.mark.parametrize("seed", range(20))
def test_exact_landing_never_faster(seed):
    loose = turns_to_goal(2, 1, random.Random(seed), 8, False)
    exact = turns_to_goal(2, 1, random.Random(seed), 8, True)
    assert exact[0] >= loose[0]


def test_turns_to_goal_reproducible():
    first = turns_to_goal(3, 50, random.Random(4), exact=True)
    second = turns_to_goal(3, 50, random.Random(4), exact=True)
    assert first == second


def test_turns_to_goal_rejects_no_dice():
    with pytest.raises(ValueError):
        turns_to_goal(0, 10, random.Random(0))


def test_turns_to_goal_rejects_bad_trials():
    with pytest.raises(ValueError):
        turns_to_goal(2, 0)


def test_seventh_game_reproducible_and_bounded():
    first = seventh_game_percent(True, 2000, random.Random(6))
    second = seventh_game_percent(True, 2000, random.Random(6))
    assert first == second
    assert 0.0 < first < 100.0


def test_full_series_reaches_four_three_more_often():
    stop = seventh_game_percent(True, 20000, random.Random(1))
    full = seventh_game_percent(False, 20000, random.Random(2))
    assert full > stop


def test_seventh_game_rejects_bad_trials():
    with pytest.raises(ValueError):
        seventh_game_percent(True, 0)


@pytest.mark.parametrize("stop_early", [True, False])
def test_draw_series_reproducible_and_bounded(stop_early):
    first = draw_series_percent(stop_early, 2000, random.Random(10))
    second = draw_series_percent(stop_early, 2000, random.Random(10))
    assert first == second
    assert 0.0 < first < 100.0


def test_draw_series_rejects_bad_trials():
    with pytest.raises(ValueError):
        draw_series_percent(False, -1)