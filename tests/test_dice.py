import random

import pytest

from mathpuzzles import dice
from mathpuzzles.combinatorics import count_derangements, distinct_arrangements


def _all_three_digit_outcomes():
    return {
        int(text[::-1])
        for text in distinct_arrangements(("1", "2", "2", "3", "3", "3"), 3)
    }


def test_strictly_increasing_is_reproducible_and_bounded():
    first = dice.strictly_increasing_percent(2000, 3, random.Random(1))
    second = dice.strictly_increasing_percent(2000, 3, random.Random(1))
    assert first == second
    assert 0.0 <= first <= 100.0


def test_strictly_increasing_impossible_with_seven_rolls():
    assert dice.strictly_increasing_percent(500, 7, random.Random(3)) == 0.0


def test_strictly_increasing_counts_whole_trials():
    trials = 1234
    percent = dice.strictly_increasing_percent(trials, 3, random.Random(5))
    count = percent * trials / 100.0
    assert count == pytest.approx(round(count))


@pytest.mark.parametrize("trials", [0, -5])
def test_strictly_increasing_rejects_bad_trials(trials):
    with pytest.raises(ValueError):
        dice.strictly_increasing_percent(trials)


def test_strictly_increasing_rejects_negative_rolls():
    with pytest.raises(ValueError):
        dice.strictly_increasing_percent(10, -1, random.Random(0))


def test_any_pair_equal_reproducible_and_bounded():
    first = dice.any_pair_equal_percent(3000, random.Random(7))
    second = dice.any_pair_equal_percent(3000, random.Random(7))
    assert first == second
    assert 0.0 < first < 100.0


def test_any_pair_equal_rejects_bad_trials():
    with pytest.raises(ValueError):
        dice.any_pair_equal_percent(0)


def test_derangement_percent_close_to_exact_ratio():
    items = ("A", "B", "C", "D")
    derangements, total = count_derangements(items)
    percent = dice.derangement_percent(items, 20000, random.Random(42))
    assert abs(percent - 100.0 * derangements / total) < 2.0


def test_derangement_of_single_item_matches_exact_count():
    derangements, total = count_derangements(("A",))
    percent = dice.derangement_percent(("A",), 200, random.Random(0))
    assert percent == 100.0 * derangements / total


def test_product_threshold_monotonic_for_same_seed():
    low = dice.product_at_least_percent(50, 3000, random.Random(11))
    high = dice.product_at_least_percent(100, 3000, random.Random(11))
    assert low >= high


def test_product_trivial_thresholds_agree():
    zero = dice.product_at_least_percent(0, 400, random.Random(2))
    one = dice.product_at_least_percent(1, 400, random.Random(9))
    assert zero == one


def test_product_rejects_bad_trials():
    with pytest.raises(ValueError):
        dice.product_at_least_percent(100, 0)


def test_three_digit_draws_cover_all_outcomes():
    draws = dice.three_digit_draws(5000, random.Random(42))
    assert set(draws) == _all_three_digit_outcomes()
    assert draws == sorted(set(draws))


def test_three_digit_draws_reproducible():
    draws = dice.three_digit_draws(50, random.Random(4))
    assert draws == dice.three_digit_draws(50, random.Random(4))
    assert draws == sorted(set(draws))
    assert len(draws) >= 1
    assert set(draws) <= _all_three_digit_outcomes()


def test_box_posterior_reproducible_and_bounded():
    first = dice.box_posterior(5000, random.Random(8))
    second = dice.box_posterior(5000, random.Random(8))
    assert first == second
    assert 0.0 < first < 1.0


def test_box_posterior_rejects_bad_trials():
    with pytest.raises(ValueError):
        dice.box_posterior(0)


def test_even_number_probability_all_even():
    assert dice.even_number_probability((2, 4), 300, random.Random(1)) == 1.0


def test_even_number_probability_all_odd():
    assert dice.even_number_probability((1, 3), 300, random.Random(1)) == 0.0


def test_even_number_probability_default_values_bounded():
    first = dice.even_number_probability(trials=2000, rng=random.Random(13))
    second = dice.even_number_probability(trials=2000, rng=random.Random(13))
    assert first == second
    assert 0.0 < first < 1.0


def test_even_number_probability_rejects_empty_values():
    with pytest.raises(ValueError):
        dice.even_number_probability((), 10, random.Random(0))