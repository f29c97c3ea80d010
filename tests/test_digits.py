import math

import pytest

from mathpuzzles.digits import (
    count_1x1x_multiples_of_eleven,
    count_digit_product_ending_in_five,
    digit_combinations,
    find_excluded_digits,
    multiples_of_eleven_with_tens_one,
    nth_without_digits,
    numbers_with_repeated_digits,
    numbers_without_digits,
    tens_digit_of_power,
)


def test_numbers_without_digits_exclude_digits():
    result = list(numbers_without_digits((4, 9), 200))
    assert all("4" not in str(n) and "9" not in str(n) for n in result)
    assert 13 in result
    assert 14 not in result
    assert 199 not in result
    assert result == sorted(result)


def test_numbers_without_digits_stays_below_limit():
    result = list(numbers_without_digits((), 50))
    assert result == list(range(1, 50))


@pytest.mark.parametrize("position", [1, 5, 17, 100])
def test_nth_matches_enumeration(position):
    listed = list(numbers_without_digits((4, 9), 1000))
    assert nth_without_digits(position, (4, 9), 1000) == listed[position - 1]


def test_nth_without_digits_first():
    assert nth_without_digits(1, (4, 9), 10) == 1


def test_nth_without_digits_out_of_range():
    assert nth_without_digits(100, (4, 9), 10) is None
    assert nth_without_digits(0, (4, 9), 10) is None


def test_nth_default_avoids_digits():
    answer = nth_without_digits()
    assert "4" not in str(answer) and "9" not in str(answer)
    assert answer < 10000


def test_digit_combinations_shape():
    combos = digit_combinations(3)
    assert len(combos) == math.comb(10, 3)
    assert len(set(combos)) == len(combos)
    assert all(list(c) == sorted(c) and len(c) == 3 for c in combos)
    assert combos[0] == tuple(range(3))


def test_digit_combinations_colex_order():
    combos = digit_combinations(3)
    reversed_keys = [c[::-1] for c in combos]
    assert reversed_keys == sorted(reversed_keys)


def test_digit_combinations_edge_cases():
    assert digit_combinations(0) == [()]
    assert digit_combinations(11) == []
    with pytest.raises(ValueError):
        digit_combinations(-1)


def test_find_excluded_digits_default():
    combo = find_excluded_digits(3, 125, 269, 10000)
    assert combo is not None
    assert len(combo) == 3
    assert nth_without_digits(125, combo, 10000) == 269


def test_find_excluded_digits_impossible():
    assert find_excluded_digits(3, 1, 5, 10000) is None


def test_count_1x1x_multiples_of_eleven():
    assert count_1x1x_multiples_of_eleven() == 9


def test_multiples_with_tens_one_agree_with_count():
    found = multiples_of_eleven_with_tens_one()
    assert len(found) == count_1x1x_multiples_of_eleven()
    assert all(n % 11 == 0 and str(n)[2] == "1" for n in found)


def test_count_digit_product_ending_in_five():
    assert count_digit_product_ending_in_five() == 61


def test_tens_digit_of_power_default():
    assert tens_digit_of_power() == 9


def test_tens_digit_depends_on_last_two_digits():
    assert tens_digit_of_power(1999, 1999) == tens_digit_of_power(99, 1999)
    assert tens_digit_of_power(12, 1) == 1
    assert tens_digit_of_power(-12, 1) == 1


def test_tens_digit_negative_exponent():
    with pytest.raises(ValueError):
        tens_digit_of_power(3, -1)


def test_numbers_with_repeated_digits():
    found = numbers_with_repeated_digits()
    assert 1111 in found
    assert 1000 in found
    assert 1212 not in found
    assert found == sorted(found)
    assert all(any(a == b for a, b in zip(str(n), str(n)[1:])) for n in found)
    assert len(found) >= 2024