# mathpuzzles

A collection of small, self-contained solvers for recreational mathematics
puzzles: digit puzzles, divisor and sequence questions, counting problems,
calendar questions, dice and card simulations, and a few problems that need
arbitrary-precision arithmetic or numerical integration.

Each puzzle is a plain function that returns its answer as ordinary Python
data (integers, lists, tuples, `fractions.Fraction` values or `mpmath`
numbers), so the results can be inspected, tested or combined freely. The
default arguments of each function reproduce the puzzle it was written for.

## Requirements

Python 3.10 or later. The only runtime dependency is `mpmath`, used by
`mathpuzzles.precision` and `mathpuzzles.integration`.

## What is inside

### `mathpuzzles.digits`
Puzzles about the decimal digits of integers.

- `numbers_without_digits`, `nth_without_digits` — count upward while
  skipping numbers that contain given digits (by default 4 and 9).
- `digit_combinations`, `find_excluded_digits` — search, in colexicographic
  order of digit triples, for the digits whose exclusion puts a given number
  at a given position.
- `count_1x1x_multiples_of_eleven`, `multiples_of_eleven_with_tens_one` —
  four-digit multiples of 11 with fixed digits.
- `count_digit_product_ending_in_five` — three-digit numbers whose digit
  product ends in 5.
- `tens_digit_of_power` — the tens digit of a large power, computed exactly.
- `numbers_with_repeated_digits` — four-digit numbers with two equal
  adjacent digits.

### `mathpuzzles.arithmetic`
Elementary number theory and sequences.

- `nth_multiple_of_3_or_7`, `count_power_of_two_triples`,
  `alternating_sequence_sum`, `fibonacci_mod`.
- `divisors`, `divisor_pairs`, `even_divisor_pairs`,
  `divisor_product_exponent`.
- `is_square`, `square_shifted_multiples`,
  `last_of_consecutive_with_difference`.

### `mathpuzzles.combinatorics`
Exact enumeration.

- `odd_factor_triples`, `count_derangements`, `partitions_into_groups`.
- `colex_combinations`, `triangles`, `distinct_selections`.
- `distinct_arrangements`, `arrangements_with_adjacent`,
  `multiples_of_five_from_cards`.
- `fractions_between` — irreducible fractions with a fixed numerator lying
  strictly between two bounds, by increasing denominator.

### `mathpuzzles.calendar_puzzles`
Weekday questions on the Gregorian calendar, using `datetime` and `calendar`.

- `tuesday_day_sum`, `matching_months`, `weekday_of_thirtieth` (which returns
  the weekday name in Japanese, e.g. `金曜日`).
- `leap_years_starting_tuesday`, `years_until_tuesday_start`.

### `mathpuzzles.dice`
Monte Carlo estimates for dice, shuffles and draws.

- `strictly_increasing_percent`, `any_pair_equal_percent`,
  `derangement_percent`, `product_at_least_percent`.
- `three_digit_draws`, `box_posterior`, `even_number_probability`.

### `mathpuzzles.board`
Board-game and match-series simulations.

- `turns_to_goal` — turns needed to reach a goal square, either by passing it
  or, with `exact=True`, by landing exactly on it with bounce-back.
- `summarize` returns a `Summary` (mean, median, mode) and, when given an
  open text stream, writes a `"<turns> <count>"` histogram to it;
  `format_summary` renders the one-line report.
- `seventh_game_percent`, `draw_series_percent` — seven-game series, with or
  without stopping once a side has four wins.

### `mathpuzzles.cards`
A 52-card deck with `Suit`, `Rank` and `Card`, `create_deck`,
`simulate_game` (independent scoring, or with `exclusive=True` only the first
matching rule scores), `suit_to_string` and `rank_to_string`.

### `mathpuzzles.sampling`
Random search and Markov chain sampling.

- `find_five_yen_count` — random search for a coin-count solution.
- `is_near_integer`, `round_to_int`, `find_integer_point`.
- `target_density`, `propose`, `metropolis_hastings`, `sum_product_pairs`.

### `mathpuzzles.precision`
Arbitrary-precision arithmetic with `mpmath` and exact integers/fractions.

- `nth_smallest_power`, `continued_sqrt5`,
  `harmonic_numbers_with_short_expansion`, `series_partial_reciprocals`.
- `primes_up_to`, `harmonic_sum`, `euler_product`.

### `mathpuzzles.integration`
High-precision quadrature.

- `romberg_integrate` and `romberg_answer` (integral of 1/(1+x³) on [0, 1]
  against its closed form).
- `GaussLegendre` with its `integrate` method, `log_tanh_integrand` and
  `gauss_legendre_answer`.

## Randomness and running time

Every simulation takes an optional `random.Random` instance. Pass a seeded
one for repeatable results; without one, a fresh unseeded generator is used.

The default trial counts are large (up to a hundred million draws in
`cards.simulate_game`), as are some defaults elsewhere: `primes_up_to`
sieves up to 100,000,000 and the `mpmath` functions work at hundreds or
thousands of digits. Pass smaller arguments for quick runs.

## Example

```python
import random

from mathpuzzles import arithmetic, board, cards

print(arithmetic.divisors(120))

rng = random.Random(42)
deck = cards.create_deck()
print(len(deck), cards.rank_to_string(deck[0].rank), cards.suit_to_string(deck[0].suit))

turns = board.turns_to_goal(2, 1000, rng, 8, False)
print(board.format_summary(board.summarize(turns, None)))
```

## What it does not do

The package is a library only. It installs no command-line programs and
prints nothing: each function returns its answer, and the only output it
writes is the histogram `board.summarize` sends to a stream you pass in.

## Tests

```
pip install -e ".[test]"
pytest
```