"""A card-drawing game: score four players over repeated random draws."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

_INDEPENDENT_TRIALS = 100_000_000
_EXCLUSIVE_TRIALS = 1_000_000

_DIAMOND_POINTS = 100
_FACE_POINTS = 150
_ACE_POINTS = 300
_HEART_SEVEN_POINTS = 1500


class Suit(Enum):
    """The four suits of a standard deck."""

    SPADES = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3


class Rank(IntEnum):
    """The thirteen ranks of a standard deck, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


_FACES = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})

_SUIT_NAMES = {
    Suit.SPADES: "Spades",
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
}

_RANK_LETTERS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True)
class Card:
    """A playing card."""

    suit: Suit
    rank: Rank


def create_deck() -> list[Card]:
    """Return the 52 cards, suit by suit, each suit from Ace to King."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def simulate_game(
    deck: Sequence[Card],
    trials: int | None = None,
    rng: random.Random | None = None,
    exclusive: bool = False,
) -> tuple[int, int, int, int]:
    """Draw a card ``trials`` times with replacement and total the four players' points.

    A scores 100 for a diamond, B 150 for a face card, C 300 for an ace and
    D 1500 for the seven of hearts. With ``exclusive`` only the first of these
    rules that applies, in that order, scores.
    """
    if not deck:
        raise ValueError("deck must not be empty")
    if trials is None:
        trials = _EXCLUSIVE_TRIALS if exclusive else _INDEPENDENT_TRIALS
    if trials < 1:
        raise ValueError("trials must be at least 1")
    rng = rng if rng is not None else random.Random()

    a = b = c = d = 0
    for _ in range(trials):
        card = deck[rng.randrange(len(deck))]
        diamond = card.suit is Suit.DIAMONDS
        face = card.rank in _FACES
        ace = card.rank is Rank.ACE
        heart_seven = card.suit is Suit.HEARTS and card.rank is Rank.SEVEN
        if exclusive:
            if diamond:
                a += _DIAMOND_POINTS
            elif face:
                b += _FACE_POINTS
            elif ace:
                c += _ACE_POINTS
            elif heart_seven:
                d += _HEART_SEVEN_POINTS
        else:
            if diamond:
                a += _DIAMOND_POINTS
            if face:
                b += _FACE_POINTS
            if ace:
                c += _ACE_POINTS
            if heart_seven:
                d += _HEART_SEVEN_POINTS
    return a, b, c, d


def suit_to_string(suit: Suit) -> str:
    """Return the English name of ``suit``."""
    try:
        return _SUIT_NAMES[Suit(suit)]
    except (ValueError, KeyError):
        raise ValueError("Invalid suit") from None


def rank_to_string(rank: Rank) -> str:
    """Return the short label of ``rank``: A, J, Q, K or the number."""
    rank = Rank(rank)
    return _RANK_LETTERS.get(rank, str(int(rank)))