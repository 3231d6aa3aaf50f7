"""Scoring rules and rough hit probabilities for each category of the dice game."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Sequence

Hand = Sequence[int]


def value_counts(hand: Hand) -> Counter[int]:
    """Count how many dice show each face value."""
    return Counter(hand)


def score_face_values(hand: Hand, value: int) -> int:
    """Sum the dice that show ``value``."""
    return sum(die for die in hand if die == value)


def is_yahtzee(hand: Hand) -> bool:
    """True when all five dice show the same value."""
    return 5 in value_counts(hand).values()


def is_joker(hand: Hand, had_yahtzee: bool) -> bool:
    """True when the hand is a yahtzee and a yahtzee was already scored."""
    return is_yahtzee(hand) and had_yahtzee


def _highest_count(hand: Hand) -> int:
    return max(value_counts(hand).values(), default=0)


class Scoreable(ABC):
    """A row of the scorecard that a hand can be scored into."""

    @abstractmethod
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        """Points the hand earns in this row."""

    @abstractmethod
    def max_possible(self) -> int:
        """Highest score this row can ever give."""

    @abstractmethod
    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        """Rough estimate of the chance of completing this row."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FaceValue(Scoreable):
    """Upper-section row that sums the dice of one face value."""

    face = 0

    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return score_face_values(hand, self.face)

    def max_possible(self) -> int:
        return 5 * self.face

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        # Deliberately measured out of 3 so that a likely upper bonus is favoured.
        return value_counts(hand)[self.face] / 3


class Ones(FaceValue):
    face = 1


class Twos(FaceValue):
    face = 2


class Threes(FaceValue):
    face = 3


class Fours(FaceValue):
    face = 4


class Fives(FaceValue):
    face = 5


class Sixes(FaceValue):
    face = 6


class ThreeOfAKind(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return sum(hand) if _highest_count(hand) >= 3 else 0

    def max_possible(self) -> int:
        return 5 * 6

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 1.0 if _highest_count(hand) >= 3 else 0.0


class FourOfAKind(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return sum(hand) if _highest_count(hand) >= 4 else 0

    def max_possible(self) -> int:
        return 5 * 6

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 1.0 if _highest_count(hand) >= 4 else 0.0


class FullHouse(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        if is_joker(hand, had_yahtzee):
            return 25
        counts = set(value_counts(hand).values())
        has_two = 2 in counts or 5 in counts
        has_three = 3 in counts or 5 in counts
        return 25 if has_two and has_three else 0

    def max_possible(self) -> int:
        return 25

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 0.0


class SmallStraight(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        if is_joker(hand, had_yahtzee):
            return 30
        counts = value_counts(hand)
        scoring = (counts[3] >= 1 and counts[4] >= 1) and (
            (counts[1] >= 1 and counts[2] >= 1)
            or (counts[2] >= 1 and counts[5] >= 1)
            or (counts[5] >= 1 and counts[6] >= 1)
        )
        return 30 if scoring else 0

    def max_possible(self) -> int:
        return 30

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 0.0


def _ratio(numerator: float, rolls_remaining: int) -> float:
    denominator = 6.0 * rolls_remaining
    if denominator == 0:
        return math.inf
    return numerator / denominator


class LargeStraight(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        if is_joker(hand, had_yahtzee):
            return 40
        counts = value_counts(hand)
        middle = all(counts[value] == 1 for value in (2, 3, 4, 5))
        return 40 if middle and (counts[1] == 1 or counts[6] == 1) else 0

    def max_possible(self) -> int:
        return 40

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        """The lower of the estimates for the low and the high straight."""
        counts = value_counts(hand)
        missing_low = sum(1 for value in range(0, 5) if counts[value] == 0)
        missing_high = sum(1 for value in range(1, 6) if counts[value] == 0)
        return min(
            _ratio(6 - missing_low, rolls_remaining),
            _ratio(6 - missing_high, rolls_remaining),
        )


class Chance(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return sum(hand)

    def max_possible(self) -> int:
        return 5 * 6

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 0.0


class Yahtzee(Scoreable):
    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return 50 if is_yahtzee(hand) else 0

    def max_possible(self) -> int:
        return 50

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 1.0 if _highest_count(hand) == 5 else 0.0


class ErrorScore(Scoreable):
    """A row that scores nothing and is never recorded."""

    def score(self, hand: Hand, had_yahtzee: bool) -> int:
        return 0

    def max_possible(self) -> int:
        return 0

    def probability_to_hit(self, hand: Hand, rolls_remaining: int) -> float:
        return 0.0