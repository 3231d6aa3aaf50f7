"""A computer player that chases the most promising open row."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise

from dicecard.player import Player, RollDecision
from dicecard.scorecard import ScorableName, ScorableVariety, Scorecard, scoreable_by_name
from dicecard.scoring import Hand, Scoreable, value_counts

_FACE_NUMBERS = {
    ScorableName.ONES: 1,
    ScorableName.TWOS: 2,
    ScorableName.THREES: 3,
    ScorableName.FOURS: 4,
    ScorableName.FIVES: 5,
    ScorableName.SIXES: 6,
}


def _bracketed(items: Iterable[str]) -> str:
    return "[" + " ".join(items) + "]"


class KeepStrategy(ABC):
    """Decides which dice to hold while chasing a kind of row."""

    @abstractmethod
    def pick_keepers(self, hand: Hand) -> RollDecision:
        """Flags for the dice to keep."""


@dataclass(frozen=True)
class FaceValueStrategy(KeepStrategy):
    """Keep every die showing one face value."""

    kept_number: int = 0

    def pick_keepers(self, hand: Hand) -> RollDecision:
        return RollDecision(die == self.kept_number for die in hand)


@dataclass(frozen=True)
class OfAKindValueStrategy(KeepStrategy):
    """Keep the dice of the most frequent value; ties go to the last seen."""

    def pick_keepers(self, hand: Hand) -> RollDecision:
        most_value, most_count = 1, 0
        for value, count in value_counts(hand).items():
            if count >= most_count:
                most_value, most_count = value, count
        return RollDecision(die == most_value for die in hand)


@dataclass(frozen=True)
class StraightStrategy(KeepStrategy):
    """Keep one die of each distinct value in a sorted hand."""

    def pick_keepers(self, hand: Hand) -> RollDecision:
        return RollDecision(current != previous for previous, current in pairwise((0, *hand)))


def face_value_strategy(name: ScorableName) -> FaceValueStrategy:
    """Keep the face value an upper-section row counts; 0 for any other row."""
    return FaceValueStrategy(_FACE_NUMBERS.get(name, 0))


def strategy_for_scorable(name: ScorableName) -> KeepStrategy | None:
    """The keep strategy used when chasing a row, or None for computed rows."""
    variety = name.variety()
    if variety is None:
        return None
    if variety is ScorableVariety.FACE_VALUE:
        return face_value_strategy(name)
    strategies: dict[ScorableVariety, KeepStrategy] = {
        ScorableVariety.OF_A_KIND: OfAKindValueStrategy(),
        ScorableVariety.FULL_HOUSE: FaceValueStrategy(),
        ScorableVariety.STRAIGHT: StraightStrategy(),
        ScorableVariety.CHANCE: OfAKindValueStrategy(),
    }
    return strategies[variety]


@dataclass
class AIPlayer(Player):
    """A player that picks rows by rough completion probability."""

    name = "🤖"

    scorecard: Scorecard = field(default_factory=Scorecard)

    def _open_rows(self) -> Iterator[tuple[ScorableName, Scoreable]]:
        for name in ScorableName:
            scoreable = scoreable_by_name(name)
            if scoreable is None or name is ScorableName.CHANCE:
                continue
            if self.scorecard.score_for(name) is not None:
                continue
            yield name, scoreable

    def assess_roll(self, hand: Hand, rolls_remaining: int) -> RollDecision:
        """Choose a target row and keep the dice that help towards it."""
        best_proportion = 0.0
        best_name: ScorableName | None = None
        for name, scoreable in self._open_rows():
            probability = scoreable.probability_to_hit(hand, rolls_remaining)
            maximum = scoreable.max_possible()
            expected = probability * float(maximum)
            proportion = expected / float(maximum)
            if name is ScorableName.LARGE_STRAIGHT and probability < 1.0:
                proportion -= 0.5
            if name.variety() is ScorableVariety.FACE_VALUE and probability >= 1.0:
                proportion += 0.25
            print(f"\t{name.value}, {probability:.2f}, {maximum}, {proportion:.2f}")
            if proportion >= best_proportion:
                best_proportion = proportion
                best_name = name

        if best_name is None:
            best_name = ScorableName.CHANCE

        strategy = strategy_for_scorable(best_name)
        if strategy is None:
            raise ValueError(f"no keep strategy for {best_name.value}")
        decision = strategy.pick_keepers(hand)
        print(
            f"roll: {_bracketed(str(d) for d in hand)}; hand: {rolls_remaining}; "
            f"chasing: {best_name.value}; holding: {_bracketed(str(k).lower() for k in decision)}"
        )
        return decision

    def pick_scorable(self, hand: Hand) -> Scoreable:
        """Score into the open row worth the most, falling back to Chance."""
        had_yahtzee = self.scorecard.had_yahtzee()
        highest_score = 0
        highest_name: ScorableName | None = None
        for name, scoreable in self._open_rows():
            points = scoreable.score(hand, had_yahtzee)
            if name.variety() is ScorableVariety.FACE_VALUE:
                if scoreable.probability_to_hit(hand, 0) > 1.0:
                    points += 10
            if points >= highest_score:
                highest_score = points
                highest_name = name

        if highest_name is None:
            highest_name = ScorableName.CHANCE

        print(f"given {_bracketed(format(d, 'x') for d in hand)}, choosing {highest_name.value}")
        chosen = scoreable_by_name(highest_name)
        assert chosen is not None
        return chosen