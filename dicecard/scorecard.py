"""The scorecard: named rows, totals, bonuses and a printable table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from dicecard.scoring import (
    Chance,
    Fives,
    FourOfAKind,
    Fours,
    FullHouse,
    Hand,
    LargeStraight,
    Ones,
    Scoreable,
    Sixes,
    SmallStraight,
    ThreeOfAKind,
    Threes,
    Twos,
    Yahtzee,
    is_yahtzee,
)

UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS = 25
YAHTZEE_BONUS_POINTS = 100


class ScorableVariety(str, Enum):
    FACE_VALUE = "FaceValue"
    STRAIGHT = "Straight"
    OF_A_KIND = "OfAKind"
    FULL_HOUSE = "FullHouse"
    CHANCE = "Chance"

    def __str__(self) -> str:
        return self.value


class ScorableName(str, Enum):
    """Rows of the scorecard, in the order they are printed."""

    ONES = "Ones"
    TWOS = "Twos"
    THREES = "Threes"
    FOURS = "Fours"
    FIVES = "Fives"
    SIXES = "Sixes"
    SUBTOTAL = "Subtotal"
    BONUS = "Bonus"
    THREE_OF_A_KIND = "3 Of A Kind"
    FOUR_OF_A_KIND = "4 Of A Kind"
    FULL_HOUSE = "Full House"
    SMALL_STRAIGHT = "Small Straight"
    LARGE_STRAIGHT = "Large Straight"
    CHANCE = "Chance"
    YAHTZEE = "Yahtzee"
    YAHTZEE_BONUS = "Yahtzee Bonus"

    def __str__(self) -> str:
        return self.value

    def variety(self) -> ScorableVariety | None:
        """The kind of row this is, or None for computed rows."""
        return _VARIETIES.get(self)


_VARIETIES = {
    ScorableName.ONES: ScorableVariety.FACE_VALUE,
    ScorableName.TWOS: ScorableVariety.FACE_VALUE,
    ScorableName.THREES: ScorableVariety.FACE_VALUE,
    ScorableName.FOURS: ScorableVariety.FACE_VALUE,
    ScorableName.FIVES: ScorableVariety.FACE_VALUE,
    ScorableName.SIXES: ScorableVariety.FACE_VALUE,
    ScorableName.SMALL_STRAIGHT: ScorableVariety.STRAIGHT,
    ScorableName.LARGE_STRAIGHT: ScorableVariety.STRAIGHT,
    ScorableName.THREE_OF_A_KIND: ScorableVariety.OF_A_KIND,
    ScorableName.FOUR_OF_A_KIND: ScorableVariety.OF_A_KIND,
    ScorableName.YAHTZEE: ScorableVariety.OF_A_KIND,
    ScorableName.FULL_HOUSE: ScorableVariety.FULL_HOUSE,
    ScorableName.CHANCE: ScorableVariety.CHANCE,
}

_SCOREABLES: dict[ScorableName, type[Scoreable]] = {
    ScorableName.ONES: Ones,
    ScorableName.TWOS: Twos,
    ScorableName.THREES: Threes,
    ScorableName.FOURS: Fours,
    ScorableName.FIVES: Fives,
    ScorableName.SIXES: Sixes,
    ScorableName.THREE_OF_A_KIND: ThreeOfAKind,
    ScorableName.FOUR_OF_A_KIND: FourOfAKind,
    ScorableName.FULL_HOUSE: FullHouse,
    ScorableName.SMALL_STRAIGHT: SmallStraight,
    ScorableName.LARGE_STRAIGHT: LargeStraight,
    ScorableName.CHANCE: Chance,
    ScorableName.YAHTZEE: Yahtzee,
}

_NAME_BY_TYPE = {cls: name for name, cls in _SCOREABLES.items()}

_UPPER = (
    ScorableName.ONES,
    ScorableName.TWOS,
    ScorableName.THREES,
    ScorableName.FOURS,
    ScorableName.FIVES,
    ScorableName.SIXES,
)

_LOWER = (
    ScorableName.THREE_OF_A_KIND,
    ScorableName.FOUR_OF_A_KIND,
    ScorableName.FULL_HOUSE,
    ScorableName.SMALL_STRAIGHT,
    ScorableName.LARGE_STRAIGHT,
    ScorableName.CHANCE,
    ScorableName.YAHTZEE,
    ScorableName.YAHTZEE_BONUS,
)

_RULE = "-" * 37 + "\n"


def scoreable_by_name(name: ScorableName) -> Scoreable | None:
    """The scoring rule for a row, or None for rows that cannot be scored into."""
    cls = _SCOREABLES.get(name)
    return cls() if cls is not None else None


def _fresh_entries() -> dict[ScorableName, int]:
    return {ScorableName.YAHTZEE_BONUS: 0}


@dataclass
class Scorecard:
    """Recorded scores keyed by row; unscored rows are absent."""

    entries: dict[ScorableName, int] = field(default_factory=_fresh_entries)

    def score_for(self, name: ScorableName) -> int | None:
        """The value shown for a row, or None when it is still open."""
        if name is ScorableName.SUBTOTAL:
            return self.subtotal()
        if name is ScorableName.BONUS:
            sub = self.subtotal()
            return sub + UPPER_BONUS if sub > UPPER_BONUS_THRESHOLD else sub
        return self.entries.get(name)

    def had_yahtzee(self) -> bool:
        """True when a non-zero yahtzee has been recorded."""
        return bool(self.entries.get(ScorableName.YAHTZEE))

    def score(self, hand: Hand, scoreable: Scoreable) -> int:
        """Score the hand into the given row, award any yahtzee bonus, return the points."""
        result = scoreable.score(hand, self.had_yahtzee())
        self._score_yahtzee_bonus(hand)
        name = _NAME_BY_TYPE.get(type(scoreable))
        if name is not None:
            self.entries[name] = result
        return result

    def subtotal(self) -> int:
        return sum(self.entries.get(name, 0) for name in _UPPER)

    def total(self) -> int:
        sub = self.subtotal()
        bonus = UPPER_BONUS if sub >= UPPER_BONUS_THRESHOLD else 0
        return sub + bonus + sum(self.entries.get(name, 0) for name in _LOWER)

    def _score_yahtzee_bonus(self, hand: Hand) -> int:
        if not self.entries.get(ScorableName.YAHTZEE):
            return 0
        if is_yahtzee(hand):
            self.entries[ScorableName.YAHTZEE_BONUS] = (
                self.entries.get(ScorableName.YAHTZEE_BONUS, 0) + YAHTZEE_BONUS_POINTS
            )
        return self.entries.get(ScorableName.YAHTZEE_BONUS, 0)

    def render(self) -> str:
        """The scorecard as a text table."""
        return self.render_with_decorator(lambda name: "")

    def render_with_decorator(self, decorate: Callable[[ScorableName], str]) -> str:
        """The scorecard as a text table, with ``decorate(name)`` appended to each row."""
        lines = [_RULE, f"| {'name':<29}score|\n"]
        sub = self.subtotal()
        for name in ScorableName:
            if name is ScorableName.SUBTOTAL:
                value = str(sub)
            elif name is ScorableName.BONUS:
                value = str(UPPER_BONUS) if sub >= UPPER_BONUS_THRESHOLD else "0"
            elif name in self.entries:
                value = str(self.entries[name])
            else:
                value = "-"
            lines.append(f"| {name.value:<14}                 {value:>3}|{decorate(name)}\n")
        lines.append(f"| {'Total':<14}                 {self.total():>3}|\n")
        lines.append(_RULE)
        return "".join(lines)