"""A game: players take turns rolling five dice up to three times and scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from dicecard.player import Player, RollDecision
from dicecard.scoring import Hand

SCOREABLE_COUNT = 13
DICE = 5


@dataclass
class Game:
    """Players, the seed for the dice, and the winners once play has finished."""

    players: list[Player] = field(default_factory=list)
    seed: int = 0
    winners: list[Player] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def roll_die(self) -> int:
        """A value from 1 to 6."""
        return self._rng.randint(1, 6)

    def reroll(self, hand: Hand, decision: RollDecision) -> tuple[int, ...]:
        """Reroll the dice not kept and return the hand sorted."""
        return tuple(
            sorted(die if keep else self.roll_die() for die, keep in zip(hand, decision))
        )

    def play(self) -> list[Player]:
        """Play every round from the seed and record the winner."""
        self._rng.seed(self.seed)
        for _ in range(SCOREABLE_COUNT):
            for player in self.players:
                self.play_turn(player)
        top_score = 0
        for player in self.players:
            total = player.scorecard.total()
            if total >= top_score:
                top_score = total
                self.winners = [player]
        return self.winners

    def play_turn(self, player: Player) -> None:
        """Roll, let the player reroll up to twice, then score the hand."""
        hand = tuple(sorted(self.roll_die() for _ in range(DICE)))
        for rolls_remaining in (2, 1):
            decision = player.assess_roll(hand, rolls_remaining)
            if decision.will_keep_all():
                break
            hand = self.reroll(hand, decision)
        self._score(player, hand)

    @staticmethod
    def _score(player: Player, hand: Hand) -> None:
        scoreable = player.pick_scorable(hand)
        player.scorecard.score(hand, scoreable)
        print(player.name)
        print(player.scorecard.render())