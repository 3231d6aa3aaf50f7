"""Players: the per-roll decision, the player interface and a terminal-driven player."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO

from dicecard.scorecard import ScorableName, Scorecard, scoreable_by_name
from dicecard.scoring import Hand, Scoreable

_KEEP_PATTERN = re.compile(r"[1-6]{1,5}")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_FACES = "123456"


class RollDecision(tuple):
    """Per-die flags for a roll: True keeps the die, False rerolls it."""

    def __new__(cls, keep: Iterable[bool] = ()) -> RollDecision:
        return super().__new__(cls, (bool(flag) for flag in keep))

    def will_keep_all(self) -> bool:
        """True when no die is to be rerolled."""
        return all(self)

    def __repr__(self) -> str:
        return f"RollDecision({list(self)!r})"


class Player(ABC):
    """Someone taking turns: decides which dice to keep and where to score."""

    name = "player"
    scorecard: Scorecard

    @abstractmethod
    def assess_roll(self, hand: Hand, rolls_remaining: int) -> RollDecision:
        """Choose which dice of the hand to keep."""

    @abstractmethod
    def pick_scorable(self, hand: Hand) -> Scoreable:
        """Choose the row the final hand is scored into."""


def _dice(hand: Hand) -> str:
    return ", ".join(str(die) for die in hand) + ", "


@dataclass
class HumanPlayer(Player):
    """A player who answers prompts on a text stream."""

    name = "Mr. Human!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!"

    scorecard: Scorecard = field(default_factory=Scorecard)
    input_stream: TextIO | None = None
    output_stream: TextIO | None = None

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.output_stream or sys.stdout)

    def _read_line(self) -> str:
        line = (self.input_stream or sys.stdin).readline()
        if not line:
            raise EOFError("no more input")
        return line

    def assess_roll(self, hand: Hand, rolls_remaining: int) -> RollDecision:
        """Ask for the face values to keep until the answer fits the hand."""
        self._say(f"Roll: {_dice(hand)}")
        while True:
            self._say("please enter the values you want to keep.")
            text = self._read_line()
            if text != "\n" and not _KEEP_PATTERN.search(text):
                self._say("only enter numbers between 1 and 6")
                continue
            values = self._parse_values(text)
            if values is None:
                continue
            self._say("values selected:", values)
            decision = self._match(hand, values)
            if decision is not None:
                return decision

    def _parse_values(self, text: str) -> list[int] | None:
        values: list[int] = []
        for index, char in enumerate(text):
            if char == "\n":
                break
            if char not in _FACES:
                self._say("all values must be between 1 and 6", ord(char), ord(char), char, index)
                return None
            values.append(int(char))
        return values

    def _match(self, hand: Hand, values: list[int]) -> RollDecision | None:
        keep = [False] * len(hand)
        for value in values:
            index = next(
                (i for i, die in enumerate(hand) if not keep[i] and die == value),
                None,
            )
            if index is None:
                self._say("only specify values you have, please, not", value)
                return None
            keep[index] = True
        return RollDecision(keep)

    def ensure_valid_response(self, prompt: str, is_valid: Callable[[str], bool]) -> str:
        """Repeat the prompt until ``is_valid`` accepts the answer, and return it."""
        while True:
            self._say(prompt)
            answer = self._read_line().strip("\n")
            if is_valid(answer):
                return answer

    def pick_scorable(self, hand: Hand) -> Scoreable:
        """Show the open rows with their points and ask which one to score."""
        self._say(f"Hand: {_dice(hand)}")
        card = self.scorecard
        had_yahtzee = card.had_yahtzee()
        options: dict[int, ScorableName] = {}
        labels: dict[ScorableName, str] = {}
        for number, name in enumerate(ScorableName, start=1):
            if card.score_for(name) is not None:
                continue
            scoreable = scoreable_by_name(name)
            if scoreable is None:
                continue
            options[number] = name
            points = scoreable.score(hand, had_yahtzee)
            labels[name] = f"({points:2d} points) [{number}] to score {name.value};"

        prompt = "Choose a row to score this roll\n" + card.render_with_decorator(
            lambda name: labels.get(name, "")
        )

        def is_valid(answer: str) -> bool:
            return bool(_INTEGER.fullmatch(answer)) and int(answer) in options

        choice = int(self.ensure_valid_response(prompt, is_valid))
        chosen = scoreable_by_name(options[choice])
        assert chosen is not None
        return chosen