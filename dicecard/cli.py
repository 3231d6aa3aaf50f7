"""Command line: play seeded games, run batches, compare against old results, solve star puzzles."""

from __future__ import annotations

import math
import os
import random
import re
import sys
import time
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from dicecard.game import Game
from dicecard.player import HumanPlayer
from dicecard.starbattle import PuzzleError, make_easy_puzzle, parse_puzzle, solve

DEFAULT_GAME_COUNT = 5000
DEFAULT_WIDTH = 121
# Columns taken by the fixed parts of "%3d|(%3d)%s|%s(%3d)".
_FIXED_COLUMNS = 3 + 1 + 1 + 3 + 1 + 1 + 1 + 3 + 1

_RED = "\033[31m"
_GREEN = "\033[32m"
_RESET = "\033[0m"

_INTEGER = re.compile(r"[+-]?[0-9]+")

_HARD_PUZZLE = (
    "🟨🟨🟨🟨🟩🟩🟩🟩🟦🟦",
    "🟨🟨🟨🟨🟩🟩🟩🟩🟦🟦",
    "🟨🟨🟥🟥🟩🟩🟩🟦🟦🟦",
    "🟨🟨🟥🟥🟩🟦🟦🟦🟦🟧",
    "⬛🟥🟥🟪🟪🟪🟪🟧🟧🟧",
    "⬛🟪🟪🟪🟪🟪🟪⬜⬜⬜",
    "⬛⬛⬛🟪🟪🟪🟪🟪⬜⬜",
    "⬛⬛⬛🟪🟫🟫🟪⬜⬜🟫",
    "⬛⬛🍺🍺🍺🟫🟫🟫🟫🟫",
    "⬛⬛⬛🍺🍺🍺🍺🍺🍺🍺",
)


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def int_from_env(name: str, default: int) -> int:
    """The integer in environment variable ``name``, or ``default`` when it is unset or empty."""
    text = os.environ.get(name, "")
    if not text:
        return default
    return _atoi(text)


def run_game(seed: int) -> tuple[int, Game]:
    """Play one game from ``seed`` and return the winner's total and the game."""
    try:
        print(f"Playing a new game with seed: {seed} ")
        game = Game(players=[HumanPlayer()], seed=seed)
        game.play()
        winner = game.winners[0]
        print(winner.scorecard.render())
        return winner.scorecard.total(), game
    finally:
        print("Game over! Goodbye!")
        print(f"Seed was {seed}")


def histogram(scores: Sequence[int]) -> str:
    """Counts of scores per band of ten, one line per band below the highest."""
    by_decile = Counter(score // 10 for score in scores)
    max_decile = max(by_decile, default=0)
    max_decile = max(max_decile, 0)
    return "".join(
        f"{index * 10:3d},{by_decile[index]:4d}|{'=' * (by_decile[index] // 5)}\n"
        for index in range(max_decile)
    )


def comparative_histogram(old_scores: Sequence[int], new_scores: Sequence[int], width: int) -> str:
    """Old and new score counts per band of ten, side by side, scaled to ``width`` columns."""
    usable = width - _FIXED_COLUMNS
    if usable < 1:
        raise ValueError("Width must be at least 16")

    old_by_decile: Counter[int] = Counter()
    new_by_decile: Counter[int] = Counter()
    max_decile = 0
    for old_score, new_score in zip(old_scores, new_scores, strict=True):
        max_decile = max(max_decile, old_score // 10, new_score // 10)
        old_by_decile[old_score // 10] += 1
        new_by_decile[new_score // 10] += 1

    highest = max(
        (max(count, new_by_decile[decile]) for decile, count in old_by_decile.items()),
        default=0,
    )
    scaling = 2 * float(highest) / float(usable)
    lines = [
        f"usable for histogram {usable} highest count {highest} "
        f"scaling factor {_format_float(scaling)}\n"
    ]
    if scaling == 0:
        scaling = 1.0

    padding = usable // 2 + 5
    for index in range(max_decile):
        old_count = old_by_decile[index]
        new_count = new_by_decile[index]
        old_bar = "=" * int(old_count / scaling)
        new_bar = "=" * int(new_count / scaling)
        old_part = f"{_RED}{old_bar:>{padding}}{_RESET}"
        new_part = f"{_GREEN}{new_bar:<{padding}}{_RESET}"
        lines.append(f"{index * 10:3d}|({old_count:3d}){old_part}|{new_part}({new_count:3d})\n")
    return "".join(lines)


def run_many_games(count: int) -> dict[int, int]:
    """Play ``count`` games from random seeds, print a histogram and save seed:score lines."""
    scores: dict[int, int] = {}
    step = max(1, count // 10)
    for index in range(count):
        seed = random.getrandbits(63)
        if index % step == 0:
            print(index)
        score, _ = run_game(seed)
        scores[seed] = score

    print(histogram(list(scores.values())), end="")

    path = Path(f"{int(time.time())}.games")
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.writelines(f"{seed}:{score}\n" for seed, score in scores.items())
    except OSError as error:
        print(error)
    return scores


def regress(path: str | os.PathLike[str]) -> list[int]:
    """Replay the seeds in a seed:score file and report how each score changed."""
    deltas: list[int] = []
    old_scores: list[int] = []
    new_scores: list[int] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fields = line.rstrip("\r\n").split(":")
            if len(fields) < 2:
                raise ValueError(f"expected seed:score, got {line!r}")
            seed_text, old_text = fields[0], fields[1]
            seed = _atoi(seed_text)
            old_score = _atoi(old_text)
            new_score, _ = run_game(seed)
            old_scores.append(old_score)
            new_scores.append(new_score)
            delta = new_score - old_score
            print(f"{seed_text[:5]}|{old_score:3d}|{new_score:3d}|{delta:4d}")
            deltas.append(delta)

    mean = sum(deltas) / len(deltas) if deltas else math.nan
    print("delta:", _format_float(float(mean)))
    print("-" * 99)
    print(comparative_histogram(old_scores, new_scores, int_from_env("WIDTH", DEFAULT_WIDTH)), end="")
    return deltas


def _star(args: list[str]) -> int:
    if len(args) > 1 and args[1] == "hard":
        try:
            puzzle = parse_puzzle(_HARD_PUZZLE, 1)
        except PuzzleError as error:
            print("Error in parsing puzzle!", error)
            return 1
    else:
        puzzle = make_easy_puzzle()
    result, solved = solve(puzzle)
    print(result.render("solution!!!" if solved else "last answer"), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    shown = "[" + " ".join(["dicecard", *args]) + "]"
    print("hello", shown)

    if args and args[0] == "star":
        return _star(args)
    if args and args[0] == "mass":
        count = _atoi(args[1]) if len(args) > 1 else DEFAULT_GAME_COUNT
        run_many_games(count)
        return 0
    if args and args[0] == "regress":
        if len(args) < 2:
            print("usage: dicecard regress FILE", file=sys.stderr)
            return 2
        regress(args[1])
        return 0

    seed = int(time.time())
    if args:
        print(shown)
        try:
            seed = _atoi(args[0])
        except ValueError as error:
            print(error, file=sys.stderr)
            return 2

    _, game = run_game(seed)
    print(game.winners[0].scorecard.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())