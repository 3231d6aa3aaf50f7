"""A star-battle puzzle grid and a backtracking solver built on constraint propagation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

LETTERS = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J")
_LETTER_INDEX = {letter: index for index, letter in enumerate(LETTERS)}

SOLVE_ATTEMPT_LIMIT = 1000

_EASY_ROWS = (
    "🟨🟨🟩🟩🟩",
    "🟦🟨🟩🟩🟩",
    "🟦🟥🟧🟧🟩",
    "🟥🟥🟧🟧🟩",
    "🟥🟥🟥🟥🟥",
)


class PuzzleError(ValueError):
    """Raised for malformed puzzles and for moves that break the rules."""


class CellState(str, Enum):
    EMPTY = ""
    STARRED = "⭐️"
    ELIMINATED = "❌"

    def __str__(self) -> str:
        return self.value


@dataclass
class Cell:
    """One square of the grid: its segment colour, position and state."""

    color: str
    row: int
    column: str
    state: CellState = CellState.EMPTY

    @property
    def coords(self) -> str:
        return f"{self.column}{self.row}"


def _count(cells: Iterable[Cell], state: CellState) -> int:
    return sum(1 for cell in cells if cell.state is state)


@dataclass
class Puzzle:
    """A grid of cells stored column by column, keyed by column letter."""

    cells: dict[str, list[Cell]] = field(default_factory=dict)
    width: int = 0
    height: int = 0
    stars_per_area: int = 1

    def column_names(self) -> list[str]:
        return list(LETTERS[: self.width])

    def rows(self) -> list[list[Cell]]:
        """The cells grouped by row, left to right."""
        return [
            [self.cells[letter][row] for letter in self.column_names()]
            for row in range(self.height)
        ]

    def columns(self) -> dict[str, list[Cell]]:
        """The cells grouped by column letter, top to bottom."""
        return {letter: self.cells[letter] for letter in self.column_names()}

    def segments(self) -> dict[str, list[Cell]]:
        """The cells grouped by segment colour."""
        grouped: dict[str, list[Cell]] = {}
        for column in self.columns().values():
            for cell in column:
                grouped.setdefault(cell.color, []).append(cell)
        return grouped

    def _cell(self, row: int, column: str) -> Cell:
        if column not in self.cells or not 0 <= row < self.height:
            raise PuzzleError(f"no cell at {column}{row}")
        return self.cells[column][row]

    def render(self, message: str) -> str:
        """The message followed by the grid, stars and eliminations shown over colours."""
        lines = [message, f" |{' '.join(self.column_names())}"]
        for index, row in enumerate(self.rows()):
            squares = "".join(
                cell.color if cell.state is CellState.EMPTY else cell.state.value
                for cell in row
            )
            lines.append(f"{index}|{squares}")
        return "\n".join(lines) + "\n"

    def stars_per_segment(self, color: str) -> int:
        return _count(self.segments().get(color, []), CellState.STARRED)

    def stars_per_row(self, row: int) -> int:
        return _count(self.rows()[row], CellState.STARRED)

    def stars_per_column(self, column: str) -> int:
        return _count(self.columns()[column], CellState.STARRED)

    def star(self, row: int, column: str) -> None:
        """Place a star and eliminate every cell it rules out.

        Raises PuzzleError when the star is not allowed or leaves some segment,
        row or column without enough open cells. The grid may be partly
        changed when that happens.
        """
        cell = self._cell(row, column)
        if cell.state is not CellState.EMPTY:
            raise PuzzleError(f"cell already ({cell.coords}) has state {cell.state.value}")
        stars_in_segment = self.stars_per_segment(cell.color)
        if stars_in_segment >= self.stars_per_area:
            raise PuzzleError("too many stars in this segment")
        stars_in_row = self.stars_per_row(row)
        if stars_in_row >= self.stars_per_area:
            raise PuzzleError("too many stars in this row")
        stars_in_column = self.stars_per_column(column)
        if stars_in_column >= self.stars_per_area:
            raise PuzzleError("too many stars in this column")

        cell.state = CellState.STARRED

        col_index = _LETTER_INDEX[column]
        targets: list[tuple[int, int]] = [
            (row + dr, col_index + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr, dc) != (0, 0)
        ]
        if stars_in_segment + 1 == self.stars_per_area:
            targets.extend(
                (other.row, _LETTER_INDEX[other.column])
                for other in self.segments()[cell.color]
            )
        if stars_in_row + 1 == self.stars_per_area:
            targets.extend((row, index) for index in range(self.width))
        if stars_in_column + 1 == self.stars_per_area:
            targets.extend((index, col_index) for index in range(self.height))

        for target_row, target_col in targets:
            if not (0 <= target_row < self.height and 0 <= target_col < self.width):
                continue
            other = self.cells[LETTERS[target_col]][target_row]
            if other is cell or other.state is CellState.ELIMINATED:
                continue
            if other.state is CellState.STARRED:
                raise PuzzleError(f"attempting to eliminate a starred cell! {other.coords}")
            other.state = CellState.ELIMINATED

        self._check_solvable()

    def _short(self, cells: Sequence[Cell]) -> bool:
        empty = _count(cells, CellState.EMPTY)
        starred = _count(cells, CellState.STARRED)
        return empty < self.stars_per_area - starred

    def _check_solvable(self) -> None:
        for color, segment in self.segments().items():
            if self._short(segment):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%s", self.render("state with error"))
                raise PuzzleError(f"not enough cells left to solve {color}")
        for index, row in enumerate(self.rows()):
            if self._short(row):
                raise PuzzleError(f"not enough cells left to solve row {index}")
        for letter, column in self.columns().items():
            if self._short(column):
                raise PuzzleError(f"not enough cells left to solve column {letter}")

    def solved(self) -> bool:
        """True when every segment, row and column holds exactly the required stars."""
        for color in self.segments():
            if self.stars_per_segment(color) != self.stars_per_area:
                return False
        for index in range(self.height):
            if self.stars_per_row(index) != self.stars_per_area:
                return False
        for letter in self.column_names():
            if self.stars_per_column(letter) != self.stars_per_area:
                return False
        return True

    def copy(self) -> Puzzle:
        """An independent copy of the grid."""
        return Puzzle(
            cells={
                letter: [
                    Cell(color=c.color, row=c.row, column=c.column, state=c.state)
                    for c in column
                ]
                for letter, column in self.cells.items()
            },
            width=self.width,
            height=self.height,
            stars_per_area=self.stars_per_area,
        )


def parse_puzzle(rows: Sequence[str], stars_per_area: int) -> Puzzle:
    """Build a puzzle from rows of coloured squares, one character per cell."""
    if not rows:
        raise PuzzleError("puzzle has no rows")
    width = len(rows[0])
    if width > len(LETTERS):
        raise PuzzleError(f"puzzle is {width} wide, at most {len(LETTERS)} columns are allowed")
    letters = LETTERS[:width]
    cells: dict[str, list[Cell]] = {letter: [] for letter in letters}
    for row_index, row in enumerate(rows):
        squares = list(row)
        if len(squares) != width:
            raise PuzzleError(
                f"lines are not equal length! First line was {width}, "
                f"line #{row_index} is {len(squares)}"
            )
        for letter, color in zip(letters, squares):
            cells[letter].append(Cell(color=color, row=row_index, column=letter))
    return Puzzle(cells=cells, width=width, height=len(rows), stars_per_area=stars_per_area)


def make_easy_puzzle() -> Puzzle:
    """A small five-by-five puzzle with one star per area."""
    return parse_puzzle(_EASY_ROWS, 1)


class _Solver:
    def __init__(self) -> None:
        self.attempts = 0
        self.cells_considered = 0

    def solve(self, puzzle: Puzzle) -> tuple[Puzzle, bool]:
        while not puzzle.solved():
            self.attempts += 1
            logger.debug(
                "calls to solve: %d cells considered: %d",
                self.attempts,
                self.cells_considered,
            )
            if self.attempts > SOLVE_ATTEMPT_LIMIT:
                logger.debug("attempt limit reached, giving up")
                break
            for column in puzzle.columns().values():
                for cell in column:
                    if cell.state is not CellState.EMPTY:
                        continue
                    self.cells_considered += 1
                    candidate = puzzle.copy()
                    try:
                        candidate.star(cell.row, cell.column)
                    except PuzzleError as error:
                        logger.debug("cannot star %s: %s", cell.coords, error)
                        cell.state = CellState.ELIMINATED
                        continue
                    if candidate.solved():
                        return candidate, True
                    result, done = self.solve(candidate)
                    if done:
                        return result, True
        return puzzle, puzzle.solved()


def solve(puzzle: Puzzle) -> tuple[Puzzle, bool]:
    """Search for a solution; return the final grid and whether it is solved.

    The given puzzle is left unchanged.
    """
    return _Solver().solve(puzzle.copy())