"""The FizzBuzz board: a grid of cells that fill and recolour as a count runs."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator, List, Optional, Tuple

GRID_ROWS = 40
GRID_COLUMNS = 61
ACTIVE_ROWS = 20
ACTIVE_COLUMNS = 40

EMPTY = "0"
BALL = "1"
ALT_BALL = "2"


class Event(Enum):
    """A FizzBuzz outcome for one step of the count."""

    FIZZBUZZ = "FizzBuzz!"
    FIZZ = "Fizz!"
    BUZZ = "Buzz!"

    @property
    def message(self) -> str:
        return self.value


_RECOLOUR = {
    Event.FIZZBUZZ: {BALL: EMPTY, ALT_BALL: EMPTY},
    Event.FIZZ: {BALL: ALT_BALL},
    Event.BUZZ: {ALT_BALL: BALL},
}


def fizzbuzz_events(n: int) -> List[Event]:
    """The events step ``n`` triggers, in the order they apply.

    A multiple of 15 triggers FizzBuzz and then Fizz.
    """
    events = []
    if n % 15 == 0:
        events.append(Event.FIZZBUZZ)
    if n % 3 == 0:
        events.append(Event.FIZZ)
    elif n % 5 == 0:
        events.append(Event.BUZZ)
    return events


class Grid:
    """Rows of single-character cells, of which a top-left area takes part in play."""

    def __init__(
        self,
        rows: int = GRID_ROWS,
        columns: int = GRID_COLUMNS,
        active_rows: int = ACTIVE_ROWS,
        active_columns: int = ACTIVE_COLUMNS,
    ) -> None:
        if not (0 < active_rows <= rows and 0 < active_columns <= columns):
            raise ValueError("the active area must be non-empty and fit in the grid")
        self.height = rows
        self.width = columns
        self.active_rows = active_rows
        self.active_columns = active_columns
        self._cells = [[EMPTY] * columns for _ in range(rows)]

    def __iter__(self) -> Iterator[str]:
        for row in self._cells:
            yield "".join(row)

    def cell(self, row: int, column: int) -> str:
        """The character at ``row``, ``column``."""
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self._cells[row][column]

    def count(self, value: str) -> int:
        """How many cells hold ``value``."""
        return sum(row.count(value) for row in self._cells)

    def _has_empty_active_cell(self) -> bool:
        return any(
            EMPTY in row[: self.active_columns] for row in self._cells[: self.active_rows]
        )

    def randomize_cell(self, rng: Optional[random.Random] = None) -> Tuple[int, int]:
        """Turn a random empty cell of the active area into a ball.

        Returns the row and column chosen. Raises RuntimeError when the
        active area has no empty cell left.
        """
        if not self._has_empty_active_cell():
            raise RuntimeError("no empty cell left in the active area")
        source = random if rng is None else rng
        while True:
            row = source.randrange(self.active_rows)
            column = source.randrange(self.active_columns)
            if self._cells[row][column] == EMPTY:
                self._cells[row][column] = BALL
                return row, column

    def _recolour(self, mapping: dict) -> None:
        for row in self._cells:
            for column, value in enumerate(row):
                if value in mapping:
                    row[column] = mapping[value]

    def apply_fizzbuzz(self, n: int, rng: Optional[random.Random] = None) -> List[Event]:
        """Apply the events of step ``n`` and return them.

        Each event recolours the board and then drops one new ball.
        """
        events = fizzbuzz_events(n)
        for event in events:
            self._recolour(_RECOLOUR[event])
            self.randomize_cell(rng)
        return events