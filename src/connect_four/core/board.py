# src/connect_four/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connect_four.config import ROWS, COLS
from connect_four.errors import ColumnFullError, InvalidColumnError, InvalidPositionError
from connect_four.types import Cell, PlayerSlot

SLOTS = (0, 1)


def _is_index(v: object) -> bool:
    # bool is an int subclass but never an index
    return isinstance(v, int) and not isinstance(v, bool)


def _is_slot(v: object) -> bool:
    return _is_index(v) and v in SLOTS


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
            return
        # A board built from an existing grid must look like one reached by drops.
        if len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid must be {self.rows}x{self.cols}.")
        for c in range(self.cols):
            seen_empty = False
            for r in range(self.rows - 1, -1, -1):
                cell = self.grid[r][c]
                if cell is None:
                    seen_empty = True
                elif not _is_slot(cell):
                    raise ValueError(f"Cell ({r}, {c}) holds unknown slot {cell!r}.")
                elif seen_empty:
                    raise ValueError(f"Column {c} has a token floating above an empty cell.")

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def in_bounds(self, row: int, col: int) -> bool:
        if not (_is_index(row) and _is_index(col)):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise InvalidPositionError(row, col)
        return self.grid[row][col]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def drop_token(self, col: int, slot: PlayerSlot) -> int:
        """
        Place a token for `slot` in the lowest empty cell of `col`.

        Returns the row it landed on. Raises InvalidColumnError or
        ColumnFullError without touching the grid.
        """
        if not _is_slot(slot):
            raise ValueError(f"Unknown player slot {slot!r}.")
        if not _is_index(col):
            raise InvalidColumnError(col)
        if col < 0 or col >= self.cols:
            raise InvalidColumnError(col, self.cols)

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                self.grid[r][col] = slot
                return r

        raise ColumnFullError(col)
