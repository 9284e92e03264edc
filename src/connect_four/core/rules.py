# src/connect_four/core/rules.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from connect_four.config import CONNECT_N
from connect_four.core.board import Board
from connect_four.types import Coord, PlayerSlot

# Checked in this order at every origin cell; the order decides which line
# is reported when a board holds more than one.
DIRECTIONS: Tuple[Tuple[str, Tuple[int, int]], ...] = (
    ("horizontal", (0, 1)),
    ("vertical", (1, 0)),
    ("diagonal", (1, 1)),        # row and column both increase
    ("anti-diagonal", (-1, 1)),  # column increases, row decreases
)


@dataclass(frozen=True)
class WinningLine:
    slot: PlayerSlot
    cells: Tuple[Coord, ...]
    direction: str


def _line_from(board: Board, r: int, c: int, dr: int, dc: int) -> Optional[Tuple[Coord, ...]]:
    g = board.grid
    p = g[r][c]
    cells = [(r, c)]
    for i in range(1, CONNECT_N):
        rr, cc = r + dr * i, c + dc * i
        if not board.in_bounds(rr, cc) or g[rr][cc] != p:
            return None
        cells.append((rr, cc))
    return tuple(cells)


def detect_win(board: Board) -> Optional[WinningLine]:
    """
    Scan row by row, left to right. At each occupied cell try every direction
    in DIRECTIONS order and return the first complete line.
    """
    for r in range(board.rows):
        for c in range(board.cols):
            p = board.grid[r][c]
            if p is None:
                continue
            for name, (dr, dc) in DIRECTIONS:
                cells = _line_from(board, r, c, dr, dc)
                if cells is not None:
                    return WinningLine(slot=p, cells=cells, direction=name)
    return None

