from __future__ import annotations
from typing import List

import pytest

from connect_four.core.board import Board
from connect_four.core.player import Player
from connect_four.game.engine import GameEngine
from connect_four.types import Cell

_SYMBOLS = {".": None, "X": 0, "O": 1}


def board_from(*rows: str) -> Board:
    """Build a Board from a top-to-bottom picture: '.' empty, 'X' slot 0, 'O' slot 1."""
    grid: List[List[Cell]] = [[_SYMBOLS[ch] for ch in row.replace(" ", "")] for row in rows]
    return Board(rows=len(grid), cols=len(grid[0]), grid=grid)


def snapshot(board: Board) -> List[List[Cell]]:
    return [row[:] for row in board.grid]


@pytest.fixture
def alice() -> Player:
    return Player("Alice", display="red", token="1")


@pytest.fixture
def bob() -> Player:
    return Player("Bob", display="yellow", token="2")


@pytest.fixture
def engine(alice: Player, bob: Player) -> GameEngine:
    return GameEngine(alice, bob)
