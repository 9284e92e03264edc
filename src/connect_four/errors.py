# src/connect_four/errors.py

"""Exceptions raised by the Connect Four core."""

from __future__ import annotations
from typing import Optional


class ConnectFourError(Exception):
    """Base exception for all Connect Four errors."""


class MoveError(ConnectFourError, ValueError):
    """A submitted move was rejected. The game state is unchanged."""


class InvalidColumnError(MoveError):
    def __init__(self, column: object, cols: Optional[int] = None) -> None:
        self.column = column
        self.cols = cols
        if cols is None:
            message = f"Column must be a whole number, got {column!r}."
        else:
            message = f"Column {column!r} is out of range (0..{cols - 1})."
        super().__init__(message)


class ColumnFullError(MoveError):
    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(f"Column {column} is full.")


class GameAlreadyOverError(MoveError):
    def __init__(self) -> None:
        super().__init__("The game is already over.")


class InvalidPositionError(ConnectFourError, IndexError):
    """
    A cell read outside the board.

    Callers inside the package never trigger this; seeing it means a bug.
    """

    def __init__(self, row: int, column: int) -> None:
        self.row = row
        self.column = column
        super().__init__(f"Position ({row}, {column}) is outside the board.")


class SetupError(ConnectFourError, ValueError):
    """The game could not be set up. Raised before any move is played."""


class InvalidPlayerNameError(SetupError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Player name must not be empty, got {name!r}.")


class InvalidTokenError(SetupError):
    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Player token must be a non-empty string, got {token!r}.")


class DuplicateTokenError(SetupError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Both players use token {token!r}; tokens must differ.")


class InvalidBoardError(SetupError):
    """A starting board that is already won or already full."""
