# src/connect_four/game/engine.py

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Optional, Tuple

from connect_four.core.board import Board
from connect_four.core.player import Player, seat_players
from connect_four.core.rules import detect_win
from connect_four.errors import GameAlreadyOverError, InvalidBoardError, MoveError
from connect_four.game.state import Draw, GameState, MoveOutcome, Win
from connect_four.types import Cell, PlayerSlot

log = logging.getLogger(__name__)


def other(slot: PlayerSlot) -> PlayerSlot:
    return 1 if slot == 0 else 0


class GameEngine:
    """
    Turn state machine for one game.

    The engine owns its board for the whole game. Moves go in through
    submit_move(); a rejected move raises a MoveError and leaves the board,
    the turn and the move count exactly as they were.
    """

    def __init__(self, first: Player, second: Player, board: Optional[Board] = None) -> None:
        self._players: Tuple[Player, Player] = seat_players(first, second)
        if board is None:
            board = Board()
        elif detect_win(board) is not None or board.is_full():
            raise InvalidBoardError("Starting board is already won or full.")
        # private copy: the caller keeps no handle on the game board
        self._board = board.copy()
        self._state = GameState()
        log.debug("New game: %s (%s) vs %s (%s)", first.name, first.token, second.name, second.token)

    @property
    def board(self) -> Board:
        """A copy for reading; moves only go through submit_move()."""
        return self._board.copy()

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def current_player(self) -> Player:
        return self._players[self._state.current]

    def current_state(self) -> GameState:
        return self._state

    def cell_at(self, row: int, col: int) -> Cell:
        return self._board.cell_at(row, col)

    def submit_move(self, column: object) -> MoveOutcome:
        state = self._state
        if state.is_over:
            log.info("Move %r rejected: game is over", column)
            raise GameAlreadyOverError()

        p = state.current
        try:
            row = self._board.drop_token(column, p)
        except MoveError as e:
            log.info("Move %r by %s rejected: %s", column, self._players[p].name, e)
            raise

        moves = state.move_count + 1
        log.debug("%s dropped in column %d, landed on row %d", self._players[p].name, column, row)

        line = detect_win(self._board)
        if line is not None:
            self._state = replace(state, outcome=Win(line.slot, line), move_count=moves)
            log.info("%s wins (%s) after %d moves", self._players[p].name, line.direction, moves)
        elif self._board.is_full():
            self._state = replace(state, outcome=Draw(), move_count=moves)
            log.info("Draw after %d moves", moves)
        else:
            self._state = replace(state, current=other(p), move_count=moves)

        return MoveOutcome(row=row, column=column, player=p, state=self._state, line=line)
