from __future__ import annotations
import logging
from typing import Optional, Protocol, Sequence

from connect_four.core.board import Board
from connect_four.core.player import Player
from connect_four.errors import ColumnFullError, InvalidColumnError
from connect_four.game.engine import GameEngine
from connect_four.game.state import GameState

log = logging.getLogger(__name__)


class Renderer(Protocol):
    def show(
        self,
        board: Board,
        players: Sequence[Player],
        state: GameState,
        message: str = "",
    ) -> None:
        ...


class InputProvider(Protocol):
    def choose_column(self, player: Player, state: GameState) -> Optional[int]:
        """Return a 0-based column, or None to quit."""
        ...


def run_game(engine: GameEngine, source: InputProvider, renderer: Renderer) -> GameState:
    """
    Drive one game to the end.

    Rejected moves are shown to the player, who is asked again; the turn
    only passes once a token lands. Returns the last state, which is still
    in progress if the player quit.
    """
    message = ""

    while True:
        state = engine.current_state()
        renderer.show(engine.board, engine.players, state, message)
        if state.is_over:
            return state

        move = source.choose_column(engine.current_player, state)
        if move is None:
            log.info("Game quit after %d moves", state.move_count)
            renderer.show(engine.board, engine.players, state, "Game quit.")
            return state

        try:
            engine.submit_move(move)
        except ColumnFullError:
            message = "Column is full, try again."
        except InvalidColumnError:
            message = f"Column must be between 1 and {engine.board.cols}."
        else:
            message = ""
