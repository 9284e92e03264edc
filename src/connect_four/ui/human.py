from __future__ import annotations
from typing import Callable, Optional

from connect_four.core.player import Player
from connect_four.errors import InvalidColumnError, InvalidPlayerNameError
from connect_four.game.state import GameState
from connect_four.types import Move
from connect_four.ui.colors import c, code_for
from connect_four.ui.prompts import parse_move, parse_name


class ConsoleInput:
    """Reads names and column choices from a human at the terminal."""

    def __init__(self, read: Optional[Callable[[str], str]] = None, use_color: bool = True) -> None:
        self.read = read or input
        self.use_color = use_color

    def ask_name(self, seat: int) -> str:
        prompt = f"Player {seat + 1}, please enter your name: "
        while True:
            try:
                return parse_name(self.read(prompt))
            except InvalidPlayerNameError:
                prompt = f"A name is required. Player {seat + 1}, please enter your name: "

    def choose_column(self, player: Player, state: GameState) -> Optional[Move]:
        label = c(f"{player.name} ({player.display})", code_for(player.display), self.use_color)
        prompt = f"{label}, please enter a column number: "
        while True:
            try:
                return parse_move(self.read(prompt))
            except InvalidColumnError:
                prompt = f"Invalid input, please try again {label}: "
