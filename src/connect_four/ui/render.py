from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Set

from connect_four.config import CLEAR_SCREEN, DISPLAY_TOKEN, USE_COLOR
from connect_four.core.board import Board
from connect_four.core.player import Player
from connect_four.game.state import GameState, Win
from connect_four.types import Cell, Coord
from connect_four.ui.colors import c, code_for, BOLD, DIM, FG_CYAN, FG_GRAY, RESET, REVERSE


@dataclass(frozen=True)
class RenderConfig:
    display_token: str = DISPLAY_TOKEN
    use_color: bool = USE_COLOR
    clear_screen: bool = CLEAR_SCREEN


def _piece(cell: Cell, players: Sequence[Player], cfg: RenderConfig) -> str:
    if cell is None:
        return c("·", FG_GRAY, cfg.use_color)
    return c(cfg.display_token, code_for(players[cell].display), cfg.use_color)


def clear_screen(cfg: RenderConfig) -> None:
    if cfg.clear_screen:
        print("\033[2J\033[H", end="")


def render(
    board: Board,
    players: Sequence[Player],
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    config: Optional[RenderConfig] = None,
) -> None:
    cfg = config or RenderConfig()
    clear_screen(cfg)

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4", BOLD, cfg.use_color))
    if status:
        print(c(status, FG_CYAN, cfg.use_color))
    else:
        print()

    nums = "  " + " ".join(str(i + 1) for i in range(board.cols))
    print(c(nums, DIM, cfg.use_color))

    for r in range(board.rows):
        parts = []
        for col in range(board.cols):
            p = _piece(board.cell_at(r, col), players, cfg)
            if (r, col) in hl:
                # no colour: mark the winning cells instead
                p = f"{REVERSE}{p}{RESET}" if cfg.use_color else "*"
            parts.append(p)
        print(" |" + "|".join(parts) + "|")


def status_line(players: Sequence[Player], state: GameState) -> str:
    if isinstance(state.outcome, Win):
        winner = players[state.outcome.player]
        return f"{winner.name} ({winner.display}) wins!"
    if state.is_over:
        return "Draw game."
    p = players[state.current]
    return f"{p.name} ({p.display}) to move."


class ConsoleRenderer:
    """Renderer that prints the board to stdout."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()

    def show(
        self,
        board: Board,
        players: Sequence[Player],
        state: GameState,
        message: str = "",
    ) -> None:
        highlight = state.outcome.line.cells if isinstance(state.outcome, Win) else None
        status = status_line(players, state)
        if message:
            status = f"{message}\n{status}"
        render(board, players, status, highlight=highlight, config=self.config)
