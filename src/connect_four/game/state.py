# src/connect_four/game/state.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from connect_four.core.rules import WinningLine
from connect_four.types import PlayerSlot


@dataclass(frozen=True)
class InProgress:
    pass


@dataclass(frozen=True)
class Win:
    player: PlayerSlot
    line: WinningLine


@dataclass(frozen=True)
class Draw:
    pass


Outcome = Union[InProgress, Win, Draw]


@dataclass(frozen=True)
class GameState:
    current: PlayerSlot = 0
    outcome: Outcome = InProgress()
    move_count: int = 0

    @property
    def is_over(self) -> bool:
        return not isinstance(self.outcome, InProgress)

    @property
    def winner(self) -> Optional[PlayerSlot]:
        return self.outcome.player if isinstance(self.outcome, Win) else None


@dataclass(frozen=True)
class MoveOutcome:
    row: int
    column: int
    player: PlayerSlot
    state: GameState
    line: Optional[WinningLine] = None
