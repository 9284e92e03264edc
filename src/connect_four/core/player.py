# src/connect_four/core/player.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from connect_four.errors import DuplicateTokenError, InvalidPlayerNameError, InvalidTokenError


@dataclass(frozen=True)
class Player:
    """
    A seated player. `display` is handed to the renderer untouched
    (the console front end uses a colour name).
    """
    name: str
    display: object
    token: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidPlayerNameError(self.name)
        if not isinstance(self.token, str) or not self.token:
            raise InvalidTokenError(self.token)
        # frozen: go through object.__setattr__ to store the trimmed name
        object.__setattr__(self, "name", self.name.strip())


def seat_players(first: Player, second: Player) -> Tuple[Player, Player]:
    if second.token == first.token:
        raise DuplicateTokenError(second.token)
    return first, second
