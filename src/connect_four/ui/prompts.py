from __future__ import annotations
from typing import Optional

from connect_four.errors import InvalidColumnError, InvalidPlayerNameError
from connect_four.types import Move

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[Move]:
    """
    Turn a 1-based column typed by a human into a 0-based Move.

    Returns None for a quit word. Range is not checked here; the engine
    rejects columns that are off the board.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    try:
        col = int(s)
    except ValueError:
        raise InvalidColumnError(raw) from None
    return Move(col - 1)


def parse_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise InvalidPlayerNameError(raw)
    return name
