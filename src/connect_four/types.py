# src/connect_four/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

PlayerSlot = Literal[0, 1]
Cell = Optional[PlayerSlot]
Move = NewType("Move", int)   # column index 0..cols-1
Coord = Tuple[int, int]       # (row, col), row 0 is the top
