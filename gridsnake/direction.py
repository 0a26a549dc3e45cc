from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from gridsnake.grid import Cell


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    RIGHT = (0, 1)
    LEFT = (0, -1)

    @property
    def opposite(self) -> "Direction":
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))

    def offset(self, cell: Cell) -> Cell:
        return Cell(cell[0] + self.value[0], cell[1] + self.value[1])


INITIAL_DIRECTION = Direction.RIGHT

# Key names as produced by browsers and on-screen buttons.
KEY_SIGNALS = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowright": Direction.RIGHT,
    "arrowleft": Direction.LEFT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "right": Direction.RIGHT,
    "left": Direction.LEFT,
}


def parse_signal(signal: Any) -> Optional[Direction]:
    if isinstance(signal, Direction):
        return signal
    if isinstance(signal, str):
        return KEY_SIGNALS.get(signal.strip().lower())
    return None


def propose_direction(requested: Any, current: Direction) -> Direction:
    """Return the direction to use next, ignoring reversals and unknown input."""
    direction = parse_signal(requested)
    if direction is None or direction is current.opposite:
        return current
    return direction
