from __future__ import annotations

from enum import Enum
from typing import Container, Optional

from gridsnake.grid import Cell, GridModel


class Outcome(Enum):
    ALIVE = "alive"
    WALL = "wall"
    SELF = "self"


def check(
    candidate: Cell,
    grid: GridModel,
    occupied: Container[Cell],
    vacating: Optional[Cell] = None,
) -> Outcome:
    """Classify a proposed head position.

    ``vacating`` is the tail cell that leaves the board this tick; moving
    onto it is legal. Pass ``None`` when the move grows the snake.
    """
    if not grid.in_bounds(candidate):
        return Outcome.WALL
    if candidate in occupied and candidate != vacating:
        return Outcome.SELF
    return Outcome.ALIVE
