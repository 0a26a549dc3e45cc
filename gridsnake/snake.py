from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, Iterable, Optional, Set, Tuple

from gridsnake.config import InvalidConfig
from gridsnake.direction import Direction
from gridsnake.grid import Cell, GridModel


class SnakeBody:
    """
    Ordered body of the snake, tail at index 0 and head at the end.

    The occupancy set is kept in step with the deque on every advance so
    membership tests stay O(1).
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self._cells: Deque[Cell] = deque(Cell(*c) for c in cells)
        if not self._cells:
            raise InvalidConfig("snake needs at least one cell")
        self._occupied: Set[Cell] = set(self._cells)
        if len(self._occupied) != len(self._cells):
            raise InvalidConfig("snake cells must be distinct")

    @classmethod
    def initialize(cls, length: int, grid: GridModel) -> "SnakeBody":
        if length < 1 or length > grid.cols:
            raise InvalidConfig(f"initial length must be in [1, {grid.cols}], got {length}")
        return cls(Cell(0, col) for col in range(length))

    @property
    def head(self) -> Cell:
        return self._cells[-1]

    @property
    def tail(self) -> Cell:
        return self._cells[0]

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._occupied

    def occupancy(self) -> FrozenSet[Cell]:
        return frozenset(self._occupied)

    def next_head(self, direction: Direction) -> Cell:
        return direction.offset(self.head)

    def advance(self, direction: Direction, grow: bool) -> Tuple[Cell, Optional[Cell]]:
        new_head = self.next_head(direction)
        dropped: Optional[Cell] = None
        if not grow:
            dropped = self._cells.popleft()
            self._occupied.discard(dropped)
        self._cells.append(new_head)
        self._occupied.add(new_head)
        return new_head, dropped
