from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from gridsnake.config import DEFAULT_COLS, DEFAULT_ROWS, InvalidConfig


class Cell(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class GridModel:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfig(f"grid must be at least 1x1, got {self.rows}x{self.cols}")

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cells(self) -> Iterator[Cell]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(row, col)
