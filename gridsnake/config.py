from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


DEFAULT_ROWS = 48
DEFAULT_COLS = 48
DEFAULT_LENGTH = 10
DEFAULT_TICK_MS = 100


class InvalidConfig(ValueError):
    """Raised at construction time for settings the game cannot start with."""


class FoodPolicy(str, Enum):
    VACANT = "vacant"  # choose among free cells only
    SINGLE_DRAW = "single_draw"  # one draw over the whole grid, may hit the snake


@dataclass
class GameConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    initial_length: int = DEFAULT_LENGTH
    tick_ms: int = DEFAULT_TICK_MS
    food_policy: FoodPolicy = FoodPolicy.VACANT
    seed: Optional[int] = None
    cell_size: int = 14
    high_score_path: str = "highscore.json"

    def validate(self) -> "GameConfig":
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfig(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        if self.initial_length < 1 or self.initial_length > self.cols:
            raise InvalidConfig(
                f"initial length must be in [1, {self.cols}], got {self.initial_length}"
            )
        if self.tick_ms <= 0:
            raise InvalidConfig(f"tick interval must be positive, got {self.tick_ms}ms")
        if self.cell_size <= 0:
            raise InvalidConfig(f"cell size must be positive, got {self.cell_size}")
        self.food_policy = FoodPolicy(self.food_policy)
        return self
