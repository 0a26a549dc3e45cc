from __future__ import annotations

import random
from typing import Container, Optional

from gridsnake.config import FoodPolicy
from gridsnake.grid import Cell, GridModel


class FoodSpawner:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        policy: FoodPolicy = FoodPolicy.VACANT,
    ) -> None:
        self.random = rng if rng is not None else random.Random()
        self.policy = FoodPolicy(policy)

    def spawn(self, grid: GridModel, excluded: Container[Cell]) -> Optional[Cell]:
        if self.policy is FoodPolicy.SINGLE_DRAW:
            return Cell(self.random.randrange(grid.rows), self.random.randrange(grid.cols))

        available = [cell for cell in grid.cells() if cell not in excluded]
        return self.random.choice(available) if available else None
