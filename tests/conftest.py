import random

import pytest

from gridsnake.config import GameConfig
from gridsnake.engine import GameEngine
from gridsnake.food import FoodSpawner
from gridsnake.scheduler import ManualCadence
from gridsnake.snake import SnakeBody
from gridsnake.storage import MemoryHighScoreStore


@pytest.fixture
def make_engine():
    def factory(rows=10, cols=10, length=3, high_score=0, seed=7):
        config = GameConfig(rows=rows, cols=cols, initial_length=length, seed=seed)
        return GameEngine(
            config,
            cadence=ManualCadence(),
            store=MemoryHighScoreStore(high_score),
            spawner=FoodSpawner(random.Random(seed)),
        )

    return factory


@pytest.fixture
def place():
    def put(engine, cells, direction, food=None):
        """Put a hand-built snake on the board heading ``direction``."""
        engine.snake = SnakeBody(cells)
        engine.direction = direction
        engine.steer(direction)
        engine.food = food

    return put
