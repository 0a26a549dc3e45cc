from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, FrozenSet, List, Optional, Tuple

from gridsnake.collision import Outcome, check
from gridsnake.config import GameConfig
from gridsnake.direction import INITIAL_DIRECTION, Direction, parse_signal, propose_direction
from gridsnake.food import FoodSpawner
from gridsnake.grid import Cell, GridModel
from gridsnake.scheduler import Cadence, ManualCadence
from gridsnake.snake import SnakeBody
from gridsnake.storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)


class Status(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game handed to renderers after every change."""

    rows: int
    cols: int
    snake: Tuple[Cell, ...]  # tail first, head last
    food: Optional[Cell]
    score: int
    high_score: int
    status: Status
    direction: Direction
    paused: bool
    outcome: Outcome
    ticks: int
    ate_food: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[-1]

    @property
    def occupied(self) -> FrozenSet[Cell]:
        return frozenset(self.snake)

    @property
    def label(self) -> str:
        if self.status is Status.OVER:
            return "RETRY"
        if self.status is Status.RUNNING and not self.paused:
            return "STOP"
        return "START"

    def board_text(self) -> str:
        """
        Text board, row 0 on top:
        . = empty
        F = food
        H = head
        o = body
        """
        board = [["." for _ in range(self.cols)] for _ in range(self.rows)]
        if self.food is not None:
            board[self.food.row][self.food.col] = "F"
        for row, col in self.snake:
            if 0 <= row < self.rows and 0 <= col < self.cols:
                board[row][col] = "o"
        head_row, head_col = self.head
        board[head_row][head_col] = "H"
        return "\n".join("".join(line) for line in board)


Listener = Callable[[GameSnapshot], None]


class GameEngine:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        cadence: Optional[Cadence] = None,
        store: Optional[HighScoreStore] = None,
        spawner: Optional[FoodSpawner] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.grid = GridModel(self.config.rows, self.config.cols)
        self.cadence = cadence if cadence is not None else ManualCadence()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.spawner = spawner or FoodSpawner(
            random.Random(self.config.seed), self.config.food_policy
        )
        self.high_score = self._read_high_score()
        self._listeners: List[Listener] = []

        self.status = Status.NOT_STARTED
        self.paused = False
        self._reset()

    def _read_high_score(self) -> int:
        try:
            return max(int(self.store.read_high_score()), 0)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score: {e}")
            return 0

    def _reset(self) -> None:
        self.snake = SnakeBody.initialize(self.config.initial_length, self.grid)
        self.direction: Direction = INITIAL_DIRECTION
        self._pending: Direction = INITIAL_DIRECTION
        self.score = 0
        self.ticks = 0
        self.outcome = Outcome.ALIVE
        self.ate_food = False
        self.food = self.spawner.spawn(self.grid, self.snake)

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            rows=self.grid.rows,
            cols=self.grid.cols,
            snake=self.snake.cells,
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            direction=self.direction,
            paused=self.paused,
            outcome=self.outcome,
            ticks=self.ticks,
            ate_food=self.ate_food,
        )

    def _publish(self) -> GameSnapshot:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap

    def _begin(self) -> GameSnapshot:
        self._reset()
        self.status = Status.RUNNING
        self.paused = False
        self.cadence.start()
        logger.info(f"Game started on {self.grid.rows}x{self.grid.cols} grid")
        return self._publish()

    def start(self) -> GameSnapshot:
        if self.status is Status.RUNNING:
            logger.debug("start() ignored: game already running")
            return self.snapshot()
        return self._begin()

    def retry(self) -> GameSnapshot:
        if self.status is Status.NOT_STARTED:
            logger.debug("retry() ignored: game not started")
            return self.snapshot()
        self.cadence.cancel()
        return self._begin()

    def stop(self) -> GameSnapshot:
        if self.status is not Status.RUNNING or self.paused:
            logger.debug("stop() ignored: game not ticking")
            return self.snapshot()
        self.cadence.cancel()
        self.paused = True
        logger.info(f"Game paused at score {self.score}")
        return self._publish()

    def resume(self) -> GameSnapshot:
        if self.status is not Status.RUNNING or not self.paused:
            logger.debug("resume() ignored: game not paused")
            return self.snapshot()
        self.paused = False
        self.cadence.start()
        return self._publish()

    def close(self) -> None:
        self.cadence.cancel()
        self._listeners.clear()

    def steer(self, signal: Any) -> Direction:
        """Queue a direction for the next tick; reversals and unknown keys are dropped."""
        if self.status is not Status.RUNNING:
            logger.debug(f"Ignoring input {signal!r} while {self.status.value}")
            return self._pending

        requested = parse_signal(signal)
        proposed = propose_direction(requested, self.direction)
        # A rejected signal must not overwrite a turn queued earlier this tick.
        if proposed is self.direction and requested is not self.direction:
            logger.debug(f"Ignoring input {signal!r} while heading {self.direction.name}")
            return self._pending
        self._pending = proposed
        return self._pending

    def tick(self) -> GameSnapshot:
        if self.status is not Status.RUNNING or self.paused:
            logger.debug("tick() ignored: game not ticking")
            return self.snapshot()
        try:
            return self._step()
        except Exception:
            self.cadence.cancel()
            raise

    def _step(self) -> GameSnapshot:
        self.direction = self._pending
        candidate = self.snake.next_head(self.direction)
        ate_food = candidate == self.food

        # The tail leaves its cell this tick unless the snake grows.
        vacating = None if ate_food else self.snake.tail
        outcome = check(candidate, self.grid, self.snake, vacating)
        if outcome is not Outcome.ALIVE:
            return self._game_over(outcome)

        self.snake.advance(self.direction, grow=ate_food)
        self.ticks += 1
        self.ate_food = ate_food
        if ate_food:
            self.score += 1
            self.food = self.spawner.spawn(self.grid, self.snake)
        return self._publish()

    def _game_over(self, outcome: Outcome) -> GameSnapshot:
        self.status = Status.OVER
        self.outcome = outcome
        self.ate_food = False
        self.cadence.cancel()
        logger.info(f"Game over ({outcome.value} collision) with score {self.score}")
        if self.score > self.high_score:
            self.high_score = self.score
            try:
                self.store.write_high_score(self.high_score)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not save high score {self.high_score}: {e}")
        return self._publish()
