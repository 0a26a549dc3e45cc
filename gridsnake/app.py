from __future__ import annotations

import logging
from typing import Optional

import pygame

from gridsnake.config import GameConfig
from gridsnake.direction import Direction
from gridsnake.engine import GameEngine, GameSnapshot
from gridsnake.render import PRIMARY, Renderer
from gridsnake.storage import HighScoreStore, JsonHighScoreStore

logger = logging.getLogger(__name__)

FRAME_RATE = 60

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class PygameCadence:
    """Posts ``event_type`` every ``interval_ms`` through pygame's timer."""

    def __init__(self, interval_ms: int, event_type: int = pygame.USEREVENT + 1) -> None:
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.active = False

    def start(self) -> None:
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.active = True

    def cancel(self) -> None:
        # An interval of 0 removes the timer.
        pygame.time.set_timer(self.event_type, 0)
        self.active = False


def press_primary(engine: GameEngine) -> GameSnapshot:
    """START / STOP / RETRY button."""
    label = engine.snapshot().label
    if label == "RETRY":
        return engine.retry()
    if label == "STOP":
        return engine.stop()
    if engine.paused:
        return engine.resume()
    return engine.start()


def run(config: GameConfig, store: Optional[HighScoreStore] = None) -> int:
    cadence = PygameCadence(config.tick_ms)
    engine = GameEngine(
        config,
        cadence=cadence,
        store=store if store is not None else JsonHighScoreStore(config.high_score_path),
    )
    renderer = Renderer(config.rows, config.cols, config.cell_size)
    engine.subscribe(renderer.update)
    renderer.update(engine.snapshot())
    clock = pygame.time.Clock()

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in KEY_DIRECTIONS:
                        engine.steer(KEY_DIRECTIONS[event.key])
                    elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        press_primary(engine)
                    elif event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    action = renderer.hit_test(event.pos)
                    if action == PRIMARY:
                        press_primary(engine)
                    elif action is not None:
                        engine.steer(action)
                elif event.type == cadence.event_type:
                    engine.tick()

            renderer.draw()
            clock.tick(FRAME_RATE)
    finally:
        engine.close()
        renderer.close()

    snap = engine.snapshot()
    logger.info(f"Session ended: score={snap.score} high_score={snap.high_score}")
    return snap.high_score
