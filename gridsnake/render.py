from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from gridsnake.engine import GameSnapshot, Status
from gridsnake.observe import BODY, FOOD, HEAD, encode_snapshot

BACKGROUND = (20, 20, 20)
GRID_LINE = (30, 30, 30)
BODY_COLOR = (0, 150, 0)
HEAD_COLOR = (0, 200, 0)
FOOD_COLOR = (200, 50, 50)
TEXT_COLOR = (230, 230, 230)
BUTTON_COLOR = (60, 60, 60)
GAME_OVER_COLOR = (220, 60, 60)

PANEL_HEIGHT = 190
MIN_WIDTH = 320
BUTTON_SIZE = (90, 32)

PRIMARY = "primary"
# On-screen pad, sends the same key names the keyboard does.
PAD_BUTTONS = {
    "ArrowUp": "UP",
    "ArrowLeft": "LEFT",
    "ArrowRight": "RIGHT",
    "ArrowDown": "DOWN",
}


class Renderer:
    def __init__(self, rows: int, cols: int, cell_size: int, caption: str = "Snake") -> None:
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.board_width = cols * cell_size
        self.board_height = rows * cell_size
        self.width = max(self.board_width, MIN_WIDTH)
        self.height = self.board_height + PANEL_HEIGHT
        self.buttons = self._layout()
        self.snapshot: Optional[GameSnapshot] = None

        pygame.init()
        self._window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(caption)
        self._font = pygame.font.SysFont("arial", 18)

    def _layout(self) -> Dict[str, pygame.Rect]:
        bw, bh = BUTTON_SIZE
        # pad on the right, primary button on the left
        center_x = self.width - bw - 20
        top = self.board_height + 56
        return {
            PRIMARY: pygame.Rect(12, top, bw + 30, bh),
            "ArrowUp": pygame.Rect(center_x - bw // 2, top, bw, bh),
            "ArrowLeft": pygame.Rect(center_x - bw - 4, top + bh + 6, bw, bh),
            "ArrowRight": pygame.Rect(center_x + 4, top + bh + 6, bw, bh),
            "ArrowDown": pygame.Rect(center_x - bw // 2, top + 2 * (bh + 6), bw, bh),
        }

    def update(self, snapshot: GameSnapshot) -> None:
        self.snapshot = snapshot

    def hit_test(self, pos: Tuple[int, int]) -> Optional[str]:
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            col * self.cell_size,
            row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _text(self, text: str, pos: Tuple[int, int], color=TEXT_COLOR) -> None:
        self._window.blit(self._font.render(text, True, color), pos)

    def _button(self, name: str, text: str) -> None:
        rect = self.buttons[name]
        pygame.draw.rect(self._window, BUTTON_COLOR, rect, border_radius=4)
        surface = self._font.render(text, True, TEXT_COLOR)
        self._window.blit(surface, surface.get_rect(center=rect.center))

    def draw(self, snapshot: Optional[GameSnapshot] = None) -> None:
        snapshot = snapshot or self.snapshot
        if snapshot is None:
            return

        self._window.fill(BACKGROUND)
        for row in range(self.rows):
            for col in range(self.cols):
                pygame.draw.rect(self._window, GRID_LINE, self._cell_rect(row, col), 1)

        board = encode_snapshot(snapshot)
        for channel, color in ((BODY, BODY_COLOR), (HEAD, HEAD_COLOR), (FOOD, FOOD_COLOR)):
            for row, col in np.argwhere(board[channel] > 0):
                pygame.draw.rect(self._window, color, self._cell_rect(int(row), int(col)))

        top = self.board_height + 8
        self._text(f"SCORE   :   {snapshot.score}", (12, top))
        self._text(f"HIGH SCORE: {snapshot.high_score}", (12, top + 22))
        if snapshot.status is Status.OVER:
            self._text("GAME OVER", (self.width - 120, top), GAME_OVER_COLOR)

        primary = snapshot.label if snapshot.status is Status.OVER else f"{snapshot.label} GAME"
        self._button(PRIMARY, primary)
        for name, text in PAD_BUTTONS.items():
            self._button(name, text)

        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
