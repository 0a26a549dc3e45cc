from __future__ import annotations

import numpy as np

from gridsnake.engine import GameSnapshot

BODY, HEAD, FOOD = 0, 1, 2


def encode_snapshot(snapshot: GameSnapshot) -> np.ndarray:
    """3-channel (body, head, food) board of shape (3, rows, cols)."""
    h, w = snapshot.rows, snapshot.cols
    state = np.zeros((3, h, w), dtype=np.float32)

    for row, col in snapshot.snake:
        if 0 <= row < h and 0 <= col < w:
            state[BODY, row, col] = 1.0

    head_row, head_col = snapshot.head
    if 0 <= head_row < h and 0 <= head_col < w:
        state[HEAD, head_row, head_col] = 1.0

    if snapshot.food is not None:
        food_row, food_col = snapshot.food
        if 0 <= food_row < h and 0 <= food_col < w:
            state[FOOD, food_row, food_col] = 1.0

    return state
