import numpy as np

from gridsnake.observe import BODY, FOOD, HEAD, encode_snapshot


def test_encode_snapshot_channels(make_engine):
    engine = make_engine(rows=6, cols=8, length=3)
    snap = engine.start()
    board = encode_snapshot(snap)

    assert board.shape == (3, 6, 8)
    assert board.dtype == np.float32
    assert board[BODY].sum() == 3
    assert board[BODY, 0, :3].tolist() == [1.0, 1.0, 1.0]
    assert board[HEAD].sum() == 1
    assert board[HEAD, 0, 2] == 1.0
    assert board[FOOD, snap.food.row, snap.food.col] == 1.0
