import pytest

from gridsnake.config import InvalidConfig
from gridsnake.direction import Direction
from gridsnake.grid import Cell, GridModel
from gridsnake.snake import SnakeBody


def test_initialize_places_snake_on_first_row():
    snake = SnakeBody.initialize(10, GridModel())
    assert len(snake) == 10
    assert snake.cells == tuple(Cell(0, col) for col in range(10))
    assert snake.head == Cell(0, 9)
    assert snake.tail == Cell(0, 0)


@pytest.mark.parametrize("length", [0, 49])
def test_initialize_rejects_bad_length(length):
    with pytest.raises(InvalidConfig):
        SnakeBody.initialize(length, GridModel(48, 48))


def test_initialize_full_row():
    snake = SnakeBody.initialize(5, GridModel(3, 5))
    assert snake.head == Cell(0, 4)


def test_next_head_offsets():
    snake = SnakeBody([Cell(2, 2)])
    assert snake.next_head(Direction.UP) == Cell(1, 2)
    assert snake.next_head(Direction.DOWN) == Cell(3, 2)
    assert snake.next_head(Direction.RIGHT) == Cell(2, 3)
    assert snake.next_head(Direction.LEFT) == Cell(2, 1)
    # next_head does not move the snake
    assert snake.cells == (Cell(2, 2),)


def test_advance_without_growth_drops_tail():
    snake = SnakeBody([(0, 0), (0, 1), (0, 2)])
    new_head, dropped = snake.advance(Direction.DOWN, grow=False)
    assert new_head == Cell(1, 2)
    assert dropped == Cell(0, 0)
    assert snake.cells == (Cell(0, 1), Cell(0, 2), Cell(1, 2))
    assert snake.occupancy() == {Cell(0, 1), Cell(0, 2), Cell(1, 2)}


def test_advance_with_growth_keeps_tail():
    snake = SnakeBody([(0, 0), (0, 1)])
    new_head, dropped = snake.advance(Direction.RIGHT, grow=True)
    assert new_head == Cell(0, 2)
    assert dropped is None
    assert len(snake) == 3
    assert Cell(0, 0) in snake


def test_advance_into_own_tail_keeps_occupancy_in_sync():
    snake = SnakeBody([(1, 1), (1, 2), (2, 2), (2, 1)])
    new_head, dropped = snake.advance(Direction.UP, grow=False)
    assert new_head == dropped == Cell(1, 1)
    assert snake.occupancy() == set(snake.cells)
    assert len(snake.occupancy()) == 4


def test_rejects_overlapping_cells():
    with pytest.raises(InvalidConfig):
        SnakeBody([(0, 0), (0, 0)])
    with pytest.raises(InvalidConfig):
        SnakeBody([])
