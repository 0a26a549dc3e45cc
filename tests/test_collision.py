from gridsnake.collision import Outcome, check
from gridsnake.grid import Cell, GridModel


GRID = GridModel(5, 5)


def test_inside_empty_cell_is_alive():
    assert check(Cell(2, 2), GRID, {Cell(0, 0)}) is Outcome.ALIVE


def test_out_of_bounds_is_wall():
    for cell in (Cell(-1, 0), Cell(5, 0), Cell(0, -1), Cell(0, 5)):
        assert check(cell, GRID, set()) is Outcome.WALL


def test_wall_is_checked_before_body():
    assert check(Cell(-1, 0), GRID, {Cell(-1, 0)}) is Outcome.WALL


def test_body_cell_is_self_collision():
    assert check(Cell(1, 1), GRID, {Cell(1, 1), Cell(1, 2)}) is Outcome.SELF


def test_vacating_tail_is_free():
    body = {Cell(1, 1), Cell(1, 2), Cell(2, 2), Cell(2, 1)}
    assert check(Cell(1, 1), GRID, body, vacating=Cell(1, 1)) is Outcome.ALIVE
    assert check(Cell(1, 1), GRID, body, vacating=None) is Outcome.SELF
