import random

import pytest

from sudoku_board import BOX, SIZE, Cell
from sudoku_generator import generate

SEED = 1234


def pattern_grid():
    """A valid solved grid built from the shifted-row pattern, no search involved."""
    return [[(BOX * (r % BOX) + r // BOX + c) % SIZE + 1 for c in range(SIZE)] for r in range(SIZE)]


def board_with_blanks(grid, blanks=()):
    board = [[Cell(value=v, is_fixed=True) for v in row] for row in grid]
    for r, c in blanks:
        board[r][c] = Cell()
    return board


def assert_solved(grid):
    full = set(range(1, SIZE + 1))
    assert len(grid) == SIZE
    for row in grid:
        assert len(row) == SIZE
        assert set(row) == full
    for c in range(SIZE):
        assert {grid[r][c] for r in range(SIZE)} == full
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            box = {grid[r][c] for r in range(br, br + BOX) for c in range(bc, bc + BOX)}
            assert box == full


@pytest.fixture
def grid():
    return pattern_grid()


@pytest.fixture(scope="session")
def solved():
    return generate(random.Random(SEED))
