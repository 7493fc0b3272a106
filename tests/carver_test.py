import random

import pytest

from sudoku_board import TOTAL_CELLS, Difficulty, empty_grid
from sudoku_errors import ConfigurationError, InvalidArgumentError
from sudoku_generator import carve, cells_to_remove, generate_puzzle


@pytest.mark.parametrize("difficulty,expected", [("easy", 80), ("medium", 120), ("hard", 160)])
def test_removal_table(difficulty, expected):
    assert cells_to_remove(difficulty) == expected
    assert cells_to_remove(Difficulty.parse(difficulty)) == expected


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_carve_preserves_solution_subset(grid, difficulty):
    board = carve(grid, difficulty, random.Random(11))
    blanks = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if not cell.is_fixed]
    assert len(blanks) == cells_to_remove(difficulty)
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            assert cell.is_valid
            if cell.is_fixed:
                assert cell.value == grid[r][c]
            else:
                assert cell.value == 0


def test_carve_leaves_input_untouched(grid):
    before = [row[:] for row in grid]
    carve(grid, "hard", random.Random(0))
    assert grid == before


def test_carve_is_deterministic(solved):
    a = carve(solved, "hard", random.Random(3))
    b = carve(solved, "hard", random.Random(3))
    assert a == b
    assert a != carve(solved, "hard", random.Random(4))


def test_removal_override(grid):
    board = carve(grid, "easy", random.Random(1), removals={"easy": 5})
    assert sum(not cell.is_fixed for row in board for cell in row) == 5


@pytest.mark.parametrize("count", [TOTAL_CELLS, TOTAL_CELLS + 44, -1])
def test_bad_removal_count_is_a_configuration_error(grid, count):
    with pytest.raises(ConfigurationError):
        carve(grid, "medium", random.Random(0), removals={Difficulty.MEDIUM: count})


def test_unknown_difficulty(grid):
    with pytest.raises(InvalidArgumentError):
        carve(grid, "expert")


def test_carve_rejects_incomplete_grid(grid):
    with pytest.raises(InvalidArgumentError):
        carve(empty_grid(), "easy")
    grid[4][4] = 0
    with pytest.raises(InvalidArgumentError):
        carve(grid, "easy")


def test_generate_puzzle_fails_fast_on_bad_table():
    with pytest.raises(ConfigurationError):
        generate_puzzle("hard", removals={"hard": 300})
