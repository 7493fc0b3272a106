import random

from conftest import assert_solved
from sudoku_generator import carve, generate
from sudoku_validator import is_complete, set_value, validate


def test_generate_carve_play_complete():
    rng = random.Random(2024)
    solved = generate(rng)
    assert_solved(solved)

    board = carve(solved, "easy", rng)
    blanks = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell.value == 0]
    fixed = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell.is_fixed]
    assert len(blanks) == 80
    assert len(fixed) == 176
    assert all(board[r][c].value == solved[r][c] for r, c in fixed)

    r, c = blanks[0]
    dup = next(cell.value for cell in board[r] if cell.value != 0)
    set_value(board, r, c, dup)
    assert not validate(board, r, c, dup)
    assert not board[r][c].is_valid
    assert not is_complete(board)

    for r, c in blanks:
        set_value(board, r, c, solved[r][c])
    assert is_complete(board)
