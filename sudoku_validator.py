from typing import List

from sudoku_board import SIZE, Board, Cell, Coord, check_coords, check_shape, check_symbol
from sudoku_constraints import is_placement_legal, peers
from sudoku_errors import FixedCellError


def validate(board: Board, row: int, col: int, value: int) -> bool:
    """True unless a peer of (row, col) currently holds `value`.

    Fixed and player-entered values count alike. An empty value is always valid.
    """
    check_coords(row, col)
    check_symbol(value, allow_empty=True)
    if value == 0:
        return True
    return is_placement_legal(board, row, col, value)


def is_complete(board: Board) -> bool:
    """Every cell filled and free of conflicts, checked against live values."""
    check_shape(board)
    for r in range(SIZE):
        for c in range(SIZE):
            value = board[r][c].value
            if value == 0 or not validate(board, r, c, value):
                return False
    return True


def _refresh(board: Board, row: int, col: int) -> None:
    # fixed cells keep their flag; only player cells are re-judged
    for r, c in [(row, col), *peers(row, col)]:
        cell = board[r][c]
        if not cell.is_fixed:
            cell.is_valid = validate(board, r, c, cell.value)


def _editable(board: Board, row: int, col: int) -> Cell:
    check_coords(row, col)
    cell = board[row][col]
    if cell.is_fixed:
        raise FixedCellError(row, col)
    return cell


def set_value(board: Board, row: int, col: int, value: int) -> Cell:
    """Write a player value and re-judge the cell and all its peers."""
    if value == 0:
        return clear_cell(board, row, col)
    check_symbol(value)
    cell = _editable(board, row, col)
    cell.value = value
    _refresh(board, row, col)
    return cell


def clear_cell(board: Board, row: int, col: int) -> Cell:
    cell = _editable(board, row, col)
    cell.value = 0
    cell.is_superscript = False
    _refresh(board, row, col)
    return cell


def toggle_superscript(board: Board, row: int, col: int) -> Cell:
    """Flip the pencil-mark flag of a filled player cell; no-op otherwise."""
    check_coords(row, col)
    cell = board[row][col]
    if not cell.is_fixed and cell.value != 0:
        cell.is_superscript = not cell.is_superscript
    return cell


def invalid_cells(board: Board) -> List[Coord]:
    return [
        (r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if not board[r][c].is_valid
    ]
