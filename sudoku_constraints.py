from typing import Callable, FrozenSet, List, Set

from sudoku_board import BOX, SIZE, Coord, Grid, board_values, check_coords, check_symbol, is_board


def box_origin(row: int, col: int) -> Coord:
    return BOX * (row // BOX), BOX * (col // BOX)


def _values(grid) -> Grid:
    return board_values(grid) if is_board(grid) else grid


def _reader(grid) -> Callable[[int, int], int]:
    if is_board(grid):
        return lambda r, c: grid[r][c].value
    return lambda r, c: grid[r][c]


def is_placement_legal(grid, row: int, col: int, symbol: int) -> bool:
    """True if `symbol` appears nowhere else in the row, column or box of (row, col).

    `grid` is either a solving-time value matrix or a play-time board; only
    the 48 cells of the row, column and box are read.
    """
    check_coords(row, col)
    check_symbol(symbol)
    at = _reader(grid)
    if any(at(row, c) == symbol for c in range(SIZE) if c != col):
        return False
    if any(at(r, col) == symbol for r in range(SIZE) if r != row):
        return False
    br, bc = box_origin(row, col)
    for r in range(br, br + BOX):
        for c in range(bc, bc + BOX):
            if (r, c) != (row, col) and at(r, c) == symbol:
                return False
    return True


def legal_symbols(grid, row: int, col: int) -> Set[int]:
    """Every symbol that passes is_placement_legal at (row, col), in one scan."""
    check_coords(row, col)
    at = _reader(grid)
    used = {at(row, c) for c in range(SIZE) if c != col}
    used.update(at(r, col) for r in range(SIZE) if r != row)
    br, bc = box_origin(row, col)
    used.update(
        at(r, c)
        for r in range(br, br + BOX)
        for c in range(bc, bc + BOX)
        if (r, c) != (row, col)
    )
    return set(range(1, SIZE + 1)) - used


_PEERS = {}


def peers(row: int, col: int) -> FrozenSet[Coord]:
    """Coordinates sharing a row, column or box with (row, col), excluding it."""
    check_coords(row, col)
    key = (row, col)
    if key not in _PEERS:
        br, bc = box_origin(row, col)
        cells = {(row, c) for c in range(SIZE)}
        cells.update((r, col) for r in range(SIZE))
        cells.update((r, c) for r in range(br, br + BOX) for c in range(bc, bc + BOX))
        cells.discard(key)
        _PEERS[key] = frozenset(cells)
    return _PEERS[key]


def _units() -> List[List[Coord]]:
    units = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    units += [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            units.append([(br + i, bc + j) for i in range(BOX) for j in range(BOX)])
    return units


UNITS = _units()


def find_conflicts(grid) -> Set[Coord]:
    """Nonzero cells whose value is repeated somewhere in one of their units."""
    grid = _values(grid)
    bad = set()
    for unit in UNITS:
        seen = {}
        for r, c in unit:
            v = grid[r][c]
            if v:
                seen.setdefault(v, []).append((r, c))
        for locs in seen.values():
            if len(locs) > 1:
                bad.update(locs)
    return bad


def is_solved_grid(grid) -> bool:
    grid = _values(grid)
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False
    if any(v == 0 for row in grid for v in row):
        return False
    return not find_conflicts(grid)
