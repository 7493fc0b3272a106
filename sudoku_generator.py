import logging
import random
from typing import List, Mapping, Optional, Tuple

from sudoku_board import (
    CELLS_TO_REMOVE,
    SIZE,
    SYMBOLS,
    TOTAL_CELLS,
    Board,
    Cell,
    Difficulty,
    Grid,
    check_shape,
    empty_grid,
    format_grid,
)
from sudoku_constraints import find_conflicts, is_solved_grid, legal_symbols
from sudoku_errors import (
    ConfigurationError,
    InvalidArgumentError,
    SearchBudgetExceeded,
    UnsolvableGridError,
)

logger = logging.getLogger(__name__)

# Placements allowed per attempt before generate() restarts the search.
DEFAULT_MAX_STEPS = 20000
DEFAULT_MAX_RESTARTS = 20


def _solve(grid: Grid, row: int, col: int, rng: random.Random,
           counter: List[int], max_steps: Optional[int]) -> bool:
    if col == SIZE:
        row, col = row + 1, 0
    if row == SIZE:
        return True
    if grid[row][col] != 0:
        return _solve(grid, row, col + 1, rng, counter, max_steps)

    nums = list(SYMBOLS)
    rng.shuffle(nums)
    legal = legal_symbols(grid, row, col)
    for n in nums:
        if n not in legal:
            continue
        counter[0] += 1
        if max_steps is not None and counter[0] > max_steps:
            raise SearchBudgetExceeded(max_steps)
        grid[row][col] = n
        if _solve(grid, row, col + 1, rng, counter, max_steps):
            return True
        grid[row][col] = 0
    return False


def fill_grid(grid: Grid, rng: Optional[random.Random] = None,
              max_steps: Optional[int] = None) -> Grid:
    """Complete `grid` in place by randomized row-major backtracking.

    Filled cells are kept as given. Raises UnsolvableGridError when no
    completion exists and SearchBudgetExceeded when `max_steps` placements
    were not enough; in the latter case the grid may be partially filled.
    """
    rng = rng or random.Random()
    check_shape(grid)
    for row in grid:
        for v in row:
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= SIZE:
                raise InvalidArgumentError(f"grid value {v!r} is outside 0..{SIZE}")
    if find_conflicts(grid):
        raise UnsolvableGridError("starting grid already breaks a constraint")
    if not _solve(grid, 0, 0, rng, [0], max_steps):
        raise UnsolvableGridError("no completion exists for the starting grid")
    return grid


def generate(rng: Optional[random.Random] = None,
             max_steps: Optional[int] = DEFAULT_MAX_STEPS,
             max_restarts: int = DEFAULT_MAX_RESTARTS) -> Grid:
    """Return a fully solved 16x16 grid.

    Each bounded attempt that runs out of budget is discarded and the search
    restarts from an empty grid with the same random source; after
    `max_restarts` bounded attempts the last one runs without a budget.
    """
    rng = rng or random.Random()
    if max_steps is not None:
        for attempt in range(max_restarts):
            try:
                return fill_grid(empty_grid(), rng, max_steps)
            except SearchBudgetExceeded:
                logger.debug("generation attempt %d hit %d placements, restarting",
                             attempt + 1, max_steps)
    return fill_grid(empty_grid(), rng)


def cells_to_remove(difficulty, removals: Optional[Mapping] = None) -> int:
    difficulty = Difficulty.parse(difficulty)
    table = dict(CELLS_TO_REMOVE)
    if removals:
        table.update({Difficulty.parse(k): v for k, v in removals.items()})
    count = table[difficulty]
    if isinstance(count, bool) or not isinstance(count, int) or not 0 <= count < TOTAL_CELLS:
        raise ConfigurationError(
            f"{difficulty.value} removes {count!r} cells; must be in 0..{TOTAL_CELLS - 1}"
        )
    return count


def carve(solved: Grid, difficulty, rng: Optional[random.Random] = None,
          removals: Optional[Mapping] = None) -> Board:
    """Blank exactly cells_to_remove(difficulty) random cells of a solved grid.

    The result makes no promise of a unique solution.
    """
    rng = rng or random.Random()
    count = cells_to_remove(difficulty, removals)
    if not is_solved_grid(solved):
        raise InvalidArgumentError("carve needs a complete, valid 16x16 grid")

    board = [[Cell(value=v, is_fixed=True, is_valid=True) for v in row] for row in solved]
    removed = 0
    while removed < count:
        row = rng.randrange(SIZE)
        col = rng.randrange(SIZE)
        cell = board[row][col]
        if cell.value != 0:
            cell.value = 0
            cell.is_fixed = False
            removed += 1
    return board


def generate_puzzle(difficulty="easy", rng: Optional[random.Random] = None,
                    removals: Optional[Mapping] = None,
                    max_steps: Optional[int] = DEFAULT_MAX_STEPS) -> Tuple[Board, Grid]:
    rng = rng or random.Random()
    # Fail on a bad removal table before paying for generation.
    cells_to_remove(difficulty, removals)
    solution = generate(rng, max_steps=max_steps)
    board = carve(solution, difficulty, rng, removals)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("carved %s puzzle:\n%s", Difficulty.parse(difficulty).value,
                     format_grid(board))
    return board, solution
