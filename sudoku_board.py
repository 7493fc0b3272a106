from dataclasses import asdict, dataclass
from enum import Enum
from typing import List, Tuple, Union

from sudoku_errors import InvalidArgumentError

SIZE = 16
BOX = 4
TOTAL_CELLS = SIZE * SIZE
SYMBOLS = tuple(range(1, SIZE + 1))

Grid = List[List[int]]


@dataclass
class Cell:
    value: int = 0
    is_fixed: bool = False
    is_valid: bool = True
    is_hint: bool = False
    is_superscript: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


Board = List[List[Cell]]
Coord = Tuple[int, int]


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"unknown difficulty: {value!r}") from None


# Cells blanked per difficulty: ~31%, ~47% and ~63% of the board.
CELLS_TO_REMOVE = {
    Difficulty.EASY: 80,
    Difficulty.MEDIUM: 120,
    Difficulty.HARD: 160,
}


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def is_board(grid) -> bool:
    return bool(grid) and bool(grid[0]) and isinstance(grid[0][0], Cell)


def board_values(board: Board) -> Grid:
    """Value matrix of a play-time board."""
    return [[cell.value for cell in row] for row in board]


def check_shape(grid) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise InvalidArgumentError(f"expected a {SIZE}x{SIZE} grid")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_coords(row: int, col: int) -> None:
    if not (_is_int(row) and _is_int(col) and 0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidArgumentError(f"cell ({row}, {col}) is outside the board")


def check_symbol(symbol: int, allow_empty: bool = False) -> None:
    low = 0 if allow_empty else 1
    if not _is_int(symbol) or not low <= symbol <= SIZE:
        raise InvalidArgumentError(f"symbol {symbol!r} is outside {low}..{SIZE}")


def format_grid(grid) -> str:
    """Render a grid or board as text, '.' for empty cells."""
    if is_board(grid):
        grid = board_values(grid)
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX == 0:
            lines.append("")
        chunks = [
            " ".join(f"{v:2d}" if v else " ." for v in row[c:c + BOX])
            for c in range(0, SIZE, BOX)
        ]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)
