class SudokuError(Exception):
    """Base class for every error raised by the puzzle engine."""


class InvalidArgumentError(SudokuError, ValueError):
    """Coordinates, symbols or grids outside the engine's contract."""


class FixedCellError(InvalidArgumentError):
    """A player edit targeted a cell pre-filled by the carved puzzle."""

    def __init__(self, row: int, col: int):
        super().__init__(f"cell ({row}, {col}) is fixed")
        self.row = row
        self.col = col


class ConfigurationError(SudokuError):
    """The difficulty table asks for a removal count the board cannot hold."""


class UnsolvableGridError(SudokuError):
    """A partially filled grid has no completion."""


class SearchBudgetExceeded(SudokuError):
    """A bounded fill placed more symbols than its budget allowed."""

    def __init__(self, max_steps: int):
        super().__init__(f"search exceeded {max_steps} placements")
        self.max_steps = max_steps
