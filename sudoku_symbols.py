from typing import Dict, Tuple

from sudoku_board import check_symbol
from sudoku_errors import InvalidArgumentError

SYMBOL_SETS: Dict[str, Tuple[str, ...]] = {
    "letters": tuple("ABCDEFGHIJKLMNOP"),
    "animals": (
        "🦩", "🦄", "🐶", "🐱", "🐰", "🐼", "🐿️", "🦋",
        "🐠", "🦁", "🐯", "🐨", "🦊", "🦒", "🦘", "🦥",
    ),
    "colors": (
        "#e3342f", "#f6993f", "#ffed4a", "#38c172",
        "#4dc0b5", "#3490dc", "#6574cd", "#9561e2",
        "#f66d9b", "#ff6b6b", "#48dbfb", "#1dd1a1",
        "#feca57", "#ff9ff3", "#54a0ff", "#5f27cd",
    ),
}

DEFAULT_SYMBOL_SET = "colors"


def get_symbol_set(name: str) -> Tuple[str, ...]:
    try:
        return SYMBOL_SETS[name.strip().lower()]
    except KeyError:
        raise InvalidArgumentError(f"unknown symbol set: {name!r}") from None


def symbol_for(name: str, value: int) -> str:
    """Display symbol for a cell value; empty string for an empty cell."""
    check_symbol(value, allow_empty=True)
    if value == 0:
        return ""
    return get_symbol_set(name)[value - 1]


def legend(name: str) -> Dict[int, str]:
    return {value: symbol for value, symbol in enumerate(get_symbol_set(name), start=1)}
