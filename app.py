import logging
import os
import random
import threading
import uuid
from collections import OrderedDict

from dotenv import load_dotenv
from flask import Flask, jsonify, request, session
from werkzeug.exceptions import BadRequest, Conflict, HTTPException, InternalServerError, NotFound

from sudoku_board import Difficulty
from sudoku_errors import ConfigurationError, FixedCellError, InvalidArgumentError
from sudoku_generator import DEFAULT_MAX_STEPS, generate_puzzle
from sudoku_symbols import DEFAULT_SYMBOL_SET, SYMBOL_SETS, legend, symbol_for
from sudoku_validator import invalid_cells, is_complete, set_value, toggle_superscript

load_dotenv()


def _removal_overrides() -> dict:
    overrides = {}
    for level in Difficulty:
        raw = os.getenv(f"SUDOKU_{level.name}_REMOVALS")
        if raw:
            overrides[level] = int(raw)
    return overrides


def _default_level() -> str:
    raw = os.getenv("SUDOKU_DEFAULT_LEVEL", "easy")
    try:
        return Difficulty.parse(raw).value
    except InvalidArgumentError:
        raise ConfigurationError(f"SUDOKU_DEFAULT_LEVEL={raw!r} is not a difficulty") from None


app = Flask(__name__)
app.secret_key = os.getenv("FLASK_SECRET_KEY", "dev-secret")
app.config.update(
    SUDOKU_DEFAULT_LEVEL=_default_level(),
    SUDOKU_REMOVALS=_removal_overrides(),
    SUDOKU_MAX_STEPS=int(os.getenv("SUDOKU_MAX_STEPS", str(DEFAULT_MAX_STEPS))),
    SUDOKU_MAX_PUZZLES=int(os.getenv("SUDOKU_MAX_PUZZLES", "1000")),
)

# Live puzzles by id; each browser session owns exactly one.
PUZZLES = OrderedDict()
PUZZLES_LOCK = threading.Lock()


def store_puzzle(puzzle: dict) -> str:
    puzzle_id = uuid.uuid4().hex
    with PUZZLES_LOCK:
        old_id = session.get("puzzle_id")
        if old_id:
            PUZZLES.pop(old_id, None)
        PUZZLES[puzzle_id] = puzzle
        while len(PUZZLES) > app.config["SUDOKU_MAX_PUZZLES"]:
            PUZZLES.popitem(last=False)
    session["puzzle_id"] = puzzle_id
    return puzzle_id


def current_puzzle() -> dict:
    puzzle_id = session.get("puzzle_id")
    puzzle = PUZZLES.get(puzzle_id) if puzzle_id else None
    if puzzle is None:
        raise NotFound("No puzzle in this session. Request /api/new_puzzle first.")
    return puzzle


def cell_payload(cell, symbols: str) -> dict:
    return dict(cell.to_dict(), symbol=symbol_for(symbols, cell.value))


def board_payload(puzzle: dict) -> dict:
    board, symbols = puzzle["board"], puzzle["symbols"]
    return {
        "id": session.get("puzzle_id"),
        "level": puzzle["level"],
        "symbols": symbols,
        "board": [[cell_payload(cell, symbols) for cell in row] for row in board],
        "invalid": invalid_cells(board),
        "complete": is_complete(board),
    }


def json_payload() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def int_field(payload: dict, name: str) -> int:
    value = payload.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(f"'{name}' must be an integer.")
    return value


# ---- Error handlers ----
@app.errorhandler(HTTPException)
def http_error(e):
    return jsonify({"error": e.name, "message": e.description}), e.code


@app.errorhandler(FixedCellError)
def fixed_cell_error(e):
    return http_error(Conflict(str(e)))


@app.errorhandler(InvalidArgumentError)
def invalid_argument_error(e):
    return http_error(BadRequest(str(e)))


@app.errorhandler(ConfigurationError)
def configuration_error(e):
    app.logger.error("puzzle configuration error: %s", e)
    return http_error(InternalServerError(str(e)))


# ---- Sudoku API ----
@app.route("/api/new_puzzle")
def api_new_puzzle():
    level = request.args.get("level", "").lower()
    if level not in {d.value for d in Difficulty}:
        level = app.config["SUDOKU_DEFAULT_LEVEL"]
    symbols = request.args.get("symbols", DEFAULT_SYMBOL_SET).lower()
    if symbols not in SYMBOL_SETS:
        symbols = DEFAULT_SYMBOL_SET
    seed = request.args.get("seed", type=int)
    rng = random.Random(seed)

    board, solution = generate_puzzle(
        level,
        rng,
        removals=app.config["SUDOKU_REMOVALS"],
        max_steps=app.config["SUDOKU_MAX_STEPS"],
    )
    puzzle = {"level": level, "symbols": symbols, "board": board, "solution": solution}
    puzzle_id = store_puzzle(puzzle)
    app.logger.info("new %s puzzle %s (seed=%s)", level, puzzle_id, seed)
    return jsonify(board_payload(puzzle))


@app.route("/api/puzzle")
def api_puzzle():
    puzzle = current_puzzle()
    with PUZZLES_LOCK:
        body = board_payload(puzzle)
    return jsonify(body)


@app.route("/api/move", methods=["POST"])
def api_move():
    puzzle = current_puzzle()
    payload = json_payload()
    row, col = int_field(payload, "row"), int_field(payload, "col")
    value = int_field(payload, "value")
    board = puzzle["board"]
    with PUZZLES_LOCK:
        cell = set_value(board, row, col, value)
        complete = is_complete(board)
        invalid = invalid_cells(board)
        body = cell_payload(cell, puzzle["symbols"])
    if complete:
        app.logger.info("puzzle %s completed", session.get("puzzle_id"))
    return jsonify({
        "row": row,
        "col": col,
        "cell": body,
        "invalid": invalid,
        "complete": complete,
    })


@app.route("/api/superscript", methods=["POST"])
def api_superscript():
    puzzle = current_puzzle()
    payload = json_payload()
    row, col = int_field(payload, "row"), int_field(payload, "col")
    with PUZZLES_LOCK:
        cell = toggle_superscript(puzzle["board"], row, col)
        body = cell_payload(cell, puzzle["symbols"])
    return jsonify({"row": row, "col": col, "cell": body})


@app.route("/api/symbols/<name>")
def api_symbols(name):
    return jsonify({"name": name.lower(), "symbols": legend(name)})


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("SUDOKU_LOG_LEVEL", "INFO").upper())
    app.run(debug=True)
