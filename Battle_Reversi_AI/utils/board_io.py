"""Reading the initial board from a text grid and writing the winner character."""

import logging
from pathlib import Path

try:
    from Board import Board, BOARD_SIZE, CELL_VALUES, SYMBOLS
except ImportError:
    from Battle_Reversi_AI.Board import Board, BOARD_SIZE, CELL_VALUES, SYMBOLS


LOGGER = logging.getLogger(__name__)


class MalformedBoardError(ValueError):
    """Board text with the wrong shape or an unknown cell character."""


def parse_board(text, size=BOARD_SIZE):
    """
    Parse `size` lines of `size` characters drawn from B/W/E into a Board.
    Trailing whitespace and blank lines after the grid are ignored.
    """
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()

    if len(lines) != size:
        raise MalformedBoardError(f"expected {size} rows, got {len(lines)}")

    rows = []
    for r, line in enumerate(lines):
        if len(line) != size:
            raise MalformedBoardError(f"row {r}: expected {size} columns, got {len(line)}")
        for c, ch in enumerate(line):
            if ch not in CELL_VALUES:
                raise MalformedBoardError(f"row {r}, column {c}: invalid cell {ch!r}")
        rows.append(line)

    board = Board.from_rows(rows)
    LOGGER.debug("Parsed board:\n%s", board.to_text())
    return board


def read_board(path, size=BOARD_SIZE):
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    LOGGER.debug("Read %d bytes from %s", len(text), path)
    return parse_board(text, size=size)


def write_result(path, color):
    """Write the single winner character ('B' or 'W'), no trailing newline."""
    symbol = SYMBOLS.get(color)
    if symbol not in ("B", "W"):
        raise ValueError(f"winner must be black or white, got {color!r}")
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(symbol)
    LOGGER.debug("Wrote result %s to %s", symbol, path)
