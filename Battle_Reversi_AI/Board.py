"""Immutable board state and derived disc counts."""

from collections import namedtuple


BOARD_SIZE = 5

# Store cells as -1 (black), 0 (empty), 1 (white)
BLACK = -1
EMPTY = 0
WHITE = 1

SYMBOLS = {BLACK: "B", WHITE: "W", EMPTY: "E"}
CELL_VALUES = {symbol: value for value, symbol in SYMBOLS.items()}
COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


BoardCounts = namedtuple("BoardCounts", ["black", "white", "empty", "black_edge", "white_edge"])


class Board:
    def __init__(self, cells=None, size=BOARD_SIZE):
        """Cells are a flat row-major sequence; omitted cells mean an empty board."""
        self.size = size
        if cells is None:
            cells = (EMPTY,) * (size * size)
        cells = tuple(cells)
        if len(cells) != size * size:
            raise ValueError(f"expected {size * size} cells, got {len(cells)}")
        for value in cells:
            if value not in SYMBOLS:
                raise ValueError(f"invalid cell value: {value!r}")
        self._cells = cells

    @classmethod
    def from_rows(cls, rows):
        """Build a board from rows of cell values or 'B'/'W'/'E' symbols."""
        rows = [list(row) for row in rows]
        size = len(rows)
        flat = []
        for row in rows:
            if len(row) != size:
                raise ValueError("board must be square")
            for value in row:
                flat.append(CELL_VALUES.get(value, value))
        return cls(flat, size=size)

    @property
    def cells(self):
        return self._cells

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        return self._cells[row * self.size + col]

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.get(row, col) == EMPTY

    def is_edge(self, row, col):
        last = self.size - 1
        return row in (0, last) or col in (0, last)

    def rows(self):
        """Return the grid as a list of row tuples."""
        size = self.size
        return [self._cells[r * size:(r + 1) * size] for r in range(size)]

    def counts(self):
        """Recompute per-color and per-edge counts (never cached)."""
        black = white = empty = black_edge = white_edge = 0
        for idx, value in enumerate(self._cells):
            if value == EMPTY:
                empty += 1
                continue
            row, col = divmod(idx, self.size)
            edge = self.is_edge(row, col)
            if value == BLACK:
                black += 1
                black_edge += edge
            else:
                white += 1
                white_edge += edge
        return BoardCounts(black, white, empty, black_edge, white_edge)

    def is_full(self):
        return EMPTY not in self._cells

    def to_text(self):
        return "\n".join("".join(SYMBOLS[v] for v in row) for row in self.rows())

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self):
        return hash((self.size, self._cells))

    def __repr__(self):
        return f"Board({self.to_text()!r})"

    def __str__(self):
        return self.to_text()
