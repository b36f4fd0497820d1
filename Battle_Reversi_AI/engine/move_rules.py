"""Move legality and move application (flip-until-own-color capture variant)."""

try:
    from Board import Board, EMPTY
except ImportError:
    from Battle_Reversi_AI.Board import Board, EMPTY


NEIGHBORS_8 = (
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
)


def is_legal_move(row, col, board):
    """Empty cell with at least one occupied neighbor (adjacency, not capture)."""
    if not board.is_empty(row, col):
        return False
    for dr, dc in NEIGHBORS_8:
        r, c = row + dr, col + dc
        if board.in_bounds(r, c) and board.get(r, c) != EMPTY:
            return True
    return False


def legal_moves(board):
    """All legal cells in row-major order."""
    return [
        (row, col)
        for row in range(board.size)
        for col in range(board.size)
        if is_legal_move(row, col, board)
    ]


def has_legal_move(board):
    return any(
        is_legal_move(row, col, board)
        for row in range(board.size)
        for col in range(board.size)
    )


def apply_move(row, col, color, board):
    """
    Return a new board with `color` played at (row, col).

    Every direction is walked from the adjacent cell outward; each visited cell
    (opponent or empty) becomes `color` until a cell already holding `color`
    or the edge is reached. Flips are kept however the walk ends.
    """
    size = board.size
    cells = list(board.cells)
    cells[row * size + col] = color

    for dr, dc in NEIGHBORS_8:
        r, c = row + dr, col + dc
        while board.in_bounds(r, c):
            idx = r * size + c
            if cells[idx] == color:
                break
            cells[idx] = color
            r += dr
            c += dc

    return Board(cells, size=size)
