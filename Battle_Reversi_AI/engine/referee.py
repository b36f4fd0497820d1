"""Move validation for the game loop."""

try:
    from . import move_rules
except ImportError:
    from engine import move_rules

try:
    from Board import BLACK, WHITE
except ImportError:
    from Battle_Reversi_AI.Board import BLACK, WHITE


def check_move(move, board, color):
    """
    Validate a move against color, bounds, occupancy, and adjacency.
    Raises ValueError on invalid moves.
    """
    if color not in (BLACK, WHITE):
        raise ValueError("color must be -1 (black) or 1 (white)")

    row, col = move
    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")
    if not move_rules.is_legal_move(row, col, board):
        raise ValueError("Move has no occupied neighbor")

    return True
