"""Game loop alternating maximizing (Black) and minimizing (White) searches."""

try:
    from Board import BLACK, WHITE, COLOR_NAMES, SYMBOLS
    from engine import referee
    from ai import search_minimax
except ImportError:
    from Battle_Reversi_AI.Board import BLACK, WHITE, COLOR_NAMES, SYMBOLS
    from Battle_Reversi_AI.engine import referee
    from Battle_Reversi_AI.ai import search_minimax


def decide_winner(board, last_color):
    """
    Strict disc majority wins; equal counts go to the color that did not make
    the final move. A full 5x5 board can never be tied.
    """
    counts = board.counts()
    if last_color == BLACK:
        return BLACK if counts.black > counts.white else WHITE
    return WHITE if counts.white > counts.black else BLACK


class Reversigame:
    def __init__(self, board, depth=search_minimax.SEARCH_DEPTH, logger=print, weights=None, stats=None):
        self.board = board
        self.searcher = search_minimax.MinimaxSearcher(depth=depth, weights=weights, stats=stats)
        self.logger = logger
        self.history = []
        self.moves_played = 0

    def play(self):
        """Run the game to a terminal (or blocked) board. Returns -1 (black) or 1 (white)."""
        maximizing = True
        last_color = BLACK  # color of the initial node
        passes = 0

        while not search_minimax.is_terminal(self.board):
            color = search_minimax.mover_color(maximizing)
            move, child = self.searcher.choose_move(self.board, maximizing)

            if move is None:
                self.logger(f"Pass: {COLOR_NAMES[color]} has no legal move")
                self.history.append((color, None))
                passes += 1
                if passes >= 2:
                    self.logger("Result: blocked (no legal move for either color)")
                    break
            else:
                referee.check_move(move, self.board, color)
                self.board = child
                last_color = color
                passes = 0
                self.moves_played += 1
                self.history.append((color, move))
                self.logger(f"Move {self.moves_played}: {SYMBOLS[color]} {move}")

            maximizing = not maximizing

        winner = decide_winner(self.board, last_color)
        counts = self.board.counts()
        self.logger(f"Final: B={counts.black} W={counts.white} E={counts.empty}")
        self.logger(f"Winner: {COLOR_NAMES[winner]}")
        return winner


def play(board, depth=search_minimax.SEARCH_DEPTH, logger=print, weights=None):
    """Convenience wrapper: winning color for `board` under automated play."""
    return Reversigame(board, depth=depth, logger=logger, weights=weights).play()
