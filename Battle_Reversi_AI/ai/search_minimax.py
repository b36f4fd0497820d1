"""Fixed-depth minimax over immutable board snapshots (Black maximizes)."""

import time

from . import heuristic

try:
    from Board import BLACK, WHITE, EMPTY
    from engine import move_rules
except ImportError:
    from Battle_Reversi_AI.Board import BLACK, WHITE, EMPTY
    from Battle_Reversi_AI.engine import move_rules


SEARCH_DEPTH = 3
MAX_COLOR = BLACK
MIN_COLOR = WHITE


def mover_color(maximizing):
    return MAX_COLOR if maximizing else MIN_COLOR


def is_terminal(board):
    return EMPTY not in board.cells


def successors(board, maximizing):
    """Yield (move, child) for each legal cell in row-major order."""
    color = mover_color(maximizing)
    for row in range(board.size):
        for col in range(board.size):
            if move_rules.is_legal_move(row, col, board):
                yield (row, col), move_rules.apply_move(row, col, color, board)


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, depth=SEARCH_DEPTH, weights=None, stats=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.depth = depth
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board, maximizing):
        """
        Return (move, child) for the side to move, or (None, None) when it
        has no legal move.
        """
        self.node_counter = 0
        self.start_time = time.time()
        _, move, child = self.minimax(board, self.depth, maximizing)

        if self.stats_list is not None:
            self._record_stats(maximizing)

        return move, child

    def minimax(self, board, depth, maximizing):
        """Return (score, move, child); move and child are None at leaves."""
        self.node_counter += 1

        if depth == 0 or is_terminal(board):
            return self.evaluate(board), None, None

        best_score = None
        best_move = None
        best_child = None
        for move, child in successors(board, maximizing):
            score, _, _ = self.minimax(child, depth - 1, not maximizing)
            if best_score is None:
                better = True
            elif maximizing:
                better = score > best_score
            else:
                better = score < best_score
            if better:
                best_score = score
                best_move = move
                best_child = child

        if best_child is None:
            # No legal move for the side to move: score the node as a leaf.
            return self.evaluate(board), None, None

        return best_score, best_move, best_child

    def evaluate(self, board):
        # Every leaf is scored for the maximizer so all depths compare.
        return heuristic.evaluate(board, MAX_COLOR, weights=self.weights)

    def _record_stats(self, maximizing):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": mover_color(maximizing),
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, maximizing, depth=SEARCH_DEPTH, weights=None, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(depth=depth, weights=weights, stats=stats)
    return searcher.choose_move(board, maximizing)
