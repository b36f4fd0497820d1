"""Disc and edge-count evaluation with terminal win/loss sentinels."""

from pathlib import Path
import yaml

try:
    from Board import BLACK, WHITE
except ImportError:
    from Battle_Reversi_AI.Board import BLACK, WHITE


WIN = 10 ** 9
LOSS = -WIN
DRAW = 0

# Default weights; can be overridden by loading config/weights.yaml if desired.
DEFAULT_WEIGHTS = {
    "disc": 1,  # black discs minus white discs
    "edge": 1,  # black edge discs minus white edge discs
}


def load_weights(path="config/weights.yaml"):
    """Load evaluation weights from YAML; fallback to defaults on missing file."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Battle_Reversi_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for name, value in (data.get("weights") or {}).items():
        if name not in DEFAULT_WEIGHTS:
            raise ValueError(f"unknown heuristic weight: {name}")
        weights[name] = int(value)
    return weights


def evaluate(board, perspective=BLACK, weights=None):
    """
    Score `board` for `perspective`. Positive favors that color.
    Full boards score WIN/LOSS (DRAW on equal counts); otherwise a weighted
    disc plus edge-disc difference. White's score is the negation of Black's.
    """
    if perspective not in (BLACK, WHITE):
        raise ValueError("perspective must be -1 (black) or 1 (white)")
    weights = weights or DEFAULT_WEIGHTS
    counts = board.counts()

    if counts.empty == 0:
        if counts.black == counts.white:
            return DRAW
        if perspective == BLACK:
            return WIN if counts.black > counts.white else LOSS
        return WIN if counts.white > counts.black else LOSS

    score = weights["disc"] * (counts.black - counts.white)
    score += weights["edge"] * (counts.black_edge - counts.white_edge)
    return score if perspective == BLACK else -score
