"""Entry point: load config, read the board, play it out, write the winner."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, silent
    from utils import board_io
    from Reversigame import Reversigame
    from ai import heuristic, search_minimax
except ImportError:
    from Battle_Reversi_AI.utils.cli import parse_args
    from Battle_Reversi_AI.utils.logger import log_event, silent
    from Battle_Reversi_AI.utils import board_io
    from Battle_Reversi_AI.Reversigame import Reversigame
    from Battle_Reversi_AI.ai import heuristic, search_minimax


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Reversi_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    input_path = args.input or settings.get("input_path", DEFAULT_INPUT)
    output_path = args.output or settings.get("output_path", DEFAULT_OUTPUT)
    depth = args.depth or settings.get("search_depth", search_minimax.SEARCH_DEPTH)
    logger = silent if args.quiet else log_event

    weights = heuristic.load_weights(args.weights)

    try:
        board = board_io.read_board(input_path)
    except FileNotFoundError:
        log_event(f"Error: input file not found: {input_path}")
        return 2
    except board_io.MalformedBoardError as exc:
        log_event(f"Error: malformed board in {input_path}: {exc}")
        return 2

    game = Reversigame(board, depth=depth, logger=logger, weights=weights)
    winner = game.play()
    board_io.write_result(output_path, winner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
