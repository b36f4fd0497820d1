"""CLI options for board input/output paths, search depth, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Reversi AI (5x5 minimax winner prediction)")
    parser.add_argument("--input", help="Board file: 5 lines of 5 characters from B/W/E (default from settings)")
    parser.add_argument("--output", help="File receiving the winning color character (default from settings)")
    parser.add_argument("--depth", type=int, help="Search depth in plies (default from settings)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to heuristic weights YAML")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-move event logging")
    return parser.parse_args(argv)
