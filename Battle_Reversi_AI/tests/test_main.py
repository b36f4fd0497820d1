"""End-to-end CLI runs and settings precedence."""

import importlib

from Battle_Reversi_AI.Board import BLACK


main_mod = importlib.import_module("Battle_Reversi_AI.main")

GRID = "EEEEE\nEEEEE\nEEBWE\nEEWBE\nEEEEE\n"


def test_main_writes_winner(tmp_path):
    src = tmp_path / "input.txt"
    dst = tmp_path / "output.txt"
    src.write_text(GRID, encoding="utf-8")

    status = main_mod.main([
        "--input", str(src),
        "--output", str(dst),
        "--settings", str(tmp_path / "none.yaml"),
        "--quiet",
    ])
    assert status == 0
    assert dst.read_text(encoding="utf-8") in ("B", "W")


def test_main_missing_input(tmp_path, capsys):
    status = main_mod.main([
        "--input", str(tmp_path / "absent.txt"),
        "--output", str(tmp_path / "output.txt"),
        "--settings", str(tmp_path / "none.yaml"),
    ])
    assert status == 2
    assert "not found" in capsys.readouterr().out
    assert not (tmp_path / "output.txt").exists()


def test_main_malformed_input(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("EEEEE\nEEXEE\n", encoding="utf-8")
    status = main_mod.main([
        "--input", str(src),
        "--output", str(tmp_path / "output.txt"),
        "--settings", str(tmp_path / "none.yaml"),
    ])
    assert status == 2
    assert "malformed" in capsys.readouterr().out


class RecordingGame:
    calls = []

    def __init__(self, board, depth, logger, weights):
        RecordingGame.calls.append({"depth": depth, "weights": weights})

    def play(self):
        return BLACK


def test_settings_then_cli_precedence(tmp_path, monkeypatch):
    monkeypatch.setattr(main_mod, "Reversigame", RecordingGame)
    RecordingGame.calls = []

    src = tmp_path / "board.txt"
    dst = tmp_path / "result.txt"
    src.write_text(GRID, encoding="utf-8")
    settings = tmp_path / "settings.yaml"
    settings.write_text(
        f"input_path: {src.as_posix()}\noutput_path: {dst.as_posix()}\nsearch_depth: 2\n",
        encoding="utf-8",
    )

    assert main_mod.main(["--settings", str(settings), "--quiet"]) == 0
    assert dst.read_text(encoding="utf-8") == "B"
    assert main_mod.main(["--settings", str(settings), "--depth", "1", "--quiet"]) == 0
    assert [c["depth"] for c in RecordingGame.calls] == [2, 1]
    assert RecordingGame.calls[0]["weights"] == {"disc": 1, "edge": 1}
