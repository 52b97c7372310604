"""Tests for settings loading, player wiring, and move parsing."""

import pytest

from Battle_Jump61_AI import main
from Battle_Jump61_AI.AIPlayer import AIPlayer
from Battle_Jump61_AI.Board import BLUE, RED
from Battle_Jump61_AI.Player import HumanPlayer, parse_move


def test_default_settings_file_loads():
    settings = main.load_settings("config/settings.yaml")
    assert settings["board_size"] == 6
    assert settings["search_depth"] == 2


def test_missing_settings_file_gives_defaults(tmp_path):
    assert main.load_settings(tmp_path / "nope.yaml") == {}


def test_settings_file_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_size: 4\nsearch_depth: 1\n", encoding="utf-8")
    assert main.load_settings(path) == {"board_size": 4, "search_depth": 1}


def test_build_players_by_mode():
    red, blue = main.build_players("ai-vs-human", depth=3)
    assert isinstance(red, AIPlayer) and red.side == RED and red.depth == 3
    assert isinstance(blue, HumanPlayer) and blue.side == BLUE
    with pytest.raises(ValueError):
        main.build_players("ai-vs-robot", depth=2)


def test_main_rejects_bad_board_size(capsys):
    assert main.main(["--board-size", "11", "--mode", "ai-vs-ai"]) is None
    assert "between 2 and 10" in capsys.readouterr().out


def test_main_honors_explicit_zero_flags(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("board_size: 3\nmode: ai-vs-ai\n", encoding="utf-8")
    assert main.main(["--settings", str(settings), "--board-size", "0"]) is None
    assert "between 2 and 10" in capsys.readouterr().out


def test_main_plays_ai_vs_ai(tmp_path, capsys):
    settings = tmp_path / "settings.yaml"
    settings.write_text("board_size: 2\nsearch_depth: 1\nmode: ai-vs-ai\n", encoding="utf-8")
    result = main.main(["--settings", str(settings)])
    assert result in (RED, BLUE)
    assert "wins." in capsys.readouterr().out


def test_parse_move():
    assert parse_move(" 2 3 ") == (2, 3)
    with pytest.raises(ValueError):
        parse_move("2,3")
    with pytest.raises(ValueError):
        parse_move("2 3 4")


def test_human_player_reads_stdin(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "3 1")
    assert HumanPlayer(RED).next_move(board=None) == (3, 1)
