"""Tests for input parsing and console helpers."""

import pytest

from connect4cli.game.stats import Stats
from connect4cli.ui.colors import paint, rule
from connect4cli.ui.menu import run_menu
from connect4cli.ui.prompts import parse_column, parse_int_range, read_int_range
from connect4cli.ui.render import centered


def test_parse_column():
    assert parse_column("3", 7) == 2
    assert parse_column(" 7 ", 7) == 6
    assert parse_column("Q", 7) is None
    with pytest.raises(ValueError):
        parse_column("abc", 7)
    with pytest.raises(ValueError):
        parse_column("0", 7)
    with pytest.raises(ValueError):
        parse_column("8", 7)


def test_parse_int_range_messages():
    assert parse_int_range("2", 1, 4) == 2
    with pytest.raises(ValueError, match="Invalid input."):
        parse_int_range("two", 1, 4)
    with pytest.raises(ValueError, match="Input out of range."):
        parse_int_range("5", 1, 4)


def test_read_int_range_reprompts():
    answers = iter(["x", "9", "2"])
    printed = []
    value = read_int_range(1, 4, input_fn=lambda prompt="": next(answers), print_fn=printed.append)
    assert value == 2
    assert [p.strip() for p in printed] == ["Invalid input.", "Input out of range."]


def test_centered_pads_left():
    assert centered("abc", width=11) == "    abc"
    assert centered("too long", width=4) == "too long"


def test_menu_statistics_then_exit(tmp_path, capsys):
    """Open the statistics screen, return, then exit."""
    answers = iter(["3", "", "4"])
    run_menu(Stats(path=tmp_path / "s.csv"), input_fn=lambda prompt="": next(answers))
    out = capsys.readouterr().out
    assert "=== Statistics ===" in out
    assert "Goodbye!" in out


def test_menu_back_from_difficulty(tmp_path, capsys):
    answers = iter(["2", "4", "4"])
    run_menu(Stats(path=tmp_path / "s.csv"), input_fn=lambda prompt="": next(answers))
    assert "Choose Difficulty" in capsys.readouterr().out


def test_paint_roles():
    assert paint("R", "red", enabled=True) == "\033[31mR\033[0m"
    assert paint("R", "red", enabled=False) == "R"
    with pytest.raises(KeyError):
        paint("R", "purple", enabled=True)
    assert rule(5) == "─────"
