"""
Tests for the console match.
"""

import builtins

import pytest

from logic import Won
from main import ConsoleMatch, parse_tile


@pytest.mark.parametrize("text,expected", [
    ("1 2", (1, 2)),
    ("  0   0 ", (0, 0)),
    ("3 5", (3, 5)),
    ("1", None),
    ("a b", None),
    ("1 2 3", None),
])
def test_parse_tile(text, expected):
    assert parse_tile(text) == expected


def feed_input(monkeypatch, lines):
    lines = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr(builtins, "input", fake_input)


def test_match_until_win(monkeypatch, capsys):
    # includes a garbage line, an occupied tile and an out-of-bounds tile
    feed_input(monkeypatch, ["0 0", "hello", "0 0", "1 0", "3 3", "0 1", "1 1", "0 2"])
    match = ConsoleMatch()
    match.run()

    out = capsys.readouterr().out
    assert "Please type two numbers" in out
    assert "Illegal move: Tile (0, 0) is already set" in out
    assert "out of bounds" in out
    assert "Player 1 (X) wins!" in out

    game = match.program.get_game(match.game_id)
    assert game.state == Won(winner=match.players[0])


def test_match_stops_on_eof(monkeypatch, capsys):
    feed_input(monkeypatch, ["1 1"])
    match = ConsoleMatch()
    match.run()

    assert "No more input" in capsys.readouterr().out
    assert match.program.get_game(match.game_id).turn == 2
