"""
Tests for the console driver.

Usage:
    python -m pytest test_main.py
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from rules import EMPTY, O, X, Coordinate, GameStatus, InvalidCoordinates
from main import ConsoleGame, parse_move


def scripted_game(lines):
    """ConsoleGame fed from a list of input lines, collecting output."""
    inputs = iter(lines)
    output = []
    game = ConsoleGame(input_func=lambda: next(inputs), output_func=output.append)
    return game, output


# ==================== PARSING ====================

@pytest.mark.parametrize("text, expected", [
    ("a1", Coordinate("A", 1)),
    ("B2", Coordinate("B", 2)),
    ("  c3 \n", Coordinate("C", 3)),
    ("D9", Coordinate("D", 9)),
    ("a10", Coordinate("A", 10)),
    ("c٣", Coordinate("C", 3)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "a", "ab", "a-1", "  ", "a²", "b1.0"])
def test_parse_move_rejects_malformed_input(text):
    with pytest.raises(InvalidCoordinates):
        parse_move(text)


# ==================== GAME LOOP ====================

def test_game_won_by_x():
    game, output = scripted_game(["a1", "b1", "a2", "b2", "a3"])

    status = game.play()

    assert status == GameStatus(is_over=True, winner=X)
    assert output[0] == "Your move, X"
    assert "Your move, O" in output
    assert "Game over!" in output
    assert "Congratulations X" in output
    assert output[-1] == game.renderer.render_board(game.board)


def test_game_drawn():
    game, output = scripted_game(["a1", "b1", "c1", "b2", "a2", "c2", "b3", "a3", "c3"])

    status = game.play()

    assert status == GameStatus(is_over=True, winner=EMPTY)
    assert "Draw" in output
    assert not any(line.startswith("Congratulations") for line in output)


def test_rejected_moves_keep_the_same_player():
    game, output = scripted_game(["a1", "a1", "z9", "", "b1"])

    # Stop after the last scripted move
    with pytest.raises(StopIteration):
        game.play()

    assert "Cell already contains a value X" in output
    assert any(line.startswith("Invalid coordinates") for line in output)
    # Three rejected inputs, then b1
    assert output.count("Your move, O") == 4
    assert game.board.read(("B", 1)).value is O
    assert game.upcoming_move is X


def test_quit():
    game, output = scripted_game(["b2", "q"])

    status = game.play()

    assert not status.is_over
    assert "Game quit by user." in output
    assert "Game over!" not in output
    assert game.board.read(("B", 2)).value is X


def test_unparseable_row_is_shown_and_play_continues():
    game, output = scripted_game(["a²", "q"])

    status = game.play()

    assert not status.is_over
    assert any(line.startswith("Invalid coordinates ('A', '²')") for line in output)
    assert output.count("Your move, X") == 2
    assert "Game quit by user." in output
