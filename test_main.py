"""
Tests for the console driver.
"""

import io

import pytest

from main import ConsoleDriver, format_board, main
from ttt_engine.game_state import Board, Player
from ttt_engine.session import GameSession


def test_format_board():
    board = Board.from_string("XO_/___/__X")
    assert format_board(board) == "X O _\n_ _ _\n_ _ X"


def test_move_prints_board(capsys):
    driver = ConsoleDriver(GameSession())
    assert driver.handle_command("0\n")
    assert capsys.readouterr().out == "X _ _\n_ _ _\n_ _ _\n"


def test_occupied_cell_prints_error(capsys):
    driver = ConsoleDriver(GameSession())
    driver.handle_command("0")
    capsys.readouterr()

    driver.handle_command("0")

    assert capsys.readouterr().out == "Error: Cell 0 (0, 0) is already occupied by X\n"
    assert driver.session.turn == Player.O


def test_out_of_range_prints_error(capsys):
    driver = ConsoleDriver(GameSession())
    driver.handle_command("12")
    assert capsys.readouterr().out == "Error: Invalid position 12. Must be 0-8.\n"


def test_bad_input_keeps_going(capsys):
    driver = ConsoleDriver(GameSession())
    assert driver.handle_command("abc")
    assert "Please type a cell number 0-8" in capsys.readouterr().out
    assert driver.handle_command("   ")


@pytest.mark.parametrize("command", ["9", "reset", "RESET"])
def test_reset(command, capsys):
    driver = ConsoleDriver(GameSession())
    driver.handle_command("4")
    capsys.readouterr()

    assert driver.handle_command(command)

    assert capsys.readouterr().out == ""
    assert driver.session.render() == (None,) * 9


@pytest.mark.parametrize("command", ["11", "quit", "q"])
def test_quit(command):
    assert not ConsoleDriver(GameSession()).handle_command(command)


def test_codes_follow_board_size():
    driver = ConsoleDriver(GameSession(4))
    driver.handle_command("15")
    assert driver.session.render()[15] == Player.X
    assert driver.handle_command("16")
    assert driver.session.render() == (None,) * 16
    assert not driver.handle_command("18")


def test_win_then_game_over(capsys):
    driver = ConsoleDriver(GameSession.from_string("XX_/OO_/___"))

    driver.handle_command("2")
    assert capsys.readouterr().out == "X X X\nO O _\n_ _ _\nPlayer X won!\n"

    driver.handle_command("5")
    assert capsys.readouterr().out == "Game is already over! Type reset to play again.\n"

    driver.handle_command("ai")
    assert capsys.readouterr().out == "Game is already over! Type reset to play again.\n"


def test_tie_message(capsys):
    driver = ConsoleDriver(GameSession.from_string("XOX/XOO/OX_"))
    driver.handle_command("8")
    assert capsys.readouterr().out.endswith("It's a tie!\n")


def test_ai_move_with_debug(capsys):
    driver = ConsoleDriver(GameSession.from_string("XX_/OO_/___"), debug=True)

    driver.handle_command("10")

    out = capsys.readouterr().out
    assert "Move(score=99, index=2)" in out
    assert out.endswith("X X X\nO O _\n_ _ _\nPlayer X won!\n")


def test_run_stops_at_quit():
    driver = ConsoleDriver(GameSession())
    driver.run(io.StringIO("4\nquit\n0\n"))
    cells = driver.session.render()
    assert cells[4] == Player.X
    assert cells[0] is None
    assert driver.session.turn == Player.O


def test_main_rejects_small_board():
    with pytest.raises(SystemExit):
        main(["--size", "2"])


def test_main_console(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\nq\n"))
    assert main(["--size", "4"]) == 0
    out = capsys.readouterr().out
    assert "TicTacToe 4x4" in out
    assert "_ X _ _" in out
    assert "Goodbye!" in out
