"""
Tests for win/tie detection.
"""

import random

import pytest

from ttt_engine.game_state import Board, Player
from ttt_engine.win_checker import Outcome, OutcomeKind, WinChecker, winning_lines

checker = WinChecker()


def no_line_board(size: int) -> Board:
    """A full board with no three in a row: XXOO.. rows, shifted every row."""
    cells = []
    for row in range(size):
        for col in range(size):
            cells.append(Player.X if (col // 2 + row) % 2 == 0 else Player.O)
    return Board(size, cells)


def swap_outcome(outcome: Outcome) -> Outcome:
    if outcome.kind == OutcomeKind.WIN:
        return Outcome.win(outcome.winner.opposite())
    return outcome


@pytest.mark.parametrize("size, count", [(3, 8), (4, 24), (5, 48)])
def test_number_of_lines(size, count):
    assert len(winning_lines(size)) == count


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_lines_never_wrap(size):
    for line in winning_lines(size):
        rows = [index // size for index in line]
        cols = [index % size for index in line]
        row_step = rows[1] - rows[0]
        col_step = cols[1] - cols[0]
        assert row_step in (0, 1)
        assert col_step in (-1, 0, 1)
        assert (row_step, col_step) != (0, 0)
        assert rows[2] - rows[1] == row_step
        assert cols[2] - cols[1] == col_step


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_empty_board_is_ongoing(size):
    assert checker.detect(Board.empty(size)) == Outcome.ongoing()


@pytest.mark.parametrize("size", [3, 4, 5])
@pytest.mark.parametrize("player", list(Player))
def test_every_line_wins(size, player):
    for line in winning_lines(size):
        board = Board.empty(size)
        for index in line:
            board.place(index, player)
        assert checker.detect(board) == Outcome.win(player)
        assert checker.get_winning_line(board) == line


def test_classic_lines():
    assert checker.detect(Board.from_string("XXX/OO_/___")) == Outcome.win(Player.X)
    assert checker.detect(Board.from_string("OX_/OX_/O__")) == Outcome.win(Player.O)
    assert checker.detect(Board.from_string("X_O/_XO/__X")) == Outcome.win(Player.X)
    assert checker.detect(Board.from_string("XXO/_O_/O__")) == Outcome.win(Player.O)


@pytest.mark.parametrize("picture", [
    "_XX/X__/___",            # row end into next row start
    "__XX/X___/____/____",    # horizontal wrap on 4x4
    "_X__/X__X/____/____",    # anti-diagonal stride 3 wrapping
    "___X/____/X___/_X__",    # diagonal stride 5 wrapping
])
def test_no_wrap_around_wins(picture):
    assert checker.detect(Board.from_string(picture)) == Outcome.ongoing()


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_full_board_without_line_is_tie(size):
    board = no_line_board(size)
    assert checker.detect(board) == Outcome.tie()
    assert checker.check_draw(board)


def test_full_board_with_line_is_win():
    board = Board.from_string("XXX/OOX/XOO")
    assert checker.detect(board) == Outcome.win(Player.X)
    assert not checker.check_draw(board)


def test_partial_board_without_line_is_ongoing():
    outcome = checker.detect(Board.from_string("XO_/OX_/___"))
    assert outcome.kind == OutcomeKind.ONGOING
    assert not outcome.is_terminal


def test_detect_is_symmetric_under_label_swap():
    rng = random.Random(1234)
    for _ in range(500):
        size = rng.choice([3, 4, 5])
        cells = [rng.choice([None, Player.X, Player.O]) for _ in range(size * size)]
        board = Board(size, cells)
        assert checker.detect(board.swapped()) == swap_outcome(checker.detect(board))


def test_outcome_str():
    assert str(Outcome.win(Player.O)) == "Win(O)"
    assert str(Outcome.tie()) == "Tie"
    assert str(Outcome.ongoing()) == "Ongoing"
