"""
Tests for move validation and win detection.
"""

import pytest

from logic.board import Board, Player
from logic.errors import (
    CellOccupied,
    GameAlreadyConcluded,
    InvalidCellIndex,
    InvalidMove,
)
from logic.move_validator import MoveValidator, next_player
from logic.win_checker import GameStatus, Outcome, WinChecker


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.fixture
def checker():
    return WinChecker()


# ==================== VALIDATION ====================

def test_valid_move_on_empty_board(validator):
    result = validator.validate_move(Board.empty(), 4, GameStatus.in_progress())
    assert result.is_valid
    assert result.error is None
    assert result.error_message is None


@pytest.mark.parametrize("cell_index", [-1, 9, 100, True, 1.0, "4", None])
def test_invalid_cell_index(validator, cell_index):
    result = validator.validate_move(Board.empty(), cell_index, GameStatus.in_progress())
    assert not result.is_valid
    assert isinstance(result.error, InvalidCellIndex)
    assert isinstance(result.error, InvalidMove)
    assert "Must be 0-8" in result.error_message


def test_occupied_cell(validator):
    board = Board.from_string("....X....")
    result = validator.validate_move(board, 4, GameStatus.in_progress())
    assert not result.is_valid
    assert isinstance(result.error, CellOccupied)
    assert result.error.occupant == Player.X
    assert result.error_message == "Cell 4 is already occupied by X"


@pytest.mark.parametrize("status", [GameStatus.won(Player.X), GameStatus.draw()])
def test_concluded_game(validator, status):
    result = validator.validate_move(Board.from_string("XXXOO...."), 5, status)
    assert not result.is_valid
    assert isinstance(result.error, GameAlreadyConcluded)
    assert result.error.status == status


def test_range_is_checked_before_game_over(validator):
    result = validator.validate_move(Board.empty(), 9, GameStatus.draw())
    assert isinstance(result.error, InvalidCellIndex)


def test_game_over_is_checked_before_occupied(validator):
    result = validator.validate_move(Board.from_string("XXXOO...."), 0, GameStatus.won(Player.X))
    assert isinstance(result.error, GameAlreadyConcluded)


def test_apply_move_leaves_input_untouched(validator):
    board = Board.from_string("X........")
    after = validator.apply_move(board, 4, Player.O)
    assert after == Board.from_string("X...O....")
    assert board == Board.from_string("X........")


@pytest.mark.parametrize(
    ("layout", "player"),
    [
        (".........", Player.X),
        ("X........", Player.O),
        ("X...O....", Player.X),
        ("XO..X....", Player.O),
    ],
)
def test_next_player_from_mark_parity(validator, layout, player):
    board = Board.from_string(layout)
    assert next_player(board) == player
    assert validator.next_player(board) == player


def test_get_valid_moves(validator, checker):
    board = Board.from_string("XO..X....")
    assert validator.get_valid_moves(board, checker.compute_status(board)) == [2, 3, 5, 6, 7, 8]

    won = Board.from_string("XXXOO....")
    assert validator.get_valid_moves(won, checker.compute_status(won)) == []


# ==================== WIN DETECTION ====================

@pytest.mark.parametrize(
    ("layout", "line"),
    [
        ("XXXOO....", (0, 1, 2)),
        ("OO.XXX...", (3, 4, 5)),
        ("OO....XXX", (6, 7, 8)),
        ("XO.XO.X..", (0, 3, 6)),
        (".XO.XO.X.", (1, 4, 7)),
        ("O.XO.X..X", (2, 5, 8)),
        ("XO.OX...X", (0, 4, 8)),
        ("O.XOX.X..", (2, 4, 6)),
    ],
)
def test_every_winning_line(checker, layout, line):
    board = Board.from_string(layout)
    assert checker.check_winner(board) == Player.X
    assert checker.get_winning_line(board) == line
    assert checker.compute_status(board) == GameStatus.won(Player.X)


def test_o_can_win(checker):
    board = Board.from_string("XX.OOOX..")
    assert checker.check_winner(board) == Player.O
    status = checker.compute_status(board)
    assert status.outcome == Outcome.WON
    assert status.winner == Player.O
    assert status.is_over
    assert str(status) == "O wins"


def test_no_winner(checker):
    board = Board.from_string("XO..O....")
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None
    assert not checker.check_draw(board)
    status = checker.compute_status(board)
    assert status == GameStatus.in_progress()
    assert not status.is_over
    assert str(status) == "In progress"


def test_full_board_without_line_is_draw(checker):
    # X O X / X O O / O X X
    board = Board.from_string("XOXXOOOXX")
    assert checker.check_winner(board) is None
    assert checker.check_draw(board)
    assert checker.compute_status(board) == GameStatus.draw()
    assert str(GameStatus.draw()) == "Draw"


def test_full_board_with_line_is_a_win_not_a_draw(checker):
    board = Board.from_string("XOXOXOOXX")
    assert checker.check_winner(board) == Player.X
    assert not checker.check_draw(board)


def test_one_move_can_complete_two_lines_of_the_same_player(checker):
    # Corner 0 completes both the top row and the left column
    board = Board.from_string("XXXXOOXOO")
    assert checker.count_winning_lines(board) == 2
    assert checker.get_winners(board) == [Player.X]
    assert checker.compute_status(board) == GameStatus.won(Player.X)


def test_x_diagonal_fill_is_a_win(checker):
    # X on 0,2,4,7,8 and O on 1,3,5,6: the 0-4-8 diagonal is complete
    board = Board.from_string("XOXOXOOXX")
    assert checker.get_winning_line(board) == (0, 4, 8)
