"""
Tests for the Board model.
"""

import pytest

from logic.board import (
    Board,
    Player,
    CELL_COUNT,
    index_to_position,
    position_to_index,
)


def test_empty_board_has_nine_empty_cells():
    board = Board.empty()
    assert len(board) == CELL_COUNT == 9
    assert list(board) == [None] * 9
    assert board.get_empty_cells() == list(range(9))
    assert board.mark_count() == 0
    assert not board.is_full()


@pytest.mark.parametrize("length", [0, 8, 10])
def test_board_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        Board((None,) * length)


def test_board_rejects_non_player_cells():
    with pytest.raises(ValueError):
        Board(("X",) + (None,) * 8)


def test_board_stores_a_tuple():
    board = Board([None] * 9)
    assert isinstance(board.cells, tuple)


def test_is_empty():
    board = Board.from_string("X...O....")
    assert not board.is_empty(0)
    assert not board.is_empty(4)
    assert board.is_empty(1)
    assert board.is_empty(8)


def test_with_mark_returns_new_board():
    board = Board.empty()
    marked = board.with_mark(4, Player.X)

    assert marked is not board
    assert marked[4] == Player.X
    assert board[4] is None
    assert board == Board.empty()
    assert marked.diff(board) == [4]


def test_board_is_immutable():
    board = Board.empty()
    with pytest.raises(AttributeError):
        board.cells = (Player.X,) * 9
    with pytest.raises(TypeError):
        board.cells[0] = Player.X


def test_boards_compare_and_hash_by_value():
    a = Board.empty().with_mark(0, Player.X)
    b = Board.from_string("X........")
    assert a == b
    assert hash(a) == hash(b)


def test_from_string_and_to_string():
    board = Board.from_string("XO.\n.X.\n..O")
    assert board[0] == Player.X
    assert board[1] == Player.O
    assert board[4] == Player.X
    assert board[8] == Player.O
    assert board.to_string() == "XO..X...O"
    assert str(board) == "XO..X...O"


def test_from_string_rejects_unknown_marks():
    with pytest.raises(ValueError):
        Board.from_string("XOZ......")


def test_rows_and_cell_lookup():
    board = Board.from_string("XOX.O...X")
    assert board.rows()[0] == (Player.X, Player.O, Player.X)
    assert board.cell(1, 1) == Player.O
    assert board.cell(2, 2) == Player.X
    assert board.cell(1, 0) is None


@pytest.mark.parametrize(
    ("index", "position"),
    [(0, (0, 0)), (2, (0, 2)), (3, (1, 0)), (4, (1, 1)), (8, (2, 2))],
)
def test_index_position_conversion(index, position):
    assert index_to_position(index) == position
    assert position_to_index(*position) == index


def test_full_board():
    board = Board.from_string("XOXXOOOXX")
    assert board.is_full()
    assert board.get_empty_cells() == []
    assert board.mark_count() == 9


def test_pretty_has_three_rows():
    text = Board.from_string("X...O....").pretty()
    lines = text.splitlines()
    assert lines[0] == "  0   1   2"
    assert lines[1] == "0 X |   |  "
    assert lines[3] == "1   | O |  "
    assert len(lines) == 6


def test_player_opposite():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X
