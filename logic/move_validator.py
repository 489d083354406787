"""
Move validator for TicTacToe.
Validates that moves follow the rules and builds the next board.
"""

from typing import List, Optional
from dataclasses import dataclass
from .board import Board, Player, CELL_COUNT
from .errors import CellOccupied, GameAlreadyConcluded, InvalidCellIndex, InvalidMove
from .win_checker import GameStatus


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[InvalidMove] = None

    @classmethod
    def reject(cls, error: InvalidMove) -> "ValidationResult":
        return cls(is_valid=False, error_message=str(error), error=error)


def is_cell_index(value) -> bool:
    """True for an int in 0-8. bool is not accepted as an index."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < CELL_COUNT


def next_player(board: Board) -> Player:
    """
    Whose turn it is on `board`.

    X moves first and players alternate, so an even number of marks
    means X is to move and an odd number means O.
    """
    return Player.X if board.mark_count() % 2 == 0 else Player.O


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Game must not be over
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        cell_index: int,
        status: GameStatus
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The board the move is played on.
            cell_index: Cell to mark (0-8).
            status: Status of `board`.

        Returns:
            ValidationResult with is_valid, error_message and the error to raise.
        """
        # Check if index is in valid range
        if not is_cell_index(cell_index):
            return ValidationResult.reject(InvalidCellIndex(cell_index))

        # Check if game is over
        if status.is_over:
            return ValidationResult.reject(GameAlreadyConcluded(status))

        # Check if cell is empty
        if not board.is_empty(cell_index):
            return ValidationResult.reject(CellOccupied(cell_index, board[cell_index]))

        return ValidationResult(is_valid=True)

    def apply_move(self, board: Board, cell_index: int, player: Player) -> Board:
        """
        Build the board that results from `player` marking `cell_index`.
        The input board is left untouched.
        """
        return board.with_mark(cell_index, player)

    def next_player(self, board: Board) -> Player:
        return next_player(board)

    def get_valid_moves(self, board: Board, status: GameStatus) -> List[int]:
        """
        Get all valid moves on `board`.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if status.is_over:
            return []
        return board.get_empty_cells()
