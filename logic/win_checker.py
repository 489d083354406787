"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass
from .board import Board, Player


class Outcome(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a board. Derived, never stored.

    `winner` is set only when outcome is WON.
    """
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome == Outcome.WON:
            return f"{self.winner.value} wins"
        if self.outcome == Outcome.DRAW:
            return "Draw"
        return "In progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices, row-major)
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """The Player holding all three cells of `line`, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw: all cells filled and no winner.
        """
        return board.is_full() and self.check_winner(board) is None

    def compute_status(self, board: Board) -> GameStatus:
        """
        Evaluate the 8 winning lines, then fullness.

        Returns:
            GameStatus.won(player), GameStatus.draw() or GameStatus.in_progress().
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameStatus.won(winner)
        if board.is_full():
            return GameStatus.draw()
        return GameStatus.in_progress()

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as three cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def get_winners(self, board: Board) -> List[Player]:
        """Every player that holds at least one complete line."""
        winners = []
        for line in self.WINNING_LINES:
            player = self._check_line(board, line)
            if player is not None and player not in winners:
                winners.append(player)
        return winners

    def count_winning_lines(self, board: Board) -> int:
        """Number of complete lines on the board."""
        return sum(1 for line in self.WINNING_LINES if self._check_line(board, line) is not None)
