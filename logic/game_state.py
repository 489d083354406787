"""
Game state management for TicTacToe.
Tracks the history of board snapshots and which one is being viewed.
"""

from typing import Iterator, Optional, Tuple
from dataclasses import dataclass
from .board import Board, Player, index_to_position
from .errors import InvalidHistoryIndex
from .move_validator import MoveValidator
from .win_checker import GameStatus, WinChecker


@dataclass(frozen=True)
class MoveRecord:
    """
    One entry of the history: the board after move `index`.

    Index 0 is the empty starting board. `cell` is the cell
    marked by this move (None for index 0).
    """
    index: int
    board: Board
    cell: Optional[int] = None

    @property
    def player(self) -> Optional[Player]:
        """Who made this move."""
        if self.cell is None:
            return None
        return self.board[self.cell]

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        """(row, col) of this move."""
        if self.cell is None:
            return None
        return index_to_position(self.cell)

    @property
    def description(self) -> str:
        if self.index == 0:
            return "Go to game start"
        return f"Go to move #{self.index}"

    def __iter__(self) -> Iterator:
        """Unpack as an (index, board) pair."""
        yield self.index
        yield self.board


class MoveList:
    """
    The full history as (index, board) entries, for "jump to move" controls.

    Built over an immutable snapshot of the history, so it can be iterated
    any number of times and is not affected by later moves or jumps.
    """

    def __init__(self, boards: Tuple[Board, ...]):
        self._boards = boards

    def __len__(self) -> int:
        return len(self._boards)

    def __iter__(self) -> Iterator[MoveRecord]:
        for index in range(len(self._boards)):
            yield self[index]

    def __reversed__(self) -> Iterator[MoveRecord]:
        for index in range(len(self._boards) - 1, -1, -1):
            yield self[index]

    def __getitem__(self, index: int) -> MoveRecord:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Move list indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._boards):
            raise IndexError(f"Move {index} out of range [0, {len(self._boards)})")
        board = self._boards[index]
        cell = None
        if index > 0:
            cell = board.diff(self._boards[index - 1])[0]
        return MoveRecord(index=index, board=board, cell=cell)


class GameState:
    """
    The complete state of a TicTacToe game with time travel.

    Tracks:
    - History: board snapshots, starting with the empty board
    - Viewing index: which snapshot is shown and receives the next move

    Current player and game status are recomputed from the viewed board.
    """

    def __init__(self, verbose: bool = False):
        """
        Start a new game.

        Args:
            verbose: If True, print every move, jump and rejection.
        """
        self.verbose = verbose
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._history: Tuple[Board, ...] = (Board.empty(),)
        self._viewing_index = 0

    @property
    def history(self) -> Tuple[Board, ...]:
        """All recorded snapshots (read-only)."""
        return self._history

    @property
    def viewing_index(self) -> int:
        return self._viewing_index

    def current_board(self) -> Board:
        """The board at the viewing index."""
        return self._history[self._viewing_index]

    def current_status(self) -> GameStatus:
        return self.win_checker.compute_status(self.current_board())

    def current_player(self) -> Player:
        """Whose turn it is on the viewed board."""
        return self.validator.next_player(self.current_board())

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """The completed line on the viewed board, if any."""
        return self.win_checker.get_winning_line(self.current_board())

    def move_number(self) -> int:
        """How many moves led to the viewed board."""
        return self._viewing_index

    def is_viewing_latest(self) -> bool:
        return self._viewing_index == len(self._history) - 1

    def move_list(self) -> MoveList:
        """Every recorded move, independent of the viewing index."""
        return MoveList(self._history)

    def play_move(self, cell_index: int) -> Board:
        """
        Play the current player's mark at `cell_index` on the viewed board.

        Any snapshots after the viewing index are discarded before the
        new board is appended.

        Args:
            cell_index: Cell to mark (0-8).

        Returns:
            The new board.

        Raises:
            InvalidCellIndex, GameAlreadyConcluded, CellOccupied: the move
            was rejected and nothing changed.
        """
        board = self.current_board()
        result = self.validator.validate_move(board, cell_index, self.current_status())
        if not result.is_valid:
            self._log(f"Rejected: {result.error_message}")
            raise result.error

        player = self.validator.next_player(board)
        new_board = self.validator.apply_move(board, cell_index, player)

        dropped = len(self._history) - 1 - self._viewing_index
        self._history = self._history[:self._viewing_index + 1] + (new_board,)
        self._viewing_index = len(self._history) - 1

        if dropped:
            self._log(f"Discarded {dropped} later move(s)")
        self._log(f"{player.value} plays cell {cell_index} (move #{self._viewing_index})")
        return new_board

    def jump_to(self, index: int) -> Board:
        """
        View the snapshot after move `index` without changing the history.

        Raises:
            InvalidHistoryIndex: index is not 0..len(history)-1.
        """
        valid = isinstance(index, int) and not isinstance(index, bool)
        if not valid or not 0 <= index < len(self._history):
            error = InvalidHistoryIndex(index, len(self._history))
            self._log(f"Rejected: {error}")
            raise error

        self._viewing_index = index
        self._log(f"Jumped to move #{index}")
        return self.current_board()

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def print_board(self):
        """Print the viewed board and game info to console."""
        print()
        print(self.current_board().pretty())

        status = self.current_status()
        if status.is_over:
            if status.winner:
                print(f"\n{status.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player().value}")
        print(f"Viewing move #{self._viewing_index} of {len(self._history) - 1}")
