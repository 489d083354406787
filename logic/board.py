"""
Board model for TicTacToe.
An immutable 3x3 grid of marks, indexed 0-8 in row-major order.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass


# TicTacToe is a 3x3 grid
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


def index_to_position(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to a (row, col) tuple."""
    return divmod(index, BOARD_SIZE)


def position_to_index(row: int, col: int) -> int:
    """Convert a (row, col) position to a cell index (0-8)."""
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class Board:
    """
    One immutable board state.

    Each cell is None (empty) or the Player whose mark it holds.
    A move never changes a Board, it builds a new one with `with_mark`.
    """

    cells: Tuple[Optional[Player], ...]

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"A board has exactly {CELL_COUNT} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Player):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """The initial board, before any move."""
        return cls((None,) * CELL_COUNT)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9-character string such as "XO X  O  ".

        'X' and 'O' are marks; ' ', '.' and '-' are empty cells.
        Newlines are ignored, so a 3-line layout works too.
        """
        chars = [c for c in text if c != "\n"]
        cells = []
        for char in chars:
            if char in (" ", ".", "-"):
                cells.append(None)
            else:
                cells.append(Player(char.upper()))
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Optional[Player]:
        return self.cells[index]

    def __iter__(self) -> Iterator[Optional[Player]]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def cell(self, row: int, col: int) -> Optional[Player]:
        """Get the mark at (row, col)."""
        return self.cells[position_to_index(row, col)]

    def rows(self) -> List[Tuple[Optional[Player], ...]]:
        """The board as a list of 3 rows."""
        return [self.cells[i:i + BOARD_SIZE] for i in range(0, CELL_COUNT, BOARD_SIZE)]

    def is_empty(self, index: int) -> bool:
        return self.cells[index] is None

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def mark_count(self) -> int:
        """How many cells hold a mark."""
        return sum(1 for cell in self.cells if cell is not None)

    def is_full(self) -> bool:
        return self.mark_count() == CELL_COUNT

    def with_mark(self, index: int, player: Player) -> "Board":
        """Return a copy of this board with `player`'s mark at `index`."""
        cells = list(self.cells)
        cells[index] = player
        return Board(tuple(cells))

    def diff(self, other: "Board") -> List[int]:
        """Cell indices where this board and `other` differ."""
        return [i for i in range(CELL_COUNT) if self.cells[i] != other.cells[i]]

    def to_string(self) -> str:
        """Compact 9-character form, '.' for empty cells."""
        return "".join(cell.value if cell else "." for cell in self.cells)

    def pretty(self) -> str:
        """Multi-line grid for console output."""
        lines = []
        for row_index, row in enumerate(self.rows()):
            marks = [cell.value if cell else " " for cell in row]
            lines.append(f"{row_index} " + " | ".join(marks))
            if row_index < BOARD_SIZE - 1:
                lines.append("  " + "--+---+--")
        return "\n".join(["  0   1   2"] + lines)

    def __str__(self) -> str:
        return self.to_string()
