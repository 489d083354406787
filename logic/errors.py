"""
Errors raised by the TicTacToe engine.
All of them are recoverable: the engine state is unchanged when one is raised.
"""


class GameError(Exception):
    """Base class for rejected game intents."""


class InvalidMove(GameError):
    """A move that cannot be played on the current board."""


class InvalidCellIndex(InvalidMove):
    """Cell index outside 0-8."""

    def __init__(self, cell_index):
        self.cell_index = cell_index
        super().__init__(f"Invalid cell {cell_index!r}. Must be 0-8.")


class CellOccupied(InvalidMove):
    """Target cell already holds a mark."""

    def __init__(self, cell_index: int, occupant):
        self.cell_index = cell_index
        self.occupant = occupant
        super().__init__(f"Cell {cell_index} is already occupied by {occupant.value}")


class GameAlreadyConcluded(InvalidMove):
    """Move attempted after the game was won or drawn."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Game is already over! ({status})")


class InvalidHistoryIndex(GameError):
    """Time-travel target outside the recorded history."""

    def __init__(self, index, history_length: int):
        self.index = index
        self.history_length = history_length
        super().__init__(
            f"Invalid move number {index!r}. Must be 0-{history_length - 1}."
        )
