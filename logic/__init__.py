"""
Logic module for TicTacToe.
Handles the board, rules, and move history with time travel.
"""

__version__ = "1.0.0"

from .board import Board, Player, BOARD_SIZE, CELL_COUNT
from .errors import (
    GameError,
    InvalidMove,
    InvalidCellIndex,
    CellOccupied,
    GameAlreadyConcluded,
    InvalidHistoryIndex,
)
from .game_state import GameState, MoveList, MoveRecord
from .move_validator import MoveValidator, ValidationResult, next_player
from .win_checker import WinChecker, GameStatus, Outcome
