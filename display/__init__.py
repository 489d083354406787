"""
Display module for TicTacToe.
Settings and board snapshot rendering shared by the front ends.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
