"""
Board renderer for TicTacToe.
Draws a board snapshot as an image for previews in the move list.
"""

from typing import Optional, Sequence

import cv2
import numpy as np
from PIL import Image

from logic.board import Board, Player, BOARD_SIZE, index_to_position
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a Board into a BGR image (numpy array).

    X marks are drawn as two crossed lines, O marks as circles.
    Cells of a winning line are filled with the highlight color.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses default if None.
        """
        self.config = config or DisplayConfig()

    def render(
        self,
        board: Board,
        winning_line: Optional[Sequence[int]] = None,
        size: Optional[int] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: The board to draw.
            winning_line: Cell indices to highlight.
            size: Image size in pixels (square). Defaults to BOARD_IMAGE_SIZE.

        Returns:
            BGR image of shape (size, size, 3).
        """
        size = size or self.config.BOARD_IMAGE_SIZE
        cell_size = size // BOARD_SIZE

        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        # Highlight the winning cells first so grid and marks stay on top
        for index in winning_line or ():
            row, col = index_to_position(index)
            top_left = (col * cell_size, row * cell_size)
            bottom_right = ((col + 1) * cell_size - 1, (row + 1) * cell_size - 1)
            cv2.rectangle(image, top_left, bottom_right, self.config.WIN_HIGHLIGHT_COLOR, -1)

        self._draw_grid(image, size, cell_size)

        for index, mark in enumerate(board):
            if mark is not None:
                self._draw_mark(image, index, mark, cell_size)

        return image

    def _draw_grid(self, image: np.ndarray, size: int, cell_size: int):
        color = self.config.GRID_COLOR
        thickness = self.config.GRID_THICKNESS
        for i in range(1, BOARD_SIZE):
            x = i * cell_size
            cv2.line(image, (x, 0), (x, size), color, thickness)
            cv2.line(image, (0, x), (size, x), color, thickness)

        # Border
        cv2.rectangle(image, (0, 0), (size - 1, size - 1), color, thickness)

    def _draw_mark(self, image: np.ndarray, index: int, mark: Player, cell_size: int):
        row, col = index_to_position(index)
        cx = col * cell_size + cell_size // 2
        cy = row * cell_size + cell_size // 2

        margin = int(cell_size * self.config.MARK_MARGIN)
        marker_size = cell_size // 2 - margin
        thickness = self.config.MARK_THICKNESS

        if mark == Player.X:
            color = self.config.X_COLOR
            cv2.line(image,
                     (cx - marker_size, cy - marker_size),
                     (cx + marker_size, cy + marker_size),
                     color, thickness)
            cv2.line(image,
                     (cx + marker_size, cy - marker_size),
                     (cx - marker_size, cy + marker_size),
                     color, thickness)
        else:
            cv2.circle(image, (cx, cy), marker_size, self.config.O_COLOR, thickness)

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def to_pil(
        self,
        board: Board,
        winning_line: Optional[Sequence[int]] = None,
        size: Optional[int] = None
    ) -> Image.Image:
        """Render the board as a PIL image (RGB), ready for ImageTk."""
        return Image.fromarray(self.to_rgb(self.render(board, winning_line, size)))
