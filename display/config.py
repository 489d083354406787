"""
Display configuration for TicTacToe.
All the settings for board images and the Tkinter window.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game!
    """

    # ==================== BOARD IMAGE SETTINGS ====================
    # Output size for rendered board snapshots (pixels, square)
    BOARD_IMAGE_SIZE = 300

    # Colors are BGR (OpenCV order)
    BACKGROUND_COLOR = (255, 255, 255)   # White
    GRID_COLOR = (0, 0, 0)               # Black
    X_COLOR = (255, 0, 0)                # Blue
    O_COLOR = (0, 0, 255)                # Red
    WIN_HIGHLIGHT_COLOR = (144, 238, 144)  # Light green

    GRID_THICKNESS = 3
    MARK_THICKNESS = 8

    # Gap between a mark and its cell border, as a fraction of the cell
    MARK_MARGIN = 0.2

    # Small preview next to the move list
    PREVIEW_SIZE = 150

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_GEOMETRY = "760x520"

    BG = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_WIN_BG = '#065f46'
    X_FG = '#60a5fa'
    O_FG = '#f87171'
    TITLE_FG = '#00d4ff'
    STATUS_FG = '#ffd700'

    FONT = 'Segoe UI'
    CELL_FONT = (FONT, 24, 'bold')

    # ==================== DEBUG SETTINGS ====================
    # Print every move, jump and rejection to the console
    DEBUG_MODE = False
