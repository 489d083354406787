"""
TicTacToe UI
A graphical interface for TicTacToe with time travel using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and current move number
- Move list with "Go to move" buttons
- Preview of the snapshot under the mouse in the move list
"""

import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

from logic.board import Board, Player, BOARD_SIZE, position_to_index
from logic.errors import GameError
from logic.game_state import GameState
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Every click is forwarded to the GameState; the whole view is then
    redrawn from the engine's read accessors.
    """

    def __init__(self, config: Optional[DisplayConfig] = None, verbose: bool = False):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.verbose = verbose
        self.game_state = GameState(verbose=verbose)
        self.renderer = BoardRenderer(self.config)
        self.ascending = True

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.config

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.BG)
        self.root.geometry(config.WINDOW_GEOMETRY)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=config.BG)
        style.configure('TLabel', background=config.BG, foreground='white', font=(config.FONT, 11))
        style.configure('Title.TLabel', font=(config.FONT, 16, 'bold'), foreground=config.TITLE_FG)
        style.configure('Status.TLabel', font=(config.FONT, 12), foreground=config.STATUS_FG)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                index = position_to_index(row, col)
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=config.CELL_FONT,
                    width=4,
                    height=2,
                    bg=config.CELL_BG,
                    fg='white',
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.move_label = ttk.Label(left_frame, text="")
        self.move_label.pack()

        self.message_label = ttk.Label(left_frame, text="")
        self.message_label.pack(pady=5)

        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game",
            font=(config.FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=(config.FONT, 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="History", style='Title.TLabel').pack(pady=(0, 5))

        self.sort_btn = tk.Button(
            right_frame,
            text="Sort: ascending",
            font=(config.FONT, 10),
            command=self._toggle_sort
        )
        self.sort_btn.pack(pady=5)

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.X)

        self.preview_canvas = tk.Canvas(
            right_frame,
            width=config.PREVIEW_SIZE,
            height=config.PREVIEW_SIZE,
            bg=config.BG,
            highlightthickness=0
        )
        self.preview_canvas.pack(side=tk.BOTTOM, pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Forward a square click to the engine."""
        try:
            self.game_state.play_move(index)
            self.message_label.configure(text="")
        except GameError as e:
            # Board stays as it was
            self.message_label.configure(text=str(e))
        self._refresh()

    def _on_jump(self, index: int):
        """Forward a move-list click to the engine."""
        try:
            self.game_state.jump_to(index)
            self.message_label.configure(text="")
        except GameError as e:
            self.message_label.configure(text=str(e))
        self._refresh()

    def _toggle_sort(self):
        self.ascending = not self.ascending
        self.sort_btn.configure(text=f"Sort: {'ascending' if self.ascending else 'descending'}")
        self._update_move_list()

    def _refresh(self):
        """Redraw everything from the engine state."""
        self._update_board_display()
        self._update_game_info()
        self._update_move_list()
        self._show_preview(self.game_state.current_board(), self.game_state.winning_line())

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.game_state.current_board()
        winning_line = self.game_state.winning_line() or ()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            bg = self.config.CELL_WIN_BG if index in winning_line else self.config.CELL_BG
            if mark is None:
                cell.configure(text="", bg=bg)
            else:
                fg = self.config.X_FG if mark == Player.X else self.config.O_FG
                cell.configure(text=mark.value, bg=bg, fg=fg)

    def _update_game_info(self):
        """Update game status labels."""
        status = self.game_state.current_status()
        if status.winner:
            self.status_label.configure(text=f"Winner: {status.winner.value}")
        elif status.is_over:
            self.status_label.configure(text="Draw")
        else:
            self.status_label.configure(text=f"Next player: {self.game_state.current_player().value}")

        self.move_label.configure(text=f"You are at move #{self.game_state.move_number()}")

    def _update_move_list(self):
        """Rebuild the "Go to move" buttons. One button per history index."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        moves = self.game_state.move_list()
        records = iter(moves) if self.ascending else reversed(moves)

        for record in records:
            text = record.description
            if record.position is not None:
                row, col = record.position
                text += f" ({row}, {col})"
            is_current = record.index == self.game_state.viewing_index
            btn = tk.Button(
                self.moves_frame,
                text=text,
                font=(self.config.FONT, 10, 'bold' if is_current else 'normal'),
                width=24,
                state='disabled' if is_current else 'normal',
                command=lambda i=record.index: self._on_jump(i)
            )
            btn.bind("<Enter>", lambda _e, b=record.board: self._show_preview(
                b, self.game_state.win_checker.get_winning_line(b)))
            btn.bind("<Leave>", lambda _e: self._show_preview(
                self.game_state.current_board(), self.game_state.winning_line()))
            btn.pack(pady=1)

    def _show_preview(self, board: Board, winning_line=None):
        """Draw a snapshot in the preview canvas."""
        image = self.renderer.to_pil(board, winning_line, size=self.config.PREVIEW_SIZE)
        photo = ImageTk.PhotoImage(image)
        self.preview_canvas.delete("all")
        self.preview_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.preview_canvas.image = photo  # Keep reference

    def _reset_game(self):
        """Start a new game."""
        print("Resetting game...")
        self.game_state = GameState(verbose=self.verbose)
        self.message_label.configure(text="")
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=DisplayConfig.DEBUG_MODE,
        help="Print every move, jump and rejected move"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(verbose=args.verbose)
    ui.run()


if __name__ == "__main__":
    main()
