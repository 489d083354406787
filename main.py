"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8     Play the current player's mark in that cell
    j N     Jump to move N (0 = game start)
    h       Show the move list
    r       Reverse the move list order
    n       New game
    q       Quit
"""

from typing import Callable, Optional

from logic.game_state import GameState
from logic.errors import GameError
from display.config import DisplayConfig


HELP_TEXT = "Commands: 0-8 play | j N jump | h history | r reverse | n new | q quit"


class ConsoleGame:
    """
    Console front end.

    Forwards typed commands to a GameState and prints the result.
    """

    def __init__(self, verbose: bool = False, output: Callable[[str], None] = print):
        """
        Initialize the console game.

        Args:
            verbose: Build a verbose engine (prints every move and jump).
            output: Where lines are written.
        """
        self.verbose = verbose
        self.output = output
        self.game_state = GameState(verbose=verbose)
        self.ascending = True

    def handle_command(self, line: str) -> bool:
        """
        Run one command.

        Returns:
            False if the user asked to quit, True otherwise.
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command = parts[0]

        if command in ("q", "quit", "exit"):
            return False

        try:
            if command.isdecimal():
                self.game_state.play_move(int(command))
                self.show_board()
            elif command in ("j", "jump"):
                if len(parts) != 2 or not parts[1].isdecimal():
                    self.output("Usage: j N")
                    return True
                self.game_state.jump_to(int(parts[1]))
                self.show_board()
            elif command in ("h", "history"):
                self.show_history()
            elif command in ("r", "reverse"):
                self.ascending = not self.ascending
                self.show_history()
            elif command in ("n", "new"):
                self.game_state = GameState(verbose=self.verbose)
                self.output("New game!")
                self.show_board()
            else:
                self.output(HELP_TEXT)
        except GameError as e:
            self.output(f"Illegal: {e}")

        return True

    def show_board(self):
        """Print the viewed board and status."""
        self.output("")
        self.output(self.game_state.current_board().pretty())
        self.output(self.status_text())

    def status_text(self) -> str:
        status = self.game_state.current_status()
        if status.winner:
            text = f"Winner: {status.winner.value}"
        elif status.is_over:
            text = "Draw"
        else:
            text = f"Next player: {self.game_state.current_player().value}"
        return f"{text} (move #{self.game_state.move_number()})"

    def show_history(self):
        """Print the move list, marking the viewed entry."""
        moves = self.game_state.move_list()
        records = iter(moves) if self.ascending else reversed(moves)
        for record in records:
            marker = ">" if record.index == self.game_state.viewing_index else " "
            if record.index == self.game_state.viewing_index:
                label = f"You are at move #{record.index}"
            else:
                label = record.description
            if record.position is not None:
                row, col = record.position
                label += f"  [{record.player.value} at ({row}, {col})]"
            self.output(f"{marker} {record.index:>2}: {label}")

    def run(self, read: Optional[Callable[[str], str]] = None):
        """Read commands until quit or end of input."""
        read = read or input

        self.output(HELP_TEXT)
        self.show_board()

        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=DisplayConfig.DEBUG_MODE,
        help="Print every move, jump and rejected move"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(verbose=args.verbose)
        ui.run()
        return

    print("\n" + "="*60)
    print("   TicTacToe - Console Mode")
    print("="*60 + "\n")

    game = ConsoleGame(verbose=args.verbose)
    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
