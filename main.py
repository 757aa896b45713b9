"""
Console driver for TicTacToe.

This script ties together:
- Rules (board, move validation, win/draw detection)
- Display (console table, optional board image)

Run this script to play TicTacToe for two players at one keyboard!
Moves are typed as a column letter and a row number, e.g. "b2".
"""

from typing import Callable, Optional

from rules import Board, Coordinate, GameStatus, InvalidCoordinates, Symbol, TicTacToeError
from display import BoardImageRenderer, DisplayConfig, TextRenderer


QUIT_COMMAND = "Q"


def parse_move(text: str) -> Coordinate:
    """
    Turn typed input like "a1" into a Coordinate.

    Only the shape is checked here; the board decides whether the
    column and row are on the grid.

    Args:
        text: Raw input line.

    Returns:
        Coordinate(column, row).

    Raises:
        InvalidCoordinates: If there is no column letter or the row is
            not a number.
    """
    move = text.strip().upper()
    if len(move) < 2:
        raise InvalidCoordinates(move[:1], move[1:])

    column, row = move[0], move[1:].strip()
    if not row.isdecimal():
        raise InvalidCoordinates(column, row)

    return Coordinate(column, int(row))


class ConsoleGame:
    """
    Interactive two-player game.

    Game flow:
    1. Show whose move it is and the board
    2. Read a coordinate and write the current symbol there
    3. On a rejected move, show the error and ask again
    4. Swap symbols after each accepted move
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output_func: Callable[[str], None] = print,
        renderer: Optional[TextRenderer] = None
    ):
        """
        Initialize the game.

        Args:
            input_func: Reads one line of input.
            output_func: Writes one message.
            renderer: Draws the board between moves.
        """
        self.read_line = input_func
        self.output = output_func
        self.renderer = renderer or TextRenderer()

        self.board = Board()
        self.upcoming_move = Symbol.X
        self.is_running = False

    def play(self) -> GameStatus:
        """
        Play until the game ends or the player quits.

        Returns:
            The board status when the loop stopped.
        """
        self.is_running = True
        self._game_loop()

        status = self.board.status()
        if status.is_over:
            self._show_game_result(status)
        return status

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and not self.board.status().is_over:
            self.output(f"Your move, {self.upcoming_move}")
            self.output(self.renderer.render_board(self.board))

            text = self.read_line()
            if text.strip().upper() == QUIT_COMMAND:
                self.output("Game quit by user.")
                self.is_running = False
                return

            try:
                self.board.write(self.upcoming_move, parse_move(text))
            except TicTacToeError as e:
                self.output(str(e))
                continue

            self.upcoming_move = Symbol.O if self.upcoming_move is Symbol.X else Symbol.X

    def _show_game_result(self, status: GameStatus):
        """Show the final game result."""
        self.output("Game over!")

        if status.winner is not Symbol.EMPTY:
            self.output(f"Congratulations {status.winner}")
        else:
            self.output("Draw")

        self.output(self.renderer.render_board(self.board))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe for two players")
    parser.add_argument(
        "--save-image",
        nargs="?",
        const=DisplayConfig.DEFAULT_IMAGE_PATH,
        default=None,
        metavar="PATH",
        help=f"Save the final board as an image (default: {DisplayConfig.DEFAULT_IMAGE_PATH})"
    )

    args = parser.parse_args()

    game = ConsoleGame()

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        if args.save_image:
            if BoardImageRenderer().save(game.board, args.save_image):
                print(f"Saved: {args.save_image}")
            else:
                print(f"ERROR: Could not save {args.save_image}")
        print("Goodbye!")


if __name__ == "__main__":
    main()
