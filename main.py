"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the game is played in
the console: moves are typed as "x y" (column, row, both 0-2).

Run this script to play TicTacToe against the computer or a friend!
"""

import random
from typing import Callable, Optional, Tuple

from game.board import Board
from game.config import GameConfig
from game.engine import TicTacToe, GameListener
from game.players import GameMode, Mark, Player, create_players, random_marks
from view.messages import welcome_message, result_message


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a typed move.

    Accepts "x y" or "x,y" with both numbers in 0-2.

    Returns:
        (x, y), or None if the text is not a move on the board.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None

    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        return None

    if not Board.in_bounds(x, y):
        return None
    return x, y


def format_board(board: Board) -> str:
    """Draw the board as text."""
    lines = ["\n    0   1   2", "  ┌───┬───┬───┐"]

    for y in range(Board.SIZE):
        row_str = "│"
        for x in range(Board.SIZE):
            value = board[x, y]
            symbol = str(Mark.from_int(value)) if value else " "
            row_str += f" {symbol} │"
        lines.append(f"{y} {row_str}")

        if y < Board.SIZE - 1:
            lines.append("  ├───┼───┼───┤")

    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


class ConsoleGame(GameListener):
    """
    Console driver for the engine.

    Game flow:
    1. Players are seated and get random marks
    2. Humans type their moves, the computer answers by itself
    3. The result is printed, and a rematch re-rolls the marks
    """

    def __init__(
        self,
        first_player: Player,
        second_player: Player,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        input_fn: Callable[[str], str] = input
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.input_fn = input_fn
        self.game = TicTacToe(self, first_player, second_player, config=self.config)

    # ==================== ENGINE EVENTS ====================

    def on_move_applied(self, player: Player, x: int, y: int):
        print(f"\n>>> {player.name} placed {player.mark} at ({x}, {y})")
        print(format_board(self.game.board))

    def on_game_over(self, winner: Optional[Player]):
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)
        print(f"\n{result_message(winner)}\n")

    # ==================== INPUT ====================

    def read_move(self) -> Tuple[int, int]:
        """
        Ask the current player for a move until a free cell is given.

        Raises:
            EOFError: If the input runs out.
        """
        player = self.game.current_player
        board = self.game.board

        while True:
            text = self.input_fn(f"{player.name} ({player.mark}), your move (x y): ")
            move = parse_move(text)
            if move is None:
                print("Invalid move. Type column and row, both 0-2, e.g. '1 2'.")
                continue

            x, y = move
            if board[x, y] != 0:
                print(f"Cell ({x}, {y}) is already occupied!")
                continue
            return move

    # ==================== GAME LOOP ====================

    def play_round(self):
        """Play one game to the end."""
        print(f"\n{welcome_message(self.game)}")
        self.game.start()

        if self.game.move_count == 0:
            print(format_board(self.game.board))

        while self.game.is_in_progress:
            x, y = self.read_move()
            self.game.apply_move(x, y)

    def rematch(self):
        """Re-roll the marks for the next game."""
        first_mark, second_mark = random_marks(self.rng)
        self.game.first_player.mark = first_mark
        self.game.second_player.mark = second_mark

    def run(self):
        """Play games until the players stop."""
        while True:
            self.play_round()
            answer = self.input_fn("Play again? [y/N]: ")
            if answer.strip().lower() not in ("y", "yes"):
                break
            self.rematch()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.ONE_PLAYER.value,
        help="Play against the computer or another human (console mode)"
    )
    parser.add_argument(
        "--name",
        default="Player 1",
        help="Name of the first player (console mode)"
    )
    parser.add_argument(
        "--name2",
        default="Player 2",
        help="Name of the second player in two-player mode (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random mark assignment"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics and ignored moves"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.verbose

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(config=config, seed=args.seed)
        ui.run()
        return

    # Console mode (--no-ui)
    rng = random.Random(args.seed)
    mode = GameMode.from_name(args.mode)
    first, second = create_players(mode, args.name, args.name2, rng=rng, config=config)

    print("\n" + "="*60)
    print("   TicTacToe")
    print(f"   Mode: {mode}")
    print("="*60)

    console = ConsoleGame(first, second, config=config, rng=rng)

    try:
        console.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
