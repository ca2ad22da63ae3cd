"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Game mode selection (vs computer or two players)
- Player name entry
- The board, drawn with Pillow
- Welcome message, game result, and a restart button
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

from PIL import ImageTk

from game.board import Board
from game.config import GameConfig
from game.engine import TicTacToe, GameListener
from game.players import GameMode, Player, create_players, random_marks
from view.board_renderer import BoardRenderer
from view.config import RenderConfig
from view.messages import welcome_message, result_message, thinking_message


class TicTacToeUI(GameListener):
    """
    Main UI class for TicTacToe.

    Also the engine's listener: moves and the game result are drawn from
    the engine callbacks.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.render_config = RenderConfig()
        self.renderer = BoardRenderer(self.render_config)
        self.rng = random.Random(seed)

        self.game = TicTacToe(self, config=self.config)
        self.mode: Optional[GameMode] = None

        # Keep a reference to the Tk image or it gets garbage collected
        self._photo: Optional[ImageTk.PhotoImage] = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection form
        self.mode_frame = ttk.Frame(main_frame)
        self.mode_frame.pack(pady=10)

        ttk.Label(self.mode_frame, text="Choose a game mode").pack(pady=(0, 5))
        tk.Button(
            self.mode_frame,
            text="1 Player",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self._select_mode(GameMode.ONE_PLAYER)
        ).pack(side=tk.LEFT, padx=5)
        tk.Button(
            self.mode_frame,
            text="2 Players",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=lambda: self._select_mode(GameMode.TWO_PLAYERS)
        ).pack(side=tk.LEFT, padx=5)

        # Name entry form (shown after picking a mode)
        self.name_frame = ttk.Frame(main_frame)

        self.name1_var = tk.StringVar()
        self.name2_var = tk.StringVar()

        ttk.Label(self.name_frame, text="Player 1 name").pack()
        name1_entry = ttk.Entry(self.name_frame, textvariable=self.name1_var)
        name1_entry.pack(pady=(0, 5))
        name1_entry.bind('<Return>', lambda _event: self._start_game())

        self.name2_label = ttk.Label(self.name_frame, text="Player 2 name")
        self.name2_entry = ttk.Entry(self.name_frame, textvariable=self.name2_var)
        self.name2_entry.bind('<Return>', lambda _event: self._start_game())

        self.start_btn = tk.Button(
            self.name_frame,
            text="▶ Start Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._start_game
        )
        self.start_btn.pack(side=tk.BOTTOM, pady=10)

        # Game container (shown once the game starts)
        self.game_frame = ttk.Frame(main_frame)

        self.welcome_label = ttk.Label(self.game_frame, text="", justify=tk.CENTER)
        self.welcome_label.pack(pady=(0, 10))

        size = self.render_config.IMAGE_SIZE_PX
        self.board_canvas = tk.Canvas(
            self.game_frame,
            width=size,
            height=size,
            bg=self.render_config.BACKGROUND_COLOR,
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind('<Button-1>', self._on_canvas_click)

        self.result_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.result_label.pack(pady=10)

        self.restart_btn = tk.Button(
            self.game_frame,
            text="🔄 Start Over",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart_game
        )

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(side=tk.BOTTOM, pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== FORMS ====================

    def _select_mode(self, mode: GameMode):
        """Remember the mode and show the name form."""
        self.mode = mode
        self.mode_frame.pack_forget()
        self.name_frame.pack(pady=10)

        if mode.has_computer_opponent:
            self.name2_label.pack_forget()
            self.name2_entry.pack_forget()
        else:
            self.name2_label.pack()
            self.name2_entry.pack(pady=(0, 5))

        print(f"Game mode set to: {mode}")

    def _start_game(self):
        """Seat the players from the form and start."""
        if self.mode is None:
            return

        try:
            first, second = create_players(
                self.mode,
                self.name1_var.get(),
                self.name2_var.get(),
                rng=self.rng,
                config=self.config
            )
        except ValueError as e:
            # Missing name: keep the form open
            print(f"Cannot start: {e}")
            return

        self.game.set_players(first, second)

        self.name_frame.pack_forget()
        self.game_frame.pack()

        self._begin_round()

    def _restart_game(self):
        """New round with freshly rolled marks."""
        first_mark, second_mark = random_marks(self.rng)
        self.game.first_player.mark = first_mark
        self.game.second_player.mark = second_mark

        print("Restarting game...")
        self._begin_round()

    def _begin_round(self):
        self.result_label.configure(text="")
        self.restart_btn.pack_forget()
        self.welcome_label.configure(text=welcome_message(self.game))

        if not self.game.computer_opens:
            self.game.start()
            self._redraw_board()
            return

        # The opening search takes a while: show the empty board and a
        # status line first, then start once Tk has drawn them
        self._redraw_board(Board())
        self.result_label.configure(text=thinking_message(self.game))
        self.root.update_idletasks()
        self.root.after(10, self._start_with_computer)

    def _start_with_computer(self):
        """Start a round where the computer plays X (it moves inside start())."""
        self.game.start()
        self.result_label.configure(text="")
        self._redraw_board()

    # ==================== BOARD ====================

    def _redraw_board(self, board: Optional[Board] = None):
        """Draw the engine's board (or the given one) on the canvas."""
        if board is None:
            image = self.renderer.render(self.game.board, self.game.winning_line())
        else:
            image = self.renderer.render(board)
        self._photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)

    def _on_canvas_click(self, event):
        """Turn a click into a move, rejecting taken cells."""
        if not self.game.is_in_progress:
            return

        cell = self.renderer.cell_at(event.x, event.y)
        if cell is None:
            return

        x, y = cell
        if self.game.board[x, y] != 0:
            return

        self.game.apply_move(x, y)

    # ==================== ENGINE EVENTS ====================

    def on_move_applied(self, player: Player, x: int, y: int):
        print(f"{player.name} placed {player.mark} at ({x}, {y})")
        self._redraw_board()

    def on_game_over(self, winner: Optional[Player]):
        message = result_message(winner)
        print(message)
        self._redraw_board()
        self.result_label.configure(text=message)
        self.restart_btn.pack(pady=5)

    # ==================== APP ====================

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
        "--seed",
        type=int,
        default=None,
        help="Seed for the random mark assignment"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.verbose

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(config=config, seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
