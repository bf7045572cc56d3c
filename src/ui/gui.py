"""
Minesweeper GUI - Canvas Interface
Draws the board from snapshots and forwards raw clicks to the input mapper
"""

import tkinter as tk
from tkinter import messagebox, Menu, font
from typing import Optional

from game import ActionKind, BoardSnapshot, GameBoard, GameState, Layout, Rect, map_pointer
from game.snapshot import BOMB, FLAGGED, HIDDEN


TILE_COLOR = '#a9a9a9'
REVEALED_COLOR = '#c8c8c8'
EXPLODED_COLOR = '#ff6060'
FLAG_COLOR = '#ff0000'
BOMB_COLOR = '#ff0000'
TEXT_COLOR = '#000000'
GRID_COLOR = '#000000'
HINT_BUTTON_COLOR = '#6464fa'
BACKGROUND_COLOR = '#ffffff'

FONT_FAMILY = 'Arial'
FONT_SIZE = 14

# Window closes on its own this long after a win or loss
GAME_OVER_CLOSE_MS = 10000


class ResourceInitError(RuntimeError):
    """Raised when the display or fonts cannot be initialised"""


class MinesweeperGUI:
    """Main GUI class for the minesweeper game"""

    # Colors for different numbers
    NUMBER_COLORS = {
        1: 'blue',
        2: 'green',
        3: 'red',
        4: 'purple',
        5: 'maroon',
        6: 'turquoise',
        7: 'black',
        8: 'gray'
    }

    def __init__(self, board: GameBoard):
        try:
            self.root = tk.Tk()
        except tk.TclError as e:
            raise ResourceInitError(f"Failed to open a display: {e}") from e

        self.root.title('Minesweeper')
        self.root.resizable(False, False)

        try:
            self.font = font.Font(root=self.root, family=FONT_FAMILY, size=FONT_SIZE)
        except tk.TclError as e:
            self.root.destroy()
            raise ResourceInitError(f"Failed to load font: {e}") from e

        self.board = board
        self.layout = Layout.for_board(board.width, board.height)
        self.close_timer_id: Optional[str] = None
        self.canvas: Optional[tk.Canvas] = None

        self._setup_gui()
        self._update_display()

    def _setup_gui(self):
        """Setup the canvas, bindings and menu"""
        self.canvas = tk.Canvas(
            self.root,
            width=self.layout.screen_width,
            height=self.layout.screen_height,
            bg=BACKGROUND_COLOR,
            highlightthickness=0
        )
        self.canvas.pack()

        self.canvas.bind('<Button-1>', lambda event: self._on_click(event.x, event.y, False))
        self.canvas.bind('<Button-3>', lambda event: self._on_click(event.x, event.y, True))
        self.root.bind('<KeyPress-r>', lambda event: self._restart_game())

        self._setup_menu()

    def _setup_menu(self):
        """Setup the menu bar"""
        self.menubar = menubar = Menu(self.root)
        self.root.config(menu=menubar)

        game_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Game", menu=game_menu)
        game_menu.add_command(label="New Game", command=self._restart_game)
        game_menu.add_separator()
        game_menu.add_command(label="Exit", command=self.close)

        help_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="How to Play", command=self._show_help)

    def _on_click(self, x: int, y: int, secondary: bool):
        """Handle a raw click on the canvas"""
        if self.board.is_over:
            return

        action = map_pointer(x, y, secondary, self.layout)
        hints_exhausted = self.board.hints_remaining == 0
        state = self.board.apply(action)

        if action.kind == ActionKind.HINT and hints_exhausted:
            print("No hints left!")

        self._update_display()

        if state != GameState.PLAYING:
            self._end_game()

    def _restart_game(self):
        """Start a new game with the same dimensions"""
        if self.close_timer_id:
            self.root.after_cancel(self.close_timer_id)
            self.close_timer_id = None

        self.board.reset()
        print(f"New game: {self.board.width}x{self.board.height} with {self.board.bomb_count} bombs")
        self._update_display()

    def _end_game(self):
        """Handle game end"""
        snapshot = BoardSnapshot.from_board(self.board)
        print("You Win!" if snapshot.state == GameState.WON else "You Lose!")
        print(snapshot.to_text())

        self.close_timer_id = self.root.after(GAME_OVER_CLOSE_MS, self.close)

    def _update_display(self):
        """Redraw everything from a fresh snapshot"""
        self.render(BoardSnapshot.from_board(self.board))

    def render(self, snapshot: BoardSnapshot):
        """Draw one frame from a board snapshot"""
        self.canvas.delete('all')
        self._draw_header(snapshot)
        self._draw_grid(snapshot)

    def _draw_text(self, text: str, x: int, y: int, color: str, anchor: str = 'nw'):
        self.canvas.create_text(x, y, text=text, fill=color, font=self.font, anchor=anchor)

    def _draw_rect(self, rect: Rect, fill: str, outline: str = ''):
        self.canvas.create_rectangle(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height,
                                     fill=fill, outline=outline)

    def _draw_header(self, snapshot: BoardSnapshot):
        self._draw_text(f"Flags left: {snapshot.flags_remaining}", 10, 10, TEXT_COLOR)

        button = self.layout.hint_button
        self._draw_rect(button, HINT_BUTTON_COLOR)
        self._draw_text(f"Hint ({snapshot.hints_remaining})",
                        button.x + button.width // 2, button.y + button.height // 2,
                        TEXT_COLOR, anchor='center')

        result_x = self.layout.screen_width - 10
        if snapshot.state == GameState.LOST:
            self._draw_text("You Lose!", result_x, 10, BOMB_COLOR, anchor='ne')
        elif snapshot.state == GameState.WON:
            self._draw_text("You Win!", result_x, 10, FLAG_COLOR, anchor='ne')

    def _draw_grid(self, snapshot: BoardSnapshot):
        for row in range(snapshot.height):
            for col in range(snapshot.width):
                self._draw_tile(snapshot, col, row)

    def _draw_tile(self, snapshot: BoardSnapshot, col: int, row: int):
        rect = self.layout.tile_rect(col, row)
        code = int(snapshot.visible[row, col])
        center_x = rect.x + rect.width // 2
        center_y = rect.y + rect.height // 2

        if code == BOMB and snapshot.exploded_at == (col, row):
            fill = EXPLODED_COLOR
        elif code >= BOMB:
            fill = REVEALED_COLOR
        else:
            fill = TILE_COLOR
        self._draw_rect(rect, fill, outline=GRID_COLOR)

        if code == BOMB or (code == HIDDEN and snapshot.bombs[row, col]):
            self._draw_text("B", center_x, center_y, BOMB_COLOR, anchor='center')
        elif code == FLAGGED:
            self._draw_text("F", center_x, center_y, FLAG_COLOR, anchor='center')
        elif code > 0:
            self._draw_text(str(code), center_x, center_y,
                            self.NUMBER_COLORS.get(code, TEXT_COLOR), anchor='center')

    def _show_help(self):
        """Show help dialog"""
        help_text = """How to Play Minesweeper:

Objective: Reveal every tile that is not a bomb

Controls:
- Left click: Reveal a tile
- Right click: Flag/unflag a tile
- Hint button: Reveal a safe tile (3 per game)
- R: Start a new game

Numbers show how many bombs touch that tile.
Tiles with no neighbouring bombs open up their surroundings."""

        messagebox.showinfo("How to Play", help_text)

    def close(self):
        """Close the window and leave the main loop"""
        self.root.destroy()

    def run(self):
        """Start the GUI main loop"""
        self.root.mainloop()
