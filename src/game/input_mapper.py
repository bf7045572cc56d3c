"""
Input mapping for the minesweeper window
Translates raw pointer positions into board actions without touching the board
"""

from enum import Enum
from typing import NamedTuple, Optional


TILE_SIZE = 40
HEADER_HEIGHT = 40

HINT_BUTTON_WIDTH = 100
HINT_BUTTON_HEIGHT = 20
HINT_BUTTON_TOP = 10


class ActionKind(Enum):
    """Enumeration for the actions a click can resolve to"""
    NONE = "none"
    REVEAL = "reveal"
    TOGGLE_FLAG = "toggle_flag"
    HINT = "hint"


class BoardAction(NamedTuple):
    kind: ActionKind
    col: Optional[int] = None
    row: Optional[int] = None


NO_ACTION = BoardAction(ActionKind.NONE)


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    def contains(self, px: int, py: int) -> bool:
        """Edge-inclusive hit test"""
        return (self.x <= px <= self.x + self.width
                and self.y <= py <= self.y + self.height)


class Layout(NamedTuple):
    """Screen metrics shared by the renderer and the input mapper"""
    columns: int
    rows: int
    tile_size: int
    header_height: int
    hint_button: Rect

    @classmethod
    def for_board(cls, columns: int, rows: int, tile_size: int = TILE_SIZE,
                  header_height: int = HEADER_HEIGHT) -> 'Layout':
        screen_width = columns * tile_size
        hint_button = Rect(screen_width // 2 - HINT_BUTTON_WIDTH // 2, HINT_BUTTON_TOP,
                           HINT_BUTTON_WIDTH, HINT_BUTTON_HEIGHT)
        return cls(columns, rows, tile_size, header_height, hint_button)

    @property
    def screen_width(self) -> int:
        return self.columns * self.tile_size

    @property
    def screen_height(self) -> int:
        return self.rows * self.tile_size + self.header_height

    def tile_rect(self, col: int, row: int) -> Rect:
        return Rect(col * self.tile_size, self.header_height + row * self.tile_size,
                    self.tile_size, self.tile_size)


def map_pointer(x: int, y: int, secondary: bool, layout: Layout) -> BoardAction:
    """
    Resolve a click to a board action.

    Args:
        x: Pointer x in window pixels
        y: Pointer y in window pixels
        secondary: True for a right click
        layout: Current screen metrics

    Returns:
        HINT for a primary click on the hint button, REVEAL or TOGGLE_FLAG
        for a click on a tile, NO_ACTION for anything else
    """
    if not secondary and layout.hint_button.contains(x, y):
        return BoardAction(ActionKind.HINT)

    col = x // layout.tile_size
    row = (y - layout.header_height) // layout.tile_size
    if not (0 <= col < layout.columns and 0 <= row < layout.rows):
        return NO_ACTION

    kind = ActionKind.TOGGLE_FLAG if secondary else ActionKind.REVEAL
    return BoardAction(kind, col, row)
