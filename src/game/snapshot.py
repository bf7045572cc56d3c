"""
Read-only board snapshots for the presentation layer
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .board import GameBoard, GameState


# Codes used in the visible grid, revealed tiles hold their adjacent bomb count
HIDDEN = -3
FLAGGED = -2
BOMB = -1


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """What the player can see of a board at one moment"""
    visible: np.ndarray
    bombs: np.ndarray
    flags_remaining: int
    hints_remaining: int
    state: GameState
    exploded_at: Optional[Tuple[int, int]] = None

    @classmethod
    def from_board(cls, board: GameBoard) -> 'BoardSnapshot':
        """
        Copy the visible state of a board.

        The bomb mask is only filled in once the game is over, so a renderer
        can uncover the remaining bombs without learning them mid-game.
        """
        visible = np.full((board.height, board.width), HIDDEN, dtype=np.int8)
        bombs = np.zeros((board.height, board.width), dtype=bool)

        for y, row in enumerate(board.tiles):
            for x, tile in enumerate(row):
                if tile.is_revealed:
                    visible[y, x] = BOMB if tile.is_bomb else tile.adjacent_bombs
                elif tile.is_flagged:
                    visible[y, x] = FLAGGED
                if board.is_over:
                    bombs[y, x] = tile.is_bomb

        visible.setflags(write=False)
        bombs.setflags(write=False)
        return cls(visible, bombs, board.flags_remaining, board.hints_remaining,
                   board.game_state, board.exploded_at)

    @property
    def width(self) -> int:
        return self.visible.shape[1]

    @property
    def height(self) -> int:
        return self.visible.shape[0]

    @property
    def revealed_count(self) -> int:
        return int(np.count_nonzero(self.visible >= BOMB))

    def to_text(self) -> str:
        """Render the grid as text: # hidden, F flag, * bomb, . empty, digits"""
        lines = []
        for y in range(self.height):
            symbols = []
            for x in range(self.width):
                code = int(self.visible[y, x])
                if code == FLAGGED:
                    symbols.append('F')
                elif code == BOMB:
                    symbols.append('*')
                elif code == HIDDEN:
                    symbols.append('*' if self.bombs[y, x] else '#')
                elif code == 0:
                    symbols.append('.')
                else:
                    symbols.append(str(code))
            lines.append(' '.join(symbols))
        return '\n'.join(lines)
