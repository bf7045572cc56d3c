"""
Minesweeper Game - Core Game Logic
Implements bomb placement, flood-reveal, flagging, hints and win/loss detection
"""

from enum import Enum
import random
from typing import Iterable, List, Optional, Tuple

from .input_mapper import ActionKind, BoardAction


Position = Tuple[int, int]


class InvalidConfigurationError(ValueError):
    """Raised when a board cannot be built from the requested dimensions"""


class GameState(Enum):
    """Enumeration for different game states"""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Tile:
    """Represents a single tile on the minesweeper board"""

    def __init__(self):
        self.is_bomb = False
        self.is_revealed = False
        self.is_flagged = False
        self.adjacent_bombs = 0

    def place_bomb(self):
        """Place a bomb in this tile"""
        self.is_bomb = True

    def reveal(self) -> bool:
        """Reveal this tile, returns False if it was revealed or flagged"""
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """Toggle flag on a hidden tile, returns False for revealed tiles"""
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def __repr__(self):
        return (f"Tile(bomb={self.is_bomb}, revealed={self.is_revealed}, "
                f"flagged={self.is_flagged}, adjacent={self.adjacent_bombs})")


class GameBoard:
    """Manages the minesweeper board and game rules

    Coordinates passed to the public operations are ``(x, y)``, i.e.
    ``(col, row)``. Tiles are stored as ``tiles[row][col]``.
    """

    STARTING_HINTS = 3

    def __init__(self, width: int, height: int, bomb_count: int,
                 rng: Optional[random.Random] = None):
        self._validate(width, height, bomb_count)
        self.width = width
        self.height = height
        self.bomb_count = bomb_count
        self.rng = rng or random.Random()

        # Per-game fields are only ever set in _start
        self.reset()

    @classmethod
    def from_layout(cls, width: int, height: int,
                    bomb_positions: Iterable[Position]) -> 'GameBoard':
        """Build a board with bombs at the given (x, y) positions"""
        positions = list(bomb_positions)
        if len(set(positions)) != len(positions):
            raise InvalidConfigurationError("bomb positions must be distinct")

        board = cls(width, height, len(positions))
        for x, y in positions:
            if not board.in_bounds(x, y):
                raise InvalidConfigurationError(
                    f"bomb position ({x}, {y}) is outside a {width}x{height} grid")

        board._start(positions)
        return board

    @staticmethod
    def _validate(width, height, bomb_count):
        for name, value in (('width', width), ('height', height)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidConfigurationError(
                    f"{name} must be a positive integer, got {value!r}")

        if not isinstance(bomb_count, int) or isinstance(bomb_count, bool):
            raise InvalidConfigurationError(
                f"bomb count must be an integer, got {bomb_count!r}")

        cells = width * height
        if not 0 <= bomb_count < cells:
            raise InvalidConfigurationError(
                f"bomb count must be between 0 and {cells - 1} "
                f"for a {width}x{height} grid, got {bomb_count}")

    def reset(self):
        """Start a fresh game with new random bomb placement"""
        cells = [(x, y) for y in range(self.height) for x in range(self.width)]
        self._start(self.rng.sample(cells, self.bomb_count))

    def _start(self, bomb_positions: Iterable[Position]):
        self.tiles: List[List[Tile]] = [[Tile() for _ in range(self.width)] for _ in range(self.height)]
        for x, y in bomb_positions:
            self.tiles[y][x].place_bomb()
        self._calculate_adjacent_bombs()

        self.game_state = GameState.PLAYING
        self.flags_remaining = self.bomb_count
        self.hints_remaining = self.STARTING_HINTS
        self.exploded_at: Optional[Position] = None

    def _calculate_adjacent_bombs(self):
        """Calculate the number of adjacent bombs for each tile"""
        for y in range(self.height):
            for x in range(self.width):
                tile = self.tiles[y][x]
                if tile.is_bomb:
                    continue
                tile.adjacent_bombs = sum(
                    1 for nx, ny in self.neighbors(x, y) if self.tiles[ny][nx].is_bomb)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> List[Position]:
        """Return the in-bounds positions of the up to 8 tiles around (x, y)"""
        result = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    result.append((nx, ny))
        return result

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """Get tile at (x, y), or None when out of bounds"""
        if self.in_bounds(x, y):
            return self.tiles[y][x]
        return None

    @property
    def is_lost(self) -> bool:
        return self.game_state == GameState.LOST

    @property
    def is_won(self) -> bool:
        return self.game_state == GameState.WON

    @property
    def is_over(self) -> bool:
        return self.game_state != GameState.PLAYING

    def revealed_count(self) -> int:
        return sum(tile.is_revealed for row in self.tiles for tile in row)

    def flagged_count(self) -> int:
        return sum(tile.is_flagged for row in self.tiles for tile in row)

    def reveal(self, x: int, y: int):
        """
        Reveal a tile, flooding outwards from tiles with no adjacent bombs.
        Hitting a bomb loses the game. The win condition is left to the caller.
        """
        if self.is_over:
            return

        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            tile = self.get_tile(cx, cy)
            if tile is None or not tile.reveal():
                continue

            if tile.is_bomb:
                self.game_state = GameState.LOST
                self.exploded_at = (cx, cy)
                return

            if tile.adjacent_bombs == 0:
                pending.extend(
                    (nx, ny) for nx, ny in self.neighbors(cx, cy)
                    if not self.tiles[ny][nx].is_revealed)

    def check_win(self) -> bool:
        """Check if every non-bomb tile has been revealed"""
        for row in self.tiles:
            for tile in row:
                if not tile.is_bomb and not tile.is_revealed:
                    return False
        return True

    def _update_win_state(self):
        if self.game_state == GameState.PLAYING and self.check_win():
            self.game_state = GameState.WON

    def toggle_flag(self, x: int, y: int):
        """Toggle flag on a tile, the flag counter is allowed to go negative"""
        if self.is_over:
            return

        tile = self.get_tile(x, y)
        if tile is None or not tile.toggle_flag():
            return

        self.flags_remaining += -1 if tile.is_flagged else 1

    def provide_hint(self) -> bool:
        """
        Reveal the first safe hidden tile in row-major order.
        Returns False when no hint was given (none left, nothing safe, or game over).
        """
        if self.is_over or self.hints_remaining <= 0:
            return False

        for y in range(self.height):
            for x in range(self.width):
                tile = self.tiles[y][x]
                if not tile.is_revealed and not tile.is_bomb and not tile.is_flagged:
                    self.reveal(x, y)
                    self.hints_remaining -= 1
                    return True
        return False

    def open_tile(self, x: int, y: int) -> GameState:
        """Reveal a tile and settle the win condition"""
        self.reveal(x, y)
        self._update_win_state()
        return self.game_state

    def use_hint(self) -> bool:
        """Provide a hint and settle the win condition"""
        given = self.provide_hint()
        self._update_win_state()
        return given

    def apply(self, action: BoardAction) -> GameState:
        """Apply a mapped input action and return the resulting game state"""
        if self.is_over:
            return self.game_state

        if action.kind == ActionKind.REVEAL:
            self.open_tile(action.col, action.row)
        elif action.kind == ActionKind.TOGGLE_FLAG:
            self.toggle_flag(action.col, action.row)
        elif action.kind == ActionKind.HINT:
            self.use_hint()

        return self.game_state
