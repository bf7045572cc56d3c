"""
Game package initialization
"""

from .board import GameBoard, GameState, Tile, InvalidConfigurationError
from .input_mapper import ActionKind, BoardAction, Layout, Rect, map_pointer
from .snapshot import BoardSnapshot

__all__ = [
    'GameBoard',
    'GameState',
    'Tile',
    'InvalidConfigurationError',
    'ActionKind',
    'BoardAction',
    'Layout',
    'Rect',
    'map_pointer',
    'BoardSnapshot'
]
