"""
Player implementations for GridSnake.

This module contains the input collaborators that decide which direction
to submit to the engine before each tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_move
from .variant_registry import get_player_class, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_move',
    'get_player_class',
    'AVAILABLE_VARIANTS',
]
