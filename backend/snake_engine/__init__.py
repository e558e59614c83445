"""
Snake engine for GridSnake.

This package owns the authoritative game state and its per-tick transition.
It is independent of rendering, input handling and the game loop that
drives it.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, DIRECTIONS, VALID_MOVES, MAX_QUEUE_LEN, Outcome
)
from .exceptions import SnakeEngineError, InvalidBoardError, GameOverError
from .board import BoardSize, initial_layout
from .direction_queue import DirectionQueue
from .food import FoodSpawner, empty_cells
from .game_state import GameState
from .snake import SnakeEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS', 'VALID_MOVES', 'MAX_QUEUE_LEN',
    'Outcome',
    'SnakeEngineError', 'InvalidBoardError', 'GameOverError',
    'BoardSize', 'initial_layout',
    'DirectionQueue',
    'FoodSpawner', 'empty_cells',
    'GameState',
    'SnakeEngine',
]
