"""
Game constants for GridSnake.
"""

from enum import Enum
from typing import Dict, Tuple

Vector = Tuple[int, int]
Coordinate = Tuple[int, int]

# Movement directions (screen coordinates, y grows downwards)
UP: Vector = (0, -1)
DOWN: Vector = (0, 1)
LEFT: Vector = (-1, 0)
RIGHT: Vector = (1, 0)

DIRECTIONS: Dict[str, Vector] = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}
VALID_MOVES = set(DIRECTIONS.values())

# Engine settings
INITIAL_DIRECTION: Vector = RIGHT
INITIAL_LENGTH = 3
MAX_QUEUE_LEN = 2
MIN_WIDTH = 5


class Outcome(str, Enum):
    """Result of a single tick."""

    CONTINUE = "continue"
    CRASH = "crash"
    COMPLETE = "complete"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.CONTINUE
