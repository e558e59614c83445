"""
Board geometry and the deterministic starting layout.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Coordinate, INITIAL_LENGTH, MIN_WIDTH
from .exceptions import InvalidBoardError


@dataclass(frozen=True)
class BoardSize:
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, cell: Coordinate) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height


def _check_dimension(name: str, value) -> None:
    # bool is an int subclass, but True is not a board size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidBoardError(f"Board {name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidBoardError(f"Board {name} must be positive, got {value}.")


def initial_layout(width: int, height: int) -> Tuple[List[Coordinate], Coordinate]:
    """
    Compute the starting body and food cell for a board.

    The head and the food sit on the same row, mirrored around the vertical
    center line. On boards 5 to 7 cells wide the last body cell starts at
    x = -1; it is vacated on the first tick since the snake starts heading
    right and the food is at least two cells ahead of the head.

    Returns:
        (body, food) with the head at body[0]

    Raises:
        InvalidBoardError: if a dimension is not a positive integer, or the
            board is narrower than MIN_WIDTH
    """
    _check_dimension("width", width)
    _check_dimension("height", height)
    if width < MIN_WIDTH:
        # Narrower layouts keep off-board segments after the first tick
        raise InvalidBoardError(
            f"A {width}x{height} board is too narrow for the starting layout "
            f"(minimum width {MIN_WIDTH})."
        )

    center_y = height // 2 - 1 if height % 2 == 0 else height // 2
    center_x = int(width * 0.5)
    d = 1 if width <= 5 else 2

    head_x = center_x - d
    food_x = center_x + d if width % 2 == 1 else center_x + d - 1

    body = [(head_x - i, center_y) for i in range(INITIAL_LENGTH)]
    food = (food_x, center_y)

    return body, food
