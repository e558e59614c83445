"""
GameState entity - a snapshot of the engine after a completed tick.
"""

from typing import Any, Dict, List, Optional

from .constants import Coordinate, Outcome, Vector


class GameState:
    """
    A read-only copy of the engine state at a specific tick.

    Attributes:
        tick: number of completed advance() calls
        body: list of (x, y) from head at index 0 to tail
        food: sorted list of (x, y) food cells
        direction: current heading as (vx, vy)
        width, height: board dimensions
        outcome: result of the last tick
        death_reason: 'wall' or 'self' once crashed, else None
    """

    def __init__(
        self,
        tick: int,
        body: List[Coordinate],
        food: List[Coordinate],
        direction: Vector,
        width: int,
        height: int,
        outcome: Outcome = Outcome.CONTINUE,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.body = body
        self.food = food
        self.direction = direction
        self.width = width
        self.height = height
        self.outcome = outcome
        self.death_reason = death_reason

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body/tail
        Row 0 is printed first (y grows downwards) with x-axis labels at the bottom.
        Cells off the board are not drawn.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.body):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form used for replay logs (tuples become lists)."""
        return {
            "tick": self.tick,
            "body": [list(cell) for cell in self.body],
            "food": [list(cell) for cell in self.food],
            "direction": list(self.direction),
            "width": self.width,
            "height": self.height,
            "outcome": self.outcome.value,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, head={self.head}, length={len(self.body)}, "
            f"food={self.food}, outcome={self.outcome.value}>"
        )
