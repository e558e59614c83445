"""
Scripted player - replays a fixed sequence of moves.
"""

from typing import List, Sequence, Union

from snake_engine.constants import DIRECTIONS, Vector
from snake_engine.game_state import GameState
from .base import Player

Move = Union[str, Vector]


def parse_move(move: Move) -> Vector:
    """Convert 'UP'/'down'/... or a (vx, vy) pair into a direction vector."""
    if isinstance(move, str):
        key = move.strip().upper()
        if key not in DIRECTIONS:
            raise ValueError(f"Unknown move '{move}'. Expected one of {sorted(DIRECTIONS)}.")
        return DIRECTIONS[key]

    vx, vy = move
    return (int(vx), int(vy))


class ScriptedPlayer(Player):
    """
    Returns the scripted moves in order, then keeps the current heading.

    Attributes:
        moves: parsed direction vectors
        position: index of the next move to play
    """

    def __init__(self, moves: Sequence[Move]):
        self.moves: List[Vector] = [parse_move(m) for m in moves]
        self.position = 0

    def get_move(self, game_state: GameState) -> Vector:
        if self.position >= len(self.moves):
            return game_state.direction

        move = self.moves[self.position]
        self.position += 1
        return move
