"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snake_engine.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Vector
from snake_engine.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Vector:
        body = game_state.body
        head_x, head_y = body[0]

        # Reversing is dropped by the engine, so never propose it
        reverse = (-game_state.direction[0], -game_state.direction[1])

        valid_moves: List[Vector] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            if move == reverse:
                continue

            new_x, new_y = head_x + move[0], head_y + move[1]

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in body[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll crash anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
