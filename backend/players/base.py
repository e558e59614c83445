"""
Base player interface for the game driver.
"""

from snake_engine.constants import Vector
from snake_engine.game_state import GameState


class Player:
    """
    Base class/interface for input logic.

    A player looks at the latest snapshot and returns the direction it wants
    to submit before the next tick.
    """

    def get_move(self, game_state: GameState) -> Vector:
        """
        Return a direction given the current game state.

        Args:
            game_state: Snapshot of the engine after the last tick

        Returns:
            One of the unit vectors UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
