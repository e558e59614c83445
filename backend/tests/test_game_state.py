"""
Tests for snake_engine.game_state - snapshots and the board printout.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_engine import GameState, Outcome, SnakeEngine, RIGHT


def make_state(**overrides):
    params = dict(
        tick=3,
        body=[(2, 1), (1, 1), (0, 1)],
        food=[(3, 2)],
        direction=RIGHT,
        width=4,
        height=3,
    )
    params.update(overrides)
    return GameState(**params)


class TestGameState:
    """Tests for the GameState class."""

    def test_initialization_defaults(self):
        state = make_state()
        assert state.head == (2, 1)
        assert state.outcome is Outcome.CONTINUE
        assert state.death_reason is None

    def test_print_board_layout(self):
        """Rows are printed from y=0 down, with x labels at the bottom."""
        board = make_state().print_board()
        assert board.split("\n") == [
            " 0 . . . .",
            " 1 T T H .",
            " 2 . . . F",
            "   0 1 2 3",
        ]

    def test_print_board_skips_off_board_segments(self):
        state = SnakeEngine(5, 5).snapshot()
        board = state.print_board()

        row = board.split("\n")[2]
        assert row == " 2 T H . F ."

    def test_to_dict_is_json_friendly(self):
        data = make_state(outcome=Outcome.CRASH, death_reason="wall").to_dict()
        assert data == {
            "tick": 3,
            "body": [[2, 1], [1, 1], [0, 1]],
            "food": [[3, 2]],
            "direction": [1, 0],
            "width": 4,
            "height": 3,
            "outcome": "crash",
            "death_reason": "wall",
        }

    def test_repr(self):
        repr_str = repr(make_state())
        assert "tick=3" in repr_str
        assert "length=3" in repr_str
        assert "outcome=continue" in repr_str
