"""
Tests for snake_engine.snake - the per-tick state transition.

These tests pin down movement, collision, growth and end-of-game
behavior of SnakeEngine.advance().
"""

import os
import random
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_engine import (
    SnakeEngine,
    GameOverError,
    Outcome,
    UP, LEFT, RIGHT,
)
from players import RandomPlayer


def make_engine(width=15, height=15, body=None, food=None, direction=RIGHT, seed=0):
    """Build an engine and optionally overwrite its body, food and heading."""
    engine = SnakeEngine(width, height, rng=random.Random(seed))
    if body is not None:
        engine.body = deque(body)
    if food is not None:
        engine.food = set(food)
    engine.direction = direction
    return engine


class TestInitialState:
    """Tests for a freshly constructed engine."""

    def test_default_board(self):
        engine = SnakeEngine(15, 15)
        assert list(engine.body) == [(5, 7), (4, 7), (3, 7)]
        assert engine.food == {(9, 7)}
        assert engine.direction == RIGHT
        assert engine.head == (5, 7)
        assert engine.tail == (3, 7)
        assert engine.size.area == 225
        assert engine.outcome is Outcome.CONTINUE
        assert engine.tick == 0
        assert len(engine.queue) == 0
        assert engine.grow_flag is False
        assert engine.will_step_over is False

    def test_body_is_deque(self):
        assert isinstance(SnakeEngine(15, 15).body, deque)


class TestMovement:
    """Tests for plain slithering and direction changes."""

    def test_advance_moves_one_cell(self):
        engine = SnakeEngine(15, 15)
        assert engine.advance() is Outcome.CONTINUE
        assert list(engine.body) == [(6, 7), (5, 7), (4, 7)]
        assert engine.tick == 1

    def test_submitted_direction_applies_on_next_tick(self):
        engine = SnakeEngine(15, 15)
        engine.submit_direction(*UP)
        engine.advance()
        assert engine.direction == UP
        assert engine.head == (5, 6)

    def test_two_inputs_between_ticks_apply_in_order(self):
        engine = SnakeEngine(15, 15)
        engine.submit_direction(*UP)
        engine.submit_direction(*LEFT)

        engine.advance()
        assert engine.head == (5, 6)
        engine.advance()
        assert engine.head == (4, 6)
        assert engine.direction == LEFT

    def test_reverse_input_is_consumed_without_turning(self):
        """Submitting the reverse of the heading keeps the heading and empties the queue."""
        engine = SnakeEngine(15, 15)
        engine.submit_direction(*LEFT)

        assert engine.advance() is Outcome.CONTINUE
        assert engine.direction == RIGHT
        assert len(engine.queue) == 0
        assert engine.head == (6, 7)

    def test_duplicate_submission_is_debounced(self):
        engine = SnakeEngine(15, 15)
        assert engine.submit_direction(1, 0) is True
        assert engine.submit_direction(1, 0) is False
        assert len(engine.queue) == 1

    def test_length_unchanged_without_food_or_growth(self):
        engine = SnakeEngine(15, 15)
        engine.advance()
        engine.advance()
        assert len(engine.body) == 3


class TestCollisions:
    """Tests for wall and self collisions."""

    def test_wall_collision_crashes(self):
        engine = SnakeEngine(5, 5)
        engine.submit_direction(*UP)

        assert engine.advance() is Outcome.CONTINUE
        assert engine.advance() is Outcome.CONTINUE
        body_before = list(engine.body)

        assert engine.advance() is Outcome.CRASH
        assert engine.death_reason == "wall"
        assert list(engine.body) == body_before

    def test_running_right_into_the_wall(self):
        engine = SnakeEngine(15, 15, rng=random.Random(3))
        outcome = Outcome.CONTINUE
        while outcome is Outcome.CONTINUE:
            outcome = engine.advance()

        assert outcome is Outcome.CRASH
        assert engine.death_reason == "wall"
        assert engine.head == (14, 7)
        assert engine.tick == 10

    def test_moving_into_second_segment_crashes(self):
        """A length-3 snake moving into its own second segment crashes."""
        engine = make_engine(body=[(5, 7), (4, 7), (3, 7)], direction=LEFT)

        assert engine.advance() is Outcome.CRASH
        assert engine.death_reason == "self"
        assert list(engine.body) == [(5, 7), (4, 7), (3, 7)]

    def test_moving_into_vacating_tail_is_allowed(self):
        """The cell the tail is leaving does not count as a collision."""
        engine = make_engine(
            body=[(2, 2), (2, 3), (3, 3), (3, 2)],
            food=[(0, 0)],
            direction=RIGHT,
        )

        assert engine.advance() is Outcome.CONTINUE
        assert list(engine.body) == [(3, 2), (2, 2), (2, 3), (3, 3)]

    def test_hit_self_checks_every_segment_but_the_tail(self):
        body = [(5, 7), (4, 7), (4, 6), (5, 6), (6, 6)]
        engine = make_engine(body=body)

        assert all(engine.hit_self(cell) for cell in body[:-1])
        assert engine.hit_self((6, 6)) is False
        assert engine.hit_self((6, 7)) is False
        assert list(engine.body) == body

    def test_crash_does_not_eat_or_grow(self):
        engine = make_engine(body=[(5, 7), (4, 7), (3, 7)], food=[(4, 7)], direction=LEFT)
        engine.grow()

        assert engine.advance() is Outcome.CRASH
        assert len(engine.body) == 3
        assert engine.food == {(4, 7)}

    def test_advance_after_crash_raises(self):
        engine = make_engine(body=[(5, 7), (4, 7), (3, 7)], direction=LEFT)
        engine.advance()

        with pytest.raises(GameOverError):
            engine.advance()


class TestEating:
    """Tests for eating and food respawn."""

    def test_eating_grows_and_respawns_food(self):
        engine = SnakeEngine(15, 15, rng=random.Random(7))
        for _ in range(4):
            engine.advance()

        assert engine.head == (9, 7)
        assert len(engine.body) == 4
        assert len(engine.food) == 1
        assert (9, 7) not in engine.food
        assert not engine.food & set(engine.body)

    def test_near_full_board_spawns_in_last_empty_cell(self):
        engine = make_engine(
            width=5, height=1,
            body=[(2, 0), (1, 0), (0, 0)],
            food=[(3, 0)],
            direction=RIGHT,
        )

        assert engine.advance() is Outcome.CONTINUE
        assert engine.food == {(4, 0)}
        assert len(engine.body) == 4

    def test_filling_the_board_completes_on_the_same_tick(self):
        engine = make_engine(
            width=5, height=1,
            body=[(3, 0), (2, 0), (1, 0), (0, 0)],
            food=[(4, 0)],
            direction=RIGHT,
        )

        assert engine.advance() is Outcome.COMPLETE
        assert engine.is_map_full()
        assert engine.food == set()

        with pytest.raises(GameOverError):
            engine.advance()

    def test_seeded_games_place_food_identically(self):
        first = SnakeEngine(15, 15, rng=random.Random(42))
        second = SnakeEngine(15, 15, rng=random.Random(42))
        for _ in range(4):
            first.advance()
            second.advance()
        assert first.food == second.food


class TestDeferredEffects:
    """Tests for grow() and step_over()."""

    def test_grow_applies_on_next_tick_only(self):
        engine = SnakeEngine(15, 15)
        engine.grow()
        assert len(engine.body) == 3

        engine.advance()
        assert len(engine.body) == 4
        assert engine.grow_flag is False

        engine.advance()
        assert len(engine.body) == 4

    def test_grow_and_eat_together_add_one_segment(self):
        engine = make_engine(food=[(6, 7)])
        engine.grow()
        engine.advance()
        assert len(engine.body) == 4

    def test_step_over_moves_two_cells_once(self):
        engine = SnakeEngine(15, 15)
        engine.step_over()

        engine.advance()
        assert engine.head == (7, 7)
        assert engine.will_step_over is False
        assert len(engine.body) == 3

        engine.advance()
        assert engine.head == (8, 7)

    def test_step_over_passes_an_obstruction(self):
        # (5,6) is a body segment; leaping up from (5,7) lands on (5,5)
        engine = make_engine(
            body=[(5, 7), (4, 7), (4, 6), (5, 6), (6, 6), (6, 7), (6, 8)],
            food=[(0, 0)],
            direction=UP,
        )
        engine.step_over()

        assert engine.advance() is Outcome.CONTINUE
        assert engine.head == (5, 5)

    def test_step_over_off_the_board_crashes(self):
        engine = make_engine(body=[(13, 7), (12, 7), (11, 7)], food=[(0, 0)])
        engine.step_over()

        assert engine.advance() is Outcome.CRASH
        assert engine.death_reason == "wall"
        assert engine.will_step_over is False


class TestSnapshot:
    """Tests for SnakeEngine.snapshot()."""

    def test_snapshot_reflects_state(self):
        engine = SnakeEngine(15, 15)
        engine.advance()
        state = engine.snapshot()

        assert state.tick == 1
        assert state.body == [(6, 7), (5, 7), (4, 7)]
        assert state.food == [(9, 7)]
        assert state.direction == RIGHT
        assert (state.width, state.height) == (15, 15)
        assert state.outcome is Outcome.CONTINUE

    def test_snapshot_is_a_copy(self):
        engine = SnakeEngine(15, 15)
        state = engine.snapshot()
        engine.advance()

        assert state.body == [(5, 7), (4, 7), (3, 7)]
        assert state.tick == 0


class TestInvariants:
    """Properties that hold across many random ticks."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_length_never_shrinks_and_cells_stay_unique(self, seed):
        engine = SnakeEngine(8, 8, rng=random.Random(seed))
        player = RandomPlayer(rng=random.Random(seed))

        for _ in range(300):
            before = len(engine.body)
            engine.submit_direction(*player.get_move(engine.snapshot()))
            outcome = engine.advance()
            if outcome is not Outcome.CONTINUE:
                break

            assert len(engine.body) - before in (0, 1)
            assert len(set(engine.body)) == len(engine.body)
            assert not engine.food & set(engine.body)
            assert all(engine.size.contains(cell) for cell in engine.body)
