"""
Snake engine - owns the game state and advances it one tick at a time.
"""

import logging
import random
from collections import deque
from itertools import islice
from typing import Optional, Set

from .board import BoardSize, initial_layout
from .constants import Coordinate, INITIAL_DIRECTION, Outcome, Vector
from .direction_queue import DirectionQueue
from .exceptions import GameOverError
from .food import FoodSpawner
from .game_state import GameState

logger = logging.getLogger(__name__)


class SnakeEngine:
    """
    Single-player snake on a fixed rectangular grid.

    The driver calls advance() once per tick. Input handling only calls
    submit_direction() between ticks; grow() and step_over() queue one-shot
    effects that the next advance() consumes.

    Attributes:
        size: board dimensions
        body: deque of (x, y) from head at index 0 to the tail at the end
        food: set of (x, y) food cells
        direction: current heading (vx, vy)
        grow_flag: the next tick keeps the tail
        will_step_over: the next tick moves two cells
        tick: number of completed advance() calls
        outcome: result of the last tick
        death_reason: 'wall' or 'self' once crashed
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        body, food = initial_layout(width, height)

        self.size = BoardSize(width, height)
        self.body = deque(body)
        self.food: Set[Coordinate] = {food}
        self.direction: Vector = INITIAL_DIRECTION
        self.queue = DirectionQueue()
        self.spawner = FoodSpawner(self.size, rng)

        self.grow_flag = False
        self.will_step_over = False

        self.tick = 0
        self.outcome = Outcome.CONTINUE
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    def is_map_full(self) -> bool:
        return len(self.body) == self.size.area

    # -- input -------------------------------------------------------------

    def submit_direction(self, vx: int, vy: int) -> bool:
        """Queue a direction change; returns False when it was debounced."""
        return self.queue.submit(vx, vy)

    def apply_next_direction(self) -> None:
        self.direction = self.queue.apply_next(self.direction)

    # -- deferred effects --------------------------------------------------

    def grow(self) -> None:
        self.grow_flag = True

    def step_over(self) -> None:
        self.will_step_over = True

    # -- step resolution ---------------------------------------------------

    def compute_next_head(self) -> Coordinate:
        vx, vy = self.direction
        if self.will_step_over:
            self.will_step_over = False
            vx, vy = vx * 2, vy * 2

        hx, hy = self.head
        return (hx + vx, hy + vy)

    def hit_wall(self, next_head: Coordinate) -> bool:
        return not self.size.contains(next_head)

    def hit_self(self, next_head: Coordinate) -> bool:
        # The tail is about to move out of its cell, so it does not count.
        return next_head in islice(self.body, len(self.body) - 1)

    def will_eat(self, next_head: Coordinate) -> bool:
        return next_head in self.food

    def advance(self) -> Outcome:
        """
        Execute one tick:
          1) Apply the next queued direction, if any
          2) Compute the next head (two cells when stepping over)
          3) Stop with CRASH on a wall or self collision, leaving the body untouched
          4) Move, keeping the tail when growing or eating
          5) Respawn food if it was eaten
          6) Report COMPLETE once the body covers the board

        Raises:
            GameOverError: if a previous tick already ended the game
        """
        if self.outcome.is_terminal:
            raise GameOverError(f"Game already ended with outcome '{self.outcome.value}'.")

        if len(self.queue):
            self.apply_next_direction()

        next_head = self.compute_next_head()
        self.tick += 1

        if self.hit_wall(next_head):
            return self._crash(next_head, "wall")
        if self.hit_self(next_head):
            return self._crash(next_head, "self")

        self.body.appendleft(next_head)

        eating = self.will_eat(next_head)
        if not (self.grow_flag or eating):
            self.body.pop()
        self.grow_flag = False

        if eating:
            self.spawner.respawn(next_head, self.body, self.food)

        if self.is_map_full():
            logger.debug(f"Board filled at tick {self.tick} (length {len(self.body)})")
            self.outcome = Outcome.COMPLETE

        return self.outcome

    def _crash(self, next_head: Coordinate, reason: str) -> Outcome:
        logger.debug(f"Crashed into {reason} at {next_head} on tick {self.tick}")
        self.outcome = Outcome.CRASH
        self.death_reason = reason
        return self.outcome

    # -- read access -------------------------------------------------------

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            body=list(self.body),
            food=sorted(self.food),
            direction=self.direction,
            width=self.size.width,
            height=self.size.height,
            outcome=self.outcome,
            death_reason=self.death_reason
        )
