"""
Bounded FIFO buffer of pending direction changes.
"""

import logging
from collections import deque
from typing import Deque, Optional

from .constants import MAX_QUEUE_LEN, Vector

logger = logging.getLogger(__name__)


class DirectionQueue:
    """
    Holds direction changes submitted between ticks.

    Inputs are debounced on the way in (queue full, same as the last queued
    entry) and on the way out (exact reversal of the current heading). Both
    cases drop the input silently.
    """

    def __init__(self, maxlen: int = MAX_QUEUE_LEN):
        self.maxlen = maxlen
        self._pending: Deque[Vector] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self):
        return iter(list(self._pending))

    @property
    def last(self) -> Optional[Vector]:
        return self._pending[-1] if self._pending else None

    def submit(self, vx: int, vy: int) -> bool:
        """Queue a direction change. Returns False if the input was dropped."""
        if len(self._pending) >= self.maxlen:
            logger.debug(f"Direction {(vx, vy)} dropped: queue full")
            return False

        if self.last == (vx, vy):
            logger.debug(f"Direction {(vx, vy)} dropped: duplicate of last queued")
            return False

        self._pending.append((vx, vy))
        return True

    def apply_next(self, current: Vector) -> Vector:
        """
        Consume exactly one queued entry and return the resulting heading.

        A reversal of ``current`` is consumed but ignored.
        """
        if not self._pending:
            return current

        vx, vy = self._pending.popleft()
        if vx == -current[0] and vy == -current[1]:
            logger.debug(f"Direction {(vx, vy)} dropped: reverses heading {current}")
            return current

        return (vx, vy)
