"""
Food placement after a food cell has been eaten.
"""

import logging
import random
from typing import Iterable, List, Optional, Set

from .board import BoardSize
from .constants import Coordinate

logger = logging.getLogger(__name__)


def empty_cells(size: BoardSize, body: Iterable[Coordinate], food: Set[Coordinate]) -> List[Coordinate]:
    """
    Return every on-board cell not covered by the body or by food.

    Cells are listed column by column (all y for x=0, then x=1, ...).
    """
    occupied = set(body) | food
    return [
        (x, y)
        for x in range(size.width)
        for y in range(size.height)
        if (x, y) not in occupied
    ]


class FoodSpawner:
    """
    Replaces eaten food with one new cell picked uniformly at random.

    Attributes:
        size: board dimensions
        rng: random source, injectable so a game can be replayed from a seed
    """

    def __init__(self, size: BoardSize, rng: Optional[random.Random] = None):
        self.size = size
        self.rng = rng if rng is not None else random.Random()

    def respawn(self, eaten: Coordinate, body: Iterable[Coordinate], food: Set[Coordinate]) -> Optional[Coordinate]:
        """
        Remove ``eaten`` from ``food`` and add exactly one new food cell.

        ``food`` is mutated in place. Nothing is added when the body already
        covers the board or no empty cell is left.

        Returns:
            The new food cell, or None if nothing was spawned
        """
        food.discard(eaten)

        body = list(body)
        if len(body) == self.size.area:
            return None

        candidates = empty_cells(self.size, body, food)
        if not candidates:
            logger.debug("No empty cell left, skipping food spawn")
            return None

        cell = self.rng.choice(candidates)
        food.add(cell)
        logger.debug(f"Spawned food at {cell} ({len(candidates)} empty cells)")
        return cell
