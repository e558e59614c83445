"""
Registry for player variants.

Maps the names accepted on the command line (e.g. 'random', 'scripted') to
player classes. To add a variant, create a module with the player class,
import it here and add an entry to PLAYER_VARIANTS.
"""

from typing import Dict, Optional, Type

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "scripted": ScriptedPlayer,
}

DEFAULT_VARIANT = "random"

# Canonical list of available variant keys (for CLI choices)
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of AVAILABLE_VARIANTS. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not registered.
    """
    if not variant_key:
        variant_key = DEFAULT_VARIANT

    key = variant_key.strip().lower()
    if key not in PLAYER_VARIANTS:
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available: {AVAILABLE_VARIANTS}"
        )
    return PLAYER_VARIANTS[key]
