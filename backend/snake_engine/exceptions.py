"""
Exceptions raised by the snake engine.

Normal play never raises: dropped inputs, skipped food spawns and crashes
are all reported through return values. These cover caller mistakes only.
"""


class SnakeEngineError(Exception):
    """Base class for engine errors."""


class InvalidBoardError(SnakeEngineError, ValueError):
    """The requested board cannot hold the initial layout."""


class GameOverError(SnakeEngineError, RuntimeError):
    """advance() was called after the game reached a terminal outcome."""
