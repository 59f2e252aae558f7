"""Game errors.

Every error raised by the rules engine is a precondition failure. None of them
are retried internally; the caller decides whether to re-prompt or abort.
"""


class GameError(Exception):
    """Base class for rules engine errors."""


class InvalidIndexError(GameError, IndexError):
    """Card index is outside the player's hand."""


class InsufficientCardsError(GameError, ValueError):
    """More cards requested than remain in the deck."""


class InvalidPlayerCountError(GameError, ValueError):
    """Fewer players than the game needs."""


class GameOverError(GameError, RuntimeError):
    """A round was requested after the game ended."""


class GameNotOverError(GameError, RuntimeError):
    """Final results were requested before the game ended."""
