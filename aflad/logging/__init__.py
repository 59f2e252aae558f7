"""Game logging module."""

from .formatters import format_card, format_cards, format_hands, format_scores
from .game_logger import GameLogConfig, GameLogger, generate_log_filename

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_card",
    "format_cards",
    "format_hands",
    "format_scores",
    "generate_log_filename",
]
