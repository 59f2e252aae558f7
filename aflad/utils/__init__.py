"""Terminal display, prompts and logging setup."""

from .logger import GameDisplay, setup_logging
from .prompt import TerminalCardSelector, ask_player_count, ask_player_names

__all__ = [
    "GameDisplay",
    "TerminalCardSelector",
    "ask_player_count",
    "ask_player_names",
    "setup_logging",
]
