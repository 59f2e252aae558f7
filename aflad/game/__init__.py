"""Game logic."""

from .engine import GameEngine, GamePhase, SelectCard, create_game
from .resolver import (
    GameResult,
    Play,
    RoundResult,
    determine_game_winners,
    determine_round_winner,
)

__all__ = [
    "GameEngine",
    "GamePhase",
    "GameResult",
    "Play",
    "RoundResult",
    "SelectCard",
    "create_game",
    "determine_game_winners",
    "determine_round_winner",
]
