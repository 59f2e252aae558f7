"""Game models."""

from .card import Card, Ordering, Suit, compare, create_full_deck
from .deck import Deck
from .player import Player

__all__ = [
    "Card",
    "Deck",
    "Ordering",
    "Player",
    "Suit",
    "compare",
    "create_full_deck",
]
