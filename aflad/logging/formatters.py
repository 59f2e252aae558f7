"""Formatters for game log output."""

from typing import Iterable

from aflad.models.card import Card, Suit
from aflad.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.ACE: "A",
    Suit.FLOWER: "F",
    Suit.LOVE: "L",
    Suit.DIAMOND: "D",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "L3" for Love 3, "D10" for Diamond 10).
    """
    return f"{SUIT_CODES[card.suit]}{card.rank}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "A1,L7,F10").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict keyed by player_id (as string)."""
    return {str(p.player_id): format_cards(p.hand) for p in players}


def format_scores(players: list[Player]) -> dict[str, int]:
    """Map player_id (as string) to current score."""
    return {str(p.player_id): p.score for p in players}
