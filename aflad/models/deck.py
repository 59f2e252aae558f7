"""Deck model."""

import random
from typing import Iterator

from aflad.errors import InsufficientCardsError

from .card import Card, create_full_deck


class Deck:
    """Ordered collection of cards dealt from the end."""

    def __init__(self) -> None:
        self._cards: list[Card] = []
        self.build()

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the remaining cards in current order."""
        return tuple(self._cards)

    def build(self) -> None:
        """Reset to the full 40-card deck in build order."""
        self._cards = create_full_deck()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the remaining cards.

        Args:
            rng: Random source. A fresh, system-seeded generator is used
                if not provided.
        """
        if rng is None:
            rng = random.Random()
        rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Remove and return the last ``n`` cards.

        Args:
            n: Number of cards to deal.

        Returns:
            Dealt cards, in the order they sat in the deck.

        Raises:
            InsufficientCardsError: If fewer than ``n`` cards remain. The
                deck is left unchanged.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        remaining = len(self._cards)
        if n > remaining:
            raise InsufficientCardsError(
                f"Cannot deal {n} cards, only {remaining} remaining"
            )

        split = remaining - n
        dealt = self._cards[split:]
        del self._cards[split:]
        return dealt

    def is_empty(self) -> bool:
        """Check if no cards remain."""
        return not self._cards

    def remaining_count(self) -> int:
        """Get number of cards remaining."""
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
