"""Player model."""

from typing import Iterable

from pydantic import BaseModel, Field

from aflad.errors import InvalidIndexError

from .card import Card


class Player(BaseModel):
    """Player state."""

    player_id: int = 0  # Creation order, 0-based
    name: str = Field(min_length=1)
    hand: list[Card] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)

    @property
    def hand_size(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def receive_cards(self, cards: Iterable[Card]) -> None:
        """Append cards to the hand, keeping their order."""
        self.hand.extend(cards)

    def play_card(self, index: int) -> Card:
        """Remove and return the card at a 0-based hand position.

        Raises:
            InvalidIndexError: If ``index`` is not a valid hand position.
                The hand is left unchanged.
        """
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(self.hand)
        ):
            raise InvalidIndexError(
                f"{self.name} has no card at index {index!r} "
                f"(hand size {len(self.hand)})"
            )
        return self.hand.pop(index)

    def has_cards(self) -> bool:
        """Check if the hand is non-empty."""
        return bool(self.hand)

    def increment_score(self) -> None:
        """Award one point."""
        self.score += 1

    def __str__(self) -> str:
        return f"{self.name} (Score: {self.score})"

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name={self.name!r}, "
            f"score={self.score}, hand_size={len(self.hand)})"
        )
