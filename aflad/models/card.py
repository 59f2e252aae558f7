"""Card model and comparison rule."""

from enum import IntEnum

from pydantic import BaseModel, Field

MIN_RANK = 1
MAX_RANK = 10


class Suit(IntEnum):
    """Card suit (declaration order is deck build order)."""

    ACE = 0
    FLOWER = 1
    LOVE = 2
    DIAMOND = 3


SUIT_NAMES = {
    Suit.ACE: "Ace",
    Suit.FLOWER: "Flower",
    Suit.LOVE: "Love",
    Suit.DIAMOND: "Diamond",
}

RANKS = range(MIN_RANK, MAX_RANK + 1)

DECK_SIZE = len(Suit) * len(RANKS)


class Ordering(IntEnum):
    """Result of comparing two cards."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Card(BaseModel, frozen=True):
    """Single card representation.

    Cards deliberately have no ``<``/``>`` operators: the comparison rule is
    not transitive, so use :func:`compare` instead of sorting.
    """

    suit: Suit
    rank: int = Field(ge=MIN_RANK, le=MAX_RANK)

    @property
    def name(self) -> str:
        """Display name, e.g. "Love 3"."""
        return f"{SUIT_NAMES[self.suit]} {self.rank}"

    def compare(self, other: "Card") -> Ordering:
        """Compare this card against another."""
        return compare(self, other)

    def beats(self, other: "Card") -> bool:
        """Check if this card is strictly greater than another."""
        return compare(self, other) == Ordering.GREATER

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self.name})"


def compare(a: Card, b: Card) -> Ordering:
    """Compare two cards.

    Love beats Diamond regardless of rank (and Diamond loses to Love).
    Every other pairing, including Love or Diamond against Ace or Flower,
    is decided by rank alone.

    Args:
        a: Left-hand card.
        b: Right-hand card.

    Returns:
        Ordering of ``a`` relative to ``b``.
    """
    if a.suit == Suit.LOVE and b.suit == Suit.DIAMOND:
        return Ordering.GREATER
    if a.suit == Suit.DIAMOND and b.suit == Suit.LOVE:
        return Ordering.LESS

    if a.rank > b.rank:
        return Ordering.GREATER
    if a.rank < b.rank:
        return Ordering.LESS
    return Ordering.EQUAL


def create_full_deck() -> list[Card]:
    """Create the 40 cards in build order (suit by suit, ranks ascending)."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in RANKS]
