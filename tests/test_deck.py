"""Tests for the deck."""

import random
from collections import Counter

import pytest

from aflad.errors import InsufficientCardsError
from aflad.models.card import Card, Suit, create_full_deck
from aflad.models.deck import Deck


@pytest.fixture
def deck():
    return Deck()


class TestDeck:
    """Tests for Deck class."""

    def test_new_deck(self, deck):
        """Test that a new deck holds the 40 cards in build order."""
        assert deck.remaining_count() == 40
        assert len(deck) == 40
        assert not deck.is_empty()
        assert list(deck.cards) == create_full_deck()

    def test_shuffle_is_permutation(self, deck):
        """Test that shuffling keeps the same cards."""
        deck.shuffle(random.Random(1))

        assert deck.remaining_count() == 40
        assert Counter(deck.cards) == Counter(create_full_deck())

    def test_shuffle_seeded(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck()
        deck2 = Deck()
        deck1.shuffle(random.Random(42))
        deck2.shuffle(random.Random(42))

        assert deck1.cards == deck2.cards
        assert list(deck1.cards) != create_full_deck()

    def test_shuffle_default_rng(self, deck):
        """Test shuffling without an explicit random source."""
        deck.shuffle()
        assert set(deck.cards) == set(create_full_deck())

    def test_deal_from_end(self, deck):
        """Test that deal takes the last cards in their deck order."""
        dealt = deck.deal(3)

        assert dealt == [
            Card(suit=Suit.DIAMOND, rank=8),
            Card(suit=Suit.DIAMOND, rank=9),
            Card(suit=Suit.DIAMOND, rank=10),
        ]
        assert deck.remaining_count() == 37

    def test_deal_default_one(self, deck):
        """Test dealing a single card."""
        assert deck.deal() == [Card(suit=Suit.DIAMOND, rank=10)]
        assert deck.remaining_count() == 39

    def test_deal_zero(self, deck):
        """Test that dealing zero cards changes nothing."""
        assert deck.deal(0) == []
        assert deck.remaining_count() == 40

    def test_deal_all(self, deck):
        """Test dealing the whole deck."""
        dealt = deck.deal(40)

        assert len(dealt) == 40
        assert deck.is_empty()
        assert deck.remaining_count() == 0

    def test_deal_conserves_cards(self, deck):
        """Test that dealt plus remaining cards always form the full set."""
        deck.shuffle(random.Random(7))
        dealt = deck.deal(5) + deck.deal(5) + deck.deal(12)

        assert deck.remaining_count() == 18
        assert Counter(dealt + list(deck.cards)) == Counter(create_full_deck())

    def test_deal_too_many(self, deck):
        """Test that an oversize deal fails and leaves the deck unchanged."""
        deck.deal(38)
        before = deck.cards

        with pytest.raises(InsufficientCardsError):
            deck.deal(3)

        assert deck.cards == before
        assert deck.remaining_count() == 2

    def test_deal_negative(self, deck):
        """Test that a negative deal is rejected."""
        with pytest.raises(ValueError):
            deck.deal(-1)
        assert deck.remaining_count() == 40

    def test_insufficient_cards_is_value_error(self):
        """Test that InsufficientCardsError can be caught as ValueError."""
        assert issubclass(InsufficientCardsError, ValueError)

    def test_build_resets(self, deck):
        """Test that build restores the full ordered deck."""
        deck.shuffle(random.Random(3))
        deck.deal(10)
        deck.build()

        assert list(deck.cards) == create_full_deck()
