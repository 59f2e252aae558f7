"""Ace, Flower, Love & Diamond card game."""

__version__ = "0.1.0"
