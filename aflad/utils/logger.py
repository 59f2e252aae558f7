"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aflad.game.resolver import GameResult, RoundResult
    from aflad.models.player import Player


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


RULES = [
    "Each suit has cards ranked 1-10",
    "Normal play: Higher rank wins",
    "Special rule: Love beats Diamond regardless of rank",
    "Ties go to the player who played first",
    "Each player gets {hand_size} cards",
    "Highest score when cards run out wins",
]


class GameDisplay:
    """Display game state to stdout."""

    def print_banner(self, hand_size: int = 5) -> None:
        """Print the welcome message and rules."""
        print("Welcome to Ace, Flower, Love & Diamond!")
        print("Game Rules:")
        for rule in RULES:
            print(f"- {rule.format(hand_size=hand_size)}")

    def print_round_header(self, round_number: int) -> None:
        """Print round start message."""
        print(f"\n=== Round {round_number} ===")

    def print_hand(self, player: "Player") -> None:
        """Print a player's hand as a 1-based numbered list."""
        print(f"\n{player.name}'s hand:")
        for position, card in enumerate(player.hand, 1):
            print(f"{position}. {card}")

    def print_round_result(self, result: "RoundResult", players: list["Player"]) -> None:
        """Print every play of a round, then the winner and scores."""
        print()
        for play in result.plays:
            print(f"{play.player.name} plays: {play.card}")
        print(f"\n{result.winner.name} wins the round with {result.winning_card}!")
        self.print_scores(players)

    def print_scores(self, players: list["Player"]) -> None:
        """Print current scores for all players."""
        print("\nCurrent Scores:")
        for player in players:
            print(f"{player.name}: {player.score}")

    def print_game_over(self, result: "GameResult") -> None:
        """Print final results."""
        print("\n=== Game Over ===")
        if result.is_tie:
            names = " and ".join(p.name for p in result.winners)
            print(f"It's a tie between {names} with {result.score} points each!")
        else:
            winner = result.winners[0]
            print(f"{winner.name} wins the game with {result.score} points!")
