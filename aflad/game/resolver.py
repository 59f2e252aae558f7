"""Round and game winner resolution."""

from dataclasses import dataclass

from aflad.models.card import Card, Ordering, compare
from aflad.models.player import Player


@dataclass(frozen=True)
class Play:
    """A single card played by a single player."""

    player: Player
    card: Card


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round."""

    round_number: int
    plays: tuple[Play, ...]  # In play order
    winning_play: Play

    @property
    def winner(self) -> Player:
        """Player who won the round."""
        return self.winning_play.player

    @property
    def winning_card(self) -> Card:
        """Card that won the round."""
        return self.winning_play.card


@dataclass(frozen=True)
class GameResult:
    """Final outcome of a game."""

    winners: tuple[Player, ...]  # In player creation order
    score: int

    @property
    def is_tie(self) -> bool:
        """Check if more than one player shares the top score."""
        return len(self.winners) > 1


def determine_round_winner(plays: list[Play] | tuple[Play, ...]) -> Play:
    """Pick the winning play of a round.

    Scans plays in order and replaces the current best only when the new
    card is strictly greater, so the earliest play wins every tie. Because
    the card relation is not transitive, the result depends on play order
    and must not be computed with ``max`` or by sorting.

    Args:
        plays: Plays in the order they were made.

    Returns:
        The winning play.

    Raises:
        ValueError: If no plays are given.
    """
    if not plays:
        raise ValueError("Cannot resolve a round without plays")

    best = plays[0]
    for play in plays[1:]:
        if compare(play.card, best.card) == Ordering.GREATER:
            best = play
    return best


def determine_game_winners(players: list[Player]) -> GameResult:
    """Find every player holding the top score.

    Args:
        players: Players in creation order.

    Returns:
        GameResult with the tied or single winner(s).
    """
    if not players:
        raise ValueError("Cannot determine winners without players")

    max_score = max(p.score for p in players)
    winners = tuple(p for p in players if p.score == max_score)
    return GameResult(winners=winners, score=max_score)
