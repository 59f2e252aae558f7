"""Game engine for Ace, Flower, Love & Diamond."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Sequence

from aflad.config import GameConfig
from aflad.errors import (
    GameNotOverError,
    GameOverError,
    InvalidIndexError,
    InvalidPlayerCountError,
)
from aflad.logging import GameLogger
from aflad.models.card import DECK_SIZE
from aflad.models.deck import Deck
from aflad.models.player import Player

from .resolver import (
    GameResult,
    Play,
    RoundResult,
    determine_game_winners,
    determine_round_winner,
)

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2

# Given a player and the valid indices into their hand, return the index to play.
SelectCard = Callable[[Player, range], int]


class GamePhase(str, Enum):
    """Game lifecycle phase."""

    SETUP = "setup"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_RESOLVED = "round_resolved"
    GAME_OVER = "game_over"


def max_players(hand_size: int) -> int:
    """Largest number of players the deck can deal a full hand to."""
    return DECK_SIZE // hand_size


def default_player_name(position: int) -> str:
    """Name used for a player who left theirs blank (1-based position)."""
    return f"Player {position}"


class GameEngine:
    """Main game engine.

    Owns the deck and the players for a single game. Card choices come from
    a ``select_card`` callback so the engine never touches the terminal.
    """

    def __init__(
        self,
        player_names: Sequence[str],
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Set up a game and deal the opening hands.

        Args:
            player_names: One name per player, in play order. Blank names
                are replaced with "Player {i}".
            config: Game configuration (uses defaults if not provided)
            rng: Random source for the shuffle
            game_logger: GameLogger instance for the game record

        Raises:
            InvalidPlayerCountError: If fewer than two names are given.
            InsufficientCardsError: If the deck cannot cover every hand.
        """
        if len(player_names) < MIN_PLAYERS:
            raise InvalidPlayerCountError(
                f"At least {MIN_PLAYERS} players are required, got {len(player_names)}"
            )

        self.config = config or GameConfig()
        self.game_logger = game_logger

        self.phase = GamePhase.SETUP
        self.round_number = 0
        self._result: GameResult | None = None

        self._on_round_end: Callable[[RoundResult], None] | None = None
        self._on_game_end: Callable[[GameResult], None] | None = None

        self.deck = Deck()
        self.deck.shuffle(rng)

        self._players = [
            Player(
                player_id=i,
                name=name.strip() or default_player_name(i + 1),
            )
            for i, name in enumerate(player_names)
        ]
        self._deal_initial_cards()

        if self.game_logger:
            self.game_logger.log_game_start(self._players, self.config.hand_size)

    @property
    def players(self) -> list[Player]:
        """Players in creation (and play) order."""
        return list(self._players)

    def set_callbacks(
        self,
        on_round_end: Callable[[RoundResult], None] | None = None,
        on_game_end: Callable[[GameResult], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_round_end: Called after each round is resolved
            on_game_end: Called once when the game ends
        """
        self._on_round_end = on_round_end
        self._on_game_end = on_game_end

    def _deal_initial_cards(self) -> None:
        """Deal a full hand to each player in order."""
        hand_size = self.config.hand_size
        for player in self._players:
            player.receive_cards(self.deck.deal(hand_size))
            logger.debug(f"Dealt {hand_size} cards to {player.name}")

        logger.info(
            f"Game set up for {len(self._players)} players, "
            f"{self.deck.remaining_count()} cards left in deck"
        )

    def play_round(self, select_card: SelectCard) -> RoundResult:
        """Play one round.

        Every player selects a card before any card leaves a hand, so a
        failed selection leaves the game exactly as it was.

        Args:
            select_card: Chooses a hand index for a player. Only sees that
                player and their own hand.

        Returns:
            RoundResult for the round just played.

        Raises:
            GameOverError: If the game has already ended.
            InvalidIndexError: If ``select_card`` returns an invalid index.
        """
        if self.phase == GamePhase.GAME_OVER:
            raise GameOverError("The game is over, no more rounds can be played")

        selections: list[tuple[Player, int]] = []
        for player in self._players:
            available = range(player.hand_size)
            index = select_card(player, available)
            if isinstance(index, bool) or not isinstance(index, int) or index not in available:
                raise InvalidIndexError(
                    f"Selected index {index!r} is not in 0..{player.hand_size - 1} "
                    f"for {player.name}"
                )
            selections.append((player, index))

        self.phase = GamePhase.ROUND_IN_PROGRESS
        plays = tuple(Play(player, player.play_card(index)) for player, index in selections)

        self.round_number += 1
        winning_play = determine_round_winner(plays)
        winning_play.player.increment_score()
        result = RoundResult(
            round_number=self.round_number,
            plays=plays,
            winning_play=winning_play,
        )
        self.phase = GamePhase.ROUND_RESOLVED
        game_over = self._check_game_over()

        logger.info(
            f"Round {self.round_number}: {result.winner.name} wins with {result.winning_card}"
        )

        # State is final before any listener runs
        if self.game_logger:
            self.game_logger.log_round(result, self._players)

        if self._on_round_end:
            self._on_round_end(result)

        if game_over:
            self._notify_game_over()
        return result

    def _check_game_over(self) -> bool:
        """End the game once any player has run out of cards.

        Returns:
            True if this call ended the game.
        """
        if all(p.has_cards() for p in self._players):
            return False

        self.phase = GamePhase.GAME_OVER
        self._result = determine_game_winners(self._players)
        return True

    def _notify_game_over(self) -> None:
        """Log and report the final result."""
        logger.info(
            f"Game over after {self.round_number} rounds: "
            f"{', '.join(p.name for p in self._result.winners)} "
            f"with {self._result.score} points"
        )

        if self.game_logger:
            self.game_logger.log_game_end(self._result, self.round_number)

        if self._on_game_end:
            self._on_game_end(self._result)

    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return self.phase == GamePhase.GAME_OVER

    def get_winners(self) -> GameResult:
        """Get the final winner(s).

        Raises:
            GameNotOverError: If the game is still running.
        """
        if self._result is None:
            raise GameNotOverError("The game is still in progress")
        return self._result

    def run(self, select_card: SelectCard) -> GameResult:
        """Play rounds until the game is over.

        Returns:
            Final winner(s) and score.
        """
        while not self.is_game_over():
            self.play_round(select_card)
        return self.get_winners()


def create_game(
    player_names: Sequence[str],
    config: GameConfig | None = None,
    rng: random.Random | None = None,
    game_logger: GameLogger | None = None,
) -> GameEngine:
    """Create a game with its hands already dealt.

    Args:
        player_names: One name per player, in play order.
        config: Game configuration.
        rng: Random source for the shuffle.
        game_logger: GameLogger instance for the game record.

    Returns:
        GameEngine ready for its first round.
    """
    return GameEngine(player_names, config=config, rng=rng, game_logger=game_logger)
