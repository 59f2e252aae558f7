"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from pydantic import BaseModel

from aflad.models.player import Player

from .formatters import format_card, format_hands, format_scores

if TYPE_CHECKING:
    from aflad.game.resolver import GameResult, RoundResult


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


def generate_log_filename(log_dir: str | Path, player_names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically, whitespace replaced by "-".

    Args:
        log_dir: Directory for log files.
        player_names: Names of the players in the game.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    sorted_names = sorted("-".join(name.split()) for name in player_names)
    filename = f"{timestamp}_{'_'.join(sorted_names)}.jsonl"
    return str(Path(log_dir) / filename)


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event,
    enough to replay a game round by round.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> GameLogger:
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, players: list[Player], hand_size: int) -> None:
        """Log game start with the dealt hands.

        Args:
            players: Players in creation order, holding their initial hands.
            hand_size: Number of cards dealt to each player.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [{"id": p.player_id, "name": p.name} for p in players],
            "hand_size": hand_size,
            "hands": format_hands(players),
        })

    def log_round(self, result: RoundResult, players: list[Player]) -> None:
        """Log a resolved round.

        Args:
            result: The round's plays and winner.
            players: All players, after the winner's score was updated.
        """
        self._write({
            "type": "round",
            "round": result.round_number,
            "plays": [
                {"player": play.player.player_id, "card": format_card(play.card)}
                for play in result.plays
            ],
            "winner": result.winner.player_id,
            "winning_card": format_card(result.winning_card),
            "scores": format_scores(players),
            "hands": format_hands(players),
        })

    def log_game_end(self, result: GameResult, rounds: int) -> None:
        """Log game end with results.

        Args:
            result: Final winners and their score.
            rounds: Number of rounds played.
        """
        self._write({
            "type": "game_end",
            "rounds": rounds,
            "winners": [p.player_id for p in result.winners],
            "score": result.score,
            "tie": result.is_tie,
        })
