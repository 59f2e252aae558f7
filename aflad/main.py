"""Main entry point for the terminal game."""

import argparse
import logging
import random
import sys
from pathlib import Path

from pydantic import ValidationError

from aflad.config import GameConfig, load_config
from aflad.errors import GameError
from aflad.game.engine import MIN_PLAYERS, create_game, max_players
from aflad.logging import GameLogConfig, GameLogger, generate_log_filename
from aflad.utils.logger import GameDisplay, setup_logging
from aflad.utils.prompt import TerminalCardSelector, ask_player_count, ask_player_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Ace, Flower, Love & Diamond terminal card game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-players",
        type=int,
        help="Number of players (skips the prompt)",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Cards dealt to each player (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Shuffle seed for a reproducible deal (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides (re-validated like the config file)
    overrides: dict[str, int] = {}
    if args.hand_size is not None:
        overrides["hand_size"] = args.hand_size
    if args.seed is not None:
        overrides["seed"] = args.seed
    try:
        config.game = GameConfig.model_validate({**config.game.model_dump(), **overrides})
    except ValidationError as e:
        parser.error(f"invalid game settings: {e}")
    if max_players(config.game.hand_size) < MIN_PLAYERS:
        parser.error(
            f"hand size {config.game.hand_size} leaves cards for fewer than "
            f"{MIN_PLAYERS} players"
        )
    if args.verbose:
        config.logging.level = "DEBUG"

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay()
    display.print_banner(config.game.hand_size)

    try:
        if args.num_players:
            num_players = max(args.num_players, MIN_PLAYERS)
        else:
            num_players = ask_player_count(
                config.game.num_players, max_players(config.game.hand_size)
            )
        names = ask_player_names(num_players)

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, names)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        with GameLogger(game_log_config) as game_logger:
            engine = create_game(
                names,
                config=config.game,
                rng=random.Random(config.game.seed),
                game_logger=game_logger,
            )
            engine.set_callbacks(
                on_round_end=lambda result: display.print_round_result(
                    result, engine.players
                ),
                on_game_end=display.print_game_over,
            )

            selector = TerminalCardSelector(display)
            while not engine.is_game_over():
                display.print_round_header(engine.round_number + 1)
                engine.play_round(selector)

        return 0

    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted")
        return 1
    except GameError as e:
        logger.error(f"Game error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
