"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Game configuration."""

    num_players: int = Field(default=2, ge=2)
    hand_size: int = Field(default=5, ge=1)
    seed: int | None = None  # Fixed seed for a reproducible shuffle


class LoggingConfig(BaseModel):
    """Logging configuration."""

    # Diagnostics share stdout with the game, keep them quiet by default
    level: str = "WARNING"


class GameLogSettings(BaseModel):
    """Game record (JSONL) settings."""

    enabled: bool = False
    output_path: str = "logs"  # Directory, filename is generated per game


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
