"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse SEED environment variable."""
    seed = os.getenv("SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_packs: int = 6
    dealer_stands_on: int = 17
    hand_line_length: int = 7
    dealer_delay: float = field(
        default_factory=lambda: float(os.getenv("DEALER_DELAY", "1.0"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    file: str | None = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    max_bytes: int = 1_000_000
    backup_count: int = 3


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
