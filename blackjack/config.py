"""Configuration for the console game."""

from dataclasses import dataclass, field
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class GameConfig:
    """Table rules."""

    dealer_stands_on: int = 17  # Soft or hard, the dealer stops here
    initial_cards: int = 2

    def __post_init__(self) -> None:
        if self.initial_cards < 1:
            raise ValueError("Each hand must be dealt at least 1 card")
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("Dealer stand threshold must be between 2 and 21")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration. Records go to stderr so they never mix with the table."""

    level: LogLevel = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    seed: int | None = None  # None seeds the shuffle from system entropy
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
