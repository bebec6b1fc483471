"""
Configuration for the Hand and Brain backend.

Settings are read from environment variables, with defaults that give a standard game of chess.
The library never configures logging itself: the host process that wires up the service calls configure_logging() once at startup.
"""

import logging
import os
from dataclasses import dataclass

# A Hand and Brain game is always two teams of two
MAX_PLAYERS = 4

STANDARD_STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    starting_fen: str
    log_level: str


def load_settings() -> Settings:
    return Settings(
        starting_fen=os.environ.get("HAND_AND_BRAIN_STARTING_FEN", STANDARD_STARTING_FEN),
        log_level=os.environ.get("HAND_AND_BRAIN_LOG_LEVEL", "INFO").upper(),
    )


SETTINGS = load_settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for a host process (tests and libraries leave logging alone)."""
    logging.basicConfig(level=level or SETTINGS.log_level, format=LOG_FORMAT)
