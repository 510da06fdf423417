"""Dragons & Crystals: a procedurally generated dungeon crawl."""

import sys

from .config import Config
from .console import run_console
from .logging import configure_logging, get_logger

__all__ = ["main", "run_console", "Config"]


def main() -> None:
    """Entry point for the console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        room_count=config.room_count,
        seed=config.seed,
        log_level=config.log_level,
    )

    sys.exit(run_console(config))
