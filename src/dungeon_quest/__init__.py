"""Dungeon Quest: a small text dungeon crawl for the terminal."""

from . import console
from .config import Config
from .logging import configure_logging, get_logger
from .session import GameSession, game_session

__all__ = ["main", "Config", "GameSession", "game_session"]


def main() -> int:
    """Entry point for the game. Returns the process exit code."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info("application_starting", log_level=config.log_level)

    with game_session() as session:
        console.run(session)
        logger.info(
            "application_stopping",
            defeated=session.state.player.health <= 0,
            turns=session.state.turns,
        )
    return 0
