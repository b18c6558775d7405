"""Read-print loop connecting a terminal to a game session."""

from collections.abc import Callable

from .logging import get_logger
from .session import GameSession

logger = get_logger(__name__)

BANNER = "Welcome to the Dungeon Adventure! Type 'help' for a list of commands."
PROMPT = "\n> "
EXIT_COMMAND = "exit"
GOODBYE = "Exiting game. Goodbye!"


def run(session: GameSession, read_line: Callable[[str], str] | None = None) -> None:
    """Prompt for commands until the player exits or is defeated.

    read_line defaults to input(). End of input counts as "exit".
    """
    read_line = read_line or input
    print(BANNER)
    while not session.is_finished:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.debug("input_closed")
            line = EXIT_COMMAND

        if line == EXIT_COMMAND:
            print(GOODBYE)
            return
        print(session.process_command(line))
