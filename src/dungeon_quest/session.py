"""Session layer owning the world and player state for one run."""

from collections.abc import Iterator
from contextlib import contextmanager

from .engine.commands import handle_command
from .engine.layout import build_world
from .engine.state import GameState, new_game_state
from .engine.world import World, item_names
from .logging import get_logger

logger = get_logger(__name__)


class GameSession:
    """Wraps a World + GameState for the lifetime of one game."""

    def __init__(self, world: World, state: GameState):
        self.world = world
        self.state = state

    @classmethod
    def start(cls) -> "GameSession":
        """Build the starting dungeon and a fresh player."""
        world = build_world()
        state = new_game_state(world)
        logger.info("game_started", rooms=len(world.rooms))
        return cls(world, state)

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    def process_command(self, raw_input: str) -> str:
        """Delegate to the engine and return response text."""
        return handle_command(self.world, self.state, raw_input)

    def close(self) -> None:
        """Release every room with its items and creature, and the inventory."""
        items = 0
        creatures = 0
        for room in self.world.rooms.values():
            items += len(item_names(room.items))
            room.items = []
            if room.creature is not None:
                creatures += 1
                room.creature = None
            room.exits.clear()
        rooms = len(self.world.rooms)
        self.world.rooms.clear()

        carried = len(item_names(self.state.player.inventory))
        self.state.player.inventory = []
        self.state.is_finished = True

        logger.debug(
            "session_closed",
            rooms=rooms,
            room_items=items,
            creatures=creatures,
            inventory_items=carried,
            turns=self.state.turns,
        )


@contextmanager
def game_session() -> Iterator[GameSession]:
    """Start a game session and release it when the block exits."""
    session = GameSession.start()
    try:
        yield session
    finally:
        session.close()
