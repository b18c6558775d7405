"""Mutable per-session player state.

The player refers to rooms by number only; the World owns the rooms.
"""

from dataclasses import dataclass, field

from .layout import START_ROOM
from .world import Item, Room, World, empty_slots

START_HEALTH = 100
START_STRENGTH = 10

# Damage a surviving creature deals back after each attack.
RETALIATION_DAMAGE = 10


@dataclass
class Player:
    """The adventurer."""

    current_room: int = START_ROOM
    health: int = START_HEALTH
    strength: int = START_STRENGTH
    inventory: list[Item | None] = field(default_factory=empty_slots)


@dataclass
class GameState:
    """Everything that changes while a session runs, apart from the rooms."""

    player: Player = field(default_factory=Player)
    turns: int = 0
    is_finished: bool = False

    def current_room(self, world: World) -> Room:
        return world.rooms[self.player.current_room]


def new_game_state(world: World) -> GameState:
    """Create a fresh player standing in the starting room."""
    if START_ROOM not in world.rooms:
        raise KeyError(START_ROOM)
    return GameState()
