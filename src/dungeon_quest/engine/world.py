"""Data structures for the dungeon world.

Rooms live in an arena keyed by room number; neighbor links hold room
numbers rather than Room references, so the graph has no object cycles.
"""

from dataclasses import dataclass, field

from ..logging import get_logger

logger = get_logger(__name__)

# Capacity of every room's item slots and of the player's inventory.
MAX_SLOTS = 5

DIRECTIONS = ("up", "down", "left", "right")
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}


@dataclass(frozen=True, eq=False)
class Item:
    """A carryable object. Compared by identity, not by name."""

    name: str


@dataclass(eq=False)
class Creature:
    """A monster occupying a room."""

    name: str
    health: int


def empty_slots() -> list[Item | None]:
    return [None] * MAX_SLOTS


@dataclass(eq=False)
class Room:
    """A location in the dungeon."""

    number: int
    description: str
    items: list[Item | None] = field(default_factory=empty_slots)
    creature: Creature | None = None
    exits: dict[str, int] = field(default_factory=dict)


def first_free_slot(slots: list[Item | None]) -> int | None:
    """Index of the first empty slot, scanning in order."""
    for index, item in enumerate(slots):
        if item is None:
            return index
    return None


def move_item(
    source: list[Item | None],
    source_index: int,
    dest: list[Item | None],
    dest_index: int,
) -> Item:
    """Transfer the item in one slot to another, clearing the source."""
    item = source[source_index]
    if item is None:
        raise ValueError(f"source slot {source_index} is empty")
    if dest[dest_index] is not None:
        raise ValueError(f"destination slot {dest_index} is occupied")
    source[source_index] = None
    dest[dest_index] = item
    return item


def item_names(slots: list[Item | None]) -> list[str]:
    """Names of the occupied slots, in slot order."""
    return [item.name for item in slots if item is not None]


@dataclass
class World:
    """The dungeon: every room, addressed by number."""

    rooms: dict[int, Room] = field(default_factory=dict)

    def create_room(self, description: str) -> Room:
        """Add an empty room with no neighbors and no creature."""
        room = Room(number=len(self.rooms), description=description)
        self.rooms[room.number] = room
        logger.debug("room_created", room=room.number)
        return room

    def connect(self, origin: Room, target: Room, direction: str) -> None:
        """Link origin to target in direction, and target back to origin.

        An existing link in either direction is overwritten. An unknown
        direction leaves both rooms untouched.
        """
        for room in (origin, target):
            if self.rooms.get(room.number) is not room:
                raise KeyError(room.number)

        opposite = OPPOSITES.get(direction)
        if opposite is None:
            logger.debug("connect_ignored", direction=direction)
            return

        origin.exits[direction] = target.number
        target.exits[opposite] = origin.number
        logger.debug(
            "rooms_connected",
            origin=origin.number,
            target=target.number,
            direction=direction,
        )

    def neighbor(self, room: Room, direction: str) -> Room | None:
        """The room reached from room by going direction, if any."""
        number = room.exits.get(direction)
        if number is None:
            return None
        return self.rooms[number]
