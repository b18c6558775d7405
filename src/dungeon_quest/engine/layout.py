"""Build the fixed starting dungeon.

The layout is the same on every run:

  room 1 (Goblin)
     |
  room 0 (Sword) -- room 2
"""

from ..logging import get_logger
from .world import Creature, Item, World

logger = get_logger(__name__)

START_ROOM = 0

ENTRANCE = "You are in a dark and damp dungeon room. Exits are to the north and east."
CHEST_ROOM = "You are in a room with an old wooden chest. Exits are to the south."
POTTERY_ROOM = (
    "You are in a room filled with cobwebs and broken pottery. "
    "Exits are to the west."
)

GOBLIN_HEALTH = 30


def build_world() -> World:
    """Create the three rooms, their links, the sword and the goblin."""
    world = World()
    entrance = world.create_room(ENTRANCE)
    chest_room = world.create_room(CHEST_ROOM)
    pottery_room = world.create_room(POTTERY_ROOM)

    world.connect(entrance, chest_room, "up")
    world.connect(entrance, pottery_room, "right")

    entrance.items[0] = Item("Sword")
    chest_room.creature = Creature("Goblin", health=GOBLIN_HEALTH)

    logger.debug("world_built", rooms=len(world.rooms))
    return world
