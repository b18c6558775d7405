"""Command classification and handler functions.

handle_command(world, state, raw_input) -> str is the main entry point.
It classifies the line, dispatches to a handler and returns the text to
show the player. Handlers mutate state in place; none of them raise for
ordinary game outcomes.
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..logging import get_logger
from .state import RETALIATION_DAMAGE, GameState
from .world import World, first_free_slot, item_names, move_item

logger = get_logger(__name__)

MOVE_PREFIX = "move "
PICKUP_PREFIX = "pickup "

HELP_TEXT = "\n".join(
    [
        "Available commands:",
        "  move <direction>  - Move to another room (directions: up, down, left, right)",
        "  look              - Look around the current room",
        "  inventory         - Check your inventory",
        "  pickup <item>     - Pick up an item in the room",
        "  attack            - Attack a creature in the room",
        "  help              - Show this help message",
        "  exit              - Exit the game",
    ]
)

UNKNOWN_TEXT = (
    "Unknown command. Try 'move', 'look', 'inventory', 'pickup', "
    "'attack', 'help', or 'exit'."
)


@dataclass(frozen=True)
class Command:
    """A classified input line."""

    name: str  # "move", "look", "inventory", "pickup", "attack", "help", "unknown"
    argument: str | None = None


def parse_command(raw_input: str) -> Command:
    """Classify a line. Prefix arguments are kept exactly as typed."""
    if raw_input.startswith(MOVE_PREFIX):
        return Command("move", raw_input[len(MOVE_PREFIX):])
    if raw_input == "look":
        return Command("look")
    if raw_input == "inventory":
        return Command("inventory")
    if raw_input.startswith(PICKUP_PREFIX):
        return Command("pickup", raw_input[len(PICKUP_PREFIX):])
    if raw_input == "attack":
        return Command("attack")
    if raw_input == "help":
        return Command("help")
    return Command("unknown")


def handle_command(world: World, state: GameState, raw_input: str) -> str:
    """Process a command and return the response text."""
    if state.is_finished:
        logger.warning("command_after_game_over", raw_input=raw_input)
        return ""

    state.turns += 1
    command = parse_command(raw_input)
    logger.debug(
        "command_handled",
        command=command.name,
        argument=command.argument,
        turn=state.turns,
    )
    handler = _COMMAND_DISPATCH[command.name]
    return handler(world, state, command.argument)


def _cmd_move(world: World, state: GameState, direction: str | None = None) -> str:
    """Handle MOVE <direction>."""
    room = state.current_room(world)
    next_room = world.neighbor(room, direction or "")
    if next_room is None:
        return f"You can't move {direction} from here."

    state.player.current_room = next_room.number
    return f"You move {direction}.\n" + _cmd_look(world, state)


def _cmd_look(world: World, state: GameState, argument: str | None = None) -> str:
    """Handle LOOK command."""
    room = state.current_room(world)
    names = item_names(room.items)
    lines = [
        room.description,
        "Items in the room: " + (" ".join(names) if names else "None"),
    ]
    if room.creature is not None:
        lines.append(f"A {room.creature.name} is here!")
    return "\n".join(lines)


def _cmd_inventory(world: World, state: GameState, argument: str | None = None) -> str:
    """Handle INVENTORY command."""
    names = item_names(state.player.inventory)
    return "Your inventory: " + (" ".join(names) if names else "Empty")


def _cmd_pickup(world: World, state: GameState, name: str | None = None) -> str:
    """Handle PICKUP <item>.

    Only the first item in slot order with a matching name is tried; a
    full inventory leaves it where it is.
    """
    room = state.current_room(world)
    inventory = state.player.inventory
    for index, item in enumerate(room.items):
        if item is None or item.name != name:
            continue
        free = first_free_slot(inventory)
        if free is None:
            return "Your inventory is full!"
        move_item(room.items, index, inventory, free)
        logger.info("item_picked_up", item=name, room=room.number, slot=free)
        return f"You picked up {name}."
    return "Item not found in the room."


def _cmd_attack(world: World, state: GameState, argument: str | None = None) -> str:
    """Handle ATTACK: a single combat round against the room's creature."""
    room = state.current_room(world)
    creature = room.creature
    if creature is None:
        return "There is nothing to attack here."

    player = state.player
    lines = [f"You attack the {creature.name}!"]
    creature.health -= player.strength

    if creature.health <= 0:
        lines.append(f"You defeated the {creature.name}!")
        room.creature = None
        logger.info("creature_defeated", creature=creature.name, room=room.number)
        return "\n".join(lines)

    lines.append(f"The {creature.name} attacks you back!")
    player.health -= RETALIATION_DAMAGE
    if player.health <= 0:
        lines.append("You have been defeated. Game over!")
        state.is_finished = True
        logger.info("player_defeated", creature=creature.name, turns=state.turns)
    return "\n".join(lines)


def _static_response(msg: str):
    """Return a handler that ignores all arguments and returns a fixed message."""
    def handler(world: World, state: GameState, argument: str | None = None) -> str:
        return msg
    return handler


_COMMAND_DISPATCH: dict[str, Callable[..., str]] = {
    "move": _cmd_move,
    "look": _cmd_look,
    "inventory": _cmd_inventory,
    "pickup": _cmd_pickup,
    "attack": _cmd_attack,
    "help": _static_response(HELP_TEXT),
    "unknown": _static_response(UNKNOWN_TEXT),
}
