"""Shared test fixtures for Dungeon Quest."""

import pytest

from dungeon_quest.engine.layout import build_world
from dungeon_quest.engine.state import GameState, new_game_state
from dungeon_quest.engine.world import World
from dungeon_quest.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging(log_level="CRITICAL")


@pytest.fixture
def world() -> World:
    return build_world()


@pytest.fixture
def state(world: World) -> GameState:
    return new_game_state(world)
