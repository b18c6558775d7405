"""Tests for structured logging setup."""

import json
from pathlib import Path

import pytest

from dungeon_quest.logging import _level_to_int, configure_logging, get_logger


@pytest.fixture
def _restore_logging():
    yield
    configure_logging(log_level="CRITICAL")


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", 10), ("INFO", 20), ("Warning", 30), ("ERROR", 40), ("bogus", 30)],
)
def test_level_to_int(level: str, expected: int):
    assert _level_to_int(level) == expected


@pytest.mark.usefixtures("_restore_logging")
def test_json_logs_to_file(tmp_path: Path):
    log_file = tmp_path / "game.log"
    configure_logging(log_level="INFO", log_file=log_file, json_logs=True)

    logger = get_logger("test")
    logger.debug("too_quiet")
    logger.info("item_picked_up", item="Sword")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "item_picked_up"
    assert record["item"] == "Sword"
    assert record["level"] == "info"
    assert "timestamp" in record
