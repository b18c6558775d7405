"""Tests for the terminal read-print loop."""

import pytest

from dungeon_quest import console, main
from dungeon_quest.engine.layout import CHEST_ROOM
from dungeon_quest.session import GameSession


def _reader(lines: list[str]):
    """Feed scripted lines to the loop, then signal end of input."""
    pending = iter(lines)
    prompts = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    read_line.prompts = prompts
    return read_line


def test_banner_then_exit(capsys):
    read_line = _reader(["exit", "look"])
    console.run(GameSession.start(), read_line)
    out = capsys.readouterr().out.splitlines()
    assert out == [console.BANNER, console.GOODBYE]
    assert read_line.prompts == ["\n> "]


def test_commands_are_printed(capsys):
    console.run(GameSession.start(), _reader(["move up", "exit"]))
    out = capsys.readouterr().out.splitlines()
    assert out == [
        console.BANNER,
        "You move up.",
        CHEST_ROOM,
        "Items in the room: None",
        "A Goblin is here!",
        console.GOODBYE,
    ]


@pytest.mark.parametrize("line", ["exit ", " exit", "EXIT"])
def test_exit_must_match_exactly(capsys, line: str):
    console.run(GameSession.start(), _reader([line, "exit"]))
    out = capsys.readouterr().out
    assert "Unknown command." in out
    assert out.count(console.GOODBYE) == 1


def test_end_of_input_exits(capsys):
    console.run(GameSession.start(), _reader(["look"]))
    assert capsys.readouterr().out.rstrip().endswith(console.GOODBYE)


def test_defeat_stops_the_loop(capsys):
    """After the game-over message no more lines are read."""
    session = GameSession.start()
    session.state.player.health = 10
    read_line = _reader(["move up", "attack", "look", "exit"])
    console.run(session, read_line)
    out = capsys.readouterr().out
    assert out.rstrip().endswith("You have been defeated. Game over!")
    assert console.GOODBYE not in out
    assert len(read_line.prompts) == 2


def test_main_returns_zero(monkeypatch, capsys):
    monkeypatch.setenv("DUNGEON_LOG_LEVEL", "CRITICAL")
    lines = iter(["pickup Sword", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main() == 0
    out = capsys.readouterr().out
    assert "You picked up Sword." in out
    assert out.rstrip().endswith(console.GOODBYE)
