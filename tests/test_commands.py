# tests/test_commands.py

from __future__ import annotations

from planner_bot.cli.commands import CommandRegistry
from planner_bot.core.ports import Reply


def test_command_registry_routes_slash_and_alias(state) -> None:
    reg = CommandRegistry()
    seen: list[tuple[int, str]] = []

    def h(state, chat_id, arg):
        seen.append((chat_id, arg))
        return Reply(chat_id, "h")

    reg.register("go", h, "go somewhere", aliases=["Go!"])

    assert reg.handle(state, 1, "/go north  ") == Reply(1, "h")
    assert reg.handle(state, 2, "Go!") == Reply(2, "h")
    assert reg.handle(state, 3, "/GO") == Reply(3, "h")
    assert seen == [(1, "north"), (2, ""), (3, "")]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    reg.register("go", lambda s, c, a: Reply(c, "h"), "go", aliases=["Go!"])

    assert reg.handle(state, 1, "hello") is None
    assert reg.handle(state, 1, "/nope") is None
    assert reg.handle(state, 1, "/") is None
    # Aliases match the whole text exactly.
    assert reg.handle(state, 1, "Go! now") is None
    assert reg.handle(state, 1, "go!") is None


def test_command_registry_requires_word_boundary() -> None:
    reg = CommandRegistry()
    reg.register("add", lambda s, c, a: Reply(c, "add"), "add")

    assert reg.resolve("/addfoo") is None
    found = reg.resolve("/add foo bar")
    assert found is not None
    assert found[1] == "foo bar"


def test_build_help_keeps_registration_order() -> None:
    reg = CommandRegistry()
    reg.register("b", lambda s, c, a: Reply(c, ""), "second")
    reg.register("a", lambda s, c, a: Reply(c, ""), "first", aliases=["A"])

    assert reg.build_help() == "Available commands:\n/b - second\n/a - first"
