# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterator

from planner_bot.connectors.console_connector import render_keyboard, run_console_loop
from planner_bot.core import replies


def _feed(monkeypatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_render_keyboard() -> None:
    assert render_keyboard(None) == ""
    assert render_keyboard([["A", "B"], ["C"]]) == "[A] [B]\n[C]"


def test_console_loop_runs_add_and_list_flow(router, state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["/start", "", replies.LABEL_ADD, "buy milk", "/list", "/exit", "/list"])

    run_console_loop(router)

    out = capsys.readouterr().out
    assert replies.GREETING in out
    assert "[Add task] [Task list] [/help] [Done]" in out
    assert replies.TASK_ADDED in out
    assert "ID: 1 - buy milk [❌]" in out
    assert state.task_store.count_tasks() == 1


def test_console_loop_stops_on_eof(router, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["hello"])

    run_console_loop(router)

    assert replies.UNKNOWN_COMMAND in capsys.readouterr().out


def test_console_uses_configured_chat_id(router, state, settings, monkeypatch) -> None:
    settings.console_chat_id = 77
    _feed(monkeypatch, [replies.LABEL_DONE])

    run_console_loop(router)

    assert state.conversations.consume(77) is not None
    assert state.conversations.consume(0) is None


def test_console_survives_router_crash(router, monkeypatch, capsys) -> None:
    def boom(chat_id, text):
        raise RuntimeError("boom")

    monkeypatch.setattr(router, "handle", boom)
    _feed(monkeypatch, ["/list"])

    run_console_loop(router)

    assert replies.INTERNAL_ERROR in capsys.readouterr().out


def test_console_keeps_description_whitespace_when_pending(router, state, monkeypatch) -> None:
    _feed(monkeypatch, [replies.LABEL_ADD, "  ", replies.LABEL_ADD, "  spaced  "])

    run_console_loop(router)

    assert [t.description for t in state.task_store.list_tasks()] == ["  ", "  spaced  "]
