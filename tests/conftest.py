# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from planner_bot.cli.commands import registry
from planner_bot.core.conversation import ConversationStateTracker
from planner_bot.core.router import MessageRouter
from planner_bot.core.state import AppState
from planner_bot.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="planner-test",
        data_dir=tmp_path / "data",
        console_chat_id=0,
        telegram_enabled=False,
        telegram_token=None,
        telegram_token_file=tmp_path / "bot_token.txt",
        telegram_poll_timeout=1,
        telegram_allowed_chats=[],
        invalid_done_id_policy="keep",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        conversations=ConversationStateTracker(),
    )


@pytest.fixture()
def router(state: AppState) -> MessageRouter:
    return MessageRouter(state, registry)
