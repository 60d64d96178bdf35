# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from planner_bot.cli.bootstrap import create_initial_state, create_router
from planner_bot.config import Settings

_VARS = [
    "PLANNER_APP_NAME",
    "PLANNER_LOG_LEVEL",
    "PLANNER_CONSOLE_ENABLED",
    "PLANNER_TELEGRAM_ENABLED",
    "PLANNER_TELEGRAM_TOKEN",
    "TELEGRAM_BOT_TOKEN",
    "PLANNER_TELEGRAM_TOKEN_FILE",
    "PLANNER_TELEGRAM_POLL_TIMEOUT",
    "PLANNER_TELEGRAM_ALLOWED_CHATS",
    "PLANNER_CONSOLE_CHAT_ID",
    "PLANNER_DATA_DIR",
    "PLANNER_INVALID_DONE_ID_POLICY",
]


@pytest.fixture()
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.app_name == "planner"
    assert s.console_enabled is True
    assert s.telegram_enabled is False
    assert s.telegram_token is None
    assert s.telegram_token_file == Path("bot_token.txt")
    assert s.telegram_poll_timeout == 60
    assert s.telegram_allowed_chats == []
    assert s.invalid_done_id_policy == "keep"


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("PLANNER_TELEGRAM_ENABLED", "yes")
    clean_env.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    clean_env.setenv("PLANNER_TELEGRAM_POLL_TIMEOUT", "not-a-number")
    clean_env.setenv("PLANNER_TELEGRAM_ALLOWED_CHATS", "1, -100200 junk")
    clean_env.setenv("PLANNER_DATA_DIR", str(tmp_path))
    clean_env.setenv("PLANNER_INVALID_DONE_ID_POLICY", " Clear ")

    s = Settings.from_env()

    assert s.telegram_enabled is True
    assert s.telegram_token == "123:abc"
    assert s.telegram_poll_timeout == 60
    assert s.telegram_allowed_chats == [1, -100200]
    assert s.data_dir == tmp_path
    assert s.invalid_done_id_policy == "clear"


def test_unknown_invalid_id_policy_is_rejected(clean_env) -> None:
    clean_env.setenv("PLANNER_INVALID_DONE_ID_POLICY", "retry")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_bootstrap_wires_state_and_router(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("PLANNER_DATA_DIR", str(tmp_path / "data"))
    settings = Settings.from_env()

    state = create_initial_state(settings=settings)
    router = create_router(state)

    assert (tmp_path / "data").is_dir()
    assert router.state is state
    assert router.handle(1, "/add x")[0].text == "✅ Task added: x (ID: 1)"
