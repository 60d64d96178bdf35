# src/planner_bot/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time (the Telegram token is read lazily by the connector).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "PLANNER"

INVALID_ID_POLICIES = ("keep", "clear")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load a local .env (never overrides variables already set)."""
    load_dotenv(override=False)


_load_dotenv()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_int_list(name: str) -> List[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return []
    out: List[int] = []
    for part in raw.replace(",", " ").split():
        try:
            out.append(int(part))
        except ValueError:
            continue
    return out


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool
    telegram_enabled: bool

    # ---- Telegram ----
    telegram_token: Optional[str]
    telegram_token_file: Path
    telegram_poll_timeout: int
    telegram_allowed_chats: List[int]

    # ---- Console ----
    console_chat_id: int

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Conversation policy ----
    # What to do with a pending "awaiting done ID" state after a malformed ID:
    # "keep" waits for another ID, "clear" drops back to the menu.
    invalid_done_id_policy: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "planner") or "planner"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        telegram_enabled = _env_bool(_k("TELEGRAM_ENABLED"), False)

        telegram_token = _first_env(_k("TELEGRAM_TOKEN"), "TELEGRAM_BOT_TOKEN", default=None)
        telegram_token_file = _env_path(_k("TELEGRAM_TOKEN_FILE"), Path("bot_token.txt"))
        telegram_poll_timeout = _env_int(_k("TELEGRAM_POLL_TIMEOUT"), 60)
        telegram_allowed_chats = _env_int_list(_k("TELEGRAM_ALLOWED_CHATS"))

        console_chat_id = _env_int(_k("CONSOLE_CHAT_ID"), 0)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planner"))

        invalid_done_id_policy = _env(_k("INVALID_DONE_ID_POLICY"), "keep").strip().lower()
        if invalid_done_id_policy not in INVALID_ID_POLICIES:
            raise ValueError(
                f"{_k('INVALID_DONE_ID_POLICY')} must be one of {INVALID_ID_POLICIES}, "
                f"got {invalid_done_id_policy!r}"
            )

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            telegram_enabled=telegram_enabled,
            telegram_token=telegram_token,
            telegram_token_file=telegram_token_file,
            telegram_poll_timeout=telegram_poll_timeout,
            telegram_allowed_chats=telegram_allowed_chats,
            console_chat_id=console_chat_id,
            data_dir=data_dir,
            invalid_done_id_policy=invalid_done_id_policy,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env for secrets; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    # Simple overrides for selected names. Keep it explicit.
    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(SETTINGS, "console_enabled", bool(_config_local.CONSOLE_ENABLED))  # type: ignore[misc]
    if hasattr(_config_local, "TELEGRAM_ENABLED"):
        object.__setattr__(SETTINGS, "telegram_enabled", bool(_config_local.TELEGRAM_ENABLED))  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS
