# src/planner_bot/connectors/telegram_client.py

from __future__ import annotations

import logging
from pathlib import Path

from telegram.ext import Application, ApplicationBuilder

logger = logging.getLogger(__name__)


def load_bot_token(settings) -> str | None:
    """
    Resolve the bot token.

    Order:
    - settings.telegram_token (PLANNER_TELEGRAM_TOKEN / TELEGRAM_BOT_TOKEN)
    - plain-text token file (PLANNER_TELEGRAM_TOKEN_FILE, default bot_token.txt)

    The token file must never be committed (keep it gitignored).
    """
    token = (getattr(settings, "telegram_token", None) or "").strip()
    if token:
        return token

    token_file = Path(getattr(settings, "telegram_token_file", Path("bot_token.txt")))
    if not token_file.exists():
        logger.error(
            "Telegram token not configured: set PLANNER_TELEGRAM_TOKEN or create %s", token_file
        )
        return None

    try:
        token = token_file.read_text("utf-8").strip()
    except OSError as e:
        logger.error("Failed to read Telegram token file %s: %r", token_file, e)
        return None

    if not token:
        logger.error("Telegram token file %s is empty.", token_file)
        return None
    return token


def create_application(settings) -> Application | None:
    """Build a python-telegram-bot Application, or None when no token is available."""
    token = load_bot_token(settings)
    if token is None:
        return None
    return ApplicationBuilder().token(token).build()
