# src/planner_bot/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core import replies
from ..core.ports import Keyboard, Reply
from ..core.router import MessageRouter

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def render_keyboard(keyboard: Keyboard | None) -> str:
    """Render reply-keyboard rows as '[Add task] [Task list] ...' lines."""
    if not keyboard:
        return ""
    return "\n".join(" ".join(f"[{label}]" for label in row) for row in keyboard)


def _print_reply(reply: Reply) -> None:
    _print_ts(reply.text)
    buttons = render_keyboard(reply.keyboard)
    if buttons:
        print(buttons)


def run_console_loop(router: MessageRouter) -> None:
    settings = router.state.settings
    chat_id = int(getattr(settings, "console_chat_id", 0))

    logger.info("Console connector started (chat_id=%s).", chat_id)
    _print_ts("[CONSOLE] Type /start to begin, /help for commands, /exit to quit.\n")

    while True:
        try:
            raw = input(">>> You: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        # A pending prompt takes the line as typed (blank and padded descriptions included).
        if router.state.conversations.consume(chat_id) is not None:
            user_input = raw
        else:
            user_input = raw.strip()
            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

        try:
            out = router.handle(chat_id, user_input)
        except Exception:
            logger.exception("Console message handler crashed.")
            out = [Reply(chat_id, replies.INTERNAL_ERROR)]

        for reply in out:
            _print_reply(reply)

    logger.info("Console connector finished.")
