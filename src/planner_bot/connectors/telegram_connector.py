# src/planner_bot/connectors/telegram_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from telegram import ReplyKeyboardMarkup, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes, MessageHandler, filters

from ..core import replies
from ..core.ports import Keyboard, Reply
from ..core.router import MessageRouter
from .telegram_client import create_application

logger = logging.getLogger(__name__)

MessageCallback = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


def _chat_allowlist(settings_chats: list[int]) -> set[int] | None:
    chats = {int(c) for c in (settings_chats or [])}
    return chats or None


def render_keyboard(keyboard: Keyboard | None) -> ReplyKeyboardMarkup | None:
    if not keyboard:
        return None
    return ReplyKeyboardMarkup(keyboard, resize_keyboard=True)


def make_message_callback(router: MessageRouter) -> MessageCallback:
    """
    Build the handler for inbound text messages.

    Every text (slash commands included) goes through the router, so the
    pending-input check sees commands too.
    """
    settings = router.state.settings
    allowed_chats = _chat_allowlist(getattr(settings, "telegram_allowed_chats", []) or [])
    logger.info("Telegram allowed_chats=%s", allowed_chats if allowed_chats is not None else "ALL")

    async def on_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        chat = update.effective_chat
        if message is None or chat is None or message.text is None:
            return

        if allowed_chats is not None and chat.id not in allowed_chats:
            logger.debug("Telegram message from chat %s ignored (not allowed).", chat.id)
            return

        logger.info("Telegram <%s>: %r", chat.id, message.text)

        try:
            # The router blocks on AppState.lock (shared with the console thread); keep the loop free.
            out = await asyncio.to_thread(router.handle, chat.id, message.text)
        except Exception:
            logger.exception("Router crashed on Telegram message.")
            out = [Reply(chat.id, replies.INTERNAL_ERROR)]

        for reply in out:
            try:
                await context.bot.send_message(
                    chat_id=reply.chat_id,
                    text=reply.text,
                    reply_markup=render_keyboard(reply.keyboard),
                )
            except TelegramError:
                logger.exception("Failed to send reply to chat %s.", reply.chat_id)

    return on_text


def make_message_handler(router: MessageRouter) -> MessageHandler:
    # New text messages only: an edited message is not a new input and must not be routed again.
    return MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT, make_message_callback(router))


async def _run_telegram_bot(router: MessageRouter, stop_event: asyncio.Event) -> None:
    """
    Telegram connector (async):

    init -> handlers -> polling -> wait for stop

    Shutdown model:
    - main thread sets stop_event via loop.call_soon_threadsafe(stop_event.set)
    """
    settings = router.state.settings
    application = create_application(settings)
    if application is None:
        logger.error("Telegram application creation failed; connector will stop.")
        return

    application.add_handler(make_message_handler(router))

    poll_timeout = int(getattr(settings, "telegram_poll_timeout", 60))

    try:
        async with application:
            await application.start()
            await application.updater.start_polling(timeout=poll_timeout)
            logger.info("Telegram polling started (timeout=%ss).", poll_timeout)

            await stop_event.wait()

            await application.updater.stop()
            await application.stop()
    except asyncio.CancelledError:
        logger.info("Telegram connector cancelled.")
    except Exception:
        logger.exception("Telegram connector crashed.")
    finally:
        logger.info("Telegram connector stopped.")


@dataclass
class TelegramBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            logger.debug("Failed to signal Telegram stop (loop closed).", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_telegram_in_background(router: MessageRouter) -> TelegramBackgroundRunner | None:
    """
    Start the Telegram connector in a background thread (so the console REPL can run in parallel).

    The console REPL blocks on input(); the Telegram connector is async and gets its own event loop.
    """
    settings = router.state.settings
    if not getattr(settings, "telegram_enabled", False):
        logger.info("Telegram connector disabled, not starting.")
        return None

    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_run_telegram_bot(router, stop_event))
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="telegram-connector", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Telegram thread did not initialize properly.")
        return None

    logger.info("Telegram background thread started.")
    return TelegramBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
