# src/planner_bot/core/router.py

"""
Inbound message routing.

This module is transport-agnostic:
- connectors provide inbound (chat_id, text),
- the router decides what the text means and returns the replies to send,
- connectors decide how to deliver them (console, Telegram).

Key invariants:
- a pending-input state always wins over the command table: while a chat is
  waiting for a description or an ID, every text from it is taken as data,
- a pending state is dropped once its input is consumed (see
  invalid_done_id_policy for the malformed-ID case),
- the router never raises for user input; unknown text gets a fallback reply.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import replies
from .conversation import ConversationState
from .ports import Reply
from .state import AppState

if TYPE_CHECKING:
    from ..cli.commands import CommandRegistry

logger = logging.getLogger(__name__)


class MessageRouter:
    def __init__(self, state: AppState, commands: CommandRegistry) -> None:
        self.state = state
        self.commands = commands

    @property
    def invalid_done_id_policy(self) -> str:
        return str(getattr(self.state.settings, "invalid_done_id_policy", "keep"))

    def handle(self, chat_id: int, text: str) -> list[Reply]:
        """Process one inbound text and return the replies for the transport."""
        with self.state.lock:
            pending = self.state.conversations.consume(chat_id)
            if pending is not None and (pending.awaiting_description or pending.awaiting_done_id):
                return [self._handle_pending(chat_id, text, pending)]

            reply = self.commands.handle(self.state, chat_id, text)
            if reply is not None:
                return [reply]

        logger.debug("chat=%s unknown input %r", chat_id, text)
        return [Reply(chat_id, replies.UNKNOWN_COMMAND)]

    # ---- pending-input layer ----

    def _handle_pending(self, chat_id: int, text: str, pending: ConversationState) -> Reply:
        if pending.awaiting_description:
            return self._consume_description(chat_id, text)
        return self._consume_done_id(chat_id, text)

    def _consume_description(self, chat_id: int, text: str) -> Reply:
        # Stored verbatim, whitespace-only text included.
        task = self.state.task_store.create_task(text)
        self.state.conversations.clear(chat_id)
        logger.info("chat=%s added task id=%s via prompt", chat_id, task.id)
        return Reply(chat_id, replies.TASK_ADDED, replies.main_keyboard())

    def _consume_done_id(self, chat_id: int, text: str) -> Reply:
        task_id = replies.parse_task_id(text)
        if task_id is None:
            if self.invalid_done_id_policy == "clear":
                self.state.conversations.clear(chat_id)
            logger.info(
                "chat=%s invalid task id %r (policy=%s)", chat_id, text, self.invalid_done_id_policy
            )
            return Reply(chat_id, replies.INVALID_ID)

        ok = self.state.task_store.complete_task(task_id)
        self.state.conversations.clear(chat_id)
        return Reply(chat_id, replies.completion_text(task_id, ok), replies.main_keyboard())
