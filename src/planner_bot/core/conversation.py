# src/planner_bot/core/conversation.py

"""
Per-chat pending-input state.

A chat with no entry is in the default mode: its text is read as a menu label
or a slash command. An entry means the next text from that chat is data for an
operation in progress. Entries never expire; they are removed by the router
once the input is consumed (or overwritten by a new flow).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversationState:
    awaiting_description: bool = False
    awaiting_done_id: bool = False


class ConversationStateTracker:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._states: dict[int, ConversationState] = {}

    def set_awaiting_description(self, chat_id: int) -> None:
        with self._lock:
            self._states[chat_id] = ConversationState(awaiting_description=True)
        logger.debug("chat=%s awaiting description", chat_id)

    def set_awaiting_done_id(self, chat_id: int) -> None:
        with self._lock:
            self._states[chat_id] = ConversationState(awaiting_done_id=True)
        logger.debug("chat=%s awaiting done id", chat_id)

    def consume(self, chat_id: int) -> ConversationState | None:
        """Peek at the pending state for a chat (no side effects)."""
        with self._lock:
            state = self._states.get(chat_id)
            return replace(state) if state is not None else None

    def clear(self, chat_id: int) -> None:
        with self._lock:
            removed = self._states.pop(chat_id, None)
        if removed is not None:
            logger.debug("chat=%s pending state cleared", chat_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
