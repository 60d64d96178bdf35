# src/planner_bot/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .conversation import ConversationStateTracker
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo
    conversations: ConversationStateTracker

    # Serializes message handling across connectors (console thread + Telegram thread).
    lock: threading.RLock = field(default_factory=threading.RLock)
