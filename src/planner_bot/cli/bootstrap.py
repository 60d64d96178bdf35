# src/planner_bot/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task store, the conversation tracker and the router together.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.conversation import ConversationStateTracker
from ..core.router import MessageRouter
from ..core.state import AppState
from ..tasks.task_store import TaskStore
from .commands import registry as command_registry

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        conversations=ConversationStateTracker(),
    )


def create_router(state: AppState) -> MessageRouter:
    router = MessageRouter(state, command_registry)
    logger.debug(
        "Router ready (invalid_done_id_policy=%s).", router.invalid_done_id_policy
    )
    return router
