# src/planner_bot/core/replies.py

"""User-facing texts and small formatting helpers shared by the router and commands."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..tasks.task_models import Task
from .ports import Keyboard

LABEL_ADD = "Add task"
LABEL_LIST = "Task list"
LABEL_DONE = "Done"
LABEL_MAIN_MENU = "Main menu"

MAIN_KEYBOARD: Keyboard = [[LABEL_ADD, LABEL_LIST, "/help", LABEL_DONE]]

GREETING = (
    "Hi! I'm your planner bot. Choose an action below or use /help to see the commands."
)
ASK_DESCRIPTION = "Please enter the task description:"
ASK_DONE_ID = "Please enter the ID of the task to complete:"
TASK_ADDED = "Task added."
INVALID_ID = "Invalid ID. Please enter a positive number."
MISSING_ADD_ARG = "Please specify a task description after /add."
EMPTY_LIST = "The task list is empty."
UNKNOWN_COMMAND = "Unknown command. Please choose an action from the menu or use /help."
INTERNAL_ERROR = "Internal error while handling a message."


def main_keyboard() -> Keyboard:
    return [list(row) for row in MAIN_KEYBOARD]


_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_task_id(raw: str) -> int | None:
    """Parse a user-typed task ID. Returns None unless it is a positive integer.

    Only ASCII digits are accepted: int() alone would also take "1_0" or "\u0661".
    """
    text = raw.strip()
    if not _TASK_ID_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def task_added_text(task: Task) -> str:
    return f"✅ Task added: {task.description} (ID: {task.id})"


def completion_text(task_id: int, ok: bool) -> str:
    # "not found" and "already done" are reported with the same message.
    if ok:
        return f"✅ Task {task_id} marked as done."
    return f"❌ Task {task_id} not found or already done."


def format_task_list(tasks: Iterable[Task]) -> str:
    lines = [
        f"ID: {t.id} - {t.description} [{'✅' if t.completed else '❌'}]"
        for t in tasks
    ]
    if not lines:
        return EMPTY_LIST
    return "\n".join(lines)
