# src/planner_bot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CompletionResult(StrEnum):
    """
    Outcome of a completion attempt.

    Notes:
    - TaskStore.complete_task() collapses NOT_FOUND and ALREADY_DONE into False;
      callers that need to tell them apart use try_complete_task().
    """

    COMPLETED = "completed"
    NOT_FOUND = "not_found"
    ALREADY_DONE = "already_done"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
