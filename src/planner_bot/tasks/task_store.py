# src/planner_bot/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from .task_models import CompletionResult, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task registry.

    - IDs start at 1 and grow by one per create_task() call; they are never reused.
    - Tasks are kept in creation order and are never deleted.
    - Nothing survives a restart.

    Thread-safety:
    - every public method holds the store lock
    - list_tasks()/get_task() return copies, so callers cannot mutate stored records
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.info("TaskStore ready (in-memory).")

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(self, description: str) -> Task:
        # No validation here: empty and whitespace-only descriptions are stored as-is.
        with self._lock:
            task = Task(id=self._next_id, description=description, completed=False)
            self._tasks.append(task)
            self._next_id += 1

        logger.info("Task created id=%s", task.id)
        return replace(task)

    def try_complete_task(self, task_id: int) -> CompletionResult:
        with self._lock:
            for task in self._tasks:
                if task.id != task_id:
                    continue
                if task.completed:
                    result = CompletionResult.ALREADY_DONE
                    break
                task.completed = True
                result = CompletionResult.COMPLETED
                break
            else:
                result = CompletionResult.NOT_FOUND

        logger.info("Task completion id=%s result=%s", task_id, result.value)
        return result

    def complete_task(self, task_id: int) -> bool:
        """
        Mark a task done.

        Returns True only on the false -> true transition. Unknown IDs and
        already completed tasks both return False.
        """
        return self.try_complete_task(task_id) is CompletionResult.COMPLETED

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return replace(task)
        return None

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks]
