# src/planner_bot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps connectors/storage swappable and makes testing easier.
"""

from dataclasses import dataclass
from typing import Protocol

from ..tasks.task_models import CompletionResult, Task

Keyboard = list[list[str]]
# Rows of button labels; connectors render them in their own way.


@dataclass(frozen=True, slots=True)
class Reply:
    """One outbound send request produced by the router."""

    chat_id: int
    text: str
    keyboard: Keyboard | None = None


class TaskRepo(Protocol):
    def create_task(self, description: str) -> Task: ...
    def complete_task(self, task_id: int) -> bool: ...
    def try_complete_task(self, task_id: int) -> CompletionResult: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
