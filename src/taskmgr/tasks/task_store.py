# src/taskmgr/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)

# IDs are kept within a signed 32-bit range.
MAX_TASK_ID = 2**31 - 1


class TaskNotFoundError(LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


def _check_text(name: str, description: str | None) -> None:
    if not name or not name.strip():
        raise ValueError("name is required")
    for text in (name, description or ""):
        # Lone surrogates (undecodable console bytes) could never be saved.
        text.encode("utf-8")


class TaskStore:
    """
    In-memory task store: integer ID -> Task.

    ID allocation:
    - next_id starts at max(existing IDs) + 1 (1 for an empty store)
    - every successful add uses next_id and bumps it by one
    - deleted IDs are never handed out again
    """

    def __init__(self, tasks: Mapping[int, Task] | None = None) -> None:
        self._tasks: dict[int, Task] = dict(tasks or {})
        self._next_id = max(self._tasks, default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def items(self) -> Iterator[tuple[int, Task]]:
        """Tasks in ascending ID order."""
        for task_id in sorted(self._tasks):
            yield task_id, self._tasks[task_id]

    def snapshot(self) -> dict[int, Task]:
        """Detached copy of the current mapping (used for persistence)."""
        return {task_id: replace(task) for task_id, task in self._tasks.items()}

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def add(self, name: str, description: str = "") -> int:
        _check_text(name, description)

        task_id = self._next_id
        self._tasks[task_id] = Task(name=name, description=description)
        self._next_id += 1
        logger.debug("Task added id=%s next_id=%s", task_id, self._next_id)
        return task_id

    def toggle(self, task_id: int) -> Task:
        task = self._require(task_id)
        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task_id, task.completed)
        return task

    def delete(self, task_id: int) -> Task:
        task = self._require(task_id)
        del self._tasks[task_id]
        logger.debug("Task deleted id=%s", task_id)
        return task

    def edit(self, task_id: int, name: str, description: str | None = None) -> Task:
        """Replace the name; replace the description only when one is given."""
        _check_text(name, description)

        task = self._require(task_id)
        task.name = name
        if description is not None:
            task.description = description
        logger.debug("Task edited id=%s description_changed=%s", task_id, description is not None)
        return task
