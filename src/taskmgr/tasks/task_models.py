# src/taskmgr/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - The task ID is not a field: identity belongs to TaskStore, which keys
      tasks by integer ID.
    """

    name: str
    description: str = ""
    completed: bool = False
