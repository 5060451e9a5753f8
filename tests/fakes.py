# tests/fakes.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from taskmgr.tasks.task_file import TaskFileError
from taskmgr.tasks.task_models import Task


class FakeTaskRepo:
    """
    In-memory TaskRepo for unit tests.

    - Captures every save (as a detached copy) for assertions
    - Can be told to fail loads or saves
    """

    def __init__(
        self,
        tasks: Mapping[int, Task] | None = None,
        *,
        fail_load: str | None = None,
        fail_save: str | None = None,
    ) -> None:
        self.tasks = dict(tasks or {})
        self.fail_load = fail_load
        self.fail_save = fail_save
        self.saves: list[dict[int, Task]] = []

    def load(self) -> dict[int, Task]:
        if self.fail_load:
            raise TaskFileError(self.fail_load)
        return {task_id: replace(task) for task_id, task in self.tasks.items()}

    def save(self, tasks: Mapping[int, Task]) -> None:
        if self.fail_save:
            raise TaskFileError(self.fail_save)
        snapshot = {task_id: replace(task) for task_id, task in tasks.items()}
        self.saves.append(snapshot)
        self.tasks = snapshot

    @property
    def save_count(self) -> int:
        return len(self.saves)
