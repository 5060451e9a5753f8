# src/taskmgr/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Command handlers depend on the TaskRepo Protocol instead of the JSON file,
so tests can swap in an in-memory repo.
"""

from collections.abc import Mapping
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-store persistence: read everything at startup, overwrite on save."""

    def load(self) -> dict[int, Task]: ...

    def save(self, tasks: Mapping[int, Task]) -> None: ...
