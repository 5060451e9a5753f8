# src/taskmgr/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from ..core.state import AppState
from .task_file import TaskFileError
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def load_task_store(repo: TaskRepo) -> tuple[TaskStore, str | None]:
    """
    Build the startup TaskStore from the repo.

    Never raises for storage problems: a corrupt or unreadable file gives an
    empty store plus a user-facing message.
    """
    try:
        tasks = repo.load()
    except TaskFileError as e:
        logger.warning("Failed to load tasks: %s", e)
        return TaskStore(), f"Error loading tasks: {e}"

    return TaskStore(tasks), None


def persist(state: AppState) -> str | None:
    """
    Save the whole store. Returns a user-facing error message on failure,
    None on success. In-memory state is kept either way.
    """
    try:
        state.repo.save(state.store.snapshot())
    except TaskFileError as e:
        logger.warning("Failed to save tasks: %s", e)
        return f"Error saving tasks: {e}"
    return None
