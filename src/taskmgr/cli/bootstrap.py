# src/taskmgr/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the JSON task file into AppState,
- loads the task store (never fatal).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_api import load_task_store
from ..tasks.task_file import JsonTaskFile

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, repo: TaskRepo | None = None) -> tuple[AppState, str | None]:
    """
    Create AppState from the provided settings.

    Returns the state plus an optional user-facing load error message.
    Settings and repo are injectable so tests never touch real files.
    """
    if settings is None:
        settings = get_settings()

    if repo is None:
        repo = JsonTaskFile(settings.data_file)

    store, load_error = load_task_store(repo)
    logger.info("Task store ready: %d tasks, next id %d", len(store), store.next_id)

    return AppState(settings=settings, store=store, repo=repo), load_error
