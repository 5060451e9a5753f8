# src/taskmgr/tasks/task_file.py

"""
JSON persistence for the task store.

File layout (pretty-printed, UTF-8):

    {
      "1": {"name": "buy milk", "description": "2% organic", "completed": false},
      "3": {"name": "call mom", "description": "", "completed": true}
    }

Keys are decimal task IDs. The whole file is rewritten on every save.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .task_models import Task
from .task_store import MAX_TASK_ID

logger = logging.getLogger(__name__)


class TaskFileError(Exception):
    """Raised when the task file cannot be read, parsed or written."""


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "name": task.name,
        "description": task.description,
        "completed": task.completed,
    }


def _parse_id(key: str) -> int:
    # Length is checked before int() so huge keys never reach the digit limit.
    digits = key.lstrip("0")
    if not (key.isascii() and key.isdigit()) or len(digits) > len(str(MAX_TASK_ID)):
        raise TaskFileError(f"invalid task id {key[:20]!r}")
    task_id = int(key)
    if not 0 < task_id <= MAX_TASK_ID:
        raise TaskFileError(f"invalid task id {key[:20]!r}")
    return task_id


def _is_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _dict_to_task(key: str, raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TaskFileError(f"task {key}: expected an object")

    name = raw.get("name")
    description = raw.get("description", "")
    completed = raw.get("completed", False)

    if not isinstance(name, str) or not name.strip():
        raise TaskFileError(f"task {key}: 'name' must be a non-empty string")
    if not isinstance(description, str):
        raise TaskFileError(f"task {key}: 'description' must be a string")
    if not isinstance(completed, bool):
        raise TaskFileError(f"task {key}: 'completed' must be true or false")
    if not (_is_encodable(name) and _is_encodable(description)):
        raise TaskFileError(f"task {key}: text contains unpaired surrogates")

    return Task(name=name, description=description, completed=completed)


class JsonTaskFile:
    """TaskRepo backed by a single JSON file."""

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[int, Task]:
        if not self._path.exists():
            logger.debug("Task file %s does not exist; starting empty.", self._path)
            return {}

        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TaskFileError(f"cannot read {self._path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise TaskFileError(f"{self._path} is not valid JSON: {e}") from e
        except (ValueError, RecursionError) as e:
            # Oversized integer literals or pathological nesting.
            raise TaskFileError(f"{self._path} cannot be parsed: {e}") from e

        if not isinstance(data, dict):
            raise TaskFileError(f"{self._path}: expected a JSON object at top level")

        tasks: dict[int, Task] = {}
        for key, raw in data.items():
            tasks[_parse_id(key)] = _dict_to_task(key, raw)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Mapping[int, Task]) -> None:
        payload = {str(task_id): _task_to_dict(tasks[task_id]) for task_id in sorted(tasks)}
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        try:
            data = (text + "\n").encode("utf-8")
        except UnicodeEncodeError as e:
            raise TaskFileError(f"cannot encode tasks for {self._path}: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskFileError(f"cannot write {self._path}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(payload), self._path)
