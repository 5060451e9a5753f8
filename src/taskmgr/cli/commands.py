# src/taskmgr/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import persist
from ..tasks.task_store import MAX_TASK_ID, TaskNotFoundError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
INVALID_COMMAND = 'Invalid command. Type "help" for usage information.'
EMPTY_INPUT_HINT = 'Type "help" for usage information.'
INVALID_TEXT = "Invalid text: input is not valid UTF-8."

_ID_RE = re.compile(r"[+-]?[0-9]+")


class CommandRegistry:
    """Command-word registry used by the console connector (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        help_text: str,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._usage[key] = usage
        self._help[key] = help_text

    def names(self) -> list[str]:
        return list(self._handlers)

    def usage_error(self, name: str) -> str:
        return f"Invalid usage of '{name}'. Usage: {self._usage[name]}"

    def handle(self, state: AppState, tokens: list[str]) -> str:
        """
        Dispatch tokenized input. tokens[0] is the command word (case-insensitive),
        the rest are passed to the handler as args.
        """
        if not tokens:
            return EMPTY_INPUT_HINT

        name = tokens[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", tokens[0])
            return INVALID_COMMAND

        return handler(state, tokens[1:])

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {self._usage[name]} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(raw: str) -> int | None:
    """Signed 32-bit integer or None; anything wider is a usage error."""
    raw = raw.strip()
    if not _ID_RE.fullmatch(raw):
        return None
    # Bound the digit count before int() so huge inputs stay cheap.
    if len(raw.lstrip("+-").lstrip("0")) > len(str(MAX_TASK_ID)):
        return None
    task_id = int(raw)
    if not -MAX_TASK_ID - 1 <= task_id <= MAX_TASK_ID:
        return None
    return task_id


def _with_save(state: AppState, reply: str) -> str:
    """Persist after a mutation; append the save error to the reply, if any."""
    error = persist(state)
    if error:
        return f"{reply}\n{error}"
    return reply


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    add "name"                 -> new task, empty description
    add "name" "description"   -> new task with description
    """
    if len(args) not in (1, 2):
        return registry.usage_error("add")

    name = args[0]
    description = args[1] if len(args) == 2 else ""
    try:
        task_id = state.store.add(name, description)
    except UnicodeEncodeError:
        return INVALID_TEXT
    except ValueError:
        return registry.usage_error("add")

    logger.info("Task %s added", task_id)
    return _with_save(state, f'Task "{name}" added with ID {task_id}')


def cmd_list(state: AppState, args: list[str]) -> str:
    if len(state.store) == 0:
        return "No tasks in the list."

    lines = []
    for task_id, task in state.store.items():
        mark = "x" if task.completed else " "
        lines.append(f"{task_id}. [{mark}] {task.name}: {task.description}")
    return "\n".join(lines)


def cmd_complete(state: AppState, args: list[str]) -> str:
    """Toggle the completed flag (running it twice restores the task)."""
    task_id = _parse_task_id(args[0]) if len(args) == 1 else None
    if task_id is None:
        return registry.usage_error("complete")

    try:
        state.store.toggle(task_id)
    except TaskNotFoundError as e:
        return str(e)

    return _with_save(state, f"Status of task {task_id} changed.")


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args[0]) if len(args) == 1 else None
    if task_id is None:
        return registry.usage_error("delete")

    try:
        state.store.delete(task_id)
    except TaskNotFoundError as e:
        return str(e)

    logger.info("Task %s deleted", task_id)
    return _with_save(state, f"Task {task_id} deleted.")


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    edit <id> "name"                 -> rename, keep description
    edit <id> "name" "description"   -> rename and replace description
    """
    task_id = _parse_task_id(args[0]) if len(args) >= 2 else None
    if task_id is None:
        return registry.usage_error("edit")

    new_name = args[1]
    new_description = args[2] if len(args) >= 3 else None
    try:
        state.store.edit(task_id, new_name, new_description)
    except TaskNotFoundError as e:
        return str(e)
    except UnicodeEncodeError:
        return INVALID_TEXT
    except ValueError:
        return registry.usage_error("edit")

    return _with_save(state, f"Task {task_id} updated.")


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_exit(state: AppState, args: list[str]) -> str:
    """Final save; the console loop stops after this command."""
    error = persist(state)
    return error or "Goodbye."


registry.register("add", cmd_add, usage='add "task_name" ["description"]', help_text="Add a new task")
registry.register("list", cmd_list, usage="list", help_text="List all tasks")
registry.register(
    "complete",
    cmd_complete,
    usage="complete <task_id>",
    help_text="Toggle a task between complete and not complete",
)
registry.register("delete", cmd_delete, usage="delete <task_id>", help_text="Delete a task")
registry.register(
    "edit",
    cmd_edit,
    usage='edit <task_id> "new_name" ["new_description"]',
    help_text="Edit a task (description is kept when omitted)",
)
registry.register("help", cmd_help, usage="help", help_text="Show this help")
registry.register(EXIT_COMMAND, cmd_exit, usage="exit", help_text="Save and exit")
