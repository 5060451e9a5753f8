# src/taskmgr/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import EMPTY_INPUT_HINT, EXIT_COMMAND
from ..cli.commands import registry as command_registry
from ..cli.tokenizer import tokenize
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """
    Read-eval-print loop. Ends on "exit", on end of input, or on Ctrl-C;
    the last two are treated exactly like "exit" (the store is saved).
    """
    prompt = str(getattr(state.settings, "prompt", "> "))
    logger.info("Console connector started.")

    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            print(command_registry.handle(state, [EXIT_COMMAND]))
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            print(command_registry.handle(state, [EXIT_COMMAND]))
            break

        if not line.strip():
            print(EMPTY_INPUT_HINT)
            continue

        tokens = tokenize(line)

        try:
            reply = command_registry.handle(state, tokens)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

        if tokens and tokens[0].lower() == EXIT_COMMAND:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
