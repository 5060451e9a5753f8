"""
Interactive command-line task manager.

Components:
- tasks/: Task model, in-memory TaskStore, JSON task file, load/save helpers
- cli/: tokenizer, command registry + handlers, bootstrap, entrypoint
- connectors/console_connector.py: the read-eval-print loop
"""
