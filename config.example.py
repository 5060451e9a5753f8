# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional.
"""

ENV_VARS = {
    # App / logging
    "TASKMGR_APP_NAME": "App display name used in logs (default: taskmgr).",
    "TASKMGR_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKMGR_LOG_FILE": "Optional path of a full DEBUG log file (default: no file).",
    # Storage
    "TASKMGR_DATA_FILE": "Task storage JSON file (default: tasks.json in the working directory).",
    # Console
    "TASKMGR_PROMPT": "Input prompt (default: '> ').",
}
