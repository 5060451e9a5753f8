# src/taskmgr/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value is optional; defaults give the plain "tasks.json in the current
  directory" behaviour.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMGR"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    data_file: Path

    # ---- Console ----
    prompt: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskmgr").strip() or "taskmgr"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        data_file = _env_path(_k("DATA_FILE"), Path("tasks.json"))

        # Prompt keeps its trailing space, so no strip here.
        prompt = _env(_k("PROMPT"), "> ")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            data_file=data_file,
            prompt=prompt,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
