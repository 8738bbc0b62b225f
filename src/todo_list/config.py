# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Components receive settings by injection; tests pass their own object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    log_dir: Path

    # ---- Task file ----
    tasks_file: Path
    file_encoding: str

    # ---- Behaviour ----
    load_on_start: bool
    save_on_exit: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-list").strip() or "todo-list"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        tasks_file = _env_path(_k("TASKS_FILE"), Path("tasks.txt"))
        file_encoding = _env(_k("FILE_ENCODING"), "utf-8").strip() or "utf-8"

        load_on_start = _env_bool(_k("LOAD_ON_START"), True)
        save_on_exit = _env_bool(_k("SAVE_ON_EXIT"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_dir=log_dir,
            tasks_file=tasks_file,
            file_encoding=file_encoding,
            load_on_start=load_on_start,
            save_on_exit=save_on_exit,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
