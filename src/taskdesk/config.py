# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDESK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    # ---- Form defaults ----
    default_due_days: int
    default_priority: str
    default_sort: str

    # ---- Urgency thresholds (days until due) ----
    critical_days: int
    warning_days: int

    # ---- Console ----
    confirm_destructive: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdesk").strip() or "taskdesk"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdesk"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        default_due_days = max(0, _env_int(_k("DEFAULT_DUE_DAYS"), 1))
        default_priority = _env(_k("DEFAULT_PRIORITY"), "high").strip().lower() or "high"
        default_sort = (
            _env(_k("DEFAULT_SORT"), "nearest-due-date").strip().lower() or "nearest-due-date"
        )

        critical_days = _env_int(_k("CRITICAL_DAYS"), 3)
        warning_days = max(critical_days, _env_int(_k("WARNING_DAYS"), 10))

        confirm_destructive = _env_bool(_k("CONFIRM_DESTRUCTIVE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
            default_due_days=default_due_days,
            default_priority=default_priority,
            default_sort=default_sort,
            critical_days=critical_days,
            warning_days=warning_days,
            confirm_destructive=confirm_destructive,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
