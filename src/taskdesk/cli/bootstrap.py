# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store, service and view model into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.view_model import TaskListViewModel
from ..tasks.task_api import TaskService
from ..tasks.task_models import Priority, SortMode, TaskValidationError
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def _default_priority(settings) -> Priority:
    raw = getattr(settings, "default_priority", "high")
    try:
        return Priority.parse(raw)
    except TaskValidationError:
        logger.warning("Invalid default priority %r; using High.", raw)
        return Priority.HIGH


def _default_sort_mode(settings) -> SortMode:
    raw = getattr(settings, "default_sort", SortMode.NEAREST_DUE_DATE.value)
    try:
        return SortMode.parse(raw)
    except TaskValidationError:
        logger.warning("Invalid default sort %r; using nearest-due-date.", raw)
        return SortMode.NEAREST_DUE_DATE


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = JsonTaskStore(settings.tasks_path)
    service = TaskService(store)
    view = TaskListViewModel(
        service,
        default_due_offset_days=int(getattr(settings, "default_due_days", 1)),
        default_priority=_default_priority(settings),
        default_sort_mode=_default_sort_mode(settings),
    )
    return AppState(settings=settings, task_store=store, tasks=service, view=view)
