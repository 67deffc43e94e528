# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service and view model depend on this Protocol instead of the JSON store,
so an incremental store (SQLite, ...) can be swapped in without touching callers.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection repository: read everything, write everything."""

    def load_all(self) -> list[Task]: ...

    def save_all(self, tasks: Iterable[Task]) -> bool: ...
