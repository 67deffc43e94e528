# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_api import TaskService
from .ports import TaskRepo
from .view_model import TaskListViewModel


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    task_store: TaskRepo
    tasks: TaskService
    view: TaskListViewModel
