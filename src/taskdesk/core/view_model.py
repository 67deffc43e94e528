# src/taskdesk/core/view_model.py

"""
List/form view model.

Holds everything the presentation layer needs between user actions:
- current filter / keyword / sort selection
- the explicit edit mode (Creating or Editing(task_id))
- the list currently on screen

Front-ends subscribe to edit-mode transitions instead of flipping widget state
(button labels, hidden id fields) themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta

from ..tasks.task_api import TaskService
from ..tasks.task_models import Priority, SortMode, StatusFilter, Task
from .present import present

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Creating:
    pass


@dataclass(frozen=True, slots=True)
class Editing:
    task_id: int


EditMode = Creating | Editing
ModeListener = Callable[[EditMode, EditMode], None]


class TaskListViewModel:
    def __init__(
        self,
        service: TaskService,
        *,
        default_due_offset_days: int = 1,
        default_priority: Priority = Priority.HIGH,
        default_sort_mode: SortMode = SortMode.NEAREST_DUE_DATE,
    ) -> None:
        self.service = service
        self.default_due_offset_days = default_due_offset_days
        self.default_priority = default_priority

        self.status_filter = StatusFilter.ALL
        self.search_keyword = ""
        self.sort_mode = default_sort_mode
        self.edit_mode: EditMode = Creating()
        self.visible: list[Task] = []

        self._mode_listeners: list[ModeListener] = []

    # ---- edit mode ----

    def add_mode_listener(self, listener: ModeListener) -> None:
        self._mode_listeners.append(listener)

    def _set_mode(self, mode: EditMode) -> None:
        old = self.edit_mode
        if old == mode:
            return
        self.edit_mode = mode
        logger.debug("Edit mode %s -> %s", old, mode)
        for listener in list(self._mode_listeners):
            listener(old, mode)

    def default_due_date(self, today: date | None = None) -> date:
        return (today or date.today()) + timedelta(days=self.default_due_offset_days)

    def begin_edit(self, task_id: int) -> Task | None:
        """Switch to Editing(task_id) and return the record to pre-fill the form."""
        task = self.service.get_task(task_id)
        if task is None:
            return None
        self._set_mode(Editing(task.id))
        return task

    def cancel_edit(self) -> None:
        self._set_mode(Creating())

    def submit(self, *, description: str, priority: Priority, due_date: date) -> Task | None:
        """
        Form submit: add in Creating mode, replace the record in Editing mode.

        Returns None if the record being edited no longer exists (mode is kept,
        so the user can cancel). TaskValidationError propagates unchanged.
        """
        mode = self.edit_mode
        if isinstance(mode, Editing):
            task = self.service.update_task(
                mode.task_id, description=description, priority=priority, due_date=due_date
            )
            if task is not None:
                self._set_mode(Creating())
        else:
            task = self.service.add_task(
                description=description, priority=priority, due_date=due_date
            )
        self.refresh()
        return task

    # ---- list actions ----

    def toggle_completed(self, task_id: int, today: date | None = None) -> Task | None:
        task = self.service.toggle_completed(task_id, today)
        self.refresh()
        return task

    def delete(self, task_id: int) -> bool:
        removed = self.service.delete_task(task_id)
        if isinstance(self.edit_mode, Editing) and self.edit_mode.task_id == task_id:
            self._set_mode(Creating())
        self.refresh()
        return removed

    def clear_all(self) -> None:
        self.service.clear_all()
        self.visible = []
        self._set_mode(Creating())

    # ---- view selection ----

    def set_status_filter(self, status_filter: StatusFilter) -> list[Task]:
        self.status_filter = status_filter
        return self.refresh()

    def set_search_keyword(self, keyword: str) -> list[Task]:
        self.search_keyword = keyword
        return self.refresh()

    def set_sort_mode(self, sort_mode: SortMode) -> list[Task]:
        self.sort_mode = sort_mode
        return self.refresh()

    def refresh(self) -> list[Task]:
        self.visible = present(
            self.service.list_tasks(),
            self.status_filter,
            self.search_keyword,
            self.sort_mode,
        )
        return self.visible
