# src/taskdesk/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from ..core.ports import TaskRepo
from .task_models import Priority, Task, validate_description

logger = logging.getLogger(__name__)


def next_task_id(tasks: Iterable[Task]) -> int:
    """max(existing ids) + 1, or 1 for an empty collection."""
    return max((t.id for t in tasks), default=0) + 1


class TaskService:
    """
    Load-mutate-save operations over a TaskRepo.

    Every mutation reads the full collection, applies one change and writes the
    full collection back. Unknown ids are silent no-ops (None / False).
    """

    def __init__(self, repo: TaskRepo) -> None:
        self.repo = repo
        self.last_save_ok = True

    def _save(self, tasks: list[Task]) -> None:
        self.last_save_ok = self.repo.save_all(tasks)
        if not self.last_save_ok:
            logger.error("Task changes were not persisted (%d tasks in memory).", len(tasks))

    # ---- queries ----

    def list_tasks(self) -> list[Task]:
        return self.repo.load_all()

    def get_task(self, task_id: int) -> Task | None:
        return next((t for t in self.repo.load_all() if t.id == task_id), None)

    # ---- mutations ----

    def add_task(self, *, description: str, priority: Priority, due_date: date) -> Task:
        text = validate_description(description)
        tasks = self.repo.load_all()
        task = Task(
            id=next_task_id(tasks),
            description=text,
            priority=Priority(priority),
            due_date=due_date,
        )
        tasks.append(task)
        self._save(tasks)
        logger.debug("Task added id=%s priority=%s due=%s", task.id, task.priority.label, due_date)
        return task

    def update_task(
        self,
        task_id: int,
        *,
        description: str,
        priority: Priority,
        due_date: date,
    ) -> Task | None:
        """
        Replace the record with a new one carrying the same id and completion
        state. The record keeps its position in the collection.
        """
        text = validate_description(description)
        tasks = self.repo.load_all()
        for i, old in enumerate(tasks):
            if old.id != task_id:
                continue
            updated = Task(
                id=old.id,
                description=text,
                priority=Priority(priority),
                due_date=due_date,
                completed_at=old.completed_at,
            )
            tasks[i] = updated
            self._save(tasks)
            logger.debug("Task updated id=%s", task_id)
            return updated

        logger.debug("update_task: id=%s not found", task_id)
        return None

    def toggle_completed(self, task_id: int, today: date | None = None) -> Task | None:
        tasks = self.repo.load_all()
        task = next((t for t in tasks if t.id == task_id), None)
        if task is None:
            logger.debug("toggle_completed: id=%s not found", task_id)
            return None

        task.set_completed(not task.is_completed(), today)
        self._save(tasks)
        logger.debug("Task id=%s completed=%s", task_id, task.is_completed())
        return task

    def delete_task(self, task_id: int) -> bool:
        tasks = self.repo.load_all()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            logger.debug("delete_task: id=%s not found", task_id)
            return False
        self._save(remaining)
        logger.debug("Task deleted id=%s", task_id)
        return True

    def clear_all(self) -> None:
        self._save([])
        logger.info("All tasks cleared.")
