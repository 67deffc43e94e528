# src/taskdesk/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .task_models import Priority, Task, parse_due_date

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    Whole-file JSON task store.

    The file holds one document: {"tasks": [ {...}, ... ]} in insertion order.
    There is no patch/append API: callers load everything, mutate in memory
    and save everything back.

    Errors never escape:
    - load_all() returns [] for a missing or unreadable file
    - save_all() returns False if the write failed
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    # ---- (de)serialization ----

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "description": task.description,
            "priority": task.priority.label,
            "due_date": task.due_date.isoformat(),
            "completed_at": task.completed_at.isoformat() if task.completed_at else None,
        }

    @staticmethod
    def _dict_to_task(raw: dict[str, Any]) -> Task:
        completed_raw = raw.get("completed_at")
        description = str(raw.get("description") or "").strip()
        if not description:
            raise ValueError("empty description")
        return Task(
            id=int(raw["id"]),
            description=description,
            priority=Priority.parse(raw["priority"]),
            due_date=parse_due_date(str(raw["due_date"])),
            completed_at=parse_due_date(str(completed_raw)) if completed_raw else None,
        )

    # ---- public API ----

    def load_all(self) -> list[Task]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to load tasks from %s", self._path)
            return []

        records = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(records, list):
            logger.error("Unexpected task file layout in %s; ignoring it.", self._path)
            return []

        out: list[Task] = []
        seen: set[int] = set()
        for raw in records:
            if not isinstance(raw, dict):
                continue
            try:
                task = self._dict_to_task(raw)
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed task record in %s: %r", self._path, raw)
                continue
            if task.id in seen:
                logger.warning("Skipping duplicate task id=%s in %s", task.id, self._path)
                continue
            seen.add(task.id)
            out.append(task)

        logger.debug("Loaded %d tasks from %s", len(out), self._path)
        return out

    def save_all(self, tasks: Iterable[Task]) -> bool:
        items = [self._task_to_dict(t) for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps({"tasks": items}, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save %d tasks to %s", len(items), self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        logger.debug("Saved %d tasks to %s", len(items), self._path)
        return True
