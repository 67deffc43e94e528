# src/taskdesk/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import IntEnum, StrEnum

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class TaskValidationError(ValueError):
    """User input rejected before any state change (empty description, bad date, ...)."""


class Priority(IntEnum):
    """Task priority; the integer value is the sort ordinal (Low < Medium < High)."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, raw: str | int | None) -> Priority:
        """
        Accepts labels ("high"), single-letter aliases ("h") and ordinals (3 / "3").
        """
        if isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return cls(raw)
            except ValueError:
                raise TaskValidationError(f"Unknown priority: {raw}") from None

        if raw is not None and not isinstance(raw, str):
            raise TaskValidationError(f"Unknown priority: {raw!r}. Use low, medium or high.")

        text = (raw or "").strip().lower()
        if text.isdigit():
            return cls.parse(int(text))
        for member in cls:
            if text in (member.name.lower(), member.name[0].lower()):
                return member
        raise TaskValidationError(f"Unknown priority: {raw!r}. Use low, medium or high.")


class StatusFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    @classmethod
    def parse(cls, raw: str | None) -> StatusFilter:
        text = (raw or "").strip().lower()
        aliases = {"done": cls.COMPLETED, "open": cls.INCOMPLETE, "todo": cls.INCOMPLETE}
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            raise TaskValidationError(
                f"Unknown status filter: {raw!r}. Use all, completed or incomplete."
            ) from None


class SortMode(StrEnum):
    NONE = "none"
    PRIORITY_DESC = "priority-desc"
    PRIORITY_ASC = "priority-asc"
    NEAREST_DUE_DATE = "nearest-due-date"

    @classmethod
    def parse(cls, raw: str | None) -> SortMode:
        text = (raw or "").strip().lower()
        aliases = {
            "high": cls.PRIORITY_DESC,
            "desc": cls.PRIORITY_DESC,
            "low": cls.PRIORITY_ASC,
            "asc": cls.PRIORITY_ASC,
            "due": cls.NEAREST_DUE_DATE,
            "date": cls.NEAREST_DUE_DATE,
        }
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise TaskValidationError(f"Unknown sort mode: {raw!r}. Use one of: {choices}.") from None


class UrgencyTier(StrEnum):
    OVERDUE = "overdue"
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"
    COMPLETED = "completed"


def validate_description(raw: str | None) -> str:
    text = (raw or "").strip()
    if not text:
        raise TaskValidationError("Task description is required.")
    return text


def parse_due_date(raw: str | None) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    text = (raw or "").strip()
    if not ISO_DATE_RE.fullmatch(text):
        raise TaskValidationError("Invalid date format. Use YYYY-MM-DD.")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise TaskValidationError("Invalid date format. Use YYYY-MM-DD.") from None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    priority: Priority
    due_date: date
    completed_at: date | None = None

    def is_completed(self) -> bool:
        return self.completed_at is not None

    def set_completed(self, completed: bool, today: date | None = None) -> None:
        self.completed_at = (today or date.today()) if completed else None

    def display_text(self) -> str:
        done = " [DONE]" if self.is_completed() else ""
        return f"[{self.priority.label}] {self.description} (Due: {self.due_date.isoformat()}){done}"
