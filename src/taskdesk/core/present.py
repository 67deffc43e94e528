# src/taskdesk/core/present.py

"""
Filter/sort pipeline and urgency classification.

Both are pure: they never touch the store and never mutate the tasks passed in.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..tasks.task_models import SortMode, StatusFilter, Task, UrgencyTier

DEFAULT_CRITICAL_DAYS = 3
DEFAULT_WARNING_DAYS = 10


def _status_matches(task: Task, status_filter: StatusFilter) -> bool:
    if status_filter == StatusFilter.COMPLETED:
        return task.is_completed()
    if status_filter == StatusFilter.INCOMPLETE:
        return not task.is_completed()
    return True


def present(
    tasks: Iterable[Task],
    status_filter: StatusFilter = StatusFilter.ALL,
    search_keyword: str = "",
    sort_mode: SortMode = SortMode.NONE,
) -> list[Task]:
    """
    Return the ordered subset of `tasks` to display.

    Status and keyword predicates are ANDed. All sorts are stable, so ties keep
    their source order.
    """
    needle = (search_keyword or "").strip().lower()
    out = [
        t
        for t in tasks
        if _status_matches(t, status_filter) and needle in t.description.lower()
    ]

    if sort_mode == SortMode.PRIORITY_DESC:
        out.sort(key=lambda t: int(t.priority), reverse=True)
    elif sort_mode == SortMode.PRIORITY_ASC:
        out.sort(key=lambda t: int(t.priority))
    elif sort_mode == SortMode.NEAREST_DUE_DATE:
        out.sort(key=lambda t: t.due_date)
    return out


def urgency_tier(
    task: Task,
    today: date,
    *,
    critical_days: int = DEFAULT_CRITICAL_DAYS,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> UrgencyTier:
    if task.is_completed():
        return UrgencyTier.COMPLETED

    days_left = (task.due_date - today).days
    if days_left < 0:
        return UrgencyTier.OVERDUE
    if days_left <= critical_days:
        return UrgencyTier.CRITICAL
    if days_left <= warning_days:
        return UrgencyTier.WARNING
    return UrgencyTier.NORMAL
