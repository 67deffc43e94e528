# tests/test_present.py

from __future__ import annotations

from datetime import date, timedelta

import pytest

from taskdesk.core.present import present, urgency_tier
from taskdesk.tasks.task_models import Priority, SortMode, StatusFilter, Task, UrgencyTier

TODAY = date(2026, 5, 10)


def _task(tid: int, desc: str, prio: Priority, due: date, done: date | None = None) -> Task:
    return Task(id=tid, description=desc, priority=prio, due_date=due, completed_at=done)


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        _task(1, "Buy Milk", Priority.LOW, date(2026, 5, 20)),
        _task(2, "Pay rent", Priority.HIGH, date(2026, 5, 1), done=date(2026, 4, 30)),
        _task(3, "Write report", Priority.MEDIUM, date(2026, 5, 12)),
        _task(4, "milkshake party", Priority.HIGH, date(2026, 5, 11), done=date(2026, 5, 11)),
        _task(5, "Dentist", Priority.MEDIUM, date(2026, 5, 12)),
    ]


def test_status_filters_partition_the_collection(tasks: list[Task]) -> None:
    completed = present(tasks, StatusFilter.COMPLETED, "", SortMode.NONE)
    incomplete = present(tasks, StatusFilter.INCOMPLETE, "", SortMode.NONE)

    assert all(t.is_completed() for t in completed)
    assert all(not t.is_completed() for t in incomplete)
    assert {t.id for t in completed} == {2, 4}
    assert {t.id for t in completed} | {t.id for t in incomplete} == {t.id for t in tasks}
    assert not {t.id for t in completed} & {t.id for t in incomplete}


def test_all_with_no_keyword_keeps_source_order(tasks: list[Task]) -> None:
    assert present(tasks, StatusFilter.ALL, "", SortMode.NONE) == tasks


@pytest.mark.parametrize("keyword", ["milk", "MILK", "Mil", "  milk  "])
def test_search_is_case_insensitive_substring(tasks: list[Task], keyword: str) -> None:
    found = present(tasks, StatusFilter.ALL, keyword, SortMode.NONE)
    assert [t.id for t in found] == [1, 4]


def test_search_and_status_are_anded(tasks: list[Task]) -> None:
    found = present(tasks, StatusFilter.INCOMPLETE, "milk", SortMode.NONE)
    assert [t.id for t in found] == [1]


def test_no_match_returns_empty(tasks: list[Task]) -> None:
    assert present(tasks, StatusFilter.ALL, "zebra", SortMode.NONE) == []


def test_priority_desc_is_stable_for_ties() -> None:
    a = _task(10, "A", Priority.MEDIUM, TODAY)
    b = _task(11, "B", Priority.MEDIUM, TODAY)
    c = _task(12, "C", Priority.MEDIUM, TODAY)
    high = _task(13, "H", Priority.HIGH, TODAY)

    out = present([a, b, high, c], StatusFilter.ALL, "", SortMode.PRIORITY_DESC)
    assert [t.description for t in out] == ["H", "A", "B", "C"]


def test_priority_asc(tasks: list[Task]) -> None:
    out = present(tasks, StatusFilter.ALL, "", SortMode.PRIORITY_ASC)
    assert [t.id for t in out] == [1, 3, 5, 2, 4]


def test_priority_desc(tasks: list[Task]) -> None:
    out = present(tasks, StatusFilter.ALL, "", SortMode.PRIORITY_DESC)
    assert [t.id for t in out] == [2, 4, 3, 5, 1]


def test_nearest_due_date_is_stable(tasks: list[Task]) -> None:
    out = present(tasks, StatusFilter.ALL, "", SortMode.NEAREST_DUE_DATE)
    assert [t.id for t in out] == [2, 4, 3, 5, 1]


def test_present_does_not_mutate_input(tasks: list[Task]) -> None:
    before = list(tasks)
    out = present(tasks, StatusFilter.ALL, "", SortMode.PRIORITY_DESC)
    assert tasks == before
    assert out is not tasks


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (-1, UrgencyTier.OVERDUE),
        (0, UrgencyTier.CRITICAL),
        (3, UrgencyTier.CRITICAL),
        (4, UrgencyTier.WARNING),
        (10, UrgencyTier.WARNING),
        (11, UrgencyTier.NORMAL),
    ],
)
def test_urgency_tier_thresholds(days: int, expected: UrgencyTier) -> None:
    task = _task(1, "x", Priority.LOW, TODAY + timedelta(days=days))
    assert urgency_tier(task, TODAY) is expected


def test_completed_wins_over_overdue() -> None:
    task = _task(1, "x", Priority.LOW, TODAY - timedelta(days=30), done=TODAY)
    assert urgency_tier(task, TODAY) is UrgencyTier.COMPLETED


def test_urgency_thresholds_are_configurable() -> None:
    task = _task(1, "x", Priority.LOW, TODAY + timedelta(days=5))
    assert urgency_tier(task, TODAY, critical_days=7, warning_days=14) is UrgencyTier.CRITICAL
    assert urgency_tier(task, TODAY, critical_days=1, warning_days=2) is UrgencyTier.NORMAL
