# src/taskdesk/cli/render.py

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..core.present import urgency_tier
from ..core.view_model import EditMode, Editing
from ..tasks.task_models import Task, UrgencyTier

TIER_LABELS: dict[UrgencyTier, str] = {
    UrgencyTier.OVERDUE: "OVERDUE",
    UrgencyTier.CRITICAL: "DUE SOON",
    UrgencyTier.WARNING: "UPCOMING",
    UrgencyTier.NORMAL: "",
    UrgencyTier.COMPLETED: "done",
}


def _thresholds(settings) -> dict[str, int]:
    return {
        "critical_days": int(getattr(settings, "critical_days", 3)),
        "warning_days": int(getattr(settings, "warning_days", 10)),
    }


def format_task_row(task: Task, today: date, settings=None) -> str:
    tier = urgency_tier(task, today, **_thresholds(settings))
    return f"{task.id:>4}  {TIER_LABELS[tier]:<9} {task.display_text()}"


def format_task_list(tasks: Sequence[Task], today: date, settings=None) -> str:
    if not tasks:
        return "No tasks match."
    return "\n".join(format_task_row(t, today, settings) for t in tasks)


def describe_mode(mode: EditMode) -> str:
    if isinstance(mode, Editing):
        return f"editing task {mode.task_id}"
    return "adding new tasks"
