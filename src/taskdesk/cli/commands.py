# src/taskdesk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.state import AppState
from ..core.view_model import Editing
from ..tasks.task_models import (
    Priority,
    SortMode,
    StatusFilter,
    TaskValidationError,
    parse_due_date,
)
from .render import describe_mode, format_task_list

Confirm = Callable[[str], bool]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Confirm | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._maxsplit: dict[str, int] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        maxsplit: int = -1,
    ) -> None:
        """
        maxsplit limits how many leading words become separate args; the rest of
        the line is passed as the last arg with its inner spacing intact.
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._maxsplit[key] = maxsplit
        for alias in aliases:
            self._handlers[alias.lower()] = handler
            self._maxsplit[alias.lower()] = maxsplit

    def handle(
        self,
        state: AppState,
        line: str,
        confirm: Confirm | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        Input errors are returned as the reply; nothing is changed.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = rest.split(maxsplit=self._maxsplit.get(name, -1))

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, confirm)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskValidationError as e:
            logger.debug("Rejected /%s %s: %s", name, args, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str], usage: str) -> int:
    if not args:
        raise TaskValidationError(f"Usage: {usage}")
    try:
        return int(args[0])
    except ValueError:
        raise TaskValidationError(f"Task id must be a number, got {args[0]!r}.") from None


def _confirmed(state: AppState, confirm: Confirm | None, question: str) -> bool:
    if not getattr(state.settings, "confirm_destructive", True):
        return True
    if confirm is None:
        return False
    return bool(confirm(question))


def _listing(state: AppState) -> str:
    return format_task_list(state.view.visible, date.today(), state.settings)


def _with_save_warning(state: AppState, text: str) -> str:
    if state.tasks.last_save_ok:
        return text
    return f"{text}\nWARNING: changes could not be saved to disk (see log)."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <priority|-> <due|-> <description...>

    Submits the form: adds a task, or saves the task being edited.
    "-" picks the form default (priority and due-date offset from settings).
    """
    if len(args) < 3:
        raise TaskValidationError(
            "Usage: /add <low|medium|high|-> <YYYY-MM-DD|-> <description...>"
        )

    priority = state.view.default_priority if args[0] == "-" else Priority.parse(args[0])
    due = state.view.default_due_date() if args[1] == "-" else parse_due_date(args[1])
    description = args[2]

    editing = isinstance(state.view.edit_mode, Editing)
    task = state.view.submit(description=description, priority=priority, due_date=due)
    if task is None:
        return "Task not found for update. Use /cancel to stop editing."

    verb = "updated" if editing else "added"
    return _with_save_warning(state, f"Task {verb}: {task.display_text()}\n{_listing(state)}")


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "/edit <id>")
    task = state.view.begin_edit(task_id)
    if task is None:
        return f"No task with id {task_id}."
    return (
        f"Editing task {task.id}: {task.display_text()}\n"
        f"Submit with: /add {task.priority.label.lower()} {task.due_date.isoformat()} "
        f"{task.description}\n"
        "Use /cancel to stop editing."
    )


def cmd_cancel(state: AppState, args: list[str]) -> str:
    state.view.cancel_edit()
    return "Edit cancelled."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "/done <id>")
    task = state.view.toggle_completed(task_id)
    if task is None:
        return _listing(state)
    status = "completed" if task.is_completed() else "not completed"
    return _with_save_warning(state, f"Task {task.id} marked {status}.\n{_listing(state)}")


def cmd_rm(state: AppState, args: list[str], confirm: Confirm | None = None) -> str:
    task_id = _parse_id(args, "/rm <id>")
    task = state.tasks.get_task(task_id)
    if task is None:
        return f"No task with id {task_id}."

    if not _confirmed(state, confirm, f'Are you sure you want to delete: "{task.description}"?'):
        return "Delete cancelled."

    state.view.delete(task_id)
    return _with_save_warning(state, f"Task {task_id} deleted.\n{_listing(state)}")


def cmd_clear(state: AppState, args: list[str], confirm: Confirm | None = None) -> str:
    if not _confirmed(state, confirm, "This will permanently clear ALL tasks! Are you sure?"):
        return "Clear cancelled."

    state.view.clear_all()
    return _with_save_warning(state, "All tasks cleared.")


def cmd_search(state: AppState, args: list[str]) -> str:
    state.view.set_search_keyword(args[0] if args else "")
    return _listing(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Status filter is {state.view.status_filter.value}. Use /filter all|completed|incomplete."
    state.view.set_status_filter(StatusFilter.parse(args[0]))
    return _listing(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        choices = "|".join(m.value for m in SortMode)
        return f"Sort mode is {state.view.sort_mode.value}. Use /sort {choices}."
    state.view.set_sort_mode(SortMode.parse(args[0]))
    return _listing(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    state.view.refresh()
    return _listing(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    view = state.view
    keyword = view.search_keyword.strip() or "(none)"
    return (
        "Status:\n"
        f"  Tasks file: {getattr(state.settings, 'tasks_path', '?')}\n"
        f"  Total tasks: {len(state.tasks.list_tasks())}\n"
        f"  Mode: {describe_mode(view.edit_mode)}\n"
        f"  Filter: {view.status_filter.value}  Search: {keyword}  Sort: {view.sort_mode.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task (or save the one being edited): /add <priority> <due|-> <description>.",
    aliases=["update", "save"],
    maxsplit=2,
)
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.")
registry.register("cancel", cmd_cancel, help_text="Stop editing and go back to adding tasks.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task (asks first): /rm <id>.", aliases=["delete", "del"])
registry.register("clear", cmd_clear, help_text="Delete ALL tasks (asks first).")
registry.register(
    "search",
    cmd_search,
    help_text="Filter by keyword: /search [words] (empty clears).",
    maxsplit=0,
)
registry.register("filter", cmd_filter, help_text="Status filter: /filter all | completed | incomplete.")
registry.register(
    "sort",
    cmd_sort,
    help_text="Sort: /sort none | priority-desc | priority-asc | nearest-due-date.",
)
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show current file, mode and view settings.")
