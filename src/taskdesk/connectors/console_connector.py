# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import date

from ..cli.commands import registry as command_registry
from ..cli.render import describe_mode, format_task_list
from ..core.state import AppState
from ..core.view_model import EditMode, Editing

logger = logging.getLogger(__name__)


def _prompt(mode: EditMode) -> str:
    if isinstance(mode, Editing):
        return f"[edit #{mode.task_id}] >>> "
    return ">>> "


def ask_yes_no(question: str) -> bool:
    """Blocking confirmation prompt; anything but y/yes is a no."""
    try:
        answer = input(f"{question} [y/N] ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer in ("y", "yes")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", getattr(state.settings, "tasks_path", "?"))
    app_name = str(getattr(state.settings, "app_name", "taskdesk"))

    def on_mode_change(old: EditMode, new: EditMode) -> None:
        print(f"[{app_name}] Now {describe_mode(new)}.")

    state.view.add_mode_listener(on_mode_change)

    print(f"[{app_name}] Type /help for commands, /exit to quit.\n")
    print(format_task_list(state.view.refresh(), date.today(), state.settings))

    while True:
        try:
            user_input = input(_prompt(state.view.edit_mode)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, confirm=ask_yes_no)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list them."
        print(response)

    logger.info("Console connector finished.")
