# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDESK_APP_NAME": "App display name (default: taskdesk).",
    "TASKDESK_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TASKDESK_DATA_DIR": "Local data directory (default: .local/taskdesk).",
    "TASKDESK_TASKS_PATH": "Task file path (default: <data_dir>/tasks.json).",
    "TASKDESK_LOG_DIR": "Directory for taskdesk.log (default: <data_dir>).",
    # Form defaults
    "TASKDESK_DEFAULT_DUE_DAYS": "Days from today used when /add gets '-' as due date (default: 1).",
    "TASKDESK_DEFAULT_PRIORITY": "Default priority label shown in the form (default: high).",
    "TASKDESK_DEFAULT_SORT": (
        "Initial list order: none, priority-desc, priority-asc or nearest-due-date (default: nearest-due-date)."
    ),
    # Urgency tiers
    "TASKDESK_CRITICAL_DAYS": "Tasks due within this many days are DUE SOON (default: 3).",
    "TASKDESK_WARNING_DAYS": "Tasks due within this many days are UPCOMING (default: 10).",
    # Console
    "TASKDESK_CONFIRM_DESTRUCTIVE": "Ask before /rm and /clear (true/false, default: true).",
}
