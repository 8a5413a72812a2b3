# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Command-line options override these values where both exist.
"""

ENV_VARS = {
    # App / logging
    "TASKJOURNAL_APP_NAME": "App display name (default: taskjournal).",
    "TASKJOURNAL_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKJOURNAL_LOG_DIR": "Directory for taskjournal.log (default: unset, no log file).",
    # Journal
    "TASKJOURNAL_JOURNAL_FILE": "Journal file used when --journal_file is not given (default: todo.json).",
    "TASKJOURNAL_ATOMIC_WRITES": (
        "Write to a temporary file and rename it over the journal instead of "
        "truncating in place (true/false, default: false)."
    ),
}
