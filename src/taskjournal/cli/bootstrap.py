# src/taskjournal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once per invocation,
- resolves which journal file to use,
- builds the JournalStore the commands operate on.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..tasks.task_store import JournalStore

logger = logging.getLogger(__name__)


def resolve_journal_path(journal_file: str | Path | None, settings: Settings) -> Path:
    """An explicit --journal_file wins over TASKJOURNAL_JOURNAL_FILE (default todo.json)."""
    if journal_file is not None and str(journal_file).strip() != "":
        return Path(journal_file).expanduser()
    return settings.journal_file


def create_store(*, settings: Settings | None = None, journal_file: str | Path | None = None) -> JournalStore:
    """
    Create the JournalStore for this invocation.

    Keeping settings injectable makes the CLI easy to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = resolve_journal_path(journal_file, settings)
    logger.debug("Using journal file %s", path)
    return JournalStore(path, atomic_writes=settings.atomic_writes)
