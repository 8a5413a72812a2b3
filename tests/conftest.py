# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskjournal.tasks.task_store import JournalStore

from .fakes import LineCollector


@pytest.fixture()
def journal_path(tmp_path: Path) -> Path:
    return tmp_path / "todo.json"


@pytest.fixture()
def store(journal_path: Path) -> JournalStore:
    return JournalStore(journal_path)


@pytest.fixture()
def emit() -> LineCollector:
    return LineCollector()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskjournal",
        log_level="WARNING",
        log_dir=None,
        journal_file=tmp_path / "default.json",
        atomic_writes=False,
    )


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty directory with no TASKJOURNAL_* variables set."""
    for name in (
        "TASKJOURNAL_APP_NAME",
        "TASKJOURNAL_LOG_LEVEL",
        "TASKJOURNAL_LOG_DIR",
        "TASKJOURNAL_JOURNAL_FILE",
        "TASKJOURNAL_ATOMIC_WRITES",
    ):
        # setenv first so monkeypatch restores anything a test (or .env) sets later
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
