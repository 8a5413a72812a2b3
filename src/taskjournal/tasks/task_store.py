# src/taskjournal/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .task_models import Task, decode_tasks, encode_tasks

logger = logging.getLogger(__name__)

EMPTY_NOTICE = "Empty to-do list"

LineEmitter = Callable[[str], None]


def _with_tag(tasks: list[Task], tag: str | None) -> list[Task]:
    if tag is None:
        return tasks
    return [t for t in tasks if t.has_tag(tag)]


class InvalidTaskIndexError(IndexError):
    """Raised by remove() when the 1-based index is outside the journal."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Invalid Task ID {index} (journal has {count} task(s))")


class JournalStore:
    """
    JSON journal store.

    The whole journal is one JSON array in one file:
    - every operation loads the full list, mutates it in memory, and writes it back
    - each method opens (and closes) the file itself, no handle outlives a phase

    Concurrency:
    - none; two processes racing on the same path can lose or truncate data.
      atomic_writes=True replaces the file via rename instead of truncating it,
      which narrows (but does not remove) that window.
    """

    def __init__(self, path: str | Path = "todo.json", *, atomic_writes: bool = False) -> None:
        self._path = Path(path)
        self._atomic_writes = atomic_writes
        logger.debug("JournalStore ready path=%s atomic_writes=%s", self._path, atomic_writes)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def atomic_writes(self) -> bool:
        return self._atomic_writes

    # ---- low-level helpers ----

    def load(self) -> list[Task]:
        """
        Read the full journal.

        The file is created when absent (parent directories are not).
        An empty file is zero tasks; malformed contents raise JournalDecodeError.
        """
        # "a+" creates without truncating; rewind before reading.
        with open(self._path, "a+", encoding="utf-8") as fh:
            fh.seek(0)
            return decode_tasks(fh)

    def persist(self, tasks: list[Task]) -> None:
        """Overwrite the journal with the complete serialization of `tasks`."""
        if self._atomic_writes:
            tmp = self._path.with_name(self._path.name + ".tmp")
            with open(tmp, "w", encoding="utf-8") as fh:
                encode_tasks(tasks, fh)
            os.replace(tmp, self._path)
            return

        with open(self._path, "w", encoding="utf-8") as fh:
            encode_tasks(tasks, fh)

    # ---- public API ----

    def count(self) -> int:
        return len(self.load())

    def add(
        self,
        name: str,
        tags: list[str] | None = None,
        notes: str | None = None,
    ) -> Task:
        tasks = self.load()
        task = Task.new(name, tags=tags, notes=notes)
        tasks.append(task)
        self.persist(tasks)
        logger.debug("Task added position=%s name=%r tags=%s", len(tasks), name, task.tags)
        return task

    def remove(self, index: int) -> Task:
        """
        Delete the task at 1-based position `index`.

        Raises InvalidTaskIndexError (without writing) unless 1 <= index <= count.
        """
        tasks = self.load()
        if index < 1 or index > len(tasks):
            raise InvalidTaskIndexError(index, len(tasks))

        removed = tasks.pop(index - 1)
        self.persist(tasks)
        logger.debug("Task removed position=%s name=%r remaining=%s", index, removed.name, len(tasks))
        return removed

    def filter_tasks(self, tag: str | None = None) -> list[Task]:
        """All tasks in journal order, or only those carrying exactly `tag`."""
        return _with_tag(self.load(), tag)

    def list(self, tag: str | None = None, emit: LineEmitter = print) -> None:
        """
        Write one rendered line per matching task through `emit`.

        An empty journal emits EMPTY_NOTICE; a filter with no matches emits nothing.
        """
        tasks = self.load()
        if not tasks:
            emit(EMPTY_NOTICE)
            return

        for task in _with_tag(tasks, tag):
            emit(task.render())

    def clear(self) -> None:
        self.load()
        self.persist([])
        logger.debug("Journal cleared path=%s", self._path)
