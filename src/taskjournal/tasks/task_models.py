# src/taskjournal/tasks/task_models.py

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import IO, Any

NAME_WIDTH = 50
DISPLAY_TIME_FORMAT = "%d/%m/%Y %H:%M"

# Key spelling matches journals written by earlier releases of the tool.
CREATED_AT_KEY = "creted_at"


class JournalDecodeError(ValueError):
    """Journal contents are not a JSON array of task objects."""


class TaskState(StrEnum):
    """
    Task lifecycle state.

    Notes:
    - tasks are created ACTIVE and nothing transitions them;
      COMPLETE exists so journals that contain it still decode.
    """

    ACTIVE = "Active"
    COMPLETE = "Complete"

    @classmethod
    def from_json(cls, raw: Any) -> TaskState:
        if not isinstance(raw, dict) or "type" not in raw:
            raise JournalDecodeError(f"task state must be an object with a 'type' key, got {raw!r}")
        try:
            return cls(raw["type"])
        except ValueError as e:
            raise JournalDecodeError(f"unknown task state {raw['type']!r}") from e

    def to_json(self) -> dict[str, str]:
        return {"type": self.value}


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    name: str
    created_at: datetime
    state: TaskState = TaskState.ACTIVE
    tags: list[str] = field(default_factory=list)
    notes: str | None = None

    @classmethod
    def new(
        cls,
        name: str,
        tags: list[str] | None = None,
        notes: str | None = None,
        *,
        now: datetime | None = None,
    ) -> Task:
        """
        Create an ACTIVE task stamped with the current UTC instant.

        The name is not validated (empty names are accepted). The timestamp is
        truncated to whole seconds, which is the precision stored on disk.
        """
        instant = now if now is not None else _utc_now()
        return cls(
            name=name,
            created_at=instant.astimezone(UTC).replace(microsecond=0),
            state=TaskState.ACTIVE,
            tags=list(tags or []),
            notes=notes,
        )

    def has_tag(self, tag: str) -> bool:
        # exact, case-sensitive
        return tag in self.tags

    def render(self) -> str:
        local = self.created_at.astimezone()
        return f"Task: {self.name:<{NAME_WIDTH}} Created at: {local.strftime(DISPLAY_TIME_FORMAT)}"

    def __str__(self) -> str:
        return self.render()


# ---- JSON codec ----


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "name": task.name,
        "state": task.state.to_json(),
        "tags": list(task.tags),
        "notes": task.notes,
        CREATED_AT_KEY: int(task.created_at.timestamp()),
    }


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise JournalDecodeError(f"task entry must be an object, got {type(raw).__name__}")

    for key in ("name", "state", CREATED_AT_KEY):
        if key not in raw:
            raise JournalDecodeError(f"task entry is missing {key!r}")

    name = raw["name"]
    if not isinstance(name, str):
        raise JournalDecodeError(f"task name must be a string, got {name!r}")

    tags = raw.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise JournalDecodeError(f"task tags must be a list of strings, got {tags!r}")

    notes = raw.get("notes")
    if notes is not None and not isinstance(notes, str):
        raise JournalDecodeError(f"task notes must be a string or null, got {notes!r}")

    ts = raw[CREATED_AT_KEY]
    # bool is an int subclass; reject it explicitly
    if isinstance(ts, bool) or not isinstance(ts, int):
        raise JournalDecodeError(f"{CREATED_AT_KEY} must be integer seconds, got {ts!r}")
    try:
        created_at = datetime.fromtimestamp(ts, UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise JournalDecodeError(f"{CREATED_AT_KEY} out of range: {ts!r}") from e

    return Task(
        name=name,
        created_at=created_at,
        state=TaskState.from_json(raw["state"]),
        tags=list(tags),
        notes=notes,
    )


def loads_tasks(data: str) -> list[Task]:
    """
    Decode a journal document.

    Empty (or whitespace-only) input is zero tasks, not an error.
    Anything else that is not a JSON array of task objects raises JournalDecodeError.
    """
    if not data.strip():
        return []
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise JournalDecodeError(f"journal is not valid JSON: {e}") from e
    except RecursionError as e:
        raise JournalDecodeError("journal is nested too deeply to decode") from e

    if not isinstance(raw, list):
        raise JournalDecodeError(f"journal must be a JSON array, got {type(raw).__name__}")

    return [task_from_dict(item) for item in raw]


def dumps_tasks(tasks: list[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_tasks(fp: IO[str]) -> list[Task]:
    try:
        data = fp.read()
    except UnicodeDecodeError as e:
        raise JournalDecodeError(f"journal is not valid UTF-8: {e}") from e
    return loads_tasks(data)


def encode_tasks(tasks: list[Task], fp: IO[str]) -> None:
    fp.write(dumps_tasks(tasks))
