"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskState) and the JSON codec
- task_store.py: JSON-file journal store (load/persist + add/remove/list/clear)
"""

from .task_models import JournalDecodeError, Task, TaskState
from .task_store import EMPTY_NOTICE, InvalidTaskIndexError, JournalStore

__all__ = [
    "EMPTY_NOTICE",
    "InvalidTaskIndexError",
    "JournalDecodeError",
    "JournalStore",
    "Task",
    "TaskState",
]
