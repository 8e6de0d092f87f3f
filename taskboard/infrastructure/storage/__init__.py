"""Storage infrastructure for taskboard.

Provides Store Adapter implementations for tasks, using Result values
for explicit error handling.
"""

from taskboard.infrastructure.storage.base import (
    StoreFailure,
    StoreFailureKind,
    TaskStore,
    is_valid_id,
    new_task_id,
)
from taskboard.infrastructure.storage.json_store import JsonTaskStore
from taskboard.infrastructure.storage.memory_store import InMemoryTaskStore
from taskboard.infrastructure.storage.task_file import TaskFile

__all__ = [
    "TaskStore",
    "StoreFailure",
    "StoreFailureKind",
    "new_task_id",
    "is_valid_id",
    "TaskFile",
    "InMemoryTaskStore",
    "JsonTaskStore",
]
