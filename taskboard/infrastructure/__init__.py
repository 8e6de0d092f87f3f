"""Infrastructure layer for taskboard.

This module provides the I/O side of the application: task stores
behind the ``TaskStore`` contract, returning Result values for explicit
error handling.

Exports:
    Storage:
        - TaskStore: Store Adapter protocol
        - InMemoryTaskStore: Dict-backed store
        - JsonTaskStore: JSON-file backed store
        - TaskFile: On-disk task file format
        - build_store: Store selection from settings
"""

from taskboard.infrastructure.bootstrap import build_store
from taskboard.infrastructure.storage import (
    InMemoryTaskStore,
    JsonTaskStore,
    StoreFailure,
    StoreFailureKind,
    TaskFile,
    TaskStore,
)

__all__ = [
    "TaskStore",
    "StoreFailure",
    "StoreFailureKind",
    "InMemoryTaskStore",
    "JsonTaskStore",
    "TaskFile",
    "build_store",
]
