"""Application service layer for taskboard.

This package contains the service that orchestrates domain operations
over a Store Adapter.

Services:
    task_service - Task lifecycle, search, pagination and statistics

Example usage:
    >>> from taskboard.application import TaskService
    >>> from taskboard.domain.shared import is_ok
    >>> from taskboard.infrastructure.storage import InMemoryTaskStore
    >>>
    >>> service = TaskService(InMemoryTaskStore())
    >>> result = service.create_task("Write report")
    >>> if is_ok(result):
    ...     print(f"Created: {result.value.title}")
"""

from taskboard.application.task_service import (
    SUGGESTION_LIMIT,
    Clock,
    TaskService,
    to_task_error,
    utc_now,
)

__all__ = [
    "TaskService",
    "Clock",
    "SUGGESTION_LIMIT",
    "to_task_error",
    "utc_now",
]
