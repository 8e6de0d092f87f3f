"""Shared domain building blocks for taskboard.

This package provides the pieces used across the domain and application
layers:

- Result values for explicit error handling
- The task error taxonomy

Example usage:
    >>> from taskboard.domain.shared import Err, Ok, TaskErrorKind, not_found
    >>>
    >>> def find(task_id: str) -> Result[dict, TaskError]:
    ...     if task_id == "missing":
    ...         return Err(not_found())
    ...     return Ok({"id": task_id})
"""

from taskboard.domain.shared.errors import (
    TaskError,
    TaskErrorKind,
    invalid_transition,
    not_found,
    store_error,
    validation_error,
)
from taskboard.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    map_err,
)

__all__ = [
    # Result values
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "map_err",
    # Errors
    "TaskError",
    "TaskErrorKind",
    "validation_error",
    "not_found",
    "invalid_transition",
    "store_error",
]
