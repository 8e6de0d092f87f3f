"""Field validation and normalization for task writes.

All functions are pure. They trim input, enforce length limits, and
translate raw patch values into a dict of changes keyed by field name.
"""

from typing import Any

from taskboard.domain.shared import Err, Ok, Result, TaskError, validation_error

from .models import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TaskPatch,
    TaskStatus,
)


def normalize_title(raw: str | None, blank_message: str = "Title is required") -> Result[str, TaskError]:
    """Trim a title and check it is non-blank and within the length limit."""
    if raw is None or raw.strip() == "":
        return Err(validation_error(blank_message))
    title = raw.strip()
    if len(title) > TITLE_MAX_LENGTH:
        return Err(validation_error(f"Title cannot exceed {TITLE_MAX_LENGTH} characters"))
    return Ok(title)


def normalize_description(raw: str | None) -> Result[str, TaskError]:
    """Trim a description; None becomes an empty string."""
    description = raw.strip() if raw else ""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return Err(
            validation_error(f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters")
        )
    return Ok(description)


def parse_status(raw: object) -> Result[TaskStatus, TaskError]:
    status = TaskStatus.parse(raw)
    if status is None:
        return Err(validation_error("Invalid status value"))
    return Ok(status)


def validate_patch(patch: TaskPatch) -> Result[dict[str, Any], TaskError]:
    """Validate the provided fields of a patch.

    Returns:
        Ok(dict) with normalized values for exactly the provided keys, or
        Err(TaskError) for the first invalid field.
    """
    provided = patch.provided()
    changes: dict[str, Any] = {}

    if "title" in provided:
        title = normalize_title(patch.title, "Title cannot be empty")
        if isinstance(title, Err):
            return title
        changes["title"] = title.value

    if "description" in provided:
        description = normalize_description(patch.description)
        if isinstance(description, Err):
            return description
        changes["description"] = description.value

    if "status" in provided:
        status = parse_status(patch.status)
        if isinstance(status, Err):
            return status
        changes["status"] = status.value

    return Ok(changes)
