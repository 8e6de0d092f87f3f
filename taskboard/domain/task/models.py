"""Task domain models.

Pure domain models for the task board. Uses Pydantic for serialization;
fields are exposed with camelCase aliases (``isDeleted``, ``createdAt``) on
the wire and snake_case in Python.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    """Status of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object) -> "TaskStatus | None":
        """Return the matching status, or None for anything else."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(CamelModel):
    """A tracked task.

    ``id`` is assigned by the store on insert.

    ``completed_at`` is set exactly when ``status`` is completed, and
    ``deleted_at`` exactly when ``is_deleted`` is true.
    """

    id: str = ""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.PENDING
    is_deleted: bool = False
    deleted_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class TaskDraft(CamelModel):
    """Fields accepted when creating a task.

    ``status`` is accepted so callers can send it, but creation always
    starts a task as pending.
    """

    title: str | None = None
    description: str | None = None
    status: Any = None


class TaskPatch(CamelModel):
    """Fields accepted when updating a task.

    ``title`` and ``description`` must be strings or null. ``status`` is kept
    raw so that any unknown value, whatever its type, is reported by the
    domain as an invalid status.
    Only keys the caller actually sent are applied; an explicit ``null`` is
    different from an omitted key (see ``provided``).
    """

    title: str | None = None
    description: str | None = None
    status: Any = None

    def provided(self) -> set[str]:
        """Names of the fields the caller explicitly set."""
        return set(self.model_fields_set)

    def is_empty(self) -> bool:
        return not self.model_fields_set
