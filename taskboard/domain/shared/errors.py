"""Error taxonomy for task operations.

Every failure that leaves the service layer is a ``TaskError`` value carried
inside an ``Err``. The kind is stable and drives how interfaces report the
failure (HTTP status, CLI exit message); the message is user facing.
"""

from dataclasses import dataclass
from enum import Enum


class TaskErrorKind(str, Enum):
    """Category of a task operation failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"
    STORE = "store"


@dataclass(frozen=True, slots=True)
class TaskError:
    """A recovered failure from a task operation.

    Attributes:
        kind: Category of the failure.
        message: Human-readable description.
        code: Optional finer-grained machine code, e.g. ``"invalid_id"``.
    """

    kind: TaskErrorKind
    message: str
    code: str | None = None

    def __str__(self) -> str:
        return self.message


def validation_error(message: str) -> TaskError:
    return TaskError(TaskErrorKind.VALIDATION, message)


def not_found(message: str = "Task not found") -> TaskError:
    return TaskError(TaskErrorKind.NOT_FOUND, message)


def invalid_transition(message: str) -> TaskError:
    return TaskError(TaskErrorKind.INVALID_TRANSITION, message)


def store_error(message: str, code: str | None = None) -> TaskError:
    return TaskError(TaskErrorKind.STORE, message, code)
