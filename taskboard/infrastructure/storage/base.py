"""Store Adapter contract.

The task service talks to persistence only through ``TaskStore``. Every
method returns a Result; failures are ``StoreFailure`` values, which the
service translates into task errors.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol
from uuid import uuid4

from taskboard.domain.shared import Result
from taskboard.domain.task import SortOrder, Task, TaskFilter

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class StoreFailureKind(str, Enum):
    """Category of a store failure."""

    NOT_FOUND = "not_found"
    INVALID_ID = "invalid_id"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class StoreFailure:
    """A failed store call.

    Attributes:
        kind: Category of the failure.
        message: Description for logs and error responses.
    """

    kind: StoreFailureKind
    message: str


def new_task_id() -> str:
    """Generate an opaque task identifier."""
    return uuid4().hex


def is_valid_id(task_id: str) -> bool:
    return bool(_ID_PATTERN.match(task_id))


class TaskStore(Protocol):
    """Persistence boundary for tasks.

    Implementations guarantee that each call is atomic for the records it
    touches. Nothing is guaranteed across calls.
    """

    def insert(self, task: Task) -> Result[Task, StoreFailure]:
        """Persist a new task, assigning its id. Returns the stored record."""
        ...

    def find_by_id(self, task_id: str) -> Result[Task, StoreFailure]:
        ...

    def find_many(
        self,
        flt: TaskFilter,
        sort: SortOrder,
        skip: int = 0,
        limit: int | None = None,
    ) -> Result[list[Task], StoreFailure]:
        """Return the ``[skip, skip + limit)`` window of matching tasks in ``sort`` order."""
        ...

    def count(self, flt: TaskFilter) -> Result[int, StoreFailure]:
        ...

    def update_by_id(self, task_id: str, changes: dict[str, Any]) -> Result[Task, StoreFailure]:
        """Apply field changes and return the updated record."""
        ...

    def delete_by_id(self, task_id: str) -> Result[Task, StoreFailure]:
        """Remove a record permanently and return it."""
        ...

    def group_count(self, flt: TaskFilter, key: str) -> Result[dict[str, int], StoreFailure]:
        """Count matching tasks grouped by the value of field ``key``."""
        ...

    def close(self) -> None:
        ...
