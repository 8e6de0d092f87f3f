"""In-memory task store.

Holds tasks in an insertion-ordered dict guarded by a lock. Subclasses
persist the dict by overriding ``_commit`` and reload it from outside
changes by overriding ``_refresh``.
"""

import logging
import threading
from collections import Counter
from collections.abc import Iterable
from enum import Enum
from typing import Any

from taskboard.domain.shared import Err, Ok, Result
from taskboard.domain.task import SortOrder, Task, TaskFilter, matches, sort_tasks

from .base import StoreFailure, StoreFailureKind, is_valid_id, new_task_id

logger = logging.getLogger(__name__)


def _invalid_id(task_id: str) -> Err[StoreFailure]:
    return Err(StoreFailure(StoreFailureKind.INVALID_ID, f"Invalid task ID: {task_id}"))


def _missing(task_id: str) -> Err[StoreFailure]:
    return Err(StoreFailure(StoreFailureKind.NOT_FOUND, f"Task not found: {task_id}"))


class InMemoryTaskStore:
    """Task store backed by a dict.

    Example:
        store = InMemoryTaskStore()
        result = store.insert(task)
        if isinstance(result, Ok):
            print(result.value.id)
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, Task] = {t.id: t for t in tasks or ()}

    def close(self) -> None:
        return

    def _refresh(self) -> Result[None, StoreFailure]:
        """Pick up changes made outside this store. Nothing to do in memory."""
        return Ok(None)

    def _commit(self) -> Result[None, StoreFailure]:
        """Persist the current state. Nothing to do in memory."""
        return Ok(None)

    def _commit_or_rollback(self, before: dict[str, Task]) -> Result[None, StoreFailure]:
        committed = self._commit()
        if isinstance(committed, Err):
            self._tasks = before
        return committed

    def _select(self, flt: TaskFilter) -> list[Task]:
        return [t for t in self._tasks.values() if matches(t, flt)]

    # ---- public API ----

    def insert(self, task: Task) -> Result[Task, StoreFailure]:
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            stored = task.model_copy(update={"id": new_task_id()})
            before = dict(self._tasks)
            self._tasks[stored.id] = stored
            committed = self._commit_or_rollback(before)
            if isinstance(committed, Err):
                return committed
        logger.debug(f"Task inserted id={stored.id}")
        return Ok(stored)

    def find_by_id(self, task_id: str) -> Result[Task, StoreFailure]:
        if not is_valid_id(task_id):
            return _invalid_id(task_id)
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            task = self._tasks.get(task_id)
        if task is None:
            return _missing(task_id)
        return Ok(task)

    def find_many(
        self,
        flt: TaskFilter,
        sort: SortOrder,
        skip: int = 0,
        limit: int | None = None,
    ) -> Result[list[Task], StoreFailure]:
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            selected = self._select(flt)
        ordered = sort_tasks(selected, sort, flt.keyword)
        end = None if limit is None else skip + limit
        return Ok(ordered[skip:end])

    def count(self, flt: TaskFilter) -> Result[int, StoreFailure]:
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            return Ok(len(self._select(flt)))

    def update_by_id(self, task_id: str, changes: dict[str, Any]) -> Result[Task, StoreFailure]:
        if not is_valid_id(task_id):
            return _invalid_id(task_id)
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            task = self._tasks.get(task_id)
            if task is None:
                return _missing(task_id)
            updated = task.model_copy(update={k: v for k, v in changes.items() if k != "id"})
            before = dict(self._tasks)
            self._tasks[task_id] = updated
            committed = self._commit_or_rollback(before)
            if isinstance(committed, Err):
                return committed
        return Ok(updated)

    def delete_by_id(self, task_id: str) -> Result[Task, StoreFailure]:
        if not is_valid_id(task_id):
            return _invalid_id(task_id)
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            if task_id not in self._tasks:
                return _missing(task_id)
            before = dict(self._tasks)
            removed = self._tasks.pop(task_id)
            committed = self._commit_or_rollback(before)
            if isinstance(committed, Err):
                return committed
        return Ok(removed)

    def group_count(self, flt: TaskFilter, key: str) -> Result[dict[str, int], StoreFailure]:
        if key not in Task.model_fields:
            return Err(StoreFailure(StoreFailureKind.FAILURE, f"Unknown group key: {key}"))
        with self._lock:
            refreshed = self._refresh()
            if isinstance(refreshed, Err):
                return refreshed
            selected = self._select(flt)
        counts: Counter[str] = Counter()
        for task in selected:
            value = getattr(task, key)
            counts[value.value if isinstance(value, Enum) else str(value)] += 1
        return Ok(dict(counts))
