"""Task application service.

Orchestrates task lifecycle operations by combining domain functions with
a Store Adapter. The store is passed in at construction; every operation
returns a Result carrying either the value or a ``TaskError``.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from taskboard.domain.shared import (
    Err,
    Ok,
    Result,
    TaskError,
    map_err,
    not_found,
    store_error,
    validation_error,
)
from taskboard.domain.task import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MatchMode,
    PageRequest,
    Pagination,
    SortOrder,
    StatusSummary,
    Suggestion,
    Task,
    TaskFilter,
    TaskPage,
    TaskPatch,
    TaskStatus,
    UpdateMode,
    Visibility,
    build_filter,
    completion_stamp,
    normalize_description,
    normalize_keyword,
    normalize_title,
    plan_update,
    suggestion_match,
    summarize,
    validate_patch,
)
from taskboard.infrastructure.storage import StoreFailure, StoreFailureKind, TaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SUGGESTION_LIMIT = 10


def utc_now() -> datetime:
    return datetime.now(UTC)


def to_task_error(failure: StoreFailure) -> TaskError:
    """Translate a store failure into the task error taxonomy."""
    if failure.kind == StoreFailureKind.NOT_FOUND:
        return not_found()
    if failure.kind == StoreFailureKind.INVALID_ID:
        return store_error("Invalid task ID", code="invalid_id")
    logger.error(f"Store failure: {failure.message}")
    return store_error(failure.message)


class TaskService:
    """Task lifecycle manager and query engine.

    Example:
        service = TaskService(InMemoryTaskStore())
        result = service.create_task("Write report")
        if isinstance(result, Ok):
            print(result.value.id)
    """

    def __init__(
        self,
        store: TaskStore,
        clock: Clock | None = None,
        default_page_limit: int = DEFAULT_LIMIT,
        max_page_limit: int = MAX_LIMIT,
        suggestion_limit: int = SUGGESTION_LIMIT,
    ) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._default_page_limit = default_page_limit
        self._max_page_limit = max_page_limit
        self._suggestion_limit = suggestion_limit

    @property
    def store(self) -> TaskStore:
        return self._store

    def close(self) -> None:
        self._store.close()

    # =========================================================================
    # Writes
    # =========================================================================

    def create_task(
        self,
        title: str | None,
        description: str | None = None,
        status: object = None,
    ) -> Result[Task, TaskError]:
        """Create a new pending task.

        Any requested ``status`` is ignored: new tasks always start pending.

        Returns:
            Ok(Task) with the stored record, or Err(TaskError) if the title
            is missing or a field is too long.
        """
        clean_title = normalize_title(title)
        if isinstance(clean_title, Err):
            return clean_title
        clean_description = normalize_description(description)
        if isinstance(clean_description, Err):
            return clean_description

        if status is not None and status != TaskStatus.PENDING.value:
            logger.debug(f"Ignoring requested status {status!r} on create")

        now = self._clock()
        task = Task(
            title=clean_title.value,
            description=clean_description.value,
            status=TaskStatus.PENDING,
            completed_at=completion_stamp(TaskStatus.PENDING, None, now),
            created_at=now,
            updated_at=now,
        )
        result = map_err(self._store.insert(task), to_task_error)
        if isinstance(result, Ok):
            logger.info(f"Created task {result.value.id}")
        return result

    def update_task_full(self, task_id: str, patch: TaskPatch) -> Result[Task, TaskError]:
        """Replace-style update (PUT).

        On a completed task, a content edit without a status change is
        rejected.
        """
        return self._update(task_id, patch, UpdateMode.FULL)

    def update_task_partial(self, task_id: str, patch: TaskPatch) -> Result[Task, TaskError]:
        """Partial update (PATCH).

        Requires at least one field. On a completed task, a content edit
        without a status change is silently dropped.
        """
        return self._update(task_id, patch, UpdateMode.PARTIAL)

    def _update(self, task_id: str, patch: TaskPatch, mode: UpdateMode) -> Result[Task, TaskError]:
        validated = validate_patch(patch)
        if isinstance(validated, Err):
            return validated
        changes = validated.value

        if mode == UpdateMode.PARTIAL and not changes:
            return Err(validation_error("No fields provided for update"))

        existing = map_err(self._store.find_by_id(task_id), to_task_error)
        if isinstance(existing, Err):
            return existing
        task = existing.value

        planned = plan_update(task.status, changes, mode)
        if isinstance(planned, Err):
            logger.warning(
                f"Rejected {mode.value} update of task {task_id} "
                f"({task.status.value}): {planned.error.message}"
            )
            return planned

        return self._write(task, planned.value)

    def _write(self, task: Task, changes: dict[str, Any]) -> Result[Task, TaskError]:
        """Persist changes, applying completion and timestamp bookkeeping."""
        now = self._clock()
        changes = dict(changes)
        if "status" in changes:
            changes["completed_at"] = completion_stamp(changes["status"], task.completed_at, now)
        changes["updated_at"] = now

        result = map_err(self._store.update_by_id(task.id, changes), to_task_error)
        if isinstance(result, Ok):
            logger.info(f"Updated task {task.id} fields={sorted(changes)}")
        return result

    def set_status(self, task_id: str, status: TaskStatus) -> Result[Task, TaskError]:
        """Move a task to ``status`` following the transition table."""
        return self.update_task_partial(task_id, TaskPatch(status=status.value))

    def soft_delete_task(self, task_id: str) -> Result[Task, TaskError]:
        """Move a task to the trash. Its status is left unchanged."""
        now = self._clock()
        result = map_err(
            self._store.update_by_id(
                task_id, {"is_deleted": True, "deleted_at": now, "updated_at": now}
            ),
            to_task_error,
        )
        if isinstance(result, Ok):
            logger.info(f"Moved task {task_id} to trash")
        return result

    def restore_task(self, task_id: str) -> Result[Task, TaskError]:
        """Bring a task back from the trash."""
        result = map_err(
            self._store.update_by_id(
                task_id, {"is_deleted": False, "deleted_at": None, "updated_at": self._clock()}
            ),
            to_task_error,
        )
        if isinstance(result, Ok):
            logger.info(f"Restored task {task_id}")
        return result

    def hard_delete_task(self, task_id: str) -> Result[Task, TaskError]:
        """Permanently remove a task, whether or not it is in the trash."""
        result = map_err(self._store.delete_by_id(task_id), to_task_error)
        if isinstance(result, Ok):
            logger.info(f"Permanently deleted task {task_id}")
        return result

    # =========================================================================
    # Reads
    # =========================================================================

    def get_task(self, task_id: str) -> Result[Task, TaskError]:
        return map_err(self._store.find_by_id(task_id), to_task_error)

    def page_request(self, page: object = None, limit: object = None) -> PageRequest:
        return PageRequest.parse(
            page,
            limit,
            default_limit=self._default_page_limit,
            max_limit=self._max_page_limit,
        )

    def list_tasks(
        self,
        keyword: str | None = None,
        status: object = None,
        page: object = None,
        limit: object = None,
        include_deleted: bool = False,
    ) -> Result[TaskPage, TaskError]:
        """List tasks, newest first, or by relevance when a keyword is given."""
        flt = build_filter(keyword, status, include_deleted=include_deleted)
        order = SortOrder.RELEVANCE if flt.keyword else SortOrder.NEWEST
        return self._page(flt, order, self.page_request(page, limit))

    def list_trash(
        self,
        keyword: str | None = None,
        status: object = None,
        page: object = None,
        limit: object = None,
    ) -> Result[TaskPage, TaskError]:
        """List soft-deleted tasks, most recently deleted first."""
        flt = build_filter(keyword, status, visibility=Visibility.TRASH)
        return self._page(flt, SortOrder.RECENTLY_DELETED, self.page_request(page, limit))

    def _page(
        self,
        flt: TaskFilter,
        order: SortOrder,
        request: PageRequest,
    ) -> Result[TaskPage, TaskError]:
        found = map_err(
            self._store.find_many(flt, order, request.skip, request.limit), to_task_error
        )
        if isinstance(found, Err):
            return found
        total = map_err(self._store.count(flt), to_task_error)
        if isinstance(total, Err):
            return total
        return Ok(TaskPage(tasks=found.value, pagination=Pagination.of(request, total.value)))

    def suggest(self, query: str | None) -> Result[list[Suggestion], TaskError]:
        """Type-ahead suggestions for tasks whose title or description starts with ``query``.

        A blank query gives an empty list.
        """
        term = normalize_keyword(query)
        if term is None:
            return Ok([])

        flt = TaskFilter(visibility=Visibility.ALL, keyword=term, match=MatchMode.PREFIX)
        found = map_err(
            self._store.find_many(flt, SortOrder.OLDEST, 0, self._suggestion_limit),
            to_task_error,
        )
        if isinstance(found, Err):
            return found

        suggestions = []
        for task in found.value:
            match_type = suggestion_match(term, task)
            if match_type is not None:
                suggestions.append(Suggestion.from_task(task, match_type))
        return Ok(suggestions)

    def summary(self) -> Result[StatusSummary, TaskError]:
        """Count non-deleted tasks per status."""
        counts = map_err(
            self._store.group_count(TaskFilter(visibility=Visibility.ACTIVE), "status"),
            to_task_error,
        )
        if isinstance(counts, Err):
            return counts
        return Ok(summarize(counts.value))
