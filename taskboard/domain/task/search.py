"""Filter predicates, relevance ranking and suggestions.

All functions in this module are pure - no I/O, no side effects. Stores
use ``matches`` and ``sort_tasks`` to evaluate a ``TaskFilter``; the
service builds filters with ``build_filter``.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .models import CamelModel, Task, TaskStatus

_EPOCH = datetime.min.replace(tzinfo=UTC)


class Visibility(str, Enum):
    """Which records a filter can see with respect to soft deletion."""

    ACTIVE = "active"
    TRASH = "trash"
    ALL = "all"


class MatchMode(str, Enum):
    """How the keyword is compared with title and description."""

    CONTAINS = "contains"
    PREFIX = "prefix"


class SortOrder(str, Enum):
    """Ordering of a result set."""

    NEWEST = "newest"
    OLDEST = "oldest"
    RELEVANCE = "relevance"
    RECENTLY_DELETED = "recently-deleted"


class MatchType(str, Enum):
    """Field that produced a suggestion match."""

    TITLE = "title"
    DESCRIPTION = "description"


class TaskFilter(BaseModel):
    """Predicate over tasks.

    Attributes:
        visibility: Soft-deletion visibility.
        status: Restrict to one status, or None for all.
        keyword: Trimmed, non-empty search term, or None.
        match: Substring or prefix matching for the keyword.
    """

    model_config = ConfigDict(frozen=True)

    visibility: Visibility = Visibility.ACTIVE
    status: TaskStatus | None = None
    keyword: str | None = None
    match: MatchMode = MatchMode.CONTAINS


def normalize_keyword(raw: str | None) -> str | None:
    if raw is None:
        return None
    term = raw.strip()
    return term or None


def build_filter(
    keyword: str | None = None,
    status: object = None,
    include_deleted: bool = False,
    visibility: Visibility | None = None,
    match: MatchMode = MatchMode.CONTAINS,
) -> TaskFilter:
    """Build a filter from loosely typed query inputs.

    An unknown status is ignored rather than rejected, and a blank keyword
    means no keyword.
    """
    if visibility is None:
        visibility = Visibility.ALL if include_deleted else Visibility.ACTIVE
    return TaskFilter(
        visibility=visibility,
        status=TaskStatus.parse(status),
        keyword=normalize_keyword(keyword),
        match=match,
    )


def _fold(text: str) -> str:
    return text.casefold()


def _text_matches(term: str, text: str, mode: MatchMode) -> bool:
    if mode == MatchMode.PREFIX:
        return _fold(text).startswith(term)
    return term in _fold(text)


def matches(task: Task, flt: TaskFilter) -> bool:
    """Check whether a task satisfies a filter."""
    if flt.visibility == Visibility.ACTIVE and task.is_deleted:
        return False
    if flt.visibility == Visibility.TRASH and not task.is_deleted:
        return False
    if flt.status is not None and task.status != flt.status:
        return False
    if flt.keyword is None:
        return True
    term = _fold(flt.keyword)
    return _text_matches(term, task.title, flt.match) or _text_matches(
        term, task.description, flt.match
    )


def score_match(term: str, title: str, description: str) -> int:
    """Relevance of a keyword match.

    Returns:
        3 if the title starts with the term, 2 if the description does,
        1 if the title contains it elsewhere, 0 otherwise.
    """
    term = _fold(term)
    title = _fold(title)
    description = _fold(description)
    if title.startswith(term):
        return 3
    if description.startswith(term):
        return 2
    if term in title:
        return 1
    return 0


def sort_tasks(tasks: Iterable[Task], order: SortOrder, keyword: str | None = None) -> list[Task]:
    """Sort tasks for a listing.

    RELEVANCE requires a keyword and falls back to NEWEST without one.
    Tasks without a deletion stamp sort last under RECENTLY_DELETED.
    """
    if order == SortOrder.RELEVANCE and keyword:
        return sorted(
            tasks,
            key=lambda t: (score_match(keyword, t.title, t.description), t.created_at),
            reverse=True,
        )
    if order == SortOrder.RECENTLY_DELETED:
        return sorted(tasks, key=lambda t: t.deleted_at or _EPOCH, reverse=True)
    if order == SortOrder.OLDEST:
        return sorted(tasks, key=lambda t: t.created_at)
    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


def suggestion_match(term: str, task: Task) -> MatchType | None:
    """Which field of ``task`` starts with ``term``; title wins over description."""
    term = _fold(term)
    if _fold(task.title).startswith(term):
        return MatchType.TITLE
    if _fold(task.description).startswith(term):
        return MatchType.DESCRIPTION
    return None


class Suggestion(CamelModel):
    """A search suggestion for type-ahead."""

    id: str
    title: str
    description: str
    status: TaskStatus
    match_type: MatchType

    @classmethod
    def from_task(cls, task: Task, match_type: MatchType) -> "Suggestion":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            match_type=match_type,
        )
