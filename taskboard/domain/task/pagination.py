"""Pagination windows and per-status statistics.

All functions in this module are pure.
"""

import math
import re
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .models import CamelModel, Task, TaskStatus

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: object, default: int) -> int:
    """Parse the leading integer of a loosely typed value.

    ``"2"`` and ``" 3rd"`` parse as 2 and 3; None, booleans and anything
    without a leading integer give ``default``.
    """
    if isinstance(raw, bool) or raw is None:
        return default
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return default
    return int(match.group(1))


class PageRequest(BaseModel):
    """A requested page window.

    ``page`` is at least 1 and ``limit`` lies within [1, max_limit].
    """

    model_config = ConfigDict(frozen=True)

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def parse(
        cls,
        page: object = None,
        limit: object = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageRequest":
        """Build a page request from raw query values, clamping out-of-range ones."""
        return cls(
            page=max(1, parse_int(page, DEFAULT_PAGE)),
            limit=min(max(1, parse_int(limit, default_limit)), max_limit),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Position of a page within a result set."""

    current: int
    pages: int
    total: int

    @classmethod
    def of(cls, request: PageRequest, total: int) -> "Pagination":
        return cls(
            current=request.page,
            pages=math.ceil(total / request.limit),
            total=total,
        )


class TaskPage(BaseModel):
    """One page of tasks with its pagination metadata."""

    tasks: list[Task] = Field(default_factory=list)
    pagination: Pagination


def paginate(results: Sequence[Task], request: PageRequest) -> TaskPage:
    """Cut the requested window out of an already ordered result set.

    This is the windowing every ``TaskStore.find_many`` / ``count`` pair must
    agree with. The service asks the store for the window directly so a
    store can avoid loading the whole result set.
    """
    window = list(results[request.skip : request.skip + request.limit])
    return TaskPage(tasks=window, pagination=Pagination.of(request, len(results)))


class StatusSummary(CamelModel):
    """Task counts per status.

    Serialized with the status values as keys
    (``pending``, ``in-progress``, ``completed``) plus ``total``.
    """

    pending: int = 0
    in_progress: int = Field(default=0, alias="in-progress")
    completed: int = 0
    total: int = 0


def summarize(counts: Mapping[TaskStatus | str, int]) -> StatusSummary:
    """Turn grouped counts into a zero-filled summary.

    Args:
        counts: Mapping of status to count; statuses with no records may
            be missing.

    Returns:
        StatusSummary whose total is the sum of all groups.
    """
    filled = dict.fromkeys(TaskStatus, 0)
    for key, count in counts.items():
        status = TaskStatus.parse(key)
        if status is not None:
            filled[status] += count
    return StatusSummary(
        pending=filled[TaskStatus.PENDING],
        in_progress=filled[TaskStatus.IN_PROGRESS],
        completed=filled[TaskStatus.COMPLETED],
        total=sum(filled.values()),
    )
