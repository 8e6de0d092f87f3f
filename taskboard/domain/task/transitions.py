"""Status transition table.

A completed task is locked: it can only move back to in-progress, and its
title and description cannot be edited. Both update paths (full replace
and partial patch) consult the same table; they differ only in how a
content edit without a status change is treated on a locked task.

All functions in this module are pure.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from taskboard.domain.shared import Err, Ok, Result, TaskError, invalid_transition

from .models import TaskStatus

CONTENT_FIELDS = ("title", "description")

REVERT_ONLY_MESSAGE = "Completed tasks can only be reverted to in-progress"
LOCKED_MESSAGE = "Completed tasks cannot be edited"


class UpdateMode(str, Enum):
    """Which update path is applying a change."""

    FULL = "full"
    PARTIAL = "partial"


class Outcome(str, Enum):
    """What to do with a requested change."""

    APPLY = "apply"
    DROP_CONTENT = "drop-content"
    REJECT_REVERT_ONLY = "reject-revert-only"
    REJECT_LOCKED = "reject-locked"


def _build_table() -> dict[tuple[TaskStatus, TaskStatus | None], dict[UpdateMode, Outcome]]:
    both = dict.fromkeys(UpdateMode, Outcome.APPLY)
    table: dict[tuple[TaskStatus, TaskStatus | None], dict[UpdateMode, Outcome]] = {}

    for current in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS):
        for requested in (*TaskStatus, None):
            table[(current, requested)] = dict(both)

    done = TaskStatus.COMPLETED
    table[(done, TaskStatus.IN_PROGRESS)] = dict.fromkeys(UpdateMode, Outcome.DROP_CONTENT)
    table[(done, TaskStatus.PENDING)] = dict.fromkeys(UpdateMode, Outcome.REJECT_REVERT_ONLY)
    table[(done, TaskStatus.COMPLETED)] = dict.fromkeys(UpdateMode, Outcome.REJECT_REVERT_ONLY)
    table[(done, None)] = {
        UpdateMode.FULL: Outcome.REJECT_LOCKED,
        UpdateMode.PARTIAL: Outcome.DROP_CONTENT,
    }
    return table


TRANSITIONS = _build_table()


def resolve_transition(
    current: TaskStatus,
    requested: TaskStatus | None,
    mode: UpdateMode,
) -> Result[Outcome, TaskError]:
    """Look up the outcome of requesting ``requested`` on a task in ``current``.

    Args:
        current: Status the task has now.
        requested: Status the caller asked for, or None if none was sent.
        mode: The update path applying the change.

    Returns:
        Ok(Outcome.APPLY or Outcome.DROP_CONTENT), or
        Err(TaskError) with kind invalid_transition.
    """
    outcome = TRANSITIONS[(current, requested)][mode]
    if outcome == Outcome.REJECT_REVERT_ONLY:
        return Err(invalid_transition(REVERT_ONLY_MESSAGE))
    if outcome == Outcome.REJECT_LOCKED:
        return Err(invalid_transition(LOCKED_MESSAGE))
    return Ok(outcome)


def plan_update(
    current: TaskStatus,
    changes: dict[str, Any],
    mode: UpdateMode,
) -> Result[dict[str, Any], TaskError]:
    """Apply the transition table to a set of validated changes.

    Returns:
        Ok(dict) with the changes that may be written (content fields removed
        when the task is locked), or Err(TaskError).
    """
    resolved = resolve_transition(current, changes.get("status"), mode)
    if isinstance(resolved, Err):
        return resolved
    if resolved.value == Outcome.DROP_CONTENT:
        return Ok({k: v for k, v in changes.items() if k not in CONTENT_FIELDS})
    return Ok(dict(changes))


def completion_stamp(
    status: TaskStatus,
    completed_at: datetime | None,
    now: datetime,
) -> datetime | None:
    """Return the completed_at value a task with ``status`` should carry.

    Keeps an existing stamp on a completed task, stamps ``now`` on a newly
    completed one, and clears it for every other status.
    """
    if status != TaskStatus.COMPLETED:
        return None
    return completed_at or now
