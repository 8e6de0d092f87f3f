# tests/test_transitions.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taskboard.domain.shared import Err, Ok, TaskErrorKind
from taskboard.domain.task import (
    TRANSITIONS,
    Outcome,
    TaskStatus,
    UpdateMode,
    completion_stamp,
    plan_update,
    resolve_transition,
)

NOW = datetime(2026, 3, 1, tzinfo=UTC)
EARLIER = datetime(2026, 2, 1, tzinfo=UTC)


def test_table_covers_every_pair() -> None:
    for current in TaskStatus:
        for requested in (*TaskStatus, None):
            assert set(TRANSITIONS[(current, requested)]) == set(UpdateMode)


@pytest.mark.parametrize("current", [TaskStatus.PENDING, TaskStatus.IN_PROGRESS])
@pytest.mark.parametrize("requested", [*TaskStatus, None])
@pytest.mark.parametrize("mode", list(UpdateMode))
def test_open_tasks_accept_anything(current, requested, mode) -> None:
    assert resolve_transition(current, requested, mode) == Ok(Outcome.APPLY)


@pytest.mark.parametrize("mode", list(UpdateMode))
def test_completed_can_revert_to_in_progress(mode) -> None:
    result = resolve_transition(TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS, mode)
    assert result == Ok(Outcome.DROP_CONTENT)


@pytest.mark.parametrize("requested", [TaskStatus.PENDING, TaskStatus.COMPLETED])
@pytest.mark.parametrize("mode", list(UpdateMode))
def test_completed_rejects_other_statuses(requested, mode) -> None:
    result = resolve_transition(TaskStatus.COMPLETED, requested, mode)
    assert isinstance(result, Err)
    assert result.error.kind == TaskErrorKind.INVALID_TRANSITION
    assert result.error.message == "Completed tasks can only be reverted to in-progress"


def test_completed_content_edit_depends_on_mode() -> None:
    full = resolve_transition(TaskStatus.COMPLETED, None, UpdateMode.FULL)
    assert isinstance(full, Err)
    assert full.error.message == "Completed tasks cannot be edited"

    partial = resolve_transition(TaskStatus.COMPLETED, None, UpdateMode.PARTIAL)
    assert partial == Ok(Outcome.DROP_CONTENT)


def test_plan_update_drops_content_on_revert() -> None:
    changes = {"title": "New", "description": "New desc", "status": TaskStatus.IN_PROGRESS}
    planned = plan_update(TaskStatus.COMPLETED, changes, UpdateMode.FULL)
    assert planned == Ok({"status": TaskStatus.IN_PROGRESS})


def test_plan_update_keeps_everything_on_open_task() -> None:
    changes = {"title": "New", "status": TaskStatus.COMPLETED}
    assert plan_update(TaskStatus.PENDING, changes, UpdateMode.PARTIAL) == Ok(changes)


def test_completion_stamp() -> None:
    assert completion_stamp(TaskStatus.COMPLETED, None, NOW) == NOW
    assert completion_stamp(TaskStatus.COMPLETED, EARLIER, NOW) == EARLIER
    assert completion_stamp(TaskStatus.IN_PROGRESS, EARLIER, NOW) is None
    assert completion_stamp(TaskStatus.PENDING, None, NOW) is None
