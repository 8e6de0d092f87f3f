# tests/test_pagination.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from taskboard.domain.task import (
    PageRequest,
    StatusSummary,
    Task,
    TaskStatus,
    paginate,
    parse_int,
    summarize,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 7),
        ("", 7),
        ("abc", 7),
        ("3", 3),
        (" 4th", 4),
        ("-2", -2),
        (5, 5),
        (True, 7),
    ],
)
def test_parse_int(raw, expected) -> None:
    assert parse_int(raw, 7) == expected


def test_page_request_defaults() -> None:
    request = PageRequest.parse()
    assert (request.page, request.limit, request.skip) == (1, 10, 0)


def test_page_request_clamps_out_of_range_values() -> None:
    request = PageRequest.parse("0", "-5")
    assert (request.page, request.limit) == (1, 1)

    request = PageRequest.parse("3", "100000", max_limit=50)
    assert (request.page, request.limit, request.skip) == (3, 50, 100)


def test_page_request_default_limit_override() -> None:
    assert PageRequest.parse(None, "oops", default_limit=25).limit == 25


def _tasks(n: int) -> list[Task]:
    base = datetime(2026, 1, 1, tzinfo=UTC)
    return [
        Task(
            id=f"{i:032x}",
            title=f"Task {i:02d}",
            created_at=base + timedelta(minutes=i),
            updated_at=base + timedelta(minutes=i),
        )
        for i in range(1, n + 1)
    ]


def test_paginate_second_page() -> None:
    page = paginate(_tasks(25), PageRequest.parse(2, 10))
    assert [t.title for t in page.tasks] == [f"Task {i:02d}" for i in range(11, 21)]
    assert page.pagination.model_dump() == {"current": 2, "pages": 3, "total": 25}


def test_paginate_past_the_end() -> None:
    page = paginate(_tasks(5), PageRequest.parse(4, 10))
    assert page.tasks == []
    assert page.pagination.model_dump() == {"current": 4, "pages": 1, "total": 5}


def test_paginate_empty() -> None:
    page = paginate([], PageRequest.parse())
    assert page.pagination.model_dump() == {"current": 1, "pages": 0, "total": 0}


def test_summarize_zero_fills_and_totals() -> None:
    summary = summarize({"pending": 2, TaskStatus.COMPLETED: 3})
    assert summary == StatusSummary(pending=2, in_progress=0, completed=3, total=5)


def test_summary_serializes_status_keys() -> None:
    summary = summarize({"pending": 2, "in-progress": 1, "completed": 3})
    assert summary.model_dump(by_alias=True) == {
        "pending": 2,
        "in-progress": 1,
        "completed": 3,
        "total": 6,
    }


def test_summarize_ignores_unknown_groups() -> None:
    assert summarize({"archived": 4}).total == 0
