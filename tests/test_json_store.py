# tests/test_json_store.py

from __future__ import annotations

import json
from pathlib import Path

from taskboard.application import TaskService
from taskboard.domain.shared import Err, Ok
from taskboard.domain.task import SortOrder, TaskFilter, TaskPatch, TaskStatus, Visibility
from taskboard.infrastructure.storage import (
    JsonTaskStore,
    StoreFailureKind,
    TaskFile,
)

from .fakes import FakeClock


def open_store(path: Path) -> JsonTaskStore:
    result = JsonTaskStore.open(path)
    assert isinstance(result, Ok), result
    return result.value


def test_missing_file_starts_empty(tmp_path: Path) -> None:
    store = open_store(tmp_path / "tasks.json")
    assert store.count(TaskFilter(visibility=Visibility.ALL)) == Ok(0)
    assert not (tmp_path / "tasks.json").exists()


def test_tasks_survive_reopen(tmp_path: Path) -> None:
    path = tmp_path / "data" / "tasks.json"
    service = TaskService(open_store(path), clock=FakeClock())
    task = service.create_task("Persist me", "please").value
    service.set_status(task.id, TaskStatus.COMPLETED)
    service.soft_delete_task(task.id)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["tasks"][0]["isDeleted"] is True
    assert raw["tasks"][0]["status"] == "completed"

    reopened = open_store(path)
    found = reopened.find_by_id(task.id)
    assert isinstance(found, Ok)
    assert found.value.title == "Persist me"
    assert found.value.completed_at is not None
    assert found.value.deleted_at is not None


def test_hard_delete_is_persisted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    service = TaskService(open_store(path), clock=FakeClock())
    task = service.create_task("Short lived").value
    service.hard_delete_task(task.id)

    assert json.loads(path.read_text(encoding="utf-8")) == {"tasks": []}


def test_corrupt_file_is_an_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{not json", encoding="utf-8")

    result = JsonTaskStore.open(path)
    assert isinstance(result, Err)
    assert result.error.kind == StoreFailureKind.FAILURE


def test_invalid_task_data_is_an_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": [{"id": "x"}]}), encoding="utf-8")

    result = JsonTaskStore.open(path)
    assert isinstance(result, Err)
    assert "Invalid task data" in result.error.message


def test_tasks_must_be_a_list_of_objects(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": "nope"}), encoding="utf-8")

    result = JsonTaskStore.open(path)
    assert isinstance(result, Err)
    assert "Expected a list of task objects" in result.error.message


def test_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    service = TaskService(open_store(path), clock=FakeClock())
    service.create_task("One")
    service.create_task("Two")

    assert [p.name for p in tmp_path.iterdir()] == ["tasks.json"]


class ReadOnlyTaskFile(TaskFile):
    """Task file whose writes always fail."""

    def write(self, path, records):
        return Err(f"Permission denied writing {path}")


def test_failed_write_rolls_back(tmp_path: Path) -> None:
    store = JsonTaskStore(tmp_path / "tasks.json", [], ReadOnlyTaskFile())
    service = TaskService(store, clock=FakeClock())

    result = service.create_task("Never saved")
    assert isinstance(result, Err)
    assert result.error.message.startswith("Permission denied")
    assert store.find_many(TaskFilter(visibility=Visibility.ALL), SortOrder.NEWEST) == Ok([])


def test_two_stores_share_one_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    server = TaskService(open_store(path), clock=FakeClock())
    cli = TaskService(open_store(path), clock=FakeClock())

    first = server.create_task("From the server").value
    second = cli.create_task("From the command line").value
    server.update_task_partial(first.id, TaskPatch(status="in-progress"))

    titles = {t["title"] for t in json.loads(path.read_text(encoding="utf-8"))["tasks"]}
    assert titles == {"From the server", "From the command line"}
    assert isinstance(server.get_task(second.id), Ok)
    assert cli.get_task(first.id).value.status == TaskStatus.IN_PROGRESS


def test_corrupted_file_is_reported_on_next_call(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    service = TaskService(open_store(path), clock=FakeClock())
    task = service.create_task("Fine so far").value

    path.write_text("{broken", encoding="utf-8")

    result = service.get_task(task.id)
    assert isinstance(result, Err)
    assert "Invalid JSON" in result.error.message
