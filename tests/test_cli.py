# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from taskboard import __version__
from taskboard.interfaces.cli import app


def stored_tasks(home: Path) -> list[dict]:
    return json.loads((home / "tasks.json").read_text(encoding="utf-8"))["tasks"]


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_add_and_show(runner: CliRunner, taskboard_home: Path) -> None:
    result = runner.invoke(app, ["add", "Write report", "-m", "quarterly"])
    assert result.exit_code == 0, result.output
    assert "Added task" in result.output

    task_id = stored_tasks(taskboard_home)[0]["id"]
    result = runner.invoke(app, ["task", "show", task_id])
    assert result.exit_code == 0
    assert "Write report" in result.output
    assert "pending" in result.output


def test_add_blank_title_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["add", "   "])
    assert result.exit_code == 1
    assert "Title is required" in result.output


def test_lifecycle(runner: CliRunner, taskboard_home: Path) -> None:
    runner.invoke(app, ["add", "Ship"])
    task_id = stored_tasks(taskboard_home)[0]["id"]

    assert runner.invoke(app, ["task", "done", task_id]).exit_code == 0
    assert stored_tasks(taskboard_home)[0]["status"] == "completed"

    result = runner.invoke(app, ["task", "edit", task_id, "--title", "Renamed"])
    assert result.exit_code == 1
    assert "Completed tasks cannot be edited" in result.output

    result = runner.invoke(app, ["task", "update", task_id, "--title", "Renamed"])
    assert result.exit_code == 0
    assert stored_tasks(taskboard_home)[0]["title"] == "Ship"

    assert runner.invoke(app, ["task", "start", task_id]).exit_code == 0
    assert stored_tasks(taskboard_home)[0]["completedAt"] is None

    assert runner.invoke(app, ["task", "delete", task_id]).exit_code == 0
    assert stored_tasks(taskboard_home)[0]["isDeleted"] is True
    assert "No tasks found." in runner.invoke(app, ["list"]).output

    assert runner.invoke(app, ["task", "restore", task_id]).exit_code == 0
    assert stored_tasks(taskboard_home)[0]["isDeleted"] is False

    assert runner.invoke(app, ["task", "purge", task_id, "--yes"]).exit_code == 0
    assert stored_tasks(taskboard_home) == []


def test_purge_asks_for_confirmation(runner: CliRunner, taskboard_home: Path) -> None:
    runner.invoke(app, ["add", "Keep"])
    task_id = stored_tasks(taskboard_home)[0]["id"]

    result = runner.invoke(app, ["task", "purge", task_id], input="n\n")
    assert result.exit_code == 1
    assert len(stored_tasks(taskboard_home)) == 1


def test_missing_task(runner: CliRunner) -> None:
    result = runner.invoke(app, ["task", "show", "0" * 32])
    assert result.exit_code == 1
    assert "Task not found" in result.output


def test_list_and_trash(runner: CliRunner, taskboard_home: Path) -> None:
    runner.invoke(app, ["add", "Alpha"])
    runner.invoke(app, ["add", "Beta"])

    result = runner.invoke(app, ["list", "-k", "alp"])
    assert result.exit_code == 0
    assert "Alpha" in result.output
    assert "Beta" not in result.output
    assert "(1 total)" in result.output

    beta_id = next(t["id"] for t in stored_tasks(taskboard_home) if t["title"] == "Beta")
    runner.invoke(app, ["task", "delete", beta_id])
    result = runner.invoke(app, ["task", "trash"])
    assert result.exit_code == 0
    assert "Beta" in result.output


def test_suggest_and_stats(runner: CliRunner) -> None:
    runner.invoke(app, ["add", "Apple pie"])
    runner.invoke(app, ["add", "Fruit", "-m", "apple juice"])

    result = runner.invoke(app, ["suggest", "app"])
    assert result.exit_code == 0
    assert "[title] Apple pie" in result.output
    assert "[description] apple juice" in result.output

    assert "No suggestions." in runner.invoke(app, ["suggest", ""]).output

    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Pending:      2" in result.output
    assert "Total:        2" in result.output
