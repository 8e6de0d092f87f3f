"""Task management CLI commands.

Commands for the task lifecycle: adding, listing, editing, moving between
statuses, trashing, restoring and permanently deleting tasks.
"""

from typing import Optional

import typer

from taskboard.domain.task import TaskPatch, TaskStatus
from taskboard.interfaces.cli.common import (
    data_option,
    get_service,
    print_success,
    print_task,
    print_task_table,
    unwrap_or_exit,
)

app = typer.Typer(help="Task management commands")


def _patch(
    title: Optional[str],
    description: Optional[str],
    status: Optional[str],
) -> TaskPatch:
    """Build a patch holding only the options that were given."""
    fields = {"title": title, "description": description, "status": status}
    return TaskPatch(**{k: v for k, v in fields.items() if v is not None})


# =============================================================================
# Commands
# =============================================================================


@app.command("add")
def add(
    title: str = typer.Argument(..., help="Task title"),
    description: Optional[str] = typer.Option(None, "--description", "-m", help="Task description"),
    data: Optional[str] = data_option,
) -> None:
    """Add a new pending task."""
    service = get_service(data)
    task = unwrap_or_exit(service.create_task(title, description))
    print_success(f"Added task {task.id}: {task.title}")


@app.command("list")
def list_tasks(
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Search title and description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="Filter by status"),
    page: int = typer.Option(1, "--page", help="Page number"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Tasks per page"),
    include_deleted: bool = typer.Option(False, "--all", "-a", help="Include trashed tasks"),
    data: Optional[str] = data_option,
) -> None:
    """List tasks, newest first or by relevance when searching."""
    service = get_service(data)
    result = unwrap_or_exit(service.list_tasks(keyword, status, page, limit, include_deleted))
    print_task_table(result.tasks, result.pagination)


@app.command("trash")
def trash(
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Search title and description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="Filter by status"),
    page: int = typer.Option(1, "--page", help="Page number"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Tasks per page"),
    data: Optional[str] = data_option,
) -> None:
    """List trashed tasks, most recently deleted first."""
    service = get_service(data)
    result = unwrap_or_exit(service.list_trash(keyword, status, page, limit))
    print_task_table(result.tasks, result.pagination, title="Trash")


@app.command("show")
def show(
    task_id: str = typer.Argument(..., help="Task ID"),
    data: Optional[str] = data_option,
) -> None:
    """Show one task."""
    service = get_service(data)
    print_task(unwrap_or_exit(service.get_task(task_id)))


@app.command("update")
def update(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    description: Optional[str] = typer.Option(None, "--description", "-m", help="New description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="New status"),
    data: Optional[str] = data_option,
) -> None:
    """Change some fields of a task.

    Title and description changes on a completed task are ignored.
    """
    service = get_service(data)
    task = unwrap_or_exit(service.update_task_partial(task_id, _patch(title, description, status)))
    print_success(f"Updated task {task.id}")
    print_task(task)


@app.command("edit")
def edit(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    description: Optional[str] = typer.Option(None, "--description", "-m", help="New description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="New status"),
    data: Optional[str] = data_option,
) -> None:
    """Replace fields of a task.

    Fails on a completed task unless it is being reverted to in-progress.
    """
    service = get_service(data)
    task = unwrap_or_exit(service.update_task_full(task_id, _patch(title, description, status)))
    print_success(f"Updated task {task.id}")
    print_task(task)


@app.command("start")
def start(
    task_id: str = typer.Argument(..., help="Task ID"),
    data: Optional[str] = data_option,
) -> None:
    """Mark a task in-progress (also reopens a completed task)."""
    service = get_service(data)
    task = unwrap_or_exit(service.set_status(task_id, TaskStatus.IN_PROGRESS))
    print_success(f"Started: {task.title}")


@app.command("done")
def done(
    task_id: str = typer.Argument(..., help="Task ID"),
    data: Optional[str] = data_option,
) -> None:
    """Mark a task completed."""
    service = get_service(data)
    task = unwrap_or_exit(service.set_status(task_id, TaskStatus.COMPLETED))
    print_success(f"Marked done: {task.title}")


@app.command("delete")
def delete(
    task_id: str = typer.Argument(..., help="Task ID"),
    data: Optional[str] = data_option,
) -> None:
    """Move a task to the trash."""
    service = get_service(data)
    task = unwrap_or_exit(service.soft_delete_task(task_id))
    print_success(f"Moved to trash: {task.title}")


@app.command("restore")
def restore(
    task_id: str = typer.Argument(..., help="Task ID"),
    data: Optional[str] = data_option,
) -> None:
    """Restore a task from the trash."""
    service = get_service(data)
    task = unwrap_or_exit(service.restore_task(task_id))
    print_success(f"Restored: {task.title}")


@app.command("purge")
def purge(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    data: Optional[str] = data_option,
) -> None:
    """Permanently delete a task. This cannot be undone."""
    if not yes:
        typer.confirm(f"Permanently delete task {task_id}?", abort=True)
    service = get_service(data)
    task = unwrap_or_exit(service.hard_delete_task(task_id))
    print_success(f"Permanently deleted: {task.title}")
