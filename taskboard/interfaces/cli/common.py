"""Shared utilities for taskboard CLI commands.

This module provides common utilities used across CLI commands:
- Service construction from settings
- Formatted output helpers (error, success, info)
- Task formatting for display
"""

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskboard.application import TaskService
from taskboard.config import Settings, StoreBackend, load_settings
from taskboard.domain.shared import Err, Result, is_err
from taskboard.domain.task import Pagination, Task, TaskStatus
from taskboard.infrastructure import build_store

# Reusable data file option for CLI commands
# Usage: def my_command(data: Optional[str] = data_option) -> None:
data_option = typer.Option(
    None,
    "--data",
    "-d",
    help="Task file (or set TASKBOARD_DATA_PATH env var)",
    envvar="TASKBOARD_DATA_PATH",
)

STATUS_COLORS = {
    TaskStatus.PENDING: "yellow",
    TaskStatus.IN_PROGRESS: "cyan",
    TaskStatus.COMPLETED: "green",
}


def get_settings(data: str | None = None) -> Settings:
    """Load settings, pointing the JSON store at ``data`` when given."""
    settings = load_settings()
    if data:
        settings = settings.model_copy(update={"store": StoreBackend.JSON, "data_path": Path(data)})
    return settings


def get_service(data: str | None = None) -> TaskService:
    """Open the configured store and wrap it in a service.

    Raises:
        typer.Exit: If the store cannot be opened.
    """
    settings = get_settings(data)
    store = build_store(settings)
    if isinstance(store, Err):
        print_error(store.error.message)
        raise typer.Exit(1)
    return TaskService(
        store.value,
        default_page_limit=settings.default_page_limit,
        max_page_limit=settings.max_page_limit,
        suggestion_limit=settings.suggestion_limit,
    )


def unwrap_or_exit(result: Result) -> Any:
    """Return the Ok value, or print the error and exit with code 1."""
    if is_err(result):
        print_error(result.error.message)
        raise typer.Exit(1)
    return result.value


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line.

    Args:
        char: Character to use for separator
        width: Width of the separator line
    """
    typer.echo(char * width)


def format_timestamp(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def print_task(task: Task) -> None:
    """Print the full details of one task."""
    print_separator()
    typer.echo(f"{task.title}")
    print_separator()
    typer.echo(f"ID:          {task.id}")
    typer.echo(f"Status:      {task.status.value}")
    if task.description:
        typer.echo(f"Description: {task.description}")
    typer.echo(f"Created:     {format_timestamp(task.created_at)}")
    typer.echo(f"Updated:     {format_timestamp(task.updated_at)}")
    if task.completed_at:
        typer.echo(f"Completed:   {format_timestamp(task.completed_at)}")
    if task.is_deleted:
        typer.echo(f"Deleted:     {format_timestamp(task.deleted_at)}")


def print_task_table(tasks: list[Task], pagination: Pagination, title: str = "Tasks") -> None:
    """Print tasks as a table followed by the page position."""
    if not tasks:
        typer.echo("No tasks found.")
        return

    table = Table(title=title)
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Created")
    for task in tasks:
        color = STATUS_COLORS[task.status]
        title_text = escape(task.title)
        if task.is_deleted:
            title_text = f"[strike]{title_text}[/strike]"
        table.add_row(
            task.id,
            title_text,
            f"[{color}]{task.status.value}[/{color}]",
            format_timestamp(task.created_at),
        )
    Console().print(table)
    typer.echo(
        f"Page {pagination.current} of {pagination.pages} ({pagination.total} total)"
    )


__all__ = [
    "data_option",
    "get_settings",
    "get_service",
    "unwrap_or_exit",
    "print_error",
    "print_success",
    "print_info",
    "print_separator",
    "print_task",
    "print_task_table",
]
