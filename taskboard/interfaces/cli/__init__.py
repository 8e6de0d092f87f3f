"""CLI interface for taskboard using Typer.

Usage:
    taskboard add "Write report"     # Add a task
    taskboard list -k report         # Search tasks
    taskboard task done <id>         # Complete a task
    taskboard stats                  # Counts per status
    taskboard serve                  # Run the HTTP API

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from taskboard import __version__
from taskboard.domain.task import MatchType
from taskboard.interfaces.cli.commands import task
from taskboard.interfaces.cli.common import (
    data_option,
    get_service,
    get_settings,
    print_info,
    print_separator,
    unwrap_or_exit,
)
from taskboard.logging_setup import configure_logging

# Create the main Typer application
app = typer.Typer(
    name="taskboard",
    help="Task tracking with trash, search and statistics",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskboard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output"),
) -> None:
    """Taskboard - task tracking with trash, search and statistics."""
    if verbose:
        configure_logging("DEBUG")


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("add")
def add(
    title: str = typer.Argument(..., help="Task title"),
    description: Optional[str] = typer.Option(None, "--description", "-m", help="Task description"),
    data: Optional[str] = data_option,
) -> None:
    """Add a task (shortcut for 'task add')."""
    task.add(title=title, description=description, data=data)


@app.command("list")
def list_tasks(
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Search title and description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help="Filter by status"),
    page: int = typer.Option(1, "--page", help="Page number"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Tasks per page"),
    include_deleted: bool = typer.Option(False, "--all", "-a", help="Include trashed tasks"),
    data: Optional[str] = data_option,
) -> None:
    """List tasks (shortcut for 'task list')."""
    task.list_tasks(
        keyword=keyword,
        status=status,
        page=page,
        limit=limit,
        include_deleted=include_deleted,
        data=data,
    )


# =============================================================================
# Search, Statistics and Server
# =============================================================================


@app.command("suggest")
def suggest(
    query: str = typer.Argument("", help="Title or description prefix"),
    data: Optional[str] = data_option,
) -> None:
    """Show tasks whose title or description starts with QUERY."""
    service = get_service(data)
    suggestions = unwrap_or_exit(service.suggest(query))
    if not suggestions:
        typer.echo("No suggestions.")
        return
    for suggestion in suggestions:
        text = suggestion.title if suggestion.match_type == MatchType.TITLE else suggestion.description
        typer.echo(f"[{suggestion.match_type.value}] {text} ({suggestion.id})")


@app.command("stats")
def stats(data: Optional[str] = data_option) -> None:
    """Show task counts per status (trash excluded)."""
    service = get_service(data)
    summary = unwrap_or_exit(service.summary())
    print_separator()
    typer.echo("TASK SUMMARY")
    print_separator()
    typer.echo(f"Pending:      {summary.pending}")
    typer.echo(f"In progress:  {summary.in_progress}")
    typer.echo(f"Completed:    {summary.completed}")
    typer.echo(f"Total:        {summary.total}")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Port"),
    data: Optional[str] = data_option,
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from taskboard.interfaces.api import create_app

    settings = get_settings(data)
    configure_logging(settings.log_level)
    bind_host = host or settings.host
    bind_port = port or settings.port
    print_info(f"Serving taskboard API on http://{bind_host}:{bind_port}")
    uvicorn.run(
        create_app(settings),
        host=bind_host,
        port=bind_port,
        log_config=None,
    )


__all__ = ["app"]
