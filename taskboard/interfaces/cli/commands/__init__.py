"""CLI command groups for taskboard.

Command groups:
- task: Task lifecycle management (add, list, update, delete, etc.)

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from taskboard.interfaces.cli.commands import task

__all__ = ["task"]
