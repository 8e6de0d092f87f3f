"""Interfaces layer for taskboard.

This layer contains adapters for external interactions:
- CLI: Command-line interface using Typer
- API: REST API using FastAPI

The interfaces layer is responsible for:
- Accepting user input
- Calling the task service
- Formatting output and mapping errors for the user
"""

from taskboard.interfaces.cli import app

__all__ = ["app"]
