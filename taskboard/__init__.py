"""Taskboard - task tracking with trash, search and statistics."""

__version__ = "1.0.0"
