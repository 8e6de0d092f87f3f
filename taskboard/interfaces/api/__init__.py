"""API interface for taskboard.

This module exports the FastAPI router and app factory.
"""

from taskboard.interfaces.api.routes import create_app, router

__all__ = ["router", "create_app"]
