# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from taskboard.application import TaskService
from taskboard.config import Settings, StoreBackend
from taskboard.infrastructure.storage import InMemoryTaskStore
from taskboard.interfaces.api import create_app

from .fakes import FakeClock


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def service(store: InMemoryTaskStore, clock: FakeClock) -> TaskService:
    return TaskService(store, clock=clock)


@pytest.fixture()
def client(service: TaskService) -> TestClient:
    app = create_app(Settings(store=StoreBackend.MEMORY), service=service)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def taskboard_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory and JSON store at a temp dir."""
    monkeypatch.setenv("TASKBOARD_HOME", str(tmp_path))
    for name in ("STORE", "DATA_PATH", "LOG_LEVEL", "DEFAULT_PAGE_LIMIT", "MAX_PAGE_LIMIT"):
        monkeypatch.delenv(f"TASKBOARD_{name}", raising=False)
    return tmp_path


@pytest.fixture()
def runner(taskboard_home: Path) -> CliRunner:
    return CliRunner()
