# tests/test_config.py

from __future__ import annotations

import json
from pathlib import Path

from taskboard.config import Settings, StoreBackend, load_settings, save_settings


def test_defaults(taskboard_home: Path) -> None:
    settings = load_settings(environ={})
    assert settings.store == StoreBackend.JSON
    assert settings.data_path == taskboard_home / "tasks.json"
    assert settings.default_page_limit == 10
    assert settings.max_page_limit == 100


def test_file_then_environment(taskboard_home: Path) -> None:
    (taskboard_home / "config.json").write_text(
        json.dumps({"store": "memory", "max_page_limit": 20, "log_level": "DEBUG"}),
        encoding="utf-8",
    )
    settings = load_settings(
        environ={
            "TASKBOARD_MAX_PAGE_LIMIT": "50",
            "TASKBOARD_CORS_ORIGINS": "http://a.test, http://b.test",
        }
    )
    assert settings.store == StoreBackend.MEMORY
    assert settings.max_page_limit == 50
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_unreadable_file_falls_back(taskboard_home: Path) -> None:
    (taskboard_home / "config.json").write_text("nope", encoding="utf-8")
    assert load_settings(environ={}) == Settings()


def test_invalid_environment_value_only_drops_that_setting(taskboard_home: Path) -> None:
    data_path = taskboard_home / "prod" / "tasks.json"
    (taskboard_home / "config.json").write_text(
        json.dumps({"store": "json", "data_path": str(data_path), "port": 8080}),
        encoding="utf-8",
    )
    settings = load_settings(
        environ={"TASKBOARD_PORT": "eighty", "TASKBOARD_MAX_PAGE_LIMIT": "50"}
    )
    assert settings.store == StoreBackend.JSON
    assert settings.data_path == data_path
    assert settings.port == 8080
    assert settings.max_page_limit == 50


def test_invalid_file_value_only_drops_that_setting(taskboard_home: Path) -> None:
    data_path = taskboard_home / "elsewhere.json"
    (taskboard_home / "config.json").write_text(
        json.dumps({"data_path": str(data_path), "max_page_limit": 0, "log_level": "DEBUG"}),
        encoding="utf-8",
    )
    settings = load_settings(environ={})
    assert settings.data_path == data_path
    assert settings.max_page_limit == 100
    assert settings.log_level == "DEBUG"


def test_save_round_trip(taskboard_home: Path) -> None:
    path = save_settings(Settings(store=StoreBackend.MEMORY, port=8080))
    assert path == taskboard_home / "config.json"
    assert load_settings(environ={}).port == 8080
