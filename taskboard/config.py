"""Settings for taskboard.

Settings live in ``~/.taskboard/config.json`` and can be overridden with
``TASKBOARD_*`` environment variables (``TASKBOARD_STORE``,
``TASKBOARD_DATA_PATH``, ``TASKBOARD_LOG_LEVEL``, ...). The config
directory itself can be moved with ``TASKBOARD_HOME``.
"""

import json
import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKBOARD_"


class StoreBackend(str, Enum):
    """Available Store Adapter implementations."""

    MEMORY = "memory"
    JSON = "json"


def get_config_dir() -> Path:
    """Get the taskboard config directory."""
    home = os.environ.get(f"{ENV_PREFIX}HOME")
    return Path(home) if home else Path.home() / ".taskboard"


class Settings(BaseModel):
    """Runtime configuration."""

    store: StoreBackend = StoreBackend.JSON
    data_path: Path = Field(default_factory=lambda: get_config_dir() / "tasks.json")
    default_page_limit: int = Field(default=10, ge=1)
    max_page_limit: int = Field(default=100, ge=1)
    suggestion_limit: int = Field(default=10, ge=1)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )


def _env_overrides(environ: Mapping[str, str]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for name in Settings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        if name == "cors_origins":
            overrides[name] = [o.strip() for o in raw.split(",") if o.strip()]
        else:
            overrides[name] = raw
    return overrides


def _without_invalid(data: dict[str, object], source: str) -> dict[str, object]:
    """Drop the keys of ``data`` that fail validation, warning about each."""
    try:
        Settings(**data)
    except ValidationError as e:
        bad = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
        for key in sorted(bad):
            logger.warning(f"Ignoring invalid setting {key!r} from {source}")
        return {k: v for k, v in data.items() if k not in bad}
    return data


def _read_config_file(config_file: Path) -> dict[str, object]:
    if not config_file.exists():
        return {}
    try:
        loaded = json.loads(config_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable config {config_file}: {e}")
        return {}
    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring config {config_file}: expected a JSON object")
        return {}
    return _without_invalid(loaded, str(config_file))


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from the config file, then apply environment overrides.

    A missing or unreadable config file falls back to defaults. An invalid
    value only discards that one setting: the file's other settings are
    kept, and each environment override is checked on its own.
    """
    environ = os.environ if environ is None else environ
    data = _read_config_file(get_config_dir() / "config.json")

    for key, value in _env_overrides(environ).items():
        candidate = {**data, key: value}
        try:
            Settings(**candidate)
        except ValidationError:
            logger.warning(f"Ignoring invalid setting {ENV_PREFIX}{key.upper()}={value!r}")
            continue
        data = candidate

    return Settings(**data)


def save_settings(settings: Settings) -> Path:
    """Save settings to the config file and return its path."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "config.json"
    config_file.write_text(
        json.dumps(settings.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
    return config_file
