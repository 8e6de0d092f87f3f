"""Store construction from settings."""

import logging

from taskboard.config import Settings, StoreBackend
from taskboard.domain.shared import Ok, Result
from taskboard.infrastructure.storage import (
    InMemoryTaskStore,
    JsonTaskStore,
    StoreFailure,
    TaskStore,
)

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> Result[TaskStore, StoreFailure]:
    """Open the store selected by ``settings.store``."""
    if settings.store == StoreBackend.MEMORY:
        logger.info("Using in-memory task store")
        return Ok(InMemoryTaskStore())
    logger.info(f"Using JSON task store at {settings.data_path}")
    return JsonTaskStore.open(settings.data_path)
