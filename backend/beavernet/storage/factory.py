"""Storage Factory - builds the configured backend once at startup."""

import logging

from beavernet.config import Settings
from beavernet.core.domain_types import StorageBackend
from beavernet.storage.base import Storage
from beavernet.storage.database import DatabaseStorage
from beavernet.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Storage:
    backend = StorageBackend(settings.storage_backend)
    logger.info(f"Using {backend.value} storage backend")
    if backend is StorageBackend.DATABASE:
        return DatabaseStorage(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            create_tables=settings.database_create_tables,
        )
    return MemoryStorage()
