"""Persistence layer for the task store."""

from tasklist.persistence.storage import (
    DOCUMENT_VERSION,
    JsonFileStorage,
    MemoryStorage,
    StorageBackend,
    StoreSnapshot,
    create_storage,
)

__all__ = [
    "DOCUMENT_VERSION",
    "JsonFileStorage",
    "MemoryStorage",
    "StorageBackend",
    "StoreSnapshot",
    "create_storage",
]
