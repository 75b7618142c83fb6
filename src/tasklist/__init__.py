"""tasklist - a to-do list model that persists itself on every change.

The package provides:

- TaskStore: active and completed tasks plus display preferences
- Task and SortBy: the stored entity and the sort preference values
- Storage backends (JSON file, in-memory) behind one load/save contract
- AppContext: owns settings, storage and the store for one session
- Layered settings (pydantic-settings) and structured logging (structlog)
"""

from tasklist.config import (
    SettingsContext,
    TaskListSettings,
    get_context_settings,
    get_settings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from tasklist.context import (
    AppContext,
    app_context,
    get_context_app,
    get_store,
    set_context_app,
)
from tasklist.errors import (
    DuplicateTaskError,
    ErrorCode,
    HydrationError,
    InvalidSortByError,
    PersistenceWriteError,
    TaskFieldError,
    TaskIndexError,
    TaskListError,
)
from tasklist.models import SortBy, Task, generate_id
from tasklist.persistence import (
    JsonFileStorage,
    MemoryStorage,
    StorageBackend,
    StoreSnapshot,
    create_storage,
)
from tasklist.store import TaskStore

__version__ = "0.1.0"

__all__ = [
    # Store
    "TaskStore",
    "Task",
    "SortBy",
    "generate_id",
    # Persistence
    "StorageBackend",
    "JsonFileStorage",
    "MemoryStorage",
    "StoreSnapshot",
    "create_storage",
    # Context
    "AppContext",
    "app_context",
    "get_context_app",
    "set_context_app",
    "get_store",
    # Settings
    "TaskListSettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "reload_settings",
    # Errors
    "TaskListError",
    "ErrorCode",
    "HydrationError",
    "PersistenceWriteError",
    "TaskIndexError",
    "InvalidSortByError",
    "DuplicateTaskError",
    "TaskFieldError",
]
