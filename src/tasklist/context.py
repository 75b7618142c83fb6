"""Application context owning settings, storage and the task store.

A host builds one AppContext at startup and hands it (or its store) to the
layers that need it. Context variables let UI code reach the current store
without an import-time global.

Example:
    with app_context(settings) as app:
        app.store.add_task(Task("Buy milk", False, "Al", "Priority"))
        assert get_store() is app.store
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Generator

from tasklist.config import TaskListSettings, get_settings
from tasklist.logging import Loggers, bind_context, configure_logging, unbind_context
from tasklist.persistence import StorageBackend, create_storage
from tasklist.store import TaskStore

logger = Loggers.config()


@dataclass
class AppContext:
    """Everything one running task list session needs."""

    settings: TaskListSettings
    storage: StorageBackend
    store: TaskStore

    @classmethod
    def create(
        cls,
        settings: TaskListSettings | None = None,
        storage: StorageBackend | None = None,
    ) -> "AppContext":
        """Build and hydrate a new context.

        Args:
            settings: Settings to use. Defaults to get_settings().
            storage: Storage backend. Defaults to the one settings select.

        Raises:
            HydrationError: If stored state exists but is corrupt.
        """
        if settings is None:
            settings = get_settings()
        configure_logging(settings)
        if storage is None:
            storage = create_storage(settings)
        store = TaskStore(storage)
        logger.info(
            "app_context_created",
            app_name=settings.app_name,
            storage=storage.location,
        )
        return cls(settings=settings, storage=storage, store=store)


_app_context: ContextVar[AppContext | None] = ContextVar("app_context", default=None)


def set_context_app(app: AppContext | None) -> Token:
    """Make app the current context. Returns a token for reset."""
    return _app_context.set(app)


def get_context_app() -> AppContext | None:
    """Return the current context, or None."""
    return _app_context.get()


def get_store() -> TaskStore:
    """Return the current context's store.

    Raises:
        RuntimeError: If no context is active.
    """
    app = _app_context.get()
    if app is None:
        raise RuntimeError("No task list context is active")
    return app.store


@contextmanager
def app_context(
    settings: TaskListSettings | None = None,
    storage: StorageBackend | None = None,
) -> Generator[AppContext, None, None]:
    """Create an AppContext and make it current for the block.

    Log lines emitted inside the block carry the store location.
    """
    app = AppContext.create(settings, storage)
    token = _app_context.set(app)
    bind_context(store_location=app.storage.location)
    try:
        yield app
    finally:
        unbind_context("store_location")
        _app_context.reset(token)
