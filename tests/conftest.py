"""Shared test fixtures and utilities for tasklist tests.

Provides:
- MockContext for isolating tests from global state
- Temporary workspace fixtures
- Storage backend fixtures
"""

import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from tasklist.config import (
    TaskListSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from tasklist.context import set_context_app
from tasklist.models import Task
from tasklist.persistence import JsonFileStorage, MemoryStorage


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Resetting global settings singleton
    - Providing a temporary workspace directory
    - Cleaning up after tests

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            workspace = ctx.workspace_dir
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TaskListSettings | None = None
        self._original_env: dict[str, str | None] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        workspace_dir = Path(self._temp_dir.name)

        # Keep TASKLIST_* variables from the developer's shell out of tests
        for var in [k for k in os.environ if k.startswith("TASKLIST_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = TaskListSettings(
            workspace_dir=workspace_dir,
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        set_context_app(None)

        for var, value in self._original_env.items():
            if value is not None:
                os.environ[var] = value

        reload_settings()

        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TaskListSettings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def workspace_dir(self) -> Path:
        """Get the temporary workspace directory."""
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name)


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Fixture providing a temporary workspace directory."""
    workspace = tmp_path / "workspace"
    workspace.mkdir(parents=True)
    return workspace


@pytest.fixture
def memory_storage() -> Generator[MemoryStorage, None, None]:
    """Fixture providing an empty in-memory backend.

    Its _write is wrapped in a mock so tests can count writes.
    """
    storage = MemoryStorage()
    with patch.object(storage, "_write", wraps=storage._write):
        yield storage


@pytest.fixture
def file_storage(temp_workspace: Path) -> JsonFileStorage:
    """Fixture providing a file backend inside the temporary workspace."""
    return JsonFileStorage(temp_workspace / "storage" / "app_data.json")


def make_task(text: str = "Buy milk", **kwargs) -> Task:
    """Build a fresh, not-done task."""
    return Task(
        text,
        kwargs.pop("done", False),
        kwargs.pop("assigned_to", "Al"),
        kwargs.pop("priority", "Priority"),
        **kwargs,
    )


@pytest.fixture
def task_factory():
    """Fixture returning make_task."""
    return make_task
