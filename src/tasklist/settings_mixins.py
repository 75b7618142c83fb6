"""Settings mixins for application identity, storage and logging.

AppSettingsMixin: Application identity and disk layout (app_name, workspace).
StorageSettingsMixin: Which storage backend holds the task list, and where.
LoggingSettingsMixin: Log level and output format.

Each mixin is composed with pydantic-settings' BaseSettings in config.py.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator

from tasklist.persistence._utils import sanitize_filename


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="tasklist",
        title="App Name",
        description="Application name, also used for config directories",
    )

    workspace_dir: Path = Field(
        default_factory=lambda: Path.home() / ".tasklist",
        title="Workspace Directory",
        description="Directory holding the persisted task list",
    )

    @field_validator("workspace_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    def ensure_workspace_exists(self) -> None:
        """Create workspace directory if it doesn't exist."""
        self.workspace_dir.mkdir(parents=True, exist_ok=True)

    @property
    def storage_dir(self) -> Path:
        """Directory for stored documents."""
        return self.workspace_dir / "storage"


class StorageSettingsMixin:
    """Settings for the storage backend.

    One document is kept per namespace; the default namespace matches the
    single store a host normally runs.
    """

    storage_backend: Literal["file", "memory"] = Field(
        default="file",
        title="Storage Backend",
        description="Where the task list is persisted (file or memory)",
    )
    storage_namespace: str = Field(
        default="app_data",
        title="Storage Namespace",
        description="Key the task list document is stored under",
    )

    @field_validator("storage_namespace")
    @classmethod
    def sanitize_namespace(cls, v: str) -> str:
        """Keep the namespace usable as a filename."""
        v = sanitize_filename(v.strip())
        if not v:
            raise ValueError("storage_namespace must not be empty")
        return v

    @property
    def storage_path(self) -> Path:
        """File holding the task list document for the file backend."""
        return self.storage_dir / f"{self.storage_namespace}.json"


class LoggingSettingsMixin:
    """Settings for log output."""

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
