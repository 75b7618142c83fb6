"""Storage backends for the task store.

A backend keeps exactly one document: the four store fields serialized as
JSON. load() hydrates a store in place, save() replaces the document.

Documents are stored as:
    {
      "version": 1,
      "tasks": [...],
      "tasksDone": [...],
      "sortBy": "Priority",
      "showDonePanel": false
    }
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tasklist.errors import HydrationError, PersistenceWriteError
from tasklist.logging import Loggers
from tasklist.models import SortBy, Task
from tasklist.persistence._utils import atomic_write_text, dump_json

if TYPE_CHECKING:
    from tasklist.config import TaskListSettings
    from tasklist.store import TaskStore

logger = Loggers.persistence()

DOCUMENT_VERSION = 1


@dataclass
class StoreSnapshot:
    """Detached copy of the persisted store fields."""

    tasks: list[Task] = field(default_factory=list)
    tasks_done: list[Task] = field(default_factory=list)
    sort_by: SortBy = SortBy.PRIORITY
    show_done_panel: bool = False

    def __post_init__(self) -> None:
        self.tasks = [replace(task) for task in self.tasks]
        self.tasks_done = [replace(task) for task in self.tasks_done]

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": DOCUMENT_VERSION,
            "tasks": [task.to_dict() for task in self.tasks],
            "tasksDone": [task.to_dict() for task in self.tasks_done],
            "sortBy": self.sort_by.value,
            "showDonePanel": self.show_done_panel,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StoreSnapshot":
        """Create from a stored document.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If a value has the wrong type.
            ValueError: On an unknown version, sort value or duplicate id.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Document must be an object, got {type(data).__name__}")
        version = data.get("version")
        if version != DOCUMENT_VERSION:
            raise ValueError(f"Unsupported document version: {version!r}")
        if not isinstance(data["tasks"], list) or not isinstance(data["tasksDone"], list):
            raise TypeError("'tasks' and 'tasksDone' must be lists")
        if not isinstance(data["showDonePanel"], bool):
            raise TypeError("'showDonePanel' must be a boolean")

        tasks = [Task.from_dict(item) for item in data["tasks"]]
        tasks_done = [Task.from_dict(item) for item in data["tasksDone"]]

        seen: set[str] = set()
        for task in (*tasks, *tasks_done):
            if task.id in seen:
                raise ValueError(f"Duplicate task id: {task.id}")
            seen.add(task.id)

        return cls(
            tasks=tasks,
            tasks_done=tasks_done,
            sort_by=SortBy.parse(data["sortBy"]),
            show_done_panel=data["showDonePanel"],
        )


class StorageBackend(ABC):
    """Durable home for one task list document.

    Subclasses provide raw reads and writes; parsing, validation and error
    translation happen here.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the document lives."""

    @abstractmethod
    def _read(self) -> str | None:
        """Return the stored document, or None if nothing is stored."""

    @abstractmethod
    def _write(self, content: str) -> None:
        """Replace the stored document."""

    def load(self, target: "TaskStore") -> bool:
        """Hydrate target from the stored document.

        Args:
            target: Store whose fields are overwritten in place.

        Returns:
            True if a document was loaded, False if nothing was stored.

        Raises:
            HydrationError: If the document cannot be read or parsed.
                The target is left untouched.
        """
        try:
            raw = self._read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("hydration_failed", location=self.location, error=str(e))
            raise HydrationError(
                f"Could not read stored task list at {self.location}: {e}",
                details={"location": self.location},
            ) from e

        if raw is None:
            logger.debug("storage_empty", location=self.location)
            return False

        try:
            snapshot = StoreSnapshot.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.error("hydration_failed", location=self.location, error=str(e))
            raise HydrationError(
                f"Stored task list at {self.location} is corrupt: {e}",
                details={"location": self.location},
            ) from e

        target.restore(snapshot)
        logger.info(
            "storage_loaded",
            location=self.location,
            tasks=len(snapshot.tasks),
            tasks_done=len(snapshot.tasks_done),
        )
        return True

    def save(self, source: "TaskStore") -> None:
        """Serialize source and replace the stored document.

        Raises:
            PersistenceWriteError: If the write does not complete.
        """
        content = dump_json(source.snapshot().to_dict())
        try:
            self._write(content)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("storage_write_failed", location=self.location, error=str(e))
            raise PersistenceWriteError(
                f"Could not save task list to {self.location}: {e}",
                details={"location": self.location},
            ) from e
        logger.debug("storage_written", location=self.location, size=len(content))


class JsonFileStorage(StorageBackend):
    """Stores the document in a JSON file, written atomically.

    Files are saved to:
        {workspace_dir}/storage/{namespace}.json
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def _read(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _write(self, content: str) -> None:
        atomic_write_text(self.path, content)


class MemoryStorage(StorageBackend):
    """Keeps the document in memory for the life of the instance."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw

    @property
    def location(self) -> str:
        return "memory"

    def _read(self) -> str | None:
        return self.raw

    def _write(self, content: str) -> None:
        self.raw = content


def create_storage(settings: "TaskListSettings") -> StorageBackend:
    """Build the storage backend selected by settings.storage_backend."""
    if settings.storage_backend == "memory":
        return MemoryStorage()
    return JsonFileStorage(settings.storage_path)
