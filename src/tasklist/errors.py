"""Exceptions raised by the task store and its storage backends.

Every error carries a machine-readable code and a recoverable flag so a UI
layer can turn it into an actionable message via to_dict().
"""

from typing import Any


class ErrorCode:
    """Standard error codes."""

    HYDRATION_FAILED = "HYDRATION_FAILED"
    WRITE_FAILED = "WRITE_FAILED"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    INVALID_SORT_BY = "INVALID_SORT_BY"
    DUPLICATE_TASK = "DUPLICATE_TASK"
    INVALID_FIELD = "INVALID_FIELD"


class TaskListError(Exception):
    """Base error for task list failures.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        recoverable: Whether retrying (or fixing input) might succeed
        details: Additional error details
    """

    default_code = "TASKLIST_ERROR"
    default_recoverable = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        recoverable: bool | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.recoverable = (
            self.default_recoverable if recoverable is None else recoverable
        )
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "success": False,
            "error": {
                "message": self.message,
                "code": self.error_code,
                "recoverable": self.recoverable,
                "details": self.details,
            },
        }


class HydrationError(TaskListError):
    """Stored state exists but cannot be read back into a store."""

    default_code = ErrorCode.HYDRATION_FAILED


class PersistenceWriteError(TaskListError):
    """The durable write did not complete.

    In-memory state has already changed; calling save() again may succeed.
    """

    default_code = ErrorCode.WRITE_FAILED
    default_recoverable = True


class TaskIndexError(TaskListError, IndexError):
    """Index does not address an active task."""

    default_code = ErrorCode.INDEX_OUT_OF_RANGE
    default_recoverable = True


class InvalidSortByError(TaskListError, ValueError):
    """Sort preference is not one of the SortBy values."""

    default_code = ErrorCode.INVALID_SORT_BY
    default_recoverable = True


class DuplicateTaskError(TaskListError, ValueError):
    """A task with the same id is already stored."""

    default_code = ErrorCode.DUPLICATE_TASK
    default_recoverable = True


class TaskFieldError(TaskListError, ValueError):
    """Field cannot be updated through the store."""

    default_code = ErrorCode.INVALID_FIELD
    default_recoverable = True
