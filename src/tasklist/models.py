"""Task entity, sort preference values and the id generator."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tasklist.errors import InvalidSortByError, TaskFieldError


def generate_id() -> str:
    """Return an identifier unique for the life of the process."""
    return uuid.uuid4().hex


class SortBy(str, Enum):
    """Valid values for the store's sort preference."""

    PRIORITY = "Priority"
    DEADLINE = "Deadline"

    @classmethod
    def parse(cls, value: "SortBy | str") -> "SortBy":
        """Convert a member or its string value to a member.

        Raises:
            InvalidSortByError: If value is not one of the members.
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidSortByError(
                f"Invalid sort preference {value!r}; expected one of: {allowed}",
                details={"value": str(value), "allowed": [m.value for m in cls]},
            ) from None


FIELD_TYPES: dict[str, type | tuple[type, ...]] = {
    "id": str,
    "text": str,
    "done": bool,
    "assigned_to": str,
    "priority": str,
    "deadline": (str, type(None)),
}

STORED_KEYS = {"assigned_to": "assignedTo"}


def field_type_error(name: str, value: Any) -> str | None:
    """Describe why value cannot be stored in Task field name, or return None."""
    expected = FIELD_TYPES[name]
    if isinstance(value, expected):
        return None
    wanted = " or ".join(
        "null" if t is type(None) else t.__name__
        for t in (expected if isinstance(expected, tuple) else (expected,))
    )
    return f"Field {name!r} has type {type(value).__name__}, expected {wanted}"


def _field(data: dict[str, Any], name: str) -> Any:
    value = data[STORED_KEYS.get(name, name)]
    error = field_type_error(name, value)
    if error:
        raise TypeError(error)
    return value


@dataclass
class Task:
    """A single to-do item.

    Tasks are created by the caller and handed to TaskStore.add_task().
    The id is assigned at construction and never changes.

    Example:
        >>> task = Task("Buy milk", False, "Al", "High")
        >>> task.deadline is None
        True
    """

    text: str
    done: bool
    assigned_to: str
    priority: str
    deadline: str | None = None
    id: str = field(default_factory=generate_id)

    def validate(self) -> None:
        """Check every field holds a storable type.

        Raises:
            TaskFieldError: On the first field with a wrong type.
        """
        for name in FIELD_TYPES:
            error = field_type_error(name, getattr(self, name))
            if error:
                raise TaskFieldError(
                    f"Task {self.id!r} cannot be saved: {error}",
                    details={"task_id": str(self.id), "field": name},
                )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the task.

        Raises:
            TaskFieldError: If a field was edited to a type that
                from_dict() would reject.
        """
        self.validate()
        return {
            "id": self.id,
            "text": self.text,
            "done": self.done,
            "assignedTo": self.assigned_to,
            "priority": self.priority,
            "deadline": self.deadline,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Rebuild a task from its stored form.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Task entry must be an object, got {type(data).__name__}")
        return cls(
            id=_field(data, "id"),
            text=_field(data, "text"),
            done=_field(data, "done"),
            assigned_to=_field(data, "assigned_to"),
            priority=_field(data, "priority"),
            deadline=_field(data, "deadline") if "deadline" in data else None,
        )
