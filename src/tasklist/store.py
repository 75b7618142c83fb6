"""Task store: the source of truth for a to-do list UI.

Holds the active and completed task lists, the sort preference and the
done-panel visibility flag. Every mutation ends with a commit that writes
the whole store through its storage backend, so persisted and in-memory
state match whenever a call returns.
"""

from typing import Any

from tasklist.errors import DuplicateTaskError, TaskFieldError, TaskIndexError
from tasklist.logging import Loggers
from tasklist.models import SortBy, Task, field_type_error
from tasklist.persistence import StorageBackend, StoreSnapshot

logger = Loggers.store()


class TaskStore:
    """Persistent task list model.

    The store hydrates itself from storage on construction. Sorting and
    filtering are left to consumers; the store only keeps the preference.

    Example:
        >>> store = TaskStore(MemoryStorage())
        >>> store.add_task(Task("Buy milk", False, "Al", "Priority"))
        >>> store.mark_task_done(0)
        >>> store.tasks_done[0].done
        True
    """

    UPDATABLE_FIELDS = frozenset({"text", "assigned_to", "priority", "deadline"})

    def __init__(self, storage: StorageBackend) -> None:
        self._storage = storage
        self.tasks: list[Task] = []
        self.tasks_done: list[Task] = []
        self._sort_by = SortBy.PRIORITY
        self._show_done_panel = False

        loaded = self._storage.load(self)
        logger.debug(
            "store_hydrated",
            loaded=loaded,
            tasks=len(self.tasks),
            tasks_done=len(self.tasks_done),
        )

    @property
    def storage(self) -> StorageBackend:
        return self._storage

    @property
    def sort_by(self) -> SortBy:
        """Current sort preference. Change it with save_sort_by()."""
        return self._sort_by

    @property
    def show_done_panel(self) -> bool:
        return self._show_done_panel

    @show_done_panel.setter
    def show_done_panel(self, value: bool) -> None:
        self._show_done_panel = bool(value)
        self._commit("show_done_panel_saved", value=self._show_done_panel)

    def save_sort_by(self, value: SortBy | str) -> None:
        """Store the sort preference.

        Args:
            value: A SortBy member or its string value.

        Raises:
            InvalidSortByError: If value is not a SortBy value. Nothing is
                changed or written.
        """
        self._sort_by = SortBy.parse(value)
        self._commit("sort_by_saved", value=self._sort_by.value)

    def mark_task_done(self, index: int) -> None:
        """Move an active task to the front of the completed list.

        The task's done flag is toggled before the move.

        Args:
            index: Position of the task in tasks.

        Raises:
            TaskIndexError: If index does not address an active task. Both
                lists are left unchanged.
        """
        self._check_index(index)
        task = self.tasks[index]
        task.done = not task.done
        del self.tasks[index]
        self.tasks_done.insert(0, task)
        self._commit("task_marked_done", task_id=task.id, index=index)

    def add_task(self, task: Task) -> None:
        """Append a task to the active list.

        Raises:
            DuplicateTaskError: If a task with the same id is already stored.
            TaskFieldError: If a field holds a type that cannot be stored.
        """
        task.validate()
        if self._contains_id(task.id):
            raise DuplicateTaskError(
                f"Task {task.id} is already in the store",
                details={"task_id": task.id},
            )
        self.tasks.append(task)
        self._commit("task_added", task_id=task.id, index=len(self.tasks) - 1)

    def get_task_index(self, task: Task) -> int:
        """Return the position of task in the active list, or -1.

        Tasks are matched by id. Completed tasks are not searched.
        """
        for i, element in enumerate(self.tasks):
            if element.id == task.id:
                return i
        return -1

    def update_task(self, index: int, **changes: Any) -> Task:
        """Update fields of an active task and persist.

        Args:
            index: Position of the task in tasks.
            **changes: New values for text, assigned_to, priority or deadline.

        Returns:
            The updated task.

        Raises:
            TaskIndexError: If index does not address an active task.
            TaskFieldError: If a field is unknown, protected or has the
                wrong type. Nothing is changed.
        """
        self._check_index(index)
        for key, value in changes.items():
            if key not in self.UPDATABLE_FIELDS:
                raise TaskFieldError(
                    f"Field {key!r} cannot be updated; "
                    f"allowed: {', '.join(sorted(self.UPDATABLE_FIELDS))}",
                    details={"field": key},
                )
            error = field_type_error(key, value)
            if error:
                raise TaskFieldError(error, details={"field": key})

        task = self.tasks[index]
        for key, value in changes.items():
            setattr(task, key, value)
        self._commit("task_updated", task_id=task.id, fields=sorted(changes))
        return task

    def save(self) -> None:
        """Write current state, e.g. after editing task fields directly.

        Raises:
            TaskFieldError: If a direct edit left a field with a type that
                cannot be stored. Nothing is written.
        """
        self._commit("store_saved")

    def snapshot(self) -> StoreSnapshot:
        """Return a detached copy of the persisted fields."""
        return StoreSnapshot(
            tasks=self.tasks,
            tasks_done=self.tasks_done,
            sort_by=self._sort_by,
            show_done_panel=self._show_done_panel,
        )

    def restore(self, snapshot: StoreSnapshot) -> None:
        """Overwrite the persisted fields in place. Does not write."""
        self.tasks = list(snapshot.tasks)
        self.tasks_done = list(snapshot.tasks_done)
        self._sort_by = SortBy.parse(snapshot.sort_by)
        self._show_done_panel = snapshot.show_done_panel

    # ---- helpers ----

    def _commit(self, event: str, **fields: Any) -> None:
        self._storage.save(self)
        logger.info(event, **fields)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TaskIndexError(
                f"Task index must be an integer, got {type(index).__name__}",
                details={"index": repr(index)},
            )
        if not 0 <= index < len(self.tasks):
            raise TaskIndexError(
                f"Task index {index} out of range for {len(self.tasks)} active tasks",
                details={"index": index, "size": len(self.tasks)},
            )

    def _contains_id(self, task_id: str) -> bool:
        return any(t.id == task_id for t in self.tasks) or any(
            t.id == task_id for t in self.tasks_done
        )
