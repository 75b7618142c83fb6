#!/usr/bin/env python
"""Standalone demo for the task store.

This demo walks through:
1. Creating an application context over a temporary workspace
2. Adding tasks and marking them done
3. Saving preferences
4. Reopening the workspace and seeing the same state
5. How errors are reported to a UI layer

Usage:
    python examples/tasklist_demo.py
"""

import tempfile
from pathlib import Path

from tasklist import (
    AppContext,
    SortBy,
    Task,
    TaskListError,
    TaskListSettings,
)


def print_store(app: AppContext) -> None:
    store = app.store
    print(f"    sort_by: {store.sort_by.value}  show_done_panel: {store.show_done_panel}")
    for i, task in enumerate(store.tasks):
        print(f"    [{i}] {task.text} ({task.assigned_to}, {task.priority})")
    for task in store.tasks_done:
        print(f"    [x] {task.text}")


def main() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        settings = TaskListSettings(workspace_dir=Path(temp_dir), log_level="info")

        print("=" * 60)
        print("First session")
        print("=" * 60)
        app = AppContext.create(settings)
        app.store.add_task(Task("Buy milk", False, "Al", "High"))
        app.store.add_task(Task("Walk dog", False, "Bo", "Low"))
        app.store.add_task(Task("File taxes", False, "Al", "High"))
        app.store.mark_task_done(1)
        app.store.update_task(1, deadline="2024-04-15")
        app.store.save_sort_by(SortBy.DEADLINE)
        app.store.show_done_panel = True
        print_store(app)

        print("\n" + "=" * 60)
        print("Second session (hydrated from disk)")
        print("=" * 60)
        reopened = AppContext.create(settings)
        print_store(reopened)
        print(f"    stored at: {reopened.storage.location}")

        print("\n" + "=" * 60)
        print("Errors")
        print("=" * 60)
        for action in (
            lambda: reopened.store.mark_task_done(7),
            lambda: reopened.store.save_sort_by("Alphabetical"),
        ):
            try:
                action()
            except TaskListError as e:
                print(f"    {e.error_code}: {e.message}")


if __name__ == "__main__":
    main()
