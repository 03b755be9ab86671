"""
FILE: taskboard/core/editing.py
PURPOSE: Track which task (if any) is being edited in place
EXPORTS:
  - EditSelection (class)
DEPENDENCIES:
  - taskboard.core.models (Task, TaskPatch)
  - taskboard.core.store (TaskStore)
NOTES:
  - At most one task is tracked; begin() on another task replaces it
  - save() and cancel() both clear the selection
  - No validation of its own; store.update() enforces the rules
"""

from typing import Optional

from .models import Task, TaskPatch
from .store import TaskStore


class EditSelection:
    """Selection state around TaskStore.update()."""

    def __init__(self, store: TaskStore):
        self._store = store
        self._current: Optional[str] = None

    @property
    def current(self) -> Optional[str]:
        return self._current

    def is_editing(self, task_id: Optional[str] = None) -> bool:
        if task_id is None:
            return self._current is not None
        return self._current == task_id

    def begin(self, task_id: str) -> None:
        self._current = task_id

    def save(self, patch: TaskPatch) -> Optional[Task]:
        """Apply patch to the tracked task and leave edit mode."""
        if self._current is None:
            return None
        task_id, self._current = self._current, None
        return self._store.update(task_id, patch)

    def cancel(self) -> None:
        self._current = None
