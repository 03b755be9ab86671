"""
FILE: taskboard/core/session.py
PURPOSE: Top-level board session owning the store, draft form and edit selection
EXPORTS:
  - BoardSnapshot (frozen dataclass)
  - BoardSession (class)
  - SAMPLE_TASKS: Demo tasks a fresh board can be seeded with
DEPENDENCIES:
  - logging (stdlib)
  - json (stdlib)
  - taskboard.core.store (TaskStore)
  - taskboard.core.draft (DraftBuffer)
  - taskboard.core.editing (EditSelection)
  - taskboard.core.projector (project_all, counts)
  - taskboard.core.models (Task, TaskPatch, DraftPatch, COLUMNS)
  - taskboard.core.exceptions (TaskNotFoundError, InvalidInputError)
NOTES:
  - The only mutation entry points for the presentation layer
  - Listeners receive a fresh snapshot after any call that changed tasks
  - Snapshots are re-derived on every call, nothing is cached
  - Explicit init (empty board), no teardown; discarded with the session
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .constants import (
    STATUS_DONE,
    STATUS_IN_PROGRESS,
    STATUS_TODO,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
)
from .draft import DraftBuffer
from .editing import EditSelection
from .exceptions import InvalidInputError, TaskNotFoundError
from .models import COLUMNS, Column, Draft, DraftPatch, Task, TaskPatch
from .projector import counts, project_all
from .store import TaskStore

logger = logging.getLogger(__name__)


# (title, description, status, priority)
SAMPLE_TASKS = [
    ("Design Homepage", "Create wireframes and mockups for the landing page", STATUS_DONE, PRIORITY_HIGH),
    ("Setup React Project", "Initialize project with Vite, TypeScript, and Tailwind", STATUS_DONE, PRIORITY_HIGH),
    ("Build Components", "Create reusable UI components for the application", STATUS_IN_PROGRESS, PRIORITY_MEDIUM),
    ("Add Authentication", "Implement user login and registration", STATUS_TODO, PRIORITY_HIGH),
    ("Write Tests", "Add unit and integration tests", STATUS_TODO, PRIORITY_LOW),
]


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of the board at one moment."""

    tasks: Tuple[Task, ...]
    columns: Dict[str, Tuple[Task, ...]]
    counts: Dict[str, int]

    def column(self, status: str) -> Tuple[Task, ...]:
        return self.columns.get(status, ())

    @property
    def total(self) -> int:
        return len(self.tasks)

    def to_dict(self) -> dict:
        return {
            "columns": [
                {
                    "status": column.status,
                    "title": column.title,
                    "color": column.color,
                    "count": self.counts[column.status],
                    "tasks": [t.to_dict() for t in self.columns[column.status]],
                }
                for column in COLUMNS
            ],
            "total": self.total,
        }

    def to_json(self) -> str:
        """Serialize snapshot to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


Listener = Callable[[BoardSnapshot], None]


class BoardSession:
    """
    State for one running board.

    Args:
        store: Task store to use (a fresh empty one by default)
    """

    def __init__(self, store: Optional[TaskStore] = None):
        self.store = store if store is not None else TaskStore()
        self.drafts = DraftBuffer(self.store)
        self.editor = EditSelection(self.store)
        self._listeners: List[Listener] = []

    # --- view binding ---

    @property
    def columns(self) -> Tuple[Column, ...]:
        return COLUMNS

    def snapshot(self) -> BoardSnapshot:
        tasks = self.store.list()
        return BoardSnapshot(
            tasks=tasks,
            columns={status: tuple(col) for status, col in project_all(tasks).items()},
            counts=counts(tasks),
        )

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_if_changed(self, before: Tuple[Task, ...]) -> None:
        if self.store.list() == before or not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # --- task operations ---

    def list(self) -> Tuple[Task, ...]:
        return self.store.list()

    def create(self, title: str, description: str = "", priority: str = PRIORITY_MEDIUM) -> Optional[Task]:
        before = self.store.list()
        task = self.store.create(title, description, priority)
        self._notify_if_changed(before)
        return task

    def delete(self, task_id: str) -> bool:
        before = self.store.list()
        removed = self.store.delete(task_id)
        if removed and self.editor.is_editing(task_id):
            self.editor.cancel()
        self._notify_if_changed(before)
        return removed

    def move(self, task_id: str, new_status: str) -> Optional[Task]:
        before = self.store.list()
        task = self.store.move(task_id, new_status)
        self._notify_if_changed(before)
        return task

    def update(self, task_id: str, patch: TaskPatch) -> Optional[Task]:
        before = self.store.list()
        task = self.store.update(task_id, patch)
        self._notify_if_changed(before)
        return task

    # --- draft operations ---

    def begin_draft(self) -> Draft:
        return self.drafts.begin()

    def set_draft_field(self, name: str, value: str) -> Draft:
        return self.drafts.set_field(name, value)

    def apply_draft(self, patch: DraftPatch) -> Draft:
        return self.drafts.apply(patch)

    def cancel_draft(self) -> None:
        self.drafts.cancel()

    def commit_draft(self) -> Optional[Task]:
        before = self.store.list()
        task = self.drafts.commit()
        self._notify_if_changed(before)
        return task

    # --- edit-in-place operations ---

    def begin_edit(self, task_id: str) -> None:
        self.editor.begin(task_id)

    def save_edit(self, patch: TaskPatch) -> Optional[Task]:
        before = self.store.list()
        task = self.editor.save(patch)
        self._notify_if_changed(before)
        return task

    def cancel_edit(self) -> None:
        self.editor.cancel()

    # --- lookups for typed ids ---

    def resolve_or_raise(self, prefix: str) -> Task:
        """
        Find the task a user meant by a (possibly shortened) id.

        Raises:
            TaskNotFoundError: If no task id starts with prefix
            InvalidInputError: If several task ids start with prefix
        """
        matches = self.store.find(prefix)
        if not matches:
            raise TaskNotFoundError(prefix)
        if len(matches) > 1:
            ids = ", ".join(t.short_id for t in matches)
            raise InvalidInputError(f"Id '{prefix}' is ambiguous: {ids}")
        return matches[0]

    # --- demo data ---

    def seed_sample_tasks(self) -> List[Task]:
        """Load the demo tasks through the normal create and move path."""
        before = self.store.list()
        created = []
        for title, description, status, priority in SAMPLE_TASKS:
            task = self.store.create(title, description, priority)
            if status != STATUS_TODO:
                task = self.store.move(task.id, status)
            created.append(task)
        logger.info("Seeded %d sample tasks", len(created))
        self._notify_if_changed(before)
        return created
