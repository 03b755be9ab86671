"""
FILE: taskboard/core/store.py
PURPOSE: In-memory task store (authoritative, ordered task list)
EXPORTS:
  - TaskStore (class)
  - new_task_id() -> str
DEPENDENCIES:
  - uuid (stdlib, id generation)
  - datetime (stdlib, timestamps)
  - logging (stdlib)
  - taskboard.core.models (Task, TaskPatch)
  - taskboard.core.constants (statuses, priorities)
NOTES:
  - Tasks kept in insertion order; moves and updates never reorder
  - Mutations never raise: empty titles and unknown ids are no-ops
  - Ids are never reused, even after the task is deleted
  - Tasks are frozen; updates replace the stored object
"""

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Set, Tuple

from .models import Task, TaskPatch
from .constants import STATUSES, STATUS_TODO, PRIORITIES, DEFAULT_PRIORITY

logger = logging.getLogger(__name__)


def new_task_id() -> str:
    """Generate an opaque task id."""
    return uuid.uuid4().hex


class TaskStore:
    """
    Holds the task list for one session.

    Args:
        id_factory: Callable producing candidate ids (defaults to uuid4 hex)
        clock: Callable returning the creation timestamp (defaults to now)
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_task_id,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._tasks: List[Task] = []
        self._issued_ids: Set[str] = set()
        self._id_factory = id_factory
        self._clock = clock

    # --- queries ---

    def list(self) -> Tuple[Task, ...]:
        """Return all tasks in insertion order."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        """Return the task with this exact id, or None."""
        index = self._index_of(task_id)
        return self._tasks[index] if index is not None else None

    def find(self, prefix: str) -> List[Task]:
        """
        Return every task whose id starts with prefix.

        An exact id match wins outright, so a full id never comes back
        ambiguous.
        """
        prefix = (prefix or "").strip().lower()
        if not prefix:
            return []
        exact = self.get(prefix)
        if exact:
            return [exact]
        return [t for t in self._tasks if t.id.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return self._index_of(task_id) is not None

    # --- mutations ---

    def create(
        self,
        title: str,
        description: str = "",
        priority: str = DEFAULT_PRIORITY,
    ) -> Optional[Task]:
        """
        Append a new task in the todo column.

        Returns:
            The new Task, or None when the title is empty after trimming
            (or the priority is unknown) and nothing was created
        """
        if not title or not title.strip():
            logger.debug("Rejected task with empty title")
            return None
        if priority not in PRIORITIES:
            logger.warning("Rejected task with unknown priority %r", priority)
            return None

        task = Task(
            id=self._allocate_id(),
            title=title,
            description=description or "",
            status=STATUS_TODO,
            priority=priority,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        logger.debug("Created task %s (%s)", task.id, task.priority)
        return task

    def delete(self, task_id: str) -> bool:
        """Remove a task. Unknown ids are ignored; returns whether one was removed."""
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Delete ignored, no task %s", task_id)
            return False
        del self._tasks[index]
        logger.debug("Deleted task %s", task_id)
        return True

    def move(self, task_id: str, new_status: str) -> Optional[Task]:
        """
        Set a task's status.

        Moving a task to the column it is already in changes nothing.
        Returns the task as it is after the call, or None if unknown.
        """
        if new_status not in STATUSES:
            logger.warning("Move ignored, unknown status %r", new_status)
            return self.get(task_id)
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Move ignored, no task %s", task_id)
            return None
        task = self._tasks[index]
        if task.status != new_status:
            task = replace(task, status=new_status)
            self._tasks[index] = task
            logger.debug("Moved task %s to %s", task_id, new_status)
        return task

    def update(self, task_id: str, patch: TaskPatch) -> Optional[Task]:
        """
        Merge the fields set in patch into a task; other fields are kept.

        A blank title, unknown priority or unknown status in the patch is
        dropped so the task's invariants still hold.
        """
        index = self._index_of(task_id)
        if index is None:
            logger.debug("Update ignored, no task %s", task_id)
            return None

        changes = patch.changes()
        if "title" in changes and not changes["title"].strip():
            logger.debug("Dropped blank title from update of %s", task_id)
            del changes["title"]
        if "priority" in changes and changes["priority"] not in PRIORITIES:
            logger.warning("Dropped unknown priority %r from update", changes["priority"])
            del changes["priority"]
        if "status" in changes and changes["status"] not in STATUSES:
            logger.warning("Dropped unknown status %r from update", changes["status"])
            del changes["status"]

        task = self._tasks[index]
        if changes:
            task = replace(task, **changes)
            self._tasks[index] = task
            logger.debug("Updated task %s: %s", task_id, ", ".join(sorted(changes)))
        return task

    # --- internals ---

    def _index_of(self, task_id) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _allocate_id(self) -> str:
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id
