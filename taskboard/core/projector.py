"""
FILE: taskboard/core/projector.py
PURPOSE: Derive per-column task lists and counts from the task list
EXPORTS:
  - project(tasks, status) -> List[Task]
  - count(tasks, status) -> int
  - project_all(tasks) -> Dict[str, List[Task]]
  - counts(tasks) -> Dict[str, int]
DEPENDENCIES:
  - taskboard.core.models (Task)
  - taskboard.core.constants (STATUSES)
NOTES:
  - Pure functions; recomputed on every read, never cached
  - Relative (insertion) order of tasks is preserved
  - Every task lands in exactly one column
"""

from typing import Dict, Iterable, List

from .models import Task
from .constants import STATUSES


def project(tasks: Iterable[Task], status: str) -> List[Task]:
    """Return the tasks in one column, in their original order."""
    return [t for t in tasks if t.status == status]


def count(tasks: Iterable[Task], status: str) -> int:
    """Number of tasks in one column."""
    return len(project(tasks, status))


def project_all(tasks: Iterable[Task]) -> Dict[str, List[Task]]:
    """Return every column's tasks keyed by status, in column order."""
    tasks = list(tasks)
    return {status: project(tasks, status) for status in STATUSES}


def counts(tasks: Iterable[Task]) -> Dict[str, int]:
    """Summary counts keyed by status, in column order."""
    return {status: len(column) for status, column in project_all(tasks).items()}
