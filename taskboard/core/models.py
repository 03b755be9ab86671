"""
FILE: taskboard/core/models.py
PURPOSE: Domain models for tasks, columns, drafts, and partial updates
EXPORTS:
  - Task (frozen dataclass)
  - Column (frozen dataclass)
  - COLUMNS: The fixed, ordered column triple
  - Draft (frozen dataclass)
  - TaskPatch (typed partial update for an existing task)
  - DraftPatch (typed partial update for the draft form)
  - parse_status(value) -> str
  - parse_priority(value) -> str
DEPENDENCIES:
  - dataclasses (stdlib)
  - datetime (stdlib)
  - json (stdlib)
  - taskboard.core.constants
  - taskboard.core.exceptions (InvalidInputError)
NOTES:
  - Models are immutable; the store swaps in modified copies
  - Task has to_json() for serialization
  - Timestamps are datetime objects, serialized as ISO-8601 strings
  - Patch fields left as None are "not provided"
"""

from dataclasses import dataclass, asdict, replace
from datetime import datetime
from typing import Any, Dict, Optional
import json

from .constants import (
    STATUSES,
    STATUS_TODO,
    STATUS_ALIASES,
    PRIORITIES,
    PRIORITY_ALIASES,
    DEFAULT_PRIORITY,
    COLUMN_TITLES,
    COLUMN_COLORS,
    SHORT_ID_LENGTH,
)
from .exceptions import InvalidInputError


@dataclass(frozen=True)
class Task:
    """A task on the board."""

    id: str
    title: str
    description: str = ""
    status: str = STATUS_TODO
    priority: str = DEFAULT_PRIORITY
    created_at: Optional[datetime] = None

    @property
    def short_id(self) -> str:
        """Id prefix shown to users."""
        return self.id[:SHORT_ID_LENGTH]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Column:
    """A workflow column (To Do, In Progress, Done)."""

    status: str
    title: str
    color: str


COLUMNS = tuple(
    Column(status=status, title=COLUMN_TITLES[status], color=COLUMN_COLORS[status])
    for status in STATUSES
)


@dataclass(frozen=True)
class Draft:
    """An uncommitted new-task form. Has no id, status or timestamp yet."""

    title: str = ""
    description: str = ""
    priority: str = DEFAULT_PRIORITY

    @property
    def is_valid(self) -> bool:
        return bool(self.title.strip())


@dataclass(frozen=True)
class TaskPatch:
    """
    Partial update for an existing task.

    Only fields that are not None are applied. id and created_at are
    deliberately absent: they never change after creation.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def is_empty(self) -> bool:
        return not self.changes()


@dataclass(frozen=True)
class DraftPatch:
    """Partial update for the draft form."""

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def apply_to(self, draft: Draft) -> Draft:
        return replace(draft, **self.changes())


def parse_status(value: str) -> str:
    """
    Turn user text into a status key.

    Accepts the canonical keys, the aliases in STATUS_ALIASES and the column
    titles ("In Progress"), case-insensitively.

    Raises:
        InvalidInputError: If the text names no status
    """
    key = (value or "").strip().lower()
    if key in STATUS_ALIASES:
        return STATUS_ALIASES[key]
    for status, title in COLUMN_TITLES.items():
        if key == title.lower():
            return status
    raise InvalidInputError(
        f"Invalid status '{value}'. Must be one of: {', '.join(STATUSES)}"
    )


def parse_priority(value: str) -> str:
    """
    Turn user text into a priority key.

    Raises:
        InvalidInputError: If the text names no priority
    """
    key = (value or "").strip().lower()
    if key in PRIORITY_ALIASES:
        return PRIORITY_ALIASES[key]
    raise InvalidInputError(
        f"Invalid priority '{value}'. Must be one of: {', '.join(PRIORITIES)}"
    )
