"""
FILE: taskboard/core/draft.py
PURPOSE: Buffer for the not-yet-committed "add task" form
EXPORTS:
  - DraftState (enum)
  - DraftBuffer (class)
  - DRAFT_FIELDS: Field names accepted by set_field()
DEPENDENCIES:
  - enum (stdlib)
  - logging (stdlib)
  - taskboard.core.models (Draft, DraftPatch, Task)
  - taskboard.core.store (TaskStore)
  - taskboard.core.exceptions (InvalidInputError)
NOTES:
  - Lifecycle: CLOSED -> begin() -> EDITING -> commit()/cancel() -> CLOSED
  - Field values are not validated until commit()
  - commit() is the only gate that turns a draft into a task
  - A failed commit leaves the form open with its values intact
"""

import logging
from enum import Enum
from typing import Optional

from .models import Draft, DraftPatch, Task
from .store import TaskStore
from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

DRAFT_FIELDS = ("title", "description", "priority")


class DraftState(Enum):
    CLOSED = "closed"
    EDITING = "editing"
    COMMITTING = "committing"


class DraftBuffer:
    """
    Holds one draft for the add-task interaction.

    The buffer has no relationship to existing tasks until commit(), which
    hands the fields to the store's create().
    """

    def __init__(self, store: TaskStore):
        self._store = store
        self._draft = Draft()
        self._state = DraftState.CLOSED

    @property
    def state(self) -> DraftState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is DraftState.EDITING

    @property
    def draft(self) -> Draft:
        return self._draft

    def begin(self) -> Draft:
        """Open the form with every field reset."""
        self._draft = Draft()
        self._state = DraftState.EDITING
        return self._draft

    def set_field(self, name: str, value: str) -> Draft:
        """
        Update one field by name.

        Raises:
            InvalidInputError: If name is not a draft field
        """
        if name not in DRAFT_FIELDS:
            raise InvalidInputError(
                f"Unknown draft field '{name}'. Must be one of: {', '.join(DRAFT_FIELDS)}"
            )
        return self.apply(DraftPatch(**{name: value}))

    def apply(self, patch: DraftPatch) -> Draft:
        """Merge several fields at once. Opens the form if it was closed."""
        if self._state is DraftState.CLOSED:
            self.begin()
        self._draft = patch.apply_to(self._draft)
        return self._draft

    def cancel(self) -> None:
        """Throw the form away without touching the store."""
        self._draft = Draft()
        self._state = DraftState.CLOSED

    def commit(self) -> Optional[Task]:
        """
        Turn the draft into a task.

        Returns:
            The created Task, or None if the form is closed or the title is
            blank (the form then stays open)
        """
        if self._state is not DraftState.EDITING:
            return None
        if not self._draft.is_valid:
            logger.debug("Draft commit refused: empty title")
            return None

        self._state = DraftState.COMMITTING
        draft = self._draft
        task = self._store.create(draft.title, draft.description, draft.priority)
        if task is None:
            self._state = DraftState.EDITING
            return None

        self._draft = Draft()
        self._state = DraftState.CLOSED
        return task
