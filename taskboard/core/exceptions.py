"""
FILE: taskboard/core/exceptions.py
PURPOSE: Exception classes for the presentation boundary
EXPORTS:
  - TaskboardError (base exception)
  - TaskNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Store mutations never raise; empty titles and unknown ids are no-ops
  - Raised only by helpers that interpret user-typed text (statuses,
    priorities, id prefixes, draft field names)
  - REPL and CLI layers catch TaskboardError and display it
"""


class TaskboardError(Exception):
    """Base exception for all Taskboard errors."""
    pass


class TaskNotFoundError(TaskboardError):
    """No task matches the given id or id prefix."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidInputError(TaskboardError):
    """User-supplied text could not be interpreted."""

    def __init__(self, message: str):
        super().__init__(message)
