"""
FILE: taskboard/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - TaskboardCompleter (Completer for command/arg completion)
  - create_completer(session_provider) -> TaskboardCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - taskboard.core.constants (statuses, priorities)
NOTES:
  - Suggests command names when at start of line
  - Suggests task ids (short form) for commands expecting an id
  - Suggests statuses after "mv <id>" and "column"
  - Suggests draft fields after "draft"
  - Suggests flags, and priority/status values after those flags
  - Case-insensitive matching
"""

from typing import Callable, Iterable, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import PRIORITIES, STATUSES


class TaskboardCompleter(Completer):
    """
    Context-aware completer for the Taskboard REPL.

    Args:
        session_provider: Callable returning the current BoardSession, used
            for task id suggestions. Without it no ids are suggested.
    """

    COMMANDS = [
        "add", "new", "ls", "board", "column", "show", "view", "mv", "move",
        "rm", "delete", "draft", "commit", "cancel", "edit", "save", "stats",
        "sample", "help", "clear", "exit", "quit",
    ]

    DRAFT_FIELDS = ["title", "desc", "priority", "show"]

    COMMAND_FLAGS = {
        "add": ["--desc", "--priority"],
        "new": ["--desc", "--priority"],
        "edit": ["--title", "--desc", "--priority", "--status"],
        "save": ["--title", "--desc", "--priority", "--status"],
    }

    VALUE_FLAGS = {
        "--priority": list(PRIORITIES),
        "-p": list(PRIORITIES),
        "--status": list(STATUSES),
        "-s": list(STATUSES),
    }

    ID_FIRST_COMMANDS = {"show", "view", "mv", "move", "rm", "delete", "edit"}

    def __init__(self, session_provider: Optional[Callable] = None):
        self._session_provider = session_provider

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. At start of input -> commands
            2. Right after a value flag -> that flag's values
            3. Typing a flag -> the command's flags
            4. First argument of an id command -> task ids
            5. Second argument of mv -> statuses
            6. "column" -> statuses, "draft" -> draft fields
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        if not words or (not at_new_word and len(words) == 1):
            yield from self._complete_from(self.COMMANDS, words[0] if words else "")
            return

        command = words[0].lower()
        current = "" if at_new_word else words[-1]
        previous = words[-1] if at_new_word else (words[-2] if len(words) > 1 else "")
        # Positional index of the word being typed (1 = first argument)
        position = len(words) if at_new_word else len(words) - 1

        if previous.lower() in self.VALUE_FLAGS:
            yield from self._complete_from(self.VALUE_FLAGS[previous.lower()], current)
            return

        if current.startswith("-"):
            yield from self._complete_from(self.COMMAND_FLAGS.get(command, []), current)
            return

        if command in self.ID_FIRST_COMMANDS and position == 1:
            yield from self._complete_from(self._task_ids(), current)
            return

        if command in ("mv", "move") and position == 2:
            yield from self._complete_from(list(STATUSES), current)
            return

        if command in ("column", "col") and position == 1:
            yield from self._complete_from(list(STATUSES), current)
            return

        if command == "draft":
            if position == 1:
                yield from self._complete_from(self.DRAFT_FIELDS, current)
            elif position == 2 and words[1].lower() == "priority":
                yield from self._complete_from(list(PRIORITIES), current)
            return

    def _task_ids(self) -> List[str]:
        if self._session_provider is None:
            return []
        session = self._session_provider()
        if session is None:
            return []
        return [task.short_id for task in session.list()]

    @staticmethod
    def _complete_from(options: Iterable[str], word: str) -> Iterable[Completion]:
        word_lower = word.lower()
        for option in options:
            if option.lower().startswith(word_lower):
                yield Completion(option, start_position=-len(word))


def create_completer(session_provider: Optional[Callable] = None) -> TaskboardCompleter:
    """Create the REPL completer."""
    return TaskboardCompleter(session_provider)
