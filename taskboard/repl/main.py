"""
FILE: taskboard/repl/main.py
PURPOSE: Interactive REPL for the task board with prompt-toolkit
EXPORTS:
  - REPLContext (session holder and prompt state)
  - repl_context: Context for the running REPL
  - execute_command() - Dispatch one parsed command
  - run_repl() - Main REPL loop
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - taskboard.core.session (BoardSession)
  - taskboard.repl.parser (command parsing)
  - taskboard.repl.completer (autocomplete)
NOTES:
  - The board lives only as long as the REPL; nothing is saved
  - Prompt shows when the add-task form is open or a task is being edited
  - Bottom toolbar shows per-column counts and rotating tips
  - Ctrl+D or "exit"/"quit" to exit
"""

import logging
import sys
from dataclasses import dataclass, field

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory

from ..core.constants import SHORT_ID_LENGTH, STATUSES
from ..core.exceptions import TaskboardError
from ..core.session import BoardSession
from .parser import parse_command, ParseResult
from .completer import create_completer
from .display import console

logger = logging.getLogger(__name__)


# --- REPL Context (Session State) ---


@dataclass
class REPLContext:
    """
    State for the running REPL.

    Attributes:
        session: The board being worked on
    """
    session: BoardSession = field(default_factory=BoardSession)

    def reset(self, session: BoardSession = None) -> None:
        """Start over with a new (or given) board."""
        self.session = session if session is not None else BoardSession()

    def mode_label(self) -> str:
        """'' normally, 'new task' while drafting, 'edit <id>' while editing."""
        editing = self.session.editor.current
        if editing:
            return f"edit {editing[:SHORT_ID_LENGTH]}"
        if self.session.drafts.is_open:
            return "new task"
        return ""

    def get_prompt(self) -> str:
        """
        Generate prompt string based on current mode.

        Returns:
            Prompt like "taskboard> " or "taskboard:[new task]> "
        """
        label = self.mode_label()
        if label:
            return f"taskboard:[{label}]> "
        return "taskboard> "


repl_context = REPLContext()


def format_prompt() -> HTML:
    """Prompt text with the current mode highlighted."""
    label = repl_context.mode_label()
    if label:
        color = "ansiyellow" if label.startswith("edit") else "ansiblue"
        return HTML(f"<b>taskboard:[<{color}>{label}</{color}>]&gt; </b>")
    return HTML("<b>taskboard&gt; </b>")


_TOOLBAR_TIPS = [
    "Tip: 'add' with no title opens a form; 'commit' saves it",
    "Tip: 'mv <id> d' moves a task to Done (t / ip / d)",
    "Tip: ids can be shortened to any unique prefix",
    "Tip: 'edit <id>' then 'save --title ...' edits in place",
    "Tip: Press Ctrl+D or type 'exit' to quit",
    "Tip: Type 'help' to see all available commands",
]
_tip_index = 0


def get_bottom_toolbar() -> HTML:
    """Per-column counts and a rotating tip."""
    snapshot = repl_context.session.snapshot()
    todo, in_progress, done = (snapshot.counts[s] for s in STATUSES)
    tip = _TOOLBAR_TIPS[_tip_index % len(_TOOLBAR_TIPS)]
    stats = f"{todo} to do | {in_progress} in progress | {done} done"
    return HTML(f"<style bg='#444444' fg='#ffffff'> {stats} | {tip} </style>")


def get_right_prompt() -> HTML:
    total = repl_context.session.snapshot().total
    return HTML(f"<style fg='#888888'>[{total} total]</style>")


# Import command handlers from command modules
from .commands import (
    # Task handlers
    handle_add_command,
    handle_board_command,
    handle_column_command,
    handle_show_command,
    handle_mv_command,
    handle_rm_command,
    # Draft handlers
    handle_draft_command,
    handle_commit_command,
    handle_cancel_command,
    # Edit handlers
    handle_edit_command,
    handle_save_command,
    # System handlers
    handle_help_command,
    handle_clear_command,
    handle_stats_command,
    handle_sample_command,
)


HANDLERS = {
    "add": handle_add_command,
    "new": handle_add_command,
    "ls": handle_board_command,
    "board": handle_board_command,
    "column": handle_column_command,
    "col": handle_column_command,
    "show": handle_show_command,
    "view": handle_show_command,
    "mv": handle_mv_command,
    "move": handle_mv_command,
    "rm": handle_rm_command,
    "delete": handle_rm_command,
    "draft": handle_draft_command,
    "commit": handle_commit_command,
    "cancel": handle_cancel_command,
    "edit": handle_edit_command,
    "save": handle_save_command,
    "stats": handle_stats_command,
    "sample": handle_sample_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler:
        try:
            handler(result)
        except TaskboardError as e:
            console.print(f"[red]Error:[/red] {e}")
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(sample: bool = False, session: BoardSession = None) -> None:
    """
    Main REPL loop.

    Args:
        sample: Seed the board with the demo tasks
        session: Board to work on (a fresh one by default)

    Exits on Ctrl+D, "exit" or "quit". Ctrl+C only clears the line.
    """
    global _tip_index

    repl_context.reset(session)
    if sample:
        repl_context.session.seed_sample_tasks()

    has_tty = sys.stdin.isatty() and sys.stdout.isatty()
    prompt_session = None

    if has_tty:
        try:
            prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(lambda: repl_context.session),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
                rprompt=get_right_prompt,
            )
        except Exception as e:
            logger.debug("prompt_toolkit unavailable: %s", e)
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")

    console.print("[bold cyan]Taskboard[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if prompt_session is None:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    while True:
        try:
            if prompt_session is None:
                user_input = input(repl_context.get_prompt())
            else:
                user_input = prompt_session.prompt(format_prompt())

            if not execute_command(parse_command(user_input)):
                break

            _tip_index += 1

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            console.print("[dim]Goodbye![/dim]")
            break


def main(sample: bool = False) -> None:
    """
    Entry point for REPL mode.

    Called when user runs: taskboard  or  taskboard repl
    """
    run_repl(sample=sample)


if __name__ == "__main__":
    main()
