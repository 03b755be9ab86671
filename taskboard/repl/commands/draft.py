"""
FILE: taskboard/repl/commands/draft.py
PURPOSE: Add-task form handlers for REPL (draft, commit, cancel)
"""

from ..main import repl_context
from ..parser import ParseResult
from ..display import console, display_draft
from ...core.models import parse_priority
from .tasks import report_commit

# Names typed at the prompt -> draft field names
FIELD_NAMES = {
    "title": "title",
    "desc": "description",
    "description": "description",
    "priority": "priority",
}


def handle_draft_command(result: ParseResult) -> None:
    """
    Handle 'draft' command - fill in the add-task form field by field.

    Usage:
        draft                       (open the form if needed, then show it)
        draft title Design Homepage
        draft desc "Wireframes and mockups"
        draft priority high
    """
    session = repl_context.session

    if not session.drafts.is_open:
        session.begin_draft()
        console.print("[dim]Opened a new task form[/dim]")

    if not result.args or result.args[0].lower() == "show":
        display_draft(session.drafts.draft, console)
        return

    name = result.args[0].lower()
    value = " ".join(result.args[1:])
    field = FIELD_NAMES.get(name)
    if field is None:
        console.print(f"[red]Error:[/red] Unknown field '{name}'")
        console.print("[dim]Fields: title, desc, priority[/dim]")
        return

    if field == "priority":
        value = parse_priority(value)

    session.set_draft_field(field, value)
    display_draft(session.drafts.draft, console)


def handle_commit_command(result: ParseResult) -> None:
    """
    Handle 'commit' command - turn the open form into a task.

    Usage:
        commit
    """
    session = repl_context.session
    if not session.drafts.is_open:
        console.print("[yellow]No task form open[/yellow] [dim](use 'add' to start one)[/dim]")
        return
    report_commit(session.commit_draft())


def handle_cancel_command(result: ParseResult) -> None:
    """
    Handle 'cancel' command - leave edit mode, or discard the open form.

    Usage:
        cancel
    """
    session = repl_context.session

    if session.editor.is_editing():
        session.cancel_edit()
        console.print("[dim]Stopped editing[/dim]")
        return

    if session.drafts.is_open:
        session.cancel_draft()
        console.print("[dim]Discarded the new task form[/dim]")
        return

    console.print("[dim]Nothing to cancel[/dim]")
