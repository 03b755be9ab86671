"""
FILE: taskboard/repl/commands/edit.py
PURPOSE: Edit-in-place handlers for REPL (edit, save)
"""

from ..main import repl_context
from ..parser import ParseResult
from ..display import console, display_task, display_task_detail
from ...core.constants import SHORT_ID_LENGTH
from ...core.models import Task, TaskPatch, parse_priority, parse_status


def task_patch_from_flags(result: ParseResult) -> TaskPatch:
    """
    Build a TaskPatch from --title / --desc / --priority / --status flags.

    Raises:
        InvalidInputError: If --priority or --status cannot be interpreted
    """
    priority = result.flag_text("priority")
    status = result.flag_text("status")
    return TaskPatch(
        title=result.flag_text("title"),
        description=result.flag_text("desc"),
        priority=parse_priority(priority) if priority is not None else None,
        status=parse_status(status) if status is not None else None,
    )


def report_edit(before: Task, after: Task, patch: TaskPatch, message: str) -> None:
    """Show the result of a save, flagging a dropped blank title."""
    if patch.title is not None and not patch.title.strip():
        console.print("[yellow]Blank title ignored[/yellow]")
    display_task(after, message if after != before else "Nothing changed:", console)


def handle_edit_command(result: ParseResult) -> None:
    """
    Handle 'edit' command - start editing a task in place.

    Editing another task while one is already open switches to the new one.
    With flags the change is saved straight away.

    Usage:
        edit                        (show which task is being edited)
        edit 1a2b
        edit 1a2b --title "New title" --priority low
    """
    session = repl_context.session

    if not result.args:
        current = session.editor.current
        task = session.store.get(current) if current else None
        if task is None:
            console.print("[dim]Not editing any task[/dim] [dim](use 'edit <id>')[/dim]")
        else:
            display_task_detail(task, console)
        return

    task = session.resolve_or_raise(result.args[0])
    patch = task_patch_from_flags(result)

    previous = session.editor.current
    session.begin_edit(task.id)

    if not patch.is_empty():
        updated = session.save_edit(patch)
        report_edit(task, updated, patch, "✓ Updated:")
        return

    if previous and previous != task.id:
        console.print(f"[dim]Switched from {previous[:SHORT_ID_LENGTH]}[/dim]")
    display_task_detail(task, console)
    console.print("[dim]Use 'save --title ... --desc ... --priority ...' to apply, 'cancel' to stop[/dim]")


def handle_save_command(result: ParseResult) -> None:
    """
    Handle 'save' command - apply changes to the task being edited.

    Usage:
        save --title "New title"
        save --desc "More detail" --priority high
        save --status done
    """
    session = repl_context.session
    if not session.editor.is_editing():
        console.print("[yellow]Not editing any task[/yellow] [dim](use 'edit <id>' first)[/dim]")
        return

    patch = task_patch_from_flags(result)
    task_id = session.editor.current
    before = session.store.get(task_id)
    updated = session.save_edit(patch)

    if updated is None:
        console.print(f"[yellow]Task {task_id[:SHORT_ID_LENGTH]} no longer exists[/yellow]")
        return
    report_edit(before, updated, patch, "✓ Saved:")
