"""
FILE: taskboard/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL (add, board, column, show, mv, rm)
"""

from typing import List

from ..main import repl_context
from ..parser import ParseResult
from ..display import console, display_board, display_column, display_draft, display_task, display_task_detail
from ...core.models import DraftPatch, Task, parse_priority, parse_status
from ...core.constants import COLUMN_TITLES
from ...core.exceptions import InvalidInputError


def split_ids(raw: str) -> List[str]:
    """Split "1a2b,3c4d" into ["1a2b", "3c4d"]."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def draft_patch_from_flags(result: ParseResult, title: str = None) -> DraftPatch:
    """
    Build a DraftPatch from --desc / --priority flags.

    Raises:
        InvalidInputError: If --priority names no priority
    """
    priority = result.flag_text("priority")
    return DraftPatch(
        title=title,
        description=result.flag_text("desc"),
        priority=parse_priority(priority) if priority is not None else None,
    )


def prompt_draft_fields() -> None:
    """
    Ask for each field of the add-task form in turn, filling the form as
    each answer comes in.

    Raises:
        InvalidInputError: If the priority answer names no priority
    """
    session = repl_context.session
    session.apply_draft(DraftPatch(title=input("Title: ")))
    session.apply_draft(DraftPatch(description=input("Description: ")))
    priority_raw = input(f"Priority (low/medium/high) [{session.drafts.draft.priority}]: ").strip()
    if priority_raw:
        session.apply_draft(DraftPatch(priority=parse_priority(priority_raw)))


def resolve_ids(raw: str) -> List[Task]:
    """Resolve "1a2b,3c4d" to tasks, each task once, in typed order."""
    session = repl_context.session
    tasks: List[Task] = []
    for part in split_ids(raw):
        task = session.resolve_or_raise(part)
        if all(t.id != task.id for t in tasks):
            tasks.append(task)
    return tasks


def report_commit(task: Task) -> None:
    if task is None:
        console.print("[red]Error:[/red] Task title required")
        console.print("[dim]The form is still open: 'draft title <text>' then 'commit', or 'cancel'[/dim]")
        return
    console.print(f"[green]✓ Created task [bold]{task.short_id}[/bold]:[/green] {task.title}")


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - create a task through the add-task form.

    Usage:
        add Buy groceries
        add "Design Homepage" --desc "Wireframes" --priority high
        add                         (opens the form and asks for each field)
    """
    session = repl_context.session

    if result.args:
        # Shorthand: fill the form from the command line and commit at once
        patch = draft_patch_from_flags(result, title=" ".join(result.args))
        session.begin_draft()
        session.apply_draft(patch)
        report_commit(session.commit_draft())
        return

    session.begin_draft()
    session.apply_draft(draft_patch_from_flags(result))
    try:
        prompt_draft_fields()
    except (KeyboardInterrupt, EOFError):
        session.cancel_draft()
        console.print()
        console.print("[dim]Cancelled[/dim]")
        return
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        display_draft(session.drafts.draft, console)
        console.print("[dim]The form is still open: 'draft priority <value>' then 'commit', or 'cancel'[/dim]")
        return

    display_draft(session.drafts.draft, console)
    report_commit(session.commit_draft())


def handle_board_command(result: ParseResult) -> None:
    """
    Handle 'board' / 'ls' command - show all three columns.

    Usage:
        board
        board --json
    """
    snapshot = repl_context.session.snapshot()
    if result.flags.get("json"):
        console.print_json(snapshot.to_json())
        return
    display_board(snapshot, editing_id=repl_context.session.editor.current, console_instance=console)


def handle_column_command(result: ParseResult) -> None:
    """
    Handle 'column' command - list the tasks of one column.

    Usage:
        column todo
        column ip
        column done
    """
    if not result.args:
        console.print("[red]Error:[/red] Column required")
        console.print("[dim]Usage: column <todo|in-progress|done>[/dim]")
        return
    status = parse_status(" ".join(result.args))
    display_column(repl_context.session.snapshot(), status, console)


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - view full task details.

    Usage:
        show 1a2b
    """
    if not result.args:
        console.print("[red]Error:[/red] Task id required")
        console.print("[dim]Usage: show <id>[/dim]")
        return
    task = repl_context.session.resolve_or_raise(result.args[0])
    display_task_detail(task, console)


def handle_mv_command(result: ParseResult) -> None:
    """
    Handle 'mv' command - move task(s) to a column.

    Usage:
        mv 1a2b done
        mv 1a2b ip
        mv 1a2b,3c4d "In Progress"
    """
    if len(result.args) < 2:
        console.print("[red]Error:[/red] Task id and column required")
        console.print("[dim]Usage: mv <id>[,<id>...] <todo|in-progress|done>  (aliases: t, ip, d)[/dim]")
        return

    session = repl_context.session
    status = parse_status(" ".join(result.args[1:]))
    tasks = resolve_ids(result.args[0])

    for task in tasks:
        if task.status == status:
            console.print(f"[dim]{task.short_id} is already in {COLUMN_TITLES[status]}[/dim]")
            continue
        moved = session.move(task.id, status)
        console.print(
            f"[green]✓ Moved [bold]{moved.short_id}[/bold] to {COLUMN_TITLES[status]}:[/green] {moved.title}"
        )


def handle_rm_command(result: ParseResult) -> None:
    """
    Handle 'rm' command - delete task(s).

    Usage:
        rm 1a2b
        rm 1a2b,3c4d
    """
    if not result.args:
        console.print("[red]Error:[/red] Task id required")
        console.print("[dim]Usage: rm <id>[,<id>...][/dim]")
        return

    session = repl_context.session
    tasks = resolve_ids(result.args[0])
    for task in tasks:
        session.delete(task.id)
        display_task(task, "✓ Deleted:", console)
