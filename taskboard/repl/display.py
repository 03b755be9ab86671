"""
FILE: taskboard/repl/display.py
PURPOSE: Render board snapshots, tasks and drafts with rich
EXPORTS:
  - console: Shared rich Console
  - task_card() - Markup for one task card
  - display_task() - One-line task summary
  - display_task_detail() - Full task details in a panel
  - display_board() - Three-column board with summary counts
  - display_column() - One column as a table
  - display_stats() - Summary counts per column
  - display_draft() - Current add-task form
DEPENDENCIES:
  - rich (formatted output)
  - taskboard.core (models, constants, session snapshot)
  - taskboard.repl.formatting (dates)
NOTES:
  - Presentation only; never mutates state
  - User text is escaped before it is mixed into rich markup
  - console_instance parameters let tests capture output
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.constants import COLUMN_TITLES, PRIORITY_STYLES
from ..core.models import COLUMNS, Draft, Task
from ..core.session import BoardSnapshot
from .formatting import format_relative_date

console = Console()


def priority_badge(priority: str) -> str:
    style = PRIORITY_STYLES.get(priority, "white")
    return f"[{style}]{escape(priority)}[/{style}]"


def task_card(task: Task, editing: bool = False) -> str:
    """Markup for a task as shown inside a board column."""
    marker = " [reverse] editing [/reverse]" if editing else ""
    lines = [f"[bold]{escape(task.title)}[/bold]{marker}"]
    if task.description:
        lines.append(f"[dim]{escape(task.description)}[/dim]")
    lines.append(
        f"{priority_badge(task.priority)}  "
        f"[dim]{format_relative_date(task.created_at)} · {task.short_id}[/dim]"
    )
    return "\n".join(lines)


def display_task(task: Task, message: str = "", console_instance: Console = None) -> None:
    """
    Display a single task with optional message.

    Args:
        task: Task to display
        message: Optional message to show before task (e.g., "Created:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    console_instance.print(
        f"  [cyan]{task.short_id}[/cyan]: {escape(task.title)} "
        f"[dim]({COLUMN_TITLES.get(task.status, task.status)})[/dim] {priority_badge(task.priority)}"
    )


def display_task_detail(task: Task, console_instance: Console = None) -> None:
    """Show every field of a task in a panel."""
    if console_instance is None:
        console_instance = console

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    table.add_row("Id", task.id)
    table.add_row("Title", escape(task.title))
    table.add_row("Description", escape(task.description) if task.description else "[dim]-[/dim]")
    table.add_row("Status", COLUMN_TITLES.get(task.status, task.status))
    table.add_row("Priority", priority_badge(task.priority))
    created = task.created_at.strftime("%Y-%m-%d %H:%M") if task.created_at else "-"
    table.add_row("Created", f"{created} [dim]({format_relative_date(task.created_at)})[/dim]")

    console_instance.print(Panel(table, title=f"Task {task.short_id}", border_style="cyan"))


def display_stats(snapshot: BoardSnapshot, console_instance: Console = None) -> None:
    """One cell per column with its task count."""
    if console_instance is None:
        console_instance = console

    table = Table(show_header=False, box=None, padding=(0, 3))
    for _ in COLUMNS:
        table.add_column()
    table.add_row(*[
        f"[{column.color}]●[/{column.color}] {column.title}: [bold]{snapshot.counts[column.status]}[/bold]"
        for column in COLUMNS
    ])
    console_instance.print(table)


def display_board(
    snapshot: BoardSnapshot,
    editing_id: Optional[str] = None,
    console_instance: Console = None,
) -> None:
    """
    Display the board: summary counts, then one table column per status.

    Args:
        snapshot: Board state to render
        editing_id: Task currently being edited, highlighted if shown
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    display_stats(snapshot, console_instance)

    table = Table(show_header=True, show_lines=True, expand=True)
    for column in COLUMNS:
        table.add_column(
            f"[{column.color}]●[/{column.color}] {column.title} "
            f"[dim]({snapshot.counts[column.status]})[/dim]",
            ratio=1,
        )

    projections = [snapshot.column(column.status) for column in COLUMNS]
    rows = max((len(p) for p in projections), default=0)

    if rows == 0:
        table.add_row(*(["[dim](empty)[/dim]"] * len(COLUMNS)))
    for index in range(rows):
        cells = []
        for projection in projections:
            if index < len(projection):
                task = projection[index]
                cells.append(task_card(task, editing=task.id == editing_id))
            else:
                cells.append("")
        table.add_row(*cells)

    console_instance.print(table)


def display_column(snapshot: BoardSnapshot, status: str, console_instance: Console = None) -> None:
    """Display the tasks of one column as a table."""
    if console_instance is None:
        console_instance = console

    tasks = snapshot.column(status)
    title = COLUMN_TITLES.get(status, status)
    if not tasks:
        console_instance.print(f"[dim]No tasks in {title}[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Priority", width=8)
    table.add_column("Created", style="dim")

    for task in tasks:
        table.add_row(
            task.short_id,
            escape(task.title),
            priority_badge(task.priority),
            format_relative_date(task.created_at),
        )

    console_instance.print(table)
    console_instance.print(f"\n[dim]Total: {len(tasks)} task(s)[/dim]")


def display_draft(draft: Draft, console_instance: Console = None) -> None:
    """Show the add-task form as currently filled in."""
    if console_instance is None:
        console_instance = console

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    table.add_row("Title", escape(draft.title) if draft.title else "[dim](empty)[/dim]")
    table.add_row("Description", escape(draft.description) if draft.description else "[dim](empty)[/dim]")
    table.add_row("Priority", priority_badge(draft.priority))

    console_instance.print(Panel(table, title="New Task", border_style="blue"))
