"""
FILE: taskboard/repl/commands/system.py
PURPOSE: System command handlers for REPL (help, clear, stats, sample)
"""

from rich.panel import Panel

from ..main import repl_context
from ..parser import ParseResult
from ..display import console, display_stats


def handle_stats_command(result: ParseResult) -> None:
    """
    Handle 'stats' command - show task counts per column.

    Usage:
        stats
    """
    snapshot = repl_context.session.snapshot()
    display_stats(snapshot, console)
    console.print(f"[dim]Total: {snapshot.total} task(s)[/dim]")


def handle_sample_command(result: ParseResult) -> None:
    """
    Handle 'sample' command - add the demo tasks to the board.

    Usage:
        sample
    """
    created = repl_context.session.seed_sample_tasks()
    console.print(f"[green]✓ Added {len(created)} sample tasks[/green]")


def handle_help_command(result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]add <title> [--desc D] [--priority P][/cyan]  Create a task in To Do
  [cyan]add[/cyan]                      Open the new task form and fill it in
  [cyan]draft [title|desc|priority <value>][/cyan]  Show or fill in the open form
  [cyan]commit[/cyan]                   Create the task from the open form
  [cyan]cancel[/cyan]                   Stop editing, or discard the open form
  [cyan]board[/cyan] or [cyan]ls [--json][/cyan]       Show the board
  [cyan]column <status>[/cyan]          List the tasks of one column
  [cyan]show <id>[/cyan]                View full task details
  [cyan]mv <id>[,<id>...] <status>[/cyan]  Move task(s) to another column
  [cyan]rm <id>[,<id>...][/cyan]        Delete task(s)
  [cyan]edit <id>[/cyan]                Start editing a task in place
  [cyan]save [--title T] [--desc D] [--priority P] [--status S][/cyan]  Apply edits
  [cyan]stats[/cyan]                    Task counts per column
  [cyan]sample[/cyan]                   Add the demo tasks
  [cyan]help[/cyan]                     Show this help
  [cyan]clear[/cyan]                    Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]            Exit (the board is not saved)

[bold cyan]Statuses:[/bold cyan]  todo (t), in-progress (ip), done (d)
[bold cyan]Priorities:[/bold cyan] low (l), medium (m), high (h)
[bold cyan]Ids:[/bold cyan]       any unique prefix of the id shown on the card

[bold cyan]Examples:[/bold cyan]

  [dim]add "Design Homepage" --desc "Wireframes and mockups" -p high
  add
  draft title Write tests
  draft priority low
  commit
  mv 1a2b ip
  mv 1a2b,3c4d done
  edit 1a2b
  save --title "Design landing page"
  edit 1a2b --priority low     # Edit and save in one step
  rm 1a2b
  column done[/dim]
"""
    console.print(Panel(help_text, title="Taskboard Help", border_style="cyan"))


def handle_clear_command(result: ParseResult) -> None:
    """
    Clear the screen.

    Args:
        result: Parsed command (no arguments used)
    """
    console.clear()
    console.print("[dim]Screen cleared[/dim]")
