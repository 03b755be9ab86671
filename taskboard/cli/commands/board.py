"""
FILE: taskboard/cli/commands/board.py
PURPOSE: One-shot board rendering (board)
"""

from typing import Optional

import typer

from ..main import app, console, error_console
from ...core.exceptions import InvalidInputError
from ...core.models import parse_status
from ...core.session import BoardSession
from ...repl.display import display_board, display_column


@app.command()
def board(
    sample: bool = typer.Option(False, "--sample", help="Fill the board with the demo tasks"),
    column: Optional[str] = typer.Option(None, "--column", "-c", help="Only show one column (todo, ip, done)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Render a board once and exit.

    Nothing is saved between runs, so without --sample the board is empty.

    Example:
        taskboard board --sample
        taskboard board --sample --column done
        taskboard board --sample --json
    """
    try:
        status = parse_status(column) if column else None
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    session = BoardSession()
    if sample:
        session.seed_sample_tasks()
    snapshot = session.snapshot()

    if json_output:
        if status:
            data = [t.to_dict() for t in snapshot.column(status)]
            console.print_json(data=data)
        else:
            console.print_json(snapshot.to_json())
        return

    if status:
        display_column(snapshot, status, console)
    else:
        display_board(snapshot, console_instance=console)
