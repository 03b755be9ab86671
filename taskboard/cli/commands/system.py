"""
FILE: taskboard/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import logging

import typer

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show Taskboard version."""
    console.print(f"Taskboard v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]Taskboard[/bold cyan] - In-memory three-column task board\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  taskboard [command] [options]")
    console.print("  taskboard                 [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("repl", "Launch interactive REPL", "taskboard repl [--sample] [--verbose]"),
        ("board", "Render a board once and exit", "taskboard board [--sample] [--json]"),
        ("version", "Show version", "taskboard version"),
        ("help", "Show this help message", "taskboard help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Global Options:[/bold]")
    console.print("  [yellow]--log-level[/yellow]  DEBUG, INFO, WARNING or ERROR (env: TASKBOARD_LOG_LEVEL)")
    console.print("  [yellow]--help[/yellow]       Show detailed help for a command\n")

    console.print("[dim]Boards live only as long as the REPL session; nothing is saved.[/dim]")
    console.print("[dim]Type 'help' inside the REPL for board commands.[/dim]\n")


@app.command()
def repl(
    sample: bool = typer.Option(False, "--sample", help="Start with the demo tasks"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every board change"),
):
    """
    Launch interactive REPL.

    Example:
        taskboard repl
        taskboard repl --sample
    """
    if verbose:
        logging.getLogger("taskboard").setLevel(logging.DEBUG)

    from ...repl import main as repl_main
    try:
        repl_main(sample=sample)
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
