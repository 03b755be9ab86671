"""
FILE: taskboard/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - configure_logging(level) - Root logger setup with rich
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - board() - Render a board once and exit
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output, log handler)
  - taskboard.repl (interactive mode)
NOTES:
  - Running 'taskboard' with no command launches the REPL
  - Log level from --log-level or TASKBOARD_LOG_LEVEL (default WARNING)
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

import logging
import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console
from rich.logging import RichHandler

# Typer app setup
app = typer.Typer(
    name="taskboard",
    help="In-memory three-column task board",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str) -> None:
    """
    Send log records to stderr through rich.

    Raises:
        typer.BadParameter: If level is not a known level name
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Must be one of: {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="TASKBOARD_LOG_LEVEL", help="DEBUG, INFO, WARNING or ERROR"
    ),
):
    """
    Default callback - configures logging, then launches the REPL when no
    command is specified.
    """
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    version,
    help,
    repl,
    board,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
