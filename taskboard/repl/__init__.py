"""
FILE: taskboard/repl/__init__.py
PURPOSE: REPL package for interactive board sessions
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - taskboard.core.session (board state)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete and command history
"""

from .main import main

__all__ = ["main"]
