"""
FILE: taskboard/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .board import board
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "board",
    "version",
    "help",
    "repl",
]
