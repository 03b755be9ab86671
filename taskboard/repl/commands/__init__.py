"""
FILE: taskboard/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

# Export all command handlers for easy importing
from .tasks import (
    handle_add_command,
    handle_board_command,
    handle_column_command,
    handle_show_command,
    handle_mv_command,
    handle_rm_command,
)
from .draft import (
    handle_draft_command,
    handle_commit_command,
    handle_cancel_command,
)
from .edit import (
    handle_edit_command,
    handle_save_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
    handle_stats_command,
    handle_sample_command,
)

__all__ = [
    "handle_add_command",
    "handle_board_command",
    "handle_column_command",
    "handle_show_command",
    "handle_mv_command",
    "handle_rm_command",
    "handle_draft_command",
    "handle_commit_command",
    "handle_cancel_command",
    "handle_edit_command",
    "handle_save_command",
    "handle_help_command",
    "handle_clear_command",
    "handle_stats_command",
    "handle_sample_command",
]
