"""
FILE: eisenhower/repl/commands/__init__.py
PURPOSE: Command handlers for the REPL
NOTES:
  - Every handler takes (result, ctx) and prints to ctx.console
"""

from .tasks import (
    handle_add_command,
    handle_done_command,
    handle_rm_command,
    handle_mv_command,
)
from .drag import (
    handle_drag_command,
    handle_drop_command,
    handle_cancel_command,
)
from .system import (
    handle_board_command,
    handle_lists_command,
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_add_command",
    "handle_done_command",
    "handle_rm_command",
    "handle_mv_command",
    "handle_drag_command",
    "handle_drop_command",
    "handle_cancel_command",
    "handle_board_command",
    "handle_lists_command",
    "handle_help_command",
    "handle_clear_command",
]
