"""
FILE: eisenhower/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .tasks import (
    add,
    mv,
    done,
    rm,
)
from .board import (
    board,
    ls,
    lists,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "add",
    "mv",
    "done",
    "rm",
    "board",
    "ls",
    "lists",
    "version",
    "help",
    "repl",
]
