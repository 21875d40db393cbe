"""
FILE: eisenhower/cli/main.py
PURPOSE: Typer-based CLI for one-shot board commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - open_store() - Load the persisted TaskStore and report load problems
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - add() - Add task to the inbox
  - board() / ls() - Show the board or one list
  - lists() - Show the five lists
  - mv() - Move task between lists (drag and drop)
  - done() - Check off task(s)
  - rm() - Remove task from a specific list
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - eisenhower.core (store, drag session, exceptions)
  - eisenhower.repl (interactive mode)
  - eisenhower.logging_setup
NOTES:
  - Running with no command launches the REPL
  - Error messages go to stderr
  - Exit codes: 0=success (including no-op moves/removes), 1=error
  - Every mutation is saved by the store itself
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

from .. import __version__
from ..core import repository
from ..core.store import TaskStore
from ..logging_setup import setup_logging

# Typer app setup
app = typer.Typer(
    name="eisenhower",
    help="Eisenhower matrix task triage: an inbox and four quadrants",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


def open_store() -> TaskStore:
    """
    Open the persisted store.

    A corrupt snapshot doesn't stop the command: the store starts empty and
    a warning is printed (the unreadable data is kept as a backup).
    """
    store = repository.open_task_store()
    if store.load_error is not None:
        error_console.print(f"[yellow]Warning:[/yellow] {store.load_error}")
        error_console.print("[yellow]Started with an empty board; the old data was backed up.[/yellow]")
    return store


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
):
    """
    Default callback - configures logging, launches REPL when no command is specified.
    """
    setup_logging(log_dir=repository.DB_DIR, verbose=verbose)

    if ctx.invoked_subcommand is None:
        # No command specified, launch REPL
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    version,
    help,
    repl,
    # Task commands
    add,
    mv,
    done,
    rm,
    # Board commands
    board,
    ls,
    lists,
)


def main():
    """Main entry point for CLI."""
    app()
