"""
FILE: eisenhower/repl/main.py
PURPOSE: Interactive REPL for triaging tasks with prompt-toolkit
EXPORTS:
  - REPLContext (dataclass: store, drag session, console)
  - execute_command(result, ctx) -> bool
  - run_repl(store) - Main REPL loop
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - eisenhower.core (TaskStore, DragSession, repository)
  - eisenhower.repl.parser (command parsing)
  - eisenhower.repl.completer (autocomplete)
NOTES:
  - A drag gesture spans commands: 'drag <id>' picks a task up, the prompt
    shows it, and 'drop <list>' or 'cancel' ends it
  - Bottom toolbar shows per-list counts and rotating tips
  - Ctrl+D or "exit"/"quit" to exit; the store does a final save on exit
  - Handlers receive the context explicitly; no module-level store
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

# Fix Windows console encoding for Unicode characters
# Only wrap if not already wrapped to prevent issues
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console

from ..core import repository
from ..core.drag import DragSession
from ..core.models import TaskList
from ..core.store import TaskStore
from ..formatting import short_id
from .parser import parse_command, ParseResult
from .completer import create_completer
from .commands import (
    handle_add_command,
    handle_done_command,
    handle_rm_command,
    handle_mv_command,
    handle_drag_command,
    handle_drop_command,
    handle_cancel_command,
    handle_board_command,
    handle_lists_command,
    handle_help_command,
    handle_clear_command,
)

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()


# --- REPL Context (Session State) ---


@dataclass
class REPLContext:
    """
    State for one REPL session.

    Attributes:
        store: The task store (persisted by the caller's storage)
        console: Rich console all handlers print to
        session: Drag gesture in progress, shared across commands
    """
    store: TaskStore
    console: Console = field(default_factory=Console)
    session: Optional[DragSession] = None

    def __post_init__(self):
        if self.session is None:
            self.session = DragSession(self.store)

    @property
    def dragging_id(self) -> Optional[str]:
        payload = self.session.payload
        return payload.task_id if payload else None

    def get_prompt(self) -> str:
        """
        Generate prompt string based on the drag state.

        Returns:
            "eisenhower> " or "eisenhower:[dragging 1a2b3c]> "
        """
        if self.dragging_id:
            return f"eisenhower:[dragging {short_id(self.dragging_id)}]> "
        return "eisenhower> "


def format_prompt(ctx: REPLContext) -> HTML:
    """
    Create formatted prompt text with drag state and colors.

    Returns:
        HTML formatted prompt, with the dragged task ID in magenta
    """
    if ctx.dragging_id:
        return HTML(
            f"<b>eisenhower:[<ansimagenta>dragging {short_id(ctx.dragging_id)}</ansimagenta>]&gt; </b>"
        )
    return HTML("<b>eisenhower&gt; </b>")


# Rotating tips for bottom toolbar
_TOOLBAR_TIPS = [
    "Tip: 'drag <id>' then 'drop do' moves a task into Do First",
    "Tip: Task IDs can be shortened to any unique prefix",
    "Tip: 'done' without an ID shows a picker",
    "Tip: List names: inbox, do, schedule, delegate, eliminate",
    "Tip: 'cancel' abandons a drag without moving anything",
    "Tip: Press Ctrl+D or type 'exit' to quit",
]


@dataclass
class _Toolbar:
    ctx: REPLContext
    tip_index: int = 0

    def __call__(self) -> HTML:
        """Per-list counts and the current tip."""
        counts = self.ctx.store.collection.counts()
        stats = " | ".join(
            f"{task_list.descriptor.action} {counts[task_list]}" for task_list in TaskList
        )
        tip = _TOOLBAR_TIPS[self.tip_index % len(_TOOLBAR_TIPS)]
        return HTML(f"<style bg='#444444' fg='#ffffff'> {stats} | {tip} </style>")

    def rotate(self) -> None:
        self.tip_index += 1


HANDLERS = {
    "add": handle_add_command,
    "board": handle_board_command,
    "ls": handle_board_command,
    "lists": handle_lists_command,
    "mv": handle_mv_command,
    "drag": handle_drag_command,
    "drop": handle_drop_command,
    "cancel": handle_cancel_command,
    "done": handle_done_command,
    "rm": handle_rm_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}


def execute_command(result: ParseResult, ctx: REPLContext) -> bool:
    """
    Execute a parsed command.

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    # Exit commands
    if command in ("exit", "quit"):
        ctx.console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler:
        handler(result, ctx)
        # Add whitespace after command output for readability
        ctx.console.print()
    else:
        ctx.console.print(f"[red]Unknown command:[/red] {command}")
        ctx.console.print("[dim]Type 'help' for available commands[/dim]")
        ctx.console.print()

    return True


def run_repl(store: Optional[TaskStore] = None) -> None:
    """
    Main REPL loop.

    Sets up prompt_toolkit session with:
    - Command history (in-memory, not persisted)
    - Autocomplete (commands, list names, task IDs)
    - Prompt and toolbar reflecting the drag state

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    if store is None:
        store = repository.open_task_store()

    ctx = REPLContext(store=store, console=console)
    toolbar = _Toolbar(ctx)

    if store.load_error is not None:
        console.print(f"[yellow]Warning:[/yellow] {store.load_error}")
        console.print("[yellow]Started with an empty board; the old data was backed up.[/yellow]")

    # In piped/test environments, skip prompt_toolkit entirely
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(store),
                complete_while_typing=True,
                bottom_toolbar=toolbar,
            )
        except Exception as e:
            # Fallback to simple input if prompt_toolkit fails
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    # Welcome message
    console.print("[bold cyan]Eisenhower REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    try:
        while True:
            user_input = ""
            try:
                if use_simple_input or session is None:
                    user_input = input(ctx.get_prompt())
                else:
                    user_input = session.prompt(lambda: format_prompt(ctx))

                if not execute_command(parse_command(user_input), ctx):
                    break

                toolbar.rotate()

            except KeyboardInterrupt:
                # Ctrl+C - drop any gesture in progress and continue
                if ctx.session.is_dragging:
                    ctx.session.cancel()
                    console.print("[dim]^C (drag cancelled)[/dim]")
                else:
                    console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
                continue
            except EOFError:
                # Ctrl+D or end of input - exit cleanly
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break
            except Exception as e:
                # Unexpected error - show but don't crash
                logger.exception("Command failed: %s", user_input)
                console.print(f"[red]Unexpected error:[/red] {e}")
    finally:
        store.close()


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: eisenhower repl (or just: eisenhower)
    """
    try:
        run_repl()
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
