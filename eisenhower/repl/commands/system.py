"""
FILE: eisenhower/repl/commands/system.py
PURPOSE: Board and system command handlers for REPL (board, ls, lists, help, clear)
"""

from ..parser import ParseResult
from ..display import display_board, display_list
from ...formatting import BoardFormatter
from .tasks import parse_list_or_report


def handle_board_command(result: ParseResult, ctx) -> None:
    """
    Handle 'board' / 'ls' command - show the board or one list.

    Usage:
        board
        ls
        ls do
    """
    collection = ctx.store.collection

    if result.args:
        task_list = parse_list_or_report(ctx, result.args[0])
        if task_list is None:
            return
        display_list(collection, task_list, ctx.console, ctx.dragging_id)
        return

    display_board(collection, ctx.console, ctx.dragging_id)
    ctx.console.print(f"[dim]Total: {len(collection)} task(s)[/dim]")


def handle_lists_command(result: ParseResult, ctx) -> None:
    """Show the five lists with their names and counts."""
    ctx.console.print(BoardFormatter.create_lists_table(ctx.store.collection))


def handle_help_command(result: ParseResult, ctx) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
        ctx: REPL context
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]add <text>[/cyan]                 Add a task to the inbox
  [cyan]board[/cyan]                      Show inbox and quadrants
  [cyan]ls \\[<list>][/cyan]                Show one list (or the board)
  [cyan]lists[/cyan]                      Show list names and counts
  [cyan]drag \\[<id>][/cyan]                Pick a task up (picker if no ID)
  [cyan]drop \\[<list>][/cyan]              Drop the dragged task on a list (picker if no list)
  [cyan]cancel[/cyan]                     Put the dragged task back
  [cyan]mv <id> <list> \\[--from <list>][/cyan]  Drag and drop in one step
  [cyan]done \\[<id>\\[,<id>...]][/cyan]      Check off task(s) (picker if no ID)
  [cyan]rm <id> <list>[/cyan]             Remove a task from one list
  [cyan]clear[/cyan]                      Clear the screen
  [cyan]help[/cyan]                       Show this help message
  [cyan]exit[/cyan], [cyan]quit[/cyan]                 Exit REPL

[bold cyan]Lists:[/bold cyan]
  [yellow]inbox[/yellow]      Task Inbox
  [yellow]do[/yellow]         Do First - Urgent & Important
  [yellow]schedule[/yellow]   Schedule - Important, Not Urgent
  [yellow]delegate[/yellow]   Delegate - Urgent, Not Important
  [yellow]eliminate[/yellow]  Eliminate - Not Urgent, Not Important

[bold cyan]Tips:[/bold cyan]
  - Task IDs can be shortened to any unique prefix
  - Press Tab for autocomplete
  - Ctrl+C cancels a drag, Ctrl+D exits
"""
    ctx.console.print(help_text)


def handle_clear_command(result: ParseResult, ctx) -> None:
    """Clear the screen."""
    ctx.console.clear()
    ctx.console.print("[dim]Screen cleared[/dim]")
