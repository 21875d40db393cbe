"""
FILE: eisenhower/repl/pickers.py
PURPOSE: Inline numbered pickers for choosing tasks and lists in the REPL
EXPORTS:
  - pick_tasks(ctx, title, multi) -> list[str] | None
  - pick_list(ctx, title, exclude) -> TaskList | None
DEPENDENCIES:
  - rich (numbered list output)
  - eisenhower.core.models (TaskList)
NOTES:
  - Uses plain input() so it works without a TTY
  - Returns None when cancelled (empty input, Ctrl+C, Ctrl+D) or on a bad choice
"""

from typing import List, Optional

from rich.markup import escape

from ..core.models import TaskList
from ..formatting import short_id

# Keep the picker readable
MAX_PICKER_TASKS = 20


def _read_numbers(ctx, prompt: str, upper: int, multi: bool) -> Optional[List[int]]:
    """Read 1-based choice number(s); None if cancelled or invalid."""
    try:
        selection = input(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        ctx.console.print()
        return None

    if not selection:
        return None

    parts = [s.strip() for s in selection.split(",")] if multi else [selection]
    numbers = []
    for part in parts:
        try:
            number = int(part)
        except ValueError:
            ctx.console.print(f"[red]Error:[/red] Invalid number: {escape(part)}")
            return None
        if not 1 <= number <= upper:
            ctx.console.print(f"[red]Error:[/red] Number {number} out of range (1-{upper})")
            return None
        numbers.append(number)

    return numbers


def pick_tasks(ctx, title: str = "Select a task", multi: bool = True) -> Optional[List[str]]:
    """
    Show every task on the board as a numbered list and prompt for a choice.

    Args:
        ctx: REPLContext
        title: Heading shown above the list
        multi: Allow comma-separated numbers

    Returns:
        Selected task IDs, or None if cancelled
    """
    entries = [
        (task_list, task)
        for task_list, tasks in ctx.store.collection.items()
        for task in tasks
    ][:MAX_PICKER_TASKS]

    if not entries:
        ctx.console.print("[yellow]The board is empty[/yellow]")
        ctx.console.print("[dim]Tip: Use 'add <text>' to create a task[/dim]")
        return None

    ctx.console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for idx, (task_list, task) in enumerate(entries, 1):
        ctx.console.print(
            f"  [{idx}] {escape(task.content)} "
            f"[dim](id:{short_id(task.id)}, {task_list.descriptor.action})[/dim]"
        )
    ctx.console.print()

    prompt = "Select number(s) - use commas for multiple (or press Enter to cancel): " if multi \
        else "Select a number (or press Enter to cancel): "
    numbers = _read_numbers(ctx, prompt, len(entries), multi)
    if numbers is None:
        return None

    return [entries[n - 1][1].id for n in numbers]


def pick_list(ctx, title: str = "Select a list", exclude: TaskList = None) -> Optional[TaskList]:
    """
    Prompt for one of the five lists.

    Returns:
        Chosen TaskList, or None if cancelled
    """
    choices = [task_list for task_list in TaskList if task_list is not exclude]

    ctx.console.print(f"\n[bold cyan]{title}[/bold cyan]")
    for idx, task_list in enumerate(choices, 1):
        descriptor = task_list.descriptor
        ctx.console.print(f"  [{idx}] {descriptor.title} [dim]({descriptor.action})[/dim]")
    ctx.console.print()

    numbers = _read_numbers(ctx, "Select a number (or press Enter to cancel): ", len(choices), multi=False)
    if numbers is None:
        return None
    return choices[numbers[0] - 1]
