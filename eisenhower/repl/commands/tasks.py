"""
FILE: eisenhower/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL (add, done, rm, mv)
"""

from typing import Optional

from rich.markup import escape

from ..parser import ParseResult
from ..display import display_task
from ..pickers import pick_tasks
from ..style import celebrate_add, celebrate_done, celebrate_move, celebrate_bulk
from ...core.drag import DragSession
from ...core.exceptions import TaskNotFoundError, InvalidListError
from ...core.models import TaskList
from ...core.store import resolve_task_id
from ...formatting import short_id, parse_task_ids


def resolve_or_report(ctx, task_id: str) -> Optional[str]:
    """Expand an ID prefix, printing why if it can't be resolved."""
    try:
        return resolve_task_id(ctx.store.collection, task_id)
    except TaskNotFoundError as e:
        # AmbiguousTaskIdError is a TaskNotFoundError too
        ctx.console.print(f"[yellow]{escape(str(e))}[/yellow]")
        return None


def parse_list_or_report(ctx, name: str) -> Optional[TaskList]:
    """Parse a list name, printing the valid names if it's unknown."""
    try:
        return TaskList.parse(name)
    except InvalidListError as e:
        ctx.console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.console.print("[dim]Lists: inbox, do, schedule, delegate, eliminate[/dim]")
        return None


def handle_add_command(result: ParseResult, ctx) -> None:
    """
    Handle 'add' command - add a task to the inbox.

    Usage:
        add Buy groceries
        add "Task with spaces"
    """
    if not result.args:
        ctx.console.print("[red]Error:[/red] Task text required")
        ctx.console.print("[dim]Usage: add <text>[/dim]")
        return

    # Join all args as the text (in case they didn't use quotes)
    task = ctx.store.add_task(result.text)
    if task is None:
        ctx.console.print("[dim]Nothing to add (task text is blank)[/dim]")
        return

    ctx.console.print(f"[dim]{celebrate_add()}[/dim]")
    display_task(task, "✓ Added to inbox:", ctx.console)


def handle_done_command(result: ParseResult, ctx) -> None:
    """
    Handle 'done' command - check off task(s) wherever they are.

    Usage:
        done 1a2b3c
        done 1a2b,3c4d
        done           (shows picker)
    """
    if result.args:
        ids = parse_task_ids(",".join(result.args))
    else:
        ids = pick_tasks(ctx, title="Check off tasks")
        if ids is None:
            return  # User cancelled

    completed = 0
    for task_id in ids:
        full_id = resolve_or_report(ctx, task_id)
        if full_id is None:
            continue

        found = ctx.store.find_task(full_id)
        if found is None or not ctx.store.delete_task(full_id):
            continue

        if ctx.dragging_id == full_id:
            ctx.session.cancel()

        _, task = found
        ctx.console.print(f"[dim]{celebrate_done()}[/dim]")
        display_task(task, "✓ Done:", ctx.console)
        completed += 1

    if completed > 1:
        ctx.console.print(f"[green]{celebrate_bulk(completed, 'completed')}[/green]")


def handle_rm_command(result: ParseResult, ctx) -> None:
    """
    Handle 'rm' command - remove a task from one specific list.

    Usage:
        rm 1a2b3c inbox
    """
    if len(result.args) < 2:
        ctx.console.print("[red]Error:[/red] Task ID and list required")
        ctx.console.print("[dim]Usage: rm <task_id> <list>[/dim]")
        return

    task_list = parse_list_or_report(ctx, result.args[1])
    if task_list is None:
        return

    full_id = resolve_or_report(ctx, result.args[0])
    if full_id is None:
        return

    if ctx.store.remove_task(full_id, task_list):
        if ctx.dragging_id == full_id:
            ctx.session.cancel()
        ctx.console.print(f"[green]× Removed [bold]{short_id(full_id)}[/bold] from {task_list.descriptor.title}[/green]")
    else:
        ctx.console.print(f"[yellow]Task {short_id(full_id)} is not in {task_list.descriptor.title}[/yellow] - nothing removed")


def handle_mv_command(result: ParseResult, ctx) -> None:
    """
    Handle 'mv' command - move a task in one step (drag + drop).

    Usage:
        mv 1a2b3c do
        mv 1a2b3c schedule --from inbox

    Note:
        Uses its own gesture, so a drag in progress is left alone.
    """
    if len(result.args) < 2:
        ctx.console.print("[red]Error:[/red] Task ID and target list required")
        ctx.console.print("[dim]Usage: mv <task_id> <list> [--from <list>][/dim]")
        return

    target = parse_list_or_report(ctx, result.args[1])
    if target is None:
        return

    source = None
    source_name = result.flags.get("from")
    if isinstance(source_name, str):
        source = parse_list_or_report(ctx, source_name)
        if source is None:
            return

    full_id = resolve_or_report(ctx, result.args[0])
    if full_id is None:
        return

    if source is None:
        source, _ = ctx.store.find_task(full_id)

    gesture = DragSession(ctx.store)
    moved = gesture.drop(target, gesture.begin_drag(full_id, source))

    if moved:
        ctx.console.print(f"[dim]{celebrate_move(target)}[/dim]")
        _, task = ctx.store.find_task(full_id)
        display_task(task, "→ Moved:", ctx.console, target)
    elif source is target:
        ctx.console.print(f"[dim]Task {short_id(full_id)} is already in {target.descriptor.title}[/dim]")
    else:
        ctx.console.print(f"[yellow]Task {short_id(full_id)} is not in {source.descriptor.title}[/yellow] - nothing moved")
