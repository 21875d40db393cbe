"""
FILE: eisenhower/repl/commands/drag.py
PURPOSE: Drag gesture handlers for REPL (drag, drop, cancel)
NOTES:
  - The gesture lives on ctx.session between commands
  - 'drop' with the same list the task came from is a no-op
"""

from rich.markup import escape

from ..parser import ParseResult
from ..display import display_task
from ..pickers import pick_tasks, pick_list
from ..style import celebrate_move
from ...formatting import short_id
from .tasks import resolve_or_report, parse_list_or_report


def handle_drag_command(result: ParseResult, ctx) -> None:
    """
    Handle 'drag' command - pick a task up.

    Usage:
        drag 1a2b3c
        drag           (shows picker)
    """
    if result.args:
        full_id = resolve_or_report(ctx, result.args[0])
    else:
        picked = pick_tasks(ctx, title="Pick up a task", multi=False)
        full_id = picked[0] if picked else None

    if full_id is None:
        return

    source, task = ctx.store.find_task(full_id)
    ctx.session.begin_drag(full_id, source)

    ctx.console.print(
        f"[magenta]✋ Picked up[/magenta] [cyan]{short_id(full_id)}[/cyan]: {escape(task.content)} "
        f"[dim](from {source.descriptor.title})[/dim]"
    )
    ctx.console.print("[dim]Use 'drop <list>' to place it, or 'cancel'[/dim]")


def handle_drop_command(result: ParseResult, ctx) -> None:
    """
    Handle 'drop' command - place the dragged task on a list.

    Usage:
        drop do
        drop           (shows list picker)
    """
    payload = ctx.session.payload
    if payload is None:
        ctx.console.print("[yellow]Nothing is being dragged[/yellow]")
        ctx.console.print("[dim]Use 'drag <task_id>' first[/dim]")
        return

    if result.args:
        target = parse_list_or_report(ctx, result.args[0])
    else:
        target = pick_list(ctx, title="Drop on", exclude=payload.source_list)

    if target is None:
        # Still dragging; the user can try again or cancel
        return

    if ctx.session.drop(target):
        ctx.console.print(f"[dim]{celebrate_move(target)}[/dim]")
        _, task = ctx.store.find_task(payload.task_id)
        display_task(task, "→ Dropped:", ctx.console, target)
    elif payload.source_list is target:
        ctx.console.print(f"[dim]Dropped back on {target.descriptor.title} - nothing moved[/dim]")
    else:
        ctx.console.print(
            f"[yellow]Task {short_id(payload.task_id)} is no longer in "
            f"{payload.source_list.descriptor.title}[/yellow] - nothing moved"
        )


def handle_cancel_command(result: ParseResult, ctx) -> None:
    """
    Handle 'cancel' command - abandon the drag in progress.

    Usage:
        cancel
    """
    if not ctx.session.is_dragging:
        ctx.console.print("[dim]Nothing to cancel[/dim]")
        return

    task_id = ctx.dragging_id
    ctx.session.cancel()
    ctx.console.print(f"[dim]Put {short_id(task_id)} back[/dim]")
