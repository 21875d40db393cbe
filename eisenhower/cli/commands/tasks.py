"""
FILE: eisenhower/cli/commands/tasks.py
PURPOSE: Task commands (add, mv, done, rm)
"""

from typing import Optional

import typer
from rich.markup import escape

from ..main import app, console, error_console, open_store
from ...core.drag import DragSession
from ...core.exceptions import (
    EisenhowerError,
    TaskNotFoundError,
    AmbiguousTaskIdError,
    InvalidListError,
)
from ...core.models import TaskList
from ...core.store import resolve_task_id
from ...formatting import short_id, parse_task_ids


def _parse_list_or_exit(name: str) -> TaskList:
    try:
        return TaskList.parse(name)
    except InvalidListError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        error_console.print("[dim]Run 'eisenhower lists' to see valid names[/dim]")
        raise typer.Exit(1)


@app.command()
def add(
    content: str = typer.Argument(..., help="Task text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Add a task to the inbox.

    Example:
        eisenhower add "Write report"
    """
    store = open_store()
    task = store.add_task(content)

    if task is None:
        if not json_output:
            console.print("[dim]Nothing to add (task text is blank)[/dim]")
        else:
            console.print_json("null")
        return

    if json_output:
        console.print_json(task.to_json())
    elif raw:
        console.print(task.id)
    else:
        console.print(f"[green]✓ Added [bold]{short_id(task.id)}[/bold] to the inbox:[/green] {escape(task.content)}")


@app.command()
def mv(
    task_id: str = typer.Argument(..., help="Task ID (or unique prefix)"),
    target: str = typer.Argument(..., help="Target list (e.g. do, schedule, urgentImportant, inbox)"),
    source: Optional[str] = typer.Option(None, "--from", "-f", help="Source list (default: the task's current list)"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Move a task to another list.

    Runs a full drag gesture: pick up from the source list, drop on the target.
    Moving a task that isn't in the source list changes nothing.

    Example:
        eisenhower mv 1a2b3c do
        eisenhower mv 1a2b3c schedule --from inbox
    """
    target_list = _parse_list_or_exit(target)
    source_list = _parse_list_or_exit(source) if source else None

    store = open_store()

    try:
        full_id = resolve_task_id(store.collection, task_id)
    except AmbiguousTaskIdError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except TaskNotFoundError as e:
        console.print(f"[yellow]{e}[/yellow] - nothing moved")
        return

    if source_list is None:
        source_list, _ = store.find_task(full_id)

    session = DragSession(store)
    try:
        transport_data = session.begin_drag(full_id, source_list)
        moved = session.drop(target_list, transport_data)
    except EisenhowerError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    if moved:
        if raw:
            console.print(f"{full_id}: {source_list.value} -> {target_list.value}")
        else:
            title = target_list.descriptor.title
            console.print(f"[green]→ Moved [bold]{short_id(full_id)}[/bold] to {title}[/green]")
    elif source_list is target_list:
        console.print(f"[dim]Task {short_id(full_id)} is already in {target_list.value}[/dim]")
    else:
        console.print(f"[yellow]Task {short_id(full_id)} is not in {source_list.value}[/yellow] - nothing moved")


@app.command()
def done(
    task_ids: str = typer.Argument(..., help="Task ID(s), comma-separated"),
):
    """
    Check off task(s), removing them from whichever list holds them.

    Example:
        eisenhower done 1a2b3c
        eisenhower done 1a2b,3c4d
    """
    store = open_store()
    ids = parse_task_ids(task_ids)
    if not ids:
        error_console.print("[red]Error:[/red] No task IDs given")
        raise typer.Exit(1)

    exit_code = 0
    for task_id in ids:
        try:
            full_id = resolve_task_id(store.collection, task_id)
        except AmbiguousTaskIdError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            exit_code = 1
            continue
        except TaskNotFoundError as e:
            console.print(f"[yellow]{e}[/yellow]")
            continue

        _, task = store.find_task(full_id)
        store.delete_task(full_id)
        console.print(f"[green]✓ Done:[/green] {escape(task.content)}")

    if exit_code:
        raise typer.Exit(exit_code)


@app.command()
def rm(
    task_id: str = typer.Argument(..., help="Task ID (or unique prefix)"),
    list_name: str = typer.Argument(..., help="List to remove the task from"),
):
    """
    Remove a task from one specific list.

    Nothing happens if the task isn't in that list.

    Example:
        eisenhower rm 1a2b3c inbox
    """
    task_list = _parse_list_or_exit(list_name)
    store = open_store()

    try:
        full_id = resolve_task_id(store.collection, task_id)
    except AmbiguousTaskIdError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except TaskNotFoundError as e:
        console.print(f"[yellow]{e}[/yellow] - nothing removed")
        return

    if store.remove_task(full_id, task_list):
        console.print(f"[green]× Removed [bold]{short_id(full_id)}[/bold] from {task_list.value}[/green]")
    else:
        console.print(f"[yellow]Task {short_id(full_id)} is not in {task_list.value}[/yellow] - nothing removed")
