"""
FILE: eisenhower/cli/commands/board.py
PURPOSE: Board commands (board, ls, lists)
"""

import json
from typing import Optional

import typer

from ..main import app, console, error_console, open_store
from ...core.exceptions import InvalidListError
from ...core.models import TaskList
from ...formatting import BoardFormatter


@app.command()
def board(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show the inbox and all four quadrants.

    Example:
        eisenhower board
        eisenhower board --json
    """
    store = open_store()
    collection = store.collection

    if json_output:
        console.print_json(json.dumps(BoardFormatter.to_json_dict(collection)))
    elif raw:
        for line in BoardFormatter.to_raw_lines(collection):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(BoardFormatter.create_board(collection))
        console.print(f"\n[dim]Total: {len(collection)} task(s)[/dim]")


@app.command()
def ls(
    list_name: Optional[str] = typer.Argument(None, help="List to show (default: whole board)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List tasks in one list, or the whole board.

    Example:
        eisenhower ls
        eisenhower ls inbox
        eisenhower ls do --json
    """
    if list_name is None:
        board(json_output=json_output, raw=raw)
        return

    try:
        task_list = TaskList.parse(list_name)
    except InvalidListError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        error_console.print("[dim]Run 'eisenhower lists' to see valid names[/dim]")
        raise typer.Exit(1)

    store = open_store()
    tasks = store.tasks(task_list)

    if json_output:
        console.print_json(BoardFormatter.to_json_array(tasks))
    elif raw:
        for task in tasks:
            console.print(f"{task.id}\t{task.content}", markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(BoardFormatter.create_list_panel(task_list, tasks))


@app.command()
def lists():
    """
    Show the five lists, their names, and task counts.

    Example:
        eisenhower lists
    """
    store = open_store()
    console.print(BoardFormatter.create_lists_table(store.collection))
    console.print("[dim]Use the Name or Action column wherever a list is expected[/dim]")
