"""
FILE: eisenhower/repl/display.py
PURPOSE: Display functions for tasks and the board
EXPORTS:
  - display_task() - Display a single task
  - display_board() - Display inbox and quadrants
  - display_list() - Display one list
DEPENDENCIES:
  - rich (formatted output)
  - eisenhower.formatting (BoardFormatter)
NOTES:
  - Accept the console as a parameter so tests can capture output
"""

from rich.console import Console
from rich.markup import escape

from ..core.models import Task, TaskCollection, TaskList
from ..formatting import BoardFormatter, short_id


def display_task(task: Task, message: str, console: Console, task_list: TaskList = None) -> None:
    """
    Display a single task with a message.

    Args:
        task: Task to display
        message: Shown before the task (e.g., "✓ Added:")
        console: Rich console to print to
        task_list: Where the task now is, if worth mentioning
    """
    console.print(f"[green]{message}[/green]")

    where = f" [dim]({task_list.descriptor.title})[/dim]" if task_list else ""
    console.print(f"  [cyan]{short_id(task.id)}[/cyan]: {escape(task.content)}{where}")


def display_board(collection: TaskCollection, console: Console, dragging_id: str = None) -> None:
    """Display the whole board, highlighting a task being dragged."""
    console.print(BoardFormatter.create_board(collection, dragging_id))


def display_list(collection: TaskCollection, task_list: TaskList, console: Console, dragging_id: str = None) -> None:
    """Display a single list as a panel."""
    console.print(BoardFormatter.create_list_panel(task_list, collection.get(task_list), dragging_id))
