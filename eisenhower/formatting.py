"""
FILE: eisenhower/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - BoardFormatter: Rendering of lists and the whole board
  - short_id: Abbreviated task ID for display
  - parse_task_ids: Parse comma-separated task IDs
DEPENDENCIES:
  - rich (panels, tables, layout)
  - json (for JSON serialization)
  - eisenhower.core.models (Task, TaskList, TaskCollection)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
  - Board layout: inbox on top, quadrants in a 2x2 grid below
"""

import json
from typing import Any, Dict, Iterable, List

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .core.constants import TASK_ID_DISPLAY_LENGTH
from .core.models import Task, TaskCollection, TaskList

# Border color per list
LIST_STYLES = {
    TaskList.INBOX: "white",
    TaskList.URGENT_IMPORTANT: "red",
    TaskList.IMPORTANT_NOT_URGENT: "blue",
    TaskList.URGENT_NOT_IMPORTANT: "yellow",
    TaskList.NOT_URGENT_NOT_IMPORTANT: "dim",
}

# Quadrant grid rows: (left, right)
QUADRANT_GRID = (
    (TaskList.URGENT_IMPORTANT, TaskList.IMPORTANT_NOT_URGENT),
    (TaskList.URGENT_NOT_IMPORTANT, TaskList.NOT_URGENT_NOT_IMPORTANT),
)


def short_id(task_id: str) -> str:
    return task_id[:TASK_ID_DISPLAY_LENGTH]


class BoardFormatter:
    """Centralized board display formatting."""

    @staticmethod
    def create_list_table(tasks: Iterable[Task], dragging_id: str = None) -> Table:
        """
        Create Rich table for the tasks of one list.

        Args:
            tasks: Tasks in display order
            dragging_id: ID of a task being dragged (highlighted)
        """
        table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
        table.add_column("ID", style="cyan", width=TASK_ID_DISPLAY_LENGTH, no_wrap=True)
        table.add_column("Task", style="white")

        for task in tasks:
            content = escape(task.content)
            if task.id == dragging_id:
                content = f"[reverse]{content}[/reverse]"
            table.add_row(short_id(task.id), content)

        return table

    @staticmethod
    def create_list_panel(task_list: TaskList, tasks, dragging_id: str = None) -> Panel:
        """Panel with the list's title, subtitle and tasks."""
        descriptor = task_list.descriptor
        style = LIST_STYLES[task_list]

        if tasks:
            body = BoardFormatter.create_list_table(tasks, dragging_id)
        else:
            body = "[dim]Drop tasks here[/dim]"

        return Panel(
            body,
            title=f"[bold]{descriptor.title}[/bold] [dim]({len(tasks)})[/dim]",
            subtitle=f"[dim]{descriptor.subtitle}[/dim]" if task_list.is_quadrant else None,
            border_style=style,
        )

    @staticmethod
    def create_board(collection: TaskCollection, dragging_id: str = None) -> Group:
        """
        Render the full board.

        Returns:
            Rich renderable: inbox panel above a 2x2 quadrant grid
        """
        grid = Table.grid(expand=True, padding=(0, 1))
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)

        for left, right in QUADRANT_GRID:
            grid.add_row(
                BoardFormatter.create_list_panel(left, collection.get(left), dragging_id),
                BoardFormatter.create_list_panel(right, collection.get(right), dragging_id),
            )

        inbox = BoardFormatter.create_list_panel(
            TaskList.INBOX, collection.get(TaskList.INBOX), dragging_id
        )
        return Group(inbox, grid)

    @staticmethod
    def create_lists_table(collection: TaskCollection) -> Table:
        """Table of the five lists with their names and task counts."""
        table = Table(title="Lists", show_header=True, header_style="bold cyan")
        table.add_column("Name", style="green", no_wrap=True)
        table.add_column("Action", style="magenta")
        table.add_column("Title", style="white")
        table.add_column("Subtitle", style="dim")
        table.add_column("Tasks", justify="right")

        for task_list, tasks in collection.items():
            descriptor = task_list.descriptor
            table.add_row(
                task_list.value,
                descriptor.action,
                descriptor.title,
                descriptor.subtitle,
                str(len(tasks)),
            )

        return table

    @staticmethod
    def to_json_dict(collection: TaskCollection) -> Dict[str, Any]:
        """Collection as a JSON-serializable dict (snapshot format)."""
        return collection.to_dict()

    @staticmethod
    def to_json_array(tasks: Iterable[Task]) -> str:
        """Tasks of one list as a JSON array string."""
        return json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)

    @staticmethod
    def to_raw_lines(collection: TaskCollection) -> List[str]:
        """
        Plain text, one task per line.

        Format: "<list>\\t<id>\\t<content>"
        """
        lines = []
        for task_list, tasks in collection.items():
            for task in tasks:
                lines.append(f"{task_list.value}\t{task.id}\t{task.content}")
        return lines


def parse_task_ids(id_string: str) -> List[str]:
    """
    Parse comma-separated task IDs.

    Args:
        id_string: Comma-separated string of IDs or ID prefixes (e.g., "1a2b,3c4d")

    Returns:
        List of non-empty, stripped IDs in input order
    """
    ids = [task_id.strip() for task_id in id_string.split(",")]
    return [task_id for task_id in ids if task_id]
