"""
FILE: eisenhower/core/__init__.py
PURPOSE: Task-state model, store, drag protocol, and persistence
"""

from .models import Task, TaskList, TaskCollection, QuadrantDescriptor, QUADRANTS
from .store import TaskStore
from .drag import DragSession, DragState, DragPayload

__all__ = [
    "Task",
    "TaskList",
    "TaskCollection",
    "QuadrantDescriptor",
    "QUADRANTS",
    "TaskStore",
    "DragSession",
    "DragState",
    "DragPayload",
]
