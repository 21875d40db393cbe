"""
FILE: eisenhower/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - EisenhowerError (base exception)
  - InvalidListError
  - TaskNotFoundError
  - AmbiguousTaskIdError
  - SnapshotError
  - InvalidDragPayloadError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from EisenhowerError for easy catching
  - Store mutations never raise for missing tasks; TaskNotFoundError is only
    raised when the UI resolves a user-typed id
  - SnapshotError and InvalidDragPayloadError are recovered inside the core
"""


class EisenhowerError(Exception):
    """Base exception for all Eisenhower errors."""
    pass


class InvalidListError(EisenhowerError, ValueError):
    """List name doesn't match any of the five task lists."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown list '{name}'")


class TaskNotFoundError(EisenhowerError):
    """No task matches the given ID."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class AmbiguousTaskIdError(TaskNotFoundError):
    """ID prefix matches more than one task."""

    def __init__(self, task_id: str, matches: list):
        self.matches = matches
        EisenhowerError.__init__(
            self, f"Task ID '{task_id}' is ambiguous ({len(matches)} matches)"
        )
        self.task_id = task_id


class SnapshotError(EisenhowerError):
    """Persisted snapshot is corrupt or has an unsupported shape."""

    def __init__(self, message: str):
        super().__init__(f"Unreadable snapshot: {message}")


class InvalidDragPayloadError(EisenhowerError):
    """Drag payload received from the UI transport is malformed."""

    def __init__(self, message: str):
        super().__init__(f"Invalid drag payload: {message}")
