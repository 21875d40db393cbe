"""
FILE: eisenhower/core/models.py
PURPOSE: Domain models for tasks, task lists, and the task collection
EXPORTS:
  - Task (frozen dataclass)
  - TaskList (enum of the five lists)
  - QuadrantDescriptor (frozen dataclass)
  - QUADRANTS, INBOX_DESCRIPTOR, LIST_DESCRIPTORS
  - TaskCollection (frozen dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - uuid (stdlib)
  - eisenhower.core.constants
  - eisenhower.core.exceptions (InvalidListError, SnapshotError)
NOTES:
  - All models are immutable; mutation means building a new TaskCollection
  - TaskCollection.to_json() is the persisted snapshot format
  - from_dict()/from_json() validate untrusted input and raise SnapshotError
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import json
import uuid

from .constants import SCHEMA_VERSION, LEGACY_INBOX_KEY
from .exceptions import InvalidListError, SnapshotError


def new_task_id() -> str:
    """Generate a collision-free task ID."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Task:
    """A single task. Never edited after creation."""

    id: str
    content: str

    @classmethod
    def create(cls, content: str) -> "Task":
        """Build a task with a fresh ID."""
        return cls(id=new_task_id(), content=content)

    @classmethod
    def from_dict(cls, data) -> "Task":
        """Convert a snapshot entry to a Task, validating its shape."""
        if not isinstance(data, dict):
            raise SnapshotError(f"task entry must be an object, got {type(data).__name__}")

        task_id = data.get("id")
        content = data.get("content")
        if not isinstance(task_id, str) or not task_id.strip():
            raise SnapshotError(f"task id must be a non-empty string, got {task_id!r}")
        if not isinstance(content, str) or not content.strip():
            raise SnapshotError(f"task {task_id} content must be a non-empty string")

        return cls(id=task_id, content=content)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


class TaskList(Enum):
    """
    The five task lists. Values are the keys used in persisted snapshots.

    Use TaskList.parse() to turn user or wire input into a member; unknown
    names raise InvalidListError instead of silently matching nothing.
    """

    INBOX = "inbox"
    URGENT_IMPORTANT = "urgentImportant"
    IMPORTANT_NOT_URGENT = "importantNotUrgent"
    URGENT_NOT_IMPORTANT = "urgentNotImportant"
    NOT_URGENT_NOT_IMPORTANT = "notUrgentNotImportant"

    @property
    def field_name(self) -> str:
        """Attribute name of this list on TaskCollection."""
        return self.name.lower()

    @property
    def is_quadrant(self) -> bool:
        return self is not TaskList.INBOX

    @property
    def descriptor(self) -> "QuadrantDescriptor":
        return LIST_DESCRIPTORS[self]

    @classmethod
    def parse(cls, value) -> "TaskList":
        """
        Resolve a list name to a TaskList member.

        Accepts:
            - a TaskList member
            - the snapshot key ("urgentImportant"), case-insensitive
            - the member name ("urgent_important" or "URGENT_IMPORTANT")
            - the legacy inbox key ("taskBank")
            - the quadrant action ("do", "schedule", "delegate", "eliminate")

        Raises:
            InvalidListError: If value names no list
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidListError(value)

        key = value.strip().lower().replace("-", "_")
        member = _LIST_ALIASES.get(key)
        if member is None:
            raise InvalidListError(value)
        return member


@dataclass(frozen=True)
class QuadrantDescriptor:
    """Display metadata for a list. Presentation only."""

    title: str
    subtitle: str
    action: str


QUADRANTS: Dict[TaskList, QuadrantDescriptor] = {
    TaskList.URGENT_IMPORTANT: QuadrantDescriptor("Do First", "Urgent & Important", "do"),
    TaskList.IMPORTANT_NOT_URGENT: QuadrantDescriptor("Schedule", "Important, Not Urgent", "schedule"),
    TaskList.URGENT_NOT_IMPORTANT: QuadrantDescriptor("Delegate", "Urgent, Not Important", "delegate"),
    TaskList.NOT_URGENT_NOT_IMPORTANT: QuadrantDescriptor("Eliminate", "Not Urgent, Not Important", "eliminate"),
}

INBOX_DESCRIPTOR = QuadrantDescriptor("Task Inbox", "Unsorted", "inbox")

LIST_DESCRIPTORS: Dict[TaskList, QuadrantDescriptor] = {
    TaskList.INBOX: INBOX_DESCRIPTOR,
    **QUADRANTS,
}


def _build_aliases() -> Dict[str, TaskList]:
    aliases = {LEGACY_INBOX_KEY.lower(): TaskList.INBOX}
    for member in TaskList:
        aliases[member.value.lower()] = member
        aliases[member.field_name] = member
        aliases[LIST_DESCRIPTORS[member].action] = member
    return aliases


_LIST_ALIASES = _build_aliases()


@dataclass(frozen=True)
class TaskCollection:
    """
    The inbox plus the four quadrants.

    Invariant: every task ID appears in exactly one list. Instances are
    immutable; with_list() returns a new collection, so a caller holding an
    old collection never observes a half-applied change.
    """

    inbox: Tuple[Task, ...] = ()
    urgent_important: Tuple[Task, ...] = ()
    important_not_urgent: Tuple[Task, ...] = ()
    urgent_not_important: Tuple[Task, ...] = ()
    not_urgent_not_important: Tuple[Task, ...] = ()

    @classmethod
    def empty(cls) -> "TaskCollection":
        return cls()

    def get(self, task_list) -> Tuple[Task, ...]:
        """Tasks in the given list, in insertion order."""
        return getattr(self, TaskList.parse(task_list).field_name)

    def with_list(self, task_list, tasks) -> "TaskCollection":
        """Return a copy with one list replaced."""
        return self.with_lists({TaskList.parse(task_list): tasks})

    def with_lists(self, changes: Dict[TaskList, Sequence[Task]]) -> "TaskCollection":
        """Return a copy with several lists replaced at once."""
        values = {member.field_name: self.get(member) for member in TaskList}
        for task_list, tasks in changes.items():
            values[TaskList.parse(task_list).field_name] = tuple(tasks)
        return TaskCollection(**values)

    def items(self) -> Iterator[Tuple[TaskList, Tuple[Task, ...]]]:
        for member in TaskList:
            yield member, self.get(member)

    def find(self, task_id: str) -> Optional[Tuple[TaskList, Task]]:
        """Locate a task by ID across all lists."""
        for task_list, tasks in self.items():
            for task in tasks:
                if task.id == task_id:
                    return task_list, task
        return None

    def task_ids(self) -> List[str]:
        return [task.id for _, tasks in self.items() for task in tasks]

    def counts(self) -> Dict[TaskList, int]:
        return {task_list: len(tasks) for task_list, tasks in self.items()}

    def __len__(self) -> int:
        return sum(len(tasks) for _, tasks in self.items())

    # --- Serialization ---

    def to_dict(self) -> Dict[str, object]:
        """Snapshot dict with the version first and lists in fixed order."""
        data: Dict[str, object] = {"version": SCHEMA_VERSION}
        for task_list, tasks in self.items():
            data[task_list.value] = [task.to_dict() for task in tasks]
        return data

    def to_json(self) -> str:
        """Serialize to the persisted snapshot format."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data) -> "TaskCollection":
        """
        Build a collection from a decoded snapshot.

        Raises:
            SnapshotError: If the snapshot is not a valid collection

        Notes:
            - Missing "version" means an unversioned snapshot
            - "taskBank" is read as the inbox when "inbox" is absent;
              a snapshot with both is rejected
            - Missing list keys read as empty lists
            - A task ID appearing twice is rejected as a whole
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"expected an object, got {type(data).__name__}")

        version = data.get("version", 0)
        if not isinstance(version, int) or isinstance(version, bool):
            raise SnapshotError(f"version must be an integer, got {version!r}")
        if version > SCHEMA_VERSION:
            raise SnapshotError(f"version {version} is newer than supported ({SCHEMA_VERSION})")

        if data.get(TaskList.INBOX.value) is not None and data.get(LEGACY_INBOX_KEY) is not None:
            raise SnapshotError(f"both '{TaskList.INBOX.value}' and '{LEGACY_INBOX_KEY}' present")

        seen = set()
        lists: Dict[TaskList, List[Task]] = {}
        for task_list in TaskList:
            raw = data.get(task_list.value)
            if raw is None and task_list is TaskList.INBOX:
                raw = data.get(LEGACY_INBOX_KEY)
            if raw is None:
                raw = []
            if not isinstance(raw, list):
                raise SnapshotError(f"'{task_list.value}' must be a list")

            tasks = []
            for entry in raw:
                task = Task.from_dict(entry)
                if task.id in seen:
                    raise SnapshotError(f"task {task.id} appears more than once")
                seen.add(task.id)
                tasks.append(task)
            lists[task_list] = tasks

        return cls.empty().with_lists(lists)

    @classmethod
    def from_json(cls, raw: str) -> "TaskCollection":
        """Parse a persisted snapshot string."""
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise SnapshotError(str(e)) from e
        return cls.from_dict(data)
