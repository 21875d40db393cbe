"""
FILE: eisenhower/core/store.py
PURPOSE: TaskStore - sole owner and mutator of the task collection
EXPORTS:
  - TaskStore (class)
  - resolve_task_id(collection, prefix) -> str
DEPENDENCIES:
  - logging (stdlib)
  - eisenhower.core.models (Task, TaskList, TaskCollection)
  - eisenhower.core.exceptions (SnapshotError, TaskNotFoundError, AmbiguousTaskIdError)
  - eisenhower.core.constants (CORRUPT_BACKUP_KEY)
NOTES:
  - Every mutation builds a new immutable TaskCollection and swaps a single
    reference, so observers see either the old or the new state, never a mix
  - Missing tasks are a no-op (False), never an error: the UI may be stale
  - Blank content on add is a no-op (None)
  - Subscribers are notified after each mutation; persistence is one of them
  - Corrupt snapshots reset the store to empty (see initialize())
"""

import logging
from typing import Callable, List, Optional, Tuple

from .constants import CORRUPT_BACKUP_KEY
from .exceptions import AmbiguousTaskIdError, SnapshotError, TaskNotFoundError
from .models import Task, TaskCollection, TaskList

logger = logging.getLogger(__name__)

Listener = Callable[[TaskCollection], None]


class TaskStore:
    """
    Owns the inbox and the four quadrants.

    Construct one per process and pass it to whatever needs it. Use
    TaskStore.open(storage) to load from and save to a storage backend.
    """

    def __init__(self, collection: Optional[TaskCollection] = None):
        self._collection = collection if collection is not None else TaskCollection.empty()
        self._listeners: List[Listener] = []
        self._storage = None
        self.load_error: Optional[SnapshotError] = None

    @classmethod
    def open(cls, storage) -> "TaskStore":
        """
        Create a store backed by storage (anything with load() and save()).

        Loads the persisted snapshot, then subscribes storage.save so every
        mutation is written back. If the snapshot is unreadable and storage
        supports backup(), the raw blob is copied to CORRUPT_BACKUP_KEY
        before anything can overwrite it.
        """
        store = cls()
        raw = storage.load()
        store.initialize(raw)

        if store.load_error is not None and raw is not None and hasattr(storage, "backup"):
            storage.backup(CORRUPT_BACKUP_KEY, raw)
            logger.warning("Copied unreadable snapshot to %s", CORRUPT_BACKUP_KEY)

        store._storage = storage
        store.subscribe(lambda collection: storage.save(collection.to_json()))
        return store

    # --- Lifecycle ---

    def initialize(self, persisted: Optional[str]) -> TaskCollection:
        """
        Replace the collection with the persisted snapshot.

        Args:
            persisted: Serialized collection, or None for a fresh start

        Returns:
            The loaded collection, or an empty one

        Notes:
            - A malformed snapshot never raises: the store resets to empty,
              logs a warning and records the error on self.load_error
            - Subscribers are not notified; nothing was mutated by the user
        """
        self.load_error = None

        if persisted is None or not persisted.strip():
            self._collection = TaskCollection.empty()
            return self._collection

        try:
            self._collection = TaskCollection.from_json(persisted)
        except SnapshotError as e:
            logger.warning("Resetting to empty task collection: %s", e)
            self.load_error = e
            self._collection = TaskCollection.empty()
            return self._collection

        logger.debug("Loaded %d task(s) from snapshot", len(self._collection))
        return self._collection

    def close(self) -> None:
        """Final save at teardown. Safe to call on a store without storage."""
        if self._storage is not None:
            self._storage.save(self.snapshot())

    # --- Read access ---

    @property
    def collection(self) -> TaskCollection:
        """Current immutable snapshot of all lists."""
        return self._collection

    def tasks(self, task_list) -> Tuple[Task, ...]:
        return self._collection.get(task_list)

    def find_task(self, task_id: str) -> Optional[Tuple[TaskList, Task]]:
        return self._collection.find(task_id)

    def snapshot(self) -> str:
        """Serialize the collection for persistence."""
        return self._collection.to_json()

    # --- Change notification ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call listener with the new collection after every mutation.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, collection: TaskCollection) -> None:
        self._collection = collection
        for listener in list(self._listeners):
            try:
                listener(collection)
            except Exception:
                # Mutation is already committed
                logger.exception("Task store listener %r failed", listener)

    # --- Mutations ---

    def add_task(self, content: str) -> Optional[Task]:
        """
        Create a task in the inbox.

        Returns:
            The new Task, or None if content is blank

        Note:
            Content is stored as typed; whitespace only decides blankness.
        """
        if not (content or "").strip():
            logger.debug("Ignoring blank task")
            return None

        task = Task.create(content)
        inbox = self._collection.inbox + (task,)
        self._commit(self._collection.with_list(TaskList.INBOX, inbox))

        logger.debug("Added task %s to inbox", task.id)
        return task

    def remove_task(self, task_id: str, task_list) -> bool:
        """
        Remove a task from the named list only.

        Returns:
            True if a task was removed, False if it wasn't in that list
        """
        task_list = TaskList.parse(task_list)
        current = self._collection.get(task_list)
        remaining = tuple(t for t in current if t.id != task_id)

        if len(remaining) == len(current):
            logger.debug("Task %s not in %s, nothing to remove", task_id, task_list.value)
            return False

        self._commit(self._collection.with_list(task_list, remaining))
        logger.debug("Removed task %s from %s", task_id, task_list.value)
        return True

    def delete_task(self, task_id: str) -> bool:
        """
        Remove a task from whichever list holds it.

        Returns:
            True if a task was removed, False if no list holds it
        """
        found = self._collection.find(task_id)
        if found is None:
            logger.debug("Task %s not found, nothing to delete", task_id)
            return False

        task_list, _ = found
        return self.remove_task(task_id, task_list)

    def move_task(self, task_id: str, source_list, target_list) -> bool:
        """
        Move a task from source_list to the end of target_list.

        Returns:
            True if the task moved, False for a self-move or if the task
            isn't in source_list

        Notes:
            - Both lists are replaced in a single commit
            - Unknown list names raise InvalidListError before anything changes
        """
        source = TaskList.parse(source_list)
        target = TaskList.parse(target_list)

        if source is target:
            return False

        current = self._collection.get(source)
        task = next((t for t in current if t.id == task_id), None)
        if task is None:
            logger.debug("Task %s not in %s, ignoring move", task_id, source.value)
            return False

        collection = self._collection.with_lists({
            source: tuple(t for t in current if t.id != task_id),
            target: self._collection.get(target) + (task,),
        })
        self._commit(collection)

        logger.debug("Moved task %s from %s to %s", task_id, source.value, target.value)
        return True


def resolve_task_id(collection: TaskCollection, prefix: str) -> str:
    """
    Expand a user-typed task ID prefix to a full ID.

    Raises:
        TaskNotFoundError: If no task ID starts with prefix
        AmbiguousTaskIdError: If several task IDs start with prefix
    """
    prefix = (prefix or "").strip()
    if not prefix:
        raise TaskNotFoundError(prefix)

    ids = collection.task_ids()
    if prefix in ids:
        return prefix

    matches = [task_id for task_id in ids if task_id.startswith(prefix)]
    if not matches:
        raise TaskNotFoundError(prefix)
    if len(matches) > 1:
        raise AmbiguousTaskIdError(prefix, matches)
    return matches[0]
