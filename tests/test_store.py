"""
Tests for TaskStore: add/remove/move semantics, invariants, persistence hooks.
"""

import json
from collections import Counter

import pytest

# Path setup handled by conftest.py
from eisenhower.core.constants import CORRUPT_BACKUP_KEY
from eisenhower.core.exceptions import (
    AmbiguousTaskIdError,
    InvalidListError,
    TaskNotFoundError,
)
from eisenhower.core.models import Task, TaskCollection, TaskList
from eisenhower.core.repository import MemoryStorage
from eisenhower.core.store import TaskStore, resolve_task_id


def assert_single_membership(store):
    """Every task ID appears in exactly one list."""
    counts = Counter(store.collection.task_ids())
    assert all(n == 1 for n in counts.values()), counts


@pytest.fixture
def store():
    return TaskStore()


def test_add_task_lands_in_inbox(store):
    """Start empty, add one task: it's the only thing in the inbox."""
    task = store.add_task("Write report")

    assert store.collection.inbox == (Task(task.id, "Write report"),)
    for task_list in TaskList:
        if task_list.is_quadrant:
            assert store.tasks(task_list) == ()

    print("✓ add_task works")


def test_move_from_inbox_to_quadrant(store):
    task = store.add_task("Write report")

    assert store.move_task(task.id, "inbox", "urgentImportant") is True

    assert store.collection.inbox == ()
    assert store.collection.urgent_important == (Task(task.id, "Write report"),)
    assert_single_membership(store)


def test_blank_content_is_ignored(store):
    store.add_task("Keep me")
    before = store.snapshot()

    assert store.add_task("   ") is None
    assert store.add_task("") is None
    assert store.snapshot() == before


def test_add_keeps_content_as_typed(store):
    task = store.add_task("  Call the bank ")

    assert task.content == "  Call the bank "
    assert store.collection.inbox == (task,)


def test_move_of_unknown_id_is_a_noop(store):
    store.add_task("Something")
    before = store.collection

    assert store.move_task("nonexistent-id", "inbox", "urgentImportant") is False
    assert store.collection is before


def test_reload_preserves_quadrant_contents():
    storage = MemoryStorage()
    store = TaskStore.open(storage)
    for content in ("Answer email", "Book travel"):
        task = store.add_task(content)
        store.move_task(task.id, TaskList.INBOX, TaskList.URGENT_NOT_IMPORTANT)

    reloaded = TaskStore.open(MemoryStorage(storage.value))

    assert reloaded.collection == store.collection
    assert [t.content for t in reloaded.collection.urgent_not_important] == ["Answer email", "Book travel"]


def test_self_move_leaves_snapshot_byte_identical(store):
    task = store.add_task("Stay put")
    before = store.snapshot()

    assert store.move_task(task.id, TaskList.INBOX, "inbox") is False
    assert store.snapshot() == before


def test_move_changes_only_the_two_lists(store):
    a = store.add_task("A")
    b = store.add_task("B")
    c = store.add_task("C")
    store.move_task(c.id, "inbox", "schedule")
    before = store.collection

    store.move_task(a.id, "inbox", "delegate")

    after = store.collection
    assert [t.id for t in after.inbox] == [b.id]
    assert after.urgent_not_important == (a,)
    assert after.important_not_urgent == before.important_not_urgent
    assert after.urgent_important == before.urgent_important
    assert after.not_urgent_not_important == before.not_urgent_not_important
    assert_single_membership(store)


def test_move_appends_to_end_of_target(store):
    first = store.add_task("first")
    second = store.add_task("second")
    store.move_task(first.id, "inbox", "do")
    store.move_task(second.id, "inbox", "do")

    assert [t.id for t in store.tasks("do")] == [first.id, second.id]


def test_move_from_wrong_source_is_a_noop(store):
    task = store.add_task("In inbox")
    before = store.collection

    assert store.move_task(task.id, "schedule", "do") is False
    assert store.collection is before


def test_move_with_unknown_list_raises_before_changing_anything(store):
    task = store.add_task("x")
    before = store.collection

    with pytest.raises(InvalidListError):
        store.move_task(task.id, "inbox", "someday")
    assert store.collection is before


def test_remove_is_idempotent(store):
    keep = store.add_task("keep")
    drop = store.add_task("drop")

    assert store.remove_task(drop.id, "inbox") is True
    once = store.snapshot()
    assert store.remove_task(drop.id, "inbox") is False
    assert store.snapshot() == once
    assert store.collection.inbox == (keep,)


def test_remove_only_looks_in_named_list(store):
    task = store.add_task("x")
    store.move_task(task.id, "inbox", "eliminate")

    assert store.remove_task(task.id, "inbox") is False
    assert store.find_task(task.id) == (TaskList.NOT_URGENT_NOT_IMPORTANT, task)


def test_delete_task_finds_the_list(store):
    task = store.add_task("x")
    store.move_task(task.id, "inbox", "schedule")

    assert store.delete_task(task.id) is True
    assert store.find_task(task.id) is None
    assert store.delete_task(task.id) is False


def test_random_operations_keep_single_membership(store):
    lists = list(TaskList)
    ids = [store.add_task(f"task {n}").id for n in range(8)]

    for step in range(60):
        task_id = ids[step % len(ids)]
        source = lists[step % 5]
        target = lists[(step * 3 + 1) % 5]
        store.move_task(task_id, source, target)
        if step % 7 == 0:
            found = store.find_task(task_id)
            if found:
                current, _ = found
                store.move_task(task_id, current, target)
        assert_single_membership(store)

    assert sorted(store.collection.task_ids()) == sorted(ids)


def test_subscribers_see_each_new_collection(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)

    task = store.add_task("x")
    store.move_task(task.id, "inbox", "do")
    store.move_task(task.id, "do", "do")  # no-op, no notification
    unsubscribe()
    store.delete_task(task.id)

    assert len(seen) == 2
    assert seen[-1].urgent_important == (task,)


def test_failing_listener_does_not_undo_the_mutation(store, caplog):
    def broken(collection):
        raise RuntimeError("boom")

    store.subscribe(broken)
    task = store.add_task("still added")

    assert store.find_task(task.id) is not None
    assert "listener" in caplog.text


def test_open_saves_after_every_mutation():
    storage = MemoryStorage()
    store = TaskStore.open(storage)

    task = store.add_task("x")
    store.move_task(task.id, "inbox", "do")
    store.remove_task(task.id, "do")

    assert storage.save_count == 3
    assert storage.value == TaskCollection.empty().to_json()


def test_close_writes_final_snapshot():
    storage = MemoryStorage()
    store = TaskStore.open(storage)
    store.add_task("x")

    store.close()

    assert storage.save_count == 2
    assert storage.value == store.snapshot()
    TaskStore().close()  # no storage, nothing to do


def test_initialize_with_nothing_returns_empty(store):
    assert store.initialize(None) == TaskCollection.empty()
    assert store.initialize("  ") == TaskCollection.empty()
    assert store.load_error is None


def test_corrupt_snapshot_resets_to_empty_and_is_backed_up(caplog):
    storage = MemoryStorage("{not json")

    store = TaskStore.open(storage)

    assert store.collection == TaskCollection.empty()
    assert store.load_error is not None
    assert storage.backups == {CORRUPT_BACKUP_KEY: "{not json"}
    assert "Resetting to empty" in caplog.text

    # Saving over the corrupt blob is fine now that it's backed up
    store.add_task("fresh start")
    assert json.loads(storage.value)["inbox"][0]["content"] == "fresh start"


def test_resolve_task_id_prefixes():
    collection = TaskCollection.empty().with_lists({
        TaskList.INBOX: [Task("abc123", "a"), Task("abd456", "b")],
        TaskList.URGENT_IMPORTANT: [Task("ff0000", "c")],
    })

    assert resolve_task_id(collection, "abc") == "abc123"
    assert resolve_task_id(collection, "ff0000") == "ff0000"
    assert resolve_task_id(collection, " f ") == "ff0000"

    with pytest.raises(AmbiguousTaskIdError) as exc_info:
        resolve_task_id(collection, "ab")
    assert sorted(exc_info.value.matches) == ["abc123", "abd456"]

    with pytest.raises(TaskNotFoundError):
        resolve_task_id(collection, "zzz")
    with pytest.raises(TaskNotFoundError):
        resolve_task_id(collection, "")


def test_snapshot_with_both_inbox_keys_is_backed_up():
    raw = json.dumps({
        "inbox": [{"id": "a", "content": "new"}],
        "taskBank": [{"id": "b", "content": "legacy"}],
    })
    storage = MemoryStorage(raw)

    store = TaskStore.open(storage)

    assert store.load_error is not None
    assert store.collection == TaskCollection.empty()
    assert storage.backups == {CORRUPT_BACKUP_KEY: raw}
