"""
Tests for SQLite blob persistence and opening the persisted TaskStore.
"""

import pytest

# Path setup handled by conftest.py
from eisenhower.core import repository
from eisenhower.core.constants import CORRUPT_BACKUP_KEY, STORAGE_KEY
from eisenhower.core.models import TaskList


@pytest.fixture(autouse=True)
def temp_db(monkeypatch, tmp_path):
    """Use temporary database for all tests."""
    db_path = tmp_path / "test_eisenhower.db"
    monkeypatch.setattr(repository, "DB_PATH", db_path)
    monkeypatch.setattr(repository, "DB_DIR", tmp_path)
    yield db_path


def test_blob_save_load_delete(temp_db):
    assert repository.load_blob("missing") is None

    repository.save_blob("k", "one")
    repository.save_blob("k", "two")
    assert repository.load_blob("k") == "two"
    assert repository.list_keys() == ["k"]

    repository.delete_blob("k")
    assert repository.load_blob("k") is None
    assert temp_db.exists()

    print("✓ Blob storage works")


def test_store_persists_across_opens():
    store = repository.open_task_store()
    task = store.add_task("Persist me")
    store.move_task(task.id, "inbox", "schedule")

    reopened = repository.open_task_store()

    assert reopened.find_task(task.id) == (TaskList.IMPORTANT_NOT_URGENT, task)
    assert repository.list_keys() == [STORAGE_KEY]


def test_corrupt_blob_is_backed_up_and_board_starts_empty():
    repository.save_blob(STORAGE_KEY, "{definitely not json")

    store = repository.open_task_store()

    assert len(store.collection) == 0
    assert store.load_error is not None
    assert repository.load_blob(CORRUPT_BACKUP_KEY) == "{definitely not json"
    # The corrupt value stays in place until the next mutation
    assert repository.load_blob(STORAGE_KEY) == "{definitely not json"


def test_separate_keys_are_separate_boards():
    work = repository.open_task_store("work")
    home = repository.open_task_store("home")

    work.add_task("Ship it")

    assert len(repository.open_task_store("work").collection) == 1
    assert len(home.collection) == 0
