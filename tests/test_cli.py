"""
Tests for the one-shot CLI commands (typer app).
"""

import json

import pytest
from typer.testing import CliRunner

# Path setup handled by conftest.py
from eisenhower import __version__
from eisenhower.cli.main import app
from eisenhower.core import repository
from eisenhower.core.constants import STORAGE_KEY
from eisenhower.core.models import TaskList

runner = CliRunner()


@pytest.fixture(autouse=True)
def temp_db(monkeypatch, tmp_path):
    """Use temporary database for all tests."""
    db_path = tmp_path / "test_eisenhower.db"
    monkeypatch.setattr(repository, "DB_PATH", db_path)
    monkeypatch.setattr(repository, "DB_DIR", tmp_path)
    yield db_path


def add(content):
    result = runner.invoke(app, ["add", content, "--raw"])
    assert result.exit_code == 0, result.output
    return result.stdout.strip()


def where(task_id):
    found = repository.open_task_store().find_task(task_id)
    return found[0] if found else None


def test_add_puts_task_in_inbox():
    result = runner.invoke(app, ["add", "Write report"])

    assert result.exit_code == 0
    assert "Added" in result.output
    store = repository.open_task_store()
    assert [t.content for t in store.collection.inbox] == ["Write report"]

    print("✓ add command works")


def test_add_json_output():
    result = runner.invoke(app, ["add", "As JSON", "--json"])

    data = json.loads(result.stdout)
    assert data["content"] == "As JSON"
    assert where(data["id"]) is TaskList.INBOX


def test_add_blank_is_a_noop():
    result = runner.invoke(app, ["add", "   "])

    assert result.exit_code == 0
    assert "blank" in result.output
    assert repository.load_blob(STORAGE_KEY) is None


def test_mv_with_short_id_and_action_name():
    task_id = add("Triage me")

    result = runner.invoke(app, ["mv", task_id[:8], "do"])

    assert result.exit_code == 0, result.output
    assert "Moved" in result.output
    assert where(task_id) is TaskList.URGENT_IMPORTANT


def test_mv_raw_output():
    task_id = add("Raw move")

    result = runner.invoke(app, ["mv", task_id, "schedule", "--raw"])

    assert result.stdout.strip() == f"{task_id}: inbox -> importantNotUrgent"


def test_mv_from_wrong_source_changes_nothing():
    task_id = add("Stay in inbox")

    result = runner.invoke(app, ["mv", task_id, "do", "--from", "delegate"])

    assert result.exit_code == 0
    assert "nothing moved" in result.output
    assert where(task_id) is TaskList.INBOX


def test_mv_to_same_list():
    task_id = add("Already here")

    result = runner.invoke(app, ["mv", task_id, "inbox"])

    assert result.exit_code == 0
    assert "already in" in result.output


def test_mv_unknown_list_exits_with_error():
    task_id = add("x")

    result = runner.invoke(app, ["mv", task_id, "someday"])

    assert result.exit_code == 1
    assert "Unknown list" in result.output
    assert where(task_id) is TaskList.INBOX


def test_mv_unknown_task_is_not_an_error():
    result = runner.invoke(app, ["mv", "doesnotexist", "do"])

    assert result.exit_code == 0
    assert "not found" in result.output


def test_done_removes_several_tasks():
    first = add("one")
    second = add("two")
    keep = add("three")
    runner.invoke(app, ["mv", second, "eliminate"])

    result = runner.invoke(app, ["done", f"{first},{second}"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Done") == 2
    assert where(first) is None
    assert where(second) is None
    assert where(keep) is TaskList.INBOX


def test_rm_only_from_named_list():
    task_id = add("Remove me")

    result = runner.invoke(app, ["rm", task_id, "do"])
    assert "nothing removed" in result.output
    assert where(task_id) is TaskList.INBOX

    result = runner.invoke(app, ["rm", task_id, "inbox"])
    assert "Removed" in result.output
    assert where(task_id) is None


def test_board_json_is_the_snapshot():
    task_id = add("On the board")

    result = runner.invoke(app, ["board", "--json"])

    data = json.loads(result.stdout)
    assert data["version"] == 1
    assert data["inbox"] == [{"id": task_id, "content": "On the board"}]
    assert data["urgentImportant"] == []


def test_board_renders_all_quadrants():
    add("Visible task")

    result = runner.invoke(app, ["board"])

    assert result.exit_code == 0
    for title in ("Task Inbox", "Do First", "Schedule", "Delegate", "Eliminate"):
        assert title in result.output
    assert "Total: 1 task(s)" in result.output


def test_ls_one_list_as_raw():
    task_id = add("[bold]not markup[/bold]")
    runner.invoke(app, ["mv", task_id, "delegate"])

    result = runner.invoke(app, ["ls", "delegate", "--raw"])

    assert result.stdout.strip() == f"{task_id}\t[bold]not markup[/bold]"


def test_ls_unknown_list():
    result = runner.invoke(app, ["ls", "tomorrow"])

    assert result.exit_code == 1
    assert "Unknown list" in result.output


def test_lists_and_version():
    result = runner.invoke(app, ["lists"])
    assert "urgentImportant" in result.output
    assert "eliminate" in result.output

    result = runner.invoke(app, ["version"])
    assert f"Eisenhower v{__version__}" in result.output


def test_corrupt_snapshot_warns_and_continues():
    repository.save_blob(STORAGE_KEY, "<<corrupt>>")

    result = runner.invoke(app, ["board", "--json"])

    assert result.exit_code == 0
    assert "Warning" in result.output
