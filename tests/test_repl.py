"""
Tests for REPL command handling, the drag gesture across commands, and
the default entry point.
"""

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Path setup handled by conftest.py
from eisenhower.core.models import TaskList
from eisenhower.core.store import TaskStore
from eisenhower.formatting import short_id
from eisenhower.repl.main import REPLContext, execute_command, format_prompt
from eisenhower.repl.parser import parse_command


@pytest.fixture
def ctx():
    console = Console(file=io.StringIO(), width=120, force_terminal=False)
    return REPLContext(store=TaskStore(), console=console)


def run(ctx, line):
    """Run one REPL line and return what it printed."""
    ctx.console.file.seek(0)
    ctx.console.file.truncate()
    keep_going = execute_command(parse_command(line), ctx)
    assert keep_going
    return ctx.console.file.getvalue()


def add(ctx, content):
    run(ctx, f'add "{content}"')
    return ctx.store.collection.inbox[-1].id


def test_add_and_board(ctx):
    output = run(ctx, "add Write report")
    assert "Added to inbox" in output

    output = run(ctx, "board")
    assert "Write report" in output
    assert "Do First" in output
    assert "Total: 1 task(s)" in output

    print("✓ REPL add/board works")


def test_drag_then_drop(ctx):
    task_id = add(ctx, "Plan sprint")

    output = run(ctx, f"drag {short_id(task_id)}")
    assert "Picked up" in output
    assert ctx.session.is_dragging
    assert ctx.get_prompt() == f"eisenhower:[dragging {short_id(task_id)}]> "

    output = run(ctx, "drop schedule")
    assert "Dropped" in output
    assert not ctx.session.is_dragging
    assert ctx.get_prompt() == "eisenhower> "
    assert ctx.store.find_task(task_id)[0] is TaskList.IMPORTANT_NOT_URGENT


def test_drop_without_drag(ctx):
    add(ctx, "x")

    output = run(ctx, "drop do")

    assert "Nothing is being dragged" in output
    assert ctx.store.collection.urgent_important == ()


def test_drop_back_on_source(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")

    output = run(ctx, "drop inbox")

    assert "nothing moved" in output
    assert not ctx.session.is_dragging


def test_drop_with_bad_list_keeps_dragging(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")

    output = run(ctx, "drop someday")

    assert "Unknown list" in output
    assert ctx.session.is_dragging


def test_cancel_puts_task_back(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")

    output = run(ctx, "cancel")

    assert "Put" in output
    assert not ctx.session.is_dragging
    assert ctx.store.find_task(task_id)[0] is TaskList.INBOX
    assert "Nothing to cancel" in run(ctx, "cancel")


def test_stale_drop_after_task_moved(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")
    ctx.store.move_task(task_id, "inbox", "eliminate")

    output = run(ctx, "drop do")

    assert "no longer in" in output
    assert ctx.store.find_task(task_id)[0] is TaskList.NOT_URGENT_NOT_IMPORTANT


def test_mv_does_not_disturb_active_drag(ctx):
    dragged = add(ctx, "dragged")
    moved = add(ctx, "moved")
    run(ctx, f"drag {dragged}")

    output = run(ctx, f"mv {moved} delegate")

    assert "Moved" in output
    assert ctx.store.find_task(moved)[0] is TaskList.URGENT_NOT_IMPORTANT
    assert ctx.dragging_id == dragged


def test_mv_with_from_flag(ctx):
    task_id = add(ctx, "x")

    output = run(ctx, f"mv {task_id} do --from schedule")

    assert "nothing moved" in output
    assert ctx.store.find_task(task_id)[0] is TaskList.INBOX


def test_done_cancels_drag_of_that_task(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")

    output = run(ctx, f"done {task_id}")

    assert "Done" in output
    assert ctx.store.find_task(task_id) is None
    assert not ctx.session.is_dragging


def test_done_with_picker(ctx, monkeypatch):
    first = add(ctx, "first")
    second = add(ctx, "second")
    monkeypatch.setattr("builtins.input", lambda prompt="": "1,2")

    output = run(ctx, "done")

    assert "Check off tasks" in output
    assert ctx.store.find_task(first) is None
    assert ctx.store.find_task(second) is None
    assert "Completed 2 tasks" in output


def test_drag_with_picker_and_drop_with_picker(ctx, monkeypatch):
    task_id = add(ctx, "picked")
    answers = iter(["1", "1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    run(ctx, "drag")
    assert ctx.dragging_id == task_id

    # Inbox is excluded from the drop picker, so 1 is the first quadrant
    run(ctx, "drop")
    assert ctx.store.find_task(task_id)[0] is TaskList.URGENT_IMPORTANT


def test_picker_cancelled_with_enter(ctx, monkeypatch):
    task_id = add(ctx, "x")
    monkeypatch.setattr("builtins.input", lambda prompt="": "")

    run(ctx, "done")

    assert ctx.store.find_task(task_id) is not None


def test_rm_and_errors(ctx):
    task_id = add(ctx, "x")

    assert "Usage" in run(ctx, "rm")
    assert "not in" in run(ctx, f"rm {task_id} do")
    assert "Removed" in run(ctx, f"rm {task_id} inbox")
    assert "not found" in run(ctx, f"rm {task_id} inbox")


def test_rm_of_dragged_task_ends_the_drag(ctx):
    task_id = add(ctx, "x")
    run(ctx, f"drag {task_id}")

    output = run(ctx, f"rm {task_id} inbox")

    assert "Removed" in output
    assert not ctx.session.is_dragging
    assert ctx.get_prompt() == "eisenhower> "


def test_rm_of_other_task_keeps_the_drag(ctx):
    dragged = add(ctx, "dragged")
    other = add(ctx, "other")
    run(ctx, f"drag {dragged}")

    run(ctx, f"rm {other} inbox")

    assert ctx.dragging_id == dragged


def test_ls_one_list_and_lists(ctx):
    add(ctx, "in the inbox")

    output = run(ctx, "ls inbox")
    assert "Task Inbox" in output
    assert "in the inbox" in output

    output = run(ctx, "lists")
    assert "urgentImportant" in output


def test_unknown_command_and_exit(ctx):
    assert "Unknown command" in run(ctx, "frobnicate")
    assert execute_command(parse_command("exit"), ctx) is False


def test_format_prompt_shows_drag(ctx):
    task_id = add(ctx, "x")
    assert "dragging" not in format_prompt(ctx).value

    ctx.session.begin_drag(task_id, "inbox")
    assert short_id(task_id) in format_prompt(ctx).value


def test_default_launches_repl(tmp_path):
    """Running with no command starts the REPL; piped input works without a TTY."""
    project_root = Path(__file__).parent.parent
    env = dict(os.environ, HOME=str(tmp_path), USERPROFILE=str(tmp_path))

    result = subprocess.run(
        [sys.executable, "-m", "eisenhower"],
        input="add Piped task\nboard\nexit\n",
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        cwd=str(project_root),
        env=env,
    )

    assert "Eisenhower REPL" in result.stdout, f"Expected REPL welcome message, got: {result.stdout}"
    assert "Piped task" in result.stdout
    assert "Goodbye!" in result.stdout
    assert result.returncode == 0
    assert (tmp_path / ".eisenhower" / "eisenhower.db").exists()
    assert (tmp_path / ".eisenhower" / "eisenhower.log").exists()
