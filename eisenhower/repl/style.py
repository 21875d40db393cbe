"""
FILE: eisenhower/repl/style.py
PURPOSE: Short feedback flourishes for REPL actions
EXPORTS:
  - celebrate_add() -> str
  - celebrate_done() -> str
  - celebrate_move(task_list) -> str
  - celebrate_bulk(count: int, action: str) -> str
DEPENDENCIES:
  - random (for variety)
  - eisenhower.core.models (TaskList)
NOTES:
  - Subtle, one line; the board itself is the real feedback
"""

import random

from ..core.models import TaskList

ADD_CELEBRATIONS = [
    "+ *captured* +",
    "✓ *noted* ✓",
    "○ *inboxed* ○",
]

DONE_CELEBRATIONS = [
    "✨ *done* ✨",
    "✓ *checked* ✓",
    "★ *cleared* ★",
]

# Per-quadrant drop flourishes
MOVE_ANIMATIONS = {
    TaskList.INBOX: ["↩ *back to the pile* ↩"],
    TaskList.URGENT_IMPORTANT: ["⚡ *on it* ⚡", "🔥 *do it now* 🔥"],
    TaskList.IMPORTANT_NOT_URGENT: ["📅 *scheduled* 📅", "→ *later, properly* →"],
    TaskList.URGENT_NOT_IMPORTANT: ["🤝 *handed off* 🤝", "➜ *delegated* ➜"],
    TaskList.NOT_URGENT_NOT_IMPORTANT: ["🗑 *let it go* 🗑", "∅ *eliminated* ∅"],
}


def celebrate_add() -> str:
    """Return a random flourish for adding a task."""
    return random.choice(ADD_CELEBRATIONS)


def celebrate_done() -> str:
    """Return a random flourish for checking off a task."""
    return random.choice(DONE_CELEBRATIONS)


def celebrate_move(task_list: TaskList) -> str:
    """
    Return a flourish for dropping a task on task_list.

    Example:
        "📅 *scheduled* 📅"
    """
    return random.choice(MOVE_ANIMATIONS[task_list])


def celebrate_bulk(count: int, action: str) -> str:
    """
    Return a message for bulk operations.

    Example:
        "★ *cleared* ★ Completed 3 tasks!"
    """
    return f"{celebrate_done()} {action.capitalize()} {count} tasks!"
