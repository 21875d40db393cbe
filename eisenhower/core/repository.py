"""
FILE: eisenhower/core/repository.py
PURPOSE: Key-value blob persistence and SQLite connection management
EXPORTS:
  - get_connection() -> Connection
  - init_database(conn) -> None
  - load_blob(key) -> str | None
  - save_blob(key, value) -> None
  - delete_blob(key) -> None
  - list_keys() -> List[str]
  - SqliteStorage (load/save bound to one key)
  - MemoryStorage (in-process load/save for embedding and tests)
  - open_task_store(key) -> TaskStore
DEPENDENCIES:
  - sqlite3 (stdlib)
  - pathlib (stdlib)
  - datetime (stdlib)
  - eisenhower.core.constants (STORAGE_KEY)
  - eisenhower.core.store (TaskStore)
NOTES:
  - Database stored at ~/.eisenhower/eisenhower.db
  - Auto-creates directory and schema on first connection
  - Stores opaque strings; the snapshot format belongs to core/models.py
  - DB_DIR / DB_PATH are read at call time so tests can monkeypatch them
"""

import logging
import sqlite3
from pathlib import Path
from datetime import datetime
from typing import List, Optional

from .constants import STORAGE_KEY
from .store import TaskStore

logger = logging.getLogger(__name__)


# Database file location (cross-platform)
DB_DIR = Path.home() / ".eisenhower"
DB_PATH = DB_DIR / "eisenhower.db"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def get_connection() -> sqlite3.Connection:
    """
    Get SQLite connection to the Eisenhower database.

    Creates ~/.eisenhower directory if it doesn't exist.
    Enables row_factory for dict-like row access.
    Initializes database schema on first connection.
    """
    DB_DIR.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row

    init_database(conn)

    return conn


def init_database(conn: sqlite3.Connection) -> None:
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    """
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def load_blob(key: str = STORAGE_KEY) -> Optional[str]:
    """
    Fetch the value stored under key.

    Returns:
        Stored string if present, None otherwise
    """
    conn = get_connection()
    try:
        row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
    finally:
        conn.close()

    return row["value"] if row else None


def save_blob(key: str, value: str) -> None:
    """
    Store value under key, replacing any previous value.

    Note:
        Sets updated_at automatically.
    """
    conn = get_connection()
    now = datetime.now().isoformat()
    try:
        conn.execute(
            """
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (key, value, now),
        )
        conn.commit()
    finally:
        conn.close()

    logger.debug("Saved %d bytes under %s", len(value), key)


def delete_blob(key: str) -> None:
    """Delete the value stored under key. Missing keys are ignored."""
    conn = get_connection()
    try:
        conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        conn.commit()
    finally:
        conn.close()


def list_keys() -> List[str]:
    """List all stored keys, sorted."""
    conn = get_connection()
    try:
        rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
    finally:
        conn.close()

    return [row["key"] for row in rows]


class SqliteStorage:
    """
    Load/save capability bound to a single key in the SQLite store.

    This is what TaskStore.open() consumes in the CLI and REPL.
    """

    def __init__(self, key: str = STORAGE_KEY):
        self.key = key

    def load(self) -> Optional[str]:
        return load_blob(self.key)

    def save(self, serialized: str) -> None:
        save_blob(self.key, serialized)

    def backup(self, key: str, serialized: str) -> None:
        """Store a copy of serialized under a different key."""
        save_blob(key, serialized)


class MemoryStorage:
    """In-process storage with the same interface as SqliteStorage."""

    def __init__(self, initial: Optional[str] = None):
        self.value = initial
        self.backups = {}
        self.save_count = 0

    def load(self) -> Optional[str]:
        return self.value

    def save(self, serialized: str) -> None:
        self.value = serialized
        self.save_count += 1

    def backup(self, key: str, serialized: str) -> None:
        self.backups[key] = serialized


def open_task_store(key: str = STORAGE_KEY) -> TaskStore:
    """
    Open the TaskStore persisted in the SQLite database.

    Returns:
        TaskStore that saves to `key` after every mutation
    """
    return TaskStore.open(SqliteStorage(key))
