"""SQLite storage shared by the session, user and summary stores."""

from __future__ import annotations

import copy
import os
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Any, Iterator

# Tables holding per-session records that are soft-deleted with their session.
MESSAGE_TABLES = ("messages", "message_embeddings", "summaries")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid TEXT NOT NULL UNIQUE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT,
    user_id TEXT NOT NULL UNIQUE,
    email TEXT NOT NULL DEFAULT '',
    first_name TEXT NOT NULL DEFAULT '',
    last_name TEXT NOT NULL DEFAULT '',
    metadata TEXT
);
CREATE TABLE IF NOT EXISTS sessions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid TEXT NOT NULL UNIQUE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT,
    session_id TEXT NOT NULL UNIQUE,
    user_id TEXT REFERENCES users(user_id),
    metadata TEXT
);
CREATE TABLE IF NOT EXISTS messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid TEXT NOT NULL UNIQUE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT,
    session_id TEXT NOT NULL,
    role TEXT NOT NULL,
    content TEXT NOT NULL,
    metadata TEXT,
    token_count INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS message_embeddings (
    uuid TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT,
    session_id TEXT NOT NULL,
    message_uuid TEXT NOT NULL,
    embedding TEXT,
    is_embedded INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS summaries (
    uuid TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT,
    session_id TEXT NOT NULL,
    content TEXT NOT NULL,
    summary_point_uuid TEXT,
    metadata TEXT,
    token_count INTEGER NOT NULL DEFAULT 0
);
CREATE INDEX IF NOT EXISTS sessions_user_id_idx ON sessions (user_id);
CREATE INDEX IF NOT EXISTS messages_session_id_idx ON messages (session_id);
CREATE INDEX IF NOT EXISTS message_embeddings_session_id_idx
    ON message_embeddings (session_id);
CREATE INDEX IF NOT EXISTS summaries_session_id_idx ON summaries (session_id);
"""


def merge_metadata(
    existing: dict[str, Any] | None, update: dict[str, Any] | None
) -> dict[str, Any]:
    """Deep-merge ``update`` into a copy of ``existing``; update values win."""
    merged = copy.deepcopy(existing) if existing else {}
    for key, value in (update or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_metadata(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class Database:
    """A SQLite database with nested transactions and per-key advisory locks."""

    def __init__(self, path: str | os.PathLike[str] = ":memory:") -> None:
        self._conn = sqlite3.connect(
            os.fspath(path), check_same_thread=False, isolation_level=None
        )
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._conn.executescript(_SCHEMA)
        self._lock = threading.RLock()
        self._depth = 0
        self._last_timestamp: datetime | None = None
        self._key_locks: dict[str, threading.Lock] = {}
        self._key_locks_guard = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block in a transaction; nested blocks use savepoints.

        Commits when the block ends normally and rolls back when it raises.
        """
        with self._lock:
            conn = self._conn
            level = self._depth
            conn.execute("BEGIN" if level == 0 else f"SAVEPOINT sp{level}")
            self._depth += 1
            try:
                yield conn
            except BaseException:
                self._depth -= 1
                if level == 0:
                    conn.execute("ROLLBACK")
                else:
                    conn.execute(f"ROLLBACK TO sp{level}")
                    conn.execute(f"RELEASE sp{level}")
                raise
            self._depth -= 1
            conn.execute("COMMIT" if level == 0 else f"RELEASE sp{level}")

    @contextmanager
    def advisory_lock(self, key: str) -> Iterator[None]:
        """Hold an exclusive lock named ``key`` for the duration of the block."""
        with self._key_locks_guard:
            lock = self._key_locks.setdefault(key, threading.Lock())
        with lock:
            yield

    def _timestamp(self) -> str:
        """A UTC timestamp, strictly later than any handed out before."""
        with self._lock:
            now = datetime.now(timezone.utc)
            if self._last_timestamp is not None and now <= self._last_timestamp:
                now = self._last_timestamp + timedelta(microseconds=1)
            self._last_timestamp = now
            return now.isoformat(timespec="microseconds")

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()