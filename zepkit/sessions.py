"""Storage of chat sessions with soft deletion."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from zepkit.database import MESSAGE_TABLES, Database, merge_metadata
from zepkit.models import (
    BadRequestError,
    CreateSessionRequest,
    NotFoundError,
    Session,
    SessionListResponse,
    StorageError,
    UpdateSessionRequest,
)

_COLUMNS = "id, uuid, created_at, updated_at, deleted_at, session_id, user_id, metadata"
_ORDERABLE = frozenset(
    {"id", "uuid", "created_at", "updated_at", "session_id", "user_id"}
)
_SYSTEM_KEY = "system"


def _dump(metadata: dict[str, Any] | None) -> str | None:
    return None if metadata is None else json.dumps(metadata)


def _row_to_session(row: sqlite3.Row) -> Session:
    return Session(
        uuid=UUID(row["uuid"]),
        id=row["id"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
        session_id=row["session_id"],
        metadata=None if row["metadata"] is None else json.loads(row["metadata"]),
        user_id=row["user_id"],
        deleted_at=(
            None if row["deleted_at"] is None else datetime.fromisoformat(row["deleted_at"])
        ),
    )


class SessionStore:
    """Creates, reads, updates, soft-deletes and lists sessions."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, request: CreateSessionRequest) -> Session:
        """Create a session; its id must be new and its user must exist."""
        if not request.session_id:
            raise ValueError("sessionID cannot be empty")
        now = self._db._timestamp()
        try:
            with self._db.transaction() as conn:
                conn.execute(
                    "INSERT INTO sessions"
                    " (uuid, created_at, updated_at, session_id, user_id, metadata)"
                    " VALUES (?, ?, ?, ?, ?, ?)",
                    (
                        str(uuid4()),
                        now,
                        now,
                        request.session_id,
                        request.user_id,
                        _dump(request.metadata),
                    ),
                )
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM sessions WHERE session_id = ?",
                    (request.session_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            if "FOREIGN KEY" in str(exc).upper():
                raise BadRequestError(
                    f"user does not exist with user_id: {request.user_id}"
                ) from exc
            raise BadRequestError(
                f"session already exists with session_id: {request.session_id}"
            ) from exc
        except sqlite3.Error as exc:
            raise StorageError("failed to create session", exc) from exc
        return _row_to_session(row)

    def get(self, session_id: str) -> Session:
        """Return the live session with ``session_id``."""
        try:
            with self._db.transaction() as conn:
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM sessions"
                    " WHERE session_id = ? AND deleted_at IS NULL",
                    (session_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError("failed to get session", exc) from exc
        if row is None:
            raise NotFoundError(f"session {session_id}")
        return _row_to_session(row)

    def update(self, request: UpdateSessionRequest, is_privileged: bool) -> Session:
        """Merge new metadata into a session and undelete it.

        Messages and summaries of an undeleted session stay deleted. Callers
        that are not privileged cannot set the reserved "system" metadata key.
        """
        if not request.session_id:
            raise ValueError("sessionID cannot be empty")
        if request.metadata is None:
            return self._update_session(request.session_id, None)

        update = dict(request.metadata)
        if not is_privileged:
            update.pop(_SYSTEM_KEY, None)

        with self._db.advisory_lock(request.session_id):
            try:
                with self._db.transaction() as conn:
                    row = conn.execute(
                        "SELECT metadata FROM sessions WHERE session_id = ?",
                        (request.session_id,),
                    ).fetchone()
                    existing = (
                        json.loads(row["metadata"])
                        if row is not None and row["metadata"] is not None
                        else {}
                    )
                    merged = merge_metadata(existing, update)
                    return self._update_session(request.session_id, merged)
            except sqlite3.Error as exc:
                raise StorageError("failed to merge session metadata", exc) from exc

    def _update_session(
        self, session_id: str, metadata: dict[str, Any] | None
    ) -> Session:
        now = self._db._timestamp()
        try:
            with self._db.transaction() as conn:
                if metadata is None:
                    cursor = conn.execute(
                        "UPDATE sessions SET deleted_at = NULL, updated_at = ?"
                        " WHERE session_id = ?",
                        (now, session_id),
                    )
                else:
                    cursor = conn.execute(
                        "UPDATE sessions SET deleted_at = NULL, updated_at = ?,"
                        " metadata = ? WHERE session_id = ?",
                        (now, _dump(metadata), session_id),
                    )
                if cursor.rowcount == 0:
                    raise NotFoundError(f"session {session_id}")
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM sessions WHERE session_id = ?",
                    (session_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError("failed to update session", exc) from exc
        return _row_to_session(row)

    def delete(self, session_id: str) -> None:
        """Soft-delete a session with its messages, embeddings and summaries."""
        now = self._db._timestamp()
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    "UPDATE sessions SET deleted_at = ?"
                    " WHERE session_id = ? AND deleted_at IS NULL",
                    (now, session_id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(f"session {session_id}")
                for table in MESSAGE_TABLES:
                    conn.execute(
                        f"UPDATE {table} SET deleted_at = ?"
                        " WHERE session_id = ? AND deleted_at IS NULL",
                        (now, session_id),
                    )
        except sqlite3.Error as exc:
            raise StorageError("failed to delete session", exc) from exc

    def list_all(self, cursor: int, limit: int) -> list[Session]:
        """Live sessions with an id above ``cursor``, by id; ``limit`` <= 0 means all."""
        try:
            with self._db.transaction() as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM sessions"
                    " WHERE id > ? AND deleted_at IS NULL ORDER BY id ASC LIMIT ?",
                    (cursor, limit if limit > 0 else -1),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError("failed to list sessions", exc) from exc
        return [_row_to_session(row) for row in rows]

    def list_all_ordered(
        self, page_number: int, page_size: int, order_by: str, asc: bool
    ) -> SessionListResponse:
        """One page of live sessions sorted by ``order_by`` (default ``id``)."""
        order_by = order_by or "id"
        if order_by not in _ORDERABLE:
            raise ValueError(f"cannot order sessions by {order_by!r}")
        direction = "ASC" if asc else "DESC"
        offset = max(0, (page_number - 1) * page_size)
        try:
            with self._db.transaction() as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM sessions WHERE deleted_at IS NULL"
                    f" ORDER BY {order_by} {direction} LIMIT ? OFFSET ?",
                    (page_size if page_size > 0 else -1, offset),
                ).fetchall()
                total = conn.execute(
                    "SELECT COUNT(*) FROM sessions WHERE deleted_at IS NULL"
                ).fetchone()[0]
        except sqlite3.Error as exc:
            raise StorageError("failed to list sessions", exc) from exc
        sessions = [_row_to_session(row) for row in rows]
        return SessionListResponse(
            sessions=sessions, total_count=total, row_count=len(sessions)
        )