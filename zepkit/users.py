"""Storage of users, with their sessions removed when they are deleted."""

from __future__ import annotations

import dataclasses
import json
import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from zepkit.database import Database, merge_metadata
from zepkit.models import (
    BadRequestError,
    CreateUserRequest,
    NotFoundError,
    Session,
    StorageError,
    UpdateUserRequest,
    User,
    UserListResponse,
)
from zepkit.sessions import SessionStore

_COLUMNS = (
    "id, uuid, created_at, updated_at, deleted_at, user_id,"
    " email, first_name, last_name, metadata"
)
_SESSION_COLUMNS = (
    "s.id, s.uuid, s.created_at, s.updated_at, s.deleted_at,"
    " s.session_id, s.user_id, s.metadata"
)
_ORDERABLE = frozenset(
    {
        "id",
        "uuid",
        "created_at",
        "updated_at",
        "user_id",
        "email",
        "first_name",
        "last_name",
    }
)
_SYSTEM_KEY = "system"


def _dump(metadata: dict[str, Any] | None) -> str | None:
    return None if metadata is None else json.dumps(metadata)


def _load(text: str | None) -> dict[str, Any] | None:
    return None if text is None else json.loads(text)


def _when(text: str | None) -> datetime | None:
    return None if text is None else datetime.fromisoformat(text)


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        uuid=UUID(row["uuid"]),
        id=row["id"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
        user_id=row["user_id"],
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        metadata=_load(row["metadata"]),
        deleted_at=_when(row["deleted_at"]),
    )


def _row_to_session(row: sqlite3.Row) -> Session:
    return Session(
        uuid=UUID(row["uuid"]),
        id=row["id"],
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
        session_id=row["session_id"],
        metadata=_load(row["metadata"]),
        user_id=row["user_id"],
        deleted_at=_when(row["deleted_at"]),
    )


class UserStore:
    """Creates, reads, updates, soft-deletes and lists users."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, request: CreateUserRequest) -> User:
        """Create a user; its user id must be new."""
        now = self._db._timestamp()
        try:
            with self._db.transaction() as conn:
                conn.execute(
                    "INSERT INTO users (uuid, created_at, updated_at, user_id,"
                    " email, first_name, last_name, metadata)"
                    " VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        str(uuid4()),
                        now,
                        now,
                        request.user_id,
                        request.email,
                        request.first_name,
                        request.last_name,
                        _dump(request.metadata),
                    ),
                )
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM users WHERE user_id = ?",
                    (request.user_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            raise BadRequestError(
                f"user already exists with user_id: {request.user_id}"
            ) from exc
        except sqlite3.Error as exc:
            raise StorageError("failed to create user", exc) from exc
        return _row_to_user(row)

    def get(self, user_id: str) -> User:
        """Return the live user with ``user_id``."""
        try:
            with self._db.transaction() as conn:
                row = conn.execute(
                    f"SELECT {_COLUMNS} FROM users"
                    " WHERE user_id = ? AND deleted_at IS NULL",
                    (user_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError("failed to get user", exc) from exc
        if row is None:
            raise NotFoundError(f"user {user_id}")
        return _row_to_user(row)

    def update(self, request: UpdateUserRequest, is_privileged: bool) -> User:
        """Update a user's non-empty fields and merge in new metadata.

        Empty strings and missing metadata leave the stored values as they are.
        Callers that are not privileged cannot set the reserved "system" key.
        """
        if not request.user_id:
            raise ValueError("UserID cannot be empty")
        if request.metadata is None:
            return self._update_user(request)

        update = dict(request.metadata)
        if not is_privileged:
            update.pop(_SYSTEM_KEY, None)

        with self._db.advisory_lock(request.user_id):
            try:
                with self._db.transaction() as conn:
                    row = conn.execute(
                        "SELECT metadata FROM users WHERE user_id = ?",
                        (request.user_id,),
                    ).fetchone()
                    existing = _load(row["metadata"]) if row is not None else None
                    merged = merge_metadata(existing, update)
                    return self._update_user(
                        dataclasses.replace(request, metadata=merged)
                    )
            except sqlite3.Error as exc:
                raise StorageError("failed to merge metadata", exc) from exc

    def _update_user(self, request: UpdateUserRequest) -> User:
        assignments = ["updated_at = ?"]
        params: list[Any] = [self._db._timestamp()]
        for column, value in (
            ("email", request.email),
            ("first_name", request.first_name),
            ("last_name", request.last_name),
        ):
            if value:
                assignments.append(f"{column} = ?")
                params.append(value)
        if request.metadata is not None:
            assignments.append("metadata = ?")
            params.append(_dump(request.metadata))
        params.append(request.user_id)
        try:
            with self._db.transaction() as conn:
                cursor = conn.execute(
                    f"UPDATE users SET {', '.join(assignments)}"
                    " WHERE user_id = ? AND deleted_at IS NULL",
                    params,
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(f"user {request.user_id}")
        except sqlite3.Error as exc:
            raise StorageError("failed to update user", exc) from exc
        return self.get(request.user_id)

    def delete(self, user_id: str) -> None:
        """Soft-delete a user together with all of the user's sessions."""
        sessions = SessionStore(self._db)
        now = self._db._timestamp()
        try:
            with self._db.transaction() as conn:
                for session in self.get_sessions(user_id):
                    sessions.delete(session.session_id)
                cursor = conn.execute(
                    "UPDATE users SET deleted_at = ?"
                    " WHERE user_id = ? AND deleted_at IS NULL",
                    (now, user_id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(f"user {user_id}")
        except sqlite3.Error as exc:
            raise StorageError("failed to delete user", exc) from exc

    def list_all(self, cursor: int, limit: int) -> list[User]:
        """Live users with an id above ``cursor``, by id; ``limit`` <= 0 means all."""
        try:
            with self._db.transaction() as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM users"
                    " WHERE id > ? AND deleted_at IS NULL ORDER BY id ASC LIMIT ?",
                    (cursor, limit if limit > 0 else -1),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError("failed to list users", exc) from exc
        return [_row_to_user(row) for row in rows]

    def list_all_ordered(
        self, page_number: int, page_size: int, order_by: str, asc: bool
    ) -> UserListResponse:
        """One page of live users sorted by ``order_by`` (default ``id``)."""
        order_by = order_by or "id"
        if order_by not in _ORDERABLE:
            raise ValueError(f"cannot order users by {order_by!r}")
        direction = "ASC" if asc else "DESC"
        offset = max(0, (page_number - 1) * page_size)
        try:
            with self._db.transaction() as conn:
                rows = conn.execute(
                    f"SELECT {_COLUMNS} FROM users WHERE deleted_at IS NULL"
                    f" ORDER BY {order_by} {direction} LIMIT ? OFFSET ?",
                    (page_size if page_size > 0 else -1, offset),
                ).fetchall()
                total = conn.execute(
                    "SELECT COUNT(*) FROM users WHERE deleted_at IS NULL"
                ).fetchone()[0]
        except sqlite3.Error as exc:
            raise StorageError("failed to list users", exc) from exc
        users = [_row_to_user(row) for row in rows]
        return UserListResponse(users=users, total_count=total, row_count=len(users))

    def get_sessions(self, user_id: str) -> list[Session]:
        """The live sessions belonging to ``user_id``."""
        try:
            with self._db.transaction() as conn:
                rows = conn.execute(
                    f"SELECT {_SESSION_COLUMNS} FROM sessions s"
                    " JOIN users u ON u.user_id = s.user_id"
                    " WHERE u.user_id = ? AND s.deleted_at IS NULL"
                    " ORDER BY s.id ASC",
                    (user_id,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageError("failed to get sessions", exc) from exc
        return [_row_to_session(row) for row in rows]