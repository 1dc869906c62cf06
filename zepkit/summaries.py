"""Storage of conversation summaries."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from uuid import UUID, uuid4

from zepkit.database import Database
from zepkit.models import StorageError, Summary, SummaryListResponse

_COLUMNS = "uuid, created_at, content, summary_point_uuid, metadata, token_count"


def _row_to_summary(row: sqlite3.Row) -> Summary:
    point = row["summary_point_uuid"]
    return Summary(
        content=row["content"],
        metadata=None if row["metadata"] is None else json.loads(row["metadata"]),
        summary_point_uuid=None if point is None else UUID(point),
        uuid=UUID(row["uuid"]),
        created_at=datetime.fromisoformat(row["created_at"]),
        token_count=row["token_count"],
    )


def put_summary(db: Database, session_id: str, summary: Summary) -> Summary:
    """Store a summary for a session and return it as stored."""
    if not session_id:
        raise StorageError("sessionID cannot be empty")
    summary_uuid = summary.uuid or uuid4()
    now = db._timestamp()
    try:
        with db.transaction() as conn:
            conn.execute(
                "INSERT INTO summaries (uuid, created_at, updated_at, session_id,"
                " content, summary_point_uuid, metadata, token_count)"
                " VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    str(summary_uuid),
                    now,
                    now,
                    session_id,
                    summary.content,
                    None
                    if summary.summary_point_uuid is None
                    else str(summary.summary_point_uuid),
                    None if summary.metadata is None else json.dumps(summary.metadata),
                    summary.token_count,
                ),
            )
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM summaries WHERE uuid = ?",
                (str(summary_uuid),),
            ).fetchone()
    except sqlite3.Error as exc:
        raise StorageError("failed to Create summary", exc) from exc
    return _row_to_summary(row)


def get_summary(db: Database, session_id: str) -> Summary | None:
    """Return the most recent live summary of a session, or None."""
    try:
        with db.transaction() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM summaries"
                " WHERE session_id = ? AND deleted_at IS NULL"
                " ORDER BY created_at DESC, rowid DESC LIMIT 1",
                (session_id,),
            ).fetchone()
    except sqlite3.Error as exc:
        raise StorageError("failed to get session", exc) from exc
    return None if row is None else _row_to_summary(row)


def get_summary_list(
    db: Database, session_id: str, current_page: int, page_size: int
) -> SummaryListResponse:
    """Return one page of a session's live summaries, oldest first."""
    if not session_id:
        raise StorageError("sessionID cannot be empty")
    offset = max(0, (current_page - 1) * page_size)
    try:
        with db.transaction() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM summaries"
                " WHERE session_id = ? AND deleted_at IS NULL"
                " ORDER BY created_at ASC, rowid ASC LIMIT ? OFFSET ?",
                (session_id, page_size if page_size > 0 else -1, offset),
            ).fetchall()
    except sqlite3.Error as exc:
        raise StorageError("failed to get sessions", exc) from exc
    summaries = [_row_to_summary(row) for row in rows]
    return SummaryListResponse(summaries=summaries, row_count=len(summaries))