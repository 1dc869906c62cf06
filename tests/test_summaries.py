from uuid import uuid4

import pytest

from zepkit.database import Database
from zepkit.models import CreateSessionRequest, StorageError, Summary
from zepkit.sessions import SessionStore
from zepkit.summaries import get_summary, get_summary_list, put_summary


@pytest.fixture
def db():
    database = Database()
    yield database
    database.close()


def _session(db):
    session_id = uuid4().hex
    SessionStore(db).create(CreateSessionRequest(session_id, metadata={"key": "value"}))
    return session_id


def test_put_valid_summary(db):
    session_id = _session(db)
    point = uuid4()
    summary = Summary(
        content="Test content", metadata={"key": "value"}, summary_point_uuid=point
    )
    result = put_summary(db, session_id, summary)
    assert result.uuid is not None
    assert result.created_at is not None
    assert result.content == summary.content
    assert result.metadata == summary.metadata
    assert result.summary_point_uuid == point


def test_put_summary_empty_session_id(db):
    summary = Summary(content="Test content", metadata={"key": "value"})
    with pytest.raises(StorageError) as info:
        put_summary(db, "", summary)
    assert info.value.message == "sessionID cannot be empty"


def test_get_summary_returns_latest(db):
    session_id = _session(db)
    put_summary(
        db,
        session_id,
        Summary(content="Test content", metadata={"key": "value"}, summary_point_uuid=uuid4()),
    )
    second = put_summary(
        db,
        session_id,
        Summary(content="Test content 2", metadata={"key": "value"}, summary_point_uuid=uuid4()),
    )
    result = get_summary(db, session_id)
    assert result.uuid == second.uuid
    assert result.created_at is not None
    assert result.content == second.content
    assert result.metadata == second.metadata


def test_get_summary_nonexistent_session(db):
    assert get_summary(db, "nonexistent") is None


@pytest.fixture
def nine_summaries(db):
    session_id = uuid4().hex
    for _ in range(9):
        put_summary(
            db,
            session_id,
            Summary(content="Test content", metadata={"key": "value"}, summary_point_uuid=uuid4()),
        )
    return session_id


@pytest.mark.parametrize(
    "existing, page_number, page_size, expected",
    [(True, 1, 5, 5), (True, 2, 5, 4), (False, 1, 10, 0)],
)
def test_get_summary_list(db, nine_summaries, existing, page_number, page_size, expected):
    session_id = nine_summaries if existing else "nonexistent"
    result = get_summary_list(db, session_id, page_number, page_size)
    assert len(result.summaries) == expected
    assert result.row_count == expected


def test_summary_list_is_oldest_first(db, nine_summaries):
    result = get_summary_list(db, nine_summaries, 1, 10)
    times = [s.created_at for s in result.summaries]
    assert times == sorted(times)
    assert len(times) == 9


def test_summary_list_empty_session_id(db):
    with pytest.raises(StorageError) as info:
        get_summary_list(db, "", 1, 10)
    assert info.value.message == "sessionID cannot be empty"


def test_deleted_session_hides_summaries(db):
    session_id = _session(db)
    put_summary(db, session_id, Summary(content="Test content"))
    SessionStore(db).delete(session_id)
    assert get_summary(db, session_id) is None
    assert get_summary_list(db, session_id, 1, 10).row_count == 0