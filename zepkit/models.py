"""Records, requests, responses and errors of the memory store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


class NotFoundError(LookupError):
    """A requested record does not exist."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")


class BadRequestError(ValueError):
    """A request conflicts with existing data or refers to missing data."""


class StorageError(Exception):
    """A storage operation failed."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")


@dataclass
class Message:
    role: str
    content: str
    metadata: dict[str, Any] | None = None
    uuid: UUID | None = None
    created_at: datetime | None = None
    token_count: int = 0


@dataclass
class Session:
    uuid: UUID
    id: int
    created_at: datetime
    updated_at: datetime
    session_id: str
    metadata: dict[str, Any] | None = None
    user_id: str | None = None
    deleted_at: datetime | None = None


@dataclass
class User:
    uuid: UUID
    id: int
    created_at: datetime
    updated_at: datetime
    user_id: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    metadata: dict[str, Any] | None = None
    deleted_at: datetime | None = None


@dataclass
class Summary:
    content: str = ""
    metadata: dict[str, Any] | None = None
    summary_point_uuid: UUID | None = None
    uuid: UUID | None = None
    created_at: datetime | None = None
    token_count: int = 0


@dataclass
class CreateSessionRequest:
    session_id: str
    user_id: str | None = None
    metadata: dict[str, Any] | None = None


@dataclass
class UpdateSessionRequest:
    session_id: str
    metadata: dict[str, Any] | None = None


@dataclass
class CreateUserRequest:
    user_id: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    metadata: dict[str, Any] | None = None


@dataclass
class UpdateUserRequest:
    user_id: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    metadata: dict[str, Any] | None = None


@dataclass
class SessionListResponse:
    sessions: list[Session] = field(default_factory=list)
    total_count: int = 0
    row_count: int = 0


@dataclass
class UserListResponse:
    users: list[User] = field(default_factory=list)
    total_count: int = 0
    row_count: int = 0


@dataclass
class SummaryListResponse:
    summaries: list[Summary] = field(default_factory=list)
    total_count: int = 0
    row_count: int = 0