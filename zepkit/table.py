"""Paginated, sortable tables for the admin pages."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import parse_qs

DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_KEY = "created_at"
DEFAULT_SORT_ASC = False

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


@dataclass
class Column:
    name: str
    sortable: bool = False
    order_by_key: str = ""


def _first(query: str | Mapping[str, Any], key: str) -> str | None:
    if isinstance(query, str):
        values = parse_qs(query.lstrip("?"), keep_blank_values=True).get(key)
        return values[0] if values else None
    value = query.get(key)
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _parse_int(value: str | None) -> int:
    if value is None or not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


def _parse_bool(value: str | None) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


@dataclass
class Table:
    """A table's columns, rows and paging/sorting state."""

    table_id: str
    columns: list[Column] = field(default_factory=list)
    rows: Any = None
    total_count: int = 0
    row_count: int = 0
    current_page: int = 0
    page_size: int = 0
    order_by: str = ""
    asc: bool = False

    def offset(self) -> int:
        """Row offset of the current page."""
        return (self.current_page - 1) * self.page_size

    def order_by_key(self) -> str:
        """The requested sort key if it belongs to a column, else the default."""
        if not self.order_by:
            return DEFAULT_SORT_KEY
        if self.order_by not in {c.order_by_key for c in self.columns}:
            return DEFAULT_SORT_KEY
        return self.order_by

    def effective_page_size(self) -> int:
        """The page size, or the default when none is set."""
        return self.page_size or DEFAULT_PAGE_SIZE

    def page_count(self) -> int:
        """Number of pages needed for all rows."""
        return math.ceil(self.total_count / self.effective_page_size())

    def parse_query_params(self, query: str | Mapping[str, Any]) -> None:
        """Reset paging state to defaults, then apply ``page``, ``order`` and ``asc``.

        ``query`` is a query string or a mapping of names to a value or a list of values.
        Values that do not parse are ignored.
        """
        self.current_page = 1
        self.page_size = DEFAULT_PAGE_SIZE
        self.order_by = DEFAULT_SORT_KEY
        self.asc = DEFAULT_SORT_ASC

        try:
            page = _parse_int(_first(query, "page"))
        except ValueError:
            pass
        else:
            self.current_page = page or 1

        order = _first(query, "order")
        if order:
            self.order_by = order

        try:
            self.asc = _parse_bool(_first(query, "asc"))
        except ValueError:
            pass

    def table_path(self, base_path: str) -> str:
        """Path of the table with its sort order as query parameters."""
        asc = "true" if self.asc else "false"
        return f"{base_path}?order={self.order_by_key()}&asc={asc}"