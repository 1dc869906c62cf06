"""Helper functions made available to the admin templates."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any, Callable

from zepkit.highlight import code_highlight

_HTML_ESCAPES = str.maketrans(
    {
        "\0": "\ufffd",
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
    }
)

_JSON_HTML_SAFE = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def percent(a: int, b: int) -> int:
    """Return ``a`` as a whole percentage of ``b``; zero when ``b`` is zero."""
    if b == 0:
        return 0
    return int(a / b * 100)


def html_escape_string(s: str) -> str:
    """Escape the HTML-significant characters of ``s``."""
    return s.translate(_HTML_ESCAPES)


def html_escape_map(data: dict[str, Any]) -> dict[str, Any]:
    """Escape string values in ``data`` in place, recursing into nested dicts."""
    for key, value in data.items():
        if isinstance(value, str):
            data[key] = html_escape_string(value)
        elif isinstance(value, dict):
            data[key] = html_escape_map(value)
    return data


def html_escape_struct(data: Any) -> Any:
    """Escape a string, or the string fields of a dataclass instance in place.

    Nested dataclass fields are walked too; frozen dataclasses are left as they are.
    """
    if isinstance(data, str):
        return html_escape_string(data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        if data.__dataclass_params__.frozen:
            return data
        for field in dataclasses.fields(data):
            value = getattr(data, field.name)
            if isinstance(value, str):
                setattr(data, field.name, html_escape_string(value))
            elif dataclasses.is_dataclass(value) and not isinstance(value, type):
                html_escape_struct(value)
    return data


def _json_dumps_html_safe(data: Any) -> str:
    text = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
    for char, replacement in _JSON_HTML_SAFE:
        text = text.replace(char, replacement)
    return text


def json_serialize_html(data: dict[str, Any]) -> str:
    """Serialize ``data`` to indented JSON and return it as highlighted HTML."""
    escaped = html_escape_map(data)
    return code_highlight(_json_dumps_html_safe(escaped), "json")


def _comma(n: int) -> str:
    return f"{n:,}"


_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH
_LONG_TIME = 37 * _YEAR

# (upper bound in seconds, format, divisor)
_MAGNITUDES = (
    (1, "now", 1),
    (2, "1 second {}", 1),
    (_MINUTE, "{n} seconds {}", 1),
    (2 * _MINUTE, "1 minute {}", 1),
    (_HOUR, "{n} minutes {}", _MINUTE),
    (2 * _HOUR, "1 hour {}", 1),
    (_DAY, "{n} hours {}", _HOUR),
    (2 * _DAY, "1 day {}", 1),
    (_WEEK, "{n} days {}", _DAY),
    (2 * _WEEK, "1 week {}", 1),
    (_MONTH, "{n} weeks {}", _WEEK),
    (2 * _MONTH, "1 month {}", 1),
    (_YEAR, "{n} months {}", _MONTH),
    (18 * _MONTH, "1 year {}", 1),
    (2 * _YEAR, "2 years {}", 1),
    (_LONG_TIME, "{n} years {}", _YEAR),
    (float("inf"), "a long while {}", 1),
)


def _relative_time(then: datetime, now: datetime | None = None) -> str:
    if now is None:
        now = datetime.now(then.tzinfo)
    diff = (now - then).total_seconds()
    label = "ago"
    if diff < 0:
        diff = -diff
        label = "from now"
    for bound, fmt, divisor in _MAGNITUDES:
        if bound > diff:
            return fmt.format(label, n=int(diff // divisor))
    raise AssertionError("unreachable")


def template_funcs() -> dict[str, Callable[..., Any]]:
    """Return the functions exposed to page templates by name."""
    return {
        "Percent": percent,
        "ToJSON": json_serialize_html,
        "CommaInt": _comma,
        "RelativeTime": _relative_time,
    }