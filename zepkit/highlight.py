"""Syntax highlighting of code snippets into self-contained HTML."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

HIGHLIGHT_THEME = "github"
_FALLBACK_THEME = "default"

_CODE_PRE_START = (
    '<pre tabindex="0" style="-moz-tab-size:2;-o-tab-size:2;tab-size:2;'
    'white-space:pre-wrap;word-break:break-word;">'
)
_PLAIN_PRE_START = "<pre>"
_PRE_END = "</pre>"


def _style(name: str):
    try:
        return get_style_by_name(name)
    except ClassNotFound:
        return get_style_by_name(_FALLBACK_THEME)


class PreWrappedHtmlFormatter(HtmlFormatter):
    """HTML formatter with inline styles that wraps output in a wrapping <pre>."""

    def __init__(self, **options):
        options["nowrap"] = True
        options.setdefault("noclasses", True)
        options.setdefault("style", _style(HIGHLIGHT_THEME))
        super().__init__(**options)

    @staticmethod
    def pre_tags(code: bool) -> tuple[str, str]:
        """Opening and closing <pre> tags; ``code`` tells whether they surround code."""
        return (_CODE_PRE_START if code else _PLAIN_PRE_START), _PRE_END

    def format_unencoded(self, tokensource, outfile):
        start, end = self.pre_tags(True)
        outfile.write(start)
        super().format_unencoded(tokensource, outfile)
        outfile.write(end)


def code_highlight(code: str, lexer: str) -> str:
    """Highlight ``code`` with the named lexer and return an HTML string."""
    try:
        lexer_obj = get_lexer_by_name(lexer, stripnl=False, ensurenl=False)
    except ClassNotFound:
        raise ValueError(f"unknown lexer: {lexer}") from None
    return highlight(code, lexer_obj, PreWrappedHtmlFormatter())