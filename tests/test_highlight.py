import html
import json
import re

import pytest

from zepkit.highlight import PreWrappedHtmlFormatter, code_highlight

CODE_PRE = (
    '<pre tabindex="0" style="-moz-tab-size:2;-o-tab-size:2;tab-size:2;'
    'white-space:pre-wrap;word-break:break-word;">'
)


def _text_of(markup: str) -> str:
    return html.unescape(re.sub(r"<[^>]+>", "", markup))


def test_output_is_wrapped_in_custom_pre():
    out = code_highlight('{"a": 1}', "json")
    assert out.startswith(CODE_PRE)
    assert out.endswith("</pre>")


@pytest.mark.parametrize(
    "code,lexer",
    [
        ('{\n  "key": "value",\n  "n": [1, 2, 3]\n}', "json"),
        ("def f(x):\n\treturn x < 3 and x > 1\n", "python"),
        ("\n\nleading and trailing\n\n", "text"),
    ],
)
def test_text_content_round_trips(code, lexer):
    assert _text_of(code_highlight(code, lexer)) == code


def test_markup_in_code_is_escaped():
    out = code_highlight(json.dumps({"x": "<b>"}), "json")
    assert "<b>" not in out
    assert "&lt;b&gt;" in out


def test_styles_are_inline():
    out = code_highlight('{"a": true}', "json")
    assert 'style="' in out[len(CODE_PRE):]
    assert 'class="' not in out


def test_unknown_lexer_raises():
    with pytest.raises(ValueError):
        code_highlight("x", "no-such-language-here")


def test_pre_wrapper_tags():
    formatter = PreWrappedHtmlFormatter()
    assert formatter.pre_start(True) == CODE_PRE
    assert formatter.pre_start(False) == "<pre>"
    assert formatter.pre_end(True) == "</pre>"
    assert formatter.pre_end(False) == "</pre>"