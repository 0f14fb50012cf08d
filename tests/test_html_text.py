from __future__ import annotations

import pytest

from parsers.html_text import html_to_text


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("plain text", "plain text"),
        ("Tom &amp; Jerry", "Tom & Jerry"),
        ("&lt;tag&gt; &quot;quoted&quot;", '<tag> "quoted"'),
        ("a&nbsp;b", "a b"),
        ("caf&#233;", "caf\u00e9"),
        ("<b>bold</b> and <i>italic</i>", "bold and italic"),
    ],
)
def test_html_to_text_decodes_and_strips(html: str, expected: str):
    assert html_to_text(html) == expected


def test_html_to_text_separates_block_elements():
    text = html_to_text("<table><tr><td>Name:</td><td>Ada</td></tr></table>")

    assert text.split() == ["Name:", "Ada"]
    assert "Name:Ada" not in text


def test_html_to_text_breaks_on_br():
    assert html_to_text("one<br>two<br/>three") == "one\ntwo\nthree"


def test_html_to_text_drops_script_and_style():
    html = "<style>p {}</style><p>kept</p><script>var x = 1;</script>"

    assert html_to_text(html).strip() == "kept"


def test_html_to_text_flushes_trailing_text():
    assert html_to_text("<p>Age:</p> 36") == "\nAge:\n 36"
