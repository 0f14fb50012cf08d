from __future__ import annotations

from html.parser import HTMLParser
from typing import List, Tuple

# Tags whose boundaries separate words visually; a newline keeps "Name:</td><td>Bob"
# from gluing together. Newlines are flattened to spaces later on.
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
        "fieldset", "figcaption", "footer", "form", "h1", "h2", "h3", "h4", "h5",
        "h6", "header", "hr", "label", "li", "main", "nav", "ol", "p", "pre",
        "section", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
    }
)
SKIPPED_TAGS = frozenset({"script", "style", "template"})


class VisibleTextHTMLParser(HTMLParser):
    """
    Collects the visible text of an HTML document with entities decoded.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: List[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, str | None]]) -> None:
        if tag in SKIPPED_TAGS:
            self._skip_depth += 1
            return
        if tag == "br" or tag in BLOCK_TAGS:
            self._chunks.append("\n")

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, str | None]]) -> None:
        if tag == "br" or tag in BLOCK_TAGS:
            self._chunks.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        if tag in BLOCK_TAGS:
            self._chunks.append("\n")

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        self._chunks.append(data.replace("\xa0", " "))

    @property
    def text(self) -> str:
        return "".join(self._chunks)


def html_to_text(html: str) -> str:
    """
    Strip markup and decode character references, returning the visible text.
    """
    parser = VisibleTextHTMLParser()
    parser.feed(html)
    # convert_charrefs buffers trailing text until close()
    parser.close()
    return parser.text
