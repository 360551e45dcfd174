"""
BeautifulSoup-based query primitives for rendered competitor pages.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

# Elements whose content never renders as text.
NON_RENDERED_TAGS = frozenset(
    {"script", "style", "noscript", "template", "head", "title", "meta", "link", "iframe", "svg"}
)
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "dd", "details", "div", "dl", "dt",
        "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
        "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "summary",
        "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
    }
)

_INLINE_WHITESPACE = re.compile(r"[ \t\r\f\v\u00a0]+")
_DISPLAY_NONE = re.compile(r"display\s*:\s*none|visibility\s*:\s*hidden", flags=re.IGNORECASE)


class RenderedPage:
    """
    Snapshot of a rendered page, queryable with CSS selectors.
    """

    def __init__(self, *, url: str, html: str) -> None:
        self.url = url
        self.html = html
        self.soup = BeautifulSoup(html, "html.parser")

    def query(self, selector: str) -> list[Tag]:
        """
        Return all elements matching `selector`, in document order.

        Raises soupsieve's SelectorSyntaxError for malformed selectors.
        """

        return self.soup.select(selector)


def visible_text(node: Tag) -> str:
    """
    Approximate the browser's innerText for `node`.

    Block-level elements and <br> start new lines, inline whitespace runs
    collapse to one space and blank lines are dropped.
    """

    parts: list[str] = []
    _collect_text(node, parts)
    lines = (_INLINE_WHITESPACE.sub(" ", line).strip() for line in "".join(parts).split("\n"))
    return "\n".join(line for line in lines if line)


def inner_markup(node: Tag) -> str:
    return node.decode_contents()


def class_name(node: Tag) -> str:
    value = node.get("class")
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


def _collect_text(node: Tag, parts: list[str]) -> None:
    # Explicit stack so arbitrarily deep markup cannot exhaust the call stack.
    # A None entry closes a block element.
    stack: list[PageElement | None] = list(reversed(node.contents))
    while stack:
        child = stack.pop()
        if child is None:
            parts.append("\n")
        elif isinstance(child, Tag):
            if child.name in NON_RENDERED_TAGS or _is_hidden(child):
                continue
            if child.name == "br":
                parts.append("\n")
                continue
            if child.name in BLOCK_TAGS:
                parts.append("\n")
                stack.append(None)
            stack.extend(reversed(child.contents))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            parts.append(str(child))


def _is_hidden(node: Tag) -> bool:
    if node.has_attr("hidden"):
        return True
    style = node.get("style")
    return isinstance(style, str) and _DISPLAY_NONE.search(style) is not None
