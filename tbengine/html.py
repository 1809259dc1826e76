"""Parser for a small subset of HTML into a Dom."""

from __future__ import annotations

import re

from .dom import Dom
from .node import Node

__all__ = ["HtmlSyntaxError", "parse_from_str"]


class HtmlSyntaxError(ValueError):
    """Raised when HTML text cannot be parsed."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


_DOCTYPE = re.compile(r"<!doctype\s+([^>]*?)\s*>", re.I)
_WS = re.compile(r"\s+")
_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_ATTR_NAME = re.compile(r"[^\s\"'=<>/]+")
_ATTR_VALUE = re.compile(r"\"[^\"]*\"|'[^']*'|[^\s\"'=<>`]+")
_TEXT = re.compile(r"[^<]+")
_RAW_TEXT_TAGS = {"script", "style"}


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str) -> HtmlSyntaxError:
        return HtmlSyntaxError(message, self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def take(self, pattern: re.Pattern[str]) -> str | None:
        match = pattern.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group()

    def skip_ws(self) -> None:
        self.take(_WS)

    def expect(self, literal: str) -> None:
        if not self.startswith(literal):
            raise self.error(f"expected {literal!r}")
        self.pos += len(literal)


def _skip_comment(sc: _Scanner) -> None:
    end = sc.text.find("-->", sc.pos + 4)
    if end < 0:
        raise sc.error("unterminated comment")
    sc.pos = end + 3


def _parse_children(sc: _Scanner, parent: Node) -> None:
    while not sc.at_end():
        if sc.startswith("<!--"):
            _skip_comment(sc)
        elif sc.startswith("</"):
            return
        elif sc.peek() == "<":
            parent.append_node(_parse_element(sc))
        else:
            text = (sc.take(_TEXT) or "").strip()
            if text:
                parent.append_text(text)


def _parse_attributes(sc: _Scanner, node: Node) -> bool:
    """Read attributes up to the end of the start tag; True if self-closing."""
    while True:
        sc.skip_ws()
        if sc.startswith("/>"):
            sc.pos += 2
            return True
        if sc.startswith(">"):
            sc.pos += 1
            return False
        if sc.at_end():
            raise sc.error("unterminated start tag")
        name = sc.take(_ATTR_NAME)
        if name is None:
            raise sc.error("expected attribute name")
        sc.skip_ws()
        if sc.peek() == "=":
            sc.pos += 1
            sc.skip_ws()
            value = sc.take(_ATTR_VALUE)
            if value is None:
                raise sc.error("expected attribute value")
            node.set_attr(name, value.strip("'\""))
        else:
            node.set_attr(name, "")


def _parse_element(sc: _Scanner) -> Node:
    start = sc.pos
    sc.expect("<")
    tag = sc.take(_TAG_NAME)
    if tag is None:
        raise sc.error("expected tag name")
    node = Node.element(tag, {})
    if _parse_attributes(sc, node):
        return node

    if tag.lower() in _RAW_TEXT_TAGS:
        close = re.compile(rf"</{re.escape(tag)}\s*>", re.I).search(sc.text, sc.pos)
        if close is None:
            raise HtmlSyntaxError(f"unclosed element <{tag}>", start)
        raw = sc.text[sc.pos : close.start()].strip()
        if raw:
            node.append_text(raw)
        sc.pos = close.end()
        return node

    _parse_children(sc, node)
    if sc.at_end():
        raise HtmlSyntaxError(f"unclosed element <{tag}>", start)
    sc.expect("</")
    closing = sc.take(_TAG_NAME)
    if closing is None or closing.lower() != tag.lower():
        raise sc.error(f"mismatched closing tag for <{tag}>")
    sc.skip_ws()
    sc.expect(">")
    return node


def parse_from_str(html: str) -> Dom:
    """Parse an HTML document; its top-level nodes become children of the root."""
    sc = _Scanner(html)
    while True:
        sc.skip_ws()
        if sc.startswith("<!--"):
            _skip_comment(sc)
        else:
            break

    doctype_match = _DOCTYPE.match(sc.text, sc.pos)
    if doctype_match is not None:
        sc.pos = doctype_match.end()
        dom = Dom(doctype_match.group(1))
    else:
        dom = Dom("html")

    _parse_children(sc, dom.root)
    if not sc.at_end():
        raise sc.error("unexpected closing tag")
    return dom