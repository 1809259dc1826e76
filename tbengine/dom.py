"""A parsed document: doctype plus a synthetic root element."""

from __future__ import annotations

from dataclasses import dataclass, field

from .node import Node
from .stylesheet import ComplexSelector

__all__ = ["Dom"]


@dataclass
class Dom:
    """A document whose top-level nodes hang off a ``root`` element."""

    doctype: str = "html"
    root: Node = field(default_factory=lambda: Node.element("root"))

    def query_select(self, query: str) -> list[Node]:
        """Return elements matching a selector string."""
        return self.root.query_select(query)

    def select(self, selector: ComplexSelector) -> list[Node]:
        """Return elements matching a parsed selector."""
        return self.root.select(selector)