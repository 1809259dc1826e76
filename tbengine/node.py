"""Document tree nodes and element matching."""

from __future__ import annotations

import sys
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Iterator, Union

from .css import parse_selector
from .stylesheet import ComplexSelector, Selector

__all__ = ["NodeType", "ElementData", "Node"]

_PREVIEW_CHARS = 24
_INDENT = "   "


def _yellow(text: str) -> str:
    return f"\x1b[33m{text}\x1b[39m"


def _green(text: str) -> str:
    return f"\x1b[32m{text}\x1b[39m"


def _dimmed(text: str) -> str:
    return f"\x1b[2m{text}\x1b[22m"


def _bright_black(text: str) -> str:
    return f"\x1b[90m{text}\x1b[39m"


class NodeType(Enum):
    """The kind of content a node holds."""

    TEXT = "text"
    COMMENT = "comment"
    ELEMENT = "element"


@dataclass
class ElementData:
    """An element's tag name and attributes."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)

    def id(self) -> str | None:
        """Return the ``id`` attribute, if any."""
        return self.attrs.get("id")

    def classes(self) -> set[str]:
        """Return the space-separated names in the ``class`` attribute."""
        classes = self.attrs.get("class")
        return set(classes.split(" ")) if classes is not None else set()

    def matches_selector(self, selector: Selector) -> bool:
        """Tell whether this element satisfies a compound selector."""
        id_ok = selector.id is None or selector.id == self.id()
        tag_ok = selector.tag_name is None or selector.tag_name == self.tag
        mine = self.classes()
        classes_ok = all(name in mine for name in selector.classes)
        return id_ok and tag_ok and classes_ok


Content = Union[str, ElementData]


class Node:
    """A node in a document tree: text, comment or element."""

    def __init__(self, node_type: NodeType, data: Content) -> None:
        if (node_type is NodeType.ELEMENT) != isinstance(data, ElementData):
            raise TypeError(f"{node_type.value} node cannot hold {type(data).__name__}")
        self.node_type = node_type
        self.data = data
        self.children: list[Node] = []
        self._parent: weakref.ReferenceType[Node] | None = None

    @classmethod
    def text(cls, text: str) -> Node:
        """Create an orphaned text node."""
        return cls(NodeType.TEXT, text)

    @classmethod
    def comment(cls, text: str) -> Node:
        """Create an orphaned comment node."""
        return cls(NodeType.COMMENT, text)

    @classmethod
    def element(cls, tag: str, attrs: dict[str, str] | None = None) -> Node:
        """Create an orphaned, childless element node."""
        return cls(NodeType.ELEMENT, ElementData(tag, dict(attrs or {})))

    @property
    def parent(self) -> Node | None:
        """The node this one was appended to, if it is still alive."""
        return self._parent() if self._parent is not None else None

    def _element_data(self) -> ElementData:
        if not isinstance(self.data, ElementData):
            raise TypeError(f"{self.node_type.value} nodes cannot have attributes")
        return self.data

    def append_node(self, node: Node) -> Node:
        """Append ``node`` as the last child and return it."""
        node._parent = weakref.ref(self)
        self.children.append(node)
        return node

    def append_element(self, tag: str, attrs: dict[str, str] | None = None) -> Node:
        """Append a new element child and return it."""
        return self.append_node(Node.element(tag, attrs))

    def append_text(self, text: str) -> Node:
        """Append a new text child and return it."""
        return self.append_node(Node.text(text))

    def append_comment(self, text: str) -> Node:
        """Append a new comment child and return it."""
        return self.append_node(Node.comment(text))

    def set_attr(self, key: str, value: str) -> None:
        """Set an attribute on an element node."""
        self._element_data().attrs[key] = value

    def get_attr(self, key: str) -> str | None:
        """Return an attribute of an element node, or None."""
        return self._element_data().attrs.get(key)

    def tree_lines(self, depth: int = 0) -> Iterator[str]:
        """Yield one indented display line per node of this subtree."""
        yield f"{_INDENT * depth}{self}"
        for child in self.children:
            yield from child.tree_lines(depth + 1)

    def pretty_print_tree(self, depth: int = 0, file: IO[str] | None = None) -> None:
        """Print this subtree, one node per line."""
        out = file if file is not None else sys.stdout
        for line in self.tree_lines(depth):
            print(line, file=out)

    def query_select(self, query: str) -> list[Node]:
        """Return descendant elements matching a selector string."""
        return self.select(parse_selector(query))

    def select(self, selector: ComplexSelector) -> list[Node]:
        """Return descendant elements matching the selector, in document order."""
        simple = selector.inner[0]
        found: list[Node] = []
        for child in self.children:
            if isinstance(child.data, ElementData):
                if child.data.matches_selector(simple):
                    found.append(child)
                found.extend(child.select(selector))
        return found

    def select_no_recursive(self, selector: ComplexSelector) -> list[Node]:
        """Return matching direct children; no nodes are matched this way yet."""
        return []

    def __str__(self) -> str:
        if isinstance(self.data, ElementData):
            parts = [_green(self.data.tag)]
            parts.extend(
                f" {_dimmed(key)}{_bright_black('=')}{_yellow(value)}"
                for key, value in self.data.attrs.items()
            )
            return "".join(parts)
        preview = self.data[:_PREVIEW_CHARS]
        if self.node_type is NodeType.TEXT:
            return _yellow(f'"{preview}"')
        return f"<!-- {preview} -->"

    def __repr__(self) -> str:
        return f"Node({self.node_type.name}, {self.data!r}, children={len(self.children)})"