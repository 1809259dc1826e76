"""Command that builds a small sample document and prints its tree."""

from __future__ import annotations

import argparse

from .node import Node

__all__ = ["build_sample_tree", "main"]


def build_sample_tree() -> Node:
    """Build a tiny html/head/title/body document tree."""
    html = Node.element("html", {})
    head = html.append_element("head")
    title = head.append_element("title")
    title.append_text("MY WWBSITE")
    body = html.append_element("body")
    body.append_text("lorem ipsum")
    body.append_comment("lorem ipsum commentum")
    return html


def main(argv: list[str] | None = None) -> int:
    """Print the sample document tree."""
    parser = argparse.ArgumentParser(description="Print a sample document tree.")
    parser.parse_args(argv)
    build_sample_tree().pretty_print_tree(0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())