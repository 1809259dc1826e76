"""A small HTML and CSS engine: DOM trees, stylesheets and selector matching."""

__version__ = "0.1.0"
__all__ = ["stylesheet", "css", "node", "dom", "html", "cli"]