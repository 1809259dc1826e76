"""Parser for a small subset of CSS."""

from __future__ import annotations

import re

from .stylesheet import (
    Combinator,
    ComplexSelector,
    Dimension,
    Keyword,
    Rule,
    Selector,
    Stylesheet,
    Unit,
    Value,
)

__all__ = [
    "CssSyntaxError",
    "parse_from_str",
    "parse_selector",
    "parse_declaration",
    "parse_value",
]


class CssSyntaxError(ValueError):
    """Raised when CSS text cannot be parsed."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


_WS = re.compile(r"(?:\s+|/\*.*?\*/)+", re.S)
_IDENT = re.compile(r"-?[A-Za-z_][A-Za-z0-9_-]*")
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_UNIT = re.compile(r"%|[A-Za-z]+")

_COMBINATORS = {
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
}


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str) -> CssSyntaxError:
        return CssSyntaxError(message, self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_ws(self) -> None:
        self.take(_WS)

    def take(self, pattern: re.Pattern[str]) -> str | None:
        match = pattern.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group()

    def expect(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise self.error(f"expected {literal!r}")
        self.pos += len(literal)

    def ident(self) -> str:
        name = self.take(_IDENT)
        if name is None:
            raise self.error("expected identifier")
        return name


def _compound(sc: _Scanner) -> Selector | None:
    start = sc.pos
    selector = Selector()
    if sc.peek() == "*":
        sc.pos += 1
    else:
        selector.tag_name = sc.take(_IDENT)
    while True:
        char = sc.peek()
        if char == "#":
            sc.pos += 1
            selector.id = sc.ident()
        elif char == ".":
            sc.pos += 1
            selector.classes.append(sc.ident())
        else:
            break
    return selector if sc.pos > start else None


def _starts_compound(sc: _Scanner) -> bool:
    return sc.peek() in ("*", "#", ".") or _IDENT.match(sc.text, sc.pos) is not None


def _complex(sc: _Scanner) -> ComplexSelector:
    first = _compound(sc)
    if first is None:
        raise sc.error("expected selector")
    result = ComplexSelector(inner=[first])
    while True:
        saved = sc.pos
        sc.skip_ws()
        combinator = _COMBINATORS.get(sc.peek())
        if combinator is None:
            if sc.pos > saved and _starts_compound(sc):
                raise sc.error("descendant combinator is not supported")
            sc.pos = saved
            return result
        sc.pos += 1
        sc.skip_ws()
        compound = _compound(sc)
        if compound is None:
            raise sc.error("expected selector after combinator")
        result.combinators.append(combinator)
        result.inner.append(compound)


def _value(sc: _Scanner) -> Value:
    number = sc.take(_NUMBER)
    if number is not None:
        unit = sc.take(_UNIT) or ""
        return Dimension(float(number), Unit.from_str(unit))
    name = sc.take(_IDENT)
    if name is None:
        raise sc.error("expected value")
    return Keyword(name)


def _declaration(sc: _Scanner) -> tuple[str, Value]:
    key = sc.ident()
    sc.skip_ws()
    sc.expect(":")
    sc.skip_ws()
    return key, _value(sc)


def _rule(sc: _Scanner) -> Rule:
    selector = _complex(sc)
    sc.skip_ws()
    sc.expect("{")
    sc.skip_ws()
    declarations: dict[str, Value] = {}
    while sc.peek() != "}":
        if sc.at_end():
            raise sc.error("unterminated rule")
        key, value = _declaration(sc)
        declarations[key] = value
        sc.skip_ws()
        if sc.peek() == ";":
            sc.pos += 1
            sc.skip_ws()
        elif sc.peek() != "}":
            raise sc.error("expected ';' or '}'")
    sc.expect("}")
    return Rule(selector=selector, declarations=declarations)


def _parse_whole(text: str, parse):
    sc = _Scanner(text)
    sc.skip_ws()
    result = parse(sc)
    sc.skip_ws()
    if not sc.at_end():
        raise sc.error("unexpected trailing input")
    return result


def parse_from_str(css: str) -> Stylesheet:
    """Parse a whole stylesheet."""
    sc = _Scanner(css)
    sheet = Stylesheet()
    sc.skip_ws()
    while not sc.at_end():
        sheet.rules.append(_rule(sc))
        sc.skip_ws()
    return sheet


def parse_selector(text: str) -> ComplexSelector:
    """Parse a complex selector such as ``ul > li.item``."""
    return _parse_whole(text, _complex)


def parse_declaration(text: str) -> list[tuple[str, Value]]:
    """Parse a single ``property: value`` declaration."""
    return [_parse_whole(text, _declaration)]


def parse_value(text: str) -> Value:
    """Parse a single declaration value."""
    return _parse_whole(text, _value)