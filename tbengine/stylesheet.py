"""Data model for parsed stylesheets: rules, selectors and values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

Specificity = tuple[int, int, int]


@dataclass
class Selector:
    """A compound selector such as ``h1#main.big.red``."""

    id: str | None = None
    tag_name: str | None = None
    classes: list[str] = field(default_factory=list)

    def specificity(self) -> Specificity:
        """Return the (ids, classes, tags) specificity triple."""
        return (
            int(self.id is not None),
            len(self.classes),
            int(self.tag_name is not None),
        )


class Combinator(Enum):
    """How two compound selectors in a complex selector relate."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass
class ComplexSelector:
    """A chain of compound selectors joined by combinators."""

    inner: list[Selector] = field(default_factory=list)
    combinators: list[Combinator] = field(default_factory=list)

    def specificity(self) -> Specificity:
        """Return the summed specificity of all compound selectors."""
        ids = classes = tags = 0
        for selector in self.inner:
            a, b, c = selector.specificity()
            ids += a
            classes += b
            tags += c
        return (ids, classes, tags)


class Unit(Enum):
    """A CSS length unit; the value is its display form."""

    PX = "Px"
    PT = "Pt"
    Q = "Q"
    MM = "Mm"
    CM = "Cm"
    PC = "Pc"
    IN = "In"
    EM = "Em"
    REM = "Rem"
    VH = "Vh"
    VW = "Vw"
    TB = "Tb"
    PERCENT = "%"
    UNITLESS = ""
    INVALID = "Invalid"

    @classmethod
    def from_str(cls, value: str) -> Unit:
        """Map a unit suffix (case-insensitive) to a unit, or INVALID."""
        return _UNIT_NAMES.get(value.lower(), cls.INVALID)

    def __str__(self) -> str:
        return self.value


_UNIT_NAMES = {
    "px": Unit.PX,
    "pt": Unit.PT,
    "q": Unit.Q,
    "mm": Unit.MM,
    "pc": Unit.PC,
    "in": Unit.IN,
    "em": Unit.EM,
    "rem": Unit.REM,
    "vh": Unit.VH,
    "vw": Unit.VW,
    "tb": Unit.TB,
    "%": Unit.PERCENT,
    "": Unit.UNITLESS,
}


@dataclass(frozen=True)
class Keyword:
    """An identifier value such as ``auto`` or ``red``."""

    name: str


@dataclass(frozen=True)
class Dimension:
    """A number with a unit, such as ``12px``."""

    value: float
    unit: Unit


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    r: int
    g: int
    b: int
    a: int

    def hex(self) -> str:
        """Return the colour as ``#rrggbbaa``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def __str__(self) -> str:
        return f"\x1b[48;2;{self.r};{self.g};{self.b}m{self.hex()}\x1b[49m"


Value = Union[Keyword, Dimension, Color]


@dataclass
class Rule:
    """A selector with its declarations."""

    selector: ComplexSelector
    declarations: dict[str, Value] = field(default_factory=dict)


@dataclass
class Stylesheet:
    """An ordered list of rules."""

    rules: list[Rule] = field(default_factory=list)