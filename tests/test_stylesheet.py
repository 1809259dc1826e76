import pytest

from tbengine.stylesheet import (
    Color,
    Combinator,
    ComplexSelector,
    Dimension,
    Keyword,
    Rule,
    Selector,
    Stylesheet,
    Unit,
)


def test_empty_selector_has_zero_specificity():
    assert Selector().specificity() == (0, 0, 0)


def test_selector_specificity_counts_parts():
    sel = Selector(id="main", tag_name="h1", classes=["a", "b"])
    assert sel.specificity() == (1, 2, 1)


def test_complex_specificity_sums_parts():
    one = Selector(id="x")
    two = Selector(tag_name="p", classes=["c"])
    complex_sel = ComplexSelector(inner=[one, two], combinators=[Combinator.CHILD])
    total = complex_sel.specificity()
    assert total[0] == one.specificity()[0] + two.specificity()[0]
    assert total[1] == one.specificity()[1] + two.specificity()[1]
    assert total[2] == one.specificity()[2] + two.specificity()[2]


def test_empty_complex_selector_specificity():
    assert ComplexSelector().specificity() == (0, 0, 0)


@pytest.mark.parametrize(
    "text,unit",
    [
        ("px", Unit.PX),
        ("pt", Unit.PT),
        ("q", Unit.Q),
        ("mm", Unit.MM),
        ("pc", Unit.PC),
        ("in", Unit.IN),
        ("em", Unit.EM),
        ("rem", Unit.REM),
        ("vh", Unit.VH),
        ("vw", Unit.VW),
        ("tb", Unit.TB),
        ("%", Unit.PERCENT),
        ("", Unit.UNITLESS),
    ],
)
def test_unit_from_str(text, unit):
    assert Unit.from_str(text) is unit
    assert Unit.from_str(text.upper()) is unit


def test_unknown_unit_is_invalid():
    assert Unit.from_str("furlong") is Unit.INVALID


@pytest.mark.parametrize(
    "text,expected",
    [
        ("%", "%"),
        ("", ""),
        ("px", "Px"),
    ],
)
def test_unit_display(text, expected):
    assert Unit.from_str(text).__str__() == expected


def test_color_hex():
    assert Color(255, 0, 16, 128).hex() == "#ff001080"


def test_color_str_wraps_hex_in_background_colour():
    color = Color(1, 2, 3, 4)
    text = str(color)
    assert color.hex() in text
    assert text.startswith("\x1b[48;2;1;2;3m")


def test_stylesheet_defaults_to_no_rules():
    assert Stylesheet().rules == []


def test_rule_holds_declarations():
    rule = Rule(
        selector=ComplexSelector(inner=[Selector(tag_name="p")]),
        declarations={"color": Keyword("red"), "width": Dimension(3.0, Unit.PX)},
    )
    assert rule.declarations["color"] == Keyword("red")
    assert rule.declarations["width"].unit is Unit.PX