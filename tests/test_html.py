import re

import pytest

from tbengine.html import HtmlSyntaxError, parse_from_str
from tbengine.node import NodeType

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

SAMPLE = """<!DOCTYPE html>
<html>
  <head>
    <title>Hello web</title>
    <style>p { color: red; }</style>
  </head>
  <body>
    <!-- a comment -->
    <h1 class="yellow big" id='main'>Heading</h1>
    <p class=yellow hidden>Some <b class="yellow">bold</b> text</p>
    <br/>
  </body>
</html>
"""


def test_query_yellow_count():
    dom = parse_from_str(SAMPLE)
    found = dom.query_select(".yellow")
    assert [n.data.tag for n in found] == ["h1", "p", "b"]


def test_doctype_read():
    assert parse_from_str(SAMPLE).doctype == "html"


def test_doctype_defaults_to_html():
    dom = parse_from_str("<p>x</p>")
    assert dom.doctype == "html"
    assert [c.data.tag for c in dom.root.children] == ["p"]


def test_empty_document():
    dom = parse_from_str("")
    assert dom.doctype == "html"
    assert dom.root.children == []


def test_attributes():
    dom = parse_from_str(SAMPLE)
    (h1,) = dom.query_select("h1")
    assert h1.get_attr("class") == "yellow big"
    assert h1.get_attr("id") == "main"
    (p,) = dom.query_select("p")
    assert p.get_attr("class") == "yellow"
    assert p.get_attr("hidden") == ""


def test_text_children_and_parents():
    dom = parse_from_str(SAMPLE)
    (p,) = dom.query_select("p")
    kinds = [c.node_type for c in p.children]
    assert kinds == [NodeType.TEXT, NodeType.ELEMENT, NodeType.TEXT]
    assert [p.children[0].data, p.children[2].data] == ["Some", "text"]
    assert p.children[1].parent is p


def test_style_contents_kept_as_text():
    dom = parse_from_str(SAMPLE)
    (style,) = dom.query_select("style")
    assert [c.data for c in style.children] == ["p { color: red; }"]


def test_comments_skipped_and_self_closing():
    dom = parse_from_str(SAMPLE)
    (body,) = dom.query_select("body")
    assert all(c.node_type is not NodeType.COMMENT for c in body.children)
    (br,) = dom.query_select("br")
    assert br.children == []


def test_top_level_text():
    dom = parse_from_str("hello <i>x</i>")
    assert dom.root.children[0].node_type is NodeType.TEXT
    assert dom.root.children[0].data == "hello"


def test_pretty_print(capsys):
    dom = parse_from_str("<div id=a><span>hi</span></div>")
    dom.root.pretty_print_tree(0)
    out = _ANSI.sub("", capsys.readouterr().out).splitlines()
    assert out == ["root", "   div id=a", "      span", '         "hi"']


@pytest.mark.parametrize(
    "text",
    ["<div><p></div>", "<div>", "</div>", "<div a=>x</div>", "<1>", "<!-- x"],
)
def test_syntax_errors(text):
    with pytest.raises(HtmlSyntaxError):
        parse_from_str(text)