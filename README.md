# tbengine

A small HTML and CSS engine. It parses a subset of HTML into a DOM tree and a subset of CSS into a stylesheet, and finds elements in the tree with CSS selectors. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tbengine
```

This builds a small sample document (`html` > `head` > `title`, and a `body` with a text node and a comment) and prints its tree to standard output, one node per line, indented three spaces per level. Element names, attributes and text are coloured with ANSI escape codes. The command takes no options besides `--help`.

## Building a tree

```python
from tbengine.node import Node

html = Node.element("html", None)
head = html.append_element("head", None)
head.append_element("title", None).append_text("My site")
body = html.append_element("body", {"class": "main"})
body.append_text("lorem ipsum")
body.append_comment("a comment")

html.pretty_print_tree(0)
print(body.get_attr("class"))  # "main"
print(body.parent is html)     # True
```

A `Node` has a `node_type` (`NodeType.TEXT`, `NodeType.COMMENT` or `NodeType.ELEMENT`), its `data` (a string, or an `ElementData` with `tag` and `attrs`), its `children` and a weakly held `parent`. `set_attr` and `get_attr` raise `TypeError` on text and comment nodes. `tree_lines(depth)` yields the lines that `pretty_print_tree(depth, file)` prints; text and comments are shown cut to their first 24 characters.

## Parsing HTML and selecting nodes

```python
from tbengine import html

dom = html.parse_from_str('<!DOCTYPE html><body><p class="yellow">hi</p></body>')
print(dom.doctype)  # "html"
for node in dom.query_select(".yellow"):
    print(node.data.tag)  # "p"
```

`parse_from_str` returns a `Dom` whose top-level nodes are children of a synthetic `root` element. The doctype defaults to `"html"` when none is given. Text between tags is stripped of surrounding whitespace, and whitespace-only text is dropped. HTML comments are skipped and do not become nodes. The contents of `<script>` and `<style>` are kept as a single text child. Attribute values may be quoted or unquoted, and attributes without a value are stored as `""`. Bad input (an unclosed element, a mismatched closing tag, an unterminated comment or start tag) raises `tbengine.html.HtmlSyntaxError`, which carries the `position` of the error.

`Dom.query_select(query)` and `Node.query_select(query)` parse a selector string. `select(selector)` takes an already parsed `ComplexSelector`. Both return matching descendant elements in document order.

## Parsing CSS

```python
from tbengine import css

sheet = css.parse_from_str("h1.title > p { margin: 12px; display: block; }")
rule = sheet.rules[0]
print(rule.selector.specificity())  # (0, 1, 2)
print(rule.declarations["margin"])  # Dimension(value=12.0, unit=<Unit.PX: 'Px'>)
print(rule.declarations["display"]) # Keyword(name='block')
```

A selector is a list of compound selectors (a tag or `*`, then any number of `#id` and `.class` parts) joined by the combinators `>`, `+` and `~`. `css.parse_selector`, `css.parse_declaration` and `css.parse_value` parse a selector, a single `property: value` declaration, and a single value on their own. A value is either a `Keyword` or a `Dimension`: a number with an optional unit, which `Unit.from_str` maps case-insensitively, giving `Unit.INVALID` for suffixes it does not know. `/* ... */` comments are skipped. Bad input raises `tbengine.css.CssSyntaxError`, which carries the `position` of the error.

The `tbengine.stylesheet` module also defines `Color`, an RGBA colour whose `hex()` gives `#rrggbbaa`.

## Limits

- Selection matches elements against the first compound selector only. Combinators are parsed and kept in `ComplexSelector.combinators`, but they do not yet affect which nodes are selected. `Node.select_no_recursive` always returns an empty list.
- The descendant combinator (a space between selectors) raises `CssSyntaxError`.
- CSS values are single keywords or dimensions. Colours, strings, functions and multi-part values are not parsed.
- Nothing applies stylesheets to a DOM, and nothing lays out or renders a page. The package parses, builds trees and selects elements. It does not display pages.

## Modules

- `tbengine.stylesheet`: stylesheet model (`Stylesheet`, `Rule`, `Selector`, `ComplexSelector`, `Combinator`, `Keyword`, `Dimension`, `Unit`, `Color`)
- `tbengine.css`: CSS parser (`parse_from_str`, `parse_selector`, `parse_declaration`, `parse_value`, `CssSyntaxError`)
- `tbengine.node`: DOM nodes, element data and selector matching (`Node`, `NodeType`, `ElementData`)
- `tbengine.dom`: the `Dom` document wrapper
- `tbengine.html`: HTML parser (`parse_from_str`, `HtmlSyntaxError`)
- `tbengine.cli`: the `tbengine` command (`build_sample_tree`, `main`)