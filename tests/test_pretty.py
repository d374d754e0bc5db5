"""Tests for the debugging representation."""

from __future__ import annotations

import pytest

from easyhtml import Document, Element, Text, UnsupportedNodeShape, parse, pretty_print


def test_single_element():
    assert pretty_print(parse("<p>hi</p>")) == "~HTML[<p>hi</p>]"


def test_repr_uses_pretty_form():
    doc = parse("<p>Hello, <em>world</em>!</p>")
    assert repr(doc) == "~HTML[<p>Hello, <em>world</em>!</p>]"
    assert repr(doc["em"]) == "~HTML[<em>world</em>]"


def test_empty_document():
    assert repr(Document()) == "~HTML[]"


def test_attributes_are_listed_in_order():
    doc = parse('<a href="/x" class="c">go</a>')
    assert repr(doc) == '~HTML[<a href="/x" class="c">go</a>]'


def test_attribute_values_are_not_escaped():
    doc = parse("<p title='say \"hi\"'>x</p>")
    assert repr(doc) == '~HTML[<p title="say "hi"">x</p>]'


def test_comment():
    assert repr(parse("<!--note-->")) == "~HTML[<!-- note -->]"


def test_children_break_strictly():
    doc = parse("<ul><li>one</li><li>two</li></ul>")
    assert doc.pretty(width=20) == "\n".join(
        [
            "~HTML[",
            "  <ul>",
            "    <li>one</li>",
            "    <li>two</li>",
            "  </ul>",
            "]",
        ]
    )


def test_whitespace_between_tags_is_dropped_when_broken():
    doc = parse("<ul>\n  <li>one</li>\n  <li>two</li>\n</ul>")
    assert doc.pretty(width=20) == parse("<ul><li>one</li><li>two</li></ul>").pretty(width=20)


def test_nested_breaks():
    doc = parse("<div><p><b>bold</b>text</p></div>")
    assert doc.pretty(width=20) == "\n".join(
        [
            "~HTML[",
            "  <div>",
            "    <p>",
            "      <b>bold</b>",
            "      text",
            "    </p>",
            "  </div>",
            "]",
        ]
    )


def test_custom_indent():
    doc = parse("<ul><li>one</li><li>two</li></ul>")
    assert pretty_print(doc, width=20, indent=4) == "\n".join(
        [
            "~HTML[",
            "    <ul>",
            "        <li>one</li>",
            "        <li>two</li>",
            "    </ul>",
            "]",
        ]
    )


def test_root_nodes_are_packed():
    doc = parse("<b>a</b><b>b</b><b>c</b>")
    assert doc.pretty(width=20) == "\n".join(
        [
            "~HTML[",
            "  <b>a</b><b>b</b>",
            "  <b>c</b>",
            "]",
        ]
    )


def test_unsupported_node_raises():
    with pytest.raises(UnsupportedNodeShape) as excinfo:
        pretty_print(Document([Element("p", {}, (Text("x"), ("em", [], [])))]))
    assert excinfo.value.node == ("em", [], [])


def test_unsupported_root_node_raises():
    with pytest.raises(UnsupportedNodeShape):
        repr(Document([object()]))


def test_document_that_exactly_fills_the_width_stays_on_one_line():
    doc = parse("<p>hi</p>")
    assert doc.pretty(width=16) == "~HTML[<p>hi</p>]"
    assert doc.pretty(width=15) == "\n".join(["~HTML[", "  <p>hi</p>", "]"])
