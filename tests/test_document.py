"""Tests for the Document wrapper."""

from __future__ import annotations

import pytest

import easyhtml
from easyhtml import (
    NOT_FOUND,
    Document,
    Element,
    ParseError,
    SelectorError,
    SelectorNotFound,
    Text,
    lookup,
    parse,
    render_text,
)


SAMPLE = "<p>Hello, <em>world</em>!</p>"


def test_parse_builds_nodes():
    doc = parse(SAMPLE)
    assert doc.nodes == (
        Element("p", {}, (Text("Hello, "), Element("em", {}, (Text("world"),)), Text("!"))),
    )
    assert len(doc) == 1
    assert list(doc) == list(doc.nodes)


def test_parse_is_exported_at_package_level():
    assert easyhtml.parse(SAMPLE) == Document.parse(SAMPLE)


def test_parse_collapses_duplicate_attributes():
    doc = parse('<p a="1" b="2" a="3">x</p>')
    assert doc.nodes[0].attributes == {"a": "3", "b": "2"}
    assert list(doc.nodes[0].attributes) == ["a", "b"]


def test_parse_rejects_non_text():
    with pytest.raises(ParseError):
        parse(42)


def test_lookup_found():
    result = lookup(parse(SAMPLE), "em")
    assert isinstance(result, Document)
    assert result.nodes == (Element("em", {}, (Text("world"),)),)


def test_lookup_not_found():
    doc = parse(SAMPLE)
    assert lookup(doc, "span") is NOT_FOUND
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"


def test_lookup_does_not_touch_source():
    doc = parse(SAMPLE)
    before = doc.nodes
    result = doc.fetch("em")
    assert doc.nodes == before
    assert result.nodes[0] == doc.nodes[0].children[1]
    assert result.nodes[0] is not doc.nodes[0].children[1]


def test_lookup_returns_nested_matches_in_document_order():
    doc = parse('<div id="a"><div id="b">x</div></div>')
    result = doc.fetch("div")
    assert [node.attributes["id"] for node in result] == ["a", "b"]


def test_lookup_on_normalized_attributes():
    doc = parse('<p a="1" a="2">x</p>')
    assert doc.fetch('[a="2"]') == doc
    assert doc.fetch('[a="1"]') is NOT_FOUND


def test_lookup_invalid_selector():
    with pytest.raises(SelectorError):
        parse(SAMPLE).fetch("p[")


def test_chained_lookup_on_matched_tag_is_stable():
    doc = parse(SAMPLE)
    once = doc.fetch("em")
    assert once.fetch("em") == once
    assert doc.fetch("p").fetch("p") == doc


def test_chained_lookup_with_dropped_ancestor_finds_nothing():
    once = parse(SAMPLE).fetch("p em")
    assert once.nodes == (Element("em", {}, (Text("world"),)),)
    assert once.fetch("p em") is NOT_FOUND


def test_get_and_getitem():
    doc = parse(SAMPLE)
    assert doc.get("em") == doc["em"]
    assert doc.get("span") is None
    assert doc.get("span", "missing") == "missing"
    with pytest.raises(SelectorNotFound):
        doc["span"]
    with pytest.raises(KeyError):
        doc["span"]


def test_contains():
    doc = parse(SAMPLE)
    assert "em" in doc
    assert "span" not in doc
    assert 1 not in doc


def test_render_text():
    doc = parse(SAMPLE)
    assert render_text(doc) == "Hello, world!"
    assert str(doc) == "Hello, world!"
    assert str(doc["em"]) == "world"


def test_render_text_ignores_comments():
    assert str(parse("<p>a<!-- hidden -->b</p>")) == "ab"


def test_render_text_empty_document():
    assert str(Document()) == ""
    assert render_text(parse("")) == ""


def test_render_text_options():
    doc = parse("<ul><li> one </li><li>two</li></ul>")
    assert doc.text(separator="|", strip=True) == "one|two"


def test_render_text_skips_script_and_style():
    doc = parse("<p>a</p><script>var x = 1;</script><style>p{}</style>")
    assert render_text(doc) == "a"
    assert str(parse("<div><script>x()</script>b</div>")) == "b"


def test_script_contents_stay_in_the_tree():
    doc = parse("<script>var x = 1;</script>")
    assert doc.nodes == (Element("script", {}, (Text("var x = 1;"),)),)
    assert str(doc.fetch("script")) == ""


def test_parsed_attributes_are_read_only():
    doc = parse('<div a="1"><p b="2">x</p></div>')
    with pytest.raises(TypeError):
        doc.nodes[0].attributes["a"] = "changed"
    with pytest.raises(TypeError):
        doc.nodes[0].children[0].attributes["b"] = "changed"
    assert repr(doc) == '~HTML[<div a="1"><p b="2">x</p></div>]'


def test_lookup_results_are_read_only():
    result = parse('<p><a href="/x">go</a></p>').fetch("a")
    with pytest.raises(TypeError):
        result.nodes[0].attributes["href"] = "/y"


def test_parsed_elements_are_hashable():
    first = parse('<p a="1">x</p>').nodes[0]
    second = parse('<p a="1">x</p>').nodes[0]
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
