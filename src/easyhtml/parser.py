"""Bridge between easyhtml and BeautifulSoup.

Türkçe: easyhtml ile BeautifulSoup arasındaki köprü.

Everything that touches :mod:`bs4` or :mod:`soupsieve` lives here.  The three
public helpers mirror the small API the rest of the package needs from an HTML
library:

* :func:`parse_document` turns markup into a forest of *raw* nodes,
* :func:`find` runs a CSS selector over a raw forest,
* :func:`extract_text` flattens a raw forest to plain text.

Raw nodes are plain tuples so that the rest of the package never has to know
about BeautifulSoup objects:

``(tag, [(name, value), ...], [children])``
    an element; attributes are kept as a list of pairs, in source order, and an
    attribute repeated in the markup shows up once per occurrence,
``("#comment", text)``
    a comment,
``str``
    a text node.
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import soupsieve
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)
from bs4.builder import ParserRejectedMarkup

from .constants import COMMENT_TAG, TREE_BUILDER
from .exceptions import ParseError, SelectorError, UnsupportedNodeShape

LOGGER = logging.getLogger(__name__)

AttributePairs = List[Tuple[str, str]]
RawNode = Union[Tuple[str, AttributePairs, List[Any]], Tuple[str, str], str]


class _RepeatedValue(list):
    """Every value seen for an attribute that occurs more than once on a tag."""


def _collect_duplicate(attrs: Dict[str, Any], key: str, value: str) -> None:
    """Keep all values of a repeated attribute instead of replacing them.

    Türkçe: Tekrarlanan bir niteliğin tüm değerlerini saklar.
    """
    current = attrs[key]
    if not isinstance(current, _RepeatedValue):
        current = attrs[key] = _RepeatedValue([current])
    current.append(value)


def _new_soup(markup: Union[str, bytes] = "") -> BeautifulSoup:
    """Create a soup with the settings shared by every parse.

    ``class`` and friends stay plain strings and repeated attributes are kept.

    Türkçe: Tüm ayrıştırmalarda ortak ayarlarla bir soup nesnesi oluşturur.
    """
    return BeautifulSoup(
        markup,
        TREE_BUILDER,
        multi_valued_attributes=None,
        on_duplicate_attribute=_collect_duplicate,
    )


# ---------------------------------------------------------------------------
# BeautifulSoup -> raw nodes
# ---------------------------------------------------------------------------

def _attribute_pairs(tag: Tag) -> AttributePairs:
    """List the attributes of ``tag`` as pairs, expanding repeated ones.

    Türkçe: Etiketin niteliklerini çiftler halinde listeler.
    """
    pairs: AttributePairs = []
    for name, value in tag.attrs.items():
        if isinstance(value, _RepeatedValue):
            pairs.extend((name, item) for item in value)
        else:
            pairs.append((name, value))
    return pairs


def _from_soup(element: PageElement) -> Optional[RawNode]:
    """Convert a BeautifulSoup element into a raw node.

    Returns ``None`` for markup constructs that have no raw counterpart, such as
    doctypes and processing instructions.

    Türkçe: BeautifulSoup öğesini ham düğüme dönüştürür; karşılığı olmayan
    yapılar için ``None`` döndürür.
    """
    if isinstance(element, Tag):
        return (element.name, _attribute_pairs(element), _from_soup_list(element.contents))
    if isinstance(element, Comment):
        return (COMMENT_TAG, str(element))
    if isinstance(element, (Declaration, Doctype, ProcessingInstruction)):
        LOGGER.debug("Skipping %s: %r", type(element).__name__, str(element))
        return None
    if isinstance(element, NavigableString):
        return str(element)
    raise UnsupportedNodeShape(element)


def _from_soup_list(elements: List[PageElement]) -> List[RawNode]:
    """Convert sibling elements, leaving out the skipped ones.

    Türkçe: Kardeş öğeleri dönüştürür; atlananları listeye eklemez.
    """
    forest: List[RawNode] = []
    for element in elements:
        raw = _from_soup(element)
        if raw is not None:
            forest.append(raw)
    return forest


# ---------------------------------------------------------------------------
# raw nodes -> BeautifulSoup
# ---------------------------------------------------------------------------

def _to_soup(
    soup: BeautifulSoup, raw: RawNode, container: Type[NavigableString] = NavigableString
) -> PageElement:
    """Rebuild ``raw`` as a BeautifulSoup element owned by ``soup``.

    Text is created with ``container``, the string class the tree builder uses
    inside the enclosing tag (``Script`` inside ``<script>`` and so on), so that
    ``get_text`` treats rebuilt trees the way it treats parsed ones.

    Türkçe: Ham düğümü ``soup`` içinde yeniden BeautifulSoup öğesine çevirir.
    """
    if isinstance(raw, str):
        return soup.new_string(raw, container)
    if isinstance(raw, tuple) and len(raw) == 2 and raw[0] == COMMENT_TAG:
        return soup.new_string(raw[1], Comment)
    if isinstance(raw, tuple) and len(raw) == 3:
        tag_name, pairs, children = raw
        # BeautifulSoup keeps one value per attribute name; the last one wins.
        tag = soup.new_tag(tag_name, attrs=dict(pairs))
        inner = soup.builder.string_containers.get(tag_name, container)
        for child in children:
            tag.append(_to_soup(soup, child, inner))
        return tag
    raise UnsupportedNodeShape(raw)


def _build_soup(forest: List[RawNode]) -> BeautifulSoup:
    """Rebuild a raw forest as a fresh soup.

    Türkçe: Ham ormanı yeni bir soup nesnesi olarak yeniden kurar.
    """
    soup = _new_soup()
    for raw in forest:
        soup.append(_to_soup(soup, raw))
    return soup


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def parse_document(html: Union[str, bytes]) -> List[RawNode]:
    """Parse *html* into a forest of raw nodes.

    Parameters
    ----------
    html:
        Markup of any well-formedness.  ``bytes`` are decoded by
        BeautifulSoup's encoding detection.

    Returns
    -------
    list
        The top-level raw nodes in document order.

    Raises
    ------
    ParseError
        If the input is not markup or the tree builder rejects it.

    Türkçe: Verilen HTML'yi ham düğüm ormanına dönüştürür.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"expected str or bytes, got {type(html).__name__}")
    try:
        with warnings.catch_warnings():
            # Short fragments such as "index.html" are markup here, not filenames.
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = _new_soup(html)
    except ParserRejectedMarkup as exc:
        LOGGER.debug("Parser rejected markup", exc_info=True)
        raise ParseError(str(exc)) from exc
    forest = _from_soup_list(soup.contents)
    LOGGER.debug("Parsed %d top-level nodes", len(forest))
    return forest


def find(forest: List[RawNode], selector: str) -> List[RawNode]:
    """Return every node in *forest* matching the CSS *selector*.

    Top-level nodes are candidates too.  Matches come back in document order
    and nested matches are all included.

    Türkçe: Ormanda CSS seçicisiyle eşleşen tüm düğümleri döndürür.
    """
    soup = _build_soup(forest)
    try:
        matches = soup.select(selector)
    except soupsieve.SelectorSyntaxError as exc:
        LOGGER.debug("Invalid selector %r", selector, exc_info=True)
        raise SelectorError(selector, str(exc)) from exc
    LOGGER.debug("Selector %r matched %d nodes", selector, len(matches))
    return [_from_soup(match) for match in matches]


def extract_text(forest: List[RawNode], separator: str = "", strip: bool = False) -> str:
    """Concatenate the text of *forest*.

    Comments and the contents of ``<script>``, ``<style>`` and ``<template>``
    are left out, as BeautifulSoup does for parsed markup.

    Türkçe: Ormandaki metinleri yorumlar hariç birleştirir.
    """
    return _build_soup(forest).get_text(separator, strip)
