"""Dataclasses that model parsed HTML nodes.

The raw forests produced by :mod:`easyhtml.parser` keep attributes as lists of
``(name, value)`` pairs.  Everything else in the package works on the node
classes below, whose attributes are read-only mappings.  The two forms meet
only in :func:`mapify_attributes` and :func:`unmapify_attributes`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple, Union

from .constants import COMMENT_TAG
from .exceptions import UnsupportedNodeShape
from .parser import AttributePairs, RawNode


@dataclass(frozen=True)
class Element:
    """An HTML element with its attributes and children.

    Attributes
    ----------
    tag:
        Tag name.
    attributes:
        Read-only mapping of attribute names to values, in source order.
        Left out of the hash; equal elements still hash equally.
    children:
        Child nodes in document order.
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Freeze the attribute mapping and the children sequence.

        Türkçe: Nitelik eşlemesini ve alt düğüm dizisini değiştirilemez yapar.
        """
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Comment:
    """An HTML comment."""

    text: str


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    value: str


Node = Union[Element, Comment, Text]


def pairs_to_mapping(pairs: Iterable[Tuple[str, str]]) -> Mapping[str, str]:
    """Build a read-only, key-unique mapping from attribute pairs.

    A name keeps the position of its first occurrence and the value of its last
    one, so ``[("a", "1"), ("b", "2"), ("a", "3")]`` becomes
    ``{"a": "3", "b": "2"}``.  Earlier values of a repeated name are dropped.

    Türkçe: Nitelik çiftlerinden salt okunur bir eşleme oluşturur; tekrarlanan
    adlarda son değer geçerlidir.
    """
    return MappingProxyType(dict(pairs))


def mapping_to_pairs(mapping: Mapping[str, str]) -> AttributePairs:
    """Return the attribute pairs of *mapping* in insertion order.

    Türkçe: Eşlemedeki nitelikleri ekleme sırasıyla çiftler halinde döndürür.
    """
    return list(mapping.items())


def mapify_attributes(forest: Iterable[RawNode]) -> List[Node]:
    """Convert a raw forest into nodes with mapping attributes.

    Raises
    ------
    UnsupportedNodeShape
        If *forest* contains something that is not a raw element, comment or
        text.

    Türkçe: Ham ormanı eşleme nitelikli düğümlere dönüştürür.
    """
    return [_mapify(raw) for raw in forest]


def _mapify(raw: RawNode) -> Node:
    """Convert a single raw node, recursing into element children.

    Türkçe: Tek bir ham düğümü alt öğeleriyle birlikte dönüştürür.
    """
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, tuple) and len(raw) == 2 and raw[0] == COMMENT_TAG:
        return Comment(raw[1])
    if isinstance(raw, tuple) and len(raw) == 3:
        tag, pairs, children = raw
        return Element(tag, pairs_to_mapping(pairs), tuple(mapify_attributes(children)))
    raise UnsupportedNodeShape(raw)


def unmapify_attributes(nodes: Iterable[Node]) -> List[RawNode]:
    """Convert nodes back into the raw pair-list form.

    Raises
    ------
    UnsupportedNodeShape
        If *nodes* contains anything but :class:`Element`, :class:`Comment` and
        :class:`Text` instances.

    Türkçe: Düğümleri yeniden ham çift listesi biçimine çevirir.
    """
    return [_unmapify(node) for node in nodes]


def _unmapify(node: Node) -> RawNode:
    """Convert a single node back, recursing into element children.

    Türkçe: Tek bir düğümü alt öğeleriyle birlikte ham biçime çevirir.
    """
    if isinstance(node, Element):
        return (node.tag, mapping_to_pairs(node.attributes), unmapify_attributes(node.children))
    if isinstance(node, Comment):
        return (COMMENT_TAG, node.text)
    if isinstance(node, Text):
        return node.value
    raise UnsupportedNodeShape(node)
