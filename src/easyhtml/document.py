"""The :class:`Document` wrapper and its module level operations."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Tuple, TypeVar, Union

from .constants import DEFAULT_INDENT, DEFAULT_WIDTH
from .exceptions import SelectorNotFound
from .models import Node, mapify_attributes, unmapify_attributes
from .parser import extract_text, find, parse_document
from .pretty import pretty_print

LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class NotFoundType:
    """Type of :data:`NOT_FOUND`, the result of a lookup that matched nothing.

    Türkçe: Hiçbir düğümle eşleşmeyen aramanın sonucunu temsil eder.
    """

    _instance = None

    def __new__(cls) -> "NotFoundType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFoundType()


class Document:
    """An immutable sequence of parsed HTML nodes.

    >>> doc = Document.parse("<p>Hello, <em>world</em>!</p>")
    >>> doc
    ~HTML[<p>Hello, <em>world</em>!</p>]
    >>> doc["em"]
    ~HTML[<em>world</em>]
    >>> str(doc)
    'Hello, world!'
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: Tuple[Node, ...] = tuple(nodes)

    @classmethod
    def parse(cls, html: Union[str, bytes]) -> "Document":
        """Parse *html* into a document.

        Türkçe: Verilen HTML'yi ayrıştırıp yeni bir belge döndürür.
        """
        return cls(mapify_attributes(parse_document(html)))

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Top-level nodes in document order."""
        return self._nodes

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def fetch(self, selector: str) -> Union["Document", NotFoundType]:
        """Return the nodes matching *selector* or :data:`NOT_FOUND`.

        The nodes of this document are candidates themselves, so fetching the
        same tag selector twice gives the same result, while a selector relying
        on ancestors that were not matched (``"p em"``) finds nothing the second
        time.

        Türkçe: Seçiciyle eşleşen düğümleri yeni bir belge olarak döndürür;
        eşleşme yoksa :data:`NOT_FOUND` verir.
        """
        matches = find(unmapify_attributes(self._nodes), selector)
        if not matches:
            LOGGER.debug("Nothing matches %r", selector)
            return NOT_FOUND
        return type(self)(mapify_attributes(matches))

    def get(self, selector: str, default: _T = None) -> Union["Document", _T]:
        """Return the nodes matching *selector* or *default*.

        Türkçe: Eşleşen düğümleri, yoksa varsayılan değeri döndürür.
        """
        result = self.fetch(selector)
        return default if result is NOT_FOUND else result

    def __getitem__(self, selector: str) -> "Document":
        result = self.fetch(selector)
        if result is NOT_FOUND:
            raise SelectorNotFound(selector)
        return result

    def __contains__(self, selector: object) -> bool:
        return isinstance(selector, str) and self.fetch(selector) is not NOT_FOUND

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def text(self, separator: str = "", strip: bool = False) -> str:
        """Return the text content of every node.

        Comments and script or style contents are excluded.

        Türkçe: Tüm düğümlerin metin içeriğini döndürür.
        """
        return extract_text(unmapify_attributes(self._nodes), separator, strip)

    def pretty(self, width: int = DEFAULT_WIDTH, indent: int = DEFAULT_INDENT) -> str:
        """Return the ``~HTML[...]`` debugging representation."""
        return pretty_print(self, width, indent)

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return self.pretty()

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._nodes == other._nodes


def parse(html: Union[str, bytes]) -> Document:
    """Parse *html* into a :class:`Document`.

    Raises
    ------
    ParseError
        If the parser rejects the input.
    """
    return Document.parse(html)


def lookup(document: Document, selector: str) -> Union[Document, NotFoundType]:
    """Return a new document with the nodes matching *selector*.

    Returns :data:`NOT_FOUND` when nothing matches.

    Raises
    ------
    SelectorError
        If *selector* is not valid CSS.
    """
    return document.fetch(selector)


def render_text(document: Document, separator: str = "", strip: bool = False) -> str:
    """Return the text content of *document*."""
    return document.text(separator, strip)
