"""Human readable rendering of documents.

Türkçe: Belgelerin okunabilir biçimde yazdırılması.

The output looks like HTML but is wrapped in ``~HTML[...]`` so it is never
mistaken for real markup.  Two layouts are used:

* inside an element the children are either all on the element's line or each
  on a line of its own, indented one level deeper,
* the top-level nodes are packed onto as few lines as the width allows.

Attribute values are written exactly as they are stored, without escaping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from .constants import DEFAULT_INDENT, DEFAULT_WIDTH, DOCUMENT_CLOSE, DOCUMENT_OPEN
from .exceptions import UnsupportedNodeShape
from .models import Comment, Element, Node, Text

if TYPE_CHECKING:
    from .document import Document


def _open_tag(element: Element) -> str:
    """Render the opening tag with its attributes, values unescaped.

    Türkçe: Açılış etiketini nitelikleriyle birlikte yazar.
    """
    attributes = "".join(f' {name}="{value}"' for name, value in element.attributes.items())
    return f"<{element.tag}{attributes}>"


def _close_tag(element: Element) -> str:
    """Render the closing tag.

    Türkçe: Kapanış etiketini yazar.
    """
    return f"</{element.tag}>"


def _flat(node: Node) -> str:
    """Render *node* on a single line.

    Türkçe: Düğümü tek satırda yazar.
    """
    if isinstance(node, Element):
        inner = "".join(_flat(child) for child in node.children)
        return f"{_open_tag(node)}{inner}{_close_tag(node)}"
    if isinstance(node, Comment):
        return f"<!-- {node.text} -->"
    if isinstance(node, Text):
        return node.value
    raise UnsupportedNodeShape(node)


def _is_blank(node: Node) -> bool:
    """Tell whether *node* is whitespace-only text.

    Such text between tags is replaced by the line breaks of a broken layout.

    Türkçe: Düğümün yalnızca boşluktan oluşan metin olup olmadığını söyler.
    """
    return isinstance(node, Text) and not node.value.strip()


class _Layout:
    """Line breaking state for one rendering."""

    def __init__(self, width: int, indent: int) -> None:
        """Store the preferred line width and the indentation step.

        Türkçe: Satır genişliğini ve girinti adımını saklar.
        """
        self.width = width
        self.indent = indent

    def node(self, node: Node, column: int, margin: int) -> List[str]:
        """Lay out *node* starting at *column*.

        The first returned line carries no indentation since the caller already
        positioned it; the following lines are indented from *margin*.

        Türkçe: Düğümü verilen sütundan başlayarak satırlara yerleştirir.
        """
        flat = _flat(node)
        if not isinstance(node, Element) or not node.children or column + len(flat) <= self.width:
            return [flat]
        inner = margin + self.indent
        padding = " " * inner
        lines = [_open_tag(node)]
        for child in node.children:
            if _is_blank(child):
                continue
            child_lines = self.node(child, inner, inner)
            lines.append(padding + child_lines[0])
            lines.extend(child_lines[1:])
        lines.append(" " * margin + _close_tag(node))
        return lines

    def document(self, nodes: Iterable[Node]) -> str:
        """Lay out the top-level *nodes* inside the document markers.

        The markers share a line with the nodes only when everything fits on
        one line; otherwise each marker gets a line of its own.

        Türkçe: Üst düzey düğümleri belge işaretleri arasında yerleştirir.
        """
        nodes = list(nodes)
        flat = DOCUMENT_OPEN + "".join(_flat(node) for node in nodes) + DOCUMENT_CLOSE
        if len(flat) <= self.width:
            return flat

        padding = " " * self.indent
        lines = [DOCUMENT_OPEN]
        current = ""
        for node in nodes:
            if _is_blank(node):
                continue
            piece = _flat(node)
            if current and len(padding) + len(current) + len(piece) > self.width:
                lines.append(padding + current)
                current = ""
            if len(padding) + len(current) + len(piece) <= self.width:
                current += piece
                continue
            block = self.node(node, len(padding) + len(current), self.indent)
            current += block[0]
            if len(block) > 1:
                lines.append(padding + current)
                lines.extend(block[1:-1])
                # Later siblings may continue after the closing tag.
                current = block[-1][len(padding):]
        if current:
            lines.append(padding + current)
        lines.append(DOCUMENT_CLOSE)
        return "\n".join(lines)


def format_nodes(
    nodes: Iterable[Node], width: int = DEFAULT_WIDTH, indent: int = DEFAULT_INDENT
) -> str:
    """Render a node sequence wrapped in the document markers.

    Raises
    ------
    UnsupportedNodeShape
        If any node is not an :class:`Element`, :class:`Comment` or
        :class:`Text`.
    """
    return _Layout(width, indent).document(nodes)


def pretty_print(
    document: "Document", width: int = DEFAULT_WIDTH, indent: int = DEFAULT_INDENT
) -> str:
    """Return the debugging representation of *document*.

    Parameters
    ----------
    document:
        The document to render.
    width:
        Preferred maximum line length.  Lines only exceed it when a single
        text node, comment or childless element is longer.
    indent:
        Number of spaces per nesting level.

    Notes
    -----
    Text is written verbatim, with one exception: once an element (or the
    document itself) is spread over several lines, its whitespace-only text
    children are left out, since the line breaks stand in for them.  A
    rendering that fits on one line keeps them.

    Türkçe: Belgenin hata ayıklama amaçlı gösterimini döndürür.
    """
    return format_nodes(document.nodes, width, indent)
