"""Parse, query, print and flatten HTML with BeautifulSoup underneath.

>>> import easyhtml
>>> doc = easyhtml.parse("<p>Hello, <em>world</em>!</p>")
>>> doc["em"]
~HTML[<em>world</em>]
>>> str(doc)
'Hello, world!'
"""

from .document import NOT_FOUND, Document, NotFoundType, lookup, parse, render_text
from .exceptions import (
    EasyHTMLError,
    ParseError,
    SelectorError,
    SelectorNotFound,
    UnsupportedNodeShape,
)
from .models import Comment, Element, Node, Text
from .pretty import pretty_print

__all__ = [
    "Comment",
    "Document",
    "EasyHTMLError",
    "Element",
    "NOT_FOUND",
    "Node",
    "NotFoundType",
    "ParseError",
    "SelectorError",
    "SelectorNotFound",
    "Text",
    "UnsupportedNodeShape",
    "lookup",
    "parse",
    "pretty_print",
    "render_text",
]
