"""Shared configuration constants for the easyhtml package."""

from __future__ import annotations


# BeautifulSoup tree builder used for every parse and every rebuilt tree.
TREE_BUILDER = "html.parser"

# Marker used as the first item of a raw comment tuple.
COMMENT_TAG = "#comment"

# Pretty-printer defaults
DOCUMENT_OPEN = "~HTML["
DOCUMENT_CLOSE = "]"
DEFAULT_WIDTH = 80
DEFAULT_INDENT = 2
