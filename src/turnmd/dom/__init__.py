#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/dom/__init__.py
"""Tree access for the conversion engine.

The engine sees markup only through :class:`BaseNode`. This package ships
the BeautifulSoup adapter, the whitespace normalisation applied to bs4
trees, and the root builder that turns conversion input into a node.
"""

from turnmd.dom.node import BaseNode, FlankingWhitespace, SoupNode
from turnmd.dom.root import build_root, can_convert, parse_fragment
from turnmd.dom.whitespace import collapse_whitespace

__all__ = [
    "BaseNode",
    "FlankingWhitespace",
    "SoupNode",
    "build_root",
    "can_convert",
    "parse_fragment",
    "collapse_whitespace",
]
