#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/dom/root.py
"""Build the root node a conversion starts from.

String input is parsed by BeautifulSoup inside a wrapper element so that
fragments, full documents and plain text all end up under one element.
Tree input is deep-copied, so a conversion never mutates the caller's
tree. bs4 trees then have their whitespace collapsed.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag
from bs4.exceptions import FeatureNotFound

from turnmd.constants import DEFAULT_HTML_PARSER, ROOT_ELEMENT_ID, ROOT_TAG_NAME
from turnmd.dom.node import BaseNode, SoupNode
from turnmd.dom.whitespace import collapse_whitespace
from turnmd.exceptions import DependencyError, InvalidInputError

logger = logging.getLogger(__name__)


def can_convert(value: Any) -> bool:
    """Return True for strings and element, document or fragment nodes.

    bs4 text nodes are ``str`` subclasses but are not convertible.
    """
    if isinstance(value, PageElement):
        return isinstance(value, Tag)
    if isinstance(value, str):
        return True
    if isinstance(value, SoupNode):
        return isinstance(value.element, Tag)
    if isinstance(value, BaseNode):
        return value.kind in ("element", "document")
    return False


def parse_fragment(markup: str, html_parser: str = DEFAULT_HTML_PARSER) -> Tag:
    """Parse ``markup`` and return the wrapper element holding it.

    Parameters
    ----------
    markup : str
        HTML document, fragment or plain text
    html_parser : str, default "html.parser"
        bs4 tree builder name

    Returns
    -------
    bs4.element.Tag
        The ``x-turnmd`` wrapper element

    Raises
    ------
    DependencyError
        If the requested tree builder is not installed

    """
    wrapped = f'<{ROOT_TAG_NAME} id="{ROOT_ELEMENT_ID}">{markup}</{ROOT_TAG_NAME}>'
    try:
        soup = BeautifulSoup(wrapped, html_parser)
    except FeatureNotFound as e:
        raise DependencyError(
            f"HTML tree builder '{html_parser}' is not available: {e}",
            missing_packages=[html_parser] if html_parser != DEFAULT_HTML_PARSER else [],
            original_error=e,
        ) from e

    root = soup.find(ROOT_TAG_NAME, attrs={"id": ROOT_ELEMENT_ID})
    if not isinstance(root, Tag):
        # Some builders relocate unknown elements; fall back to the document
        return soup
    return root


def build_root(value: Any, html_parser: str = DEFAULT_HTML_PARSER) -> BaseNode:
    """Return the node conversion starts from.

    Parameters
    ----------
    value : str, bs4 Tag/BeautifulSoup, or BaseNode
        Conversion input
    html_parser : str, default "html.parser"
        bs4 tree builder used for string input

    Returns
    -------
    BaseNode
        Root node whose children are converted

    Raises
    ------
    InvalidInputError
        If ``value`` is not convertible

    """
    if not can_convert(value):
        raise InvalidInputError(value)

    if isinstance(value, SoupNode):
        value = value.element

    if isinstance(value, Tag):
        logger.debug("Copying %s input <%s>", type(value).__name__, value.name)
        root = copy.copy(value)
    elif isinstance(value, BaseNode):
        logger.debug("Using %s input as-is", type(value).__name__)
        return value
    else:
        logger.debug("Parsing %d characters with %s", len(value), html_parser)
        root = parse_fragment(value, html_parser)

    collapse_whitespace(root)
    return SoupNode(root)


__all__ = ["can_convert", "parse_fragment", "build_root"]
