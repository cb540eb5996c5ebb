#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/api.py
"""Convenience functions for one-off conversions."""

from __future__ import annotations

import logging
from typing import Any

from turnmd.converter import MarkdownConverter
from turnmd.options import ConversionOptions

logger = logging.getLogger(__name__)


def convert(source: Any, options: ConversionOptions | None = None, **kwargs: Any) -> str:
    """Convert HTML to Markdown.

    Parameters
    ----------
    source : str, bs4.Tag, bs4.BeautifulSoup or BaseNode
        HTML markup, or an element, document or fragment node. Trees are
        copied, never modified.
    options : ConversionOptions, optional
        Pre-configured conversion options
    **kwargs
        Individual option fields (``heading_style="atx"``, ...) applied on
        top of ``options``

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    InvalidInputError
        If ``source`` cannot be converted
    ValidationError
        If an option name or value is invalid
    ConfigurationError
        If a rule is malformed
    DependencyError
        If the requested tree builder is not installed

    Examples
    --------
        >>> convert("<p>Hello <strong>world</strong></p>")
        'Hello **world**'
        >>> convert("<ul><li>one</li></ul>", bullet_list_marker="-")
        '-   one'

    """
    if kwargs:
        logger.debug("Applying option overrides: %s", sorted(kwargs))
    return MarkdownConverter(options, **kwargs).convert(source)


html_to_markdown = convert

__all__ = ["convert", "html_to_markdown"]
