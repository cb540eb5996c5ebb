#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/rules/selector.py
"""Pick the conversion rule for a node.

Priority, highest first:

1. ``keep_rule`` when its filter matches
2. ``remove_rule`` when its filter matches
3. ``blank_rule`` when the node is blank
4. the first custom rule, in table order, whose filter matches
5. ``default_rule``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from turnmd.rules.base import coerce_filter

if TYPE_CHECKING:
    from turnmd.dom.node import BaseNode
    from turnmd.options import ConversionOptions

logger = logging.getLogger(__name__)


def filter_matches(rule: Any, node: BaseNode, options: ConversionOptions) -> bool:
    """Return whether ``rule``'s filter accepts ``node``.

    Raises
    ------
    ConfigurationError
        If the rule's filter is not a tag name, a collection of tag names
        or a callable

    """
    rule_filter = coerce_filter(getattr(rule, "filter", None), getattr(rule, "name", None))
    return rule_filter.matches(node, options)


def select_rule(node: BaseNode, options: ConversionOptions) -> Any:
    """Return the rule that converts ``node``.

    Parameters
    ----------
    node : BaseNode
        Element being converted
    options : ConversionOptions
        Supplies the rule table and the four special rules

    Returns
    -------
    ConversionRule
        The selected rule

    """
    if filter_matches(options.keep_rule, node, options):
        rule, label = options.keep_rule, "keep"
    elif filter_matches(options.remove_rule, node, options):
        rule, label = options.remove_rule, "remove"
    elif node.is_blank:
        rule, label = options.blank_rule, "blank"
    else:
        rule, label = options.default_rule, "default"
        for key, candidate in options.converters.items():
            if filter_matches(candidate, node, options):
                rule, label = candidate, key
                break

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Selected rule '%s' for <%s>", label, node.tag_name)
    return rule


__all__ = ["filter_matches", "select_rule"]
