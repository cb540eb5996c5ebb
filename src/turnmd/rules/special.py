#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/rules/special.py
"""The four rules every conversion carries besides the rule table.

- ``blank_rule`` renders nodes with no content
- ``default_rule`` renders elements no other rule claims
- ``keep_rule`` passes elements through as HTML
- ``remove_rule`` drops elements entirely

Each factory returns a new rule; override them through
``ConversionOptions``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from turnmd.rules.base import ConversionRule

if TYPE_CHECKING:
    from turnmd.dom.node import BaseNode
    from turnmd.options import ConversionOptions


def _blank_replacement(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return "\n\n" if node.is_block else ""


def _default_replacement(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return f"\n\n{content}\n\n" if node.is_block else content


def _keep_filter(node: BaseNode, options: ConversionOptions) -> bool:
    if node.tag_name == "table":
        return True
    if node.tag_name == "pre":
        first_child = node.first_child
        return first_child is not None and first_child.tag_name != "code"
    return False


def _keep_replacement(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return f"\n\n{node.outer_html}\n\n" if node.is_block else node.outer_html


def _remove_replacement(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return ""


def blank_rule() -> ConversionRule:
    return ConversionRule(filter=None, replacement=_blank_replacement, name="blank")


def default_rule() -> ConversionRule:
    return ConversionRule(filter=None, replacement=_default_replacement, name="default")


def keep_rule() -> ConversionRule:
    """Keep tables, and ``pre`` blocks not wrapping ``code``, as raw HTML."""
    return ConversionRule(filter=_keep_filter, replacement=_keep_replacement, name="keep")


def remove_rule() -> ConversionRule:
    """Drop ``head`` and ``script`` elements."""
    return ConversionRule(filter=["head", "script"], replacement=_remove_replacement, name="remove")


__all__ = ["blank_rule", "default_rule", "keep_rule", "remove_rule"]
