#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/dom/elements.py
"""Tag-name classification shared by the node adapter and whitespace collapse."""

from __future__ import annotations

from turnmd.constants import BLOCK_ELEMENTS, VOID_ELEMENTS


def is_block_name(tag_name: str) -> bool:
    """Return True when ``tag_name`` needs blank-line separation from its siblings."""
    return tag_name.lower() in BLOCK_ELEMENTS


def is_void_name(tag_name: str) -> bool:
    """Return True when ``tag_name`` is an HTML void element (no content, no end tag)."""
    return tag_name.lower() in VOID_ELEMENTS


def is_pre_name(tag_name: str) -> bool:
    return tag_name.lower() == "pre"


__all__ = ["is_block_name", "is_void_name", "is_pre_name"]
