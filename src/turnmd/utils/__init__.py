#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/utils/__init__.py
"""Utility modules for turnmd package.

This package contains the text-level helpers used by the conversion engine:
Markdown escaping of literal text and newline-aware joining of fragments.
"""

from turnmd.utils.escape import escape_markdown
from turnmd.utils.text import join_fragments, separating_newlines, trim_output

__all__ = [
    "escape_markdown",
    "join_fragments",
    "separating_newlines",
    "trim_output",
]
