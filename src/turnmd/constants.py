#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for turnmd library.

This module centralizes the hardcoded values and default configuration
constants used across the turnmd library.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Conversion Defaults - Default values for ``ConversionOptions``
3. Element Classification - Block, void and blank-exempt tag names
4. Root Wrapper - Names used to wrap string input
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

HeadingStyle = Literal["setext", "atx"]
BulletListMarker = Literal["*", "-", "+"]
CodeBlockStyle = Literal["indented", "fenced"]
EmDelimiter = Literal["_", "*"]
StrongDelimiter = Literal["**", "__"]
LinkStyle = Literal["inlined", "referenced"]
LinkReferenceStyle = Literal["full", "collapsed", "shortcut"]
HtmlParserType = Literal["html.parser", "lxml", "html5lib"]
NodeKind = Literal["text", "element", "document", "other"]

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_HEADING_STYLE: HeadingStyle = "setext"
DEFAULT_HR = "* * *"
DEFAULT_BULLET_LIST_MARKER: BulletListMarker = "*"
DEFAULT_CODE_BLOCK_STYLE: CodeBlockStyle = "indented"
DEFAULT_FENCE = "```"
DEFAULT_EM_DELIMITER: EmDelimiter = "_"
DEFAULT_STRONG_DELIMITER: StrongDelimiter = "**"
DEFAULT_LINK_STYLE: LinkStyle = "inlined"
DEFAULT_LINK_REFERENCE_STYLE: LinkReferenceStyle = "full"
DEFAULT_BR = "  "
DEFAULT_HTML_PARSER: HtmlParserType = "html.parser"

HEADING_STYLES: tuple[str, ...] = ("setext", "atx")
BULLET_LIST_MARKERS: tuple[str, ...] = ("*", "-", "+")
CODE_BLOCK_STYLES: tuple[str, ...] = ("indented", "fenced")
EM_DELIMITERS: tuple[str, ...] = ("_", "*")
STRONG_DELIMITERS: tuple[str, ...] = ("**", "__")
LINK_STYLES: tuple[str, ...] = ("inlined", "referenced")
LINK_REFERENCE_STYLES: tuple[str, ...] = ("full", "collapsed", "shortcut")
HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# Minimum run of fence characters for a fenced code block
MIN_FENCE_LENGTH = 3

# Indent applied to list item continuation lines and indented code blocks
MARKDOWN_INDENT = "    "

# =============================================================================
# Element Classification
# =============================================================================

BLOCK_ELEMENTS: frozenset[str] = frozenset(
    {
        "address",
        "article",
        "aside",
        "audio",
        "blockquote",
        "body",
        "canvas",
        "center",
        "dd",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "frameset",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "html",
        "isindex",
        "li",
        "main",
        "menu",
        "nav",
        "noframes",
        "noscript",
        "ol",
        "output",
        "p",
        "pre",
        "section",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "ul",
    }
)

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements that are never considered blank even without text content
BLANK_EXEMPT_ELEMENTS: frozenset[str] = frozenset({"a", "th", "td"})

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

# =============================================================================
# Root Wrapper
# =============================================================================

ROOT_TAG_NAME = "x-turnmd"
ROOT_ELEMENT_ID = "turnmd-root"

# Environment variable prefix for CLI defaults
ENV_VAR_PREFIX = "TURNMD_"
