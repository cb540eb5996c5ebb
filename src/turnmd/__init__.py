"""turnmd - convert HTML to Markdown with an ordered, pluggable rule table.

turnmd walks an HTML tree and replaces every element with the Markdown
produced by the first matching conversion rule. Literal text is escaped
so that it never turns into Markdown syntax, and block-level output is
joined with at most one blank line between fragments.

Key Features
------------
- CommonMark output with configurable heading, list, code block,
  emphasis and link styles
- Custom rules: tag names, tag sets or predicates paired with a
  replacement function
- Tables and unrecognised ``pre`` blocks kept as raw HTML
- Accepts markup strings or BeautifulSoup trees (never modified)
- Iterative traversal, safe for very deeply nested documents

Requirements
------------
- Python 3.10+
- beautifulsoup4

Examples
--------
Basic usage:

    >>> from turnmd import convert
    >>> convert("<h2>Notes</h2><ul><li>first</li><li>second</li></ul>", heading_style="atx")
    '## Notes\\n\\n*   first\\n*   second'

Adding a rule:

    >>> from turnmd import ConversionOptions, ConversionRule, MarkdownConverter, commonmark_rules
    >>> strike = ConversionRule(filter=["del", "s"], replacement=lambda content, node, options: f"~~{content}~~")
    >>> options = ConversionOptions(converters={"strikethrough": strike, **commonmark_rules()})
    >>> MarkdownConverter(options).convert("<p><del>old</del> new</p>")
    '~~old~~ new'

See Also
--------
turnmd.rules : rule types and the built-in rule tables
turnmd.dom : node adapter and root construction

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "turnmd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from turnmd.api import convert, html_to_markdown
from turnmd.converter import MarkdownConverter
from turnmd.dom import BaseNode, SoupNode
from turnmd.exceptions import (
    ConfigurationError,
    DependencyError,
    InvalidInputError,
    TurnmdError,
    ValidationError,
)
from turnmd.options import ConversionOptions
from turnmd.rules import (
    ConversionRule,
    ExactTag,
    Predicate,
    TagSet,
    commonmark_rules,
)
from turnmd.utils import escape_markdown

__all__ = [
    "__version__",
    "convert",
    "html_to_markdown",
    "MarkdownConverter",
    "ConversionOptions",
    "ConversionRule",
    "ExactTag",
    "TagSet",
    "Predicate",
    "commonmark_rules",
    "escape_markdown",
    "BaseNode",
    "SoupNode",
    "TurnmdError",
    "ValidationError",
    "InvalidInputError",
    "ConfigurationError",
    "DependencyError",
]
