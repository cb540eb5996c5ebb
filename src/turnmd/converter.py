#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/converter.py
"""HTML-to-Markdown conversion engine.

:class:`MarkdownConverter` reduces a node tree to a single Markdown string.
Text nodes are escaped, element nodes are handed to the rule chosen by
:func:`~turnmd.rules.selector.select_rule`, and the fragments are merged
left to right with :func:`~turnmd.utils.text.join_fragments` so that
block-level spacing never exceeds one blank line.

The traversal keeps its own stack of in-progress elements instead of
recursing, so documents nested deeper than the interpreter recursion limit
still convert.

Examples
--------
    >>> converter = MarkdownConverter(heading_style="atx")
    >>> converter.convert("<h1>Title</h1><p>Some <em>text</em></p>")
    '# Title\\n\\nSome _text_'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from turnmd.dom.node import BaseNode
from turnmd.dom.root import build_root, can_convert
from turnmd.exceptions import InvalidInputError
from turnmd.options import ConversionOptions
from turnmd.rules.selector import select_rule
from turnmd.utils.escape import escape_markdown
from turnmd.utils.text import join_fragments, trim_output

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """An element whose children are still being converted."""

    node: BaseNode
    rule: Any
    children: list[BaseNode]
    index: int = 0
    output: str = ""


class MarkdownConverter:
    """Convert HTML strings and trees to Markdown.

    Parameters
    ----------
    options : ConversionOptions, optional
        Conversion configuration. Defaults to ``ConversionOptions()``.
    **overrides
        Option fields applied on top of ``options``. camelCase names
        such as ``headingStyle`` are accepted too.

    Raises
    ------
    ValidationError
        If an override names an unknown option or has an invalid value

    Notes
    -----
    A converter holds no per-call state of its own, but the default rule
    table collects reference-style links between ``replacement`` and
    ``append``. Use one converter per thread when ``link_style`` is
    ``"referenced"``.

    """

    def __init__(self, options: ConversionOptions | None = None, **overrides: Any):
        if options is None:
            options = ConversionOptions()
        if overrides:
            options = options.create_updated(**ConversionOptions.normalize_keys(overrides))
        self.options = options

    def convert(self, source: Any) -> str:
        """Convert ``source`` to Markdown.

        Parameters
        ----------
        source : str, bs4.Tag, bs4.BeautifulSoup or BaseNode
            HTML markup, or an element, document or fragment node

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        InvalidInputError
            If ``source`` is not a string or an element/document node
        ConfigurationError
            If a rule filter has an unsupported shape
        DependencyError
            If the configured tree builder is not installed

        """
        if not can_convert(source):
            raise InvalidInputError(source)
        if isinstance(source, str) and not source:
            return ""

        root = build_root(source, self.options.html_parser)
        logger.debug("Converting %r", root)
        try:
            output = self.process(root)
        except Exception:
            self._discard_appends()
            raise
        return self.post_process(output)

    def process(self, node: BaseNode) -> str:
        """Reduce the children of ``node`` to a Markdown string.

        Text children are escaped, element children replaced by their rule,
        and anything else (comments, doctypes) ignored.
        """
        stack = [_Frame(node=node, rule=None, children=node.children)]
        while True:
            frame = stack[-1]
            if frame.index < len(frame.children):
                child = frame.children[frame.index]
                frame.index += 1
                if child.is_text:
                    frame.output = join_fragments(frame.output, self.escape(child.text_value))
                elif child.is_element:
                    stack.append(_Frame(node=child, rule=self.rule_for_node(child), children=child.children))
                continue

            stack.pop()
            if not stack:
                return frame.output
            replacement = self._apply_rule(frame.rule, frame.node, frame.output)
            stack[-1].output = join_fragments(stack[-1].output, replacement)

    def replacement_for_node(self, node: BaseNode) -> str:
        """Return the Markdown for a single element, flanking whitespace included."""
        rule = self.rule_for_node(node)
        return self._apply_rule(rule, node, self.process(node))

    def _apply_rule(self, rule: Any, node: BaseNode, content: str) -> str:
        whitespace = node.flanking_whitespace
        if not whitespace.is_empty:
            content = content.strip()
        return whitespace.leading + rule.replacement(content, node, self.options) + whitespace.trailing

    def rule_for_node(self, node: BaseNode) -> Any:
        """Return the rule that converts ``node``."""
        return select_rule(node, self.options)

    def escape(self, text: str) -> str:
        """Backslash-escape Markdown syntax in a literal text run."""
        return escape_markdown(text)

    def post_process(self, output: str) -> str:
        """Add every rule's ``append`` output, in table order, and trim the result."""
        for key, rule in self.options.converters.items():
            append = getattr(rule, "append", None)
            if append is None:
                continue
            addition = append(self.options)
            if addition:
                logger.debug("Rule '%s' appended %d characters", key, len(addition))
            output = join_fragments(output, addition)
        return trim_output(output)

    def _discard_appends(self) -> None:
        # Drain state collected for a failed conversion, e.g. link references
        for rule in self.options.converters.values():
            append = getattr(rule, "append", None)
            if append is not None:
                append(self.options)


__all__ = ["MarkdownConverter"]
