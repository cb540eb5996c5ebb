#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/rules/commonmark.py
"""Built-in rule table producing CommonMark.

:func:`commonmark_rules` returns the default ``converters`` table. Rule
order is priority order. Styles (heading style, bullet marker, code block
style, delimiters, link style) are read from the options at conversion
time, so the same table serves every style.

Tables and ``pre`` blocks without a ``code`` child are not handled here;
the keep rule passes them through as HTML.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from turnmd.constants import HEADING_TAGS, MARKDOWN_INDENT
from turnmd.rules.base import ConversionRule
from turnmd.utils.text import indent_lines, longest_run, strip_outer_newlines

if TYPE_CHECKING:
    from turnmd.dom.node import BaseNode
    from turnmd.options import ConversionOptions

logger = logging.getLogger(__name__)

_LINE_START = re.compile(r"^", re.MULTILINE)
_LEADING_NEWLINES = re.compile(r"^\n+")
_TRAILING_NEWLINES = re.compile(r"\n+$")
_LANGUAGE_CLASS = re.compile(r"language-(\S+)")


def _title_part(node: BaseNode) -> str:
    title = node.get_attribute("title")
    return f' "{title}"' if title else ""


def _paragraph(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return f"\n\n{content}\n\n"


def _line_break(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return options.br + "\n"


def _heading(content: str, node: BaseNode, options: ConversionOptions) -> str:
    level = int(node.tag_name[1])
    if options.heading_style == "setext" and level < 3:
        underline = ("=" if level == 1 else "-") * len(content)
        return f"\n\n{content}\n{underline}\n\n"
    return f"\n\n{'#' * level} {content}\n\n"


def _blockquote(content: str, node: BaseNode, options: ConversionOptions) -> str:
    content = _LINE_START.sub("> ", strip_outer_newlines(content))
    return f"\n\n{content}\n\n"


def _list(content: str, node: BaseNode, options: ConversionOptions) -> str:
    parent = node.parent
    if parent is not None and parent.tag_name == "li" and parent.last_element_child == node:
        return "\n" + content
    return f"\n\n{content}\n\n"


def _list_item_number(node: BaseNode, parent: BaseNode) -> int:
    index = node.index_among_elements()
    start = parent.get_attribute("start")
    if start:
        try:
            return int(start.strip()) + index
        except ValueError:
            logger.debug("Ignoring non-numeric list start %r", start)
    return index + 1


def _list_item(content: str, node: BaseNode, options: ConversionOptions) -> str:
    content = _LEADING_NEWLINES.sub("", content)
    content = _TRAILING_NEWLINES.sub("\n", content)
    content = indent_lines(content, MARKDOWN_INDENT)

    prefix = options.bullet_list_marker + "   "
    parent = node.parent
    if parent is not None and parent.tag_name == "ol":
        prefix = f"{_list_item_number(node, parent)}.  "

    suffix = "\n" if node.next_sibling is not None and not content.endswith("\n") else ""
    return prefix + content + suffix


def _is_code_block(node: BaseNode) -> bool:
    first_child = node.first_child
    return node.tag_name == "pre" and first_child is not None and first_child.tag_name == "code"


def _indented_code_block_filter(node: BaseNode, options: ConversionOptions) -> bool:
    return options.code_block_style == "indented" and _is_code_block(node)


def _indented_code_block(content: str, node: BaseNode, options: ConversionOptions) -> str:
    code = node.first_child.text_content if node.first_child is not None else ""
    return f"\n\n{MARKDOWN_INDENT}{indent_lines(code, MARKDOWN_INDENT)}\n\n"


def _fenced_code_block_filter(node: BaseNode, options: ConversionOptions) -> bool:
    return options.code_block_style == "fenced" and _is_code_block(node)


def _fenced_code_block(content: str, node: BaseNode, options: ConversionOptions) -> str:
    code_node = node.first_child
    code = code_node.text_content if code_node is not None else ""
    if code.endswith("\n"):
        code = code[:-1]

    class_name = (code_node.get_attribute("class") if code_node is not None else None) or ""
    match = _LANGUAGE_CLASS.search(class_name)
    language = match.group(1) if match else ""

    fence = options.fence
    fence_char = fence[0]
    run = longest_run(code, fence_char)
    if run >= len(fence):
        fence = fence_char * (run + 1)

    return f"\n\n{fence}{language}\n{code}\n{fence}\n\n"


def _horizontal_rule(content: str, node: BaseNode, options: ConversionOptions) -> str:
    return f"\n\n{options.hr}\n\n"


def _has_href(node: BaseNode) -> bool:
    return node.tag_name == "a" and bool(node.get_attribute("href"))


def _inline_link_filter(node: BaseNode, options: ConversionOptions) -> bool:
    return options.link_style == "inlined" and _has_href(node)


def _inline_link(content: str, node: BaseNode, options: ConversionOptions) -> str:
    href = node.get_attribute("href") or ""
    return f"[{content}]({href}{_title_part(node)})"


def _reference_link_filter(node: BaseNode, options: ConversionOptions) -> bool:
    return options.link_style == "referenced" and _has_href(node)


class ReferenceLinkCollector:
    """Render reference-style links and collect their definitions.

    Definitions are emitted once, at the end of the output, by
    :meth:`append`, which also clears them for the next conversion.
    """

    def __init__(self) -> None:
        self.references: list[str] = []

    def replacement(self, content: str, node: BaseNode, options: ConversionOptions) -> str:
        href = node.get_attribute("href") or ""
        title = _title_part(node)
        style = options.link_reference_style

        if style == "collapsed":
            replacement = f"[{content}][]"
            reference = f"[{content}]: {href}{title}"
        elif style == "shortcut":
            replacement = f"[{content}]"
            reference = f"[{content}]: {href}{title}"
        else:
            ref_id = len(self.references) + 1
            replacement = f"[{content}][{ref_id}]"
            reference = f"[{ref_id}]: {href}{title}"

        self.references.append(reference)
        return replacement

    def append(self, options: ConversionOptions) -> str:
        if not self.references:
            return ""
        definitions = "\n".join(self.references)
        logger.debug("Emitting %d link reference definition(s)", len(self.references))
        self.references = []
        return f"\n\n{definitions}\n\n"


def _emphasis(content: str, node: BaseNode, options: ConversionOptions) -> str:
    if not content.strip():
        return ""
    return f"{options.em_delimiter}{content}{options.em_delimiter}"


def _strong(content: str, node: BaseNode, options: ConversionOptions) -> str:
    if not content.strip():
        return ""
    return f"{options.strong_delimiter}{content}{options.strong_delimiter}"


def _code_filter(node: BaseNode, options: ConversionOptions) -> bool:
    if node.tag_name != "code":
        return False
    parent = node.parent
    has_siblings = node.previous_sibling is not None or node.next_sibling is not None
    is_code_block = parent is not None and parent.tag_name == "pre" and not has_siblings
    return not is_code_block


def _code(content: str, node: BaseNode, options: ConversionOptions) -> str:
    # Raw text: backslash escapes are literal inside code spans
    code = node.text_content
    if not node.flanking_whitespace.is_empty:
        code = code.strip()
    if not code:
        return ""

    delimiter = "`" * (longest_run(code, "`") + 1)
    padding = " " if code.startswith("`") or code.endswith("`") else ""
    return f"{delimiter}{padding}{code}{padding}{delimiter}"


def _image(content: str, node: BaseNode, options: ConversionOptions) -> str:
    src = node.get_attribute("src") or ""
    if not src:
        return ""
    alt = node.get_attribute("alt") or ""
    return f"![{alt}]({src}{_title_part(node)})"


def commonmark_rules() -> dict[str, ConversionRule]:
    """Return a fresh CommonMark rule table.

    Every call builds new rules, so link definitions collected while
    converting with one table never show up in another.

    Returns
    -------
    dict[str, ConversionRule]
        Rules keyed by name, in priority order

    """
    references = ReferenceLinkCollector()
    rules = [
        ConversionRule(filter="p", replacement=_paragraph, name="paragraph"),
        ConversionRule(filter="br", replacement=_line_break, name="line_break"),
        ConversionRule(filter=list(HEADING_TAGS), replacement=_heading, name="heading"),
        ConversionRule(filter="blockquote", replacement=_blockquote, name="blockquote"),
        ConversionRule(filter=["ul", "ol"], replacement=_list, name="list"),
        ConversionRule(filter="li", replacement=_list_item, name="list_item"),
        ConversionRule(
            filter=_indented_code_block_filter, replacement=_indented_code_block, name="indented_code_block"
        ),
        ConversionRule(filter=_fenced_code_block_filter, replacement=_fenced_code_block, name="fenced_code_block"),
        ConversionRule(filter="hr", replacement=_horizontal_rule, name="horizontal_rule"),
        ConversionRule(filter=_inline_link_filter, replacement=_inline_link, name="inline_link"),
        ConversionRule(
            filter=_reference_link_filter,
            replacement=references.replacement,
            append=references.append,
            name="reference_link",
        ),
        ConversionRule(filter=["em", "i"], replacement=_emphasis, name="emphasis"),
        ConversionRule(filter=["strong", "b"], replacement=_strong, name="strong"),
        ConversionRule(filter=_code_filter, replacement=_code, name="code"),
        ConversionRule(filter="img", replacement=_image, name="image"),
    ]
    return {rule.name: rule for rule in rules}


__all__ = ["commonmark_rules", "ReferenceLinkCollector"]
