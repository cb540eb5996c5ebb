#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/dom/whitespace.py
"""Collapse insignificant whitespace in a BeautifulSoup tree.

Browsers render runs of spaces, tabs and newlines in ordinary text as a
single space, and drop whitespace next to block boundaries. Markdown is
whitespace-sensitive, so the tree is normalised the same way before
conversion. Text inside ``pre`` is left untouched.

The tree is modified in place.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Literal

from bs4.element import CData, NavigableString, PageElement, PreformattedString, Tag

from turnmd.dom.elements import is_block_name, is_pre_name, is_void_name

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"[ \r\n\t]+")

WalkEvent = Literal["enter", "exit"]


def _is_text(element: PageElement) -> bool:
    if isinstance(element, CData):
        return True
    return isinstance(element, NavigableString) and not isinstance(element, PreformattedString)


def _is_pre(element: PageElement) -> bool:
    return isinstance(element, Tag) and is_pre_name(element.name or "")


def _walk(root: Tag) -> Iterator[tuple[WalkEvent, PageElement]]:
    """Yield nodes below ``root`` in document order.

    Elements with children are reported on entry and again on exit; leaves
    and ``pre`` elements (whose content is never visited) are reported once.
    Children are snapshotted, so the consumer may replace or extract the
    node it was just handed.
    """
    stack: list[tuple[Tag, Iterator[PageElement]]] = [(root, iter(list(root.contents)))]
    while stack:
        parent, remaining = stack[-1]
        child = next(remaining, None)
        if child is None:
            stack.pop()
            if stack:
                yield "exit", parent
            continue

        yield "enter", child
        if isinstance(child, Tag) and child.contents and not _is_pre(child):
            stack.append((child, iter(list(child.contents))))


def _replace_text(node: NavigableString, text: str) -> NavigableString:
    if str(node) == text:
        return node
    replacement = type(node)(text)
    node.replace_with(replacement)
    return replacement


def collapse_whitespace(root: Tag) -> None:
    """Normalise whitespace below ``root`` the way an HTML renderer would.

    - Runs of space, CR, LF and tab in text become a single space.
    - A leading space is dropped when the preceding text already ends with
      one, or when there is no preceding text in the current block, unless
      an inline void element (``img``, ``input``, ...) sits in between.
    - Block boundaries and ``br`` strip the trailing space of the text
      before them.
    - Text emptied by these rules, comments, doctypes and processing
      instructions are removed.

    Parameters
    ----------
    root : bs4.element.Tag
        Root of the tree to normalise; a ``BeautifulSoup`` document works too

    """
    if not root.contents or _is_pre(root):
        return

    prev_text: NavigableString | None = None
    prev_void = False
    removed = 0

    for _event, node in _walk(root):
        if _is_text(node):
            text = _WHITESPACE_RUN.sub(" ", str(node))
            if (prev_text is None or prev_text.endswith(" ")) and not prev_void and text.startswith(" "):
                text = text[1:]

            if not text:
                node.extract()
                removed += 1
                continue

            prev_text = _replace_text(node, text)
            prev_void = False
        elif isinstance(node, Tag):
            name = node.name or ""
            if is_block_name(name) or name.lower() == "br":
                if prev_text is not None:
                    prev_text = _replace_text(prev_text, _strip_one_trailing_space(prev_text))
                prev_text = None
                prev_void = False
            elif is_void_name(name):
                prev_text = None
                prev_void = True
        else:
            node.extract()
            removed += 1

    if prev_text is not None:
        stripped = _strip_one_trailing_space(prev_text)
        if stripped:
            _replace_text(prev_text, stripped)
        else:
            prev_text.extract()
            removed += 1

    logger.debug("Collapsed whitespace below <%s>, removed %d node(s)", root.name, removed)


def _strip_one_trailing_space(text: str) -> str:
    return text[:-1] if text.endswith(" ") else text


__all__ = ["collapse_whitespace"]
