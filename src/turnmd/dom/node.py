#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/dom/node.py
"""Node adapter consumed by the conversion engine.

The engine and the conversion rules never touch a concrete tree library.
They work against :class:`BaseNode`, which exposes the handful of
capabilities conversion needs: the node kind, tag name, children and
siblings, text, serialized markup, and the three classifications that
drive output spacing (block level, blank, flanking whitespace).

Subclasses implement the navigation primitives; the classifications are
derived from them here and may be overridden when a tree can answer them
more cheaply. :class:`SoupNode` is the adapter over BeautifulSoup trees.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PageElement, PreformattedString, Tag

from turnmd.constants import BLANK_EXEMPT_ELEMENTS, VOID_ELEMENTS, NodeKind
from turnmd.dom.elements import is_block_name, is_void_name

_STARTS_WITH_WHITESPACE = re.compile(r"^[ \r\n\t]")
_ENDS_WITH_WHITESPACE = re.compile(r"[ \r\n\t]$")
_BLANK_TEXT = re.compile(r"^\s*$")


@dataclass(frozen=True)
class FlankingWhitespace:
    """Whitespace to keep outside a node's rendered replacement.

    Parameters
    ----------
    leading : str
        Emitted before the replacement (``""`` or ``" "``)
    trailing : str
        Emitted after the replacement (``""`` or ``" "``)

    """

    leading: str = ""
    trailing: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.leading or self.trailing)


class BaseNode(ABC):
    """Abstract node in a markup tree.

    Concrete adapters implement the navigation primitives (``kind``,
    ``tag_name``, ``children``, ``parent``, siblings, text, markup and
    attributes). Classification properties are computed from those
    primitives.

    Two adapters compare equal when they wrap the same underlying node.

    """

    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        """One of ``"text"``, ``"element"``, ``"document"`` or ``"other"``."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Lower-cased tag name, ``""`` for anything that is not an element."""

    @property
    @abstractmethod
    def children(self) -> list[BaseNode]:
        """Child nodes in document order."""

    @property
    @abstractmethod
    def parent(self) -> BaseNode | None:
        """Parent node, or None at the top of the tree."""

    @property
    @abstractmethod
    def previous_sibling(self) -> BaseNode | None:
        """Sibling immediately before this node, of any kind."""

    @property
    @abstractmethod
    def next_sibling(self) -> BaseNode | None:
        """Sibling immediately after this node, of any kind."""

    @property
    @abstractmethod
    def text_value(self) -> str:
        """Value of a text node (``""`` for other kinds)."""

    @property
    @abstractmethod
    def text_content(self) -> str:
        """Concatenated text of this node and all its descendants."""

    @property
    @abstractmethod
    def outer_html(self) -> str:
        """Serialized markup of the node, including its own tags."""

    @abstractmethod
    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        """Return an attribute value, or ``default`` when it is absent."""

    # -- derived ------------------------------------------------------------

    @property
    def is_text(self) -> bool:
        return self.kind == "text"

    @property
    def is_element(self) -> bool:
        return self.kind == "element"

    @property
    def first_child(self) -> BaseNode | None:
        children = self.children
        return children[0] if children else None

    @property
    def element_children(self) -> list[BaseNode]:
        return [child for child in self.children if child.is_element]

    @property
    def last_element_child(self) -> BaseNode | None:
        elements = self.element_children
        return elements[-1] if elements else None

    @property
    def is_block(self) -> bool:
        """Whether the node needs blank-line separation from its siblings."""
        return self.is_element and is_block_name(self.tag_name)

    @property
    def is_void(self) -> bool:
        return self.is_element and is_void_name(self.tag_name)

    @property
    def has_void_descendant(self) -> bool:
        stack = list(self.children)
        while stack:
            node = stack.pop()
            if node.is_void:
                return True
            stack.extend(node.children)
        return False

    @property
    def is_blank(self) -> bool:
        """Whether the node contributes nothing to the output.

        Links and table cells are never blank. Anything else is blank when
        its text is whitespace only and neither it nor a descendant is a
        void element such as ``img`` or ``br``.
        """
        return (
            self.tag_name not in BLANK_EXEMPT_ELEMENTS
            and bool(_BLANK_TEXT.match(self.text_content))
            and not self.is_void
            and not self.has_void_descendant
        )

    @property
    def flanking_whitespace(self) -> FlankingWhitespace:
        """Whitespace that must be kept outside the node's replacement.

        Block nodes never keep flanking whitespace. An inline node whose
        text starts (ends) with whitespace keeps a single space on that side
        unless the neighbouring sibling already supplies one.
        """
        if self.is_block:
            return FlankingWhitespace()

        text = self.text_content
        leading = ""
        trailing = ""
        if _STARTS_WITH_WHITESPACE.match(text) and not self._is_flanked_by_whitespace("left"):
            leading = " "
        if _ENDS_WITH_WHITESPACE.search(text) and not self._is_flanked_by_whitespace("right"):
            trailing = " "
        return FlankingWhitespace(leading, trailing)

    def _is_flanked_by_whitespace(self, side: Literal["left", "right"]) -> bool:
        sibling = self.previous_sibling if side == "left" else self.next_sibling
        if sibling is None:
            return False

        if sibling.is_text:
            value = sibling.text_value
        elif sibling.is_element and not sibling.is_block:
            value = sibling.text_content
        else:
            return False

        return value.endswith(" ") if side == "left" else value.startswith(" ")

    def index_among_elements(self) -> int:
        """Position of this node among its parent's element children (-1 without a parent)."""
        parent = self.parent
        if parent is None:
            return -1
        for index, sibling in enumerate(parent.element_children):
            if sibling == self:
                return index
        return -1

    def __repr__(self) -> str:
        if self.is_text:
            return f"<{type(self).__name__} text {self.text_value[:20]!r}>"
        return f"<{type(self).__name__} {self.kind} {self.tag_name!r}>"


def _is_text_element(element: PageElement) -> bool:
    # Comments, doctypes and processing instructions are PreformattedStrings too
    if isinstance(element, CData):
        return True
    return isinstance(element, NavigableString) and not isinstance(element, PreformattedString)


class SoupNode(BaseNode):
    """:class:`BaseNode` over a BeautifulSoup element.

    Parameters
    ----------
    element : bs4.element.PageElement
        The wrapped ``BeautifulSoup`` document, ``Tag`` or string

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup("<p>Hello <em>world</em></p>", "html.parser")
        >>> node = SoupNode(soup.p)
        >>> node.tag_name, node.is_block, node.text_content
        ('p', True, 'Hello world')

    """

    def __init__(self, element: PageElement):
        self._element = element

    @property
    def element(self) -> PageElement:
        """The wrapped bs4 object."""
        return self._element

    @classmethod
    def _wrap(cls, element: PageElement | None) -> SoupNode | None:
        return None if element is None else cls(element)

    @property
    def kind(self) -> NodeKind:
        element = self._element
        if isinstance(element, BeautifulSoup):
            return "document"
        if isinstance(element, Tag):
            return "element"
        if _is_text_element(element):
            return "text"
        return "other"

    @property
    def tag_name(self) -> str:
        element = self._element
        if isinstance(element, Tag) and not isinstance(element, BeautifulSoup):
            return (element.name or "").lower()
        return ""

    @property
    def children(self) -> list[BaseNode]:
        element = self._element
        if isinstance(element, Tag):
            return [SoupNode(child) for child in element.contents]
        return []

    @property
    def parent(self) -> BaseNode | None:
        return self._wrap(self._element.parent)

    @property
    def previous_sibling(self) -> BaseNode | None:
        return self._wrap(self._element.previous_sibling)

    @property
    def next_sibling(self) -> BaseNode | None:
        return self._wrap(self._element.next_sibling)

    @property
    def text_value(self) -> str:
        if _is_text_element(self._element):
            return str(self._element)
        return ""

    @property
    def text_content(self) -> str:
        element = self._element
        if isinstance(element, Tag):
            return "".join(str(node) for node in element.descendants if _is_text_element(node))
        return self.text_value

    @property
    def outer_html(self) -> str:
        return str(self._element)

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        element = self._element
        if not isinstance(element, Tag):
            return default
        value: Any = element.get(name)
        if value is None:
            return default
        # bs4 splits multi-valued attributes such as class
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    @property
    def has_void_descendant(self) -> bool:
        element = self._element
        if not isinstance(element, Tag):
            return False
        return element.find(list(VOID_ELEMENTS)) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupNode):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)


__all__ = ["BaseNode", "FlankingWhitespace", "SoupNode"]
