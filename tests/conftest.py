"""Pytest configuration and shared fixtures for the turnmd test suite.

This module provides shared fixtures, test configuration, and a minimal
in-memory node implementation used to exercise the engine without
BeautifulSoup.
"""

from __future__ import annotations

import os
from typing import Optional

import pytest
from bs4 import BeautifulSoup

from turnmd.dom.node import BaseNode, SoupNode
from turnmd.options import ConversionOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


class FakeNode(BaseNode):
    """Tree node built directly in tests.

    Parameters
    ----------
    kind : str
        ``"text"``, ``"element"``, ``"document"`` or ``"other"``
    tag_name : str
        Element name, ignored for other kinds
    children : list[FakeNode], optional
        Child nodes; their ``parent`` is set automatically
    text : str
        Value of a text node
    attrs : dict, optional
        Element attributes

    """

    def __init__(
        self,
        kind: str,
        tag_name: str = "",
        children: Optional[list[FakeNode]] = None,
        text: str = "",
        attrs: Optional[dict[str, str]] = None,
    ):
        self._kind = kind
        self._tag_name = tag_name.lower() if kind == "element" else ""
        self._children = list(children or [])
        self._text = text
        self._attrs = dict(attrs or {})
        self._parent: Optional[FakeNode] = None
        for child in self._children:
            child._parent = self

    @classmethod
    def element(cls, tag_name: str, *children: FakeNode, **attrs: str) -> FakeNode:
        return cls("element", tag_name, list(children), attrs=attrs)

    @classmethod
    def text_node(cls, text: str) -> FakeNode:
        return cls("text", text=text)

    @property
    def kind(self):
        return self._kind

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def children(self) -> list[BaseNode]:
        return list(self._children)

    @property
    def parent(self) -> Optional[BaseNode]:
        return self._parent

    def _sibling(self, offset: int) -> Optional[BaseNode]:
        if self._parent is None:
            return None
        siblings = self._parent._children
        index = next(i for i, node in enumerate(siblings) if node is self) + offset
        return siblings[index] if 0 <= index < len(siblings) else None

    @property
    def previous_sibling(self) -> Optional[BaseNode]:
        return self._sibling(-1)

    @property
    def next_sibling(self) -> Optional[BaseNode]:
        return self._sibling(1)

    @property
    def text_value(self) -> str:
        return self._text if self._kind == "text" else ""

    @property
    def text_content(self) -> str:
        if self._kind == "text":
            return self._text
        return "".join(child.text_content for child in self._children)

    @property
    def outer_html(self) -> str:
        if self._kind == "text":
            return self._text
        inner = "".join(child.outer_html for child in self._children)
        return f"<{self._tag_name}>{inner}</{self._tag_name}>"

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._attrs.get(name, default)


@pytest.fixture
def fake_node() -> type[FakeNode]:
    """Provide the in-memory node class."""
    return FakeNode


@pytest.fixture
def soup_node():
    """Return a factory parsing markup and wrapping its first element."""

    def factory(markup: str, selector: Optional[str] = None) -> SoupNode:
        soup = BeautifulSoup(markup, "html.parser")
        element = soup.select_one(selector) if selector else soup.find()
        assert element is not None, f"no element for {selector!r} in {markup!r}"
        return SoupNode(element)

    return factory


@pytest.fixture
def default_options() -> ConversionOptions:
    """Provide default conversion options."""
    return ConversionOptions()
