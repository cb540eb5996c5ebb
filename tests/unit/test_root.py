"""Unit tests for root construction from conversion input."""

import pytest
from bs4 import BeautifulSoup

from turnmd.constants import ROOT_ELEMENT_ID, ROOT_TAG_NAME
from turnmd.dom.node import SoupNode
from turnmd.dom.root import build_root, can_convert, parse_fragment
from turnmd.exceptions import DependencyError, InvalidInputError


@pytest.mark.unit
class TestCanConvert:
    def test_strings(self):
        assert can_convert("")
        assert can_convert("<p>x</p>")

    def test_bs4_trees(self):
        soup = BeautifulSoup("<p>x</p>", "html.parser")
        assert can_convert(soup)
        assert can_convert(soup.p)
        assert can_convert(SoupNode(soup.p))

    def test_bs4_text_is_not_convertible(self):
        soup = BeautifulSoup("<p>x</p>", "html.parser")
        text = soup.p.string
        assert isinstance(text, str)
        assert not can_convert(text)
        assert not can_convert(SoupNode(text))

    @pytest.mark.parametrize("value", [None, 42, b"<p>x</p>", ["<p>"], object()])
    def test_other_values(self, value):
        assert not can_convert(value)

    def test_custom_nodes(self, fake_node):
        assert can_convert(fake_node.element("div"))
        assert can_convert(fake_node("document"))
        assert not can_convert(fake_node.text_node("x"))


@pytest.mark.unit
class TestBuildRoot:
    def test_string_is_wrapped(self):
        root = build_root("<p>Hello</p> world")
        assert isinstance(root, SoupNode)
        assert root.tag_name == ROOT_TAG_NAME
        assert root.get_attribute("id") == ROOT_ELEMENT_ID
        assert [child.tag_name for child in root.children] == ["p", ""]

    def test_plain_text(self):
        root = build_root("just text")
        assert root.text_content == "just text"

    def test_whitespace_is_collapsed(self):
        root = build_root("<p>  a   b  </p>")
        assert root.text_content == "a b"

    def test_tag_is_copied(self):
        soup = BeautifulSoup("<div><p>  a   b  </p></div>", "html.parser")
        before = str(soup)
        root = build_root(soup.div)
        assert root.text_content == "a b"
        assert root.element is not soup.div
        assert str(soup) == before

    def test_soup_node_is_unwrapped_and_copied(self):
        soup = BeautifulSoup("<div> x </div>", "html.parser")
        root = build_root(SoupNode(soup.div))
        assert root.element is not soup.div
        assert str(soup) == "<div> x </div>"

    def test_custom_node_used_as_is(self, fake_node):
        node = fake_node.element("div", fake_node.text_node("  spaced  "))
        assert build_root(node) is node

    def test_invalid_input(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_root(3.5)
        assert exc_info.value.input_type == "float"
        assert "is not a string, or an element/document/fragment node" in str(exc_info.value)


@pytest.mark.unit
def test_parse_fragment_returns_wrapper():
    root = parse_fragment("<em>a</em>")
    assert root.name == ROOT_TAG_NAME
    assert str(root.em) == "<em>a</em>"


@pytest.mark.unit
def test_parse_fragment_unknown_builder():
    with pytest.raises(DependencyError) as exc_info:
        parse_fragment("<p>x</p>", "no-such-builder")
    assert exc_info.value.missing_packages == ["no-such-builder"]
    assert exc_info.value.original_error is not None
