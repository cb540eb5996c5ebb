"""Unit tests for the node adapter and its classifications."""

import pytest
from bs4 import BeautifulSoup

from turnmd.dom.node import FlankingWhitespace, SoupNode


@pytest.mark.unit
class TestSoupNodeBasics:
    def test_element(self, soup_node):
        node = soup_node("<P class='x'>Hi</P>")
        assert node.kind == "element"
        assert node.tag_name == "p"
        assert node.is_element and not node.is_text

    def test_document(self):
        node = SoupNode(BeautifulSoup("<p>a</p>", "html.parser"))
        assert node.kind == "document"
        assert node.tag_name == ""

    def test_text_child(self, soup_node):
        text = soup_node("<p>Hello</p>").first_child
        assert text.kind == "text"
        assert text.text_value == "Hello"
        assert text.tag_name == ""
        assert text.children == []

    def test_comment_is_other(self):
        soup = BeautifulSoup("<div><!-- note --></div>", "html.parser")
        comment = SoupNode(soup.div).first_child
        assert comment.kind == "other"
        assert comment.text_value == ""

    def test_text_content_skips_comments(self, soup_node):
        node = soup_node("<div>a<!-- hidden --><b>b</b></div>")
        assert node.text_content == "ab"

    def test_navigation(self, soup_node):
        node = soup_node("<ul><li>1</li><li>2</li><li>3</li></ul>")
        first, second, third = node.children
        assert second.previous_sibling == first
        assert second.next_sibling == third
        assert third.next_sibling is None
        assert second.parent == node
        assert node.element_children == [first, second, third]
        assert node.last_element_child == third
        assert second.index_among_elements() == 1

    def test_index_skips_text_siblings(self, soup_node):
        node = soup_node("<ol>x<li>1</li>y<li>2</li></ol>")
        assert node.last_element_child.index_among_elements() == 1

    def test_outer_html(self, soup_node):
        assert soup_node('<p id="a">x<br/></p>').outer_html == '<p id="a">x<br/></p>'

    def test_multi_valued_attribute_joined(self, soup_node):
        node = soup_node('<code class="language-py highlight">x</code>')
        assert node.get_attribute("class") == "language-py highlight"

    def test_missing_attribute_default(self, soup_node):
        node = soup_node("<a>x</a>")
        assert node.get_attribute("href") is None
        assert node.get_attribute("href", "#") == "#"

    def test_equality_is_identity_of_wrapped_element(self):
        soup = BeautifulSoup("<p>a</p><p>a</p>", "html.parser")
        first, second = soup.find_all("p")
        assert SoupNode(first) == SoupNode(first)
        assert hash(SoupNode(first)) == hash(SoupNode(first))
        assert SoupNode(first) != SoupNode(second)


@pytest.mark.unit
class TestClassification:
    @pytest.mark.parametrize("tag", ["p", "div", "h3", "li", "table", "pre", "blockquote", "hr"])
    def test_block(self, soup_node, tag):
        assert soup_node(f"<{tag}></{tag}>").is_block

    @pytest.mark.parametrize("tag", ["span", "em", "a", "code", "img"])
    def test_inline(self, soup_node, tag):
        assert not soup_node(f"<{tag}></{tag}>").is_block

    def test_void(self, soup_node):
        assert soup_node("<img src='a.png'>").is_void
        assert not soup_node("<span></span>").is_void

    def test_whitespace_paragraph_is_blank(self, soup_node):
        assert soup_node("<p>  \n </p>").is_blank

    def test_void_element_is_not_blank(self, soup_node):
        assert not soup_node("<br>").is_blank

    def test_void_descendant_is_not_blank(self, soup_node):
        node = soup_node("<p><span><img src='a.png'></span></p>")
        assert node.has_void_descendant
        assert not node.is_blank

    @pytest.mark.parametrize("tag", ["a", "td", "th"])
    def test_exempt_elements_never_blank(self, soup_node, tag):
        assert not soup_node(f"<{tag}></{tag}>", tag).is_blank

    def test_text_is_not_blank(self, soup_node):
        assert not soup_node("<p>x</p>").is_blank


@pytest.mark.unit
class TestFlankingWhitespace:
    def test_block_has_none(self, soup_node):
        node = soup_node("<div>a<p> b </p>c</div>", "p")
        assert node.flanking_whitespace == FlankingWhitespace()
        assert node.flanking_whitespace.is_empty

    def test_inline_both_sides(self, soup_node):
        node = soup_node("<p>a<em> b </em>c</p>", "em")
        assert node.flanking_whitespace == FlankingWhitespace(" ", " ")

    def test_sibling_already_has_space(self, soup_node):
        node = soup_node("<p>a <em> b </em> c</p>", "em")
        assert node.flanking_whitespace == FlankingWhitespace("", "")

    def test_no_whitespace(self, soup_node):
        node = soup_node("<p>a<em>b</em>c</p>", "em")
        assert node.flanking_whitespace.is_empty

    def test_inline_element_sibling(self, soup_node):
        node = soup_node("<p><b>a </b><em> b</em></p>", "em")
        assert node.flanking_whitespace.leading == ""

    def test_block_sibling_does_not_count(self, soup_node):
        node = soup_node("<div><p>a </p><em> b</em></div>", "em")
        assert node.flanking_whitespace.leading == " "


@pytest.mark.unit
def test_fake_node_uses_derived_classifications(fake_node):
    tree = fake_node.element("div", fake_node.element("p", fake_node.text_node("  ")))
    paragraph = tree.first_child
    assert paragraph.is_block
    assert paragraph.is_blank
    assert paragraph.parent is tree
    assert repr(paragraph) == "<FakeNode element 'p'>"
