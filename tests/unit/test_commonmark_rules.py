"""Unit tests for the built-in CommonMark rules and the special rules."""

import pytest

from turnmd import MarkdownConverter, convert
from turnmd.rules import ReferenceLinkCollector, commonmark_rules


@pytest.mark.unit
def test_rule_table_order():
    assert list(commonmark_rules()) == [
        "paragraph",
        "line_break",
        "heading",
        "blockquote",
        "list",
        "list_item",
        "indented_code_block",
        "fenced_code_block",
        "horizontal_rule",
        "inline_link",
        "reference_link",
        "emphasis",
        "strong",
        "code",
        "image",
    ]


@pytest.mark.unit
def test_each_table_is_fresh():
    first = commonmark_rules()["reference_link"]
    second = commonmark_rules()["reference_link"]
    assert first is not second
    assert first.replacement.__self__ is not second.replacement.__self__


@pytest.mark.unit
class TestBlocks:
    def test_paragraphs(self):
        assert convert("<p>One</p><p>Two</p>") == "One\n\nTwo"

    def test_line_break(self):
        assert convert("<p>a<br>b</p>") == "a  \nb"

    def test_custom_line_break(self):
        assert convert("<p>a<br>b</p>", br="\\") == "a\\\nb"

    def test_setext_headings(self):
        assert convert("<h1>Title</h1>") == "Title\n====="
        assert convert("<h2>Sub</h2>") == "Sub\n---"

    def test_setext_falls_back_to_atx_below_h2(self):
        assert convert("<h3>Deep</h3>") == "### Deep"

    @pytest.mark.parametrize("level", range(1, 7))
    def test_atx_headings(self, level):
        assert convert(f"<h{level}>T</h{level}>", heading_style="atx") == "#" * level + " T"

    def test_blockquote(self):
        assert convert("<blockquote><p>a</p><p>b</p></blockquote>") == "> a\n> \n> b"

    def test_horizontal_rule(self):
        assert convert("<p>a</p><hr><p>b</p>") == "a\n\n* * *\n\nb"
        assert convert("<hr>", hr="---") == "---"


@pytest.mark.unit
class TestLists:
    def test_unordered(self):
        assert convert("<ul><li>one</li><li>two</li></ul>") == "*   one\n*   two"

    @pytest.mark.parametrize("marker", ["-", "+"])
    def test_bullet_marker(self, marker):
        assert convert("<ul><li>one</li></ul>", bullet_list_marker=marker) == f"{marker}   one"

    def test_ordered(self):
        assert convert("<ol><li>a</li><li>b</li></ol>") == "1.  a\n2.  b"

    def test_ordered_start(self):
        assert convert('<ol start="3"><li>a</li><li>b</li></ol>') == "3.  a\n4.  b"

    def test_non_numeric_start_ignored(self):
        assert convert('<ol start="x"><li>a</li></ol>') == "1.  a"

    def test_nested(self):
        html = "<ul><li>one<ul><li>two</li></ul></li><li>three</li></ul>"
        assert convert(html) == "*   one\n    *   two\n*   three"

    def test_multi_paragraph_item(self):
        html = "<ul><li><p>first</p><p>second</p></li></ul>"
        assert convert(html) == "*   first\n    \n    second"


@pytest.mark.unit
class TestCodeBlocks:
    def test_indented(self):
        assert convert("<pre><code>x = 1\ny = 2</code></pre>") == "    x = 1\n    y = 2"

    def test_indented_code_is_not_escaped(self):
        assert convert("<pre><code>*args</code></pre>") == "    *args"

    def test_fenced_with_language(self):
        html = '<pre><code class="language-python">print(1)\n</code></pre>'
        assert convert(html, code_block_style="fenced") == "```python\nprint(1)\n```"

    def test_fence_lengthened(self):
        html = "<pre><code>a\n```\nb</code></pre>"
        assert convert(html, code_block_style="fenced") == "````\na\n```\nb\n````"

    def test_tilde_fence(self):
        html = "<pre><code>x</code></pre>"
        assert convert(html, code_block_style="fenced", fence="~~~") == "~~~\nx\n~~~"

    def test_pre_without_code_is_kept(self):
        assert convert("<pre>raw *text*</pre>") == "<pre>raw *text*</pre>"


@pytest.mark.unit
class TestInline:
    def test_emphasis(self):
        assert convert("<p><em>x</em> and <i>y</i></p>") == "_x_ and _y_"
        assert convert("<em>x</em>", em_delimiter="*") == "*x*"

    def test_strong(self):
        assert convert("<p><strong>x</strong> and <b>y</b></p>") == "**x** and **y**"
        assert convert("<b>x</b>", strong_delimiter="__") == "__x__"

    def test_blank_emphasis_dropped(self):
        assert convert("<p>a <em> </em>b</p>") == "a b"
        assert convert("<p>a <strong></strong>b</p>") == "a b"

    def test_flanking_whitespace_moved_outside(self):
        assert convert("<p>a<em> b </em>c</p>") == "a _b_ c"

    def test_code(self):
        assert convert("<p>Use <code>a*b</code> here</p>") == "Use `a*b` here"

    def test_code_with_backticks(self):
        assert convert("<code>a`b</code>") == "``a`b``"
        assert convert("<code>`x</code>") == "`` `x ``"

    def test_image(self):
        assert convert('<img src="a.png" alt="A" title="T">') == '![A](a.png "T")'
        assert convert('<img src="a.png">') == "![](a.png)"

    def test_image_without_src(self):
        assert convert('<p>x<img alt="A"></p>') == "x"


@pytest.mark.unit
class TestLinks:
    def test_inline(self):
        assert convert('<a href="http://x.com" title="T">X</a>') == '[X](http://x.com "T")'

    def test_anchor_without_href(self):
        assert convert("<p><a name='top'>Top</a></p>") == "Top"

    def test_reference_full(self):
        html = '<p><a href="/a">A</a> and <a href="/b" title="B!">B</a></p>'
        assert convert(html, link_style="referenced") == '[A][1] and [B][2]\n\n[1]: /a\n[2]: /b "B!"'

    def test_reference_collapsed(self):
        html = '<a href="/a">A</a>'
        assert convert(html, link_style="referenced", link_reference_style="collapsed") == "[A][]\n\n[A]: /a"

    def test_reference_shortcut(self):
        html = '<a href="/a">A</a>'
        assert convert(html, link_style="referenced", link_reference_style="shortcut") == "[A]\n\n[A]: /a"

    def test_definitions_cleared_between_conversions(self):
        converter = MarkdownConverter(link_style="referenced")
        first = converter.convert('<a href="/a">A</a>')
        second = converter.convert('<a href="/b">B</a>')
        assert first == "[A][1]\n\n[1]: /a"
        assert second == "[B][1]\n\n[1]: /b"

    def test_collector_append_without_links(self, default_options):
        assert ReferenceLinkCollector().append(default_options) == ""


@pytest.mark.unit
class TestSpecialRules:
    def test_table_kept_as_html(self):
        html = "<p>Before</p><table><tr><td>a</td></tr></table>"
        assert convert(html) == "Before\n\n<table><tr><td>a</td></tr></table>"

    def test_script_and_head_removed(self):
        html = "<head><title>T</title></head><p>a</p><script>alert(1)</script>"
        assert convert(html) == "a"

    def test_blank_block_separates(self):
        assert convert("<span>a</span><div> </div><span>b</span>") == "a\n\nb"

    def test_unknown_block_element(self):
        assert convert("<section>a</section><section>b</section>") == "a\n\nb"

    def test_unknown_inline_element(self):
        assert convert("<p><span>a</span> <kbd>b</kbd></p>") == "a b"
