"""Tests for the markdown-to-HTML substitution pipeline."""

from blogdata.services.markdown import MARKDOWN_RULES, apply_rules, markdown_to_html


def test_rule_order():
    assert [r.name for r in MARKDOWN_RULES] == [
        "h3",
        "h2",
        "h1",
        "bold",
        "italic",
        "link",
        "paragraph",
        "line_break",
    ]


def test_empty_input():
    assert markdown_to_html("") == ""
    assert markdown_to_html(None) == ""


def test_bold_then_italic():
    html = markdown_to_html("**bold** and *italic*")
    assert html == "<p><strong>bold</strong> and <em>italic</em></p>"
    assert html.index("<strong>bold</strong>") < html.index("<em>italic</em>")


def test_header_paragraph_and_line_break():
    html = markdown_to_html("# Title\n\nPara one\nline two")
    assert html == "<p><h1>Title</h1></p><p>Para one<br>line two</p>"
    assert "<p></p>" not in html


def test_header_levels():
    html = markdown_to_html("### Three\n## Two\n# One")
    assert html == "<p><h3>Three</h3><br><h2>Two</h2><br><h1>One</h1></p>"


def test_header_needs_space_after_marker():
    assert markdown_to_html("#hashtag") == "<p>#hashtag</p>"


def test_header_only_at_line_start():
    assert markdown_to_html("a # b") == "<p>a # b</p>"


def test_link():
    html = markdown_to_html("See [the docs](https://example.com/docs) now")
    assert html == '<p>See <a href="https://example.com/docs">the docs</a> now</p>'


def test_emphasis_inside_link_label():
    html = markdown_to_html("[**Go**](/go)")
    assert html == '<p><a href="/go"><strong>Go</strong></a></p>'


def test_italic_does_not_cross_lines():
    assert markdown_to_html("*a\nb*") == "<p>*a<br>b*</p>"


def test_leading_blank_paragraph_removed():
    assert markdown_to_html("\n\nText") == "<p>Text</p>"


def test_whitespace_only_paragraph_removed():
    assert markdown_to_html("One\n\n \n\nTwo") == "<p>One</p><p>Two</p>"


def test_html_is_not_escaped():
    assert markdown_to_html("a < b & <i>c</i>") == "<p>a < b & <i>c</i></p>"


def test_apply_rules_with_custom_table():
    rules = tuple(r for r in MARKDOWN_RULES if r.name == "bold")
    assert apply_rules("**x**\n", rules) == "<strong>x</strong>\n"


def test_nested_empty_paragraphs_removed():
    assert markdown_to_html("<p></p>") == ""
    assert markdown_to_html("<p></p>\n\nText") == "<p>Text</p>"
