"""Tests for inline Markdown rendering"""

import pytest

from mailbody.utils.inline_render import render_inline


def test_code_span_protects_content_from_emphasis():
    """Test bold markers inside a code span stay literal"""
    assert render_inline("`**not bold**`") == "<code>**not bold**</code>"


def test_code_span_escapes_html():
    """Test code span content is HTML-escaped"""
    assert render_inline("`a < b & c`") == "<code>a &lt; b &amp; c</code>"


def test_bold_with_both_delimiters():
    """Test double asterisks and double underscores become strong"""
    assert render_inline("**bold** and __also__") == "<strong>bold</strong> and <strong>also</strong>"


def test_italic_with_both_delimiters():
    """Test single asterisks and single underscores become em"""
    assert render_inline("*it* and _it_") == "<em>it</em> and <em>it</em>"


def test_link_url_is_not_touched():
    """Test underscores in a URL are not treated as emphasis"""
    result = render_inline("[site](https://example.com/a_b_c)")
    assert result == '<a href="https://example.com/a_b_c">site</a>'


def test_link_label_gets_inline_markup():
    """Test emphasis inside the link text is rendered"""
    assert render_inline("[**docs**](https://x.io)") == '<a href="https://x.io"><strong>docs</strong></a>'


def test_italic_inside_bold():
    """Test nested italic within bold"""
    assert render_inline("**a *b* c**") == "<strong>a <em>b</em> c</strong>"


def test_bold_inside_italic():
    """Test nested bold within italic"""
    assert render_inline("*a **b** c*") == "<em>a <strong>b</strong> c</em>"


def test_code_span_inside_bold():
    """Test a code span containing a delimiter does not close the bold run"""
    assert render_inline("**use `x*y`**") == "<strong>use <code>x*y</code></strong>"


def test_link_inside_italic_keeps_url_intact():
    """Test the italic closer search steps over links"""
    result = render_inline("_see [doc](http://x/a_b)_")
    assert result == '<em>see <a href="http://x/a_b">doc</a></em>'


def test_matches_are_leftmost_and_non_greedy():
    """Test two bold runs on one line stay separate"""
    assert render_inline("**a** b **c**") == "<strong>a</strong> b <strong>c</strong>"


@pytest.mark.parametrize(
    "text",
    [
        "2 * 3 = 6",
        "**open",
        "`tick",
        "[text] only",
        "[empty]()",
        "``",
        "snake_case",
    ],
)
def test_unmatched_delimiters_stay_literal(text):
    """Test unmatched or empty delimiters produce no markup"""
    assert render_inline(text) == text


def test_raw_html_passes_through():
    """Test text outside markup is copied unchanged"""
    assert render_inline("a <b>x</b> & y") == "a <b>x</b> & y"


def test_deeply_nested_emphasis_does_not_fail():
    """Test pathological nesting is rendered without raising"""
    text = "*_" * 300 + "x" + "_*" * 300
    result = render_inline(text)
    assert "x" in result
