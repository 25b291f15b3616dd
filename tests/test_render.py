"""Tests for body format selection and rendering"""

import pytest

from mailbody.document import extract_body_content
from mailbody.render import BodyFormat, parse_body_format, render_body, render_body_inner


@pytest.mark.parametrize(
    "value,expected",
    [
        ("md", BodyFormat.MARKDOWN),
        (" Markdown ", BodyFormat.MARKDOWN),
        ("HTML", BodyFormat.HTML),
        ("text", BodyFormat.TEXT),
        ("rtf", BodyFormat.TEXT),
        ("", BodyFormat.TEXT),
        (None, BodyFormat.TEXT),
    ],
)
def test_parse_body_format(value, expected):
    """Test format names and the plain text fallback"""
    assert parse_body_format(value) is expected


def test_html_body_passes_through():
    """Test HTML bodies are used verbatim"""
    body = "<p>Already <b>HTML</b></p>"
    assert render_body_inner(body, BodyFormat.HTML) == body


def test_markdown_body_is_rendered():
    """Test Markdown bodies go through the block renderer"""
    assert render_body_inner("# Hi", BodyFormat.MARKDOWN) == "<h1>Hi</h1>\n"


def test_text_body_is_escaped():
    """Test plain text bodies are escaped, not interpreted"""
    assert render_body_inner("# <Hi>", BodyFormat.TEXT) == "<p># &lt;Hi&gt;</p>\n"


def test_default_format_is_text():
    """Test the format argument defaults to plain text"""
    assert render_body_inner("**x**") == "<p>**x**</p>\n"


@pytest.mark.parametrize("body_format", list(BodyFormat))
def test_render_body_wraps_inner_fragment(body_format):
    """Test the full document holds exactly the inner fragment"""
    body = "Hello *there*\n\n- one"
    document = render_body(body, body_format)

    assert document.startswith("<!DOCTYPE html>")
    assert extract_body_content(document) == render_body_inner(body, body_format)


def test_quote_depth_is_passed_to_markdown():
    """Test the nesting limit reaches the Markdown renderer"""
    result = render_body_inner("> > x", BodyFormat.MARKDOWN, max_quote_depth=1)
    assert result == "<blockquote>\n<p>> x</p>\n</blockquote>\n"
