"""Body rendering - turns an outgoing body into HTML for sending."""

import logging
from enum import Enum
from typing import Optional

from mailbody.document import wrap_email_html
from mailbody.utils.markdown_render import MAX_QUOTE_DEPTH, render_markdown_to_html
from mailbody.utils.text_formatting import text_to_html_fragment

logger = logging.getLogger(__name__)


class BodyFormat(Enum):
    """How the caller's body string is interpreted"""

    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"


_FORMAT_NAMES = {
    "md": BodyFormat.MARKDOWN,
    "markdown": BodyFormat.MARKDOWN,
    "html": BodyFormat.HTML,
}


def parse_body_format(value: Optional[str]) -> BodyFormat:
    """Convert a format name such as 'md' or 'html' to a BodyFormat

    Unknown or empty values fall back to plain text.
    """
    if not value:
        return BodyFormat.TEXT
    return _FORMAT_NAMES.get(value.strip().lower(), BodyFormat.TEXT)


def render_body_inner(
    body: str,
    body_format: BodyFormat = BodyFormat.TEXT,
    max_quote_depth: int = MAX_QUOTE_DEPTH,
) -> str:
    """Render a body to an HTML fragment without the document wrapper

    Use this when the result is spliced into an existing HTML document.

    Args:
        body: Raw body text
        body_format: How to interpret body
        max_quote_depth: Blockquote nesting limit for Markdown bodies

    Returns:
        HTML fragment
    """
    logger.debug("Rendering %s body (%s chars)", body_format.value, len(body))
    if body_format is BodyFormat.HTML:
        return body
    if body_format is BodyFormat.MARKDOWN:
        return render_markdown_to_html(body, max_quote_depth=max_quote_depth)
    return text_to_html_fragment(body)


def render_body(
    body: str,
    body_format: BodyFormat = BodyFormat.TEXT,
    max_quote_depth: int = MAX_QUOTE_DEPTH,
) -> str:
    """Render a body to a complete, styled HTML email document"""
    return wrap_email_html(render_body_inner(body, body_format, max_quote_depth))
