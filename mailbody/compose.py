"""Message composition - builds the HTML sent for new messages, replies and forwards"""

import logging
from typing import Optional

from mailbody.document import extract_body_content, wrap_email_html
from mailbody.render import BodyFormat, render_body, render_body_inner
from mailbody.utils.html_text import html_to_text
from mailbody.utils.markdown_render import MAX_QUOTE_DEPTH

logger = logging.getLogger(__name__)

FORWARD_SEPARATOR = "\n<hr>\n"


def compose_message_html(
    body: str,
    body_format: BodyFormat = BodyFormat.TEXT,
    max_quote_depth: int = MAX_QUOTE_DEPTH,
) -> str:
    """Build the document for a new message or a reply

    A reply replaces the draft body entirely, so both use the same document.

    Args:
        body: Raw body text
        body_format: How to interpret body
        max_quote_depth: Blockquote nesting limit for Markdown bodies

    Returns:
        Complete HTML document
    """
    document = render_body(body, body_format, max_quote_depth)
    logger.info(f"Message composed: {len(document)} characters of HTML")
    return document


def compose_forward_html(
    body: str,
    body_format: BodyFormat,
    original_html: str,
    max_quote_depth: int = MAX_QUOTE_DEPTH,
) -> str:
    """Prepend a rendered body above the original message of a forward

    Args:
        body: Text to put above the forwarded message; may be empty
        body_format: How to interpret body
        original_html: HTML of the forward draft created by the mail server
        max_quote_depth: Blockquote nesting limit for Markdown bodies

    Returns:
        Complete HTML document, or original_html untouched when body is empty
    """
    if not body:
        logger.info("No forward text given; keeping the original message as is")
        return original_html

    prepend = render_body_inner(body, body_format, max_quote_depth)
    quoted = extract_body_content(original_html)
    document = wrap_email_html(prepend + FORWARD_SEPARATOR + quoted)
    logger.info(f"Forward composed: {len(document)} characters of HTML")
    return document


def message_body_text(content: Optional[str], content_type: Optional[str] = "html") -> str:
    """Return the display text of a fetched message body

    HTML bodies are reduced to plain text; other content types are
    returned as they are.
    """
    if content is None:
        return ""
    if (content_type or "").strip().lower() == "html":
        return html_to_text(content)
    return content


def truncate(text: str, limit: int) -> str:
    """Shorten text to at most limit characters, ending with an ellipsis"""
    if len(text) <= limit:
        return text
    if limit <= 0:
        return ""
    return text[:limit - 1] + "…"
