"""HTML to plain text reduction for displaying message bodies."""

from __future__ import annotations

import re
from typing import List

from mailbody.utils.text_formatting import collapse_whitespace

# Elements whose content is never shown by a mail client.
_HIDDEN_CONTENT_RE = re.compile(
    r"<!--.*?-->|<(style|script|title)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

_ENTITIES = {
    "&nbsp;": " ",
    "&#160;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#34;": '"',
    "&#39;": "'",
    "&#x27;": "'",
    "&apos;": "'",
    "&mdash;": "—",
    "&ndash;": "–",
    "&hellip;": "…",
    "&laquo;": "«",
    "&raquo;": "»",
    "&#8203;": "",
}
_ENTITY_RE = re.compile("|".join(re.escape(name) for name in _ENTITIES))

_INVISIBLE_CHARS = dict.fromkeys(
    map(
        ord,
        "\u200b"  # zero-width space
        "\u200c"  # zero-width non-joiner
        "\u200d"  # zero-width joiner
        "\u200e"  # left-to-right mark
        "\u200f"  # right-to-left mark
        "\u034f"  # combining grapheme joiner
        "\ufeff"  # byte order mark
        "\u00ad",  # soft hyphen
    )
)


def strip_tags(text: str) -> str:
    """Drop everything between '<' and the next '>'."""
    output: List[str] = []
    in_tag = False
    for ch in text:
        if ch == "<":
            in_tag = True
        elif in_tag:
            if ch == ">":
                in_tag = False
        else:
            output.append(ch)
    return "".join(output)


def decode_entities(text: str) -> str:
    """Decode the common entities in _ENTITIES in one pass; others are kept."""
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(0)], text)


def strip_invisible_unicode(text: str) -> str:
    return text.translate(_INVISIBLE_CHARS)


def html_to_text(html: str) -> str:
    """Reduce an HTML message body to plain text for terminal display.

    Args:
        html: Arbitrary HTML, typically a body fetched from the mail server

    Returns:
        Text without markup or invisible characters and with at most one
        blank line between paragraphs
    """
    if not html:
        return ""

    text = _HIDDEN_CONTENT_RE.sub("", html)
    text = strip_tags(text)
    text = decode_entities(text)
    text = strip_invisible_unicode(text)
    return collapse_whitespace(text)
