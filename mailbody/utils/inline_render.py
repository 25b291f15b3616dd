"""Inline Markdown rendering: code spans, bold, italic and links.

A single left-to-right scan over the text. Each construct is matched at the
leftmost position where it opens and is consumed whole, so nothing produced
for one span is ever scanned again by another.
"""

from __future__ import annotations

import html
from typing import List, Optional, Tuple

_EMPHASIS_CHARS = "*_"
_MAX_NESTING = 64


def _code_span_end(text: str, start: int) -> int:
    """Return the index of the backtick closing a span opened at start, or -1."""
    end = text.find("`", start + 1)
    if end == start + 1:
        return -1
    return end


def _match_link(text: str, start: int) -> Optional[Tuple[str, str, int]]:
    """Match ``[label](url)`` at start; return (label, url, end) or None."""
    close = text.find("]", start + 1)
    if close <= start + 1 or not text.startswith("(", close + 1):
        return None
    url_end = text.find(")", close + 2)
    if url_end <= close + 2:
        return None
    return text[start + 1:close], text[close + 2:url_end], url_end + 1


def _find_closer(text: str, start: int, delim: str) -> int:
    """Find the delimiter closing a run whose content begins at start.

    Code spans and links are stepped over whole. While looking for a single
    delimiter, complete doubled (bold) runs are stepped over too. A match at
    start itself would leave the content empty and is ignored.
    """
    i = start
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "`":
            end = _code_span_end(text, i)
            if end != -1:
                i = end + 1
                continue
        elif ch == "[":
            link = _match_link(text, i)
            if link is not None:
                i = link[2]
                continue
        if i > start and text.startswith(delim, i):
            if len(delim) == 1 and text.startswith(delim * 2, i):
                inner = _find_closer(text, i + 2, delim * 2)
                if inner != -1:
                    i = inner + 2
                    continue
            return i
        i += 1
    return -1


def _match_emphasis(text: str, start: int) -> Optional[Tuple[str, str, int]]:
    """Match bold or italic opening at start; return (tag, content, end) or None."""
    marker = text[start]
    if text.startswith(marker * 2, start):
        close = _find_closer(text, start + 2, marker * 2)
        if close != -1:
            return "strong", text[start + 2:close], close + 2
    close = _find_closer(text, start + 1, marker)
    if close != -1:
        return "em", text[start + 1:close], close + 1
    return None


def _render(text: str, depth: int) -> str:
    if depth > _MAX_NESTING:
        return text

    output: List[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "`":
            end = _code_span_end(text, i)
            if end != -1:
                output.append(f"<code>{html.escape(text[i + 1:end])}</code>")
                i = end + 1
                continue
        elif ch == "[":
            link = _match_link(text, i)
            if link is not None:
                label, url, i = link
                output.append(f'<a href="{url}">{_render(label, depth + 1)}</a>')
                continue
        elif ch in _EMPHASIS_CHARS:
            span = _match_emphasis(text, i)
            if span is not None:
                tag, content, i = span
                output.append(f"<{tag}>{_render(content, depth + 1)}</{tag}>")
                continue
        output.append(ch)
        i += 1
    return "".join(output)


def render_inline(text: str) -> str:
    """Render inline Markdown in a single line or paragraph to HTML.

    Handles `code`, **bold** / __bold__, *italic* / _italic_ and
    [text](url). Code span content is HTML-escaped; all other text,
    link URLs included, is copied through unchanged. Unmatched
    delimiters stay as literal characters.
    """
    return _render(text, 0)
