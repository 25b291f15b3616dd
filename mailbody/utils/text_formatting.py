"""Plain text formatting helpers."""

from __future__ import annotations

import html
import re
from typing import List


_PARAGRAPH_SPLIT_RE = re.compile(r"\n{2,}")
_SPACE_RUN_RE = re.compile(r"[ \t]+")


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def text_to_html_fragment(text: str) -> str:
    """Convert a plain text body to HTML paragraphs.

    Paragraphs are split on blank lines and escaped; single line breaks
    inside a paragraph become <br>. No Markdown is interpreted.
    """
    paragraphs: List[str] = []
    for part in _PARAGRAPH_SPLIT_RE.split(normalize_newlines(text)):
        part = part.strip()
        if not part:
            continue
        escaped = html.escape(part).replace("\n", "<br>\n")
        paragraphs.append(f"<p>{escaped}</p>\n")
    return "\n".join(paragraphs)


def collapse_whitespace(text: str) -> str:
    """Tidy text for terminal display.

    Trailing blanks are stripped and runs of spaces or tabs collapsed on
    every line, consecutive blank lines shrink to one, and the result is
    trimmed.
    """
    collapsed: List[str] = []
    prev_blank = False
    for line in text.split("\n"):
        line = _SPACE_RUN_RE.sub(" ", line.rstrip(" \t\r"))
        blank = not line
        if blank and prev_blank:
            continue
        collapsed.append(line)
        prev_blank = blank

    return "\n".join(collapsed).strip()
