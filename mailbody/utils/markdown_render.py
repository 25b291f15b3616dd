"""Markdown to HTML rendering utilities."""

from __future__ import annotations

import html
import logging
import re
from typing import List

from mailbody.utils.inline_render import render_inline

logger = logging.getLogger(__name__)

MAX_QUOTE_DEPTH = 32
QUOTE_DEPTH_CEILING = 256

_FENCE = "```"
_HEADING_RE = re.compile(r"^(#{1,6})(?: |$)")
_UNORDERED_LIST_RE = re.compile(r"^[-*+] ")
_ORDERED_LIST_RE = re.compile(r"^\d+\. ")
_HORIZONTAL_RULES = {"---", "***", "___"}
_LINE_BREAK = "<br>\n"


def _is_rule(line: str) -> bool:
    return line.strip() in _HORIZONTAL_RULES


def _starts_block(line: str, allow_quotes: bool) -> bool:
    """Return True when line opens a block other than a paragraph."""
    if line.startswith(_FENCE):
        return True
    if allow_quotes and line.startswith(">"):
        return True
    return bool(
        _is_rule(line)
        or _HEADING_RE.match(line)
        or _UNORDERED_LIST_RE.match(line)
        or _ORDERED_LIST_RE.match(line)
    )


def _strip_quote_marker(line: str) -> str:
    line = line[1:]
    if line.startswith(" "):
        line = line[1:]
    return line


def _render_list(lines: List[str], start: int, item_re: re.Pattern, tag: str, output: List[str]) -> int:
    output.append(f"<{tag}>\n")
    i = start
    while i < len(lines) and item_re.match(lines[i]):
        item = item_re.sub("", lines[i], count=1).strip()
        output.append(f"<li>{render_inline(item)}</li>\n")
        i += 1
    output.append(f"</{tag}>\n")
    return i


def _render_blocks(lines: List[str], depth: int, max_quote_depth: int) -> str:
    output: List[str] = []
    allow_quotes = depth < max_quote_depth
    warned = False
    total = len(lines)
    i = 0

    while i < total:
        line = lines[i]

        if line.startswith(_FENCE):
            language = line[len(_FENCE):].strip()
            i += 1
            code: List[str] = []
            while i < total and not lines[i].startswith(_FENCE):
                code.append(html.escape(lines[i]) + "\n")
                i += 1
            # Skip the closing fence; a missing one runs to end of input.
            i += 1
            if language:
                output.append(f'<pre><code class="language-{html.escape(language)}">')
            else:
                output.append("<pre><code>")
            output.append("".join(code))
            output.append("</code></pre>\n")
            continue

        if line.startswith(">"):
            if allow_quotes:
                quoted: List[str] = []
                while i < total and lines[i].startswith(">"):
                    quoted.append(_strip_quote_marker(lines[i]))
                    i += 1
                output.append("<blockquote>\n")
                output.append(_render_blocks(quoted, depth + 1, max_quote_depth))
                output.append("</blockquote>\n")
                continue
            if not warned:
                logger.warning(
                    "Blockquote nesting deeper than %s levels; rendering the rest as text",
                    max_quote_depth,
                )
                warned = True

        if _is_rule(line):
            output.append("<hr>\n")
            i += 1
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            level = len(heading.group(1))
            content = line[level:].strip()
            output.append(f"<h{level}>{render_inline(content)}</h{level}>\n")
            i += 1
            continue

        if _UNORDERED_LIST_RE.match(line):
            i = _render_list(lines, i, _UNORDERED_LIST_RE, "ul", output)
            continue

        if _ORDERED_LIST_RE.match(line):
            i = _render_list(lines, i, _ORDERED_LIST_RE, "ol", output)
            continue

        if not line.strip():
            i += 1
            continue

        paragraph = [line.strip()]
        i += 1
        while i < total and lines[i].strip() and not _starts_block(lines[i], allow_quotes):
            paragraph.append(lines[i].strip())
            i += 1
        output.append(f"<p>{render_inline(_LINE_BREAK.join(paragraph))}</p>\n")

    return "".join(output)


def render_markdown_to_html(text: str, max_quote_depth: int = MAX_QUOTE_DEPTH) -> str:
    """Render a Markdown body to an HTML fragment.

    Supports fenced code blocks, blockquotes (nested by recursion),
    horizontal rules, ATX headings, unordered and ordered lists and
    paragraphs. Inline markup inside headings, list items and paragraphs
    goes through render_inline. Blockquotes nested deeper than
    max_quote_depth are rendered as plain paragraph text; the limit
    itself never goes above QUOTE_DEPTH_CEILING.
    """
    if max_quote_depth > QUOTE_DEPTH_CEILING:
        logger.debug("Quote depth limit %s lowered to %s", max_quote_depth, QUOTE_DEPTH_CEILING)
        max_quote_depth = QUOTE_DEPTH_CEILING
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return _render_blocks(normalized.split("\n"), 0, max_quote_depth)
