"""Complete HTML email documents: wrapping fragments and extracting them again."""

import logging
import re

logger = logging.getLogger(__name__)

# Applied to every outgoing message so it looks the same across mail clients.
EMAIL_CSS = """
body {
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
  font-size: 14px;
  line-height: 1.6;
  color: #222;
  margin: 0;
  padding: 16px;
}
p  { margin: 0 0 12px; }
h1 { font-size: 1.5em;  font-weight: 600; margin: 16px 0 8px; }
h2 { font-size: 1.3em;  font-weight: 600; margin: 14px 0 7px; }
h3 { font-size: 1.1em;  font-weight: 600; margin: 12px 0 6px; }
h4, h5, h6 { font-size: 1em; font-weight: 600; margin: 10px 0 5px; }
ul, ol { margin: 0 0 12px; padding-left: 24px; }
li { margin-bottom: 4px; }
code {
  font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, monospace;
  background: #f4f4f4;
  padding: 1px 4px;
  border-radius: 3px;
  font-size: 0.9em;
}
pre {
  background: #f4f4f4;
  padding: 12px;
  border-radius: 4px;
  overflow-x: auto;
  margin: 0 0 12px;
}
pre code { background: none; padding: 0; }
blockquote {
  border-left: 3px solid #ccc;
  margin: 0 0 12px;
  padding-left: 12px;
  color: #555;
}
hr {
  border: none;
  border-top: 1px solid #ddd;
  margin: 16px 0;
}
a { color: #0066cc; }
strong { font-weight: 600; }
em { font-style: italic; }
"""

_BODY_OPEN_RE = re.compile(r"<body", re.IGNORECASE)
_BODY_CLOSE_RE = re.compile(r"</body>", re.IGNORECASE)


def wrap_email_html(fragment: str) -> str:
    """Wrap an HTML fragment in a complete, styled HTML document.

    The fragment is placed between <body> and </body> unchanged, so
    extract_body_content() returns it exactly.
    """
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f'<head><meta charset="UTF-8"><style>{EMAIL_CSS}</style></head>\n'
        f"<body>{fragment}</body>\n"
        "</html>\n"
    )


def extract_body_content(document: str) -> str:
    """Return the inner content of the <body> element of an HTML document.

    The content runs from the first opening <body ...> tag to the last
    </body>, so quoted messages that contain their own body markers stay
    inside. Input without a <body tag is returned unchanged; a missing
    </body> takes everything up to the end.

    Args:
        document: Complete or partial HTML document

    Returns:
        HTML fragment
    """
    opening = _BODY_OPEN_RE.search(document)
    if opening is None:
        return document

    tag_end = document.find(">", opening.end())
    if tag_end == -1:
        return document
    content_start = tag_end + 1

    closings = list(_BODY_CLOSE_RE.finditer(document, content_start))
    if not closings:
        logger.debug("No closing </body> tag; keeping content to end of input")
        return document[content_start:]
    return document[content_start:closings[-1].start()]
