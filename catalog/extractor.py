"""Heuristic title/description scraping for standalone HTML pages.

This is a substring scanner, not an HTML parser: it looks for the first
``<h1`` ... ``</h1>`` pair and then for the first ``<p`` ... ``</p>`` pair
after it. Tag names are matched by prefix, so ``<h10>`` counts as a heading
and ``<pre>`` as a paragraph. Broken markup never raises; it just falls back
to the file name and the configured placeholder.
"""
from __future__ import annotations
import logging
import pathlib
from typing import Optional, Tuple

from catalog.cleaner import clean_content
from core.config import Settings, settings as default_settings

log = logging.getLogger(__name__)

def find_element(content: str, open_tag: str, close_tag: str, pos: int = 0) -> Optional[Tuple[str, int]]:
    """Locate the first `open_tag ... close_tag` pair at or after `pos`.

    Returns the raw inner text and the index just past the close tag, or None
    when either tag is missing.
    """
    start = content.find(open_tag, pos)
    if start == -1:
        return None
    end = content.find(close_tag, start)
    if end == -1:
        return None
    inner_start = content.find(">", start) + 1
    if inner_start > end:
        # `<h1</h1>`: the open tag's `>` is the close tag's, inner text runs to the end
        return content[inner_start:], end + len(close_tag)
    return content[inner_start:end], end + len(close_tag)

def truncate(text: str, limit: int, ellipsis: str = "...") -> str:
    if len(text) <= limit:
        return text
    return text[: limit - len(ellipsis)] + ellipsis

def scan(content: str) -> Tuple[str, str]:
    """Run the heading-then-paragraph scan; empty strings mean "not found"."""
    heading = find_element(content, "<h1", "</h1>")
    if heading is None:
        return "", ""
    raw_title, pos = heading
    paragraph = find_element(content, "<p", "</p>", pos)
    raw_desc = paragraph[0] if paragraph else ""
    return clean_content(raw_title), clean_content(raw_desc)

def extract_title_and_description(path, cfg: Optional[Settings] = None) -> Tuple[str, str]:
    cfg = cfg or default_settings
    path = pathlib.Path(path)
    try:
        content = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        log.warning("Cannot read %s, using fallbacks: %s", path, e)
        return path.stem, cfg.description_placeholder

    title, description = scan(content)
    description = truncate(description, cfg.description_limit, cfg.ellipsis)
    return title or path.stem, description or cfg.description_placeholder
