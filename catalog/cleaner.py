"""Turn raw HTML fragments into plain display text."""
from __future__ import annotations
import re

WHITESPACE = " \t\n\r\f\v"
_SPACE_RUN = re.compile(r" {2,}")

def strip_tags(text: str) -> str:
    """Drop every `<...>` span; stop at the first `<` that is never closed."""
    start = text.find("<")
    while start != -1:
        end = text.find(">", start)
        if end == -1:
            break
        text = text[:start] + text[end + 1:]
        start = text.find("<")
    return text

def blank_entities(text: str) -> str:
    """Replace each `&...;` span with a single space."""
    amp = text.find("&")
    while amp != -1:
        semi = text.find(";", amp)
        if semi != -1:
            text = text[:amp] + " " + text[semi + 1:]
        amp = text.find("&", amp + 1)
    return text

def clean_content(text: str) -> str:
    text = text.strip(WHITESPACE)
    text = strip_tags(text)
    text = blank_entities(text)
    return _SPACE_RUN.sub(" ", text)
