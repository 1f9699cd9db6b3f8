from __future__ import annotations

import re
from typing import Any

LIST_MARKER_PATTERN = re.compile(r"^\s*(?:[-*+]\s+|[•◦▪▫]\s*|\d+[.)]\s+)")
DOUBLE_EMPHASIS_PATTERN = re.compile(r"\*\*|__")
SINGLE_EMPHASIS_PATTERN = re.compile(r"(?<!\w)[*_]|[*_](?!\w)")
WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_list_marker(line: str) -> str:
    """Remove one leading bullet (-, *, +, •, ◦, ▪, ▫) or number (1. / 1)) marker."""
    return LIST_MARKER_PATTERN.sub("", str(line or ""), count=1).strip()


def _clean_once(text: str) -> str:
    text = strip_list_marker(text)
    text = DOUBLE_EMPHASIS_PATTERN.sub("", text)
    text = SINGLE_EMPHASIS_PATTERN.sub("", text)
    text = text.replace("`", "")
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def clean_content_line(raw: Any) -> str:
    """
    Normalize one piece of extracted content.

    Strips a leading list marker, emphasis delimiters and backticks, then
    collapses whitespace. Removing one marker can expose another one
    (``"**- item**"``), so the rules are reapplied until the text is stable;
    cleaning cleaned text is therefore a no-op.
    """
    cleaned = str(raw or "")
    while True:
        updated = _clean_once(cleaned)
        if updated == cleaned:
            return updated
        cleaned = updated
