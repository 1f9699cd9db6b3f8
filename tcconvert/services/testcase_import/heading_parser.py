from __future__ import annotations

import re
from typing import NamedTuple, Optional

from tcconvert.models.testcase_import import DEFAULT_PRIORITY

MARKDOWN_HEADING_PATTERN = re.compile(r"^####\s+(?P<heading>.+)$")
BLOCK_HEADING_PATTERN = re.compile(r"^###\s+")
PLAIN_HEADING_PATTERN = re.compile(r"^TC\d+\s*[-–—:]\s*\S")
SEPARATOR_PATTERN = re.compile(r"^-{3,}$")

BRACKET_PRIORITY_PATTERN = re.compile(
    r"\s*\[\s*priority\s*:\s*(?P<priority>P\d+)\s*\]\s*", re.IGNORECASE
)
SUFFIX_PRIORITY_PATTERN = re.compile(r"\s*[-–—]\s*(?P<priority>P\d+)\s*$", re.IGNORECASE)
ID_TITLE_PATTERN = re.compile(r"^(?P<id>TC[\w-]+)\s*[—–\-:]\s*(?P<title>.+)$", re.IGNORECASE)


class HeadingMatch(NamedTuple):
    is_heading: bool
    raw_heading_text: Optional[str] = None


class ParsedHeading(NamedTuple):
    id: str
    title: str
    priority: str


def is_discardable_line(trimmed_line: str) -> bool:
    """Separator rules (---) and ### block headings carry no test case content."""
    if SEPARATOR_PATTERN.match(trimmed_line):
        return True
    return bool(BLOCK_HEADING_PATTERN.match(trimmed_line))


def classify_heading(trimmed_line: str) -> HeadingMatch:
    """
    Decide whether a line opens a new test case.

    Two dialects are recognized:
      - ``#### TC01 — Title — P1`` (the text after the marker is returned)
      - ``TC01 - Title [Priority: P1]`` (the whole line is returned)
    """
    if is_discardable_line(trimmed_line):
        return HeadingMatch(False)

    markdown_match = MARKDOWN_HEADING_PATTERN.match(trimmed_line)
    if markdown_match:
        return HeadingMatch(True, markdown_match.group("heading").strip())

    if PLAIN_HEADING_PATTERN.match(trimmed_line):
        return HeadingMatch(True, trimmed_line)

    return HeadingMatch(False)


def parse_heading(raw_heading_text: str) -> ParsedHeading:
    """Split heading text into (id, title, priority).

    Priority markers are removed first so that a trailing ``— P1`` never ends
    up in the title. The bracket form wins over the suffix form.
    """
    heading = str(raw_heading_text or "").strip()
    priority: Optional[str] = None

    bracket_match = BRACKET_PRIORITY_PATTERN.search(heading)
    if bracket_match:
        priority = bracket_match.group("priority").upper()
        heading = BRACKET_PRIORITY_PATTERN.sub(" ", heading, count=1).strip()

    suffix_match = SUFFIX_PRIORITY_PATTERN.search(heading)
    if suffix_match:
        if priority is None:
            priority = suffix_match.group("priority").upper()
        heading = heading[: suffix_match.start()].strip()

    if priority is None:
        priority = DEFAULT_PRIORITY

    id_match = ID_TITLE_PATTERN.match(heading)
    if id_match:
        return ParsedHeading(
            id=id_match.group("id").upper(),
            title=id_match.group("title").strip(),
            priority=priority,
        )

    return ParsedHeading(id="", title=heading.strip(), priority=priority)
