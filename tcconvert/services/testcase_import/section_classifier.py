from __future__ import annotations

import re
from typing import Dict, NamedTuple, Optional

from tcconvert.models.testcase_import import SectionKind

from .content_cleaner import clean_content_line

INLINE_MARKER_PATTERN = re.compile(
    r"^\*\*\s*(?P<keyword>given|when|then|actual\s+results)\s*:?\s*\*\*\s*:?\s*(?P<content>.*)$",
    re.IGNORECASE,
)
BDD_KEYWORD_PATTERN = re.compile(
    r"^(?P<keyword>given|when|then|and)\b:?\s+(?P<content>.+)$",
    re.IGNORECASE,
)
HEADER_WITH_TEXT_PATTERN = re.compile(r"^(?P<header>[^:]+):")
# "-item" bullets with no space after the marker
TIGHT_BULLET_PATTERN = re.compile(r"^[-+•](?=\S)")

KEYWORD_SECTIONS: Dict[str, SectionKind] = {
    "given": SectionKind.GIVEN,
    "when": SectionKind.STEPS,
    "then": SectionKind.EXPECTED_RESULTS,
    "actual results": SectionKind.ACTUAL_RESULTS,
}

HEADER_ALIASES: Dict[str, SectionKind] = {
    "given": SectionKind.GIVEN,
    "given (preconditions)": SectionKind.GIVEN,
    "when": SectionKind.STEPS,
    "steps (when)": SectionKind.STEPS,
    "then": SectionKind.EXPECTED_RESULTS,
    "expected results (then)": SectionKind.EXPECTED_RESULTS,
    "actual results": SectionKind.ACTUAL_RESULTS,
}


class SectionLine(NamedTuple):
    """How one line of a test case block is routed.

    ``new_section`` is set when the line opens (or re-opens) a section,
    ``is_continuation`` when it adds to the section already open, and
    ``content`` holds the cleaned payload, or None when the line has none.
    """

    new_section: Optional[SectionKind] = None
    is_continuation: bool = False
    content: Optional[str] = None

    def target(self, current_section: SectionKind) -> SectionKind:
        if self.new_section is not None:
            return self.new_section
        if self.is_continuation:
            return current_section
        return SectionKind.NONE


IGNORED_LINE = SectionLine()


def normalize_header_text(line: str) -> str:
    """Lower-case a header candidate without emphasis markers or trailing colon."""
    text = str(line or "").replace("**", "").replace("__", "")
    text = re.sub(r"\s+", " ", text).strip()
    text = text.rstrip(":：").strip()
    return text.lower()


def _payload(content: str) -> Optional[str]:
    cleaned = clean_content_line(content)
    return cleaned or None


def _match_header_alias(trimmed_line: str) -> Optional[SectionLine]:
    section = HEADER_ALIASES.get(normalize_header_text(trimmed_line))
    if section is not None:
        return SectionLine(new_section=section)

    # "Steps (When): open the page" opens the section, the rest of the line is dropped
    header_match = HEADER_WITH_TEXT_PATTERN.match(trimmed_line)
    if header_match:
        section = HEADER_ALIASES.get(normalize_header_text(header_match.group("header")))
        if section is not None:
            return SectionLine(new_section=section)
    return None


def classify_section_line(trimmed_line: str, current_section: SectionKind) -> SectionLine:
    """
    Route one non-empty line of a test case block.

    Precedence, first match wins:
      1. ``**Given** ...`` inline marker (Given/When/Then/Actual Results)
      2. bare ``Given/When/Then/And ...`` keyword; ``And`` continues the open
         section, or opens Expected Results when none is open
      3. standalone header line (``Steps (When)``, ``**Then:**`` ...)
      4. continuation content of the open section
      5. ignored
    """
    inline_match = INLINE_MARKER_PATTERN.match(trimmed_line)
    if inline_match:
        keyword = re.sub(r"\s+", " ", inline_match.group("keyword").lower())
        return SectionLine(
            new_section=KEYWORD_SECTIONS[keyword],
            content=_payload(inline_match.group("content")),
        )

    keyword_match = BDD_KEYWORD_PATTERN.match(trimmed_line)
    if keyword_match:
        keyword = keyword_match.group("keyword").lower()
        content = _payload(keyword_match.group("content"))
        if keyword != "and":
            return SectionLine(new_section=KEYWORD_SECTIONS[keyword], content=content)
        if current_section is SectionKind.NONE:
            return SectionLine(new_section=SectionKind.EXPECTED_RESULTS, content=content)
        return SectionLine(is_continuation=True, content=content)

    header = _match_header_alias(trimmed_line)
    if header is not None:
        return header

    if current_section is not SectionKind.NONE:
        content = TIGHT_BULLET_PATTERN.sub("", trimmed_line, count=1)
        return SectionLine(is_continuation=True, content=_payload(content))

    return IGNORED_LINE
