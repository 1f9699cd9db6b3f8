from __future__ import annotations

import logging
import re
from typing import List, Optional

from tcconvert.models.testcase_import import SectionKind, TestCase

from .case_builder import OpenTestCase
from .content_cleaner import clean_content_line
from .id_assigner import assign_missing_ids
from .section_classifier import normalize_header_text

logger = logging.getLogger(__name__)

CASE_SEPARATOR_PATTERN = re.compile(r"^[-=]{10,}$")
RULE_LINE_PATTERN = re.compile(r"^[-=]{3,}$")
HEADER_PREFIX_PATTERN = re.compile(r"^#{1,4}\s*")
TITLE_PREFIX_PATTERN = re.compile(r"^#{1,6}\s*")
SECTION_HEADER_PATTERN = re.compile(
    r"^(?:given(?:preconditions?)?|when|steps(?:when)?|then|expectedresults?(?:then)?|actualresults?)$"
)


def match_section_header(trimmed_line: str) -> Optional[SectionKind]:
    """
    Recognize a loose section header such as ``## Given (Preconditions)``,
    ``Steps(When):`` or ``**Expected Result**``.
    """
    text = HEADER_PREFIX_PATTERN.sub("", trimmed_line)
    normalized = normalize_header_text(text)
    compact = re.sub(r"[\s()（）]", "", normalized)
    if not SECTION_HEADER_PATTERN.match(compact):
        return None

    if "given" in compact:
        return SectionKind.GIVEN
    if "actual" in compact:
        return SectionKind.ACTUAL_RESULTS
    if "expected" in compact:
        return SectionKind.EXPECTED_RESULTS
    if "steps" in compact or "when" in compact:
        return SectionKind.STEPS
    if "then" in compact:
        return SectionKind.EXPECTED_RESULTS
    return None


def _clean_title(trimmed_line: str) -> str:
    return clean_content_line(TITLE_PREFIX_PATTERN.sub("", trimmed_line))


def parse_titled_testcases(text: str) -> List[TestCase]:
    """
    Parse a plain test case dump without Markdown headings.

    A title is the first content line of the document, of a blank-line
    separated block, or after a ``----------`` separator. Lines under a
    section header are kept verbatim. A line that shows up between the title
    and the first section header is appended to the title. Headings are not
    split into id and priority; every record gets a generated ID.
    """
    records: List[TestCase] = []
    current_case: Optional[OpenTestCase] = None
    current_section = SectionKind.NONE
    expect_title = True

    def _seal() -> None:
        nonlocal current_case
        if current_case is not None:
            record = current_case.seal()
            logger.debug("sealed titled test case title=%r", record.title)
            records.append(record)
        current_case = None

    for raw_line in str(text or "").splitlines():
        trimmed = raw_line.strip()

        if not trimmed:
            expect_title = True
            continue

        if CASE_SEPARATOR_PATTERN.match(trimmed):
            _seal()
            current_section = SectionKind.NONE
            expect_title = True
            continue

        if RULE_LINE_PATTERN.match(trimmed):
            continue

        section = match_section_header(trimmed)
        if section is not None:
            if current_case is None:
                current_case = OpenTestCase()
            current_section = section
            expect_title = False
            continue

        if expect_title or current_case is None:
            _seal()
            current_case = OpenTestCase(title=_clean_title(trimmed))
            current_section = SectionKind.NONE
            expect_title = False
            continue

        if current_section is SectionKind.NONE:
            continuation = _clean_title(trimmed)
            current_case.title = f"{current_case.title} {continuation}".strip()
            continue

        current_case.append(current_section, trimmed)

    _seal()
    return assign_missing_ids(records)
