from __future__ import annotations

import logging
from typing import List, Optional

from tcconvert.models.testcase_import import SectionKind, TestCase

from .case_builder import OpenTestCase
from .heading_parser import classify_heading, is_discardable_line, parse_heading
from .id_assigner import assign_missing_ids
from .section_classifier import classify_section_line

logger = logging.getLogger(__name__)


def parse_bdd_markdown(text: str) -> List[TestCase]:
    """
    Parse Markdown / BDD test cases.

    A test case starts at a ``#### `` heading or a bare ``TC01 - Title`` line
    and runs until the next one. Lines before the first heading are ignored.
    Records without an ID receive one from ``assign_missing_ids``.
    """
    records: List[TestCase] = []
    current_case: Optional[OpenTestCase] = None
    current_section = SectionKind.NONE

    for raw_line in str(text or "").splitlines():
        trimmed = raw_line.strip()

        if not trimmed:
            current_section = SectionKind.NONE
            continue

        if is_discardable_line(trimmed):
            continue

        heading = classify_heading(trimmed)
        if heading.is_heading:
            if current_case is not None:
                records.append(_seal(current_case))
            parsed = parse_heading(heading.raw_heading_text or "")
            current_case = OpenTestCase(id=parsed.id, title=parsed.title, priority=parsed.priority)
            current_section = SectionKind.NONE
            continue

        if current_case is None:
            continue

        routed = classify_section_line(trimmed, current_section)
        current_section = routed.target(current_section)
        if routed.content:
            current_case.append(current_section, routed.content)

    if current_case is not None:
        records.append(_seal(current_case))

    return assign_missing_ids(records)


def _seal(case: OpenTestCase) -> TestCase:
    record = case.seal()
    logger.debug(
        "sealed test case id=%r title=%r given=%d steps=%d expected=%d actual=%d",
        record.id,
        record.title,
        len(record.given),
        len(record.steps),
        len(record.expected_results),
        len(record.actual_results),
    )
    return record
