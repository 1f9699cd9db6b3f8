from __future__ import annotations

from typing import Dict, List, Sequence

from tcconvert.models.testcase_import import DEFAULT_PRIORITY, SECTION_FIELDS, SectionKind, TestCase

from .csv_writer import to_csv

BDD_CSV_HEADERS = [
    "Test Case ID",
    "Title",
    "Test Steps",
    "Actual Results",
    "Priority",
    "Tags",
]
TITLE_DESCRIPTION_CSV_HEADERS = ["Title", "Description"]

STEP_LINE_LABELS = (
    (SectionKind.GIVEN, "Given"),
    (SectionKind.STEPS, "When"),
    (SectionKind.EXPECTED_RESULTS, "Then"),
)
SECTION_LABELS = {
    SectionKind.GIVEN: "Given (Preconditions)",
    SectionKind.STEPS: "Steps (When)",
    SectionKind.EXPECTED_RESULTS: "Expected Results (Then)",
    SectionKind.ACTUAL_RESULTS: "Actual Results",
}
ITEM_SEPARATOR = "; "


def build_test_steps(record: TestCase) -> str:
    """``Given: a; b`` / ``When: ...`` / ``Then: ...`` lines, empty sections skipped."""
    lines: List[str] = []
    for kind, label in STEP_LINE_LABELS:
        items = record.section(kind)
        if items:
            lines.append(f"{label}: {ITEM_SEPARATOR.join(items)}")
    return "\n".join(lines)


def build_description(record: TestCase) -> str:
    """Markdown-ish description: one ``##Label`` block per non-empty section."""
    blocks: List[str] = []
    for kind in SECTION_FIELDS:
        items = record.section(kind)
        if not items:
            continue
        blocks.append("\n".join([f"##{SECTION_LABELS[kind]}", *items]))
    return "\n\n".join(blocks)


def to_bdd_row(record: TestCase) -> Dict[str, str]:
    return {
        "Test Case ID": record.id,
        "Title": record.title,
        "Test Steps": build_test_steps(record),
        "Actual Results": ITEM_SEPARATOR.join(record.actual_results),
        "Priority": record.priority or DEFAULT_PRIORITY,
        "Tags": "",
    }


def to_title_description_row(record: TestCase) -> Dict[str, str]:
    return {
        "Title": record.title,
        "Description": build_description(record),
    }


def serialize_bdd_csv(records: Sequence[TestCase]) -> str:
    return to_csv([to_bdd_row(record) for record in records], BDD_CSV_HEADERS)


def serialize_title_description_csv(records: Sequence[TestCase]) -> str:
    return to_csv([to_title_description_row(record) for record in records], TITLE_DESCRIPTION_CSV_HEADERS)
