from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tcconvert.services.testcase_import.heading_parser import (
    ParsedHeading,
    classify_heading,
    is_discardable_line,
    parse_heading,
)


def test_markdown_heading_returns_text_after_marker():
    match = classify_heading("####   TC01 — Login — P1")
    assert match.is_heading is True
    assert match.raw_heading_text == "TC01 — Login — P1"


@pytest.mark.parametrize(
    "line",
    [
        "TC02 - Update Name - Happy Path [Priority: P0]",
        "TC3: Logout",
        "TC14 – Reset password",
        "TC15—Delete account",
    ],
)
def test_plain_heading_returns_whole_line(line):
    match = classify_heading(line)
    assert match.is_heading is True
    assert match.raw_heading_text == line


@pytest.mark.parametrize(
    "line",
    [
        "### BLOCK A - Profile",
        "---",
        "----------",
        "##### Too deep",
        "Given the user is logged in",
        "TC - missing number",
        "TC01",
    ],
)
def test_non_heading_lines(line):
    match = classify_heading(line)
    assert match.is_heading is False
    assert match.raw_heading_text is None


def test_discardable_lines():
    assert is_discardable_line("---")
    assert is_discardable_line("-------")
    assert is_discardable_line("### BLOCK 2")
    assert not is_discardable_line("#### TC01 - Title")
    assert not is_discardable_line("- bullet")


def test_parse_em_dash_heading_with_suffix_priority():
    assert parse_heading("TC01 — Login — P1") == ParsedHeading("TC01", "Login", "P1")


def test_parse_heading_with_bracket_priority():
    parsed = parse_heading("TC02 - Update Name - Happy Path [Priority: P0]")
    assert parsed.id == "TC02"
    assert parsed.title == "Update Name - Happy Path"
    assert parsed.priority == "P0"


def test_priority_defaults_to_p1():
    assert parse_heading("TC04 - No priority here").priority == "P1"


def test_bracket_priority_is_case_insensitive():
    assert parse_heading("TC05 - Lowercase [priority:p2]").priority == "P2"
    assert parse_heading("TC05 - Spaced [ Priority :  p7 ]").priority == "P7"


def test_suffix_priority_accepts_dash_family():
    assert parse_heading("TC06 - Hyphen - P3").priority == "P3"
    assert parse_heading("TC06 – En dash – p4").priority == "P4"


def test_bracket_priority_wins_over_suffix():
    parsed = parse_heading("TC07 — Checkout — P3 [Priority: P2]")
    assert parsed == ParsedHeading("TC07", "Checkout", "P2")


def test_bracket_in_middle_is_removed_from_title():
    assert parse_heading("TC08 [Priority: P4] - Middle") == ParsedHeading("TC08", "Middle", "P4")


def test_id_is_uppercased_and_accepts_dashes():
    assert parse_heading("tc09: lowercase id").id == "TC09"
    assert parse_heading("TC-LOGIN-01 - Named id") == ParsedHeading("TC-LOGIN-01", "Named id", "P1")


def test_heading_without_id_keeps_whole_text_as_title():
    assert parse_heading("Checkout with coupon — P2") == ParsedHeading("", "Checkout with coupon", "P2")
    assert parse_heading("  Just a title  ") == ParsedHeading("", "Just a title", "P1")
