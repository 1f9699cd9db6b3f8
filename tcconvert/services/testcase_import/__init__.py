"""Test case text import components."""

from .bdd_parser import parse_bdd_markdown
from .content_cleaner import clean_content_line
from .csv_writer import to_csv
from .heading_parser import classify_heading, parse_heading
from .id_assigner import assign_missing_ids
from .record_serializer import serialize_bdd_csv, serialize_title_description_csv
from .section_classifier import classify_section_line
from .title_block_parser import parse_titled_testcases

__all__ = [
    "assign_missing_ids",
    "classify_heading",
    "classify_section_line",
    "clean_content_line",
    "parse_bdd_markdown",
    "parse_heading",
    "parse_titled_testcases",
    "serialize_bdd_csv",
    "serialize_title_description_csv",
    "to_csv",
]
