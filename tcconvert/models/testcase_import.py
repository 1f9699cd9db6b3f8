"""
Test case import data models
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_PRIORITY = "P1"


class InputFormat(str, Enum):
    BDD = "bdd"
    TESTCASE = "testcase"


class SectionKind(str, Enum):
    NONE = "none"
    GIVEN = "given"
    STEPS = "steps"
    EXPECTED_RESULTS = "expected_results"
    ACTUAL_RESULTS = "actual_results"


# Section fields on TestCase, in narrative order
SECTION_FIELDS = {
    SectionKind.GIVEN: "given",
    SectionKind.STEPS: "steps",
    SectionKind.EXPECTED_RESULTS: "expected_results",
    SectionKind.ACTUAL_RESULTS: "actual_results",
}


class TestCase(BaseModel):
    """A sealed test case record."""

    __test__ = False  # not a pytest class

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = ""
    priority: str = DEFAULT_PRIORITY
    given: Tuple[str, ...] = ()
    steps: Tuple[str, ...] = ()
    expected_results: Tuple[str, ...] = ()
    actual_results: Tuple[str, ...] = ()

    def section(self, kind: SectionKind) -> Tuple[str, ...]:
        return getattr(self, SECTION_FIELDS[kind])

    def has_missing_sections(self) -> bool:
        return not all(self.section(kind) for kind in SECTION_FIELDS)


class ConversionResult(BaseModel):
    """Outcome of one conversion call, owned by the caller."""

    input_format: InputFormat
    records: List[TestCase] = Field(default_factory=list)
    csv: str = ""
    filename: str = "testcases.csv"
    total_count: int = 0
    missing_section_count: int = 0
    message: str = ""


class TestCaseConvertRequest(BaseModel):
    __test__ = False

    text: str = Field(..., description="待轉換的測試案例文字")
    input_format: Optional[InputFormat] = Field(
        None, description="輸入格式（未填則使用設定檔預設值）"
    )

    @field_validator("text")
    @classmethod
    def _normalize_newlines(cls, value: str) -> str:
        return (value or "").replace("\r\n", "\n").replace("\r", "\n")


class TestCaseConvertResponse(BaseModel):
    __test__ = False

    success: bool
    message: str
    input_format: InputFormat
    total_count: int = 0
    missing_section_count: int = 0
    filename: str = ""
    csv: str = ""
    records: List[TestCase] = Field(default_factory=list)
