"""
測試案例文字轉 CSV 服務

將 Markdown / BDD 或純文字格式的測試案例轉換為 CSV
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from tcconvert.config import ConverterConfig, get_settings
from tcconvert.models.testcase_import import ConversionResult, InputFormat, TestCase
from tcconvert.services.testcase_import import (
    parse_bdd_markdown,
    parse_titled_testcases,
    serialize_bdd_csv,
    serialize_title_description_csv,
)

logger = logging.getLogger(__name__)

Parser = Callable[[str], List[TestCase]]
Serializer = Callable[[Sequence[TestCase]], str]

BYTE_ORDER_MARK = "\ufeff"

PIPELINES: Dict[InputFormat, Tuple[Parser, Serializer]] = {
    InputFormat.BDD: (parse_bdd_markdown, serialize_bdd_csv),
    InputFormat.TESTCASE: (parse_titled_testcases, serialize_title_description_csv),
}

NO_RECORDS_HINTS = {
    InputFormat.BDD: (
        'No test cases found. Make sure your markdown contains headings starting with "#### " (H4) '
        'or plain headings such as "TC01 - Title".'
    ),
    InputFormat.TESTCASE: (
        "No test cases found. Make sure each test case starts with a title line followed by "
        "section headers such as Given, When and Then."
    ),
}


class TestCaseImportError(Exception):
    """轉換錯誤"""

    __test__ = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EmptyInputError(TestCaseImportError):
    def __init__(self, message: str = "Please enter or paste test case content first."):
        super().__init__(message)


class NoRecordsFoundError(TestCaseImportError):
    def __init__(self, input_format: InputFormat):
        self.input_format = input_format
        super().__init__(NO_RECORDS_HINTS[input_format])


class TestCaseParseError(TestCaseImportError):
    """Unexpected failure inside a parser pass."""

    def __init__(self, message: str):
        super().__init__(f"Error parsing test cases: {message}")


def count_missing_sections(records: Sequence[TestCase]) -> int:
    """Number of records missing at least one of Given/Steps/Expected/Actual."""
    return sum(1 for record in records if record.has_missing_sections())


def build_summary_message(total_count: int, missing_count: int) -> str:
    message = f"Parsed {total_count} test case{'' if total_count == 1 else 's'} successfully."
    if missing_count > 0:
        message += f"\n{missing_count} test case{'' if missing_count == 1 else 's'} had missing sections."
    return message


class TestCaseImportService:
    """Convert one free-text blob into test case records and CSV."""

    __test__ = False

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or get_settings().converter

    def parse(self, text: str, input_format: InputFormat) -> List[TestCase]:
        parser, _ = PIPELINES[input_format]
        try:
            return parser(text)
        except Exception as e:
            logger.exception("測試案例解析失敗 (format=%s)", input_format.value)
            raise TestCaseParseError(str(e)) from e

    def convert(self, text: str, input_format: Optional[InputFormat] = None) -> ConversionResult:
        """
        執行一次轉換

        Raises:
            EmptyInputError: 輸入為空白
            NoRecordsFoundError: 沒有解析出任何測試案例
            TestCaseParseError: 解析過程發生非預期錯誤
        """
        input_format = InputFormat(input_format or self.config.default_input_format)
        source = str(text or "").lstrip(BYTE_ORDER_MARK).strip()
        if not source:
            raise EmptyInputError()

        records = self.parse(source, input_format)
        if not records:
            logger.warning("沒有找到測試案例 (format=%s)", input_format.value)
            raise NoRecordsFoundError(input_format)

        _, serializer = PIPELINES[input_format]
        try:
            csv_text = serializer(records)
        except Exception as e:
            logger.exception("CSV 產生失敗 (format=%s)", input_format.value)
            raise TestCaseParseError(str(e)) from e

        missing_count = count_missing_sections(records)
        logger.info(
            "轉換完成 format=%s total=%d missing_sections=%d",
            input_format.value,
            len(records),
            missing_count,
        )
        return ConversionResult(
            input_format=input_format,
            records=records,
            csv=csv_text,
            filename=self.config.csv_filename,
            total_count=len(records),
            missing_section_count=missing_count,
            message=build_summary_message(len(records), missing_count),
        )


def convert_testcase_text(text: str, input_format: Optional[InputFormat] = None) -> ConversionResult:
    """便利函數"""
    return TestCaseImportService().convert(text, input_format)
