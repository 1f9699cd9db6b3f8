"""
測試案例匯入 API 端點
"""
import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from tcconvert.config import settings
from tcconvert.models.testcase_import import (
    ConversionResult,
    TestCaseConvertRequest,
    TestCaseConvertResponse,
)
from tcconvert.services.testcase_import_service import (
    EmptyInputError,
    NoRecordsFoundError,
    TestCaseImportService,
    TestCaseParseError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/testcase-import", tags=["testcase-import"])


def _run_conversion(request: TestCaseConvertRequest) -> ConversionResult:
    """執行轉換並將錯誤映射為 HTTP 狀態碼"""
    max_chars = settings.converter.max_input_chars
    if max_chars and len(request.text) > max_chars:
        raise HTTPException(status_code=400, detail=f"輸入內容超過上限 {max_chars} 字元")

    service = TestCaseImportService(settings.converter)
    try:
        return service.convert(request.text, request.input_format)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NoRecordsFoundError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except TestCaseParseError as e:
        raise HTTPException(status_code=500, detail=e.message)


@router.post("/convert", response_model=TestCaseConvertResponse)
async def convert_testcases(request: TestCaseConvertRequest):
    """
    將測試案例文字轉換為 CSV

    回傳解析摘要與 CSV 內容（不產生檔案）
    """
    result = _run_conversion(request)
    return TestCaseConvertResponse(
        success=True,
        message=result.message,
        input_format=result.input_format,
        total_count=result.total_count,
        missing_section_count=result.missing_section_count,
        filename=result.filename,
        csv=result.csv,
        records=result.records,
    )


@router.post("/download")
async def download_testcases_csv(request: TestCaseConvertRequest):
    """轉換後直接以 CSV 檔案下載"""
    result = _run_conversion(request)
    logger.info("下載 CSV: %s (%d 筆)", result.filename, result.total_count)
    return Response(
        content=result.csv.encode("utf-8"),
        media_type=settings.converter.csv_media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
