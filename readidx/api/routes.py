# Path: readidx/api/routes.py
"""
Report Endpoints (API Layer)

- POST /api/upload   multipart upload of an inline XBRL archive
- GET  /api/reports  summary of every stored report
- GET  /api/report   one report by ticker/year/quarter (query string)
- POST /api/report   same, parameters in a JSON body

Responses use the envelope {"status": "success", "data": ...} or
{"status": "error", "message": ...}. Error mapping lives in app.py.
"""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from ..constants import (
    RESPONSE_SUCCESS,
    RESPONSE_ERROR,
    MSG_UPLOAD_FILE_REQUIRED,
    MSG_UPLOAD_SUCCESS,
    MSG_LIST_FAILED,
)
from ..core.logger import get_input_logger, get_output_logger
from ..services.errors import ReportValidationError
from ..services.report_service import ReportService


router = APIRouter(prefix="/api", tags=["reports"])

input_logger = get_input_logger('upload')
output_logger = get_output_logger('report_api')


def get_report_service() -> ReportService:
    """Dependency providing the report service."""
    return ReportService()


def success(data: Any, message: Optional[str] = None) -> dict[str, Any]:
    body: dict[str, Any] = {'status': RESPONSE_SUCCESS}
    if message:
        body['message'] = message
    body['data'] = data
    return body


@router.post("/upload")
def upload_report(
    ticker: str = Form(''),
    company_name: str = Form(''),
    year: str = Form(''),
    quarter: str = Form(''),
    report_file: Optional[UploadFile] = File(None),
    service: ReportService = Depends(get_report_service),
):
    """POST /api/upload - Store and import an inline XBRL archive."""
    if report_file is None or not report_file.filename:
        raise ReportValidationError(MSG_UPLOAD_FILE_REQUIRED)

    input_logger.info(f"Upload received: {report_file.filename} for {ticker}")

    with tempfile.NamedTemporaryFile(prefix='readidx_upload_', delete=False) as handle:
        shutil.copyfileobj(report_file.file, handle)
        upload_path = Path(handle.name)

    try:
        result = service.import_report(
            ticker=ticker,
            company_name=company_name,
            year=year,
            quarter=quarter,
            source_path=upload_path,
            original_filename=report_file.filename,
        )
    finally:
        upload_path.unlink(missing_ok=True)

    output_logger.info(f"Upload processed: {result['line_count']} lines")
    return success(result, MSG_UPLOAD_SUCCESS)


@router.get("/reports")
def list_reports(service: ReportService = Depends(get_report_service)):
    """GET /api/reports - Summary of stored reports."""
    try:
        return success(service.list_reports())
    except Exception:
        output_logger.exception("Listing reports failed")
        return JSONResponse(
            status_code=500,
            content={'status': RESPONSE_ERROR, 'message': MSG_LIST_FAILED},
        )


@router.get("/report")
def get_report(
    ticker: str = '',
    year: str = '',
    quarter: str = '',
    service: ReportService = Depends(get_report_service),
):
    """GET /api/report - One report by query parameters."""
    return success(service.get_report(ticker, year, quarter))


@router.post("/report")
async def post_report(request: Request, service: ReportService = Depends(get_report_service)):
    """POST /api/report - One report by JSON body, falling back to the query string."""
    try:
        params = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        params = None
    if not isinstance(params, dict):
        params = dict(request.query_params)

    return success(service.get_report(
        params.get('ticker', ''),
        params.get('year', ''),
        params.get('quarter', ''),
    ))


__all__ = ['router', 'get_report_service']
