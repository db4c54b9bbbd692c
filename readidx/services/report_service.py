# Path: readidx/services/report_service.py
"""
Report Service

Inline XBRL upload workflow: validate the request, store the archive,
extract facts, and replace the report's line items in one transaction.

Example:
    service = ReportService()
    summary = service.import_report('BBCA', 'Bank Central Asia', '2024', '4',
                                    Path('/tmp/upload.zip'), 'laporan.zip')
    report = service.get_report('BBCA', '2024', '4')
"""

import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from ..config_loader import ConfigLoader
from ..constants import (
    TICKER_PATTERN,
    MIN_FISCAL_YEAR,
    MAX_FISCAL_YEAR,
    MIN_FISCAL_QUARTER,
    MAX_FISCAL_QUARTER,
    ARCHIVE_EXTENSION,
    STORED_ARCHIVE_TIMESTAMP,
    MSG_TICKER_REQUIRED,
    MSG_TICKER_INVALID,
    MSG_YEAR_NOT_NUMERIC,
    MSG_YEAR_OUT_OF_RANGE,
    MSG_QUARTER_NOT_NUMERIC,
    MSG_QUARTER_OUT_OF_RANGE,
    MSG_COMPANY_NAME_REQUIRED,
    MSG_UPLOAD_NOT_FOUND,
    MSG_UPLOAD_NOT_ZIP,
    MSG_REPORT_NOT_FOUND,
)
from ..core.logger import get_input_logger, get_process_logger
from ..database import session_scope, ReportOperations
from ..xbrl_parser.ixbrl import ArchiveFactExtractor
from .errors import ReportValidationError, ReportNotFoundError


_TICKER_RE = re.compile(TICKER_PATTERN)
_DIGITS_RE = re.compile(r'^[0-9]+$')
_UNSAFE_TICKER_CHARS = re.compile(r'[^A-Z0-9]')


class ReportService:
    """
    Upload, lookup and listing of quarterly reports.

    The database engine must be initialized before use.

    Example:
        initialize_database()
        service = ReportService()
        rows = service.list_reports()
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        extractor: Optional[ArchiveFactExtractor] = None
    ):
        """
        Initialize report service.

        Args:
            config: Configuration loader (storage_dir, default_unit)
            extractor: Archive extractor override
        """
        self.config = config or ConfigLoader()
        self.extractor = extractor or ArchiveFactExtractor(self.config)
        self.input_logger = get_input_logger('report_upload')
        self.logger = get_process_logger('report_service')

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_ticker_period(
        self,
        ticker: Any,
        year: Any,
        quarter: Any
    ) -> tuple[str, int, int]:
        """
        Normalize and validate ticker, fiscal year and quarter.

        Returns:
            (upper-case ticker, year, quarter)

        Raises:
            ReportValidationError: With the user-facing message
        """
        ticker = str(ticker if ticker is not None else '').strip().upper()
        if not ticker:
            raise ReportValidationError(MSG_TICKER_REQUIRED)
        if not _TICKER_RE.match(ticker):
            raise ReportValidationError(MSG_TICKER_INVALID)

        year_text = str(year if year is not None else '').strip()
        if not _DIGITS_RE.match(year_text):
            raise ReportValidationError(MSG_YEAR_NOT_NUMERIC)
        year_int = int(year_text)
        if not MIN_FISCAL_YEAR <= year_int <= MAX_FISCAL_YEAR:
            raise ReportValidationError(MSG_YEAR_OUT_OF_RANGE)

        quarter_text = str(quarter if quarter is not None else '').strip()
        if not _DIGITS_RE.match(quarter_text):
            raise ReportValidationError(MSG_QUARTER_NOT_NUMERIC)
        quarter_int = int(quarter_text)
        if not MIN_FISCAL_QUARTER <= quarter_int <= MAX_FISCAL_QUARTER:
            raise ReportValidationError(MSG_QUARTER_OUT_OF_RANGE)

        return ticker, year_int, quarter_int

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_report(
        self,
        ticker: Any,
        company_name: Any,
        year: Any,
        quarter: Any,
        source_path: Union[Path, str],
        original_filename: Optional[str] = None,
        store_archive: bool = True
    ) -> dict[str, Any]:
        """
        Import an inline XBRL archive as a quarterly report.

        Args:
            ticker: Exchange ticker
            company_name: Company name
            year: Fiscal year (digits)
            quarter: Fiscal quarter (digits)
            source_path: Uploaded archive
            original_filename: Name the user uploaded (extension check)
            store_archive: Copy the archive into storage_dir first

        Returns:
            Summary dict: company, fiscal_year, fiscal_quarter,
            line_count, source_file

        Raises:
            ReportValidationError: Invalid input
            ArchiveError: Archive cannot be opened
            NoFactsFoundError: No facts in the archive
        """
        ticker, year_int, quarter_int = self.validate_ticker_period(ticker, year, quarter)

        company_name = str(company_name if company_name is not None else '').strip()
        if not company_name:
            raise ReportValidationError(MSG_COMPANY_NAME_REQUIRED)

        source_path = Path(source_path)
        if not source_path.is_file():
            raise ReportValidationError(MSG_UPLOAD_NOT_FOUND)

        original_name = original_filename or source_path.name
        if Path(original_name).suffix.lower() != ARCHIVE_EXTENSION:
            raise ReportValidationError(MSG_UPLOAD_NOT_ZIP)

        self.input_logger.info(
            f"Import requested: {ticker} {year_int} Q{quarter_int} from {original_name}"
        )

        if store_archive:
            archive_path = self._store_archive(ticker, year_int, quarter_int, source_path)
        else:
            archive_path = source_path

        try:
            extraction = self.extractor.extract_archive(archive_path)
        except Exception:
            if store_archive:
                archive_path.unlink(missing_ok=True)
            raise

        source_file = archive_path.name if store_archive else original_name

        with session_scope() as session:
            company = ReportOperations.upsert_company(session, ticker, company_name)
            report = ReportOperations.create_or_update_report(
                session, company, year_int, quarter_int, source_file
            )
            line_count = ReportOperations.replace_lines(session, report, extraction.facts)

        self.logger.info(
            f"Imported {line_count} lines for {ticker} {year_int} Q{quarter_int}"
        )

        return {
            'company': {
                'ticker': ticker,
                'name': company_name,
            },
            'fiscal_year': year_int,
            'fiscal_quarter': quarter_int,
            'line_count': line_count,
            'source_file': source_file,
        }

    def _store_archive(self, ticker: str, year: int, quarter: int, source_path: Path) -> Path:
        """Copy the upload to storage_dir under a ticker/period/timestamp name."""
        storage_dir = Path(self.config.get('storage_dir') or 'instance_files')
        storage_dir.mkdir(parents=True, exist_ok=True)

        safe_ticker = _UNSAFE_TICKER_CHARS.sub('', ticker) or ticker
        timestamp = datetime.now().strftime(STORED_ARCHIVE_TIMESTAMP)
        target = storage_dir / f"{safe_ticker}_{year}_Q{quarter}_{timestamp}{ARCHIVE_EXTENSION}"

        shutil.copyfile(source_path, target)
        self.input_logger.info(f"Stored archive: {target}")
        return target

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_report(self, ticker: Any, year: Any, quarter: Any) -> dict[str, Any]:
        """
        Stored report with its lines in display order.

        Raises:
            ReportValidationError: Invalid parameters
            ReportNotFoundError: No such report
        """
        ticker, year_int, quarter_int = self.validate_ticker_period(ticker, year, quarter)

        with session_scope() as session:
            found = ReportOperations.get_report_lines(session, ticker, year_int, quarter_int)
            if found is None:
                raise ReportNotFoundError(MSG_REPORT_NOT_FOUND)

            report, lines = found
            return {
                'company': {
                    'ticker': report.company.ticker,
                    'name': report.company.name,
                },
                'fiscal_year': report.fiscal_year,
                'fiscal_quarter': report.fiscal_quarter,
                'source_file': report.source_file,
                'lines': [
                    {
                        'line_item': line.line_item,
                        'value': float(line.value),
                        'unit': line.unit,
                    }
                    for line in lines
                ],
            }

    def list_reports(self) -> list[dict[str, Any]]:
        """Summary rows for every stored report, newest period first."""
        with session_scope() as session:
            return ReportOperations.list_reports(session)


__all__ = ['ReportService']
