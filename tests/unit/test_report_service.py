# Path: tests/unit/test_report_service.py
"""
Unit Tests for ReportService

Tests:
- Ticker, year and quarter validation messages
- Upload storage naming and cleanup on failure
- Report import replacing earlier lines
- Report lookup and listing
"""

import re
from unittest.mock import MagicMock

import pytest

from readidx.constants import (
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
from readidx.services import ReportService, ReportValidationError, ReportNotFoundError
from readidx.xbrl_parser.models.error import ArchiveError, NoFactsFoundError

from fixtures.sample_data import (
    create_inline_archive,
    create_inline_xhtml,
    write_zip,
)


STORED_NAME = re.compile(r'^BBCA_2024_Q4_\d{8}_\d{6}\.zip$')


@pytest.fixture
def service(mock_config, in_memory_db):
    return ReportService(mock_config)


@pytest.fixture
def upload(temp_dir):
    return write_zip(temp_dir / 'upload' / 'laporan.zip', {})


@pytest.fixture
def inline_upload(temp_dir):
    path = temp_dir / 'upload' / 'laporan.zip'
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(create_inline_archive())
    return path


class TestValidation:
    """Tests for validate_ticker_period()."""

    def test_normalizes(self, mock_config):
        result = ReportService(mock_config).validate_ticker_period(' bbca ', '2024', ' 4 ')
        assert result == ('BBCA', 2024, 4)

    def test_accepts_integers(self, mock_config):
        assert ReportService(mock_config).validate_ticker_period('TLKM', 2023, 1) == ('TLKM', 2023, 1)

    @pytest.mark.parametrize('ticker,year,quarter,message', [
        ('', '2024', '4', MSG_TICKER_REQUIRED),
        (None, '2024', '4', MSG_TICKER_REQUIRED),
        ('BB', '2024', '4', MSG_TICKER_INVALID),
        ('BB CA', '2024', '4', MSG_TICKER_INVALID),
        ('BBCA', '20x4', '4', MSG_YEAR_NOT_NUMERIC),
        ('BBCA', '-2024', '4', MSG_YEAR_NOT_NUMERIC),
        ('BBCA', '1989', '4', MSG_YEAR_OUT_OF_RANGE),
        ('BBCA', '2101', '4', MSG_YEAR_OUT_OF_RANGE),
        ('BBCA', '2024', 'IV', MSG_QUARTER_NOT_NUMERIC),
        ('BBCA', '2024', '0', MSG_QUARTER_OUT_OF_RANGE),
        ('BBCA', '2024', '5', MSG_QUARTER_OUT_OF_RANGE),
    ])
    def test_rejects(self, mock_config, ticker, year, quarter, message):
        with pytest.raises(ReportValidationError) as exc_info:
            ReportService(mock_config).validate_ticker_period(ticker, year, quarter)

        assert str(exc_info.value) == message

    def test_ticker_with_dot_and_dash(self, mock_config):
        assert ReportService(mock_config).validate_ticker_period('brk.b', '2024', '1')[0] == 'BRK.B'


class TestImportReport:
    """Tests for import_report()."""

    def test_import_stores_archive_and_lines(self, service, inline_upload, mock_config):
        summary = service.import_report('bbca', 'Bank Central Asia', '2024', '4', inline_upload)

        assert summary['company'] == {'ticker': 'BBCA', 'name': 'Bank Central Asia'}
        assert summary['fiscal_year'] == 2024
        assert summary['fiscal_quarter'] == 4
        assert summary['line_count'] == 4
        assert STORED_NAME.match(summary['source_file'])
        assert (mock_config.get('storage_dir') / summary['source_file']).is_file()

    def test_reupload_replaces_lines(self, service, inline_upload, temp_dir):
        service.import_report('BBCA', 'Bank Central Asia', '2024', '4', inline_upload)
        second = write_zip(temp_dir / 'upload' / 'revisi.zip', {
            'page.xhtml': create_inline_xhtml([
                {'name': 'idx-cor:Cash', 'value': '99', 'unitRef': 'IDR'},
            ]),
        })

        summary = service.import_report('BBCA', 'PT Bank Central Asia Tbk', '2024', '4', second)
        report = service.get_report('BBCA', '2024', '4')

        assert summary['line_count'] == 1
        assert report['company']['name'] == 'PT Bank Central Asia Tbk'
        assert report['lines'] == [{'line_item': 'idx-cor:Cash', 'value': 99.0, 'unit': 'IDR'}]
        assert len(service.list_reports()) == 1

    def test_without_storing(self, service, inline_upload, mock_config):
        summary = service.import_report(
            'BBCA', 'Bank Central Asia', '2024', '4', inline_upload,
            original_filename='laporan.zip', store_archive=False
        )

        assert summary['source_file'] == 'laporan.zip'
        assert not mock_config.get('storage_dir').exists()

    def test_company_name_required(self, service, inline_upload):
        with pytest.raises(ReportValidationError, match=MSG_COMPANY_NAME_REQUIRED):
            service.import_report('BBCA', '  ', '2024', '4', inline_upload)

    def test_missing_upload(self, service, temp_dir):
        with pytest.raises(ReportValidationError) as exc_info:
            service.import_report('BBCA', 'Bank', '2024', '4', temp_dir / 'nope.zip')
        assert str(exc_info.value) == MSG_UPLOAD_NOT_FOUND

    def test_extension_checked_on_original_name(self, service, inline_upload):
        with pytest.raises(ReportValidationError) as exc_info:
            service.import_report(
                'BBCA', 'Bank', '2024', '4', inline_upload, original_filename='laporan.rar'
            )
        assert str(exc_info.value) == MSG_UPLOAD_NOT_ZIP

    def test_no_facts_removes_stored_copy(self, service, upload, mock_config):
        with pytest.raises(NoFactsFoundError):
            service.import_report('BBCA', 'Bank', '2024', '4', upload)

        assert list(mock_config.get('storage_dir').iterdir()) == []
        assert service.list_reports() == []

    def test_bad_archive_removes_stored_copy(self, service, temp_dir, mock_config):
        path = temp_dir / 'upload' / 'rusak.zip'
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b'bukan zip')

        with pytest.raises(ArchiveError):
            service.import_report('BBCA', 'Bank', '2024', '4', path)

        assert list(mock_config.get('storage_dir').iterdir()) == []

    def test_extractor_override(self, mock_config, in_memory_db, inline_upload):
        extractor = MagicMock()
        extractor.extract_archive.return_value.facts = []

        summary = ReportService(mock_config, extractor).import_report(
            'BBCA', 'Bank', '2024', '4', inline_upload, store_archive=False
        )

        extractor.extract_archive.assert_called_once_with(inline_upload)
        assert summary['line_count'] == 0


class TestQueries:
    """Tests for get_report() and list_reports()."""

    def test_get_report_lines_in_order(self, service, inline_upload):
        service.import_report('BBCA', 'Bank Central Asia', '2024', '4', inline_upload)

        report = service.get_report('bbca', 2024, 4)

        assert report['company']['ticker'] == 'BBCA'
        assert [line['line_item'] for line in report['lines']] == [
            'idx-cor:Revenue', 'idx-cor:NetIncome', 'Cash', 'Equity',
        ]
        assert report['lines'][1]['value'] == pytest.approx(-45678.90)
        assert report['lines'][3] == {'line_item': 'Equity', 'value': 750.5, 'unit': 'IDR'}

    def test_get_report_not_found(self, service):
        with pytest.raises(ReportNotFoundError) as exc_info:
            service.get_report('BBCA', '2024', '4')

        assert str(exc_info.value) == MSG_REPORT_NOT_FOUND

    def test_get_report_validates(self, service):
        with pytest.raises(ReportValidationError, match='Kuartal'):
            service.get_report('BBCA', '2024', '9')

    def test_list_reports(self, service, inline_upload):
        service.import_report('BBCA', 'Bank Central Asia', '2024', '3', inline_upload)
        service.import_report('TLKM', 'Telkom Indonesia', '2024', '4', inline_upload)

        rows = service.list_reports()

        assert [(r['ticker'], r['fiscal_quarter']) for r in rows] == [('TLKM', 4), ('BBCA', 3)]
        assert all(r['line_count'] == 4 for r in rows)
