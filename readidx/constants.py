# Path: readidx/constants.py
"""
System-Wide Constants for readidx

Central repository for constant values used by the services, CLIs and
HTTP surface.

Constants are organized by category:
- Validation Limits
- Archive Conventions
- User Messages (Indonesian, shown to end users)
- Status Codes
"""

from typing import Final


# ==============================================================================
# VALIDATION LIMITS
# ==============================================================================

TICKER_PATTERN: Final[str] = r'^[A-Z0-9.\-]{3,10}$'
MIN_FISCAL_YEAR: Final[int] = 1990
MAX_FISCAL_YEAR: Final[int] = 2100
MIN_FISCAL_QUARTER: Final[int] = 1
MAX_FISCAL_QUARTER: Final[int] = 4


# ==============================================================================
# ARCHIVE CONVENTIONS
# ==============================================================================

ARCHIVE_EXTENSION: Final[str] = '.zip'
INSTANCE_FILE_NAME: Final[str] = 'instance.xbrl'
TAXONOMY_FILE_NAME: Final[str] = 'Taxonomy.xsd'
STORED_ARCHIVE_TIMESTAMP: Final[str] = '%Y%m%d_%H%M%S'


# ==============================================================================
# USER MESSAGES
# ==============================================================================

MSG_TICKER_REQUIRED: Final[str] = 'Ticker wajib diisi.'
MSG_TICKER_INVALID: Final[str] = 'Ticker hanya boleh berisi huruf, angka, titik, atau strip.'
MSG_YEAR_NOT_NUMERIC: Final[str] = 'Tahun harus berupa angka.'
MSG_YEAR_OUT_OF_RANGE: Final[str] = 'Tahun berada di luar rentang yang diizinkan.'
MSG_QUARTER_NOT_NUMERIC: Final[str] = 'Kuartal harus berupa angka antara 1 hingga 4.'
MSG_QUARTER_OUT_OF_RANGE: Final[str] = 'Kuartal harus bernilai 1 sampai 4.'
MSG_COMPANY_NAME_REQUIRED: Final[str] = 'Nama perusahaan wajib diisi.'
MSG_UPLOAD_NOT_FOUND: Final[str] = 'Berkas unggahan tidak ditemukan.'
MSG_UPLOAD_NOT_ZIP: Final[str] = 'Berkas yang diunggah harus berformat ZIP.'
MSG_REPORT_NOT_FOUND: Final[str] = 'Data laporan tidak ditemukan untuk parameter yang diberikan.'

MSG_UPLOAD_FILE_REQUIRED: Final[str] = 'Berkas ZIP wajib diunggah.'
MSG_UPLOAD_SUCCESS: Final[str] = 'Laporan berhasil diunggah dan diproses.'
MSG_LIST_FAILED: Final[str] = 'Tidak dapat mengambil daftar laporan.'
MSG_SERVER_ERROR: Final[str] = 'Terjadi kesalahan pada server.'
MSG_METHOD_NOT_ALLOWED: Final[str] = 'Metode tidak diizinkan.'

MSG_PARAMETER_REQUIRED: Final[str] = 'Parameter --{name} wajib diisi.'
MSG_IMPORT_SUCCESS: Final[str] = 'Berhasil mengimpor {count} baris.'
MSG_IMPORT_FAILED: Final[str] = 'Gagal mengimpor data: {error}'

MSG_ARCHIVE_MISSING_MEMBERS: Final[str] = (
    f'The archive must contain {INSTANCE_FILE_NAME} and {TAXONOMY_FILE_NAME}'
)


# ==============================================================================
# STATUS CODES
# ==============================================================================

RESPONSE_SUCCESS: Final[str] = 'success'
RESPONSE_ERROR: Final[str] = 'error'

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'
STATUS_ERROR: Final[str] = '[ERROR]'


__all__ = [
    'TICKER_PATTERN',
    'MIN_FISCAL_YEAR',
    'MAX_FISCAL_YEAR',
    'MIN_FISCAL_QUARTER',
    'MAX_FISCAL_QUARTER',
    'ARCHIVE_EXTENSION',
    'INSTANCE_FILE_NAME',
    'TAXONOMY_FILE_NAME',
    'STORED_ARCHIVE_TIMESTAMP',
    'MSG_TICKER_REQUIRED',
    'MSG_TICKER_INVALID',
    'MSG_YEAR_NOT_NUMERIC',
    'MSG_YEAR_OUT_OF_RANGE',
    'MSG_QUARTER_NOT_NUMERIC',
    'MSG_QUARTER_OUT_OF_RANGE',
    'MSG_COMPANY_NAME_REQUIRED',
    'MSG_UPLOAD_NOT_FOUND',
    'MSG_UPLOAD_NOT_ZIP',
    'MSG_REPORT_NOT_FOUND',
    'MSG_UPLOAD_FILE_REQUIRED',
    'MSG_UPLOAD_SUCCESS',
    'MSG_LIST_FAILED',
    'MSG_SERVER_ERROR',
    'MSG_METHOD_NOT_ALLOWED',
    'MSG_PARAMETER_REQUIRED',
    'MSG_IMPORT_SUCCESS',
    'MSG_IMPORT_FAILED',
    'MSG_ARCHIVE_MISSING_MEMBERS',
    'RESPONSE_SUCCESS',
    'RESPONSE_ERROR',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'STATUS_ERROR',
]
