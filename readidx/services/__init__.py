# Path: readidx/services/__init__.py
"""
Services

Workflows that tie the parser to the database:
- ReportService: inline XBRL upload, report lookup and listing
- XBRLImportService: instance + taxonomy archive import
"""

from .errors import ReportValidationError, ReportNotFoundError
from .report_service import ReportService
from .xbrl_import_service import XBRLImportService, ImportSummary, bootstrap_schema

__all__ = [
    'ReportValidationError',
    'ReportNotFoundError',
    'ReportService',
    'XBRLImportService',
    'ImportSummary',
    'bootstrap_schema',
]
