# Path: readidx/database/operations/__init__.py
"""
Database Operations for readidx.

Provides persistence operations for:
- Report operations (companies, reports, line items)
- XBRL operations (documents, concepts, contexts, units, facts)
"""

from .report_ops import ReportOperations
from .xbrl_ops import XBRLOperations


__all__ = [
    'ReportOperations',
    'XBRLOperations',
]
