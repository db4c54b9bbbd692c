# Path: readidx/database/__init__.py
"""
readidx Database Module

Stores uploaded financial reports and imported XBRL documents.

This module provides:
- Database models for companies, reports, line items and XBRL documents
- Operations for writing and reading them
- Engine and transactional session management

Example:
    from readidx.database import initialize_database, session_scope, ReportOperations

    initialize_database()

    with session_scope() as session:
        rows = ReportOperations.list_reports(session)
"""

from typing import Optional

from .models.base import (
    Base,
    initialize_engine,
    get_engine,
    get_session,
    session_scope,
    create_all_tables,
    drop_all_tables,
    reset_engine,
    get_database_type,
)
from .models.reports import Company, FinancialReport, FinancialLine
from .models.xbrl import (
    XBRLDocument,
    TaxonomyConcept,
    TaxonomyLinkbase,
    TaxonomyRoleRef,
    XBRLContext,
    XBRLContextDimension,
    XBRLUnit,
    XBRLFact,
)
from .operations.report_ops import ReportOperations
from .operations.xbrl_ops import XBRLOperations


def initialize_database(db_url: Optional[str] = None) -> None:
    """
    Initialize the readidx database.

    Args:
        db_url: Optional database URL. If None, uses configuration.

    Example:
        # Use configured database
        initialize_database()

        # Use a local SQLite file
        initialize_database('sqlite:///data/readidx.db')
    """
    initialize_engine(db_url)
    create_all_tables()


__all__ = [
    # Initialization
    'initialize_database',
    'initialize_engine',
    'get_engine',
    'get_session',
    'session_scope',
    'create_all_tables',
    'drop_all_tables',
    'reset_engine',
    'get_database_type',
    # Models
    'Base',
    'Company',
    'FinancialReport',
    'FinancialLine',
    'XBRLDocument',
    'TaxonomyConcept',
    'TaxonomyLinkbase',
    'TaxonomyRoleRef',
    'XBRLContext',
    'XBRLContextDimension',
    'XBRLUnit',
    'XBRLFact',
    # Operations
    'ReportOperations',
    'XBRLOperations',
]
