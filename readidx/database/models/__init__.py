# Path: readidx/database/models/__init__.py
"""
Database Models for readidx.

Provides SQLAlchemy models for storing:
- Companies, financial reports and extracted line items
- Imported XBRL documents with their taxonomy, contexts, units and facts
"""

from .base import (
    Base,
    initialize_engine,
    get_engine,
    get_session,
    session_scope,
    create_all_tables,
    drop_all_tables,
    reset_engine,
)
from .reports import Company, FinancialReport, FinancialLine
from .xbrl import (
    XBRLDocument,
    TaxonomyConcept,
    TaxonomyLinkbase,
    TaxonomyRoleRef,
    XBRLContext,
    XBRLContextDimension,
    XBRLUnit,
    XBRLFact,
)


__all__ = [
    'Base',
    'initialize_engine',
    'get_engine',
    'get_session',
    'session_scope',
    'create_all_tables',
    'drop_all_tables',
    'reset_engine',
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
]
