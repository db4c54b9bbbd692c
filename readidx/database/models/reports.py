# Path: readidx/database/models/reports.py
"""
Financial Report Models

Companies, their quarterly reports, and the flat line items extracted
from uploaded inline XBRL archives.

Architecture:
- Company keyed by ticker
- One report per (company, fiscal year, fiscal quarter)
- Lines replaced wholesale on re-upload, ordered by display_order
"""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    Numeric,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from .base import Base


class Company(Base):
    """
    Listed company.

    Example:
        company = Company(ticker='BBCA', name='PT Bank Central Asia Tbk')
    """
    __tablename__ = 'companies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticker = Column(
        String(10),
        nullable=False,
        unique=True,
        comment="Exchange ticker, upper case"
    )
    name = Column(
        String(255),
        nullable=False,
        comment="Company name as entered at upload"
    )
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    reports = relationship(
        'FinancialReport',
        back_populates='company',
        cascade='all, delete-orphan',
    )

    def __repr__(self) -> str:
        return f"<Company(ticker='{self.ticker}', name='{self.name}')>"


class FinancialReport(Base):
    """
    Quarterly financial report of a company.

    Example:
        report = FinancialReport(
            company=company,
            fiscal_year=2024,
            fiscal_quarter=4,
            source_file='BBCA_2024_Q4_20250131_101500.zip'
        )
    """
    __tablename__ = 'financial_reports'
    __table_args__ = (
        UniqueConstraint(
            'company_id', 'fiscal_year', 'fiscal_quarter',
            name='uq_financial_reports_period'
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer,
        ForeignKey('companies.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    fiscal_year = Column(Integer, nullable=False)
    fiscal_quarter = Column(Integer, nullable=False)
    source_file = Column(
        String(255),
        comment="Stored archive name (last upload wins)"
    )
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    company = relationship('Company', back_populates='reports')
    lines = relationship(
        'FinancialLine',
        back_populates='report',
        cascade='all, delete-orphan',
        order_by='FinancialLine.display_order',
    )

    def __repr__(self) -> str:
        return (
            f"<FinancialReport(company_id={self.company_id}, "
            f"year={self.fiscal_year}, quarter={self.fiscal_quarter})>"
        )


class FinancialLine(Base):
    """Single extracted (line item, value, unit) row."""
    __tablename__ = 'financial_lines'

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(
        Integer,
        ForeignKey('financial_reports.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    line_item = Column(String(255), nullable=False)
    value = Column(Numeric(38, 10), nullable=False)
    unit = Column(String(50), nullable=False)
    display_order = Column(
        Integer,
        nullable=False,
        comment="Position of the fact in the archive"
    )

    report = relationship('FinancialReport', back_populates='lines')

    def __repr__(self) -> str:
        return f"<FinancialLine('{self.line_item}'={self.value} {self.unit})>"


__all__ = ['Company', 'FinancialReport', 'FinancialLine']
