# Path: readidx/database/operations/report_ops.py
"""
Report Operations

Persistence for companies, financial reports and their line items.
"""

import logging
from typing import Optional, Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.reports import Company, FinancialReport, FinancialLine
from ...xbrl_parser.models.fact import InlineFact


logger = logging.getLogger(__name__)


class ReportOperations:
    """
    Operations for Company / FinancialReport / FinancialLine records.

    All methods are static and take the session first. Callers own the
    transaction (see session_scope).

    Example:
        with session_scope() as session:
            company = ReportOperations.upsert_company(session, 'BBCA', 'Bank Central Asia')
            report = ReportOperations.create_or_update_report(
                session, company, 2024, 4, 'BBCA_2024_Q4_20250131_101500.zip'
            )
            ReportOperations.replace_lines(session, report, facts)
    """

    @staticmethod
    def find_company(session: Session, ticker: str) -> Optional[Company]:
        return session.query(Company).filter_by(ticker=ticker).first()

    @staticmethod
    def upsert_company(session: Session, ticker: str, name: str) -> Company:
        """
        Insert the company or update its name.

        Args:
            session: Database session
            ticker: Upper-case ticker
            name: Company name

        Returns:
            Company instance (flushed)
        """
        company = ReportOperations.find_company(session, ticker)
        if company is None:
            company = Company(ticker=ticker, name=name)
            session.add(company)
            logger.info(f"Created company: {ticker}")
        else:
            company.name = name

        session.flush()
        return company

    @staticmethod
    def find_report(
        session: Session,
        company_id: int,
        fiscal_year: int,
        fiscal_quarter: int
    ) -> Optional[FinancialReport]:
        return session.query(FinancialReport).filter_by(
            company_id=company_id,
            fiscal_year=fiscal_year,
            fiscal_quarter=fiscal_quarter
        ).first()

    @staticmethod
    def create_or_update_report(
        session: Session,
        company: Company,
        fiscal_year: int,
        fiscal_quarter: int,
        source_file: str
    ) -> FinancialReport:
        """
        Get the report for a period, creating it when absent.

        The source file reference is replaced by the latest upload.

        Returns:
            FinancialReport instance (flushed)
        """
        report = ReportOperations.find_report(session, company.id, fiscal_year, fiscal_quarter)
        if report is None:
            report = FinancialReport(
                company_id=company.id,
                fiscal_year=fiscal_year,
                fiscal_quarter=fiscal_quarter,
                source_file=source_file,
            )
            session.add(report)
            logger.info(f"Created report: {company.ticker} {fiscal_year} Q{fiscal_quarter}")
        else:
            report.source_file = source_file
            logger.info(f"Updating report: {company.ticker} {fiscal_year} Q{fiscal_quarter}")

        session.flush()
        return report

    @staticmethod
    def replace_lines(
        session: Session,
        report: FinancialReport,
        facts: Iterable[InlineFact]
    ) -> int:
        """
        Delete the report's lines and insert the new ones.

        display_order follows the order of facts, starting at 1.

        Returns:
            Number of lines inserted
        """
        session.query(FinancialLine).filter_by(report_id=report.id).delete(
            synchronize_session=False
        )

        count = 0
        for position, fact in enumerate(facts, start=1):
            session.add(FinancialLine(
                report_id=report.id,
                line_item=fact.line_item,
                value=fact.value,
                unit=fact.unit,
                display_order=position,
            ))
            count = position

        session.flush()
        session.expire(report, ['lines'])
        logger.info(f"Stored {count} lines for report {report.id}")
        return count

    @staticmethod
    def get_report_lines(
        session: Session,
        ticker: str,
        fiscal_year: int,
        fiscal_quarter: int
    ) -> Optional[tuple[FinancialReport, list[FinancialLine]]]:
        """
        Report for a ticker and period with its lines in display order.

        Returns:
            (report, lines), or None when no such report exists
        """
        report = (
            session.query(FinancialReport)
            .join(Company)
            .filter(
                Company.ticker == ticker,
                FinancialReport.fiscal_year == fiscal_year,
                FinancialReport.fiscal_quarter == fiscal_quarter,
            )
            .first()
        )
        if report is None:
            return None

        lines = (
            session.query(FinancialLine)
            .filter_by(report_id=report.id)
            .order_by(FinancialLine.display_order)
            .all()
        )
        return report, lines

    @staticmethod
    def list_reports(session: Session) -> list[dict]:
        """
        Summary of every report, newest period first.

        Returns:
            List of dicts: ticker, company_name, fiscal_year,
            fiscal_quarter, source_file, line_count
        """
        line_count = func.count(FinancialLine.id)
        rows = (
            session.query(
                Company.ticker,
                Company.name,
                FinancialReport.fiscal_year,
                FinancialReport.fiscal_quarter,
                FinancialReport.source_file,
                line_count,
            )
            .join(FinancialReport, FinancialReport.company_id == Company.id)
            .outerjoin(FinancialLine, FinancialLine.report_id == FinancialReport.id)
            .group_by(
                FinancialReport.id,
                Company.ticker,
                Company.name,
                FinancialReport.fiscal_year,
                FinancialReport.fiscal_quarter,
                FinancialReport.source_file,
            )
            .order_by(
                FinancialReport.fiscal_year.desc(),
                FinancialReport.fiscal_quarter.desc(),
                Company.ticker,
            )
            .all()
        )

        return [
            {
                'ticker': ticker,
                'company_name': name,
                'fiscal_year': year,
                'fiscal_quarter': quarter,
                'source_file': source_file,
                'line_count': count,
            }
            for ticker, name, year, quarter, source_file, count in rows
        ]


__all__ = ['ReportOperations']
