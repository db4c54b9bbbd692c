#!/usr/bin/env python3
# Path: readidx/cli/import_inline.py
"""
Inline XBRL Report Importer - Entry Point

Imports an inline XBRL archive as a company's quarterly report.

Usage:
    readidx-import-inline --file laporan.zip --ticker BBCA \\
        --name "PT Bank Central Asia Tbk" --year 2024 --quarter 4
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from ..constants import MSG_PARAMETER_REQUIRED, MSG_IMPORT_SUCCESS, MSG_IMPORT_FAILED
from ..core.logger import get_input_logger
from ..database import initialize_database
from ..services.report_service import ReportService
from .common import initialize_system


REQUIRED_OPTIONS = ('file', 'ticker', 'name', 'year', 'quarter')


def build_parser() -> argparse.ArgumentParser:
    """Argument parser; required options are checked by main()."""
    parser = argparse.ArgumentParser(
        prog='readidx-import-inline',
        description='Import an inline XBRL archive as a quarterly report'
    )
    parser.add_argument('--file', type=str, help='ZIP archive with inline XBRL pages')
    parser.add_argument('--ticker', type=str, help='Exchange ticker')
    parser.add_argument('--name', type=str, help='Company name')
    parser.add_argument('--year', type=str, help='Fiscal year')
    parser.add_argument('--quarter', type=str, help='Fiscal quarter (1-4)')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    args = build_parser().parse_args(argv)

    for key in REQUIRED_OPTIONS:
        if not getattr(args, key):
            print(MSG_PARAMETER_REQUIRED.format(name=key), file=sys.stderr)
            return 1

    logger = get_input_logger('import_inline')

    try:
        config = initialize_system()
        logger.info(
            f"Importing {args.file} for {args.ticker} {args.year} Q{args.quarter}"
        )

        initialize_database()
        result = ReportService(config).import_report(
            ticker=args.ticker,
            company_name=args.name,
            year=args.year,
            quarter=args.quarter,
            source_path=Path(args.file),
        )

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130

    except Exception as e:
        logger.exception("Inline import failed")
        print(MSG_IMPORT_FAILED.format(error=e), file=sys.stderr)
        return 1

    print(MSG_IMPORT_SUCCESS.format(count=result['line_count']))
    return 0


if __name__ == '__main__':
    sys.exit(main())
