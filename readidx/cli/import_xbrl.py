#!/usr/bin/env python3
# Path: readidx/cli/import_xbrl.py
"""
XBRL Archive Importer - Entry Point

Imports an archive holding instance.xbrl and Taxonomy.xsd into the
XBRL tables.

Usage:
    readidx-import-xbrl --zip filing.zip
    readidx-import-xbrl filing.zip --cache-dir cache/taxonomy --keep-temp
    readidx-import-xbrl --zip filing.zip --schema sql/schema.sql

Prerequisites:
    - Database reachable with the READIDX_DB_* / READIDX_DATABASE_URL settings
    - Network access for remote taxonomy schemas not yet cached
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from ..core.logger import get_input_logger
from ..database import initialize_engine
from ..services.xbrl_import_service import XBRLImportService, bootstrap_schema
from ..xbrl_parser.models.error import XBRLError
from .common import initialize_system, print_info, print_warn, print_error


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the importer."""
    parser = argparse.ArgumentParser(
        prog='readidx-import-xbrl',
        description='Import an XBRL instance and taxonomy archive into the database',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  readidx-import-xbrl --zip filing.zip
  readidx-import-xbrl filing.zip --keep-temp
        """
    )

    parser.add_argument(
        'archive',
        nargs='?',
        help='Archive path (alternative to --zip)'
    )

    parser.add_argument(
        '--zip', '-z',
        dest='zip_path',
        type=str,
        help='Archive containing instance.xbrl and Taxonomy.xsd'
    )

    parser.add_argument(
        '--cache-dir',
        type=str,
        help='Directory for downloaded taxonomy schemas'
    )

    parser.add_argument(
        '--schema',
        type=str,
        help='SQL file to apply before importing (default: create tables)'
    )

    parser.add_argument(
        '--keep-temp',
        action='store_true',
        help='Keep the extracted archive directory'
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    zip_value = args.zip_path or args.archive
    if not zip_value:
        parser.print_usage(sys.stderr)
        return 1

    zip_path = Path(zip_value)
    if not zip_path.exists():
        print_error(f"Zip archive not found: {zip_path}")
        return 1

    try:
        config = initialize_system()
        logger = get_input_logger('import_xbrl')
        logger.info(f"Importing {zip_path}")

        initialize_engine()
        bootstrap_schema(Path(args.schema) if args.schema else None)

        print_info("Parsing taxonomy and instance ...")
        service = XBRLImportService(config)
        summary = service.run(
            zip_path,
            cache_dir=Path(args.cache_dir) if args.cache_dir else None,
            keep_temp=args.keep_temp,
        )

        for warning in summary.warnings:
            print_warn(warning.message)

        print_info("Import completed successfully.")
        print_info(
            f"Contexts: {summary.contexts}, Units: {summary.units}, "
            f"Facts: {summary.facts}, Concepts: {summary.concepts}"
        )
        if summary.temp_dir:
            print_info(f"Temporary files retained at {summary.temp_dir}")
        return 0

    except XBRLError as e:
        print_error(str(e))
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130

    except Exception as e:
        print_error(f"Unexpected error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
