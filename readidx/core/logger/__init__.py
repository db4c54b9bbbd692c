# Path: readidx/core/logger/__init__.py
"""
readidx Logger Package

IPO-aware logging for the XBRL import system.

Provides separate log streams for:
- INPUT layer (archives, uploads, CLI)
- PROCESS layer (parsing, extraction)
- OUTPUT layer (persistence, API)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
