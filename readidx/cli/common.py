# Path: readidx/cli/common.py
"""
Shared CLI setup: configuration, logging and status output.
"""

import sys
from pathlib import Path

from ..config_loader import ConfigLoader
from ..constants import STATUS_INFO, STATUS_WARN, STATUS_ERROR
from ..core.logger import setup_ipo_logging


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up IPO logging.

    Console logging is off so that only status lines reach the terminal.

    Returns:
        ConfigLoader
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=Path(config.get('log_dir') or 'logs'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('debug', False),
        log_format=config.get('log_format', 'text'),
    )

    return config


def print_info(message: str) -> None:
    print(f"{STATUS_INFO} {message}")


def print_warn(message: str) -> None:
    print(f"{STATUS_WARN} {message}", file=sys.stderr)


def print_error(message: str) -> None:
    print(f"{STATUS_ERROR} {message}", file=sys.stderr)


__all__ = ['initialize_system', 'print_info', 'print_warn', 'print_error']
