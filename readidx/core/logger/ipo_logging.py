# Path: readidx/core/logger/ipo_logging.py
"""
IPO-Aware Logging for readidx

Input-Process-Output separated logging for XBRL imports.

This module sets up logging with separate files for:
- INPUT layer (archive intake, CLI arguments, uploads)
- PROCESS layer (taxonomy resolution, instance parsing, fact extraction)
- OUTPUT layer (persistence, API responses)
- Full activity (everything combined)

File logs can be written as plain text or as JSON lines.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path


# Parser modules log under their module name; route them to PROCESS.
LAYER_PREFIXES: dict[str, tuple[str, ...]] = {
    'input': ('input',),
    'process': ('process', 'readidx.xbrl_parser'),
    'output': ('output', 'readidx.database'),
}


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer
        self.prefixes = LAYER_PREFIXES.get(layer, (layer,))

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.prefixes)


class JsonLineFormatter(logging.Formatter):
    """
    Format records as one JSON object per line.

    Keys: timestamp, level, logger, message, context. The context is
    taken from ``extra={'context': {...}}`` when the caller supplies one.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname.lower(),
            'logger': record.name,
            'message': record.getMessage(),
            'context': getattr(record, 'context', {}),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_ipo_logging(
    log_dir: Path,
    log_level: str = 'INFO',
    console_output: bool = True,
    log_format: str = 'text'
) -> None:
    """
    Set up IPO-aware logging for readidx.

    Creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console
        log_format: 'text' or 'json' for the file handlers

    Example:
        setup_ipo_logging(
            log_dir=Path('./logs'),
            log_level='INFO',
            console_output=True
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers
    root_logger.handlers.clear()

    if log_format == 'json':
        formatter = JsonLineFormatter()
    else:
        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    # Full activity log (everything)
    full_handler = logging.FileHandler(log_dir / 'full_activity.log', encoding='utf-8')
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(formatter)
    root_logger.addHandler(full_handler)

    for layer in ('input', 'process', 'output'):
        handler = logging.FileHandler(log_dir / f'{layer}_activity.log', encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        handler.addFilter(IPOFilter(layer))
        root_logger.addHandler(handler)

    # Console output (optional)
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_formatter = logging.Formatter(
            '[%(levelname)s] %(name)s - %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'archive_reader', 'upload')

    Returns:
        Logger configured for INPUT layer

    Example:
        logger = get_input_logger('upload')
        logger.info("Received archive")
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'report_service', 'xbrl_import')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'report_api', 'xbrl_persistence')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'JsonLineFormatter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
