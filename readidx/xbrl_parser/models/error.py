# Path: readidx/xbrl_parser/models/error.py
"""
Parse Problems and Import Exceptions

Two kinds of failure:
- ParsingError records: a single element, schema or archive member
  could not be read. They are collected on result objects and the
  import carries on.
- XBRLError exceptions: the import cannot continue (instance is not a
  tree, archive unreadable, no facts at all).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from pathlib import Path


# ==============================================================================
# ERROR SEVERITY LEVELS
# ==============================================================================

class ErrorSeverity(Enum):
    """
    CRITICAL: document unusable (instance is not XML)
    ERROR: element skipped (context without id)
    WARNING: degraded result (remote schema not fetched)
    INFO: informational
    """
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# ERROR CATEGORIES
# ==============================================================================

class ErrorCategory(Enum):
    """What kind of input a recorded problem came from."""
    XML_MALFORMED = "XML_MALFORMED"

    INVALID_CONTEXT = "INVALID_CONTEXT"
    INVALID_UNIT = "INVALID_UNIT"
    INVALID_FACT = "INVALID_FACT"

    TAXONOMY_LOAD_FAILED = "TAXONOMY_LOAD_FAILED"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"

    ARCHIVE_MEMBER_SKIPPED = "ARCHIVE_MEMBER_SKIPPED"

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# RECORDED PROBLEMS
# ==============================================================================

@dataclass
class ParsingError:
    """
    One recorded problem.

    ``details`` holds the underlying cause (exception text, offending
    href); ``source_file`` and ``line_number`` point at the input when
    known.
    """
    severity: ErrorSeverity
    category: ErrorCategory
    message: str
    details: Optional[str] = None
    source_file: Optional[Path] = None
    line_number: Optional[int] = None

    @property
    def is_critical(self) -> bool:
        return self.severity is ErrorSeverity.CRITICAL

    def __str__(self) -> str:
        text = f"{self.severity}/{self.category}: {self.message}"
        if self.source_file:
            where = Path(self.source_file).name
            if self.line_number:
                where = f"{where}:{self.line_number}"
            text = f"{text} ({where})"
        if self.details:
            text = f"{text} - {self.details}"
        return text


# ==============================================================================
# EXCEPTIONS
# ==============================================================================

class XBRLError(Exception):
    """Base class for errors that abort an import."""


class InstanceParseError(XBRLError):
    """The instance document could not be parsed into a tree."""

    def __init__(self, message: str, errors: Optional[list[ParsingError]] = None):
        super().__init__(message)
        self.errors = errors or []


class NoFactsFoundError(XBRLError):
    """No archive member yielded a single financial fact."""

    DEFAULT_MESSAGE = 'Tidak ditemukan fakta keuangan pada arsip yang diunggah.'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.DEFAULT_MESSAGE)


class ArchiveError(XBRLError):
    """The archive cannot be opened or lacks a required member."""


__all__ = [
    'ErrorSeverity',
    'ErrorCategory',
    'ParsingError',
    'XBRLError',
    'InstanceParseError',
    'NoFactsFoundError',
    'ArchiveError',
]
