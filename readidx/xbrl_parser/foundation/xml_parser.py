# Path: readidx/xbrl_parser/foundation/xml_parser.py
"""
XML Processing Engine

XML and markup parsing that reports failures as data instead of raising.

This module provides the parsing infrastructure for schemas, instance
documents and inline XBRL pages. Every call returns an XMLParseResult;
callers inspect ``result.ok`` and ``result.mode``.

Features:
- Strict XML parsing for schemas and instance documents
- Two-stage markup parsing: strict XML first, lenient HTML second
- XXE (XML External Entity) protection
- Billion laughs attack prevention
"""

from lxml import etree
import lxml.html
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum
import logging

from ...config_loader import ConfigLoader
from ..models.error import (
    ParsingError,
    ErrorSeverity,
    ErrorCategory
)


class ParseMode(Enum):
    """
    How a document was read.

    Modes:
        XML: Well-formed XML parse
        HTML: Lenient HTML parse after the XML attempt failed
        FAILED: Neither parse produced a tree
    """
    XML = "xml"
    HTML = "html"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class XMLParseResult:
    """
    Result of a parsing attempt.

    Attributes:
        root: Root element (None if parsing failed)
        mode: Which parser produced the tree
        errors: Problems recorded during the attempt(s)
        source_file: Path or archive member name
    """
    root: Optional[etree._Element]
    mode: ParseMode
    errors: list[ParsingError] = field(default_factory=list)
    source_file: Optional[Path] = None

    @property
    def ok(self) -> bool:
        """True if a tree is available."""
        return self.root is not None and self.mode != ParseMode.FAILED

    @property
    def recovered(self) -> bool:
        """True if the HTML fallback was needed."""
        return self.mode == ParseMode.HTML


class XMLParser:
    """
    XML parser returning result objects.

    Example:
        parser = XMLParser()
        result = parser.parse_file(Path("instance.xbrl"))

        if result.ok:
            root = result.root
        else:
            for error in result.errors:
                print(f"Error: {error.message}")

        page = parser.parse_markup(content, source_name="report.xhtml")
        # page.mode is ParseMode.XML or ParseMode.HTML
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize XML parser.

        Args:
            config: Optional ConfigLoader instance (creates new if not provided)
        """
        self.config = config if config else ConfigLoader()
        self.logger = logging.getLogger(__name__)

    def parse_file(self, file_path: Path) -> XMLParseResult:
        """
        Parse an XML file strictly.

        Args:
            file_path: Path to XML file

        Returns:
            XMLParseResult; mode is FAILED if the file is missing or malformed
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return self._failed(
                ErrorCategory.FILE_NOT_FOUND,
                f"File not found: {file_path}",
                source=file_path
            )

        try:
            content = file_path.read_bytes()
        except OSError as e:
            return self._failed(
                ErrorCategory.FILE_NOT_FOUND,
                f"Cannot read {file_path}: {e}",
                source=file_path
            )

        return self.parse_bytes(content, source=file_path)

    def parse_bytes(self, content: bytes, source: Optional[Path] = None) -> XMLParseResult:
        """
        Parse XML content strictly.

        Args:
            content: Raw document bytes
            source: Path or member name for error reporting

        Returns:
            XMLParseResult with mode XML or FAILED
        """
        try:
            root = etree.fromstring(content, self._create_parser())
        except etree.XMLSyntaxError as e:
            return self._failed(
                ErrorCategory.XML_MALFORMED,
                f"XML syntax error: {e}",
                source=source,
                line_number=getattr(e, 'lineno', None)
            )

        if root is None:
            return self._failed(ErrorCategory.XML_MALFORMED, "Empty document", source=source)

        return XMLParseResult(root=root, mode=ParseMode.XML, source_file=source)

    def parse_markup(self, content: bytes, source: Optional[Path] = None) -> XMLParseResult:
        """
        Parse (X)HTML content: strict XML first, lenient HTML second.

        Args:
            content: Raw page bytes
            source: Path or member name for error reporting

        Returns:
            XMLParseResult with mode XML, HTML or FAILED. Errors from the
            strict attempt are kept on the result even when HTML succeeds.
        """
        strict = self.parse_bytes(content, source=source)
        if strict.ok:
            return strict

        self.logger.debug(f"Strict parse failed for {source}, retrying as HTML")

        try:
            root = lxml.html.fromstring(content, parser=self._create_html_parser())
        except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
            strict.errors.append(ParsingError(
                severity=ErrorSeverity.ERROR,
                category=ErrorCategory.XML_MALFORMED,
                message=f"HTML parse failed: {e}",
                source_file=source
            ))
            return strict

        return XMLParseResult(
            root=root,
            mode=ParseMode.HTML,
            errors=strict.errors,
            source_file=source
        )

    def _failed(
        self,
        category: ErrorCategory,
        message: str,
        source: Optional[Path] = None,
        line_number: Optional[int] = None
    ) -> XMLParseResult:
        """Build a FAILED result carrying one critical error."""
        self.logger.debug(message)
        return XMLParseResult(
            root=None,
            mode=ParseMode.FAILED,
            errors=[ParsingError(
                severity=ErrorSeverity.CRITICAL,
                category=category,
                message=message,
                source_file=source,
                line_number=line_number
            )],
            source_file=source
        )

    def _create_parser(self) -> etree.XMLParser:
        """
        Create strict lxml parser with security settings.

        Returns:
            Configured XMLParser instance
        """
        return etree.XMLParser(
            recover=False,
            remove_blank_text=False,  # Preserve whitespace
            resolve_entities=False,  # XXE protection
            no_network=True,  # No network access
            huge_tree=False,  # Prevent billion laughs attack
        )

    def _create_html_parser(self) -> lxml.html.HTMLParser:
        """Create lenient HTML parser."""
        return lxml.html.HTMLParser(
            recover=True,
            no_network=True,
            remove_comments=True,
        )


__all__ = ['XMLParser', 'XMLParseResult', 'ParseMode']
