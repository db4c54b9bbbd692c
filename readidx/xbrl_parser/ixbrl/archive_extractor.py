# Path: readidx/xbrl_parser/ixbrl/archive_extractor.py
"""
Archive Fact Extractor

Walks every member of an uploaded archive through InlineFactExtractor
and concatenates the results.

A member that cannot be read or parsed is skipped. Only an archive in which no
member yields a fact is an error.

Example:
    extractor = ArchiveFactExtractor()
    result = extractor.extract_archive(Path("report.zip"))
    print(f"{len(result.facts)} facts from {result.members_with_facts} members")
"""

import logging
from typing import Optional, Union
from pathlib import Path
from dataclasses import dataclass, field

from ...config_loader import ConfigLoader
from ..foundation.archive_reader import ArchiveReader
from ..models.fact import InlineFact
from ..models.error import (
    ParsingError,
    ErrorCategory,
    ErrorSeverity,
    ArchiveError,
    NoFactsFoundError,
)
from .inline_extractor import InlineFactExtractor, member_kind


@dataclass
class ArchiveExtractionResult:
    """Facts gathered from an archive, in member order."""
    facts: list[InlineFact] = field(default_factory=list)
    members_scanned: int = 0
    members_with_facts: int = 0
    errors: list[ParsingError] = field(default_factory=list)


class ArchiveFactExtractor:
    """
    Extracts inline facts from every qualifying archive member.

    Example:
        extractor = ArchiveFactExtractor(config)
        try:
            result = extractor.extract_archive(zip_bytes)
        except NoFactsFoundError as e:
            print(e)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        member_extractor: Optional[InlineFactExtractor] = None
    ):
        """
        Initialize archive extractor.

        Args:
            config: Configuration loader
            member_extractor: Per-member extractor override
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)
        self.member_extractor = member_extractor or InlineFactExtractor(self.config)

    def extract_archive(self, source: Union[Path, str, bytes]) -> ArchiveExtractionResult:
        """
        Extract facts from an archive.

        Args:
            source: Path to the ZIP file or its bytes

        Returns:
            ArchiveExtractionResult

        Raises:
            ArchiveError: If the archive itself cannot be opened
            NoFactsFoundError: If no member yields a fact
        """
        result = ArchiveExtractionResult()

        with ArchiveReader(source) as archive:
            for member_name in archive.member_names():
                if member_kind(member_name) is None:
                    continue

                result.members_scanned += 1
                try:
                    content = archive.read(member_name)
                except ArchiveError as e:
                    self.logger.warning(f"Skipping member {member_name}: {e}")
                    result.errors.append(ParsingError(
                        severity=ErrorSeverity.WARNING,
                        category=ErrorCategory.ARCHIVE_MEMBER_SKIPPED,
                        message=f"Skipped unreadable member {member_name}",
                        details=str(e.__cause__ or e),
                        source_file=Path(member_name)
                    ))
                    continue

                facts = self.member_extractor.extract(member_name, content)
                self._record_skip(member_name, result)

                if facts:
                    result.members_with_facts += 1
                    result.facts.extend(facts)

        if not result.facts:
            self.logger.warning(
                f"No facts found in {result.members_scanned} candidate members"
            )
            raise NoFactsFoundError()

        self.logger.info(
            f"Extracted {len(result.facts)} facts from "
            f"{result.members_with_facts}/{result.members_scanned} members"
        )
        return result

    def _record_skip(self, member_name: str, result: ArchiveExtractionResult) -> None:
        """Note a member the extractor could not parse."""
        parsed = self.member_extractor.last_parse
        if parsed is None or parsed.ok:
            return
        result.errors.append(ParsingError(
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.ARCHIVE_MEMBER_SKIPPED,
            message=f"Skipped unreadable member {member_name}",
            details='; '.join(e.message for e in parsed.errors) or None,
            source_file=Path(member_name)
        ))


__all__ = ['ArchiveFactExtractor', 'ArchiveExtractionResult']
