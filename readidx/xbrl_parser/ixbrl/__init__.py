# Path: readidx/xbrl_parser/ixbrl/__init__.py
"""
Inline XBRL Module

Fact extraction from archive members (inline XBRL pages and plain
instance documents).
"""

from .inline_extractor import InlineFactExtractor, member_kind, get_attribute
from .archive_extractor import ArchiveFactExtractor, ArchiveExtractionResult

__all__ = [
    'InlineFactExtractor',
    'ArchiveFactExtractor',
    'ArchiveExtractionResult',
    'member_kind',
    'get_attribute',
]
