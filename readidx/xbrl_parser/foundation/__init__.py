# Path: readidx/xbrl_parser/foundation/__init__.py
"""
Foundation Layer

Low-level building blocks shared by the taxonomy, instance and inline
parsers: QName resolution, numeric normalization, XML parsing, remote
fetching with an on-disk cache, and archive access.
"""

from .qname import QName, resolve_qname, local_name_of
from .number_normalizer import (
    normalize_number,
    parse_decimals_hint,
    strict_decimal,
    to_canonical_string,
)
from .xml_parser import XMLParser, XMLParseResult, ParseMode
from .http_fetcher import HTTPFetcher
from .taxonomy_cache import TaxonomyCache
from .uri_resolver import URIResolver
from .archive_reader import ArchiveReader

__all__ = [
    'QName',
    'resolve_qname',
    'local_name_of',
    'normalize_number',
    'parse_decimals_hint',
    'strict_decimal',
    'to_canonical_string',
    'XMLParser',
    'XMLParseResult',
    'ParseMode',
    'HTTPFetcher',
    'TaxonomyCache',
    'URIResolver',
    'ArchiveReader',
]
