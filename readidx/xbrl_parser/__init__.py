# Path: readidx/xbrl_parser/__init__.py
"""
XBRL Parser

Document parsing and normalization engine.

Components:
- foundation: numeric normalizer, QName resolver, XML parser, fetching
- taxonomy: recursive schema resolution with a remote-fetch cache
- instance: contexts, units and facts of classic instance documents
- ixbrl: inline fact extraction from archive members
- concept_registry: taxonomy/fact concept deduplication

Example:
    from readidx.xbrl_parser import SchemaResolver, InstanceParser, ConceptRegistry

    taxonomy = SchemaResolver().resolve(schema_path, cache_dir)
    instance = InstanceParser().parse(instance_path, taxonomy.concepts)

    registry = ConceptRegistry()
    registry.register_all(taxonomy.concepts.values())
    registry.register_all(instance.missing_concepts.values())
"""

from .foundation import normalize_number, resolve_qname, QName
from .taxonomy import SchemaResolver, TaxonomyResolution
from .instance import InstanceParser, InstanceParseResult
from .ixbrl import InlineFactExtractor, ArchiveFactExtractor, ArchiveExtractionResult
from .concept_registry import ConceptRegistry

__all__ = [
    'normalize_number',
    'resolve_qname',
    'QName',
    'SchemaResolver',
    'TaxonomyResolution',
    'InstanceParser',
    'InstanceParseResult',
    'InlineFactExtractor',
    'ArchiveFactExtractor',
    'ArchiveExtractionResult',
    'ConceptRegistry',
]
