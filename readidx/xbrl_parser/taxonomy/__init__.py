# Path: readidx/xbrl_parser/taxonomy/__init__.py
"""
Taxonomy Module

Schema loading and recursive taxonomy resolution.
"""

from .schema_loader import SchemaLoader, SchemaLoadResult, SchemaImport, LinkbaseRef, RoleRef
from .schema_resolver import SchemaResolver, TaxonomyResolution

__all__ = [
    'SchemaLoader',
    'SchemaLoadResult',
    'SchemaImport',
    'LinkbaseRef',
    'RoleRef',
    'SchemaResolver',
    'TaxonomyResolution',
]
