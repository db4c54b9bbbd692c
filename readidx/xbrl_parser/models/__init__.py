# Path: readidx/xbrl_parser/models/__init__.py
"""
XBRL Data Models

Dataclasses produced by the taxonomy, instance and inline parsers.
"""

from .concept import Concept, ConceptSource
from .context import (
    Context,
    Period,
    DimensionScope,
    ExplicitMember,
    TypedMember,
)
from .unit import SimpleUnit, RatioUnit, Unit
from .fact import Fact, InlineFact
from .error import (
    ErrorSeverity,
    ErrorCategory,
    ParsingError,
    XBRLError,
    InstanceParseError,
    NoFactsFoundError,
    ArchiveError,
)

__all__ = [
    'Concept',
    'ConceptSource',
    'Context',
    'Period',
    'DimensionScope',
    'ExplicitMember',
    'TypedMember',
    'SimpleUnit',
    'RatioUnit',
    'Unit',
    'Fact',
    'InlineFact',
    'ErrorSeverity',
    'ErrorCategory',
    'ParsingError',
    'XBRLError',
    'InstanceParseError',
    'NoFactsFoundError',
    'ArchiveError',
]
