# Path: readidx/xbrl_parser/instance/__init__.py
"""
Instance Document Parsing Module

Parses classic XBRL instance documents into contexts, units and facts.

Components:
- ContextParser: Parses context elements (entity, period, dimensions)
- UnitParser: Parses unit elements (measures, divide)
- FactExtractor: Extracts fact elements
- InstanceParser: Coordinates the above
"""

from .context_parser import ContextParser
from .unit_parser import UnitParser
from .fact_extractor import FactExtractor
from .instance_parser import InstanceParser, InstanceParseResult

__all__ = [
    'ContextParser',
    'UnitParser',
    'FactExtractor',
    'InstanceParser',
    'InstanceParseResult',
]
