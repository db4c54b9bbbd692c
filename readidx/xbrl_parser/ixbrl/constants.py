# Path: readidx/xbrl_parser/ixbrl/constants.py
"""
iXBRL Constants

Inline fact vocabulary and archive member dispatch rules.

Member files are dispatched by extension:
- .html / .xhtml: inline XBRL tags embedded in markup
- .xbrl / .xml: plain instance documents read as flat fact lists
"""

from ..constants import XBRLI_NS, LINK_NS, XSI_NS

# ==============================================================================
# iXBRL FACT ELEMENTS
# ==============================================================================

# Lower-cased local names; HTML parsers fold tag case
IX_FACT_LOCAL_NAMES = frozenset({'nonfraction', 'nonnumeric'})

# ==============================================================================
# iXBRL ATTRIBUTES
# ==============================================================================

ATTR_NAME = 'name'
ATTR_UNIT_REF = 'unitRef'
ATTR_DECIMALS = 'decimals'
ATTR_XSI_NIL = f'{{{XSI_NS}}}nil'

# ==============================================================================
# MEMBER DISPATCH
# ==============================================================================

INLINE_EXTENSIONS = frozenset({'.html', '.xhtml'})
INSTANCE_EXTENSIONS = frozenset({'.xbrl', '.xml'})

# Children in these namespaces are instance plumbing, not facts
NON_FACT_NAMESPACES = frozenset({XBRLI_NS, LINK_NS})

# Unit code used when a fact carries no unitRef
DEFAULT_UNIT_CODE = 'IDR'


__all__ = [
    'IX_FACT_LOCAL_NAMES',
    'ATTR_NAME',
    'ATTR_UNIT_REF',
    'ATTR_DECIMALS',
    'ATTR_XSI_NIL',
    'INLINE_EXTENSIONS',
    'INSTANCE_EXTENSIONS',
    'NON_FACT_NAMESPACES',
    'DEFAULT_UNIT_CODE',
]
