# Path: readidx/xbrl_parser/instance/constants.py
"""
Instance Module Constants

Element and attribute names used when reading XBRL instance documents.
Namespace URIs are re-exported from the parser-wide constants module.
"""

from ..constants import (
    XBRLI_NS,
    XBRLDI_NS,
    XBRLDI_NAMESPACES,
    LINK_NS,
    XLINK_NS,
    XSI_NS,
    XML_NS,
)

# ==============================================================================
# XBRL ELEMENT NAMES
# ==============================================================================

# Context elements
ELEM_CONTEXT = "context"
ELEM_ENTITY = "entity"
ELEM_IDENTIFIER = "identifier"
ELEM_SEGMENT = "segment"
ELEM_SCENARIO = "scenario"
ELEM_PERIOD = "period"
ELEM_INSTANT = "instant"
ELEM_START_DATE = "startDate"
ELEM_END_DATE = "endDate"

# Unit elements
ELEM_UNIT = "unit"
ELEM_MEASURE = "measure"
ELEM_DIVIDE = "divide"
ELEM_UNIT_NUMERATOR = "unitNumerator"
ELEM_UNIT_DENOMINATOR = "unitDenominator"

# Dimension elements
ELEM_EXPLICIT_MEMBER = "explicitMember"
ELEM_TYPED_MEMBER = "typedMember"

# Schema reference
ELEM_SCHEMA_REF = "schemaRef"

# ==============================================================================
# XBRL ATTRIBUTES
# ==============================================================================

ATTR_ID = "id"
ATTR_CONTEXT_REF = "contextRef"
ATTR_UNIT_REF = "unitRef"
ATTR_DECIMALS = "decimals"
ATTR_PRECISION = "precision"
ATTR_SCHEME = "scheme"
ATTR_DIMENSION = "dimension"

# Qualified attribute names (Clark notation)
ATTR_XML_LANG = f"{{{XML_NS}}}lang"
ATTR_XSI_NIL = f"{{{XSI_NS}}}nil"
ATTR_XSI_TYPE = f"{{{XSI_NS}}}type"
ATTR_XLINK_HREF = f"{{{XLINK_NS}}}href"

# ==============================================================================
# DIMENSION SCOPES
# ==============================================================================

SCOPE_SEGMENT = "segment"
SCOPE_SCENARIO = "scenario"


__all__ = [
    'XBRLI_NS',
    'XBRLDI_NS',
    'XBRLDI_NAMESPACES',
    'LINK_NS',
    'XLINK_NS',
    'XSI_NS',
    'XML_NS',
    'ELEM_CONTEXT',
    'ELEM_ENTITY',
    'ELEM_IDENTIFIER',
    'ELEM_SEGMENT',
    'ELEM_SCENARIO',
    'ELEM_PERIOD',
    'ELEM_INSTANT',
    'ELEM_START_DATE',
    'ELEM_END_DATE',
    'ELEM_UNIT',
    'ELEM_MEASURE',
    'ELEM_DIVIDE',
    'ELEM_UNIT_NUMERATOR',
    'ELEM_UNIT_DENOMINATOR',
    'ELEM_EXPLICIT_MEMBER',
    'ELEM_TYPED_MEMBER',
    'ELEM_SCHEMA_REF',
    'ATTR_ID',
    'ATTR_CONTEXT_REF',
    'ATTR_UNIT_REF',
    'ATTR_DECIMALS',
    'ATTR_PRECISION',
    'ATTR_SCHEME',
    'ATTR_DIMENSION',
    'ATTR_XML_LANG',
    'ATTR_XSI_NIL',
    'ATTR_XSI_TYPE',
    'ATTR_XLINK_HREF',
    'SCOPE_SEGMENT',
    'SCOPE_SCENARIO',
]
