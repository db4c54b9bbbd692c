# Path: readidx/xbrl_parser/taxonomy/constants.py
"""
Taxonomy Module Constants

Schema vocabulary used during taxonomy resolution.
"""

from ..constants import (
    XSD_NS,
    LINK_NS,
    XLINK_NS,
    XBRLI_NS,
)

# ==============================================================================
# XML SCHEMA ELEMENTS
# ==============================================================================

ELEM_SCHEMA = "schema"
ELEM_ELEMENT = "element"
ELEM_ANNOTATION = "annotation"
ELEM_DOCUMENTATION = "documentation"

# Directives that pull in other schema documents
SCHEMA_DIRECTIVES = ("import", "include", "redefine")

# Linkbase vocabulary found inside schema annotations
ELEM_LINKBASE_REF = "linkbaseRef"
ELEM_ROLE_REF = "roleRef"

# ==============================================================================
# ATTRIBUTES
# ==============================================================================

ATTR_TARGET_NAMESPACE = "targetNamespace"
ATTR_SCHEMA_LOCATION = "schemaLocation"
ATTR_NAME = "name"
ATTR_ID = "id"
ATTR_TYPE = "type"
ATTR_SUBSTITUTION_GROUP = "substitutionGroup"
ATTR_ABSTRACT = "abstract"
ATTR_NILLABLE = "nillable"
ATTR_ROLE_URI = "roleURI"

# xbrli-qualified concept attributes
ATTR_PERIOD_TYPE = f"{{{XBRLI_NS}}}periodType"
ATTR_BALANCE = f"{{{XBRLI_NS}}}balance"

# xlink attributes on linkbaseRef / roleRef
ATTR_XLINK_HREF = f"{{{XLINK_NS}}}href"
ATTR_XLINK_ROLE = f"{{{XLINK_NS}}}role"
ATTR_XLINK_ARCROLE = f"{{{XLINK_NS}}}arcrole"
ATTR_XLINK_TYPE = f"{{{XLINK_NS}}}type"

# Prefix used when a substitution group cannot be namespace-resolved
LINK_PREFIX = "link:"


__all__ = [
    'XSD_NS',
    'LINK_NS',
    'XLINK_NS',
    'XBRLI_NS',
    'ELEM_SCHEMA',
    'ELEM_ELEMENT',
    'ELEM_ANNOTATION',
    'ELEM_DOCUMENTATION',
    'SCHEMA_DIRECTIVES',
    'ELEM_LINKBASE_REF',
    'ELEM_ROLE_REF',
    'ATTR_TARGET_NAMESPACE',
    'ATTR_SCHEMA_LOCATION',
    'ATTR_NAME',
    'ATTR_ID',
    'ATTR_TYPE',
    'ATTR_SUBSTITUTION_GROUP',
    'ATTR_ABSTRACT',
    'ATTR_NILLABLE',
    'ATTR_ROLE_URI',
    'ATTR_PERIOD_TYPE',
    'ATTR_BALANCE',
    'ATTR_XLINK_HREF',
    'ATTR_XLINK_ROLE',
    'ATTR_XLINK_ARCROLE',
    'ATTR_XLINK_TYPE',
    'LINK_PREFIX',
]
