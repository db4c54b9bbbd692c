# Path: readidx/xbrl_parser/constants.py
"""
Constants for XBRL Parser Module

Namespace URIs shared by the taxonomy, instance and inline components.
Component-specific element and attribute names live in each subpackage's
constants module.
"""

# ============================================================================
# XBRL CORE NAMESPACES
# ============================================================================

# XBRL Instance namespace
XBRLI_NS = "http://www.xbrl.org/2003/instance"

# XBRL Dimensions Instance namespace (2005 draft still seen in older filings)
XBRLDI_NS = "http://xbrl.org/2006/xbrldi"
XBRLDI_NS_2005 = "http://xbrl.org/2005/xbrldi"
XBRLDI_NAMESPACES = (XBRLDI_NS, XBRLDI_NS_2005)

# XBRL Linkbase namespace
LINK_NS = "http://www.xbrl.org/2003/linkbase"

# XLink namespace
XLINK_NS = "http://www.w3.org/1999/xlink"

# ============================================================================
# XML STANDARD NAMESPACES
# ============================================================================

# W3C XML Schema namespace
XSD_NS = "http://www.w3.org/2001/XMLSchema"

# XML Schema Instance namespace
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

# XML namespace (xml:lang)
XML_NS = "http://www.w3.org/XML/1998/namespace"

# ============================================================================
# INLINE XBRL NAMESPACES
# ============================================================================

# Inline XBRL 1.0
IX_NS_2011 = "http://www.xbrl.org/2008/inlineXBRL"

# Inline XBRL 1.1
IX_NS_2013 = "http://www.xbrl.org/2013/inlineXBRL"

# ============================================================================
# PERIOD TYPES
# ============================================================================

PERIOD_TYPE_INSTANT = "instant"
PERIOD_TYPE_DURATION = "duration"
PERIOD_TYPE_FOREVER = "forever"

# ============================================================================
# SCHEMA LOCATIONS
# ============================================================================

REMOTE_SCHEMES = ("http://", "https://")
FILE_SCHEME = "file://"
DEFAULT_SCHEMA_EXTENSION = ".xsd"


__all__ = [
    'XBRLI_NS',
    'XBRLDI_NS',
    'XBRLDI_NS_2005',
    'XBRLDI_NAMESPACES',
    'LINK_NS',
    'XLINK_NS',
    'XSD_NS',
    'XSI_NS',
    'XML_NS',
    'IX_NS_2011',
    'IX_NS_2013',
    'PERIOD_TYPE_INSTANT',
    'PERIOD_TYPE_DURATION',
    'PERIOD_TYPE_FOREVER',
    'REMOTE_SCHEMES',
    'FILE_SCHEME',
    'DEFAULT_SCHEMA_EXTENSION',
]
