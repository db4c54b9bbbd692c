# Path: readidx/xbrl_parser/foundation/qname.py
"""
QName Resolution

Qualified name handling with namespace resolution.

Features:
- QName parsing and formatting
- Clark notation support
- Element-context resolution against in-scope namespace bindings
"""

from dataclasses import dataclass
from typing import Optional
from lxml import etree


@dataclass
class QName:
    """
    Qualified name with namespace information.

    A QName consists of a namespace URI and a local name,
    optionally with a prefix for display purposes.

    Attributes:
        namespace_uri: Full namespace URI ('' when unresolved)
        local_name: Local part of the name
        prefix: Optional prefix for display

    Example:
        qname = QName("http://www.idx.co.id/xbrl/taxonomy", "Revenue", "idx-cor")
        str(qname)  # "idx-cor:Revenue"

        qname = QName.from_clark_notation("{http://example.com}Revenue")
    """
    namespace_uri: str
    local_name: str
    prefix: Optional[str] = None

    def __str__(self) -> str:
        """String representation using prefix notation."""
        if self.prefix:
            return f"{self.prefix}:{self.local_name}"
        return self.local_name

    def __eq__(self, other) -> bool:
        """Equality based on namespace and local name."""
        if not isinstance(other, QName):
            return False
        return (self.namespace_uri == other.namespace_uri and
                self.local_name == other.local_name)

    def __hash__(self) -> int:
        """Hash based on namespace and local name."""
        return hash((self.namespace_uri, self.local_name))

    @property
    def key(self) -> tuple[str, str]:
        """(namespace, local name) identity used by the concept registry."""
        return (self.namespace_uri, self.local_name)

    def to_clark_notation(self) -> str:
        """
        Convert to Clark notation: {namespace}local.

        Returns:
            Clark notation string
        """
        if self.namespace_uri:
            return f"{{{self.namespace_uri}}}{self.local_name}"
        return self.local_name

    @classmethod
    def from_clark_notation(cls, clark: str, prefix: Optional[str] = None) -> 'QName':
        """
        Parse Clark notation.

        Args:
            clark: Clark notation string like "{namespace}local"
            prefix: Display prefix, typically ``element.prefix``

        Returns:
            QName instance
        """
        if clark.startswith('{'):
            end = clark.find('}')
            if end != -1:
                namespace = clark[1:end]
                local = clark[end+1:]
                return cls(namespace_uri=namespace, local_name=local, prefix=prefix)

        # No namespace
        return cls(namespace_uri='', local_name=clark, prefix=prefix)

    @classmethod
    def from_element(cls, element: etree._Element) -> 'QName':
        """Build the QName of an element from its tag and prefix."""
        return cls.from_clark_notation(element.tag, prefix=element.prefix)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'qname': str(self),
            'namespace': self.namespace_uri,
            'local_name': self.local_name,
            'prefix': self.prefix,
        }


def resolve_qname(element: etree._Element, qname_str: str) -> QName:
    """
    Resolve a prefixed name against an element's in-scope namespaces.

    The split happens on the first ':'. An unprefixed name uses the
    default namespace. Unknown prefixes resolve to the empty namespace.

    Args:
        element: Element whose ancestor chain supplies the bindings
        qname_str: String like "idx-dim:SegmentAxis" or "Revenue"

    Returns:
        QName with resolved namespace

    Example:
        qname = resolve_qname(member_elem, member_elem.get('dimension'))
    """
    qname_str = (qname_str or '').strip()

    if ':' in qname_str:
        prefix, local_name = qname_str.split(':', 1)
    else:
        prefix, local_name = None, qname_str

    # lxml nsmap already includes bindings inherited from ancestors
    namespace = element.nsmap.get(prefix) or ''

    return QName(namespace_uri=namespace, local_name=local_name, prefix=prefix)


def local_name_of(tag) -> str:
    """
    Local part of an element tag.

    Handles Clark notation from the XML parser as well as the
    ``prefix:local`` tags the HTML parser leaves in place.
    """
    if not isinstance(tag, str):
        return ''
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    if ':' in tag:
        return tag.split(':', 1)[1]
    return tag


__all__ = ['QName', 'resolve_qname', 'local_name_of']
