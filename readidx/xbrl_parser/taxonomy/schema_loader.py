# Path: readidx/xbrl_parser/taxonomy/schema_loader.py
"""
Schema Loader

Loads and parses a single XSD taxonomy schema file.

Features:
- Concept extraction from top-level xs:element declarations
- xbrli:periodType / xbrli:balance and documentation capture
- linkbaseRef and roleRef collection
- import / include / redefine directive collection

Recursion over directives is the resolver's job; see schema_resolver.

Example:
    loader = SchemaLoader()
    result = loader.load_schema(Path("Taxonomy.xsd"))
    for concept in result.concepts:
        print(concept.qname, concept.period_type)
"""

import logging
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, field
from lxml import etree

from ...config_loader import ConfigLoader
from ..foundation.xml_parser import XMLParser
from ..foundation.qname import resolve_qname
from ..models.concept import Concept
from ..models.error import ParsingError, ErrorCategory, ErrorSeverity
from .constants import (
    XSD_NS,
    LINK_NS,
    ELEM_SCHEMA,
    ELEM_ELEMENT,
    ELEM_ANNOTATION,
    ELEM_DOCUMENTATION,
    SCHEMA_DIRECTIVES,
    ELEM_LINKBASE_REF,
    ELEM_ROLE_REF,
    ATTR_TARGET_NAMESPACE,
    ATTR_SCHEMA_LOCATION,
    ATTR_NAME,
    ATTR_ID,
    ATTR_TYPE,
    ATTR_SUBSTITUTION_GROUP,
    ATTR_ABSTRACT,
    ATTR_NILLABLE,
    ATTR_ROLE_URI,
    ATTR_PERIOD_TYPE,
    ATTR_BALANCE,
    ATTR_XLINK_HREF,
    ATTR_XLINK_ROLE,
    ATTR_XLINK_ARCROLE,
    ATTR_XLINK_TYPE,
    LINK_PREFIX,
)


_TRUE_VALUES = ('true', '1')


@dataclass
class SchemaImport:
    """An import, include or redefine directive."""
    kind: str
    schema_location: str
    namespace: Optional[str] = None


@dataclass
class LinkbaseRef:
    """link:linkbaseRef found in a schema's annotations."""
    target_namespace: Optional[str]
    href: Optional[str]
    role: Optional[str] = None
    arcrole: Optional[str] = None
    link_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'target_namespace': self.target_namespace,
            'href': self.href,
            'role': self.role,
            'arcrole': self.arcrole,
            'type': self.link_type,
        }


@dataclass
class RoleRef:
    """link:roleRef found in a schema's annotations."""
    target_namespace: Optional[str]
    role_uri: Optional[str]
    href: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'target_namespace': self.target_namespace,
            'role_uri': self.role_uri,
            'href': self.href,
        }


@dataclass
class SchemaLoadResult:
    """Result of loading a single schema."""
    schema_path: Path
    namespace: Optional[str] = None
    concepts: list[Concept] = field(default_factory=list)
    imports: list[SchemaImport] = field(default_factory=list)
    linkbase_refs: list[LinkbaseRef] = field(default_factory=list)
    role_refs: list[RoleRef] = field(default_factory=list)
    errors: list[ParsingError] = field(default_factory=list)

    @property
    def loaded(self) -> bool:
        """True if the document was an XML schema that parsed."""
        return not any(e.is_critical for e in self.errors)


class SchemaLoader:
    """
    Loads XSD taxonomy schemas one document at a time.

    Example:
        config = ConfigLoader()
        loader = SchemaLoader(config)

        result = loader.load_schema(schema_path)
        for directive in result.imports:
            print(directive.kind, directive.schema_location)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize schema loader.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)
        self.xml_parser = XMLParser(self.config)

    def load_schema(self, schema_path: Path) -> SchemaLoadResult:
        """
        Load and parse XSD schema file.

        Args:
            schema_path: Path to schema file

        Returns:
            SchemaLoadResult; a document that fails to parse, or whose root
            is not xs:schema, yields an empty result with a critical error
        """
        self.logger.debug(f"Loading schema: {schema_path}")
        result = SchemaLoadResult(schema_path=Path(schema_path))

        parse_result = self.xml_parser.parse_file(Path(schema_path))
        if not parse_result.ok:
            result.errors.extend(parse_result.errors)
            return result

        root = parse_result.root
        if root.tag != f"{{{XSD_NS}}}{ELEM_SCHEMA}":
            result.errors.append(ParsingError(
                severity=ErrorSeverity.CRITICAL,
                category=ErrorCategory.TAXONOMY_LOAD_FAILED,
                message=f"Not an XML schema document (root {root.tag})",
                source_file=Path(schema_path)
            ))
            return result

        target_namespace = root.get(ATTR_TARGET_NAMESPACE)
        result.namespace = target_namespace
        prefix = self._prefix_for(root, target_namespace)

        result.concepts = self._extract_concepts(root, target_namespace, prefix)
        result.linkbase_refs = self._extract_linkbase_refs(root, target_namespace)
        result.role_refs = self._extract_role_refs(root, target_namespace)
        result.imports = self._extract_imports(root)

        self.logger.debug(
            f"Schema loaded: {len(result.concepts)} concepts, "
            f"{len(result.imports)} directives"
        )
        return result

    def _prefix_for(self, root: etree._Element, namespace: Optional[str]) -> Optional[str]:
        """Prefix the schema root binds to its target namespace, if any."""
        if not namespace:
            return None
        for prefix, uri in root.nsmap.items():
            if prefix and uri == namespace:
                return prefix
        return None

    def _extract_imports(self, root: etree._Element) -> list[SchemaImport]:
        """
        Extract import / include / redefine directives.

        Directives without a schemaLocation cannot be followed and are skipped.
        """
        imports = []

        for child in root:
            if not isinstance(child.tag, str):
                continue
            for kind in SCHEMA_DIRECTIVES:
                if child.tag == f"{{{XSD_NS}}}{kind}":
                    location = child.get(ATTR_SCHEMA_LOCATION)
                    if location:
                        imports.append(SchemaImport(
                            kind=kind,
                            schema_location=location,
                            namespace=child.get('namespace')
                        ))

        return imports

    def _extract_concepts(
        self,
        root: etree._Element,
        target_namespace: Optional[str],
        prefix: Optional[str]
    ) -> list[Concept]:
        """
        Extract concepts from top-level element declarations.

        Declarations substituting for linkbase elements are skipped.
        """
        concepts = []

        for elem_def in root.findall(f"{{{XSD_NS}}}{ELEM_ELEMENT}"):
            name = elem_def.get(ATTR_NAME)
            if not name:
                continue

            substitution_group = elem_def.get(ATTR_SUBSTITUTION_GROUP)
            if self._is_linkbase_substitution(elem_def, substitution_group):
                continue

            abstract = elem_def.get(ATTR_ABSTRACT)
            nillable = elem_def.get(ATTR_NILLABLE)

            concepts.append(Concept(
                namespace=target_namespace or '',
                name=name,
                qname=f"{prefix}:{name}" if prefix else name,
                id_attr=elem_def.get(ATTR_ID),
                substitution_group=substitution_group,
                type=elem_def.get(ATTR_TYPE),
                period_type=elem_def.get(ATTR_PERIOD_TYPE),
                balance=elem_def.get(ATTR_BALANCE),
                abstract=(abstract or '').lower() in _TRUE_VALUES,
                nillable=True if nillable is None else nillable.lower() in _TRUE_VALUES,
                documentation=self._documentation(elem_def),
            ))

        return concepts

    def _is_linkbase_substitution(
        self,
        elem_def: etree._Element,
        substitution_group: Optional[str]
    ) -> bool:
        """Check whether a declaration belongs to the linkbase vocabulary."""
        if not substitution_group:
            return False
        if substitution_group.startswith(LINK_PREFIX):
            return True
        return resolve_qname(elem_def, substitution_group).namespace_uri == LINK_NS

    def _documentation(self, elem_def: etree._Element) -> Optional[str]:
        """Text of xs:annotation/xs:documentation, or None."""
        doc = elem_def.find(
            f"{{{XSD_NS}}}{ELEM_ANNOTATION}/{{{XSD_NS}}}{ELEM_DOCUMENTATION}"
        )
        if doc is None:
            return None
        text = ''.join(doc.itertext()).strip()
        return text or None

    def _extract_linkbase_refs(
        self,
        root: etree._Element,
        target_namespace: Optional[str]
    ) -> list[LinkbaseRef]:
        """Collect every link:linkbaseRef in the document."""
        return [
            LinkbaseRef(
                target_namespace=target_namespace,
                href=ref.get(ATTR_XLINK_HREF),
                role=ref.get(ATTR_XLINK_ROLE),
                arcrole=ref.get(ATTR_XLINK_ARCROLE),
                link_type=ref.get(ATTR_XLINK_TYPE),
            )
            for ref in root.iter(f"{{{LINK_NS}}}{ELEM_LINKBASE_REF}")
        ]

    def _extract_role_refs(
        self,
        root: etree._Element,
        target_namespace: Optional[str]
    ) -> list[RoleRef]:
        """Collect every link:roleRef in the document."""
        return [
            RoleRef(
                target_namespace=target_namespace,
                role_uri=ref.get(ATTR_ROLE_URI),
                href=ref.get(ATTR_XLINK_HREF),
            )
            for ref in root.iter(f"{{{LINK_NS}}}{ELEM_ROLE_REF}")
        ]


__all__ = ['SchemaLoader', 'SchemaLoadResult', 'SchemaImport', 'LinkbaseRef', 'RoleRef']
