# Path: readidx/xbrl_parser/models/concept.py
"""
Concept Data Model

XBRL concept (taxonomy element) representation.

This module defines:
- Concept dataclass (element definition from taxonomy)
- ConceptSource (taxonomy declaration or fact-derived stub)
- Merge rules used when the same concept is seen twice
"""

from dataclasses import dataclass, fields
from typing import Any, Optional
from enum import Enum


# ==============================================================================
# CONCEPT SOURCE
# ==============================================================================

class ConceptSource(Enum):
    """
    Where a concept definition came from.

    Types:
        TAXONOMY: Declared by an xs:element in a resolved schema
        FACT: Synthesized from a fact with no taxonomy declaration
    """
    TAXONOMY = "taxonomy"
    FACT = "fact"

    def __str__(self) -> str:
        return self.value


# Nullable metadata filled in by a later definition when still empty
MERGEABLE_FIELDS = (
    'id_attr',
    'substitution_group',
    'type',
    'period_type',
    'balance',
    'documentation',
)


# ==============================================================================
# CONCEPT
# ==============================================================================

@dataclass
class Concept:
    """
    XBRL concept keyed by (namespace, local name).

    Core Attributes:
        namespace: Namespace URI ('' for unqualified facts)
        name: Local name (e.g., 'Revenue')
        qname: Prefixed name as written in the source document

    XBRL Attributes:
        id_attr: Schema id attribute
        substitution_group: Substitution group QName string
        type: Data type QName string
        period_type: 'instant', 'duration' or 'forever'
        balance: 'debit', 'credit' or None
        abstract: True if abstract (non-reportable)
        nillable: True if can be nil
        documentation: xs:documentation text

    Provenance:
        source: TAXONOMY or FACT
    """
    namespace: str
    name: str
    qname: Optional[str] = None
    id_attr: Optional[str] = None
    substitution_group: Optional[str] = None
    type: Optional[str] = None
    period_type: Optional[str] = None
    balance: Optional[str] = None
    abstract: bool = False
    nillable: bool = True
    documentation: Optional[str] = None
    source: ConceptSource = ConceptSource.TAXONOMY

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the concept."""
        return (self.namespace, self.name)

    @property
    def is_stub(self) -> bool:
        """True if no taxonomy declaration has been seen."""
        return self.source == ConceptSource.FACT

    @classmethod
    def stub(cls, namespace: str, name: str, qname: Optional[str] = None) -> 'Concept':
        """
        Concept synthesized from a fact reference.

        Every metadata field is left empty; only identity is known.
        """
        return cls(
            namespace=namespace,
            name=name,
            qname=qname or name,
            source=ConceptSource.FACT,
        )

    def merge(self, other: 'Concept') -> None:
        """
        Fold a later definition of the same concept into this one.

        Non-null values already present are kept. Empty metadata is
        backfilled from ``other``. A taxonomy declaration arriving after
        a fact-derived stub also supplies the qname and the boolean flags.

        Args:
            other: Definition with the same key

        Raises:
            ValueError: If the keys differ
        """
        if other.key != self.key:
            raise ValueError(f"Cannot merge {other.key} into {self.key}")

        for name in MERGEABLE_FIELDS:
            if getattr(self, name) is None and getattr(other, name) is not None:
                setattr(self, name, getattr(other, name))

        if self.is_stub and not other.is_stub:
            if other.qname:
                self.qname = other.qname
            self.abstract = other.abstract
            self.nillable = other.nillable
            self.source = ConceptSource.TAXONOMY

        if self.qname is None:
            self.qname = other.qname

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['source'] = self.source.value
        return data


__all__ = ['Concept', 'ConceptSource', 'MERGEABLE_FIELDS']
