# Path: readidx/database/models/xbrl.py
"""
XBRL Document Models

Tables filled by the standalone importer (instance.xbrl + Taxonomy.xsd).

Architecture:
- xbrl_documents identified by the SHA-256 of the instance file
- Taxonomy concepts shared across documents, unique by (namespace, local name)
- Everything else scoped to a document and replaced on re-import
"""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Boolean,
    Numeric,
    DateTime,
    JSON,
    ForeignKey,
    UniqueConstraint,
)

from .base import Base


class XBRLDocument(Base):
    """Imported instance document."""
    __tablename__ = 'xbrl_documents'

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_name = Column(String(255), nullable=False)
    document_hash = Column(
        String(64),
        nullable=False,
        unique=True,
        comment="SHA-256 of the instance file"
    )
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    def __repr__(self) -> str:
        return f"<XBRLDocument(id={self.id}, name='{self.document_name}')>"


class TaxonomyConcept(Base):
    """
    Concept declared by a taxonomy schema or synthesized from a fact.

    Existing non-null columns are never overwritten on upsert.
    """
    __tablename__ = 'xbrl_taxonomy_concepts'
    __table_args__ = (
        UniqueConstraint('namespace', 'local_name', name='uq_concept_identity'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    namespace = Column(String(512), nullable=False, default='')
    local_name = Column(String(255), nullable=False)
    qname = Column(String(512), nullable=False)
    id_attr = Column(String(255))
    substitution_group = Column(String(255))
    type = Column(String(255))
    period_type = Column(String(20))
    balance = Column(String(10))
    abstract_flag = Column(Boolean, nullable=False, default=False)
    nillable_flag = Column(Boolean, nullable=False, default=True)
    documentation = Column(Text)

    def __repr__(self) -> str:
        return f"<TaxonomyConcept('{self.qname}')>"


class TaxonomyLinkbase(Base):
    """link:linkbaseRef found while resolving a document's taxonomy."""
    __tablename__ = 'xbrl_taxonomy_linkbases'

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    target_namespace = Column(String(512))
    href = Column(Text)
    role = Column(String(512))
    arcrole = Column(String(512))
    linkbase_type = Column(String(50))


class TaxonomyRoleRef(Base):
    """link:roleRef found while resolving a document's taxonomy."""
    __tablename__ = 'xbrl_taxonomy_role_refs'
    __table_args__ = (
        UniqueConstraint('document_id', 'role_uri', name='uq_role_ref'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    role_uri = Column(String(512), nullable=False)
    href = Column(Text)


class XBRLContext(Base):
    """Context of an instance document; dates kept as written."""
    __tablename__ = 'xbrl_contexts'
    __table_args__ = (
        UniqueConstraint('document_id', 'context_id', name='uq_context'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    context_id = Column(String(255), nullable=False)
    entity_identifier = Column(String(255))
    entity_scheme = Column(String(512))
    period_type = Column(String(20), nullable=False)
    start_date = Column(String(32))
    end_date = Column(String(32))
    instant = Column(String(32))
    segment_json = Column(JSON, comment="Segment members, NULL when none")
    scenario_json = Column(JSON, comment="Scenario members, NULL when none")


class XBRLContextDimension(Base):
    """One dimension member of a context, flattened for querying."""
    __tablename__ = 'xbrl_context_dimensions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    context_id = Column(String(255), nullable=False)
    location = Column(String(10), nullable=False, comment="segment or scenario")
    dimension = Column(String(512))
    member = Column(String(512))
    is_typed = Column(Boolean, nullable=False, default=False)
    typed_member_xml = Column(Text)


class XBRLUnit(Base):
    """Unit of an instance document."""
    __tablename__ = 'xbrl_units'
    __table_args__ = (
        UniqueConstraint('document_id', 'unit_id', name='uq_unit'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    unit_id = Column(String(255), nullable=False)
    unit_type = Column(String(10), nullable=False, comment="measure or divide")
    measures_json = Column(JSON, nullable=False)


class XBRLFact(Base):
    """Fact of an instance document."""
    __tablename__ = 'xbrl_facts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(
        Integer,
        ForeignKey('xbrl_documents.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    concept_id = Column(
        Integer,
        ForeignKey('xbrl_taxonomy_concepts.id', ondelete='SET NULL'),
        index=True
    )
    concept_namespace = Column(String(512))
    concept_local_name = Column(String(255), nullable=False)
    concept_qname = Column(String(512))
    context_id = Column(String(255), nullable=False)
    unit_id = Column(String(255))
    value_decimal = Column(Numeric(38, 10), comment="NULL unless a plain decimal literal")
    value_string = Column(Text)
    decimals_attr = Column(String(20))
    precision_attr = Column(String(20))
    language = Column(String(20))
    is_nil = Column(Boolean, nullable=False, default=False)


__all__ = [
    'XBRLDocument',
    'TaxonomyConcept',
    'TaxonomyLinkbase',
    'TaxonomyRoleRef',
    'XBRLContext',
    'XBRLContextDimension',
    'XBRLUnit',
    'XBRLFact',
]
