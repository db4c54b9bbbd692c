# Path: readidx/database/operations/xbrl_ops.py
"""
XBRL Operations

Persistence for the standalone importer.

Provides methods for:
- Document upsert by instance hash
- Non-destructive concept upsert by (namespace, local name)
- Replace-all writes of document-scoped taxonomy refs, contexts,
  units and facts
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ..models.xbrl import (
    XBRLDocument,
    TaxonomyConcept,
    TaxonomyLinkbase,
    TaxonomyRoleRef,
    XBRLContext,
    XBRLContextDimension,
    XBRLUnit,
    XBRLFact,
)
from ...xbrl_parser.concept_registry import ConceptRegistry
from ...xbrl_parser.instance.constants import SCOPE_SEGMENT, SCOPE_SCENARIO
from ...xbrl_parser.models.concept import Concept, MERGEABLE_FIELDS
from ...xbrl_parser.models.context import Context, DimensionScope
from ...xbrl_parser.models.fact import Fact
from ...xbrl_parser.models.unit import Unit
from ...xbrl_parser.taxonomy.schema_loader import LinkbaseRef, RoleRef


logger = logging.getLogger(__name__)


class XBRLOperations:
    """
    Operations for XBRL document tables.

    Example:
        with session_scope() as session:
            document = XBRLOperations.upsert_document(session, 'report.zip', digest)
            for concept in registry:
                registry.bind_identity(
                    concept.key, XBRLOperations.upsert_concept(session, concept)
                )
            XBRLOperations.replace_facts(session, document.id, facts, registry)
    """

    @staticmethod
    def upsert_document(session: Session, document_name: str, document_hash: str) -> XBRLDocument:
        """
        Find the document by hash, or create it.

        Returns:
            XBRLDocument instance (flushed)
        """
        document = session.query(XBRLDocument).filter_by(document_hash=document_hash).first()
        if document is None:
            document = XBRLDocument(document_name=document_name, document_hash=document_hash)
            session.add(document)
            logger.info(f"Created document: {document_name}")
        else:
            document.document_name = document_name
            logger.info(f"Re-importing document {document.id}: {document_name}")

        session.flush()
        return document

    @staticmethod
    def upsert_concept(session: Session, concept: Concept) -> int:
        """
        Insert a concept or backfill the stored row.

        Stored non-null values are kept. A row that so far only knew the
        concept's identity takes the qname and flags of a taxonomy
        declaration.

        Returns:
            Concept row id
        """
        row = session.query(TaxonomyConcept).filter_by(
            namespace=concept.namespace,
            local_name=concept.name
        ).first()

        if row is None:
            row = TaxonomyConcept(
                namespace=concept.namespace,
                local_name=concept.name,
                qname=concept.qname or concept.name,
                id_attr=concept.id_attr,
                substitution_group=concept.substitution_group,
                type=concept.type,
                period_type=concept.period_type,
                balance=concept.balance,
                abstract_flag=concept.abstract,
                nillable_flag=concept.nillable,
                documentation=concept.documentation,
            )
            session.add(row)
            session.flush()
            return row.id

        row_is_stub = all(getattr(row, name) is None for name in MERGEABLE_FIELDS)
        for name in MERGEABLE_FIELDS:
            if getattr(row, name) is None and getattr(concept, name) is not None:
                setattr(row, name, getattr(concept, name))

        if row_is_stub and not concept.is_stub:
            row.qname = concept.qname or row.qname
            row.abstract_flag = concept.abstract
            row.nillable_flag = concept.nillable

        session.flush()
        return row.id

    @staticmethod
    def upsert_concepts(session: Session, registry: ConceptRegistry) -> int:
        """Upsert every registered concept and bind its row id."""
        for concept in registry:
            registry.bind_identity(concept.key, XBRLOperations.upsert_concept(session, concept))
        logger.info(f"Upserted {len(registry)} concepts")
        return len(registry)

    @staticmethod
    def replace_taxonomy_refs(
        session: Session,
        document_id: int,
        linkbase_refs: Iterable[LinkbaseRef],
        role_refs: Iterable[RoleRef]
    ) -> tuple[int, int]:
        """
        Replace the document's linkbase and role references.

        Role refs are unique per document; the last href seen wins and
        entries without a role URI are skipped.

        Returns:
            (linkbase count, role ref count)
        """
        session.query(TaxonomyLinkbase).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )
        session.query(TaxonomyRoleRef).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )

        linkbase_count = 0
        for ref in linkbase_refs:
            session.add(TaxonomyLinkbase(
                document_id=document_id,
                target_namespace=ref.target_namespace,
                href=ref.href,
                role=ref.role,
                arcrole=ref.arcrole,
                linkbase_type=ref.link_type,
            ))
            linkbase_count += 1

        roles: dict[str, Optional[str]] = {}
        for ref in role_refs:
            if ref.role_uri:
                roles[ref.role_uri] = ref.href
        for role_uri, href in roles.items():
            session.add(TaxonomyRoleRef(document_id=document_id, role_uri=role_uri, href=href))

        session.flush()
        return linkbase_count, len(roles)

    @staticmethod
    def replace_contexts(session: Session, document_id: int, contexts: Iterable[Context]) -> int:
        """
        Replace the document's contexts and their flattened dimensions.

        Returns:
            Number of contexts inserted
        """
        session.query(XBRLContextDimension).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )
        session.query(XBRLContext).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )

        count = 0
        for context in contexts:
            session.add(XBRLContext(
                document_id=document_id,
                context_id=context.id,
                entity_identifier=context.entity_identifier,
                entity_scheme=context.entity_scheme,
                period_type=context.period_type,
                start_date=context.period.start_date,
                end_date=context.period.end_date,
                instant=context.period.instant,
                segment_json=_scope_json(context.segment),
                scenario_json=_scope_json(context.scenario),
            ))
            for location, scope in ((SCOPE_SEGMENT, context.segment),
                                    (SCOPE_SCENARIO, context.scenario)):
                _add_dimensions(session, document_id, context.id, location, scope)
            count += 1

        session.flush()
        return count

    @staticmethod
    def replace_units(session: Session, document_id: int, units: Iterable[Unit]) -> int:
        """
        Replace the document's units.

        Returns:
            Number of units inserted
        """
        session.query(XBRLUnit).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )

        count = 0
        for unit in units:
            session.add(XBRLUnit(
                document_id=document_id,
                unit_id=unit.id,
                unit_type=unit.unit_type,
                measures_json=unit.measures_dict(),
            ))
            count += 1

        session.flush()
        return count

    @staticmethod
    def replace_facts(
        session: Session,
        document_id: int,
        facts: Iterable[Fact],
        registry: ConceptRegistry
    ) -> int:
        """
        Replace the document's facts.

        value_decimal holds the value only when it is a plain decimal
        literal; value_string always keeps the raw text.

        Returns:
            Number of facts inserted
        """
        session.query(XBRLFact).filter_by(document_id=document_id).delete(
            synchronize_session=False
        )

        count = 0
        for fact in facts:
            session.add(XBRLFact(
                document_id=document_id,
                concept_id=registry.identity_for(fact.concept.key),
                concept_namespace=fact.concept.namespace_uri,
                concept_local_name=fact.concept.local_name,
                concept_qname=str(fact.concept),
                context_id=fact.context_ref,
                unit_id=fact.unit_ref,
                value_decimal=fact.decimal_value,
                value_string=fact.value,
                decimals_attr=fact.decimals,
                precision_attr=fact.precision,
                language=fact.language,
                is_nil=fact.is_nil,
            ))
            count += 1

        session.flush()
        return count


def _scope_json(scope: DimensionScope) -> Optional[dict]:
    """Stored JSON for a segment or scenario; None when empty."""
    if scope.is_empty():
        return None
    return scope.to_dict()


def _add_dimensions(
    session: Session,
    document_id: int,
    context_id: str,
    location: str,
    scope: DimensionScope
) -> None:
    for member in scope.explicit:
        session.add(XBRLContextDimension(
            document_id=document_id,
            context_id=context_id,
            location=location,
            dimension=str(member.dimension),
            member=str(member.member),
            is_typed=False,
        ))
    for member in scope.typed:
        session.add(XBRLContextDimension(
            document_id=document_id,
            context_id=context_id,
            location=location,
            dimension=str(member.dimension),
            is_typed=True,
            typed_member_xml=member.value_xml,
        ))


__all__ = ['XBRLOperations']
