# Path: readidx/xbrl_parser/instance/context_parser.py
"""
Context Parser

Extracts and parses context elements from XBRL instance documents.

This module handles:
- Entity identifier parsing
- Period parsing (instant, duration, forever)
- Explicit and typed dimension parsing
- Segment and scenario scopes, kept apart

Example:
    parser = ContextParser()
    contexts = parser.parse_contexts(root, errors)

    for context_id, context in contexts.items():
        print(f"{context_id}: {context.entity_identifier} {context.period_type}")
"""

import logging
from typing import Optional
from lxml import etree

from ...config_loader import ConfigLoader
from ..foundation.qname import QName, resolve_qname
from ..models.context import (
    Context,
    Period,
    DimensionScope,
    ExplicitMember,
    TypedMember,
)
from ..models.error import ParsingError, ErrorCategory, ErrorSeverity
from .constants import (
    XBRLI_NS,
    XBRLDI_NAMESPACES,
    ELEM_CONTEXT,
    ELEM_ENTITY,
    ELEM_IDENTIFIER,
    ELEM_SEGMENT,
    ELEM_SCENARIO,
    ELEM_PERIOD,
    ELEM_INSTANT,
    ELEM_START_DATE,
    ELEM_END_DATE,
    ELEM_EXPLICIT_MEMBER,
    ELEM_TYPED_MEMBER,
    ATTR_ID,
    ATTR_SCHEME,
    ATTR_DIMENSION,
)


def _xbrli(name: str) -> str:
    return f"{{{XBRLI_NS}}}{name}"


def _xbrldi(name: str) -> tuple[str, ...]:
    """Clark names of a dimension element in every accepted xbrldi namespace."""
    return tuple(f"{{{ns}}}{name}" for ns in XBRLDI_NAMESPACES)


class ContextParser:
    """
    Parses context elements from XBRL instances.

    Example:
        parser = ContextParser()
        contexts = parser.parse_contexts(root, errors)

        ctx = contexts['c20241231']
        print(ctx.period.instant, ctx.segment.explicit)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize context parser.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)

    def parse_contexts(
        self,
        root: etree._Element,
        errors: list[ParsingError]
    ) -> dict[str, Context]:
        """
        Parse all context elements from instance.

        Contexts without an id are skipped and recorded in errors.

        Args:
            root: Instance document root element
            errors: List collecting recoverable problems

        Returns:
            Dictionary mapping context IDs to Context objects
        """
        contexts = {}

        for ctx_elem in root.iter(_xbrli(ELEM_CONTEXT)):
            context_id = (ctx_elem.get(ATTR_ID) or '').strip()
            if not context_id:
                self.logger.warning("Context element missing 'id' attribute")
                errors.append(ParsingError(
                    severity=ErrorSeverity.ERROR,
                    category=ErrorCategory.INVALID_CONTEXT,
                    message="Context element missing 'id' attribute",
                    line_number=ctx_elem.sourceline
                ))
                continue

            contexts[context_id] = self._parse_context_element(ctx_elem, context_id)

        self.logger.info(f"Parsed {len(contexts)} contexts")
        return contexts

    def _parse_context_element(self, ctx_elem: etree._Element, context_id: str) -> Context:
        """Parse a single context element."""
        identifier = ctx_elem.find(f"{_xbrli(ELEM_ENTITY)}/{_xbrli(ELEM_IDENTIFIER)}")

        return Context(
            id=context_id,
            entity_identifier=_text(identifier),
            entity_scheme=identifier.get(ATTR_SCHEME) if identifier is not None else None,
            period=self._parse_period(ctx_elem.find(_xbrli(ELEM_PERIOD))),
            segment=self._parse_scope(
                ctx_elem.find(f"{_xbrli(ELEM_ENTITY)}/{_xbrli(ELEM_SEGMENT)}")
            ),
            scenario=self._parse_scope(ctx_elem.find(_xbrli(ELEM_SCENARIO))),
        )

    def _parse_period(self, period_elem: Optional[etree._Element]) -> Period:
        """
        Parse period element.

        A missing period element, or one holding only xbrli:forever,
        gives a forever period.
        """
        if period_elem is None:
            return Period()

        return Period(
            start_date=_text(period_elem.find(_xbrli(ELEM_START_DATE))),
            end_date=_text(period_elem.find(_xbrli(ELEM_END_DATE))),
            instant=_text(period_elem.find(_xbrli(ELEM_INSTANT))),
        )

    def _parse_scope(self, scope_elem: Optional[etree._Element]) -> DimensionScope:
        """Collect explicit and typed members of a segment or scenario."""
        if scope_elem is None:
            return DimensionScope()

        explicit = []
        for member_elem in scope_elem.iter(*_xbrldi(ELEM_EXPLICIT_MEMBER)):
            explicit.append(ExplicitMember(
                dimension=self._dimension_of(member_elem),
                member=resolve_qname(member_elem, member_elem.text or ''),
            ))

        typed = []
        for member_elem in scope_elem.iter(*_xbrldi(ELEM_TYPED_MEMBER)):
            typed.append(TypedMember(
                dimension=self._dimension_of(member_elem),
                value_xml=inner_markup(member_elem),
            ))

        return DimensionScope(explicit=tuple(explicit), typed=tuple(typed))

    def _dimension_of(self, member_elem: etree._Element) -> QName:
        return resolve_qname(member_elem, member_elem.get(ATTR_DIMENSION) or '')


def _text(elem: Optional[etree._Element]) -> Optional[str]:
    """Stripped text of an element, None when absent or blank."""
    if elem is None or elem.text is None:
        return None
    return elem.text.strip() or None


def inner_markup(elem: etree._Element) -> str:
    """Verbatim content of an element: leading text plus serialized children."""
    return (elem.text or '') + ''.join(
        etree.tostring(child, encoding='unicode') for child in elem
    )


__all__ = ['ContextParser', 'inner_markup']
