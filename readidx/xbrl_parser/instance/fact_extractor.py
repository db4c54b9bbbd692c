# Path: readidx/xbrl_parser/instance/fact_extractor.py
"""
Fact Extractor

Extracts facts from XBRL instance documents.

Every element carrying a contextRef attribute is a fact, whatever its
namespace. Values are captured verbatim; numeric interpretation happens
when facts are persisted.

Example:
    extractor = FactExtractor()
    facts = extractor.extract_facts(root)

    for fact in facts:
        print(f"{fact.concept}: {fact.value}")
"""

import logging
from typing import Optional
from lxml import etree

from ...config_loader import ConfigLoader
from ..foundation.qname import QName
from ..models.fact import Fact
from .constants import (
    ATTR_ID,
    ATTR_CONTEXT_REF,
    ATTR_UNIT_REF,
    ATTR_DECIMALS,
    ATTR_PRECISION,
    ATTR_XML_LANG,
    ATTR_XSI_NIL,
    ATTR_XSI_TYPE,
)


_NIL_VALUES = ('true', '1')


class FactExtractor:
    """
    Extracts facts from XBRL instances.

    Example:
        extractor = FactExtractor()
        facts = extractor.extract_facts(root)
        numeric = [f for f in facts if f.unit_ref]
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize fact extractor.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)

    def extract_facts(self, root: etree._Element) -> list[Fact]:
        """
        Extract all facts from instance, in document order.

        Args:
            root: Instance document root element

        Returns:
            List of Fact objects
        """
        facts = []

        for elem in root.iter():
            if not isinstance(elem.tag, str):
                continue
            context_ref = elem.get(ATTR_CONTEXT_REF)
            if context_ref is None:
                continue
            facts.append(self._build_fact(elem, context_ref.strip()))

        self.logger.info(f"Extracted {len(facts)} facts")
        return facts

    def _build_fact(self, elem: etree._Element, context_ref: str) -> Fact:
        """Capture one fact element."""
        is_nil = (elem.get(ATTR_XSI_NIL) or '').strip().lower() in _NIL_VALUES

        return Fact(
            concept=QName.from_element(elem),
            context_ref=context_ref,
            value=None if is_nil else ''.join(elem.itertext()),
            unit_ref=elem.get(ATTR_UNIT_REF),
            decimals=elem.get(ATTR_DECIMALS),
            precision=elem.get(ATTR_PRECISION),
            id=elem.get(ATTR_ID),
            is_nil=is_nil,
            language=elem.get(ATTR_XML_LANG),
            xsi_type=elem.get(ATTR_XSI_TYPE),
            source_line=elem.sourceline,
        )


__all__ = ['FactExtractor']
