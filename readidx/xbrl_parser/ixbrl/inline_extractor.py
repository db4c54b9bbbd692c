# Path: readidx/xbrl_parser/ixbrl/inline_extractor.py
"""
Inline Fact Extractor

Turns one archive member into normalized (line item, value, unit) rows.

Member dispatch by extension:
- .html / .xhtml: every ix:nonFraction / ix:nonNumeric element, matched by
  local name ignoring case, with a name attribute and non-empty text
- .xbrl / .xml: every child of the document root outside the xbrli and
  link namespaces, unless xsi:nil
- anything else: ignored

Values go through normalize_number() with the decimals attribute as the
rounding hint. A value that does not normalize drops that fact only.

Example:
    extractor = InlineFactExtractor()
    facts = extractor.extract("report.xhtml", content)
    for fact in facts:
        print(fact.line_item, fact.value, fact.unit)
"""

import logging
from typing import Optional
from pathlib import PurePosixPath
from lxml import etree

from ...config_loader import ConfigLoader
from ..foundation.xml_parser import XMLParser, XMLParseResult
from ..foundation.qname import QName, local_name_of
from ..foundation.number_normalizer import normalize_number, parse_decimals_hint
from ..models.fact import InlineFact
from .constants import (
    IX_FACT_LOCAL_NAMES,
    ATTR_NAME,
    ATTR_UNIT_REF,
    ATTR_DECIMALS,
    ATTR_XSI_NIL,
    INLINE_EXTENSIONS,
    INSTANCE_EXTENSIONS,
    NON_FACT_NAMESPACES,
    DEFAULT_UNIT_CODE,
)


def member_kind(member_name: str) -> Optional[str]:
    """'inline', 'instance', or None for members that carry no facts."""
    suffix = PurePosixPath(member_name).suffix.lower()
    if suffix in INLINE_EXTENSIONS:
        return 'inline'
    if suffix in INSTANCE_EXTENSIONS:
        return 'instance'
    return None


def get_attribute(elem: etree._Element, name: str) -> Optional[str]:
    """
    Attribute lookup ignoring case and namespace prefix.

    The HTML parser lower-cases attribute names (unitRef -> unitref), the
    XML parser keeps them as written.
    """
    value = elem.get(name)
    if value is not None:
        return value

    wanted = name.lower()
    for key, value in elem.attrib.items():
        if local_name_of(key).lower() == wanted:
            return value
    return None


class InlineFactExtractor:
    """
    Extracts normalized facts from a single archive member.

    Example:
        extractor = InlineFactExtractor(config)
        facts = extractor.extract("instance.xbrl", content)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize extractor.

        Args:
            config: Configuration loader (supplies default_unit)
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)
        self.xml_parser = XMLParser(self.config)
        self.default_unit = self.config.get('default_unit') or DEFAULT_UNIT_CODE
        self.last_parse: Optional[XMLParseResult] = None

    def extract(self, member_name: str, content: bytes) -> list[InlineFact]:
        """
        Extract facts from one member.

        Args:
            member_name: Archive member name (extension selects the reader)
            content: Raw member bytes

        Returns:
            List of InlineFact; empty when the member is ignored or unreadable
        """
        self.last_parse = None
        kind = member_kind(member_name)

        if kind == 'inline':
            parsed = self.xml_parser.parse_markup(content, source=member_name)
            self.last_parse = parsed
            if not parsed.ok:
                self.logger.debug(f"Skipping unreadable member {member_name}")
                return []
            return self._extract_inline(parsed.root)

        if kind == 'instance':
            parsed = self.xml_parser.parse_bytes(content, source=member_name)
            self.last_parse = parsed
            if not parsed.ok:
                self.logger.debug(f"Skipping unreadable member {member_name}")
                return []
            return self._extract_instance(parsed.root)

        return []

    def _extract_inline(self, root: etree._Element) -> list[InlineFact]:
        """Facts tagged with the inline XBRL vocabulary, anywhere in the tree."""
        facts = []

        for elem in root.iter():
            if local_name_of(elem.tag).lower() not in IX_FACT_LOCAL_NAMES:
                continue

            name = (get_attribute(elem, ATTR_NAME) or '').strip()
            text = ''.join(elem.itertext()).strip()
            if not name or not text:
                continue

            fact = self._build(name, text, elem)
            if fact is not None:
                facts.append(fact)

        return facts

    def _extract_instance(self, root: etree._Element) -> list[InlineFact]:
        """Children of the instance root that are not xbrli/link plumbing."""
        facts = []

        for elem in root:
            if not isinstance(elem.tag, str):
                continue

            qname = QName.from_element(elem)
            if qname.namespace_uri in NON_FACT_NAMESPACES:
                continue
            if (elem.get(ATTR_XSI_NIL) or '').strip().lower() == 'true':
                continue

            fact = self._build(qname.local_name, elem.text or '', elem)
            if fact is not None:
                facts.append(fact)

        return facts

    def _build(self, line_item: str, text: str, elem: etree._Element) -> Optional[InlineFact]:
        """Normalize the value; None when the text is not a number."""
        decimals = parse_decimals_hint(get_attribute(elem, ATTR_DECIMALS))
        value = normalize_number(text, decimals)
        if value is None:
            self.logger.debug(f"Dropping {line_item}: value {text!r} is not numeric")
            return None

        unit = (get_attribute(elem, ATTR_UNIT_REF) or '').strip() or self.default_unit
        return InlineFact(line_item=line_item, value=value, unit=unit)


__all__ = ['InlineFactExtractor', 'member_kind', 'get_attribute']
