# Path: readidx/xbrl_parser/instance/instance_parser.py
"""
Instance Document Parser

Main orchestrator for parsing XBRL instance documents.

This module coordinates:
- Context parsing
- Unit parsing
- Fact extraction
- Detection of fact concepts missing from the taxonomy

Example:
    parser = InstanceParser()
    result = parser.parse(Path("instance.xbrl"), known_concepts=taxonomy.concepts)

    print(f"Extracted {len(result.facts)} facts")
    print(f"Contexts: {len(result.contexts)}")
    print(f"Units: {len(result.units)}")
"""

import logging
import time
from typing import Optional, Container
from pathlib import Path
from dataclasses import dataclass, field

from ...config_loader import ConfigLoader
from ..foundation.xml_parser import XMLParser
from ..models.concept import Concept
from ..models.context import Context
from ..models.fact import Fact
from ..models.unit import Unit
from ..models.error import ParsingError, InstanceParseError
from .constants import LINK_NS, ELEM_SCHEMA_REF, ATTR_XLINK_HREF
from .context_parser import ContextParser
from .unit_parser import UnitParser
from .fact_extractor import FactExtractor


@dataclass
class InstanceParseResult:
    """
    Result of instance document parsing.

    Attributes:
        contexts: Context id -> Context
        units: Unit id -> SimpleUnit / RatioUnit
        facts: Facts in document order
        missing_concepts: Stub concepts for facts absent from the taxonomy
        schema_refs: link:schemaRef hrefs
        errors: Recoverable problems
    """
    instance_path: Optional[Path] = None
    contexts: dict[str, Context] = field(default_factory=dict)
    units: dict[str, Unit] = field(default_factory=dict)
    facts: list[Fact] = field(default_factory=list)
    missing_concepts: dict[tuple[str, str], Concept] = field(default_factory=dict)
    schema_refs: list[str] = field(default_factory=list)
    errors: list[ParsingError] = field(default_factory=list)
    parse_time_seconds: float = 0.0


class InstanceParser:
    """
    Parses XBRL instance documents.

    Example:
        parser = InstanceParser()
        try:
            result = parser.parse(instance_path, known_concepts)
        except InstanceParseError as e:
            print(f"Cannot read instance: {e}")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize instance parser.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)

        self.xml_parser = XMLParser(self.config)
        self.context_parser = ContextParser(self.config)
        self.unit_parser = UnitParser(self.config)
        self.fact_extractor = FactExtractor(self.config)

    def parse(
        self,
        instance_path: Path,
        known_concepts: Optional[Container[tuple[str, str]]] = None
    ) -> InstanceParseResult:
        """
        Parse an instance document.

        Args:
            instance_path: Path to the instance file
            known_concepts: Keys (namespace, local name) of taxonomy concepts;
                facts outside it produce stub concepts

        Returns:
            InstanceParseResult

        Raises:
            InstanceParseError: If the document cannot be parsed at all
        """
        start_time = time.time()
        instance_path = Path(instance_path)
        self.logger.info(f"Parsing instance: {instance_path.name}")

        parse_result = self.xml_parser.parse_file(instance_path)
        if not parse_result.ok:
            raise InstanceParseError(
                f"Failed to parse instance document {instance_path}",
                parse_result.errors
            )

        root = parse_result.root
        result = InstanceParseResult(instance_path=instance_path)

        result.schema_refs = [
            ref.get(ATTR_XLINK_HREF)
            for ref in root.iter(f"{{{LINK_NS}}}{ELEM_SCHEMA_REF}")
            if ref.get(ATTR_XLINK_HREF)
        ]
        result.contexts = self.context_parser.parse_contexts(root, result.errors)
        result.units = self.unit_parser.parse_units(root, result.errors)
        result.facts = self.fact_extractor.extract_facts(root)
        result.missing_concepts = self._missing_concepts(result.facts, known_concepts or ())

        result.parse_time_seconds = time.time() - start_time
        self.logger.info(
            f"Instance parsed in {result.parse_time_seconds:.2f}s: "
            f"{len(result.contexts)} contexts, {len(result.units)} units, "
            f"{len(result.facts)} facts, {len(result.missing_concepts)} missing concepts"
        )
        return result

    def _missing_concepts(
        self,
        facts: list[Fact],
        known_concepts: Container[tuple[str, str]]
    ) -> dict[tuple[str, str], Concept]:
        """Stub concepts for fact QNames the taxonomy does not declare."""
        missing = {}
        for fact in facts:
            key = fact.concept.key
            if key in known_concepts or key in missing:
                continue
            missing[key] = Concept.stub(
                namespace=fact.concept.namespace_uri,
                name=fact.concept.local_name,
                qname=str(fact.concept),
            )
        return missing


__all__ = ['InstanceParser', 'InstanceParseResult']
