# Path: readidx/xbrl_parser/instance/unit_parser.py
"""
Unit Parser

Extracts unit elements from XBRL instance documents.

A unit with direct xbrli:measure children becomes a SimpleUnit; one
with xbrli:divide becomes a RatioUnit. Any other shape is dropped.

Example:
    parser = UnitParser()
    units = parser.parse_units(root, errors)

    for unit_id, unit in units.items():
        print(f"{unit_id}: {unit}")
"""

import logging
from typing import Optional
from lxml import etree

from ...config_loader import ConfigLoader
from ..models.unit import Unit, SimpleUnit, RatioUnit
from ..models.error import ParsingError, ErrorCategory, ErrorSeverity
from .constants import (
    XBRLI_NS,
    ELEM_UNIT,
    ELEM_MEASURE,
    ELEM_DIVIDE,
    ELEM_UNIT_NUMERATOR,
    ELEM_UNIT_DENOMINATOR,
    ATTR_ID,
)


class UnitParser:
    """
    Parses unit elements from XBRL instances.

    Example:
        parser = UnitParser()
        units = parser.parse_units(root, errors)

        idr = units['IDR']
        print(idr.measures)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize unit parser.

        Args:
            config: Configuration loader
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)

    def parse_units(self, root: etree._Element, errors: list[ParsingError]) -> dict[str, Unit]:
        """
        Parse all unit elements from instance.

        Args:
            root: Instance document root element
            errors: List collecting recoverable problems

        Returns:
            Dictionary mapping unit IDs to SimpleUnit / RatioUnit
        """
        units = {}

        for unit_elem in root.iter(f"{{{XBRLI_NS}}}{ELEM_UNIT}"):
            unit_id = (unit_elem.get(ATTR_ID) or '').strip()
            if not unit_id:
                self.logger.warning("Unit element missing 'id' attribute")
                errors.append(ParsingError(
                    severity=ErrorSeverity.ERROR,
                    category=ErrorCategory.INVALID_UNIT,
                    message="Unit element missing 'id' attribute",
                    line_number=unit_elem.sourceline
                ))
                continue

            unit = self._parse_unit_element(unit_elem, unit_id)
            if unit is None:
                self.logger.debug(f"Unit {unit_id} has neither measures nor divide, dropped")
                continue
            units[unit_id] = unit

        self.logger.info(f"Parsed {len(units)} units")
        return units

    def _parse_unit_element(self, unit_elem: etree._Element, unit_id: str) -> Optional[Unit]:
        """Build the unit variant matching the element's shape."""
        measures = self._measures(unit_elem)
        if measures:
            return SimpleUnit(id=unit_id, measures=measures)

        divide = unit_elem.find(f"{{{XBRLI_NS}}}{ELEM_DIVIDE}")
        if divide is None:
            return None

        numerator = divide.find(f"{{{XBRLI_NS}}}{ELEM_UNIT_NUMERATOR}")
        denominator = divide.find(f"{{{XBRLI_NS}}}{ELEM_UNIT_DENOMINATOR}")
        if numerator is None or denominator is None:
            return None

        numerators = self._measures(numerator)
        denominators = self._measures(denominator)
        if not numerators or not denominators:
            return None

        return RatioUnit(id=unit_id, numerators=numerators, denominators=denominators)

    def _measures(self, parent: etree._Element) -> tuple[str, ...]:
        """Direct xbrli:measure children, as written."""
        return tuple(
            measure.text.strip()
            for measure in parent.findall(f"{{{XBRLI_NS}}}{ELEM_MEASURE}")
            if measure.text and measure.text.strip()
        )


__all__ = ['UnitParser']
