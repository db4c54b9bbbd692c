# Path: readidx/xbrl_parser/models/unit.py
"""
Unit Data Model

XBRL unit representation for numeric facts.

A unit is one of two shapes:
- SimpleUnit: one or more measures (e.g., iso4217:IDR)
- RatioUnit: numerator and denominator measure lists (e.g., IDR per share)

Consumers branch with isinstance() over both variants.
"""

from dataclasses import dataclass
from typing import Any, Union


# Stored unit_type values
UNIT_TYPE_MEASURE = "measure"
UNIT_TYPE_DIVIDE = "divide"


@dataclass(frozen=True)
class SimpleUnit:
    """
    Unit made of direct xbrli:measure children.

    Example:
        SimpleUnit(id="IDR", measures=("iso4217:IDR",))
    """
    id: str
    measures: tuple[str, ...]

    @property
    def unit_type(self) -> str:
        return UNIT_TYPE_MEASURE

    def measures_dict(self) -> dict[str, Any]:
        """Measure payload in stored form."""
        return {'measures': list(self.measures)}

    def __str__(self) -> str:
        return '*'.join(self.measures)


@dataclass(frozen=True)
class RatioUnit:
    """
    Unit expressed with xbrli:divide.

    Example:
        RatioUnit(
            id="IDRPerShare",
            numerators=("iso4217:IDR",),
            denominators=("xbrli:shares",)
        )
    """
    id: str
    numerators: tuple[str, ...]
    denominators: tuple[str, ...]

    @property
    def unit_type(self) -> str:
        return UNIT_TYPE_DIVIDE

    def measures_dict(self) -> dict[str, Any]:
        """Measure payload in stored form."""
        return {
            'numerator': list(self.numerators),
            'denominator': list(self.denominators),
        }

    def __str__(self) -> str:
        return f"{'*'.join(self.numerators)}/{'*'.join(self.denominators)}"


Unit = Union[SimpleUnit, RatioUnit]


__all__ = [
    'SimpleUnit',
    'RatioUnit',
    'Unit',
    'UNIT_TYPE_MEASURE',
    'UNIT_TYPE_DIVIDE',
]
