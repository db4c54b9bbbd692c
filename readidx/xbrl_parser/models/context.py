# Path: readidx/xbrl_parser/models/context.py
"""
Context Data Model

XBRL context representation with entity, period, and dimensions.

This module defines:
- Period (raw dates with derived period type)
- ExplicitMember / TypedMember dimension qualifiers
- DimensionScope (segment or scenario container)
- Context (complete, immutable context)
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..constants import (
    PERIOD_TYPE_INSTANT,
    PERIOD_TYPE_DURATION,
    PERIOD_TYPE_FOREVER,
)
from ..foundation.qname import QName


# ==============================================================================
# PERIOD
# ==============================================================================

@dataclass(frozen=True)
class Period:
    """
    Period (temporal context).

    Dates are kept as written in the document (xs:date or xs:dateTime).

    Usage:
        Period(instant='2024-12-31').period_type            # 'instant'
        Period(start_date='2024-01-01', end_date='2024-12-31').period_type
                                                            # 'duration'
        Period().period_type                                # 'forever'
    """
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    instant: Optional[str] = None

    @property
    def period_type(self) -> str:
        """Derived type: both bounds -> duration, instant -> instant, else forever."""
        if self.start_date and self.end_date:
            return PERIOD_TYPE_DURATION
        if self.instant:
            return PERIOD_TYPE_INSTANT
        return PERIOD_TYPE_FOREVER

    def to_dict(self) -> dict[str, Optional[str]]:
        """Convert to dictionary."""
        return {
            'period_type': self.period_type,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'instant': self.instant,
        }


# ==============================================================================
# DIMENSIONS
# ==============================================================================

@dataclass(frozen=True)
class ExplicitMember:
    """Explicit dimension qualifier: dimension QName -> member QName."""
    dimension: QName
    member: QName

    def to_dict(self) -> dict[str, Any]:
        return {
            'dimension': self.dimension.to_dict(),
            'member': self.member.to_dict(),
        }


@dataclass(frozen=True)
class TypedMember:
    """Typed dimension qualifier: dimension QName -> verbatim inner markup."""
    dimension: QName
    value_xml: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'dimension': self.dimension.to_dict(),
            'value_xml': self.value_xml,
        }


DimensionMember = Union[ExplicitMember, TypedMember]


@dataclass(frozen=True)
class DimensionScope:
    """
    Dimension qualifiers found in one container (segment or scenario).

    Members keep document order within each list.
    """
    explicit: tuple[ExplicitMember, ...] = ()
    typed: tuple[TypedMember, ...] = ()

    def is_empty(self) -> bool:
        """True if the container held no dimension members."""
        return not self.explicit and not self.typed

    def members(self) -> list[DimensionMember]:
        """Explicit members followed by typed members."""
        return [*self.explicit, *self.typed]

    def to_dict(self) -> dict[str, list]:
        """Convert to dictionary."""
        return {
            'explicit': [m.to_dict() for m in self.explicit],
            'typed': [m.to_dict() for m in self.typed],
        }


# ==============================================================================
# CONTEXT
# ==============================================================================

@dataclass(frozen=True)
class Context:
    """
    XBRL context.

    Attributes:
        id: Document-scoped context id
        entity_identifier: Entity identifier text
        entity_scheme: Identifier scheme URI
        period: Period
        segment: Dimension members under xbrli:entity/xbrli:segment
        scenario: Dimension members under xbrli:scenario
    """
    id: str
    entity_identifier: Optional[str] = None
    entity_scheme: Optional[str] = None
    period: Period = field(default_factory=Period)
    segment: DimensionScope = field(default_factory=DimensionScope)
    scenario: DimensionScope = field(default_factory=DimensionScope)

    @property
    def period_type(self) -> str:
        return self.period.period_type

    def has_dimensions(self) -> bool:
        """Check if context carries any dimension members."""
        return not (self.segment.is_empty() and self.scenario.is_empty())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'entity_identifier': self.entity_identifier,
            'entity_scheme': self.entity_scheme,
            'period': self.period.to_dict(),
            'segment': self.segment.to_dict(),
            'scenario': self.scenario.to_dict(),
        }


__all__ = [
    'Period',
    'ExplicitMember',
    'TypedMember',
    'DimensionMember',
    'DimensionScope',
    'Context',
]
