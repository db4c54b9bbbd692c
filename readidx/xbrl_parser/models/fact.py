# Path: readidx/xbrl_parser/models/fact.py
"""
Fact Data Model

XBRL fact representation.

This module defines:
- Fact: a classic instance fact, value kept verbatim
- InlineFact: a (line item, value, unit) row produced by inline extraction
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..foundation.qname import QName
from ..foundation.number_normalizer import strict_decimal, to_canonical_string


# ==============================================================================
# INSTANCE FACT
# ==============================================================================

@dataclass
class Fact:
    """
    XBRL instance fact.

    Core Attributes:
        concept: Concept QName
        context_ref: Reference to context ID
        value: Raw text (None if nil)
        unit_ref: Reference to unit ID (numeric facts only)

    Precision Attributes:
        decimals: Decimals attribute as written (e.g., '0', 'INF')
        precision: Precision attribute as written

    Metadata:
        id: Fact id attribute
        is_nil: True if xsi:nil="true"
        language: xml:lang attribute
        xsi_type: xsi:type attribute
        source_line: Line number in source file
    """
    concept: QName
    context_ref: str
    value: Optional[str] = None
    unit_ref: Optional[str] = None
    decimals: Optional[str] = None
    precision: Optional[str] = None
    id: Optional[str] = None
    is_nil: bool = False
    language: Optional[str] = None
    xsi_type: Optional[str] = None
    source_line: Optional[int] = None

    def __post_init__(self):
        # A nil fact carries no value
        if self.is_nil:
            self.value = None

    @property
    def decimal_value(self) -> Optional[Decimal]:
        """Value as Decimal when it is a plain decimal literal, else None."""
        if self.is_nil:
            return None
        return strict_decimal(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'concept': self.concept.to_dict(),
            'context_ref': self.context_ref,
            'unit_ref': self.unit_ref,
            'value': self.value,
            'decimals': self.decimals,
            'precision': self.precision,
            'id': self.id,
            'is_nil': self.is_nil,
            'language': self.language,
        }


# ==============================================================================
# INLINE FACT
# ==============================================================================

@dataclass(frozen=True)
class InlineFact:
    """
    Normalized fact ready for the financial_lines table.

    Attributes:
        line_item: Concept name as tagged (e.g., 'idx-cor:Revenue')
        value: Normalized Decimal
        unit: unitRef or the default unit code
    """
    line_item: str
    value: Decimal
    unit: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'line_item': self.line_item,
            'value': to_canonical_string(self.value),
            'unit': self.unit,
        }


__all__ = ['Fact', 'InlineFact']
