# Path: readidx/xbrl_parser/foundation/number_normalizer.py
"""
Numeric Value Normalizer

Turns displayed fact text into a signed Decimal.

Handles common display formats:
- Dot decimal with comma grouping: "1,234.56"
- Comma decimal with dot grouping: "1.234,56"
- Parenthesized negatives: "(1.234,56)"
- Spaces and non-breaking spaces as grouping: "1 234 567"
- Currency and other decoration: "Rp 1.000.000"

When both separators appear, the one occurring last is the decimal
point. A lone comma is a decimal point unless it sits in a single
thousands group ("1,000"). Repeated dots are integer grouping.

Example:
    normalize_number("(1.234,56)")        # Decimal('-1234.56')
    normalize_number("1234.56", 0)         # Decimal('1235')
    normalize_number("abc")                # None
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional


# ==============================================================================
# PATTERNS
# ==============================================================================

_WHITESPACE = re.compile(r'[\s\u00a0\u202f]+')
_NON_NUMERIC = re.compile(r'[^0-9.\-]')
_SIGNED_DECIMAL = re.compile(r'^-?(?:\d+\.?\d*|\.\d+)$')
_STRICT_DECIMAL = re.compile(r'^-?\d+(?:\.\d+)?$')

# One thousands group: 1-3 leading digits (no leading zero), comma, 3 digits
_SINGLE_GROUP_COMMA = re.compile(r'(?<![\d.])[1-9]\d{0,2},\d{3}(?![\d.])')

# decimals attribute value meaning "exact"
_DECIMALS_INFINITE = 'INF'


def normalize_number(raw: Optional[str], decimals_hint: Optional[int] = None) -> Optional[Decimal]:
    """
    Normalize displayed numeric text.

    Args:
        raw: Text content of the fact element
        decimals_hint: Parsed ``decimals`` attribute; rounding is applied
            only when it is zero or positive

    Returns:
        Decimal value, or None when the text is not a number
    """
    if raw is None:
        return None

    text = raw.strip()
    if not text:
        return None

    is_negative = '(' in text and ')' in text
    if is_negative:
        text = text.replace('(', '').replace(')', '')

    text = _WHITESPACE.sub('', text)
    text = _resolve_separators(text)

    text = _NON_NUMERIC.sub('', text)
    sign = '-' if text.startswith('-') else ''
    text = sign + text.replace('-', '')

    if text.count('.') > 1:
        text = text.replace('.', '')

    if not _SIGNED_DECIMAL.match(text):
        return None

    try:
        value = Decimal(text)
    except InvalidOperation:
        return None

    if is_negative and not sign:
        value = -value

    # Only a hint that drops fractional digits rounds
    if decimals_hint is not None and 0 <= decimals_hint < -value.as_tuple().exponent:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + decimals_hint + 1)
            value = value.quantize(Decimal(1).scaleb(-decimals_hint), rounding=ROUND_HALF_UP)

    return value


def _resolve_separators(text: str) -> str:
    """Rewrite comma/dot usage so that '.' is the only decimal point."""
    has_comma = ',' in text
    has_dot = '.' in text

    if has_comma and has_dot:
        if text.rfind(',') > text.rfind('.'):
            return text.replace('.', '').replace(',', '.')
        return text.replace(',', '')

    if has_comma:
        if text.count(',') == 1 and _SINGLE_GROUP_COMMA.search(text):
            return text.replace(',', '')
        # Several commas become several dots and collapse to an integer
        return text.replace(',', '.')

    return text


def parse_decimals_hint(value: Optional[str]) -> Optional[int]:
    """
    Parse a ``decimals`` attribute.

    Returns None for a missing, non-integer, or ``INF`` attribute.
    """
    if value is None:
        return None
    value = value.strip()
    if not value or value.upper() == _DECIMALS_INFINITE:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def strict_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """
    Convert an instance fact value that is already a plain decimal literal.

    Classic instance documents carry canonical lexical values, so no
    separator heuristics apply here.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _STRICT_DECIMAL.match(text):
        return None
    return Decimal(text)


def to_canonical_string(value: Decimal) -> str:
    """Plain positional notation for a normalized value (never exponent form)."""
    return format(value, 'f')


__all__ = [
    'normalize_number',
    'parse_decimals_hint',
    'strict_decimal',
    'to_canonical_string',
]
