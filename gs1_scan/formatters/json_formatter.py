"""
JSON Formatter for decoded scans

Provides flat, display-ready output:
- DataMatrix fields keyed by their display label
- Dates (AI 11, 17) formatted as dd/mm/yyyy
- Optional expiry status for AI 17
- EAN / QR / unrecognised scans as {"Type", "Code"}
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Dict, Optional

from dateutil.relativedelta import relativedelta

from ..core.parser import ParseOptions, ParseResult, parse
from ..validators.validators import validate_date


DATE_AIS = ("11", "17")
EXPIRY_AI = "17"

EXPIRY_STATUS_KEY = "Expiry Status"

EXPIRED = "Expired"
NEAR_EXPIRY = "Near Expiry"
VALID = "Valid"
UNKNOWN_STATUS = "Unknown"


def format_date_ddmmyyyy(value: str, century_pivot: int = 51) -> str:
    """
    Format a YYMMDD value as dd/mm/yyyy.

    Day 00 (no specific day) is shown as XX/mm/yyyy. Values that are not
    valid dates are returned unchanged.
    """
    result = validate_date(value, "YYMMD0", century_pivot=century_pivot)
    if not result.valid:
        return value
    meta = result.meta
    if meta.get('day_unspecified'):
        return f"XX/{meta['month']:02d}/{meta['year']:04d}"
    return meta['date_ddmmyyyy']


def expiry_status(
    value: str,
    near_months: int,
    today: Optional[date] = None,
    century_pivot: int = 51,
) -> str:
    """
    Classify a YYMMDD expiry date.

    Returns: Valid, Near Expiry, Expired, Unknown
    """
    result = validate_date(value, "YYMMD0", century_pivot=century_pivot)
    if not result.valid:
        return UNKNOWN_STATUS

    expiry = date(result.meta['year'], result.meta['month'], result.meta['day'])
    today = today or date.today()
    if expiry < today:
        return EXPIRED
    if expiry <= today + relativedelta(months=near_months):
        return NEAR_EXPIRY
    return VALID


def result_to_dict(
    result: ParseResult,
    near_expiry_months: Optional[int] = None,
    today: Optional[date] = None,
    century_pivot: int = 51,
) -> Dict[str, Any]:
    """
    Build a flat label -> value dict for a parse result.

    Args:
        result: Result from parse()
        near_expiry_months: When set, add an expiry status for AI 17
        today: Reference date for the expiry status (defaults to today)
        century_pivot: Year pivot for date formatting

    Returns:
        Dictionary with display labels as keys
    """
    if not result.is_datamatrix:
        return {
            "Type": result.symbology.value if result.symbology else "Unknown",
            "Code": result.value,
        }

    output: Dict[str, Any] = {}
    for parsed in result.fields:
        if parsed.is_known:
            key = parsed.description
        else:
            key = f"AI({parsed.code})"

        value = parsed.value
        if parsed.code in DATE_AIS:
            value = format_date_ddmmyyyy(value, century_pivot)

        if key in output:
            # Repeated AI, keep every occurrence
            existing = output[key]
            output[key] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            output[key] = value

    expiry = result.get(EXPIRY_AI)
    if near_expiry_months is not None and expiry is not None:
        output[EXPIRY_STATUS_KEY] = expiry_status(
            expiry.value, near_expiry_months, today=today, century_pivot=century_pivot
        )

    return output


def result_to_json(
    result: ParseResult,
    near_expiry_months: Optional[int] = None,
    today: Optional[date] = None,
    century_pivot: int = 51,
) -> str:
    """Render result_to_dict() as indented JSON."""
    output = result_to_dict(
        result,
        near_expiry_months=near_expiry_months,
        today=today,
        century_pivot=century_pivot,
    )
    return json.dumps(output, ensure_ascii=False, indent=2)


def parse_to_json(
    raw: str,
    options: Optional[ParseOptions] = None,
    near_expiry_months: Optional[int] = None,
) -> str:
    """
    Parse a raw scan and return clean JSON output.

    Example:
        >>> print(parse_to_json("]d2011234567890123417250101" "10ABC123+"))
        {
          "GTIN": "12345678901234",
          "EXPIRY": "01/01/2025",
          "BATCH/LOT": "ABC123"
        }
    """
    options = options or ParseOptions()
    return result_to_json(
        parse(raw, options),
        near_expiry_months=near_expiry_months,
        century_pivot=options.century_pivot,
    )
