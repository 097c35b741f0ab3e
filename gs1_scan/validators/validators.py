"""
GS1 Validation Functions

Implements the validation used by the scan decoder:
- Mod10 check digit calculation and validation
- EAN-13 / EAN-14 validation of scanner output (reader prefix + digits)
- Date validation for the YYMMDD-style AIs (production and expiry dates)

Based on GS1 General Specifications.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

# Symbology identifier the scanner prepends to EAN/UPC family reads
EAN_PREFIXES = ("]E0",)
READER_PREFIX_LENGTH = 3

EAN13_LENGTH = 13
EAN14_LENGTH = 14


def _is_numeric(value: str) -> bool:
    return bool(value) and all(ch in NUMERIC for ch in value)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm:
    1. From left to right, alternate multipliers 1 and 3 (index 0 has weight 1)
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not _is_numeric(digits):
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(digits):
        multiplier = 1 if i % 2 == 0 else 3
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing check digit of a numeric code.

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status
    """
    result = ValidationResult(valid=True)

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    if not _is_numeric(value):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    data_digits = value[:-1]
    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(data_digits)

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def _is_valid_ean(raw: str, length: int) -> bool:
    if raw[:READER_PREFIX_LENGTH] not in EAN_PREFIXES:
        return False
    code = raw[READER_PREFIX_LENGTH:]
    if len(code) != length:
        return False
    return validate_check_digit(code).valid


def is_valid_ean13(raw: str) -> bool:
    """True if raw is "]E0" followed by 13 digits with a correct check digit."""
    return _is_valid_ean(raw, EAN13_LENGTH)


def is_valid_ean14(raw: str) -> bool:
    """True if raw is "]E0" followed by 14 digits with a correct check digit."""
    return _is_valid_ean(raw, EAN14_LENGTH)


def validate_date(
    value: str,
    format_type: str = "YYMMDD",
    century_pivot: int = 51
) -> ValidationResult:
    """
    Validate GS1 six-digit date formats.

    Formats:
    - YYMMDD: Standard date (e.g., 290131 = Jan 31, 2029)
    - YYMMD0: Date with day=00 allowed (e.g., 290100 = Jan 2029)

    Century pivot (default 51):
    - YY >= 51: 19YY (1951-1999)
    - YY < 51: 20YY (2000-2050)

    Args:
        value: Date string
        format_type: One of YYMMDD, YYMMD0
        century_pivot: Year pivot for century determination

    Returns:
        ValidationResult with parsed date in meta
    """
    result = ValidationResult(valid=True)

    if format_type not in ("YYMMDD", "YYMMD0"):
        raise ValueError(f"Unsupported date format: {format_type}")

    if not _is_numeric(value):
        result.valid = False
        result.errors.append("Date must be numeric")
        return result

    if len(value) != 6:
        result.valid = False
        result.errors.append(f"{format_type} date must be 6 digits, got {len(value)}")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    year = 1900 + yy if yy >= century_pivot else 2000 + yy

    if mm < 1 or mm > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {mm}")
        return result

    max_day = monthrange(year, mm)[1]

    if dd == 0 and format_type == "YYMMD0":
        # Day 00 means the last day of the month
        result.meta['day_unspecified'] = True
        dd = max_day
    elif dd < 1 or dd > max_day:
        result.valid = False
        result.errors.append(f"Day {dd} invalid for month {mm} in year {year}")
        return result

    result.meta['year'] = year
    result.meta['month'] = mm
    result.meta['day'] = dd
    result.meta['iso_date'] = f"{year:04d}-{mm:02d}-{dd:02d}"
    result.meta['date_ddmmyyyy'] = f"{dd:02d}/{mm:02d}/{year:04d}"

    return result
