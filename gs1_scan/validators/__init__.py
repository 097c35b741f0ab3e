"""
Validation modules for the GS1 scan decoder.
"""

from .validators import (
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_date,
    is_valid_ean13,
    is_valid_ean14,
    ValidationResult,
    EAN_PREFIXES,
    NUMERIC,
)

__all__ = [
    "calculate_check_digit_mod10",
    "validate_check_digit",
    "validate_date",
    "is_valid_ean13",
    "is_valid_ean14",
    "ValidationResult",
    "EAN_PREFIXES",
    "NUMERIC",
]
