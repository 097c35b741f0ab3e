"""
Output formatters for the GS1 scan decoder.
"""

from .json_formatter import (
    result_to_dict,
    result_to_json,
    parse_to_json,
    format_date_ddmmyyyy,
    expiry_status,
)

__all__ = [
    "result_to_dict",
    "result_to_json",
    "parse_to_json",
    "format_date_ddmmyyyy",
    "expiry_status",
]
