"""
GS1 Scan Decoder

Decodes raw scanner output (EAN-13, EAN-14, GS1 DataMatrix, QR) into typed
records, validating EAN check digits and splitting GS1 Application
Identifier element strings into named fields.
"""

from .ai_table import load_ai_table, default_ai_table, AIEntry, AITable
from .core.parser import parse, assemble_fields, ParseOptions, ParseResult
from .core.symbology import detect_type, SymbologyKind
from .core.tokenizer import tokenize, ParsedField
from .exceptions import (
    ScanError,
    InvalidInputError,
    TokenizationLimitExceeded,
    ScanSupersededError,
)
from .formatters.json_formatter import result_to_dict, result_to_json, parse_to_json
from .keys import check_invisible_chars, KeyEvent
from .session import ScanSession
from .validators.validators import (
    calculate_check_digit_mod10,
    is_valid_ean13,
    is_valid_ean14,
)

__version__ = "1.0.0"
__all__ = [
    "load_ai_table",
    "default_ai_table",
    "AIEntry",
    "AITable",
    "parse",
    "assemble_fields",
    "ParseOptions",
    "ParseResult",
    "detect_type",
    "SymbologyKind",
    "tokenize",
    "ParsedField",
    "ScanError",
    "InvalidInputError",
    "TokenizationLimitExceeded",
    "ScanSupersededError",
    "result_to_dict",
    "result_to_json",
    "parse_to_json",
    "check_invisible_chars",
    "KeyEvent",
    "ScanSession",
    "calculate_check_digit_mod10",
    "is_valid_ean13",
    "is_valid_ean14",
]
