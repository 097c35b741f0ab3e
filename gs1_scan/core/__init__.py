"""
Core decoding modules for the GS1 scan decoder.
"""

from .parser import parse, assemble_fields, ParseOptions, ParseResult
from .symbology import detect_type, SymbologyKind
from .tokenizer import tokenize, ParsedField

__all__ = [
    "parse",
    "assemble_fields",
    "ParseOptions",
    "ParseResult",
    "detect_type",
    "SymbologyKind",
    "tokenize",
    "ParsedField",
]
