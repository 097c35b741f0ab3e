"""
Scan decoder entry point

Turns a raw scanner string into a typed result:
- EAN-13 / EAN-14: check-digit validated, reader prefix stripped
- DataMatrix family: AI element string tokenized into named fields
- QR: reader prefix stripped, payload returned verbatim
- anything else: returned unchanged

Key rules:
- Detection order is EAN-13, EAN-14, DataMatrix, QR (first hit wins)
- Unknown AIs and unknown symbologies degrade to "Unknown" metadata or a
  raw pass-through, they never fail the parse
- Every call builds a fresh result; no state is shared between calls
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..ai_table import AITable, default_ai_table
from ..exceptions import InvalidInputError
from .symbology import SymbologyKind, detect_type, strip_reader_prefix
from .tokenizer import MAX_ITERATIONS, SEPARATOR, ParsedField, tokenize

logger = logging.getLogger(__name__)


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        separator: Terminator for variable-length AI fields
        max_iterations: Upper bound on tokenized fields per payload
        ai_table: Optional custom AI table
        century_pivot: Year pivot for YYMMDD century determination
    """
    separator: str = SEPARATOR
    max_iterations: int = MAX_ITERATIONS
    ai_table: Optional[AITable] = None
    century_pivot: int = 51

    def __post_init__(self):
        if not self.separator:
            raise InvalidInputError("Separator must be a non-empty string")

    @property
    def table(self) -> AITable:
        if self.ai_table is None:
            return default_ai_table()
        return self.ai_table


@dataclass
class ParseResult:
    """
    Result of decoding one scan.

    Attributes:
        raw: Original input string
        symbology: Detected symbology, None if not recognised
        text: Plain payload for EAN, QR and unrecognised input
        fields: Decoded AI fields for DataMatrix input
    """
    raw: str
    symbology: Optional[SymbologyKind] = None
    text: Optional[str] = None
    fields: List[ParsedField] = field(default_factory=list)

    @property
    def is_datamatrix(self) -> bool:
        return self.symbology is SymbologyKind.DATAMATRIX

    @property
    def is_qr(self) -> bool:
        return self.symbology is SymbologyKind.QR

    @property
    def value(self) -> Union[str, List[ParsedField]]:
        """The decoded payload: field list for DataMatrix, string otherwise."""
        if self.is_datamatrix:
            return self.fields
        return self.text if self.text is not None else self.raw

    def get(self, code: str) -> Optional[ParsedField]:
        """First field with the given AI code."""
        for parsed in self.fields:
            if parsed.code == code:
                return parsed
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'symbology': self.symbology.value if self.symbology else None,
            'text': self.text,
            'fields': [f.to_dict() for f in self.fields],
        }


def assemble_fields(
    fields: Sequence[ParsedField],
    table: Optional[AITable] = None,
) -> List[ParsedField]:
    """
    Re-resolve tokenized fields against the AI table by exact code.

    Metadata attached during tokenization is discarded; each code is looked
    up again so the output always reflects the table.
    """
    if table is None:
        table = default_ai_table()
    assembled = []
    for parsed in fields:
        name, description = table.resolve(parsed.code)
        assembled.append(ParsedField(
            code=parsed.code,
            value=parsed.value,
            name=name,
            description=description,
        ))
    return assembled


def parse(raw: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """
    Decode a raw scan string.

    Args:
        raw: Input as delivered by the scanner, reader prefix included
        options: Parsing options

    Returns:
        ParseResult

    Raises:
        InvalidInputError: raw is empty or whitespace-only
        TokenizationLimitExceeded: the DataMatrix payload has too many fields
    """
    if not raw or not raw.strip():
        raise InvalidInputError("Empty or whitespace-only scan input")

    options = options or ParseOptions()
    kind = detect_type(raw)

    if kind in (SymbologyKind.EAN13, SymbologyKind.EAN14, SymbologyKind.QR):
        return ParseResult(raw=raw, symbology=kind, text=strip_reader_prefix(raw))

    if kind is SymbologyKind.DATAMATRIX:
        table = options.table
        tokens = tokenize(
            strip_reader_prefix(raw),
            table=table,
            separator=options.separator,
            max_iterations=options.max_iterations,
        )
        fields = assemble_fields(tokens, table)
        logger.debug("Decoded %d AI fields from %r", len(fields), raw)
        return ParseResult(raw=raw, symbology=kind, fields=fields)

    logger.debug("Unrecognised symbology, passing input through: %r", raw)
    return ParseResult(raw=raw, text=raw)
