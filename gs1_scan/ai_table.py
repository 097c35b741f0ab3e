"""
AI Table for the GS1 scan decoder

Static registry of the GS1 Application Identifiers this decoder knows about,
with their display metadata and length policy.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


UNKNOWN = "Unknown"


@dataclass(frozen=True)
class AIEntry:
    """
    Represents a single known Application Identifier.

    Attributes:
        code: The Application Identifier prefix (e.g. "01", "712")
        name: Human-readable name
        description: Short display label
        span: Fixed total field length including the AI code itself,
            None if the field is variable-length (separator terminated)
    """
    code: str
    name: str
    description: str
    span: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.span is not None

    @property
    def value_length(self) -> Optional[int]:
        """Length of the data portion for fixed-length AIs."""
        if self.span is None:
            return None
        return self.span - len(self.code)


class AITable:
    """
    Ordered, read-only collection of AI entries.

    Prefix matching walks the entries in declaration order and the first
    entry whose code prefixes the input wins.
    """

    def __init__(self, entries: Iterable[AIEntry]):
        ordered: List[AIEntry] = []
        by_code: Dict[str, AIEntry] = {}
        for entry in entries:
            if not entry.code:
                raise ValueError("AI code must not be empty")
            if entry.code in by_code:
                raise ValueError(f"Duplicate AI code in table: {entry.code}")
            if entry.span is not None and entry.span <= len(entry.code):
                raise ValueError(
                    f"AI {entry.code}: span {entry.span} must exceed code length"
                )
            ordered.append(entry)
            by_code[entry.code] = entry
        self._entries: Tuple[AIEntry, ...] = tuple(ordered)
        self._by_code = by_code

    def match_prefix(self, text: str, start: int = 0) -> Optional[AIEntry]:
        """Return the first entry whose code is a prefix of text[start:]."""
        for entry in self._entries:
            if text.startswith(entry.code, start):
                return entry
        return None

    def get(self, code: str) -> Optional[AIEntry]:
        """Get AI entry by exact AI code."""
        return self._by_code.get(code)

    def resolve(self, code: str) -> Tuple[str, str]:
        """Return (name, description) for a code, "Unknown" for both if absent."""
        entry = self._by_code.get(code)
        if entry is None:
            return UNKNOWN, UNKNOWN
        return entry.name, entry.description

    def __contains__(self, code: str) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[AIEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# AI table in declaration order. Span counts the AI code plus its data;
# ".." marks a variable-length field terminated by the separator.
RAW_AI_TABLE = """
# AI    Span   Name                                  Description
01      16     Global Trade Item Number              # GTIN
10      ..     Batch or lot number                   # BATCH/LOT
11      8      Production date (YYMMDD)              # PROD DATE
17      8      Expiration date (YYMMDD)              # EXPIRY
21      ..     Serial number                         # SERIAL
712     ..     National product code                 # NPC
"""


def _parse_table_line(line: str) -> AIEntry:
    """
    Parse one line of the table text.

    Examples:
        "01  16  Global Trade Item Number  # GTIN" -> AIEntry('01', ..., span=16)
        "10  ..  Batch or lot number  # BATCH/LOT" -> AIEntry('10', ..., span=None)
    """
    body, _, description = line.partition('#')
    parts = body.split(None, 2)
    if len(parts) < 3:
        raise ValueError(f"Malformed AI table line: {line!r}")

    code, span_spec, name = parts
    span = None if span_spec == '..' else int(span_spec)

    return AIEntry(
        code=code,
        name=name.strip(),
        description=description.strip() or name.strip(),
        span=span,
    )


def load_ai_table(text: str = RAW_AI_TABLE) -> AITable:
    """Build an AITable from table text, skipping blanks and comment lines."""
    entries = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#'):
            continue
        entries.append(_parse_table_line(line))
    return AITable(entries)


_DEFAULT_TABLE = load_ai_table()


def default_ai_table() -> AITable:
    """Return the process-wide AI table."""
    return _DEFAULT_TABLE
