"""
GS1 Application Identifier tokenizer

Splits a concatenated element string (reader prefix already removed) into
ordered {code, value} fields.

Rules:
- AIs are matched against the AI table in declaration order, first match wins
- Fixed-length AIs consume exactly their declared span (AI code included),
  clamped to the remaining input; a separator directly after the span is
  consumed with the field
- Variable-length AIs run up to and including the next separator, or to the
  end of the input
- Unrecognised AIs are taken to be 2 characters long and read as
  variable-length fields
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..ai_table import AITable, UNKNOWN, default_ai_table
from ..exceptions import InvalidInputError, TokenizationLimitExceeded

logger = logging.getLogger(__name__)


SEPARATOR = "+"
MAX_ITERATIONS = 1000
UNKNOWN_AI_LENGTH = 2


@dataclass(frozen=True)
class ParsedField:
    """
    One AI field decoded from the element string.

    Attributes:
        code: AI prefix that was consumed
        value: Field data with any trailing separator removed
        name: Human-readable name, "Unknown" if the AI is not in the table
        description: Short display label, "Unknown" if the AI is not in the table
    """
    code: str
    value: str
    name: str = UNKNOWN
    description: str = UNKNOWN

    @property
    def is_known(self) -> bool:
        return self.name != UNKNOWN

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'value': self.value,
            'name': self.name,
            'description': self.description,
        }


def strip_separator(value: str, separator: str = SEPARATOR) -> str:
    """Remove a single trailing separator."""
    if value.endswith(separator):
        return value[:-len(separator)]
    return value


def _variable_end(payload: str, value_start: int, separator: str) -> int:
    """End index (exclusive) of a separator-terminated field."""
    sep_index = payload.find(separator, value_start)
    if sep_index == -1:
        return len(payload)
    return sep_index + len(separator)


def tokenize(
    payload: str,
    table: Optional[AITable] = None,
    separator: str = SEPARATOR,
    max_iterations: int = MAX_ITERATIONS,
) -> List[ParsedField]:
    """
    Tokenize an element string into AI fields.

    Args:
        payload: Element string without the reader prefix
        table: AI table to match against (defaults to the built-in table)
        separator: Variable-length field terminator
        max_iterations: Upper bound on the number of fields read

    Returns:
        Fields in input order; an empty payload gives an empty list

    Raises:
        InvalidInputError: separator is empty
        TokenizationLimitExceeded: input remains after max_iterations fields
    """
    if not separator:
        raise InvalidInputError("Separator must be a non-empty string")

    if table is None:
        table = default_ai_table()
    fields: List[ParsedField] = []
    length = len(payload)
    pos = 0
    iterations = 0

    while pos < length:
        if iterations >= max_iterations:
            logger.error(
                "Tokenizer stopped after %d fields at index %d of %d",
                iterations, pos, length,
            )
            raise TokenizationLimitExceeded(max_iterations, pos)
        iterations += 1

        entry = table.match_prefix(payload, pos)
        code_length = len(entry.code) if entry else UNKNOWN_AI_LENGTH
        value_start = pos + code_length

        if entry is not None and entry.span is not None:
            end = min(pos + entry.span, length)
            if payload.startswith(separator, end):
                end += len(separator)
        else:
            end = _variable_end(payload, value_start, separator)

        code = payload[pos:min(value_start, end)]
        value = strip_separator(payload[value_start:end], separator)

        if entry is None:
            logger.debug("Unknown AI %r at index %d", code, pos)
            fields.append(ParsedField(code=code, value=value))
        else:
            fields.append(ParsedField(
                code=code,
                value=value,
                name=entry.name,
                description=entry.description,
            ))

        pos = end

    return fields
