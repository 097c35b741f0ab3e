"""
Symbology detection from scanner reader prefixes.

Scanners configured to transmit symbology identifiers (ISO/IEC 15424)
prepend a short "]Xm" marker to every read. The marker is matched here as
a literal string prefix.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from ..validators.validators import (
    EAN_PREFIXES,
    READER_PREFIX_LENGTH,
    is_valid_ean13,
    is_valid_ean14,
)

logger = logging.getLogger(__name__)


class SymbologyKind(str, Enum):
    """Symbologies the decoder can classify."""
    EAN13 = "EAN-13"
    EAN14 = "EAN-14"
    DATAMATRIX = "DataMatrix"
    QR = "QR"


DATAMATRIX_PREFIXES = (
    "]C1",   # GS1-128
    "]e0",   # GS1 DataBar
    "]d1",   # DataMatrix
    "]d2",   # GS1 DataMatrix
    "]q3",
)

# QR readers vary the modifier character (]Q1..]Q4), only "]Q" is checked
QR_PREFIX = "]Q"

__all__ = [
    "SymbologyKind",
    "DATAMATRIX_PREFIXES",
    "EAN_PREFIXES",
    "QR_PREFIX",
    "READER_PREFIX_LENGTH",
    "detect_type",
    "strip_reader_prefix",
]


def detect_type(raw: str) -> Optional[SymbologyKind]:
    """
    Classify a raw scan string.

    Checks run in a fixed order and the first hit wins: EAN-13, EAN-14,
    DataMatrix family prefixes, QR prefix.

    Returns:
        The detected SymbologyKind, or None if the input is not recognised
    """
    if is_valid_ean13(raw):
        kind = SymbologyKind.EAN13
    elif is_valid_ean14(raw):
        kind = SymbologyKind.EAN14
    elif raw.startswith(DATAMATRIX_PREFIXES):
        kind = SymbologyKind.DATAMATRIX
    elif raw.startswith(QR_PREFIX):
        kind = SymbologyKind.QR
    else:
        kind = None

    logger.debug("Detected symbology %s for %r", kind.value if kind else None, raw)
    return kind


def strip_reader_prefix(raw: str) -> str:
    """Drop the three-character symbology identifier."""
    return raw[READER_PREFIX_LENGTH:]
