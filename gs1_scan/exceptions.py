"""
Exceptions raised by the GS1 scan decoder.

Checksum mismatches and unknown symbologies are not errors; they are
reported as ``False`` / ``None`` return values by the validators and the
detector.
"""


class ScanError(Exception):
    """Base class for all decoder errors."""


class InvalidInputError(ScanError, ValueError):
    """Raw scan input is empty or whitespace-only."""


class TokenizationLimitExceeded(ScanError):
    """The tokenizer hit its iteration bound with input still remaining."""

    def __init__(self, max_iterations: int, position: int):
        super().__init__("Maximum iteration limit reached")
        self.max_iterations = max_iterations
        self.position = position


class ScanSupersededError(ScanError):
    """A newer input replaced this scan while it was being parsed."""
