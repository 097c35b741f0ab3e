"""
Debounced scan session.

Keyboard-wedge scanners deliver a read as a burst of keystrokes. The host
feeds the accumulated buffer to ``ScanSession.handle_input`` after every
keystroke; only the latest buffer is parsed once the input has been quiet
for ``delay`` seconds.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Optional

from .core.parser import ParseOptions, ParseResult, parse
from .core.symbology import SymbologyKind
from .exceptions import InvalidInputError, ScanSupersededError

logger = logging.getLogger(__name__)


DEFAULT_DEBOUNCE_SECONDS = 0.3


class ScanSession:
    """
    Per-scanner session state.

    Each call to ``handle_input`` cancels the pending parse (timer and
    Future) and schedules a new one. Results are published to
    ``last_result`` only by the most recent input, checked by sequence
    number after the parse completes.
    """

    def __init__(
        self,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        options: Optional[ParseOptions] = None,
    ):
        self.delay = delay
        self.options = options or ParseOptions()
        self.buffer = ""
        self.last_result: Optional[ParseResult] = None
        self.last_symbology: Optional[SymbologyKind] = None
        self.is_qr = False

        self._lock = threading.Lock()
        self._sequence = 0
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Future] = None

    @property
    def is_result_fields(self) -> bool:
        """True when the last published result is a DataMatrix field list."""
        return self.last_result is not None and self.last_result.is_datamatrix

    def handle_input(self, raw: str) -> Future:
        """
        Schedule a parse of ``raw`` after the debounce delay.

        Returns:
            Future resolving to the ParseResult. It is cancelled if a newer
            input arrives first.

        Raises:
            InvalidInputError: raw is empty or whitespace-only
        """
        if not raw or not raw.strip():
            raise InvalidInputError("Empty or whitespace-only scan input")

        future: Future = Future()
        with self._lock:
            self._cancel_pending()
            self._sequence += 1
            sequence = self._sequence
            self.buffer = raw

            timer = threading.Timer(self.delay, self._run, args=(sequence, raw, future))
            timer.daemon = True
            self._timer = timer
            self._pending = future
            timer.start()

        logger.debug("Scheduled scan #%d in %.3fs", sequence, self.delay)
        return future

    def cancel(self) -> None:
        """Drop the pending parse, if any."""
        with self._lock:
            self._sequence += 1
            self._cancel_pending()

    def _cancel_pending(self) -> None:
        # Caller holds self._lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._pending is not None:
            if self._pending.cancel():
                logger.debug("Cancelled superseded scan")
            self._pending = None

    def _run(self, sequence: int, raw: str, future: Future) -> None:
        with self._lock:
            if sequence != self._sequence:
                return
            if not future.set_running_or_notify_cancel():
                return
            self._timer = None
            self._pending = None

        try:
            result = parse(raw, self.options)
        except Exception as exc:
            logger.debug("Scan #%d failed: %s", sequence, exc)
            future.set_exception(exc)
            return

        with self._lock:
            if sequence != self._sequence:
                logger.debug("Scan #%d superseded while parsing, discarding", sequence)
                superseded = True
            else:
                superseded = False
                self.last_result = result
                self.last_symbology = result.symbology
                self.is_qr = result.is_qr

        if superseded:
            future.set_exception(ScanSupersededError(f"Scan #{sequence} was superseded"))
        else:
            future.set_result(result)
