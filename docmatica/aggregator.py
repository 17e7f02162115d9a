"""Single-consumer collection of violations reported by concurrent workers."""

from __future__ import annotations

import logging
import queue
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from .result import LintReport, Violation, format_violation

logger = logging.getLogger(__name__)

_CLOSED = object()


class Aggregator:
    """Drain violations from many producers and decide the run's verdict.

    Producers only call :meth:`submit`. One consumer thread prints each
    violation as it arrives and records it; it is the only writer of the
    report. :meth:`verdict` returns once :meth:`close` has been called and
    the queue has been drained.
    """

    def __init__(self, root: Path, stream: Optional[TextIO] = None) -> None:
        self.root = root
        self.report = LintReport(root=root)
        self._stream = stream
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._thread = threading.Thread(target=self._drain, name="docmatica-aggregator", daemon=True)
        self._closed = False

    def start(self) -> "Aggregator":
        self._thread.start()
        return self

    def submit(self, violation: Violation) -> None:
        self._queue.put(violation)

    def close(self) -> None:
        """Signal that no further violations will be submitted."""

        if not self._closed:
            self._closed = True
            self._queue.put(_CLOSED)

    def verdict(self) -> bool:
        """Block until drained and return ``True`` if any violation arrived."""

        if not self._closed:
            raise RuntimeError("verdict requested before the aggregator was closed")
        self._thread.join()
        return not self.report.passed

    def _drain(self) -> None:
        stream = self._stream or sys.stdout
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                break
            self.report.add_violation(item)
            try:
                print(_printable(format_violation(item, self.root), stream), file=stream, flush=True)
            except (OSError, ValueError):
                logger.exception("Could not report violation for %s", item.path)
        logger.debug("Aggregator drained %d violation(s)", len(self.report.violations))


def _printable(line: str, stream: TextIO) -> str:
    """Escape characters ``stream`` cannot encode, such as undecodable file names."""

    encoding = getattr(stream, "encoding", None)
    if not encoding:
        return line
    return line.encode(encoding, "backslashreplace").decode(encoding)
