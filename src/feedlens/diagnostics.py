"""Non-fatal diagnostics emitted while detecting and extracting feeds."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import structlog

logger = structlog.get_logger()


class Severity(Enum):
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    code: str
    message: str


class DiagnosticLog:
    """Collects diagnostics for one feed and mirrors them to the logger.

    A single log is shared by a feed and every entry taken from it, so
    appends are serialized with a lock.
    """

    def __init__(self) -> None:
        self._records: list[Diagnostic] = []
        self._lock = threading.Lock()

    def warn(self, code: str, message: str, **context) -> Diagnostic:
        diagnostic = Diagnostic(severity=Severity.WARNING, code=code, message=message)
        with self._lock:
            self._records.append(diagnostic)
        logger.warning("Feed anomaly", code=code, message=message, **context)
        return diagnostic

    def codes(self) -> list[str]:
        return [d.code for d in self]

    def __iter__(self) -> Iterator[Diagnostic]:
        with self._lock:
            return iter(list(self._records))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
