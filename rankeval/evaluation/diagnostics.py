"""Diagnostic sinks for per-query warnings raised during scoring.

Scorers never log directly. They report degenerate inputs (an empty ground
truth set) to a DiagnosticSink, so callers decide where those warnings go and
tests can assert on them without capturing process-wide log output.
"""

import logging
import threading
from abc import ABC, abstractmethod


class DiagnosticSink(ABC):
    """Abstract interface for anything that receives scoring diagnostics."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Report a warning about one query."""
        pass


class LoggingDiagnosticSink(DiagnosticSink):
    """Forward diagnostics to a logger at WARNING level.

    This is the default sink used by RankingMetrics.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


class CollectingDiagnosticSink(DiagnosticSink):
    """Keep diagnostics in memory.

    Safe to share across the worker threads of a parallel aggregation.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []
        self._lock = threading.Lock()

    def warn(self, message: str) -> None:
        with self._lock:
            self.messages.append(message)

    def clear(self) -> None:
        with self._lock:
            self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)
