"""Ranking-quality metrics for information retrieval evaluation."""

from rankeval.data.models import QueryPair, RelevanceSet
from rankeval.evaluation.diagnostics import (
    CollectingDiagnosticSink,
    DiagnosticSink,
    LoggingDiagnosticSink,
)
from rankeval.evaluation.metrics import RankingMetrics

__version__ = "0.1.0"

__all__ = [
    "CollectingDiagnosticSink",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "QueryPair",
    "RankingMetrics",
    "RelevanceSet",
    "__version__",
]
