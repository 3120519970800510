"""Per-query scoring, aggregation and reporting of ranking metrics."""

from rankeval.evaluation.aggregation import mean
from rankeval.evaluation.diagnostics import (
    CollectingDiagnosticSink,
    DiagnosticSink,
    LoggingDiagnosticSink,
)
from rankeval.evaluation.metrics import RankingMetrics
from rankeval.evaluation.runner import evaluate_ranking, evaluate_rankings, format_results_table
from rankeval.evaluation.scoring import average_precision_at_k, ndcg_at_k, truncated_hit_ratio

__all__ = [
    "CollectingDiagnosticSink",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "RankingMetrics",
    "average_precision_at_k",
    "evaluate_ranking",
    "evaluate_rankings",
    "format_results_table",
    "mean",
    "ndcg_at_k",
    "truncated_hit_ratio",
]
