"""Evaluation runner: computes a grid of metrics and formats comparisons.

A report covers precision, recall, MAP and NDCG at each requested cutoff, plus
untruncated MAP. Several evaluators (for example one per ranking method) can
be reported side by side as a comparison table.
"""

import logging

from rankeval.config import get_settings
from rankeval.evaluation.metrics import RankingMetrics, validate_k

logger = logging.getLogger(__name__)


def evaluate_ranking(
    metrics: RankingMetrics,
    k_values: list[int] | None = None,
) -> dict[str, float]:
    """Compute every metric at every cutoff for one evaluator.

    Args:
        metrics: Evaluator holding the query pairs.
        k_values: Cutoffs for the truncated metrics. Defaults to the
            K_VALUES setting.

    Returns:
        Dict of metric name → value, e.g. {"precision@5": 0.4, ..., "map": 0.3}.

    Raises:
        ValueError: If any cutoff is not positive. Checked before any scoring.
    """
    if k_values is None:
        k_values = get_settings().k_values

    k_values = [validate_k(k) for k in k_values]

    results: dict[str, float] = {}
    for k in k_values:
        results[f"precision@{k}"] = metrics.precision_at(k)
        results[f"recall@{k}"] = metrics.recall_at(k)
        results[f"map@{k}"] = metrics.mean_average_precision_at(k)
        results[f"ndcg@{k}"] = metrics.ndcg_at(k)
    results["map"] = metrics.mean_average_precision

    logger.info(f"Evaluated {len(metrics)} queries at k={k_values}")
    return results


def evaluate_rankings(
    runs: dict[str, RankingMetrics],
    k_values: list[int] | None = None,
) -> dict[str, dict[str, float]]:
    """Evaluate several named evaluators with the same cutoffs.

    Args:
        runs: Dict of method name → evaluator.
        k_values: Cutoffs for the truncated metrics. Defaults to the
            K_VALUES setting.

    Returns:
        Dict of method name → metric dict, in the order of `runs`.
    """
    return {name: evaluate_ranking(metrics, k_values) for name, metrics in runs.items()}


def format_results_table(
    results: dict[str, dict[str, float]],
) -> str:
    """Format multiple evaluation results into a comparison table.

    Args:
        results: Dict of method name → metric dict.
            E.g., {"BM25": {"recall@5": 0.1, ...}, "Dense": {...}}

    Returns:
        Formatted table string ready for printing.
    """
    # Union of metric names, first-seen order
    all_metrics: list[str] = []
    for method_results in results.values():
        for metric in method_results:
            if metric not in all_metrics:
                all_metrics.append(metric)

    col_width = 14
    header = f"{'Method':<25}"
    for metric in all_metrics:
        header += f"{metric:>{col_width}}"

    lines = [
        "=== Ranking Metrics ===",
        "",
        header,
        "-" * len(header),
    ]

    for method, method_results in results.items():
        row = f"{method:<25}"
        for metric in all_metrics:
            if metric in method_results:
                row += f"{method_results[metric]:>{col_width}.4f}"
            else:
                row += f"{'-':>{col_width}}"
        lines.append(row)

    return "\n".join(lines)
