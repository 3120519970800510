"""Ranking metrics aggregated over a collection of queries.

RankingMetrics is the evaluator callers work with. It holds an immutable
collection of QueryPairs and exposes five metrics:

  - precision_at(k)
  - recall_at(k)
  - mean_average_precision
  - mean_average_precision_at(k)
  - ndcg_at(k)

Each metric scores every query independently with a function from
rankeval.evaluation.scoring and returns the unweighted mean over all queries.
"""

import logging
import operator
import time
from collections.abc import Hashable, Iterable
from functools import cached_property

from rankeval.config import get_settings
from rankeval.data.adapters import to_query_pairs
from rankeval.data.models import QueryPair
from rankeval.evaluation.aggregation import ScoreFn, mean
from rankeval.evaluation.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from rankeval.evaluation.scoring import (
    average_precision_at_k,
    ndcg_at_k,
    truncated_hit_ratio,
)

logger = logging.getLogger(__name__)

EMPTY_COLLECTION_MESSAGE = "No query pairs to evaluate, metric is NaN"


def validate_k(k: int) -> int:
    """Reject anything that is not a positive ranking position.

    Any integer type is accepted (for example numpy.int64), but not bool.

    Returns:
        k as a built-in int.

    Raises:
        ValueError: If k is not an integer or is not positive.
    """
    if isinstance(k, bool):
        raise ValueError(f"ranking position k should be a positive integer, got {k!r}")
    try:
        position = operator.index(k)
    except TypeError as e:
        raise ValueError(f"ranking position k should be a positive integer, got {k!r}") from e
    if position <= 0:
        raise ValueError(f"ranking position k should be a positive integer, got {k!r}")
    return position


class RankingMetrics:
    """Evaluator for ranking algorithms.

    Built from (predicted ranking, ground truth) pairs, one per query. The
    pairs are captured once and never modified, so metrics can be recomputed
    at any time with the same result.

    A query whose ground truth set is empty scores 0.0 in every metric and
    reports one warning to the diagnostic sink each time it is scored.

    An evaluator with no query pairs returns NaN for every metric and reports
    one warning per metric call.
    """

    def __init__(
        self,
        query_pairs: Iterable[QueryPair],
        diagnostics: DiagnosticSink | None = None,
        num_workers: int | None = None,
        show_progress: bool | None = None,
    ) -> None:
        """Initialize the evaluator.

        Args:
            query_pairs: One QueryPair per evaluated query.
            diagnostics: Receives empty-ground-truth warnings. Defaults to a
                sink that logs through this module's logger.
            num_workers: Thread pool size for scoring, 0 for sequential.
                Defaults to the NUM_WORKERS setting.
            show_progress: Display a progress bar while scoring. Defaults to
                the SHOW_PROGRESS setting.
        """
        if num_workers is None or show_progress is None:
            settings = get_settings()
            num_workers = settings.num_workers if num_workers is None else num_workers
            show_progress = settings.show_progress if show_progress is None else show_progress

        if num_workers < 0:
            raise ValueError(f"num_workers must be >= 0, got {num_workers}")

        if diagnostics is None:
            diagnostics = LoggingDiagnosticSink(logger)

        self.query_pairs: tuple[QueryPair, ...] = tuple(query_pairs)
        self.diagnostics: DiagnosticSink = diagnostics
        self.num_workers = num_workers
        self.show_progress = show_progress

    @classmethod
    def of(
        cls,
        predictions_and_labels: Iterable[tuple[Iterable[Hashable], Iterable[Hashable]]],
        **kwargs,
    ) -> "RankingMetrics":
        """Create an evaluator from (predictions, labels) pairs of any iterable type.

        Args:
            predictions_and_labels: Iterable of (predictions, labels) records,
                each side being any iterable of hashable items.
            **kwargs: Forwarded to the RankingMetrics constructor.

        Returns:
            RankingMetrics over the converted query pairs.
        """
        return cls(to_query_pairs(predictions_and_labels), **kwargs)

    def __len__(self) -> int:
        return len(self.query_pairs)

    def precision_at(self, k: int) -> float:
        """Compute the average precision of all queries, truncated at position k.

        If a query returns n < k results, its precision is still
        #(relevant items retrieved) / k. The same holds when the ground truth
        set is smaller than k.

        Args:
            k: Ranking position to truncate at, must be positive.

        Returns:
            Mean precision@k across all queries.

        Raises:
            ValueError: If k is not positive.
        """
        k = validate_k(k)
        return self._mean(
            lambda pair: truncated_hit_ratio(
                pair.prediction, pair.relevance, k, k, self.diagnostics
            ),
            f"precision@{k}",
        )

    def recall_at(self, k: int) -> float:
        """Compute the average recall of all queries, truncated at position k.

        Recall for one query is #(relevant items retrieved in the top k) /
        #(ground truth set).

        Args:
            k: Ranking position to truncate at, must be positive.

        Returns:
            Mean recall@k across all queries.

        Raises:
            ValueError: If k is not positive.
        """
        k = validate_k(k)
        return self._mean(
            lambda pair: truncated_hit_ratio(
                pair.prediction, pair.relevance, k, len(pair.relevance), self.diagnostics
            ),
            f"recall@{k}",
        )

    @cached_property
    def mean_average_precision(self) -> float:
        """Mean average precision (MAP) of all queries over their full rankings.

        Computed once per evaluator and cached.
        """
        return self._mean(
            lambda pair: average_precision_at_k(
                pair.prediction, pair.relevance, len(pair.prediction), self.diagnostics
            ),
            "map",
        )

    def mean_average_precision_at(self, k: int) -> float:
        """Compute mean average precision of all queries, truncated at position k.

        If a query returns n < k results, its value is AP at n.

        Args:
            k: Ranking position to truncate at, must be positive.

        Returns:
            Mean AP@k across all queries.

        Raises:
            ValueError: If k is not positive.
        """
        k = validate_k(k)
        return self._mean(
            lambda pair: average_precision_at_k(
                pair.prediction, pair.relevance, k, self.diagnostics
            ),
            f"map@{k}",
        )

    def ndcg_at(self, k: int) -> float:
        """Compute the average NDCG of all queries, truncated at position k.

        Args:
            k: Ranking position to truncate at, must be positive.

        Returns:
            Mean NDCG@k across all queries.

        Raises:
            ValueError: If k is not positive.
        """
        k = validate_k(k)
        return self._mean(
            lambda pair: ndcg_at_k(pair.prediction, pair.relevance, k, self.diagnostics),
            f"ndcg@{k}",
        )

    def _mean(self, score_fn: ScoreFn, metric: str) -> float:
        if not self.query_pairs:
            self.diagnostics.warn(EMPTY_COLLECTION_MESSAGE)
        start = time.time()
        value = mean(
            self.query_pairs,
            score_fn,
            num_workers=self.num_workers,
            show_progress=self.show_progress,
            desc=metric,
        )
        elapsed = time.time() - start
        logger.debug(f"{metric} = {value:.4f} over {len(self.query_pairs)} queries ({elapsed:.3f}s)")
        return value
