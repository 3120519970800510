"""Tests for the map-then-mean aggregation helper."""

import math

import pytest

from rankeval.data.models import QueryPair
from rankeval.evaluation.aggregation import mean


def _pairs(n: int) -> list[QueryPair]:
    return [QueryPair([i], [i]) for i in range(n)]


def test_mean_of_scores() -> None:
    pairs = _pairs(4)
    scores = {0: 0.0, 1: 0.5, 2: 1.0, 3: 0.5}

    assert mean(pairs, lambda pair: scores[pair.prediction[0]]) == 0.5


def test_mean_empty_collection_is_nan() -> None:
    """No queries means no mean, never a real 0.0."""
    assert math.isnan(mean([], lambda pair: 1.0))
    assert math.isnan(mean([], lambda pair: 1.0, num_workers=2))


@pytest.mark.parametrize("num_workers", [1, 2, 3, 8])
def test_mean_independent_of_worker_count(num_workers: int) -> None:
    """Parallel scoring yields exactly the sequential result."""
    pairs = _pairs(101)

    def score(pair: QueryPair) -> float:
        return 1.0 / (pair.prediction[0] + 3)

    sequential = mean(pairs, score)
    assert mean(pairs, score, num_workers=num_workers) == sequential


def test_mean_independent_of_order() -> None:
    pairs = _pairs(50)

    def score(pair: QueryPair) -> float:
        return 0.1 * pair.prediction[0]

    assert mean(pairs, score) == mean(list(reversed(pairs)), score)


def test_mean_rejects_negative_workers() -> None:
    with pytest.raises(ValueError, match="num_workers"):
        mean(_pairs(1), lambda pair: 1.0, num_workers=-1)


def test_mean_propagates_scoring_errors() -> None:
    def boom(pair: QueryPair) -> float:
        raise RuntimeError("scoring failed")

    with pytest.raises(RuntimeError, match="scoring failed"):
        mean(_pairs(3), boom, num_workers=2)


def test_mean_with_progress_bar() -> None:
    assert mean(_pairs(3), lambda pair: 1.0, show_progress=True) == 1.0
