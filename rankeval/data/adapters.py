"""Conversion of loosely-typed ranking records into QueryPairs.

Callers often hold rankings as generators, sets, numpy arrays or other
iterables. These helpers materialize each side into the canonical tuple form
once, before a RankingMetrics instance is built.
"""

from collections.abc import Hashable, Iterable

from rankeval.data.models import QueryPair


def to_query_pair(predictions: Iterable[Hashable], labels: Iterable[Hashable]) -> QueryPair:
    """Materialize one (predictions, labels) record into a QueryPair.

    Args:
        predictions: Predicted items in ranked order. Single-pass iterators
            are consumed.
        labels: Ground-truth items, in any order, duplicates allowed.

    Returns:
        QueryPair holding both sides as tuples.
    """
    return QueryPair(prediction=tuple(predictions), ground_truth=tuple(labels))


def to_query_pairs(
    predictions_and_labels: Iterable[tuple[Iterable[Hashable], Iterable[Hashable]]],
) -> list[QueryPair]:
    """Materialize every (predictions, labels) record into a QueryPair.

    QueryPair instances found in the input are passed through unchanged.

    Args:
        predictions_and_labels: Iterable of 2-item records.

    Returns:
        List of QueryPair, one per record, in input order.

    Raises:
        ValueError: If a record is not a (predictions, labels) pair.
    """
    pairs: list[QueryPair] = []
    for index, record in enumerate(predictions_and_labels):
        if isinstance(record, QueryPair):
            pairs.append(record)
            continue
        if isinstance(record, (str, bytes)):
            raise ValueError(f"Record {index} is not a (predictions, labels) pair: {record!r}")
        try:
            predictions, labels = record
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Record {index} is not a (predictions, labels) pair: {record!r}"
            ) from e
        pairs.append(to_query_pair(predictions, labels))
    return pairs
