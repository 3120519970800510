"""Per-query scoring functions for binary-relevance ranking metrics.

Each function scores a single query: an ordered prediction and the RelevanceSet
of its ground truth. All five public metrics are parameterizations of these:

  - truncated_hit_ratio: precision@k (denominator k) and recall@k
    (denominator |relevant|)
  - average_precision_at_k: MAP (k = len(prediction)) and MAP@k
  - ndcg_at_k: NDCG@k

Predictions are scanned position by position exactly as given; a duplicated
relevant item counts as a hit at every position it appears.

A query with an empty ground truth set scores 0.0 and reports one warning to
the diagnostic sink.

See: IR evaluation methods for retrieving highly relevant documents.
K. Jarvelin and J. Kekalainen.
"""

import math
from collections.abc import Sequence

from rankeval.data.models import RelevanceSet
from rankeval.evaluation.diagnostics import DiagnosticSink

EMPTY_GROUND_TRUTH_MESSAGE = "Empty ground truth set, check input data"


def truncated_hit_ratio(
    prediction: Sequence,
    relevance: RelevanceSet,
    k: int,
    denominator: int,
    diagnostics: DiagnosticSink,
) -> float:
    """Compute #(relevant items in the top k predictions) / denominator.

    If the prediction holds fewer than k items, only those are scanned; the
    denominator is not reduced. This also applies when the ground truth set
    is smaller than k.

    Args:
        prediction: Predicted items in ranked order.
        relevance: Ground-truth items of the query.
        k: Truncation depth, must be positive.
        denominator: k for precision, len(relevance) for recall.
        diagnostics: Receives a warning if the ground truth set is empty.

    Returns:
        Hit ratio, or 0.0 if the ground truth set is empty.
    """
    if not relevance:
        diagnostics.warn(EMPTY_GROUND_TRUTH_MESSAGE)
        return 0.0

    n = min(len(prediction), k)
    hits = sum(1 for item in prediction[:n] if item in relevance)
    return hits / denominator


def average_precision_at_k(
    prediction: Sequence,
    relevance: RelevanceSet,
    k: int,
    diagnostics: DiagnosticSink,
) -> float:
    """Compute average precision over the top k predictions.

    AP@k = (1 / |relevant|) * sum(precision@i * rel(i)) for i in 1..min(n, k)

    The sum is divided by the size of the full ground truth set, not by the
    number of hits, so relevant items that were never retrieved pull the score
    down. A prediction shorter than k is scored as AP at its own length.

    Args:
        prediction: Predicted items in ranked order.
        relevance: Ground-truth items of the query.
        k: Truncation depth. Callers pass len(prediction) for untruncated AP.
        diagnostics: Receives a warning if the ground truth set is empty.

    Returns:
        Average precision, in [0.0, 1.0] when the prediction has no repeated
        items, or 0.0 if the ground truth set is empty.
    """
    if not relevance:
        diagnostics.warn(EMPTY_GROUND_TRUTH_MESSAGE)
        return 0.0

    n = min(len(prediction), k)
    hits = 0
    sum_precision = 0.0
    for i in range(n):
        if prediction[i] in relevance:
            hits += 1
            sum_precision += hits / (i + 1)

    return sum_precision / len(relevance)


def ndcg_at_k(
    prediction: Sequence,
    relevance: RelevanceSet,
    k: int,
    diagnostics: DiagnosticSink,
) -> float:
    """Compute NDCG over the top k positions with binary relevance.

    DCG@k = sum over i in 0..n-1 of rel(i) / log(i + 2), and the ideal DCG
    assumes the first |relevant| positions are all relevant. The scan covers
    max(len(prediction), |relevant|) positions, never more than k.

    Args:
        prediction: Predicted items in ranked order.
        relevance: Ground-truth items of the query.
        k: Truncation depth, must be positive.
        diagnostics: Receives a warning if the ground truth set is empty.

    Returns:
        NDCG, in [0.0, 1.0] when the prediction has no repeated items, or 0.0
        if the ground truth set is empty.
    """
    if not relevance:
        diagnostics.warn(EMPTY_GROUND_TRUTH_MESSAGE)
        return 0.0

    relevant_count = len(relevance)
    n = min(max(len(prediction), relevant_count), k)
    dcg = 0.0
    max_dcg = 0.0
    for i in range(n):
        # Log base cancels out in the ratio for binary relevance
        gain = 1.0 / math.log(i + 2)
        if i < len(prediction) and prediction[i] in relevance:
            dcg += gain
        if i < relevant_count:
            max_dcg += gain

    return dcg / max_dcg
