"""Map-then-mean aggregation over a collection of query pairs.

Every metric is the unweighted arithmetic mean of a per-query score. Queries
are independent, so they may be scored sequentially or on a thread pool. The
sum uses math.fsum, which is exact before the final rounding, so the result
does not depend on the order queries finish in or the number of workers.
"""

import math
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from tqdm import tqdm

from rankeval.data.models import QueryPair

ScoreFn = Callable[[QueryPair], float]


def mean(
    query_pairs: Sequence[QueryPair],
    score_fn: ScoreFn,
    num_workers: int = 0,
    show_progress: bool = False,
    desc: str = "Scoring queries",
) -> float:
    """Score every query pair and return the mean score.

    Args:
        query_pairs: Query pairs to score.
        score_fn: Maps one QueryPair to a float.
        num_workers: 0 scores sequentially; a positive value scores on a
            thread pool with that many workers.
        show_progress: Display a tqdm progress bar.
        desc: Progress bar label.

    Returns:
        Arithmetic mean of the per-query scores. An empty collection has no
        mean and yields NaN.

    Raises:
        ValueError: If num_workers is negative.
    """
    if num_workers < 0:
        raise ValueError(f"num_workers must be >= 0, got {num_workers}")

    if not query_pairs:
        return math.nan

    if num_workers == 0:
        scores = [
            score_fn(pair) for pair in tqdm(query_pairs, desc=desc, disable=not show_progress)
        ]
    else:
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            scores = list(
                tqdm(
                    executor.map(score_fn, query_pairs),
                    total=len(query_pairs),
                    desc=desc,
                    disable=not show_progress,
                )
            )

    return math.fsum(scores) / len(scores)
