"""Query pair data model and input adapters."""

from rankeval.data.adapters import to_query_pair, to_query_pairs
from rankeval.data.models import QueryPair, RelevanceSet

__all__ = ["QueryPair", "RelevanceSet", "to_query_pair", "to_query_pairs"]
