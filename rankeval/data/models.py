"""Data models for ranking evaluation.

A QueryPair holds what one query produced (an ordered ranking of item
identifiers) together with what it should have produced (the ground-truth
items). Identifiers are opaque: any hashable value compared by equality.
"""

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from functools import cached_property
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class RelevanceSet(Generic[T]):
    """Deduplicated ground-truth items of one query with O(1) membership tests."""

    __slots__ = ("_items",)

    def __init__(self, items: frozenset[T]) -> None:
        self._items = items

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "RelevanceSet[T]":
        """Build a relevance set from a raw ground-truth sequence.

        Duplicates are dropped. An empty sequence yields a valid empty set;
        how an empty set is scored is decided by the scorers, not here.
        """
        return cls(frozenset(items))

    def contains(self, item: T) -> bool:
        return item in self._items

    def size(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelevanceSet):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"RelevanceSet({set(self._items)!r})"


@dataclass(frozen=True)
class QueryPair(Generic[T]):
    """One evaluation unit: a predicted ranking and its raw ground truth.

    prediction keeps its order and any duplicates. ground_truth is kept as
    supplied; use `relevance` for membership tests.
    """

    prediction: tuple[T, ...]
    ground_truth: tuple[T, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the pair stays immutable
        if not isinstance(self.prediction, tuple):
            object.__setattr__(self, "prediction", tuple(self.prediction))
        if not isinstance(self.ground_truth, tuple):
            object.__setattr__(self, "ground_truth", tuple(self.ground_truth))

    @cached_property
    def relevance(self) -> RelevanceSet[T]:
        """Ground truth as a RelevanceSet, derived once per pair."""
        return RelevanceSet.from_sequence(self.ground_truth)
