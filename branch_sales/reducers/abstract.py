"""
Reducer interfaces for the chunked statistics.

Each statistic is a pair of pure functions: `reduce_chunk` folds one worker's
range into a partial result, and `merge` combines the partials of all workers
in worker order. The orchestrator only talks to this interface.
"""

from __future__ import annotations

import abc
from typing import Generic, Protocol, Sequence, TypeVar, runtime_checkable

from branch_sales.domain.models import ChunkRange, Dataset, ProfitTable

PartialT = TypeVar("PartialT")
ResultT = TypeVar("ResultT")


def record_profit(record: Sequence[int], profits: ProfitTable) -> float:
    """Profit of one record, accumulated in product order."""
    total = 0.0
    for units, unit_profit in zip(record, profits):
        total += units * unit_profit
    return total


@runtime_checkable
class ChunkReducer(Protocol[PartialT, ResultT]):
    """
    Common interface of the three statistics.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier used in logs and errors.
    description : str
        A human-friendly summary of the statistic.
    """

    name: str
    description: str

    def reduce_chunk(self, dataset: Dataset, chunk: ChunkRange) -> PartialT:
        """
        Fold the records in `chunk` into a partial result. Must not mutate `dataset`.
        """
        ...

    def merge(self, partials: Sequence[PartialT]) -> ResultT:
        """
        Combine per-worker partials, given in worker order.
        """
        ...


class AbstractChunkReducer(abc.ABC, Generic[PartialT, ResultT]):
    """
    ABC helper for class-based reducers.

    Subclasses set `name` and `description` and implement both halves.
    """

    name: str
    description: str

    @abc.abstractmethod
    def reduce_chunk(
        self, dataset: Dataset, chunk: ChunkRange
    ) -> PartialT:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def merge(self, partials: Sequence[PartialT]) -> ResultT:  # pragma: no cover - interface only
        raise NotImplementedError


class ProfitTableReducer(AbstractChunkReducer[PartialT, ResultT]):
    """Base for reducers that price records with a profit table."""

    def __init__(self, profits: ProfitTable) -> None:
        self.profits = tuple(profits)


__all__ = [
    "ChunkReducer",
    "AbstractChunkReducer",
    "ProfitTableReducer",
    "record_profit",
]
