"""
Total profit over every branch.
"""

from __future__ import annotations

from typing import Sequence

from branch_sales.domain.models import ChunkRange, Dataset
from branch_sales.reducers.abstract import ProfitTableReducer, record_profit


class TotalProfitReducer(ProfitTableReducer[float, float]):
    name: str = "total_profit"
    description: str = "Sum of every branch's profit."

    def reduce_chunk(self, dataset: Dataset, chunk: ChunkRange) -> float:
        total = 0.0
        for index in range(chunk.start, chunk.end):
            total += record_profit(dataset[index], self.profits)
        return total

    def merge(self, partials: Sequence[float]) -> float:
        total = 0.0
        for partial in partials:
            total += partial
        return total


__all__ = ["TotalProfitReducer"]
