"""
Branch with the lowest single-record profit.

Both the per-chunk scan and the merge replace the current candidate only on a
strictly smaller profit, so among equal profits the lowest branch id wins.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from branch_sales.domain.models import BranchProfit, ChunkRange, Dataset, branch_id_for
from branch_sales.reducers.abstract import ProfitTableReducer, record_profit


class LowestProfitReducer(ProfitTableReducer[Optional[BranchProfit], Optional[BranchProfit]]):
    """
    Returns None for an empty chunk, and from `merge` when every chunk was empty.
    """

    name: str = "lowest_profit_branch"
    description: str = "Branch whose record has the smallest profit."

    def reduce_chunk(self, dataset: Dataset, chunk: ChunkRange) -> Optional[BranchProfit]:
        lowest = math.inf
        lowest_index = -1
        for index in range(chunk.start, chunk.end):
            profit = record_profit(dataset[index], self.profits)
            if profit < lowest:
                lowest = profit
                lowest_index = index
        if lowest_index < 0:
            return None
        return BranchProfit(branch_id=branch_id_for(lowest_index), profit=lowest)

    def merge(self, partials: Sequence[Optional[BranchProfit]]) -> Optional[BranchProfit]:
        best: Optional[BranchProfit] = None
        for candidate in partials:
            if candidate is None:
                continue
            if best is None or candidate.profit < best.profit:
                best = candidate
        return best


__all__ = ["LowestProfitReducer"]
