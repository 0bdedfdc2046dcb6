"""
Total units sold per product.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from branch_sales.domain.models import PRODUCT_COUNT, ChunkRange, Dataset
from branch_sales.reducers.abstract import AbstractChunkReducer

PartialUnits = Tuple[int, ...]


def _add_units(totals: list[int], units: Sequence[int]) -> None:
    for product in range(PRODUCT_COUNT):
        totals[product] += units[product]


class UnitsSoldReducer(AbstractChunkReducer[PartialUnits, PartialUnits]):
    """
    Element-wise sum of the unit columns.
    """

    name: str = "total_units_sold"
    description: str = "Units sold per product, summed over all branches."

    def reduce_chunk(self, dataset: Dataset, chunk: ChunkRange) -> PartialUnits:
        totals = [0] * PRODUCT_COUNT
        for index in range(chunk.start, chunk.end):
            _add_units(totals, dataset[index])
        return tuple(totals)

    def merge(self, partials: Sequence[PartialUnits]) -> PartialUnits:
        totals = [0] * PRODUCT_COUNT
        for partial in partials:
            _add_units(totals, partial)
        return tuple(totals)


__all__ = ["PartialUnits", "UnitsSoldReducer"]
