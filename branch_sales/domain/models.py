"""
Domain models for the branch sales analysis.

A record is a plain tuple of six unit counts (products A-F) so that reducers
can scan it without attribute lookups. Results that leave the core are frozen
pydantic models.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from pydantic import BaseModel, Field

PRODUCT_COUNT = 6
PRODUCT_NAMES: Tuple[str, ...] = tuple(f"Product {letter}" for letter in "ABCDEF")

Record = Tuple[int, ...]
Dataset = Sequence[Sequence[int]]
ProfitTable = Tuple[float, ...]


def branch_id_for(index: int) -> str:
    """Branch identifier for the 0-based dataset position `index`."""
    return f"{index + 1:06d}"


@dataclass(frozen=True)
class ChunkRange:
    """Half-open index range [start, end) assigned to one worker."""

    worker_id: int
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class BranchProfit(BaseModel):
    """
    The lowest-profit branch within a chunk or the whole dataset.
    """

    branch_id: str = Field(..., pattern=r"^\d{6,}$", description="1-based row number, zero-padded.")
    profit: float = Field(..., description="Profit of that branch's record.")

    model_config = {
        "frozen": True,
    }


class SalesSummary(BaseModel):
    """
    The three aggregate statistics computed for one dataset.
    """

    total_units: Tuple[int, ...] = Field(
        ...,
        min_length=PRODUCT_COUNT,
        max_length=PRODUCT_COUNT,
        description="Units sold per product.",
    )
    total_profit: float = Field(..., description="Profit summed over every record.")
    lowest_profit_branch: BranchProfit

    model_config = {
        "frozen": True,
    }


__all__ = [
    "PRODUCT_COUNT",
    "PRODUCT_NAMES",
    "Record",
    "Dataset",
    "ProfitTable",
    "branch_id_for",
    "ChunkRange",
    "BranchProfit",
    "SalesSummary",
]
