"""
Reducers package for the branch sales analysis.

Re-exports the reducer interfaces and the three concrete statistics so callers
can import from `branch_sales.reducers` directly.
"""

from branch_sales.reducers.abstract import (
    AbstractChunkReducer,
    ChunkReducer,
    ProfitTableReducer,
    record_profit,
)
from branch_sales.reducers.lowest_profit import LowestProfitReducer
from branch_sales.reducers.profit import TotalProfitReducer
from branch_sales.reducers.units import PartialUnits, UnitsSoldReducer

__all__ = [
    # Abstracts
    "AbstractChunkReducer",
    "ChunkReducer",
    "ProfitTableReducer",
    "record_profit",
    # Concrete reducers
    "LowestProfitReducer",
    "PartialUnits",
    "TotalProfitReducer",
    "UnitsSoldReducer",
]
