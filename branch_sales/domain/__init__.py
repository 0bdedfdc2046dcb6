"""
Domain package for the branch sales analysis.

Exports the record aliases and result models shared by the reducers, the
orchestrator and the reporter. Keep this package free of I/O.
"""

from branch_sales.domain.models import (
    PRODUCT_COUNT,
    PRODUCT_NAMES,
    BranchProfit,
    ChunkRange,
    Dataset,
    ProfitTable,
    Record,
    SalesSummary,
    branch_id_for,
)

__all__ = [
    "PRODUCT_COUNT",
    "PRODUCT_NAMES",
    "BranchProfit",
    "ChunkRange",
    "Dataset",
    "ProfitTable",
    "Record",
    "SalesSummary",
    "branch_id_for",
]
