"""
Branch Sales - parallel statistics over daily branch sales.

Computes, with a fixed pool of worker threads over contiguous chunks of the
dataset:

- Total units sold per product (A-F)
- Total profit across all branches
- The branch with the lowest single-record profit

The workbook loader and the report renderer sit around that core; the core
itself only sees parsed records and returns a SalesSummary.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from branch_sales.config import AnalysisConfig, Settings, get_settings
from branch_sales.domain.models import BranchProfit, ChunkRange, SalesSummary
from branch_sales.errors import (
    DataLoadError,
    EmptyDatasetError,
    SalesAnalysisError,
    WorkerFailure,
)
from branch_sales.orchestrator import (
    RunConfig,
    calculate_lowest_profit_branch,
    calculate_total_profit,
    calculate_total_units_sold,
    compute_all,
    run_analysis,
)
from branch_sales.partitioner import chunk_ranges, partition
from branch_sales.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "AnalysisConfig",
    "Settings",
    "get_settings",
    # Domain
    "BranchProfit",
    "ChunkRange",
    "SalesSummary",
    # Errors
    "DataLoadError",
    "EmptyDatasetError",
    "SalesAnalysisError",
    "WorkerFailure",
    # Orchestration
    "RunConfig",
    "calculate_lowest_profit_branch",
    "calculate_total_profit",
    "calculate_total_units_sold",
    "compute_all",
    "run_analysis",
    # Partitioning
    "chunk_ranges",
    "partition",
    # Logging
    "configure_logging",
    "get_logger",
]
