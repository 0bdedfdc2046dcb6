"""
Utilities package for the branch sales analysis.

Exports shared helpers for logging and profiling.
Keep this package lightweight and free of domain-specific logic.
"""

from branch_sales.utils.logging import configure_logging, get_logger
from branch_sales.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
