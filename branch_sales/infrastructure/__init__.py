"""
Infrastructure package for the branch sales analysis.

Holds the spreadsheet I/O, kept apart from the reducers and orchestrator so the
core only ever sees parsed records.
"""

from branch_sales.infrastructure.loader import load_sales_records, write_sales_workbook

__all__ = [
    "load_sales_records",
    "write_sales_workbook",
]
