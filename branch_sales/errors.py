"""
Error taxonomy for the branch sales analysis.

Everything the analysis raises on purpose derives from SalesAnalysisError so
the CLI can report it and exit cleanly.
"""

from __future__ import annotations


class SalesAnalysisError(Exception):
    """Base class for expected analysis failures."""


class EmptyDatasetError(SalesAnalysisError, ValueError):
    """Raised before any work is dispatched when the dataset has no records."""

    def __init__(self, statistic: str | None = None) -> None:
        self.statistic = statistic
        target = f" for '{statistic}'" if statistic else ""
        super().__init__(f"Cannot compute statistics{target}: dataset is empty")


class WorkerFailure(SalesAnalysisError):
    """A reducer task raised while computing its chunk."""

    def __init__(self, statistic: str, worker_id: int, cause: BaseException) -> None:
        self.statistic = statistic
        self.worker_id = worker_id
        self.cause = cause
        super().__init__(
            f"Worker {worker_id} failed while computing '{statistic}': "
            f"{type(cause).__name__}: {cause}"
        )


class DataLoadError(SalesAnalysisError):
    """The sales workbook is missing or contains a malformed row."""


__all__ = ["SalesAnalysisError", "EmptyDatasetError", "WorkerFailure", "DataLoadError"]
