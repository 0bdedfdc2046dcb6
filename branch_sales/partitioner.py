"""
Contiguous chunk assignment for the worker pool.

Every worker gets ceil(N / W) consecutive rows; trailing workers get an empty
range when the rows run out before the workers do.
"""

from __future__ import annotations

from typing import List

from branch_sales.domain.models import ChunkRange


def chunk_size(total_rows: int, workers: int) -> int:
    """Ceiling of total_rows / workers."""
    return -(-total_rows // workers)


def partition(total_rows: int, workers: int, worker_id: int) -> ChunkRange:
    """
    Return the half-open range of rows owned by `worker_id`.

    Parameters
    ----------
    total_rows : int
        Dataset size N, N >= 0.
    workers : int
        Pool size W, W >= 1.
    worker_id : int
        Worker index in [0, W).
    """
    if total_rows < 0:
        raise ValueError(f"total_rows must be >= 0, got {total_rows}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if not 0 <= worker_id < workers:
        raise ValueError(f"worker_id must be in [0, {workers}), got {worker_id}")

    size = chunk_size(total_rows, workers)
    start = min(worker_id * size, total_rows)
    end = min(start + size, total_rows)
    return ChunkRange(worker_id=worker_id, start=start, end=end)


def chunk_ranges(total_rows: int, workers: int) -> List[ChunkRange]:
    """All W ranges in worker order."""
    return [partition(total_rows, workers, worker_id) for worker_id in range(workers)]


__all__ = ["chunk_size", "partition", "chunk_ranges"]
