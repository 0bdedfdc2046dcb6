"""
Orchestrator for the three branch sales statistics.

Each statistic is a scatter/gather over one fixed-size thread pool: the dataset
is split into `worker_count` contiguous chunks, one reducer task per chunk is
submitted, the results are collected in worker order and merged on the calling
thread.

Usage:
    from branch_sales.orchestrator import compute_all

    summary = compute_all(records, AnalysisConfig(worker_count=4))
    print(summary.total_units, summary.total_profit, summary.lowest_profit_branch)
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TypeVar

from branch_sales.config import AnalysisConfig, get_settings
from branch_sales.domain.models import BranchProfit, Dataset, SalesSummary
from branch_sales.errors import EmptyDatasetError, WorkerFailure
from branch_sales.infrastructure.loader import load_sales_records
from branch_sales.partitioner import chunk_ranges
from branch_sales.reducers.abstract import ChunkReducer
from branch_sales.reducers.lowest_profit import LowestProfitReducer
from branch_sales.reducers.profit import TotalProfitReducer
from branch_sales.reducers.units import UnitsSoldReducer
from branch_sales.utils.logging import get_logger
from branch_sales.utils.profiler import profile_block

log = get_logger(__name__)

PartialT = TypeVar("PartialT")
ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class RunConfig:
    """
    Inputs of a full run: where the workbook lives and how to analyse it.

    Unset fields fall back to `get_settings()`.
    """

    data_path: Optional[Path | str] = None
    worker_count: Optional[int] = None


def _require_records(dataset: Dataset, statistic: str) -> None:
    if len(dataset) == 0:
        raise EmptyDatasetError(statistic)


def _scatter_gather(
    executor: Executor,
    reducer: ChunkReducer[PartialT, ResultT],
    dataset: Dataset,
    worker_count: int,
) -> ResultT:
    """
    Submit one task per chunk, wait for all of them and merge in worker order.

    The first failing task (in worker order) aborts the statistic; nothing is
    merged from the partials that did succeed.
    """
    chunks = chunk_ranges(len(dataset), worker_count)
    futures: List[Future[PartialT]] = [
        executor.submit(reducer.reduce_chunk, dataset, chunk) for chunk in chunks
    ]

    partials: List[PartialT] = []
    for chunk, future in zip(chunks, futures):
        try:
            partials.append(future.result())
        except Exception as exc:
            log.exception(
                f"[WORKER FAILED] {reducer.name}",
                extra={
                    "statistic": reducer.name,
                    "worker_id": chunk.worker_id,
                    "chunk_start": chunk.start,
                    "chunk_end": chunk.end,
                },
            )
            raise WorkerFailure(reducer.name, chunk.worker_id, exc) from exc

    return reducer.merge(partials)


def _profiled_statistic(
    executor: Executor,
    reducer: ChunkReducer[PartialT, ResultT],
    dataset: Dataset,
    worker_count: int,
) -> ResultT:
    _require_records(dataset, reducer.name)
    log.info(
        f"[STATISTIC START] {reducer.name}",
        extra={"statistic": reducer.name, "workers": worker_count, "rows": len(dataset)},
    )
    with profile_block(reducer.name) as stats:
        result = _scatter_gather(executor, reducer, dataset, worker_count)
    log.info(
        f"[STATISTIC DONE] {reducer.name} in {stats.duration_seconds * 1000:.1f}ms",
        extra={
            "statistic": reducer.name,
            "duration_seconds": round(stats.duration_seconds, 6),
            "peak_rss_bytes": stats.peak_rss_bytes,
            "cpu_percent": stats.cpu_percent,
        },
    )
    return result


def calculate_total_units_sold(
    executor: Executor, dataset: Dataset, config: AnalysisConfig
) -> Tuple[int, ...]:
    """
    Units sold per product, summed over every branch.

    Raises
    ------
    EmptyDatasetError
        If `dataset` has no records; nothing is submitted to `executor`.
    WorkerFailure
        If any reducer task raised.
    """
    return _profiled_statistic(executor, UnitsSoldReducer(), dataset, config.worker_count)


def calculate_total_profit(executor: Executor, dataset: Dataset, config: AnalysisConfig) -> float:
    """
    Profit summed over every branch, priced with `config.product_profits`.
    """
    return _profiled_statistic(
        executor, TotalProfitReducer(config.product_profits), dataset, config.worker_count
    )


def calculate_lowest_profit_branch(
    executor: Executor, dataset: Dataset, config: AnalysisConfig
) -> BranchProfit:
    """
    Branch whose record has the smallest profit; the lowest branch id wins ties.
    """
    reducer = LowestProfitReducer(config.product_profits)
    lowest = _profiled_statistic(executor, reducer, dataset, config.worker_count)
    if lowest is None:
        raise EmptyDatasetError(reducer.name)
    return lowest


def compute_all(dataset: Dataset, config: AnalysisConfig) -> SalesSummary:
    """
    Compute all three statistics with one pool of `config.worker_count` threads.

    The pool is reused for every statistic and shut down exactly once, whether
    the run succeeds or a statistic fails. Tasks that never started are
    cancelled on failure.

    Parameters
    ----------
    dataset : Dataset
        Records of six unit counts in branch order. Read, never mutated.
    config : AnalysisConfig
        Pool size and per-unit profits.

    Returns
    -------
    SalesSummary
        Totals per product, total profit and the lowest-profit branch.
    """
    _require_records(dataset, "all")

    executor = ThreadPoolExecutor(
        max_workers=config.worker_count, thread_name_prefix="branch-sales"
    )
    try:
        total_units = calculate_total_units_sold(executor, dataset, config)
        total_profit = calculate_total_profit(executor, dataset, config)
        lowest = calculate_lowest_profit_branch(executor, dataset, config)
    finally:
        executor.shutdown(wait=True, cancel_futures=True)

    log.info(
        "[ORCHESTRATOR COMPLETE] All statistics computed",
        extra={
            "rows": len(dataset),
            "workers": config.worker_count,
            "lowest_profit_branch": lowest.branch_id,
        },
    )
    return SalesSummary(
        total_units=total_units,
        total_profit=total_profit,
        lowest_profit_branch=lowest,
    )


def run_analysis(run_config: Optional[RunConfig] = None) -> SalesSummary:
    """
    Load the workbook and compute the summary.

    Parameters
    ----------
    run_config : RunConfig | None
        Overrides for the data path and pool size. Defaults come from settings.
    """
    run_config = run_config or RunConfig()
    settings = get_settings()
    data_path = Path(run_config.data_path or settings.data_path)
    config = settings.analysis_config(worker_count=run_config.worker_count)

    records: Sequence[Tuple[int, ...]] = load_sales_records(data_path)
    log.info(
        "Sales records loaded",
        extra={"path": str(data_path), "rows": len(records), "workers": config.worker_count},
    )
    return compute_all(records, config)


__all__ = [
    "RunConfig",
    "calculate_total_units_sold",
    "calculate_total_profit",
    "calculate_lowest_profit_branch",
    "compute_all",
    "run_analysis",
]
